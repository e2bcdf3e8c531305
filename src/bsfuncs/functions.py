"""Spreadsheet-style custom functions.

Each function takes its arguments in worksheet order::

    CALLPRICE(price, strike, volatility, interest, dividend, days)
    OPTIONDELTA(price, strike, volatility, interest, dividend, days, optionType)

``days`` is calendar days to expiry (365-day year) and ``optionType`` is
``"Call"`` or ``"Put"``.  Output units for theta, vega and rho follow the
``config`` keyword (see :class:`bsfuncs.config.PricingConfig`).
"""

from __future__ import annotations

import logging
from typing import Callable

from . import black_scholes as bs
from .config import DEFAULT_CONFIG, PricingConfig
from .core import PUT, parse_option_type

__all__ = [
    "CALLPRICE", "PUTPRICE",
    "OPTIONDELTA", "OPTIONGAMMA", "OPTIONTHETA", "OPTIONVEGA", "OPTIONRHO",
    "FUNCTIONS", "call_function",
]

logger = logging.getLogger(__name__)


def _option_type(option_type: str, config: PricingConfig) -> str:
    kind = parse_option_type(option_type, strict=config.strict_option_type)
    if kind != PUT and str(option_type).strip().lower() != "call":
        logger.warning("Unrecognised option type %r priced as a call", option_type)
    return kind


# ---------------------------------------------------------------------------
# Prices
# ---------------------------------------------------------------------------
def CALLPRICE(price, strike, volatility, interest, dividend, days,
              *, config: PricingConfig = DEFAULT_CONFIG) -> float:
    """European call price.

    Prices carry no unit conventions; ``config`` is accepted so every
    function shares the ``call_function`` signature, and is ignored.
    """
    value = bs.call_price(price, strike, volatility, interest, dividend, days)
    logger.debug("CALLPRICE(%s, %s, %s, %s, %s, %s) = %s",
                 price, strike, volatility, interest, dividend, days, value)
    return value


def PUTPRICE(price, strike, volatility, interest, dividend, days,
             *, config: PricingConfig = DEFAULT_CONFIG) -> float:
    """European put price; ``config`` is ignored as in ``CALLPRICE``."""
    value = bs.put_price(price, strike, volatility, interest, dividend, days)
    logger.debug("PUTPRICE(%s, %s, %s, %s, %s, %s) = %s",
                 price, strike, volatility, interest, dividend, days, value)
    return value


# ---------------------------------------------------------------------------
# Greeks
# ---------------------------------------------------------------------------
def _greek(name: str, fn: Callable[..., float],
           scale: Callable[[PricingConfig, float], float] | None = None):
    def evaluate(price, strike, volatility, interest, dividend, days, optionType,
                 *, config: PricingConfig = DEFAULT_CONFIG) -> float:
        kind = _option_type(optionType, config)
        value = fn(price, strike, volatility, interest, dividend, days, kind)
        if scale is not None:
            value = scale(config, value)
        logger.debug("%s(%s, %s, %s, %s, %s, %s, %r) = %s", name, price, strike,
                     volatility, interest, dividend, days, optionType, value)
        return value

    evaluate.__name__ = evaluate.__qualname__ = name
    return evaluate


OPTIONDELTA = _greek("OPTIONDELTA", bs.delta)
OPTIONDELTA.__doc__ = "dPrice/dSpot."

OPTIONGAMMA = _greek("OPTIONGAMMA", bs.gamma)
OPTIONGAMMA.__doc__ = "d2Price/dSpot2; independent of the option type."

OPTIONTHETA = _greek("OPTIONTHETA", bs.theta, PricingConfig.scale_theta)
OPTIONTHETA.__doc__ = "dPrice/dt, per year or per day depending on ``config.theta_unit``."

OPTIONVEGA = _greek("OPTIONVEGA", bs.vega, PricingConfig.scale_vega)
OPTIONVEGA.__doc__ = "dPrice/dSigma; independent of the option type."

OPTIONRHO = _greek("OPTIONRHO", bs.rho, PricingConfig.scale_rho)
OPTIONRHO.__doc__ = "dPrice/dr."


FUNCTIONS: dict[str, Callable[..., float]] = {
    "CALLPRICE": CALLPRICE,
    "PUTPRICE": PUTPRICE,
    "OPTIONDELTA": OPTIONDELTA,
    "OPTIONGAMMA": OPTIONGAMMA,
    "OPTIONTHETA": OPTIONTHETA,
    "OPTIONVEGA": OPTIONVEGA,
    "OPTIONRHO": OPTIONRHO,
}


def call_function(name: str, *args, config: PricingConfig = DEFAULT_CONFIG) -> float:
    """Evaluate a spreadsheet function by (case-insensitive) name."""
    try:
        fn = FUNCTIONS[name.upper()]
    except KeyError:
        raise KeyError(f"Unknown function: {name!r}") from None
    return fn(*args, config=config)
