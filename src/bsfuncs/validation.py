"""Model validation helpers.

Benchmarks the closed form built on the Abramowitz-Stegun CDF against the
same closed form on SciPy's exact normal CDF, and the analytic Greeks against
bump-and-reprice Greeks.
"""

from __future__ import annotations

from math import exp, log, sqrt
from typing import Optional

import numpy as np
from scipy.stats import norm

from .core import OptionSpec, CALL, PUT, parse_option_type
from .normal import norm_cdf_vec

__all__ = [
    "max_cdf_error",
    "exact_price",
    "parity_gap",
    "cross_validate",
]


# ---------------------------------------------------------------------------
# Normal CDF accuracy
# ---------------------------------------------------------------------------

def max_cdf_error(grid: Optional[np.ndarray] = None) -> float:
    """Largest absolute gap between the approximate and exact normal CDF.

    Parameters
    ----------
    grid : array, optional
        Points to evaluate.  Default: 20 001 points on [-10, 10].
    """
    if grid is None:
        grid = np.linspace(-10.0, 10.0, 20_001)
    grid = np.asarray(grid, dtype=float)
    return float(np.max(np.abs(norm_cdf_vec(grid) - norm.cdf(grid))))


# ---------------------------------------------------------------------------
# Exact-CDF reference price
# ---------------------------------------------------------------------------

def exact_price(opt: OptionSpec, kind: str = CALL) -> float:
    """Black-Scholes price using ``scipy.stats.norm.cdf``."""
    kind = parse_option_type(kind)
    if opt.expired:
        if kind == CALL:
            return max(opt.S0 - opt.K, 0.0)
        return max(opt.K - opt.S0, 0.0)
    T = opt.T
    rt = opt.sigma * sqrt(T)
    d1 = (log(opt.S0 / opt.K) + (opt.r - opt.q + 0.5 * opt.sigma ** 2) * T) / rt
    d2 = d1 - rt
    disc_r = exp(-opt.r * T)
    disc_q = exp(-opt.q * T)
    if kind == CALL:
        return float(disc_q * opt.S0 * norm.cdf(d1) - disc_r * opt.K * norm.cdf(d2))
    return float(disc_r * opt.K * norm.cdf(-d2) - disc_q * opt.S0 * norm.cdf(-d1))


# ---------------------------------------------------------------------------
# Put-call parity
# ---------------------------------------------------------------------------

def parity_gap(opt: OptionSpec) -> float:
    """``C - P - (S e^{-qT} - K e^{-rT})``; zero up to CDF approximation error."""
    from .black_scholes import price as bs_price

    forward_value = opt.S0 * exp(-opt.q * opt.T) - opt.K * exp(-opt.r * opt.T)
    return bs_price(opt, CALL) - bs_price(opt, PUT) - forward_value


# ---------------------------------------------------------------------------
# Cross-checks
# ---------------------------------------------------------------------------

def cross_validate(opt: OptionSpec, kind: str = CALL, *, bump_pct: float = 0.01) -> dict:
    """Cross-validate the approximate closed form.

    Returns
    -------
    dict
        ``"price"`` (approximate closed form), ``"exact_price"`` (SciPy CDF),
        ``"price_error"``, ``"analytic"`` and ``"numerical"`` Greek dicts,
        ``"greek_discrepancy"`` (per-Greek absolute gap).
    """
    from .black_scholes import greeks as bs_greeks
    from .functions import FUNCTIONS
    from .risk import numerical_greeks

    kind = parse_option_type(kind)
    pricer = FUNCTIONS["CALLPRICE"] if kind == CALL else FUNCTIONS["PUTPRICE"]

    analytic = bs_greeks(opt, kind)
    approx = analytic.pop("price")
    exact = exact_price(opt, kind)

    numerical = numerical_greeks(
        lambda S, K, sigma, r, q, days, _kind: pricer(S, K, sigma, r, q, days),
        opt.S0, opt.K, opt.sigma, opt.r, opt.q, opt.days, kind,
        bump_pct=bump_pct,
    )

    return {
        "price": approx,
        "exact_price": exact,
        "price_error": abs(approx - exact),
        "analytic": analytic,
        "numerical": numerical,
        "greek_discrepancy": {k: abs(analytic[k] - numerical[k]) for k in analytic},
    }
