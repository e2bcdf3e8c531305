from math import log, sqrt, exp
from typing import Dict
from .core import OptionSpec, CALL, PUT, check_domain, parse_option_type, year_fraction
from .errors import DomainError
from .normal import norm_cdf, norm_pdf

_N = norm_cdf
_n = norm_pdf


def d1(S, K, sigma, r, q, days):
    """Drift-adjusted standardised log-moneyness."""
    check_domain(S, K, sigma, r, q, days)
    if days == 0:
        raise DomainError("d1 is undefined at expiry (days == 0)")
    T = year_fraction(days)
    return (log(S / K) + (r - q + 0.5 * sigma * sigma) * T) / (sigma * sqrt(T))

def d2(S, K, sigma, r, q, days):
    return d1(S, K, sigma, r, q, days) - sigma * sqrt(year_fraction(days))

def _d1_d2(S, K, sigma, r, q, days):
    x = d1(S, K, sigma, r, q, days)
    return x, x - sigma * sqrt(year_fraction(days))


# ---------------------------------------------------------------------------
# Prices
# ---------------------------------------------------------------------------
def call_price(S, K, sigma, r, q, days) -> float:
    check_domain(S, K, sigma, r, q, days)
    if days == 0:
        return max(S - K, 0.0)
    T = year_fraction(days)
    d_1, d_2 = _d1_d2(S, K, sigma, r, q, days)
    return S * exp(-q * T) * _N(d_1) - K * exp(-r * T) * _N(d_2)

def put_price(S, K, sigma, r, q, days) -> float:
    check_domain(S, K, sigma, r, q, days)
    if days == 0:
        return max(K - S, 0.0)
    T = year_fraction(days)
    d_1, d_2 = _d1_d2(S, K, sigma, r, q, days)
    return K * exp(-r * T) * _N(-d_2) - S * exp(-q * T) * _N(-d_1)

def price(opt: OptionSpec, kind: str = CALL) -> float:
    if parse_option_type(kind) == CALL:
        return call_price(opt.S0, opt.K, opt.sigma, opt.r, opt.q, opt.days)
    return put_price(opt.S0, opt.K, opt.sigma, opt.r, opt.q, opt.days)


# ---------------------------------------------------------------------------
# Greeks
#
# theta is dPrice/dt per year (calendar time, expiry fixed), vega is
# dPrice/dSigma and rho is dPrice/dr, all in absolute units.
# At expiry (days == 0) delta is the in-the-money indicator and the other
# Greeks are zero.
# ---------------------------------------------------------------------------
def delta(S, K, sigma, r, q, days, kind=CALL) -> float:
    kind = parse_option_type(kind)
    check_domain(S, K, sigma, r, q, days)
    if days == 0:
        if kind == CALL:
            return 1.0 if S > K else 0.0
        return -1.0 if S < K else 0.0
    disc_q = exp(-q * year_fraction(days))
    N_d1 = _N(d1(S, K, sigma, r, q, days))
    if kind == PUT:
        return disc_q * (N_d1 - 1.0)
    return disc_q * N_d1

def gamma(S, K, sigma, r, q, days, kind=CALL) -> float:
    parse_option_type(kind)
    check_domain(S, K, sigma, r, q, days)
    if days == 0:
        return 0.0
    T = year_fraction(days)
    return exp(-q * T) * _n(d1(S, K, sigma, r, q, days)) / (S * sigma * sqrt(T))

def vega(S, K, sigma, r, q, days, kind=CALL) -> float:
    parse_option_type(kind)
    check_domain(S, K, sigma, r, q, days)
    if days == 0:
        return 0.0
    T = year_fraction(days)
    return S * exp(-q * T) * _n(d1(S, K, sigma, r, q, days)) * sqrt(T)

def theta(S, K, sigma, r, q, days, kind=CALL) -> float:
    kind = parse_option_type(kind)
    check_domain(S, K, sigma, r, q, days)
    if days == 0:
        return 0.0
    T = year_fraction(days)
    d_1, d_2 = _d1_d2(S, K, sigma, r, q, days)
    disc_r = exp(-r * T)
    disc_q = exp(-q * T)
    decay = -S * disc_q * _n(d_1) * sigma / (2 * sqrt(T))
    if kind == CALL:
        return decay - r * K * disc_r * _N(d_2) + q * S * disc_q * _N(d_1)
    return decay + r * K * disc_r * _N(-d_2) - q * S * disc_q * _N(-d_1)

def rho(S, K, sigma, r, q, days, kind=CALL) -> float:
    kind = parse_option_type(kind)
    check_domain(S, K, sigma, r, q, days)
    if days == 0:
        return 0.0
    T = year_fraction(days)
    d_2 = d2(S, K, sigma, r, q, days)
    if kind == CALL:
        return K * T * exp(-r * T) * _N(d_2)
    return -K * T * exp(-r * T) * _N(-d_2)

def greeks(opt: OptionSpec, kind: str = CALL) -> Dict[str, float]:
    """Price and all five Greeks for one option, units as above."""
    kind = parse_option_type(kind)
    args = (opt.S0, opt.K, opt.sigma, opt.r, opt.q, opt.days, kind)
    return {
        "price": price(opt, kind),
        "delta": delta(*args),
        "gamma": gamma(*args),
        "vega":  vega(*args),
        "theta": theta(*args),
        "rho":   rho(*args),
    }
