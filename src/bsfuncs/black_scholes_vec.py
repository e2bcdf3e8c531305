# black_scholes_vec.py
# Vectorised Black-Scholes pricing and Greeks.
# All public functions accept scalars *or* NumPy arrays and broadcast.

from __future__ import annotations
import numpy as np

from .core import CALL, DAYS_PER_YEAR, parse_option_type
from .errors import DomainError
from .normal import norm_cdf_vec, norm_pdf_vec

_N = norm_cdf_vec   # vectorised standard-normal CDF (A&S approximation)
_n = norm_pdf_vec   # vectorised standard-normal PDF


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _as_arrays(S, K, sigma, r, q, days):
    """Convert to float arrays and reject anything outside the BS domain."""
    S, K, sigma, r, q, days = (np.asarray(x, dtype=float) for x in (S, K, sigma, r, q, days))
    for name, x in (("price", S), ("strike", K), ("volatility", sigma),
                    ("interest", r), ("dividend", q), ("days", days)):
        if not np.all(np.isfinite(x)):
            raise DomainError(f"{name} must be finite")
    if np.any(S <= 0):
        raise DomainError("price must be positive")
    if np.any(K <= 0):
        raise DomainError("strike must be positive")
    if np.any(sigma <= 0):
        raise DomainError("volatility must be positive")
    if np.any(days < 0):
        raise DomainError("days must be non-negative")
    return S, K, sigma, r, q, days


def _d1_d2(S, K, sigma, r, q, T):
    """Compute d1, d2 arrays.  Entries at expiry (T == 0) are set to 0."""
    live = T > 0
    sqrt_T = np.sqrt(np.where(live, T, 1.0))
    sig_sqrt_T = sigma * sqrt_T
    d1 = np.where(live, (np.log(S / K) + (r - q + 0.5 * sigma * sigma) * T) / sig_sqrt_T, 0.0)
    d2 = np.where(live, d1 - sig_sqrt_T, 0.0)
    return d1, d2, sqrt_T, live


def _terms(S, K, sigma, r, q, days):
    S, K, sigma, r, q, days = _as_arrays(S, K, sigma, r, q, days)
    T = days / DAYS_PER_YEAR
    d1, d2, sqrt_T, live = _d1_d2(S, K, sigma, r, q, T)
    return S, K, sigma, r, q, T, d1, d2, sqrt_T, live


def _is_call(kind) -> np.ndarray:
    """Return boolean mask: True where kind parses as a call."""
    kind = np.asarray(kind)
    if kind.ndim == 0:
        return np.bool_(parse_option_type(str(kind)) == CALL)
    return np.array(
        [parse_option_type(str(k)) == CALL for k in kind.flat], dtype=bool
    ).reshape(kind.shape)


# ---------------------------------------------------------------------------
# Vectorised price
# ---------------------------------------------------------------------------
def bs_price_vec(S, K, sigma, r, q, days, kind) -> np.ndarray:
    """Vectorised Black-Scholes price.

    Parameters accept scalars or arrays; NumPy broadcasting rules apply.
    Entries with ``days == 0`` are priced at intrinsic value.

    Returns
    -------
    np.ndarray
        Option prices (same shape as broadcasted inputs).
    """
    S, K, sigma, r, q, T, d1, d2, _, live = _terms(S, K, sigma, r, q, days)
    disc_r = np.exp(-r * T)
    disc_q = np.exp(-q * T)

    call_px = np.where(live, disc_q * S * _N(d1) - disc_r * K * _N(d2),
                       np.maximum(S - K, 0.0))
    put_px  = np.where(live, disc_r * K * _N(-d2) - disc_q * S * _N(-d1),
                       np.maximum(K - S, 0.0))

    is_call = _is_call(kind)
    return np.where(is_call, call_px, put_px)


# ---------------------------------------------------------------------------
# Vectorised Greeks
# ---------------------------------------------------------------------------
def bs_greeks_vec(S, K, sigma, r, q, days, kind) -> dict[str, np.ndarray]:
    """Vectorised Black-Scholes Greeks.

    Returns dict with keys: delta, gamma, vega, theta, rho.
    Vega is dPrice/dSigma (absolute), theta is dPrice/dt (per year).
    """
    S, K, sigma, r, q, T, d1, d2, sqrt_T, live = _terms(S, K, sigma, r, q, days)
    disc_r = np.exp(-r * T)
    disc_q = np.exp(-q * T)
    n_d1 = _n(d1)
    is_call = _is_call(kind)

    # Common
    gamma = np.where(live, disc_q * n_d1 / (S * sigma * sqrt_T), 0.0)
    vega  = np.where(live, S * disc_q * n_d1 * sqrt_T, 0.0)

    # Call-specific
    delta_c = np.where(live, disc_q * _N(d1), np.where(S > K, 1.0, 0.0))
    theta_c = (-S * disc_q * n_d1 * sigma / (2 * sqrt_T)
               - r * K * disc_r * _N(d2)
               + q * S * disc_q * _N(d1))
    rho_c   = K * T * disc_r * _N(d2)

    # Put-specific
    delta_p = np.where(live, disc_q * (_N(d1) - 1.0), np.where(S < K, -1.0, 0.0))
    theta_p = (-S * disc_q * n_d1 * sigma / (2 * sqrt_T)
               + r * K * disc_r * _N(-d2)
               - q * S * disc_q * _N(-d1))
    rho_p   = -K * T * disc_r * _N(-d2)

    delta = np.where(is_call, delta_c, delta_p)
    theta = np.where(live, np.where(is_call, theta_c, theta_p), 0.0)
    rho   = np.where(live, np.where(is_call, rho_c, rho_p), 0.0)

    return {"delta": delta, "gamma": gamma, "vega": vega, "theta": theta, "rho": rho}
