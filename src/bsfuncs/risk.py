"""Bump-and-reprice risk helpers.

Numerical Greeks via finite differences that work with **any** pricer
callable taking spreadsheet-ordered arguments, plus spot x vol scenario
grids for what-if tables.
"""

from __future__ import annotations

import numpy as np
from typing import Callable

from .core import DAYS_PER_YEAR

__all__ = [
    "numerical_greeks",
    "scenario_grid",
]


# ---------------------------------------------------------------------------
# Numerical Greeks
# ---------------------------------------------------------------------------

def numerical_greeks(
    pricer_func: Callable[..., float],
    S: float,
    K: float,
    sigma: float,
    r: float,
    q: float,
    days: float,
    kind: str,
    *,
    bump_pct: float = 0.01,
) -> dict[str, float]:
    """Compute Greeks via finite differences on an arbitrary pricer.

    Parameters
    ----------
    pricer_func : callable
        ``pricer_func(S, K, sigma, r, q, days, kind) -> float``.
    S, K, sigma, r, q, days : float
        Market and instrument parameters; ``days`` in calendar days.
    kind : str
        ``"Call"`` or ``"Put"``.
    bump_pct : float
        Relative bump size for spot and vol; absolute for rate (default 0.01).

    Returns
    -------
    dict[str, float]
        Keys: ``delta``, ``gamma``, ``vega``, ``theta``, ``rho``.
        Theta is per year, from a one-day forward difference.
    """
    P0 = pricer_func(S, K, sigma, r, q, days, kind)

    # --- Delta & Gamma (spot bump) ---
    eps_S = bump_pct * S
    P_up = pricer_func(S + eps_S, K, sigma, r, q, days, kind)
    P_dn = pricer_func(S - eps_S, K, sigma, r, q, days, kind)
    delta = (P_up - P_dn) / (2.0 * eps_S)
    gamma = (P_up - 2.0 * P0 + P_dn) / (eps_S ** 2)

    # --- Vega (vol bump) ---
    eps_v = max(bump_pct * sigma, 1e-4)
    P_vup = pricer_func(S, K, sigma + eps_v, r, q, days, kind)
    sig_dn = max(sigma - eps_v, 1e-6)
    P_vdn = pricer_func(S, K, sig_dn, r, q, days, kind)
    vega = (P_vup - P_vdn) / (sigma + eps_v - sig_dn)

    # --- Theta (time decay, 1-day bump) ---
    if days >= 1:
        P_t = pricer_func(S, K, sigma, r, q, days - 1, kind)
        theta_val = (P_t - P0) * DAYS_PER_YEAR
    else:
        theta_val = 0.0

    # --- Rho (rate bump) ---
    eps_r = bump_pct
    P_rup = pricer_func(S, K, sigma, r + eps_r, q, days, kind)
    P_rdn = pricer_func(S, K, sigma, r - eps_r, q, days, kind)
    rho = (P_rup - P_rdn) / (2.0 * eps_r)

    return {
        "delta": float(delta),
        "gamma": float(gamma),
        "vega": float(vega),
        "theta": float(theta_val),
        "rho": float(rho),
    }


# ---------------------------------------------------------------------------
# Scenario grid
# ---------------------------------------------------------------------------

def scenario_grid(
    pricer_func: Callable[..., float],
    S: float,
    K: float,
    sigma: float,
    r: float,
    q: float,
    days: float,
    kind: str,
    spot_range: np.ndarray,
    vol_range: np.ndarray,
) -> dict:
    """Evaluate a pricer across a 2-D (spot × vol) scenario grid.

    Parameters
    ----------
    pricer_func : callable
        ``pricer_func(S, K, sigma, r, q, days, kind) -> float``.
    spot_range : array, shape (n_spot,)
        Spot values to evaluate.
    vol_range : array, shape (n_vol,)
        Volatility values to evaluate.

    Returns
    -------
    dict
        ``"spot_values"``, ``"vol_values"``, ``"prices"`` (shape n_spot×n_vol).
    """
    spot_range = np.asarray(spot_range, dtype=float)
    vol_range = np.asarray(vol_range, dtype=float)
    prices = np.empty((len(spot_range), len(vol_range)))

    for i, s in enumerate(spot_range):
        for j, v in enumerate(vol_range):
            prices[i, j] = pricer_func(float(s), K, float(v), r, q, days, kind)

    return {
        "spot_values": spot_range.copy(),
        "vol_values": vol_range.copy(),
        "prices": prices,
    }
