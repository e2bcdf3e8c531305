# normal.py
# Standard-normal CDF (Abramowitz-Stegun 7.1.26 erf approximation) and PDF.
# Scalar versions use ``math``; the ``_vec`` versions accept arrays and broadcast.

from __future__ import annotations
import math
import numpy as np

_P  = 0.3275911
_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429

_SQRT2       = math.sqrt(2.0)
_INV_SQRT2PI = 1.0 / math.sqrt(2.0 * math.pi)

# Absolute error bound of the approximation against the exact CDF.
MAX_ABS_ERROR = 1.5e-7


# ---------------------------------------------------------------------------
# Scalar
# ---------------------------------------------------------------------------
def norm_cdf(d: float) -> float:
    """Approximate Phi(d), the probability a standard normal is <= d.

    Accurate to ``MAX_ABS_ERROR``; callers needing more precision should use
    an exact CDF instead. NaN propagates; +/-inf map to 1 / 0.
    """
    z = d / _SQRT2
    t = 1.0 / (1.0 + _P * abs(z))
    poly = ((((_A5 * t + _A4) * t + _A3) * t + _A2) * t + _A1) * t
    erf = 1.0 - poly * math.exp(-z * z)
    sign = -1.0 if z < 0 else 1.0
    return 0.5 * (1.0 + sign * erf)


def norm_pdf(x: float) -> float:
    """Standard-normal density phi(x)."""
    return math.exp(-0.5 * x * x) * _INV_SQRT2PI


# ---------------------------------------------------------------------------
# Vectorised
# ---------------------------------------------------------------------------
def norm_cdf_vec(d) -> np.ndarray:
    """Vectorised ``norm_cdf``; same approximation, same error bound."""
    z = np.asarray(d, dtype=float) / _SQRT2
    t = 1.0 / (1.0 + _P * np.abs(z))
    poly = ((((_A5 * t + _A4) * t + _A3) * t + _A2) * t + _A1) * t
    erf = 1.0 - poly * np.exp(-z * z)
    sign = np.where(z < 0, -1.0, 1.0)
    return 0.5 * (1.0 + sign * erf)


def norm_pdf_vec(x) -> np.ndarray:
    """Vectorised ``norm_pdf``."""
    x = np.asarray(x, dtype=float)
    return np.exp(-0.5 * x * x) * _INV_SQRT2PI
