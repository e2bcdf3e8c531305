from __future__ import annotations
import math
from dataclasses import dataclass

from .errors import DomainError, InvalidOptionType

CALL = "Call"
PUT  = "Put"

DAYS_PER_YEAR = 365.0


def year_fraction(days: float) -> float:
    """Calendar days to years on a fixed 365-day year."""
    return days / DAYS_PER_YEAR


def parse_option_type(kind: str, *, strict: bool = True) -> str:
    """Normalise an option-type label to ``CALL`` or ``PUT``.

    Matching is case-insensitive. With ``strict=False`` anything that is not
    a put is treated as a call.
    """
    label = str(kind).strip().lower()
    if label == "put":
        return PUT
    if label == "call" or not strict:
        return CALL
    raise InvalidOptionType(f"option type must be 'Call' or 'Put', got {kind!r}")


def check_domain(S: float, K: float, sigma: float, r: float, q: float, days: float) -> None:
    """Raise ``DomainError`` unless the inputs are valid Black-Scholes inputs."""
    for name, value in (("price", S), ("strike", K), ("volatility", sigma),
                        ("interest", r), ("dividend", q), ("days", days)):
        if not math.isfinite(value):
            raise DomainError(f"{name} must be finite, got {value}")
    if S <= 0:
        raise DomainError(f"price must be positive, got {S}")
    if K <= 0:
        raise DomainError(f"strike must be positive, got {K}")
    if sigma <= 0:
        raise DomainError(f"volatility must be positive, got {sigma}")
    if days < 0:
        raise DomainError(f"days must be non-negative, got {days}")


@dataclass(frozen=True)
class OptionSpec:
    """Single-option container, fields in spreadsheet argument order.

    ``days`` is calendar days to expiry; ``T`` converts it to years.
    """
    S0: float
    K: float
    sigma: float
    r: float          # continuous risk-free
    q: float = 0.0    # continuous dividend yield
    days: float = DAYS_PER_YEAR

    def __post_init__(self):
        check_domain(self.S0, self.K, self.sigma, self.r, self.q, self.days)

    @property
    def T(self) -> float:
        return year_fraction(self.days)

    @property
    def expired(self) -> bool:
        return self.days == 0
