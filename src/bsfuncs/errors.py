class DomainError(ValueError):
    """Raised when a pricing input lies outside the Black-Scholes domain.

    The closed form is only defined for

    - ``S > 0`` and ``K > 0`` (the log-moneyness ``ln(S/K)`` must exist),
    - ``sigma > 0`` (``sigma * sqrt(tau)`` is a denominator of ``d1``),
    - ``days >= 0``,

    and every numeric input finite. Expiry (``days == 0``) is allowed and
    priced at its intrinsic limit.
    """


class InvalidOptionType(ValueError):
    """Raised when an option type is neither ``"Call"`` nor ``"Put"``."""
