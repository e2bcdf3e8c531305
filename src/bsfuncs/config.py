from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .core import DAYS_PER_YEAR

ThetaUnit = Literal["year", "day"]
SensitivityUnit = Literal["absolute", "percent"]


@dataclass(frozen=True)
class PricingConfig:
    """Output conventions for the spreadsheet functions.

    Parameters
    ----------
    theta_unit : str
        ``"year"`` (dPrice/dt per year, default) or ``"day"`` (per calendar day).
    vega_unit : str
        ``"absolute"`` (dPrice/dSigma, default) or ``"percent"`` (per vol point).
    rho_unit : str
        ``"absolute"`` (dPrice/dr, default) or ``"percent"`` (per rate point).
    strict_option_type : bool
        Reject unknown option types (default). When ``False`` anything that is
        not a put is priced as a call.
    """
    theta_unit: ThetaUnit = "year"
    vega_unit: SensitivityUnit = "absolute"
    rho_unit: SensitivityUnit = "absolute"
    strict_option_type: bool = True

    def __post_init__(self):
        if self.theta_unit not in ("year", "day"):
            raise ValueError(f"theta_unit must be 'year' or 'day', got {self.theta_unit!r}")
        if self.vega_unit not in ("absolute", "percent"):
            raise ValueError(
                f"vega_unit must be 'absolute' or 'percent', got {self.vega_unit!r}"
            )
        if self.rho_unit not in ("absolute", "percent"):
            raise ValueError(
                f"rho_unit must be 'absolute' or 'percent', got {self.rho_unit!r}"
            )

    def scale_theta(self, theta: float) -> float:
        return theta / DAYS_PER_YEAR if self.theta_unit == "day" else theta

    def scale_vega(self, vega: float) -> float:
        return vega / 100.0 if self.vega_unit == "percent" else vega

    def scale_rho(self, rho: float) -> float:
        return rho / 100.0 if self.rho_unit == "percent" else rho


DEFAULT_CONFIG = PricingConfig()
