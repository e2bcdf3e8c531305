# bsfuncs — Black-Scholes spreadsheet functions
# Public API

# Spreadsheet surface
from .functions import (
    CALLPRICE, PUTPRICE,
    OPTIONDELTA, OPTIONGAMMA, OPTIONTHETA, OPTIONVEGA, OPTIONRHO,
    FUNCTIONS, call_function,
)

# Data model, errors & configuration
from .core import OptionSpec, CALL, PUT, DAYS_PER_YEAR
from .errors import DomainError, InvalidOptionType
from .config import PricingConfig, DEFAULT_CONFIG

# Scalar pricers
from .normal import norm_cdf, norm_pdf
from .black_scholes import d1, d2, price as bs_price, greeks as bs_greeks

# Vectorised pricers
from .black_scholes_vec import bs_price_vec, bs_greeks_vec

# Risk & validation
from .risk import numerical_greeks, scenario_grid
from .validation import max_cdf_error, exact_price, parity_gap, cross_validate

__all__ = [
    # Spreadsheet
    "CALLPRICE", "PUTPRICE",
    "OPTIONDELTA", "OPTIONGAMMA", "OPTIONTHETA", "OPTIONVEGA", "OPTIONRHO",
    "FUNCTIONS", "call_function",
    # Data model
    "OptionSpec", "CALL", "PUT", "DAYS_PER_YEAR",
    "DomainError", "InvalidOptionType",
    "PricingConfig", "DEFAULT_CONFIG",
    # Scalar
    "norm_cdf", "norm_pdf", "d1", "d2", "bs_price", "bs_greeks",
    # Vectorised
    "bs_price_vec", "bs_greeks_vec",
    # Risk & validation
    "numerical_greeks", "scenario_grid",
    "max_cdf_error", "exact_price", "parity_gap", "cross_validate",
]

__version__ = "0.1.0"
