"""Dealership domain services - loan pricing and catalog reconciliation."""

from .brand_reconciler import (
    BrandModelMatch,
    MatchKind,
    check_catalog_compatibility,
    find_closest_brand_and_model,
)
from .loan_calculator import (
    ESTIMATED_FEE_MARKUP_PERCENT,
    InvalidArgument,
    LoanQuote,
    ZeroRatePolicy,
    calculate_monthly_payment,
    quote_vehicle_financing,
)

__all__ = [
    "BrandModelMatch",
    "MatchKind",
    "check_catalog_compatibility",
    "find_closest_brand_and_model",
    "ESTIMATED_FEE_MARKUP_PERCENT",
    "InvalidArgument",
    "LoanQuote",
    "ZeroRatePolicy",
    "calculate_monthly_payment",
    "quote_vehicle_financing",
]
