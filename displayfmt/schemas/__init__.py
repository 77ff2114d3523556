"""
Pydantic schemas for displayfmt.
"""
from displayfmt.schemas.common import (
    FIAT_CURRENCY_CODE,
    MAX_FRACTION_DIGITS,
    CurrencyDisplay,
    FractionDigits,
    FractionOptions,
    resolve_fraction_digits,
    )

__all__ = [
    "FIAT_CURRENCY_CODE",
    "MAX_FRACTION_DIGITS",
    "CurrencyDisplay",
    "FractionDigits",
    "FractionOptions",
    "resolve_fraction_digits",
    ]
