"""
displayfmt: numeric display formatters.

Compact and full numbers, fiat and token currency amounts, and percentages,
rendered in US English style.

Usage:
    from displayfmt import format_currency_compact, format_percentage

    format_currency_compact(1500000)          # "$1.50M"
    format_currency_compact(1000, "USDC")     # "1.00K USDC"
    format_percentage(0.1234)                 # "12.34%"
"""
from displayfmt.exceptions import FormatterError, InvalidCurrency, InvalidFractionDigits
from displayfmt.formatters import (
    format_currency_compact,
    format_currency_full,
    format_number_compact,
    format_number_full,
    format_percentage,
    )
from displayfmt.schemas.common import CurrencyDisplay, FractionDigits, FractionOptions

__version__ = "0.1.0"

__all__ = [
    "CurrencyDisplay",
    "FormatterError",
    "FractionDigits",
    "FractionOptions",
    "InvalidCurrency",
    "InvalidFractionDigits",
    "format_currency_compact",
    "format_currency_full",
    "format_number_compact",
    "format_number_full",
    "format_percentage",
    ]
