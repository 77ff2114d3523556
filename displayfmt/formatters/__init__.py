"""
Display formatters.

- number_format: compact and full numbers
- currency_format: fiat and token currency amounts
- percentage_format: percentages
"""
from displayfmt.formatters.currency_format import format_currency_compact, format_currency_full
from displayfmt.formatters.number_format import format_number_compact, format_number_full
from displayfmt.formatters.percentage_format import format_percentage

__all__ = [
    "format_currency_compact",
    "format_currency_full",
    "format_number_compact",
    "format_number_full",
    "format_percentage",
    ]
