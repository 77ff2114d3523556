"""
Percentage formatter: decimal fractions as percent strings (0.1234 -> "12.34%").
"""
from displayfmt.schemas.common import OptionsInput, resolve_fraction_digits
from displayfmt.utils.number_engine import get_engine
from displayfmt.utils.numeric_utils import parse_numeric

PLACEHOLDER = "-"
PERCENT_SIGN = "%"
# Smallest percentage shown as a number
MIN_DISPLAY_PERCENT = 0.01
BELOW_MIN_DISPLAY = "<0.01%"

DEFAULT_MINIMUM_FRACTION_DIGITS = 0
DEFAULT_MAXIMUM_FRACTION_DIGITS = 2


def format_percentage(value, options: OptionsInput = None) -> str:
    """
    Format a decimal number as a percentage with the % symbol.

    Args:
        value: Decimal fraction (0.5 for 50%), number or numeric string
        options: Fraction digit options (default: minimum 0, maximum 2)

    Returns:
        Formatted percentage, "-" for invalid values, or "<0.01%" for
        non-zero values whose magnitude is below 0.01%

    Examples:
        >>> format_percentage(0.1234)
        '12.34%'
        >>> format_percentage(-0.25)
        '-25%'
        >>> format_percentage(0.5, {"minimumFractionDigits": 2})
        '50.00%'
        >>> format_percentage(0.00009)
        '<0.01%'
    """
    number = parse_numeric(value)
    if number is None:
        return PLACEHOLDER

    if 0 < abs(number * 100) < MIN_DISPLAY_PERCENT:
        return BELOW_MIN_DISPLAY

    digits = resolve_fraction_digits(
        options,
        DEFAULT_MINIMUM_FRACTION_DIGITS,
        DEFAULT_MAXIMUM_FRACTION_DIGITS
        )
    return f"{get_engine().render_grouped(number, digits, scale=2)}{PERCENT_SIGN}"
