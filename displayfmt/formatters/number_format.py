"""
Number formatters: compact ("1.5K") and full ("1,234,567") display strings.

Invalid input (None, "", non-numeric strings, NaN) renders as "-".
Infinite values render as "∞" / "-∞".
"""
from displayfmt.schemas.common import OptionsInput, resolve_fraction_digits
from displayfmt.utils.number_engine import get_engine
from displayfmt.utils.numeric_utils import parse_numeric

PLACEHOLDER = "-"

DEFAULT_MINIMUM_FRACTION_DIGITS = 0
DEFAULT_MAXIMUM_FRACTION_DIGITS = 2


def format_number_compact(value, options: OptionsInput = None) -> str:
    """
    Format a number in compact notation with K/M/B/T suffixes.

    Args:
        value: Number or numeric string (scientific notation allowed)
        options: Fraction digit options (default: minimum 0, maximum 2)

    Returns:
        Compact string, or "-" for invalid values

    Examples:
        >>> format_number_compact(1500)
        '1.5K'
        >>> format_number_compact(1234567, {"maximumFractionDigits": 1})
        '1.2M'
        >>> format_number_compact(-1000)
        '-1K'
        >>> format_number_compact("abc")
        '-'
    """
    return _format_number(value, options, compact=True)


def format_number_full(value, options: OptionsInput = None) -> str:
    """
    Format a number in full with thousands separators.

    Examples:
        >>> format_number_full(1234567)
        '1,234,567'
        >>> format_number_full(1234.5678)
        '1,234.57'
        >>> format_number_full("1e6")
        '1,000,000'
    """
    return _format_number(value, options, compact=False)


def _format_number(value, options: OptionsInput, compact: bool) -> str:
    number = parse_numeric(value)
    if number is None:
        return PLACEHOLDER

    digits = resolve_fraction_digits(
        options,
        DEFAULT_MINIMUM_FRACTION_DIGITS,
        DEFAULT_MAXIMUM_FRACTION_DIGITS
        )

    engine = get_engine()
    if compact:
        return str(engine.render_compact(number, digits))
    return str(engine.render_grouped(number, digits))
