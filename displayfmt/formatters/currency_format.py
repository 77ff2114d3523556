"""
Currency formatters for fiat (USD) and token (USDC, DAI, SKY, ...) amounts.

Placement:
- USD renders the symbol before the number: "$1.50M", "-$1.00K"
- Any other code renders after the number, space separated: "1.50M USDC"

Validation order matters: an empty or whitespace-only currency raises
InvalidCurrency before the value is looked at, so
``format_currency_compact(float("nan"), "")`` raises instead of returning "-".
"""
import math

from displayfmt.exceptions import InvalidCurrency
from displayfmt.logging_config import get_logger
from displayfmt.schemas.common import FIAT_CURRENCY_CODE, CurrencyDisplay, OptionsInput, resolve_fraction_digits
from displayfmt.utils.number_engine import RenderedNumber, get_engine
from displayfmt.utils.numeric_utils import parse_numeric

logger = get_logger(__name__)

PLACEHOLDER = "-"
BELOW_THRESHOLD_PREFIX = "<"

DEFAULT_MINIMUM_FRACTION_DIGITS = 2
DEFAULT_MAXIMUM_FRACTION_DIGITS = 2


def format_currency_compact(value, currency: str = FIAT_CURRENCY_CODE, options: OptionsInput = None) -> str:
    """
    Format a currency amount in compact notation.

    Args:
        value: Number or numeric string
        currency: Currency code, "USD" (default) or any token code
        options: Fraction digit options (default: minimum 2, maximum 2)

    Returns:
        Formatted amount, or "-" for invalid values

    Raises:
        InvalidCurrency: If currency is empty or whitespace-only

    Examples:
        >>> format_currency_compact(1500000)
        '$1.50M'
        >>> format_currency_compact(1000, "USDC")
        '1.00K USDC'
        >>> format_currency_compact(-1000)
        '-$1.00K'
        >>> format_currency_compact(float("inf"), "DAI")
        '∞ DAI'
    """
    return _format_currency(value, currency, options, compact=True)


def format_currency_full(value, currency: str = FIAT_CURRENCY_CODE, options: OptionsInput = None) -> str:
    """
    Format a currency amount in full with thousands separators.

    Amounts too small to show at the requested precision are clamped to
    the smallest displayable amount, prefixed with "<".

    Examples:
        >>> format_currency_full(1234567)
        '$1,234,567.00'
        >>> format_currency_full(1234.56, "SKY")
        '1,234.56 SKY'
        >>> format_currency_full(0.001)
        '<$0.01'
        >>> format_currency_full(0.0001, "USDC", {"maximumFractionDigits": 3})
        '<0.001 USDC'
    """
    return _format_currency(value, currency, options, compact=False)


def validate_currency(currency) -> str:
    """
    Validate a currency code.

    Args:
        currency: Currency code; None means the default USD

    Returns:
        The code, unchanged

    Raises:
        InvalidCurrency: If the code is not a string, empty or whitespace-only
    """
    if currency is None:
        return FIAT_CURRENCY_CODE
    if not isinstance(currency, str):
        logger.debug("Rejected currency code", currency_type=type(currency).__name__)
        raise InvalidCurrency(f"Currency must be a string, got {type(currency).__name__}", currency=currency)
    if not currency.strip():
        logger.debug("Rejected empty currency code", currency=currency)
        raise InvalidCurrency(currency=currency)
    return currency


def _format_currency(value, currency, options: OptionsInput, compact: bool) -> str:
    code = validate_currency(currency)

    number = parse_numeric(value)
    if number is None:
        return PLACEHOLDER

    digits = resolve_fraction_digits(
        options,
        DEFAULT_MINIMUM_FRACTION_DIGITS,
        DEFAULT_MAXIMUM_FRACTION_DIGITS
        )
    display = CurrencyDisplay.classify(code)
    engine = get_engine()

    # Smallest displayable amount at this precision, e.g. 0.01 for 2 digits
    if not compact and digits.maximum >= 1 and not math.isinf(number):
        threshold = 10.0 ** -digits.maximum
        if 0 < abs(number) < threshold:
            clamped = engine.render_grouped(threshold, digits.model_copy(update={"minimum": digits.maximum}))
            return BELOW_THRESHOLD_PREFIX + _decorate(clamped, code, display)

    if compact:
        rendered = engine.render_compact(number, digits)
    else:
        rendered = engine.render_grouped(number, digits)
    return _decorate(rendered, code, display)


def _decorate(rendered: RenderedNumber, code: str, display: CurrencyDisplay) -> str:
    """Attach the currency marker: "-$1.00K" for fiat, "-1.00K USDC" for tokens."""
    if display is CurrencyDisplay.FIAT:
        sign = rendered.minus_sign if rendered.negative else ""
        return f"{sign}{get_engine().currency_symbol(code)}{rendered.body}"
    return f"{rendered} {code}"
