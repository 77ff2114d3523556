"""
Number rendering engine backed by Babel (CLDR data).

The formatters only talk to this module through two operations:

- ``render_grouped``: full rendering with group separators ("1,234,567.5")
- ``render_compact``: abbreviated rendering with CLDR short suffixes ("1.5K")

Both return a ``RenderedNumber`` that keeps the sign apart from the digits,
so callers can put a currency symbol between them ("-$1.00K").

Rounding:
    Floats are converted to Decimal through their shortest repr ("1.005", not
    the binary expansion 1.00499...), then rounded half away from zero at
    ``maximum`` fraction digits. Babel only lays out the already rounded digits.

Usage:
    from displayfmt.utils.number_engine import get_engine

    engine = get_engine()
    str(engine.render_compact(1500, FractionDigits(minimum=0, maximum=2)))
    # Returns: "1.5K"
"""
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from functools import lru_cache
from typing import Tuple, Union

from babel.numbers import format_decimal, get_currency_symbol, get_minus_sign_symbol, parse_pattern
from pydantic import BaseModel, ConfigDict

from displayfmt.logging_config import get_logger
from displayfmt.schemas.common import FractionDigits
from displayfmt.utils.locale_utils import DEFAULT_LOCALE, get_babel_locale

logger = get_logger(__name__)

INFINITY_SYMBOL = "∞"

# Compact coefficients are grouped only from this many integer digits on ("1000T", "25,000T")
_COMPACT_GROUPING_MIN_DIGITS = 5

# Room for 309 integer digits of the largest double plus 100 fraction digits
_DECIMAL_PRECISION = 800

Numeric = Union[float, int, Decimal]


class RenderedNumber(BaseModel):
    """Sign and unsigned body of a rendered number."""
    model_config = ConfigDict(frozen=True)

    negative: bool
    body: str
    minus_sign: str = "-"

    def __str__(self) -> str:
        return f"{self.minus_sign}{self.body}" if self.negative else self.body


class CompactUnit(BaseModel):
    """One CLDR compact pattern: values >= magnitude are divided by divisor and get prefix/suffix."""
    model_config = ConfigDict(frozen=True)

    magnitude: int
    divisor: int
    prefix: str = ""
    suffix: str = ""


# Used below the smallest compact magnitude
PLAIN_UNIT = CompactUnit(magnitude=0, divisor=1)


# ============================================================================
# HELPERS
# ============================================================================

def _is_negative(number: Numeric) -> bool:
    """True for negative values, including negative zero."""
    if isinstance(number, Decimal):
        return number.is_signed()
    return math.copysign(1.0, number) < 0


def _is_infinite(number: Numeric) -> bool:
    if isinstance(number, Decimal):
        return number.is_infinite()
    return math.isinf(number)


def _to_decimal(number: Numeric) -> Decimal:
    if isinstance(number, float):
        return Decimal(repr(number))
    return Decimal(number)


def _integer_digits(value: Decimal) -> int:
    """Number of digits left of the decimal point (0 counts as one)."""
    if value.is_zero() or value.copy_abs() < 1:
        return 1
    return value.copy_abs().adjusted() + 1


def _round_half_up(value: Decimal, places: int) -> Decimal:
    """Round to ``places`` fraction digits, ties away from zero."""
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def build_pattern(digits: FractionDigits, grouped: bool = True) -> str:
    """
    Build a CLDR number pattern for the given fraction digits.

    Examples:
        >>> build_pattern(FractionDigits(minimum=0, maximum=2))
        '#,##0.##'
        >>> build_pattern(FractionDigits(minimum=2, maximum=4), grouped=False)
        '0.00##'
    """
    integer = "#,##0" if grouped else "0"
    if digits.maximum == 0:
        return integer
    return integer + "." + "0" * digits.minimum + "#" * (digits.maximum - digits.minimum)


def load_compact_units(locale, style: str = "short") -> Tuple[CompactUnit, ...]:
    """
    Read the compact decimal patterns of a locale, largest magnitude first.

    A pattern such as "00K" at magnitude 10000 means: divide by 1000 and
    append "K". A bare "0" pattern means the value is not abbreviated.
    """
    patterns = locale.compact_decimal_formats[style]["other"]
    units = []
    for magnitude_key, raw_pattern in patterns.items():
        pattern = parse_pattern(raw_pattern)
        magnitude = int(magnitude_key)
        if pattern.pattern == "0":
            units.append(CompactUnit(magnitude=magnitude, divisor=1))
            continue
        zeros = pattern.pattern.count("0")
        units.append(CompactUnit(
            magnitude=magnitude,
            divisor=magnitude // (10 ** (zeros - 1)),
            prefix=pattern.prefix[0],
            suffix=pattern.suffix[0],
            ))
    return tuple(sorted(units, key=lambda unit: unit.magnitude, reverse=True))


# ============================================================================
# ENGINE
# ============================================================================

class NumberEngine:
    """
    Locale-aware number renderer.

    Args:
        locale: Babel locale identifier (default: en_US)
        compact_style: CLDR compact format type ("short" gives K/M/B/T)
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, compact_style: str = "short"):
        self.locale = get_babel_locale(locale)
        self.minus_sign = get_minus_sign_symbol(self.locale)
        self.compact_units = load_compact_units(self.locale, compact_style)
        logger.debug(
            "Number engine ready",
            locale=str(self.locale),
            compact_units=len(self.compact_units)
            )

    def currency_symbol(self, code: str) -> str:
        """Localized symbol for an ISO 4217 code ("USD" -> "$")."""
        return get_currency_symbol(code, locale=self.locale)

    def render_grouped(self, number: Numeric, digits: FractionDigits, scale: int = 0) -> RenderedNumber:
        """
        Render with group separators and no abbreviation.

        Args:
            number: Value to render (may be infinite)
            digits: Fraction digit range
            scale: Power of ten applied exactly before rounding (2 for percent)

        Returns:
            RenderedNumber, e.g. body "1,234,567.89"
        """
        negative = _is_negative(number)
        if _is_infinite(number):
            return RenderedNumber(negative=negative, body=INFINITY_SYMBOL, minus_sign=self.minus_sign)

        with localcontext() as ctx:
            ctx.prec = _DECIMAL_PRECISION
            value = _to_decimal(number).copy_abs().scaleb(scale)
            body = self._format_digits(_round_half_up(value, digits.maximum), digits, grouped=True)
        return RenderedNumber(negative=negative, body=body, minus_sign=self.minus_sign)

    def render_compact(self, number: Numeric, digits: FractionDigits) -> RenderedNumber:
        """
        Render with a compact magnitude suffix (K, M, B, T).

        The suffix is picked from the rounded value, so 999999 at two fraction
        digits becomes "1M" rather than "1000K". Magnitudes past the largest
        pattern keep that pattern with a bigger coefficient ("1000T"). Like
        CLDR minimum grouping, the coefficient gets separators only from five
        integer digits on ("25,000T").

        Returns:
            RenderedNumber, e.g. body "1.5K"
        """
        negative = _is_negative(number)
        if _is_infinite(number):
            return RenderedNumber(negative=negative, body=INFINITY_SYMBOL, minus_sign=self.minus_sign)

        with localcontext() as ctx:
            ctx.prec = _DECIMAL_PRECISION
            value = _to_decimal(number).copy_abs()
            unit = self.compact_unit(value)
            coefficient = _round_half_up(value / unit.divisor, digits.maximum)

            # Rounding may carry into the next magnitude (999.999 -> 1000.00 -> 1K)
            carried = self.compact_unit(coefficient * unit.divisor)
            if carried != unit:
                unit = carried
                coefficient = _round_half_up(value / unit.divisor, digits.maximum)

            grouped = _integer_digits(coefficient) >= _COMPACT_GROUPING_MIN_DIGITS
            body = unit.prefix + self._format_digits(coefficient, digits, grouped=grouped) + unit.suffix
        return RenderedNumber(negative=negative, body=body, minus_sign=self.minus_sign)

    def compact_unit(self, value: Decimal) -> CompactUnit:
        """Largest compact unit whose magnitude is <= value."""
        for unit in self.compact_units:
            if value >= unit.magnitude:
                return unit
        return PLAIN_UNIT

    def _format_digits(self, value: Decimal, digits: FractionDigits, grouped: bool) -> str:
        return format_decimal(value, format=build_pattern(digits, grouped), locale=self.locale)


@lru_cache(maxsize=None)
def get_engine(locale: str = DEFAULT_LOCALE) -> NumberEngine:
    """Shared engine per locale. Engines are immutable once built."""
    return NumberEngine(locale)
