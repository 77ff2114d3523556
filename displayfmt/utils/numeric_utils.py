"""
Numeric input parsing.

Formatters accept floats, ints, Decimals and numeric strings. Anything that is
not a number is reported as None so the caller can fall back to the "-"
placeholder instead of raising.
"""
import math
import re
from decimal import Decimal
from numbers import Real
from typing import Optional

from displayfmt.logging_config import get_logger

logger = get_logger(__name__)

# Decimal literal with optional sign, fraction and exponent ("1.5e3", "-.5", "10.")
_NUMERIC_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INFINITY_LITERAL = re.compile(r"[+-]?Infinity")


def parse_numeric(value) -> Optional[float]:
    """
    Convert input to float safely.

    Args:
        value: float, int, Decimal, numeric string, or anything else

    Returns:
        Finite or infinite float, or None when the input is not a number
        (None, "", whitespace, "abc", "$1000", "1,000", NaN, booleans)

    Examples:
        >>> parse_numeric("1.5e3")
        1500.0
        >>> parse_numeric(" -Infinity ")
        -inf
        >>> parse_numeric("$1000") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        text = value.strip()
        if _NUMERIC_LITERAL.fullmatch(text) or _INFINITY_LITERAL.fullmatch(text):
            number = float(text.replace("Infinity", "inf"))
        else:
            logger.debug("Rejected non-numeric string", value=value)
            return None
    elif isinstance(value, (Real, Decimal)):
        try:
            number = float(value)
        except OverflowError:
            # int too large for a double
            number = math.inf if value > 0 else -math.inf
        except ValueError:
            # signaling NaN
            return None
    else:
        logger.debug("Rejected non-numeric input", value_type=type(value).__name__)
        return None

    if math.isnan(number):
        return None
    return number
