"""
Locale utilities.

Wraps Babel Locale parsing with a fallback to the US English locale, which is
the only formatting style displayfmt promises.
"""

from babel import Locale

from displayfmt.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_LOCALE = "en_US"


def get_babel_locale(identifier: str = DEFAULT_LOCALE) -> Locale:
    """
    Get Babel Locale object for given locale identifier.
    Falls back to en_US if the identifier is not supported.

    Args:
        identifier: Locale identifier (e.g., 'en_US', 'en')

    Returns:
        Babel Locale object

    Examples:
        >>> get_babel_locale('en_US').territory
        'US'
        >>> get_babel_locale('not_a_locale').language  # Falls back to 'en'
        'en'
    """
    try:
        return Locale.parse(identifier)
    except Exception as e:
        logger.debug(
            "Locale not supported, falling back to en_US",
            locale=identifier,
            error=str(e)
            )
        return Locale.parse(DEFAULT_LOCALE)
