"""
Exceptions raised by the display formatters.

Only configuration mistakes raise. Bad *values* (None, "", "abc", NaN) are
never errors: formatters return the "-" placeholder for them.
"""


class FormatterError(ValueError):
    """Base exception for formatter configuration errors."""
    pass


class InvalidCurrency(FormatterError):
    """Raised when the currency code is empty, whitespace-only or not a string."""

    def __init__(self, message: str = "Currency shouldn't be empty string", currency=None):
        super().__init__(message)
        self.message = message
        self.currency = currency


class InvalidFractionDigits(FormatterError):
    """Raised when fraction digit options are out of range or inconsistent."""

    def __init__(self, message: str, minimum=None, maximum=None):
        super().__init__(message)
        self.message = message
        self.minimum = minimum
        self.maximum = maximum
