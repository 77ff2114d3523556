"""
Common schemas shared by the formatters.

**Domain Coverage**:
- FractionOptions: user-facing precision options (all fields optional)
- FractionDigits: resolved, validated (minimum, maximum) pair
- CurrencyDisplay: fiat vs token symbol placement

**Design Notes**:
- Option fields accept both snake_case and camelCase names, so a plain
  ``{"minimumFractionDigits": 2}`` dict works as well as the model.
- Defaults are component specific and are applied by ``resolve_fraction_digits``.
"""
# Postpones evaluation of type hints to improve imports and performance. Also avoid circular import issues.
from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from displayfmt.exceptions import InvalidFractionDigits

# Upper bound accepted by the platform number formatter
MAX_FRACTION_DIGITS = 100

# The only currency rendered with a leading symbol
FIAT_CURRENCY_CODE = "USD"


# =============================================================================
# PRECISION OPTIONS
# =============================================================================

class FractionOptions(BaseModel):
    """
    Precision options passed by callers.

    Both fields are optional; missing ones take the formatter's defaults.

    Examples:
        >>> FractionOptions(minimum_fraction_digits=3)
        >>> FractionOptions.model_validate({"maximumFractionDigits": 4})
    """
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    minimum_fraction_digits: Optional[int] = Field(
        default=None,
        ge=0,
        le=MAX_FRACTION_DIGITS,
        strict=True,
        alias="minimumFractionDigits",
        description="Minimum number of decimal places to display",
        )
    maximum_fraction_digits: Optional[int] = Field(
        default=None,
        ge=0,
        le=MAX_FRACTION_DIGITS,
        strict=True,
        alias="maximumFractionDigits",
        description="Maximum number of decimal places to display",
        )


class FractionDigits(BaseModel):
    """Resolved fraction digit range, guaranteed ``minimum <= maximum``."""
    model_config = ConfigDict(frozen=True)

    minimum: int = Field(..., ge=0, le=MAX_FRACTION_DIGITS)
    maximum: int = Field(..., ge=0, le=MAX_FRACTION_DIGITS)

    @model_validator(mode="after")
    def validate_range(self) -> "FractionDigits":
        """Reject ranges where the minimum exceeds the maximum."""
        if self.minimum > self.maximum:
            raise ValueError(
                f"minimumFractionDigits ({self.minimum}) cannot exceed "
                f"maximumFractionDigits ({self.maximum})"
                )
        return self


OptionsInput = Union[FractionOptions, Mapping[str, Any], None]


def resolve_fraction_digits(options: OptionsInput, default_minimum: int, default_maximum: int) -> FractionDigits:
    """
    Merge caller options with component defaults.

    Args:
        options: None, a FractionOptions, or a mapping with snake_case or camelCase keys
        default_minimum: Component default for the minimum
        default_maximum: Component default for the maximum

    Returns:
        Validated FractionDigits

    Raises:
        InvalidFractionDigits: If a field is out of range, not an int, unknown,
            or the resolved minimum exceeds the resolved maximum

    Examples:
        >>> resolve_fraction_digits(None, 0, 2)
        FractionDigits(minimum=0, maximum=2)
        >>> resolve_fraction_digits({"maximumFractionDigits": 4}, 2, 2)
        FractionDigits(minimum=2, maximum=4)
        >>> resolve_fraction_digits({"minimumFractionDigits": 3}, 0, 2)  # raises InvalidFractionDigits
    """
    try:
        if options is None:
            parsed = FractionOptions()
        elif isinstance(options, FractionOptions):
            parsed = options
        else:
            parsed = FractionOptions.model_validate(dict(options))

        minimum = parsed.minimum_fraction_digits
        maximum = parsed.maximum_fraction_digits
        return FractionDigits(
            minimum=default_minimum if minimum is None else minimum,
            maximum=default_maximum if maximum is None else maximum,
            )
    except ValidationError as e:
        errors = "; ".join(err["msg"] for err in e.errors())
        raise InvalidFractionDigits(f"Invalid fraction digit options: {errors}") from e
    except (TypeError, ValueError) as e:
        # dict() on something that is not a mapping
        raise InvalidFractionDigits(f"Invalid fraction digit options: {e}") from e


# =============================================================================
# CURRENCY DISPLAY CLASS
# =============================================================================

class CurrencyDisplay(str, Enum):
    """
    Where the currency marker goes.

    - FIAT: symbol before the value ("$1.00K", "-$1.00K")
    - TOKEN: code after the value, space separated ("1.00K USDC")
    """
    FIAT = "fiat"
    TOKEN = "token"

    @classmethod
    def classify(cls, code: str) -> "CurrencyDisplay":
        """Classify a (validated) currency code. Any code other than USD is a token."""
        return cls.FIAT if code == FIAT_CURRENCY_CODE else cls.TOKEN
