"""
Tests for format_currency_compact and format_currency_full.

Tests cover:
- USD (fiat) formatting with the "$" symbol before the number
- Token codes (USDC, DAI, SKY, any other code) after the number
- Decimal precision control
- Below-threshold clamp ("<$0.01") on full rendering
- Invalid values ("-") and infinity
- Currency validation and its precedence over value validation
"""
import math

import pytest

from displayfmt import CurrencyDisplay, InvalidCurrency, InvalidFractionDigits
from displayfmt.formatters.currency_format import (
    format_currency_compact,
    format_currency_full,
    validate_currency,
    )

TOKENS = ["USDC", "DAI", "SKY"]


class TestCurrencyCompactUSD:
    """Test compact USD formatting."""

    def test_small_numbers(self):
        """Values below 1000 are not compacted."""
        assert format_currency_compact(0) == "$0.00"
        assert format_currency_compact(123) == "$123.00"
        assert format_currency_compact(999) == "$999.00"

    def test_suffixes(self):
        """K, M, B, T suffixes with two fraction digits."""
        assert format_currency_compact(1000) == "$1.00K"
        assert format_currency_compact(1500) == "$1.50K"
        assert format_currency_compact(1500000) == "$1.50M"
        assert format_currency_compact(45000000) == "$45.00M"
        assert format_currency_compact(1500000000) == "$1.50B"
        assert format_currency_compact(1500000000000) == "$1.50T"

    def test_rounding(self):
        """Rounding can carry into the next suffix."""
        assert format_currency_compact(1234.567) == "$1.23K"
        assert format_currency_compact(1235.567) == "$1.24K"
        assert format_currency_compact(999.999) == "$1.00K"
        assert format_currency_compact(999999) == "$1.00M"
        assert format_currency_compact(1999) == "$2.00K"

    def test_very_large_numbers(self):
        """No suffix past T."""
        assert format_currency_compact(10 ** 15) == "$1000.00T"
        assert format_currency_compact(10 ** 15, "USD", {"minimumFractionDigits": 0, "maximumFractionDigits": 0}) == "$1000T"

    def test_large_coefficient_is_grouped(self):
        """Coefficients past 9999T get group separators, tokens included."""
        assert format_currency_compact(2.5e16) == "$25,000.00T"
        assert format_currency_compact(-2.5e16) == "-$25,000.00T"
        assert format_currency_compact(1e17, "USDC") == "100,000.00T USDC"

    def test_fraction_digits(self):
        """Custom precision."""
        assert format_currency_compact(1234, "USD", {"minimumFractionDigits": 0, "maximumFractionDigits": 0}) == "$1K"
        assert format_currency_compact(1234, "USD", {"minimumFractionDigits": 1, "maximumFractionDigits": 1}) == "$1.2K"
        assert format_currency_compact(1234, "USD", {"minimumFractionDigits": 3, "maximumFractionDigits": 3}) == "$1.234K"
        assert format_currency_compact(0.123456, "USD", {"minimumFractionDigits": 4, "maximumFractionDigits": 4}) == "$0.1235"
        assert format_currency_compact(1234.5678, "USD", {"minimumFractionDigits": 4, "maximumFractionDigits": 4}) == "$1.2346K"

    def test_empty_options(self):
        """Empty options fall back to the defaults."""
        assert format_currency_compact(1234, "USD", {}) == "$1.23K"

    def test_small_values_are_not_clamped(self):
        """Compact rendering rounds small values instead of clamping them."""
        assert format_currency_compact(0.01) == "$0.01"
        assert format_currency_compact(0.001) == "$0.00"
        assert format_currency_compact(0.001, "USD", {"minimumFractionDigits": 2, "maximumFractionDigits": 2}) == "$0.00"
        assert format_currency_compact(0.001, "USD", {"minimumFractionDigits": 3, "maximumFractionDigits": 3}) == "$0.001"

    def test_negative_values(self):
        """Sign goes before the $ symbol."""
        assert format_currency_compact(-1000) == "-$1.00K"
        assert format_currency_compact(-1500000) == "-$1.50M"
        assert format_currency_compact(-123.45) == "-$123.45"

    def test_string_input(self):
        """Numeric strings, including scientific notation."""
        assert format_currency_compact("1000") == "$1.00K"
        assert format_currency_compact("1234.56") == "$1.23K"
        assert format_currency_compact("1e6") == "$1.00M"
        assert format_currency_compact("1.5e3") == "$1.50K"
        assert format_currency_compact(1234.56) == format_currency_compact("1234.56")


class TestCurrencyFullUSD:
    """Test full USD formatting."""

    def test_grouping(self):
        """Thousands separators with two fraction digits."""
        assert format_currency_full(0) == "$0.00"
        assert format_currency_full(1000) == "$1,000.00"
        assert format_currency_full(999999) == "$999,999.00"
        assert format_currency_full(1234567) == "$1,234,567.00"
        assert format_currency_full(1500000000000) == "$1,500,000,000,000.00"

    def test_rounding(self):
        """Default precision is two fraction digits."""
        assert format_currency_full(1234.567) == "$1,234.57"
        assert format_currency_full(1235.564) == "$1,235.56"
        assert format_currency_full(999.999) == "$1,000.00"
        assert format_currency_full(0.123) == "$0.12"

    def test_fraction_digits(self):
        """Custom precision."""
        assert format_currency_full(1234, "USD", {"minimumFractionDigits": 0, "maximumFractionDigits": 0}) == "$1,234"
        assert format_currency_full(1234, "USD", {"minimumFractionDigits": 3, "maximumFractionDigits": 3}) == "$1,234.000"

    def test_negative_values(self):
        """Sign goes before the $ symbol."""
        assert format_currency_full(-1000) == "-$1,000.00"
        assert format_currency_full(-123.45) == "-$123.45"

    def test_string_input(self):
        """Numeric strings."""
        assert format_currency_full("1e6") == "$1,000,000.00"
        assert format_currency_full("1234.56") == "$1,234.56"


class TestBelowThresholdClamp:
    """Test the "<" clamp for amounts too small to show."""

    def test_usd_clamp(self):
        """Amounts below one cent show as <$0.01."""
        assert format_currency_full(0.001) == "<$0.01"
        assert format_currency_full(0.0099) == "<$0.01"

    def test_clamp_ignores_sign(self):
        """Negative tiny amounts clamp the same way."""
        assert format_currency_full(-0.001) == "<$0.01"

    def test_threshold_follows_maximum_digits(self):
        """The threshold is 10^-maximumFractionDigits."""
        assert format_currency_full(0.0001, "USD", {"minimumFractionDigits": 2, "maximumFractionDigits": 3}) == "<$0.001"
        assert format_currency_full(0.001, "USD", {"minimumFractionDigits": 3, "maximumFractionDigits": 3}) == "$0.001"

    def test_token_clamp(self):
        """Tokens keep the code after the clamped amount."""
        assert format_currency_full(0.001, "USDC") == "<0.01 USDC"

    def test_values_at_threshold_not_clamped(self):
        """The threshold itself and zero render normally."""
        assert format_currency_full(0.01) == "$0.01"
        assert format_currency_full(0) == "$0.00"

    def test_no_clamp_without_fraction_digits(self):
        """maximumFractionDigits=0 disables the clamp."""
        assert format_currency_full(0.001, "USD", {"minimumFractionDigits": 0, "maximumFractionDigits": 0}) == "$0"


class TestTokens:
    """Test token currencies."""

    @pytest.mark.parametrize("code", TOKENS)
    def test_compact(self, code):
        """Code goes after the compact number."""
        assert format_currency_compact(0, code) == f"0.00 {code}"
        assert format_currency_compact(999, code) == f"999.00 {code}"
        assert format_currency_compact(1000, code) == f"1.00K {code}"
        assert format_currency_compact(1500000, code) == f"1.50M {code}"
        assert format_currency_compact(1500000000, code) == f"1.50B {code}"

    @pytest.mark.parametrize("code", TOKENS)
    def test_full(self, code):
        """Code goes after the full number."""
        assert format_currency_full(1000, code) == f"1,000.00 {code}"
        assert format_currency_full(1234567, code) == f"1,234,567.00 {code}"

    @pytest.mark.parametrize("code", TOKENS)
    def test_negative(self, code):
        """Sign stays attached to the number."""
        assert format_currency_compact(-1000, code) == f"-1.00K {code}"
        assert format_currency_compact(-123.45, code) == f"-123.45 {code}"
        assert format_currency_full(-1500000, code) == f"-1,500,000.00 {code}"

    @pytest.mark.parametrize("code", TOKENS)
    def test_custom_precision(self, code):
        """Custom precision."""
        assert format_currency_full(1234, code, {"minimumFractionDigits": 0, "maximumFractionDigits": 0}) == f"1,234 {code}"
        assert format_currency_full(1234, code, {"minimumFractionDigits": 3, "maximumFractionDigits": 3}) == f"1,234.000 {code}"

    def test_any_code_is_a_token(self):
        """There is no allow-list of tokens."""
        assert format_currency_compact(1000, "WHATEVER") == "1.00K WHATEVER"
        assert format_currency_compact(1000, "usd") == "1.00K usd"
        assert format_currency_full(1000, "EUR") == "1,000.00 EUR"

    def test_classification(self):
        """Only USD is fiat."""
        assert CurrencyDisplay.classify("USD") is CurrencyDisplay.FIAT
        assert CurrencyDisplay.classify("USDC") is CurrencyDisplay.TOKEN
        assert CurrencyDisplay.classify("EUR") is CurrencyDisplay.TOKEN


class TestInvalidValues:
    """Test the "-" placeholder."""

    @pytest.mark.parametrize("code", ["USD"] + TOKENS)
    @pytest.mark.parametrize("value", [None, "", "abc", "not a number", "$1000", float("nan")])
    def test_invalid(self, value, code):
        """Invalid values render as "-" for every currency."""
        assert format_currency_compact(value, code) == "-"
        assert format_currency_full(value, code) == "-"


class TestInfinity:
    """Test infinite values."""

    def test_usd(self):
        """$ then ∞."""
        assert format_currency_compact(math.inf) == "$∞"
        assert format_currency_compact(-math.inf) == "-$∞"
        assert format_currency_full(math.inf) == "$∞"
        assert format_currency_full(-math.inf) == "-$∞"

    @pytest.mark.parametrize("code", TOKENS)
    def test_tokens(self, code):
        """∞ then the code."""
        assert format_currency_compact(math.inf, code) == f"∞ {code}"
        assert format_currency_compact(-math.inf, code) == f"-∞ {code}"
        assert format_currency_full(math.inf, code) == f"∞ {code}"
        assert format_currency_full(-math.inf, code) == f"-∞ {code}"


class TestCurrencyValidation:
    """Test currency code validation."""

    @pytest.mark.parametrize("code", ["", "   ", "\t", "\n", " \t\n "])
    def test_blank_currency_raises(self, code):
        """Empty or whitespace-only codes raise InvalidCurrency."""
        with pytest.raises(InvalidCurrency, match="Currency shouldn't be empty string"):
            format_currency_compact(1000, code)
        with pytest.raises(InvalidCurrency, match="Currency shouldn't be empty string"):
            format_currency_full(1000, code)

    @pytest.mark.parametrize("value", [None, float("nan"), "abc", ""])
    def test_currency_checked_before_value(self, value):
        """Currency validation wins over the "-" fallback."""
        with pytest.raises(InvalidCurrency):
            format_currency_compact(value, "")
        with pytest.raises(InvalidCurrency):
            format_currency_full(value, "  ")

    def test_invalid_currency_is_value_error(self):
        """InvalidCurrency is a ValueError."""
        with pytest.raises(ValueError):
            format_currency_compact(1, "")

    def test_non_string_currency(self):
        """Non-string codes raise."""
        with pytest.raises(InvalidCurrency, match="must be a string"):
            format_currency_compact(1000, 840)

    def test_none_means_usd(self):
        """None falls back to USD."""
        assert validate_currency(None) == "USD"
        assert format_currency_compact(1500000, None) == "$1.50M"


class TestInvalidOptions:
    """Test option validation."""

    def test_minimum_above_maximum(self):
        """minimum > maximum raises."""
        with pytest.raises(InvalidFractionDigits):
            format_currency_full(1, "USD", {"minimumFractionDigits": 3, "maximumFractionDigits": 2})

    def test_maximum_below_default_minimum(self):
        """maximum 1 with the default minimum of 2 raises."""
        with pytest.raises(InvalidFractionDigits):
            format_currency_compact(1, "USD", {"maximumFractionDigits": 1})
