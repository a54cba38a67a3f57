"""Tests for parsing text into Decimal values."""

import pytest

from bigdecimal import Decimal, EmptyInput, InvalidDigit, ParseDecimalError, parse, try_parse
from tests.helpers import INVALID_DIGIT_TEXTS, digits_of


class TestParse:
    """Tests for accepted input."""

    def test_integer_and_fraction(self):
        """Text is split at the point."""
        assert digits_of(parse("123.45")) == (True, "123", "45")

    def test_no_point(self):
        """Absent point yields an empty fractional segment."""
        assert digits_of(parse("42")) == (True, "42", "")

    def test_negative(self):
        """Leading minus sets a negative sign."""
        assert digits_of(parse("-3.5")) == (False, "3", "5")

    def test_explicit_plus(self):
        """Leading plus is consumed and keeps the value non-negative."""
        assert digits_of(parse("+3.5")) == (True, "3", "5")

    def test_zeros_preserved(self):
        """Leading and trailing zeros are stored as written."""
        assert digits_of(parse("007.100")) == (True, "007", "100")

    def test_empty_segments(self):
        """Either segment may be empty."""
        assert digits_of(parse(".5")) == (True, "", "5")
        assert digits_of(parse("5.")) == (True, "5", "")
        assert digits_of(parse(".")) == (True, "", "")

    def test_sign_only(self):
        """A lone sign parses to an empty negative value."""
        value = parse("-")
        assert digits_of(value) == (False, "", "")
        assert value.is_empty()

    def test_large_value(self):
        """Length is unbounded."""
        text = "9" * 500 + "." + "1" * 500
        value = parse(text)
        assert len(value.integer_digits) == 500
        assert len(value.fractional_digits) == 500

    def test_from_str(self):
        """Decimal.from_str delegates to parse."""
        assert Decimal.from_str("1.25") == parse("1.25")


class TestParseErrors:
    """Tests for rejected input."""

    def test_empty(self):
        """Zero-length text raises EmptyInput."""
        with pytest.raises(EmptyInput):
            parse("")

    def test_empty_is_parse_error(self):
        """Parse errors share a ValueError base."""
        with pytest.raises(ParseDecimalError):
            parse("")
        with pytest.raises(ValueError):
            parse("x")

    def test_invalid_digit(self):
        """A letter raises InvalidDigit with its position."""
        with pytest.raises(InvalidDigit) as exc_info:
            parse("12a.3")
        assert exc_info.value.position == 2
        assert exc_info.value.char == "a"
        assert exc_info.value.text == "12a.3"

    def test_invalid_digit_in_fraction_position(self):
        """Positions index into the original text, sign included."""
        with pytest.raises(InvalidDigit) as exc_info:
            parse("-1.2.3")
        assert exc_info.value.position == 4
        assert exc_info.value.char == "."

    @pytest.mark.parametrize("text", INVALID_DIGIT_TEXTS)
    def test_rejected(self, text):
        """Malformed text raises InvalidDigit."""
        with pytest.raises(InvalidDigit):
            parse(text)

    def test_non_str_raises_type_error(self):
        """Only str input is accepted."""
        with pytest.raises(TypeError):
            parse(12)  # type: ignore


class TestTryParse:
    """Tests for the non-raising variant."""

    def test_valid(self):
        """Valid text returns a value."""
        assert try_parse("1.5") == parse("1.5")

    def test_invalid_returns_none(self):
        """Invalid or empty text returns None."""
        assert try_parse("") is None
        assert try_parse("1.2.3") is None
