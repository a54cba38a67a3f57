"""Tests for digit buffer padding and trimming helpers."""

from bigdecimal.digits import (
    align,
    digit_value,
    pad_left,
    pad_right,
    strip_leading,
    strip_trailing,
    trim_leading,
    trim_trailing,
)


class TestPadding:
    """Tests for zero padding."""

    def test_pad_left(self):
        """Integer digits are padded on the left."""
        assert pad_left("12", 5) == "00012"

    def test_pad_right(self):
        """Fractional digits are padded on the right."""
        assert pad_right("12", 5) == "12000"

    def test_pad_noop_when_long_enough(self):
        """Padding never truncates."""
        assert pad_left("12345", 3) == "12345"
        assert pad_right("12345", 5) == "12345"

    def test_pad_empty(self):
        """Empty sequences pad to all zeros."""
        assert pad_left("", 2) == "00"
        assert pad_right("", 0) == ""

    def test_align(self):
        """align() pads both parts of both operands to common lengths."""
        assert align("123", "45", "1", "006") == ("123", "450", "001", "006")


class TestTrimming:
    """Tests for zero trimming."""

    def test_trim_leading(self):
        """Leading zeros are dropped from integer digits."""
        assert trim_leading("00120") == "120"

    def test_trim_trailing(self):
        """Trailing zeros are dropped from fractional digits."""
        assert trim_trailing("02100") == "021"

    def test_trim_all_zero_collapses(self):
        """An all-zero or empty sequence collapses to a single zero."""
        assert trim_leading("0000") == "0"
        assert trim_trailing("000") == "0"
        assert trim_leading("") == "0"

    def test_strip_can_empty(self):
        """strip_* helpers return an empty string for all-zero input."""
        assert strip_leading("000") == ""
        assert strip_trailing("000") == ""
        assert strip_leading("0102") == "102"
        assert strip_trailing("1020") == "102"


class TestDigitHelpers:
    """Tests for digit value conversion."""

    def test_digit_value(self):
        """Digit characters map to their numeric value."""
        assert [digit_value(c) for c in "0123456789"] == list(range(10))
