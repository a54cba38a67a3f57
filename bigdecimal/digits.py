"""Digit buffer utilities shared by every arithmetic operation.

Digit sequences are plain ``str`` objects of ASCII digits. Integer digits are
aligned by padding on the left, fractional digits by padding on the right, so
place values line up without changing the numeric value.
"""

from __future__ import annotations

ZERO_CODE = ord("0")


def pad_left(digits: str, length: int) -> str:
    """Left-pad an integer digit sequence with zeros up to ``length``."""
    missing = length - len(digits)
    if missing <= 0:
        return digits
    return "0" * missing + digits


def pad_right(digits: str, length: int) -> str:
    """Right-pad a fractional digit sequence with zeros up to ``length``."""
    missing = length - len(digits)
    if missing <= 0:
        return digits
    return digits + "0" * missing


def align(
    int_a: str, frac_a: str, int_b: str, frac_b: str
) -> tuple[str, str, str, str]:
    """Align two operands to common integer and fractional lengths.

    Returns:
        Tuple of (int_a, frac_a, int_b, frac_b) after padding
    """
    int_len = max(len(int_a), len(int_b))
    frac_len = max(len(frac_a), len(frac_b))
    return (
        pad_left(int_a, int_len),
        pad_right(frac_a, frac_len),
        pad_left(int_b, int_len),
        pad_right(frac_b, frac_len),
    )


def strip_leading(digits: str) -> str:
    """Remove leading zeros, possibly leaving an empty string."""
    return digits.lstrip("0")


def strip_trailing(digits: str) -> str:
    """Remove trailing zeros, possibly leaving an empty string."""
    return digits.rstrip("0")


def trim_leading(digits: str) -> str:
    """Trim leading zeros from an integer result, collapsing all-zero to "0"."""
    return digits.lstrip("0") or "0"


def trim_trailing(digits: str) -> str:
    """Trim trailing zeros from a fractional result, collapsing all-zero to "0"."""
    return digits.rstrip("0") or "0"


def digit_value(char: str) -> int:
    """Numeric value of a single ASCII digit character."""
    return ord(char) - ZERO_CODE


__all__ = [
    "pad_left",
    "pad_right",
    "align",
    "strip_leading",
    "strip_trailing",
    "trim_leading",
    "trim_trailing",
    "digit_value",
]
