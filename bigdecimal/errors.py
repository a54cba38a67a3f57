"""Decimal parse error classes.

Arithmetic never fails on well-formed values, so every error here is raised
while turning text into a Decimal.
"""

from __future__ import annotations


class ParseDecimalError(ValueError):
    """Base error for text that cannot be parsed as a Decimal.

    Attributes:
        text: The rejected input
    """

    def __init__(self, message: str, text: str) -> None:
        super().__init__(message)
        self.text = text


class EmptyInput(ParseDecimalError):
    """Input text had zero length."""

    def __init__(self, text: str = "") -> None:
        super().__init__("Cannot parse Decimal from empty text", text)


class InvalidDigit(ParseDecimalError):
    """Integer or fractional segment contained a non-digit character.

    This covers a second decimal point, embedded signs and whitespace.

    Attributes:
        position: Index of the offending character in the original text
        char: The offending character
    """

    def __init__(self, text: str, position: int) -> None:
        self.position = position
        self.char = text[position]
        super().__init__(
            f"Invalid digit {self.char!r} at position {position} in {text!r}",
            text,
        )
