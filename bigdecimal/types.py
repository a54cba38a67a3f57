"""Pydantic field types for decimal text.

Models that carry exact amounts as strings can declare them as
``DecimalText`` to reject anything the parser would reject.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from bigdecimal.errors import ParseDecimalError
from bigdecimal.number import Decimal
from bigdecimal.parsing import parse


def validate_decimal_text(value: Any) -> str:
    """Validate that a value is parseable decimal text.

    Args:
        value: Decimal text or a Decimal

    Returns:
        The text form (unchanged for str input, formatted for Decimal input)

    Raises:
        ValueError: If value is not a str/Decimal or does not parse
    """
    if isinstance(value, Decimal):
        return str(value)

    if not isinstance(value, str):
        raise ValueError(f"Decimal text must be string, got {type(value).__name__}")

    try:
        parse(value)
    except ParseDecimalError as err:
        raise ValueError(f"Invalid decimal text: {err}") from err

    return value


# Exact decimal as text, e.g. "-007.100" (stored verbatim)
DecimalText = Annotated[
    str,
    BeforeValidator(validate_decimal_text),
    Field(description="Exact decimal as [sign]digits[.digits] text"),
]


__all__ = ["DecimalText", "validate_decimal_text"]
