"""Text to Decimal parsing.

Grammar: ``[+|-] digits ['.' digits]`` where either digit run may be empty.
No exponent, no grouping separators, no whitespace. Digits are stored
exactly as written.
"""

from __future__ import annotations

import structlog

from bigdecimal.errors import EmptyInput, InvalidDigit
from bigdecimal.number import Decimal

logger = structlog.get_logger()


def parse(text: str) -> Decimal:
    """Parse text into a Decimal.

    Args:
        text: Decimal text such as "-007.100"

    Returns:
        Decimal holding the digits verbatim

    Raises:
        TypeError: If text is not a str
        EmptyInput: If text is empty
        InvalidDigit: If a segment contains anything but ASCII digits
    """
    if not isinstance(text, str):
        raise TypeError(f"parse requires str, got {type(text).__name__}")
    if not text:
        logger.debug("decimal_parse_failed", reason="empty")
        raise EmptyInput(text)

    sign = True
    offset = 0
    if text[0] == "-":
        sign = False
        offset = 1
    elif text[0] == "+":
        offset = 1

    body = text[offset:]
    integer, dot, fractional = body.partition(".")

    for index, char in enumerate(integer):
        if not "0" <= char <= "9":
            _fail(text, offset + index)
    frac_offset = offset + len(integer) + len(dot)
    for index, char in enumerate(fractional):
        if not "0" <= char <= "9":
            _fail(text, frac_offset + index)

    return Decimal(integer, fractional, sign)


def try_parse(text: str) -> Decimal | None:
    """Parse text, returning None instead of raising on invalid input.

    Unlike parse(), this never raises for malformed text.
    """
    try:
        return parse(text)
    except (EmptyInput, InvalidDigit):
        return None


def _fail(text: str, position: int) -> None:
    logger.debug(
        "decimal_parse_failed",
        reason="invalid_digit",
        text=text,
        position=position,
    )
    raise InvalidDigit(text, position)


__all__ = ["parse", "try_parse"]
