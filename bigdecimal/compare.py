"""Ordering and equality between Decimals.

Both operate on trimmed magnitudes: leading integer zeros and trailing
fractional zeros are ignored, so ``1.1`` and ``001.10`` are equal and compare
equal. Signs are never ignored: ``-0`` sorts below ``0`` and is not equal
to it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bigdecimal.digits import strip_leading, strip_trailing

if TYPE_CHECKING:
    from bigdecimal.number import Decimal


def _cmp(a: str | int, b: str | int) -> int:
    return (a > b) - (a < b)


def compare_magnitude(a: Decimal, b: Decimal) -> int:
    """Compare |a| with |b|.

    Returns:
        -1, 0 or 1
    """
    a_int = strip_leading(a.integer_digits)
    b_int = strip_leading(b.integer_digits)

    # Longer integer part is the larger magnitude
    result = _cmp(len(a_int), len(b_int))
    if result:
        return result

    # Same length: digit-wise comparison is numeric comparison
    result = _cmp(a_int, b_int)
    if result:
        return result

    a_frac = strip_trailing(a.fractional_digits)
    b_frac = strip_trailing(b.fractional_digits)
    shared = min(len(a_frac), len(b_frac))
    result = _cmp(a_frac[:shared], b_frac[:shared])
    if result:
        return result

    # Equal up to the shorter fraction: the longer one has a non-zero tail,
    # e.g. 0.012 > 0.01
    return _cmp(len(a_frac), len(b_frac))


def compare(a: Decimal, b: Decimal) -> int:
    """Total order between two Decimals.

    Returns:
        -1 if a < b, 0 if equal, 1 if a > b
    """
    if a.sign != b.sign:
        return 1 if a.sign else -1
    result = compare_magnitude(a, b)
    return result if a.sign else -result


def equals(a: Decimal, b: Decimal) -> bool:
    """Trimmed-digit equality with an exact sign match."""
    return (
        a.sign == b.sign
        and strip_leading(a.integer_digits) == strip_leading(b.integer_digits)
        and strip_trailing(a.fractional_digits) == strip_trailing(b.fractional_digits)
    )


__all__ = ["compare", "compare_magnitude", "equals"]
