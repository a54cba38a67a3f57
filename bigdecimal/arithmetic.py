"""Digit-wise addition, subtraction and multiplication.

All three operations work directly on the text digit sequences, right to
left, with an explicit base-10 carry or borrow. Operands are first aligned:
integer digits are zero-padded on the left and fractional digits on the
right, so equal-length digit strings compare lexicographically in the same
order as their numeric values.

Addition and subtraction call each other when signs differ:
- a + b with opposite signs subtracts the smaller magnitude from the larger
- a - b with opposite signs adds the magnitudes

Results grow instead of overflowing: a carry out of the most significant
digit adds a digit.
"""

from __future__ import annotations

import structlog

from bigdecimal.config import DEFAULT_CONFIG, ArithmeticConfig
from bigdecimal.digits import (
    ZERO_CODE,
    align,
    digit_value,
    pad_left,
    trim_leading,
    trim_trailing,
)
from bigdecimal.number import Decimal

logger = structlog.get_logger()


# =============================================================================
# Digit passes
# =============================================================================


def _render(reversed_digits: list[int]) -> str:
    """Turn least-significant-first digit values into a digit string."""
    return "".join(chr(ZERO_CODE + d) for d in reversed(reversed_digits))


def _add_pass(a: str, b: str, carry: int, out: list[int]) -> int:
    """Add two aligned digit runs right to left, appending to ``out``.

    Returns:
        Carry out of the most significant position
    """
    for a_char, b_char in zip(reversed(a), reversed(b)):
        carry, digit = divmod(digit_value(a_char) + digit_value(b_char) + carry, 10)
        out.append(digit)
    return carry


def _sub_pass(big: str, small: str, borrow: int, out: list[int]) -> int:
    """Subtract aligned digit runs right to left, appending to ``out``.

    Returns:
        Borrow out of the most significant position
    """
    for b_char, s_char in zip(reversed(big), reversed(small)):
        diff = digit_value(b_char) - digit_value(s_char) - borrow
        borrow = 0
        if diff < 0:
            diff += 10
            borrow = 1
        out.append(diff)
    return borrow


def _add_magnitudes(a_int: str, a_frac: str, b_int: str, b_frac: str) -> tuple[str, str]:
    """Sum two aligned magnitudes; the carry threads from fraction to integer."""
    frac_out: list[int] = []
    carry = _add_pass(a_frac, b_frac, 0, frac_out)
    int_out: list[int] = []
    carry = _add_pass(a_int, b_int, carry, int_out)
    if carry:
        int_out.append(carry)
    return _render(int_out), _render(frac_out)


def _sub_magnitudes(
    big_int: str, big_frac: str, small_int: str, small_frac: str
) -> tuple[str, str]:
    """Subtract aligned magnitudes, requires big >= small."""
    frac_out: list[int] = []
    borrow = _sub_pass(big_frac, small_frac, 0, frac_out)
    int_out: list[int] = []
    # big >= small, so the final borrow is always zero
    _sub_pass(big_int, small_int, borrow, int_out)
    return _render(int_out), _render(frac_out)


def _order(a: tuple[str, str], b: tuple[str, str]) -> int:
    """Compare aligned (integer, fraction) pairs."""
    return (a > b) - (a < b)


# =============================================================================
# Signed operations (unfinished results)
# =============================================================================


def _add(a: Decimal, b: Decimal) -> Decimal:
    a_int, a_frac, b_int, b_frac = align(
        a.integer_digits, a.fractional_digits, b.integer_digits, b.fractional_digits
    )

    if a.sign == b.sign:
        int_digits, frac_digits = _add_magnitudes(a_int, a_frac, b_int, b_frac)
        return Decimal(int_digits, frac_digits, a.sign)

    # Opposite signs: the larger magnitude decides the sign, ties are non-negative
    order = _order((a_int, a_frac), (b_int, b_frac))
    if order > 0:
        sign = a.sign
    elif order < 0:
        sign = b.sign
    else:
        sign = True

    difference = _subtract(Decimal(a_int, a_frac), Decimal(b_int, b_frac))
    return difference.with_sign(sign)


def _subtract(a: Decimal, b: Decimal) -> Decimal:
    if not a.sign and b.sign:
        # -|a| - b = -(|a| + b)
        return _add(abs(a), b).with_sign(False)
    if a.sign and not b.sign:
        # a - (-|b|) = a + |b|
        return _add(a, abs(b))

    a_int, a_frac, b_int, b_frac = align(
        a.integer_digits, a.fractional_digits, b.integer_digits, b.fractional_digits
    )
    order = _order((a_int, a_frac), (b_int, b_frac))
    if order >= 0:
        int_digits, frac_digits = _sub_magnitudes(a_int, a_frac, b_int, b_frac)
    else:
        int_digits, frac_digits = _sub_magnitudes(b_int, b_frac, a_int, a_frac)

    # |a| > |b| keeps a's sign; |a| < |b| flips b's sign; equal gives +0
    if order > 0:
        sign = a.sign
    elif order < 0:
        sign = not b.sign
    else:
        sign = True
    return Decimal(int_digits, frac_digits, sign)


def _finish(result: Decimal, config: ArithmeticConfig, trim: bool) -> Decimal:
    if trim:
        result = result.normalized()
    if config.canonical_zero and not result.sign and result.is_zero():
        result = result.with_sign(True)
    return result


# =============================================================================
# Public API
# =============================================================================


def add(a: Decimal, b: Decimal, config: ArithmeticConfig = DEFAULT_CONFIG) -> Decimal:
    """Return a + b.

    Args:
        a: Left operand
        b: Right operand
        config: Result post-processing flags

    Returns:
        Exact sum. Digits stay aligned to the wider operand (plus one integer
        digit on a final carry) unless ``config.trim_results`` is set.
    """
    return _finish(_add(a, b), config, config.trim_results)


def subtract(a: Decimal, b: Decimal, config: ArithmeticConfig = DEFAULT_CONFIG) -> Decimal:
    """Return a - b.

    Args:
        a: Minuend
        b: Subtrahend
        config: Result post-processing flags

    Returns:
        Exact difference. Equal magnitudes of equal sign give a non-negative
        zero; ``-0 - 0`` still yields ``-0`` unless ``config.canonical_zero``.
    """
    return _finish(_subtract(a, b), config, config.trim_results)


def multiply(a: Decimal, b: Decimal, config: ArithmeticConfig = DEFAULT_CONFIG) -> Decimal:
    """Return a * b using schoolbook long multiplication.

    Both operands are aligned and flattened to integer+fraction digit strings
    of the same length L. Each has f fractional digits after alignment, so the
    2L-digit product carries 2f fractional digits.

    Args:
        a: Multiplicand
        b: Multiplier
        config: Result post-processing flags

    Returns:
        Exact product in trimmed form, non-negative iff the signs match
    """
    a_int, a_frac, b_int, b_frac = align(
        a.integer_digits, a.fractional_digits, b.integer_digits, b.fractional_digits
    )
    split = 2 * len(a_frac)
    a_digits = [digit_value(c) for c in a_int + a_frac]
    b_digits = [digit_value(c) for c in b_int + b_frac]
    width = len(a_digits)

    # acc[i + j + 1] receives a[j] * b[i]; acc[i] takes the row carry, and no
    # later row has written there yet, so every cell stays a single digit
    acc = [0] * (2 * width)
    for i in range(width - 1, -1, -1):
        b_digit = b_digits[i]
        if b_digit == 0:
            continue
        carry = 0
        for j in range(width - 1, -1, -1):
            carry, acc[i + j + 1] = divmod(acc[i + j + 1] + a_digits[j] * b_digit + carry, 10)
        acc[i] += carry

    product = "".join(chr(ZERO_CODE + d) for d in acc)
    if len(product) <= split:
        product = pad_left(product, split + 1)
    cut = len(product) - split

    logger.debug(
        "decimal_multiply",
        operand_digits=width,
        fractional_digits=split,
    )

    result = Decimal(
        trim_leading(product[:cut]),
        trim_trailing(product[cut:]),
        a.sign == b.sign,
    )
    return _finish(result, config, False)


__all__ = ["add", "subtract", "multiply"]
