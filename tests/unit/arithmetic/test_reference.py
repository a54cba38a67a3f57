"""Cross-check digit arithmetic against the standard library decimal module.

Operands are drawn with the fuzz generator; the reference runs in a
high-precision context so it never rounds.
"""

import decimal
import random

import pytest

from bigdecimal import Decimal, add, multiply, subtract
from bigdecimal.fuzzing import random_decimal

REFERENCE_CONTEXT = decimal.Context(prec=200)


def to_reference(value: Decimal) -> decimal.Decimal:
    """Convert to a stdlib Decimal (empty parts read as zero)."""
    sign = "" if value.sign else "-"
    integer = value.integer_digits or "0"
    fraction = value.fractional_digits or "0"
    return decimal.Decimal(f"{sign}{integer}.{fraction}")


@pytest.mark.parametrize("seed", range(20))
class TestAgainstReference:
    """Each seed draws a batch of operand pairs."""

    PAIRS_PER_SEED = 25

    def _pairs(self, seed: int):
        rng = random.Random(seed)
        for _ in range(self.PAIRS_PER_SEED):
            yield random_decimal(rng, max_len=16), random_decimal(rng, max_len=16)

    def test_add(self, seed):
        """Sums match the reference value."""
        with decimal.localcontext(REFERENCE_CONTEXT):
            for a, b in self._pairs(seed):
                expected = to_reference(a) + to_reference(b)
                assert to_reference(add(a, b)) == expected, (a, b)

    def test_subtract(self, seed):
        """Differences match the reference value."""
        with decimal.localcontext(REFERENCE_CONTEXT):
            for a, b in self._pairs(seed):
                expected = to_reference(a) - to_reference(b)
                assert to_reference(subtract(a, b)) == expected, (a, b)

    def test_multiply(self, seed):
        """Products match the reference value."""
        with decimal.localcontext(REFERENCE_CONTEXT):
            for a, b in self._pairs(seed):
                expected = to_reference(a) * to_reference(b)
                assert to_reference(multiply(a, b)) == expected, (a, b)

    def test_compare(self, seed):
        """Ordering matches the reference for non-zero values."""
        with decimal.localcontext(REFERENCE_CONTEXT):
            for a, b in self._pairs(seed):
                if a.is_zero() or b.is_zero():
                    # -0 < 0 here but not in the reference
                    continue
                ref_a, ref_b = to_reference(a), to_reference(b)
                assert (a < b) == (ref_a < ref_b), (a, b)
                assert (a == b) == (ref_a == ref_b), (a, b)
