"""Random decimal generation and algebraic property checks.

Used by the fuzz script and the property tests; nothing in the value type
depends on this module.

Usage:
    import random
    from bigdecimal.fuzzing import random_decimal_text, run_fuzz

    text = random_decimal_text(random.Random(7))
    report = run_fuzz(iterations=1000, seed=7)
    assert report.passed
"""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass, field

import structlog

from bigdecimal.arithmetic import add, multiply, subtract
from bigdecimal.compare import compare
from bigdecimal.number import Decimal
from bigdecimal.parsing import parse, try_parse

logger = structlog.get_logger()

# Mostly digits, with enough signs, points and junk to exercise rejection
ALPHABET = "0123456789+-. a"
WEIGHTS = [8] * 10 + [1, 1, 2, 1, 1]

DEFAULT_MAX_LEN = 12
MAX_ATTEMPTS = 10_000

ONE = Decimal("1")


def random_decimal_text(rng: random.Random, max_len: int = DEFAULT_MAX_LEN) -> str:
    """Draw random strings until one is accepted by the parser.

    Args:
        rng: Random source (seed it for reproducible runs)
        max_len: Maximum candidate length

    Returns:
        Text that parse() accepts

    Raises:
        RuntimeError: If no candidate parsed within MAX_ATTEMPTS draws
    """
    for _ in range(MAX_ATTEMPTS):
        length = rng.randint(1, max_len)
        candidate = "".join(rng.choices(ALPHABET, weights=WEIGHTS, k=length))
        if try_parse(candidate) is not None:
            return candidate
    raise RuntimeError(f"No parseable decimal text after {MAX_ATTEMPTS} attempts")


def random_decimal(rng: random.Random, max_len: int = DEFAULT_MAX_LEN) -> Decimal:
    """Draw a random Decimal via random_decimal_text()."""
    return parse(random_decimal_text(rng, max_len))


# =============================================================================
# Property checks (each returns a failure message or None)
# =============================================================================


def check_roundtrip(text: str) -> str | None:
    """Formatting then reparsing gives an equal value.

    For text without a leading "+" that contains a point, the formatted text
    must also match the input exactly.
    """
    value = parse(text)
    formatted = str(value)
    reparsed = try_parse(formatted)
    if reparsed is None or reparsed != value:
        return f"roundtrip: {text!r} formatted as {formatted!r} does not reparse equal"
    if not text.startswith("+") and "." in text and formatted != text:
        return f"roundtrip: {text!r} formatted as {formatted!r}"
    return None


def check_identity(a: Decimal) -> str | None:
    """a * 1 == a."""
    product = multiply(a, ONE)
    if product != a:
        return f"identity: {a!r} * 1 = {product!r}"
    return None


def check_commutativity(a: Decimal, b: Decimal) -> str | None:
    """a + b == b + a."""
    left = add(a, b)
    right = add(b, a)
    if left != right:
        return f"commutativity: {a!r} + {b!r} = {left!r} but reversed = {right!r}"
    return None


def check_self_subtraction(a: Decimal) -> str | None:
    """a - a has zero magnitude (sign is not checked)."""
    difference = subtract(a, a)
    if not difference.is_zero():
        return f"self_subtraction: {a!r} - {a!r} = {difference!r}"
    return None


def check_sign_ordering(a: Decimal, b: Decimal) -> str | None:
    """A negative value orders strictly below a non-negative one."""
    if a.sign or not b.sign:
        return None
    if compare(a, b) >= 0:
        return f"sign_ordering: {a!r} not below {b!r}"
    return None


UNARY_CHECKS: list[Callable[[Decimal], str | None]] = [
    check_identity,
    check_self_subtraction,
]
BINARY_CHECKS: list[Callable[[Decimal, Decimal], str | None]] = [
    check_commutativity,
    check_sign_ordering,
]


@dataclass
class FuzzReport:
    """Outcome of a fuzz run."""

    iterations: int
    seed: int | None
    failures: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failures


def run_fuzz(
    iterations: int,
    seed: int | None = None,
    max_len: int = DEFAULT_MAX_LEN,
) -> FuzzReport:
    """Run every property check on randomly drawn operand pairs.

    Args:
        iterations: Number of operand pairs to draw
        seed: Seed for the random source (None for a fresh one)
        max_len: Maximum length of generated text

    Returns:
        FuzzReport listing every failed check
    """
    rng = random.Random(seed)
    report = FuzzReport(iterations=iterations, seed=seed)

    for _ in range(iterations):
        text_a = random_decimal_text(rng, max_len)
        text_b = random_decimal_text(rng, max_len)
        a, b = parse(text_a), parse(text_b)

        results = [check_roundtrip(text_a), check_roundtrip(text_b)]
        results.extend(check(a) for check in UNARY_CHECKS)
        results.extend(check(a, b) for check in BINARY_CHECKS)
        results.append(check_sign_ordering(b, a))

        for failure in results:
            if failure is not None:
                logger.warning("fuzz_property_failed", detail=failure)
                report.failures.append(failure)

    logger.info(
        "fuzz_run_complete",
        iterations=iterations,
        seed=seed,
        failures=len(report.failures),
    )
    return report


__all__ = [
    "random_decimal_text",
    "random_decimal",
    "check_roundtrip",
    "check_identity",
    "check_commutativity",
    "check_self_subtraction",
    "check_sign_ordering",
    "FuzzReport",
    "run_fuzz",
]
