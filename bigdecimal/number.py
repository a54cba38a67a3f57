"""Sign-and-magnitude decimal value stored as text digit sequences.

A Decimal holds its integer and fractional digits exactly as they were
written or computed, most significant digit first. Nothing is normalized at
construction: ``Decimal("007", "100")`` keeps its zeros and formats back to
``007.100``. Arithmetic lives in :mod:`bigdecimal.arithmetic`; the operators
here delegate to it with the default configuration.

Usage:
    from bigdecimal import parse

    total = parse("123.45") + parse("1.006")
    str(total)  # "124.456"
"""

from __future__ import annotations

from bigdecimal.digits import strip_leading, strip_trailing, trim_leading, trim_trailing


class Decimal:
    """Immutable arbitrary-precision decimal.

    Attributes:
        sign: True for non-negative, False for negative. Zero may carry
            either sign.
        integer_digits: ASCII digits before the point, leading zeros allowed
        fractional_digits: ASCII digits after the point, trailing zeros allowed
    """

    __slots__ = ("_sign", "_integer_digits", "_fractional_digits")
    _sign: bool
    _integer_digits: str
    _fractional_digits: str

    def __init__(
        self,
        integer_digits: str,
        fractional_digits: str = "",
        sign: bool = True,
    ) -> None:
        """Create a Decimal from raw digit sequences.

        The digit content is trusted; use :func:`bigdecimal.parse` for text
        that has not been validated.

        Raises:
            TypeError: If the digit sequences are not str or sign is not bool
        """
        if not isinstance(integer_digits, str) or not isinstance(fractional_digits, str):
            raise TypeError(
                "Decimal digits must be str, got "
                f"{type(integer_digits).__name__}/{type(fractional_digits).__name__}"
            )
        if not isinstance(sign, bool):
            raise TypeError(f"Decimal sign must be bool, got {type(sign).__name__}")
        self._sign = sign
        self._integer_digits = integer_digits
        self._fractional_digits = fractional_digits

    @property
    def sign(self) -> bool:
        return self._sign

    @property
    def integer_digits(self) -> str:
        return self._integer_digits

    @property
    def fractional_digits(self) -> str:
        return self._fractional_digits

    @property
    def is_negative(self) -> bool:
        return not self._sign

    # --- Construction helpers ---

    @classmethod
    def from_str(cls, text: str) -> Decimal:
        """Parse a Decimal from text.

        Raises:
            EmptyInput: If text is empty
            InvalidDigit: If text contains a non-digit character
        """
        from bigdecimal.parsing import parse

        return parse(text)

    @classmethod
    def zero(cls) -> Decimal:
        """Create a non-negative zero."""
        return cls("0")

    def with_sign(self, sign: bool) -> Decimal:
        """Return a copy carrying ``sign``."""
        if sign == self._sign:
            return self
        return Decimal(self._integer_digits, self._fractional_digits, sign)

    def normalized(self) -> Decimal:
        """Return the trimmed form.

        Leading integer zeros and trailing fractional zeros are removed and an
        all-zero part collapses to "0", so ``007.100`` becomes ``7.1`` and
        ``6`` becomes ``6.0``.
        """
        return Decimal(
            trim_leading(self._integer_digits),
            trim_trailing(self._fractional_digits),
            self._sign,
        )

    # --- Predicates ---

    def is_empty(self) -> bool:
        """True if both digit sequences are empty (e.g. parsed from ".")."""
        return not self._integer_digits and not self._fractional_digits

    def is_zero(self) -> bool:
        """True if the magnitude is zero, regardless of sign."""
        return not strip_leading(self._integer_digits) and not strip_trailing(
            self._fractional_digits
        )

    def __bool__(self) -> bool:
        """True if non-zero."""
        return not self.is_zero()

    # --- Text ---

    def __str__(self) -> str:
        sign = "" if self._sign else "-"
        return f"{sign}{self._integer_digits}.{self._fractional_digits}"

    def __repr__(self) -> str:
        return f"Decimal('{self}')"

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        """Trimmed-magnitude equality; signs must match, so ``-0 != 0``.

        Only Decimals compare equal; str operands are not parsed here so that
        equal values always hash equal.
        """
        from bigdecimal.compare import equals

        if not isinstance(other, Decimal):
            return NotImplemented
        return equals(self, other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash(
            (
                self._sign,
                strip_leading(self._integer_digits),
                strip_trailing(self._fractional_digits),
            )
        )

    def _compare(self, other: object) -> int | None:
        from bigdecimal.compare import compare

        other_dec = _coerce(other)
        if other_dec is None:
            return None
        return compare(self, other_dec)

    def __lt__(self, other: Decimal | str) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other: Decimal | str) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other: Decimal | str) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other: Decimal | str) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result >= 0

    # --- Arithmetic operations ---

    def __add__(self, other: Decimal | str) -> Decimal:
        from bigdecimal.arithmetic import add

        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return add(self, other_dec)

    def __radd__(self, other: str) -> Decimal:
        from bigdecimal.arithmetic import add

        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return add(other_dec, self)

    def __sub__(self, other: Decimal | str) -> Decimal:
        """Subtract other from self."""
        from bigdecimal.arithmetic import subtract

        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return subtract(self, other_dec)

    def __rsub__(self, other: str) -> Decimal:
        """Subtract self from other (other - self)."""
        from bigdecimal.arithmetic import subtract

        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return subtract(other_dec, self)

    def __mul__(self, other: Decimal | str) -> Decimal:
        from bigdecimal.arithmetic import multiply

        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return multiply(self, other_dec)

    def __rmul__(self, other: str) -> Decimal:
        from bigdecimal.arithmetic import multiply

        other_dec = _coerce(other)
        if other_dec is None:
            return NotImplemented
        return multiply(other_dec, self)

    def __neg__(self) -> Decimal:
        """Flip the sign. Zero flips too."""
        return self.with_sign(not self._sign)

    def __pos__(self) -> Decimal:
        """Unary positive (returns self)."""
        return self

    def __abs__(self) -> Decimal:
        """Absolute value."""
        return self.with_sign(True)


def format_decimal(value: Decimal) -> str:
    """Render ``[-]<integer_digits>.<fractional_digits>``.

    The point is always emitted, even with no fractional digits, and no
    zeros are added or removed.
    """
    return str(value)


def _coerce(x: object) -> Decimal | None:
    """Return x as a Decimal, parsing str operands; None for other types."""
    if isinstance(x, Decimal):
        return x
    if isinstance(x, str):
        from bigdecimal.parsing import parse

        return parse(x)
    return None
