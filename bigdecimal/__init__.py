"""Exact arbitrary-precision decimal arithmetic on text digits."""

from bigdecimal.arithmetic import add, multiply, subtract
from bigdecimal.compare import compare, equals
from bigdecimal.config import DEFAULT_CONFIG, ArithmeticConfig
from bigdecimal.errors import EmptyInput, InvalidDigit, ParseDecimalError
from bigdecimal.number import Decimal, format_decimal
from bigdecimal.parsing import parse, try_parse

__version__ = "0.1.0"
__all__ = [
    # Value type
    "Decimal",
    # Text
    "parse",
    "try_parse",
    "format_decimal",
    # Ordering
    "compare",
    "equals",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    # Configuration
    "ArithmeticConfig",
    "DEFAULT_CONFIG",
    # Errors
    "ParseDecimalError",
    "EmptyInput",
    "InvalidDigit",
    "__version__",
]
