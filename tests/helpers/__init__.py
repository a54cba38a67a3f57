"""Test helpers module for shared test utilities.

- constants: Sample valid and invalid decimal texts
- factories: Value construction shortcuts
"""

from tests.helpers.constants import FIXPOINT_TEXTS, INVALID_DIGIT_TEXTS
from tests.helpers.factories import d, digits_of

__all__ = [
    # Constants
    "FIXPOINT_TEXTS",
    "INVALID_DIGIT_TEXTS",
    # Factories
    "d",
    "digits_of",
]
