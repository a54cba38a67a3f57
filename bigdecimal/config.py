"""Arithmetic configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = ("true", "1", "yes")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.lower() in _TRUTHY


@dataclass(frozen=True)
class ArithmeticConfig:
    """Behavior flags applied at the end of every arithmetic operation.

    The defaults reproduce the plain digit algorithms: a computed zero keeps
    whatever sign the algorithm produced, and sums/differences keep the
    padded digit sequences they were computed on (e.g. ``10 - 3.5`` yields
    ``06.5``). Equality and ordering ignore padding either way.

    Attributes:
        canonical_zero: If True, force a non-negative sign on any result whose
            magnitude is zero, so ``-0`` never escapes an operation.
        trim_results: If True, return sums and differences in trimmed form.
            Products are always trimmed.
    """

    canonical_zero: bool = False
    trim_results: bool = False

    @classmethod
    def from_env(cls) -> ArithmeticConfig:
        """Build a config from environment variables.

        - BIGDECIMAL_CANONICAL_ZERO: Canonicalize zero results (default: false)
        - BIGDECIMAL_TRIM_RESULTS: Trim sums and differences (default: false)
        """
        return cls(
            canonical_zero=_env_flag("BIGDECIMAL_CANONICAL_ZERO", False),
            trim_results=_env_flag("BIGDECIMAL_TRIM_RESULTS", False),
        )


# Default configuration instance
DEFAULT_CONFIG = ArithmeticConfig()
