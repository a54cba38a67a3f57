"""Pytest configuration and fixtures."""

import random

import pytest

from bigdecimal import ArithmeticConfig


@pytest.fixture
def rng() -> random.Random:
    """A seeded random source for reproducible generated inputs."""
    return random.Random(1234)


@pytest.fixture
def canonical_config() -> ArithmeticConfig:
    """Config that canonicalizes zero results to a non-negative sign."""
    return ArithmeticConfig(canonical_zero=True)


@pytest.fixture
def trimming_config() -> ArithmeticConfig:
    """Config that trims sums and differences."""
    return ArithmeticConfig(trim_results=True)
