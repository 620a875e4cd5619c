"""Pytest configuration and fixtures for pyHamming tests.

This module provides shared fixtures and configuration for the test suite.
"""

import random

import pytest

from hamming.core.matrix import int_to_bits

# Fixed seed for reproducible tests
# Error injection falls back to the module-level random functions
# when no explicit random.Random is passed
RANDOM_SEED = 42


@pytest.fixture(autouse=True)
def seed_random():
    """Seed the random number generator for reproducible tests.

    This fixture runs automatically before each test so that
    inject_single(), inject_multiple() and Transmission runs without an
    explicit rng behave the same on every run.
    """
    random.seed(RANDOM_SEED)
    yield


@pytest.fixture
def rng():
    """Independent seeded random source."""
    return random.Random(RANDOM_SEED)


@pytest.fixture
def all_nibbles():
    """All 16 possible 4-bit data vectors."""
    return [int_to_bits(value, 4) for value in range(16)]
