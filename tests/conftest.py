"""Pytest configuration and fixtures."""

import random

import pytest

from compactbitarray import new_compact_bit_array


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--fast",
        action="store_true",
        default=False,
        help="Skip slow tests (near-limit allocations)",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests when --fast flag is used."""
    if config.getoption("--fast"):
        skip_slow = pytest.mark.skip(reason="skipped with --fast flag")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


@pytest.fixture
def random_bit_array():
    """Build random bit arrays from a fixed seed."""
    rng = random.Random(100)

    def build(bits):
        ba = new_compact_bit_array(bits)
        for i in range(bits):
            ba.set_index(i, rng.random() < 0.5)
        return ba

    return build
