"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)

MAX_NUM = "9" * 40
MAX_LESS_ONE_NUM = "9" * 39 + "8"


@pytest.fixture
def max_huge():
    """Largest representable HugeInteger."""
    from hugeint import HugeInteger

    return HugeInteger(MAX_NUM)


@pytest.fixture
def min_huge():
    """Smallest representable HugeInteger."""
    from hugeint import HugeInteger

    return HugeInteger("-" + MAX_NUM)


@pytest.fixture
def max_less_one_huge():
    from hugeint import HugeInteger

    return HugeInteger(MAX_LESS_ONE_NUM)


@pytest.fixture
def min_plus_one_huge():
    from hugeint import HugeInteger

    return HugeInteger("-" + MAX_LESS_ONE_NUM)


@pytest.fixture
def sample_texts():
    """Provide a set of interesting decimal texts."""
    return [
        "0",
        "1",
        "-1",
        "9",
        "10",
        "-10",
        "1239",
        "1240",
        "-1536360",
        "1000000000000000000000",
        "-" + MAX_NUM,
        MAX_NUM,
    ]
