"""Test fixtures."""

import pytest

from ical_marshal import Parameters


@pytest.fixture
def parameters() -> Parameters:
    """Fixture for a set of parameters valid in every version."""
    return Parameters({"LANGUAGE": "en", "X-CUSTOM": ["one", "two"]})
