"""
Pytest configuration and shared fixtures.
"""

import pytest

from pointshape.models import Point


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external deps)")


@pytest.fixture
def origin() -> Point:
    """Point at (0, 0) facing 0."""
    return Point(0, 0, 0)
