"""Shared test fixtures for shaper2d."""

import matplotlib
import pytest

# Rendering tests must never open a window.
matplotlib.use("Agg")

from shaper2d.model import PolygonSpec  # noqa: E402


@pytest.fixture
def pentagram():
    """Return the ``{5/2}`` pentagram."""
    return PolygonSpec(5, 2)


@pytest.fixture
def pentagon():
    """Return the regular pentagon ``{5}``."""
    return PolygonSpec(5)
