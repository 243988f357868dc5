"""Pytest fixtures for type-size-calculator tests."""

import pytest

from typesize.geometry import ScreenSpec
from typesize.presets import CalculatorState


@pytest.fixture
def hd_24() -> ScreenSpec:
    """Return a 24-inch 1080p screen."""
    return ScreenSpec(1920, 1080, 24)


@pytest.fixture
def uhd_55() -> ScreenSpec:
    """Return a 55-inch 4K screen."""
    return ScreenSpec(3840, 2160, 55)


@pytest.fixture
def default_state() -> CalculatorState:
    """Return the calculator's starting state."""
    return CalculatorState()
