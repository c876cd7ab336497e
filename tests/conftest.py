import pytest

from backend.lx import LXPoint
from config import TestingConfig


@pytest.fixture
def center():
    """Point at the exact center of the view"""
    return LXPoint(0.5, 0.5, 0.5)


@pytest.fixture
def sample_points():
    """Coarse grid over the unit cube, corners and center included"""
    steps = [0.0, 0.1, 0.25, 0.5, 0.75, 0.9, 1.0]
    return [LXPoint(x, y, z) for x in steps for y in steps for z in steps]


@pytest.fixture
def testing_config():
    return TestingConfig()
