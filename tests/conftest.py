import pytest

from colorrange.range_map import build_range_map
from .samples import TEST_COLORS, TEST_RANGES


@pytest.fixture
def temperature_map():
    """12-point table built from unsorted ranges."""
    return build_range_map(TEST_COLORS, TEST_RANGES)


@pytest.fixture
def duplicate_map():
    colors = [[0, 0, 0], [100, 100, 100], [200, 200, 200], [255, 255, 255]]
    return build_range_map(colors, [0, 5, 5, 10])
