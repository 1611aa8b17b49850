import pytest

from whale_water.contracts.water_contract import WaterRegion
from whale_water.geo.boundary import WaterBoundary


@pytest.fixture
def square_region() -> WaterRegion:
    """2x2 degree square centred on (0, 0)."""
    return WaterRegion.from_lon_lat("square", [(-1, -1), (1, -1), (1, 1), (-1, 1)])


@pytest.fixture
def square_boundary(square_region) -> WaterBoundary:
    return WaterBoundary(square_region)


@pytest.fixture
def two_square_boundary(square_region) -> WaterBoundary:
    far = WaterRegion.from_lon_lat("far square", [(10, 10), (11, 10), (11, 11), (10, 11)])
    return WaterBoundary(square_region, [far])
