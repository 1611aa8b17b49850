"""
Snapping out-of-water points onto the water outline.
"""
import pytest

from whale_water.contracts.water_contract import GeoPoint, WaterRegion
from whale_water.core.resolver import resolve_coordinates
from whale_water.geo.boundary import WaterBoundary, is_in_water
from whale_water.geo.snapping import snap_to_water


class TestSnapToWater:
    def test_in_water_is_noop(self):
        p = GeoPoint(lat=47.60, lon=-122.40)
        result = snap_to_water(p, 3.0)
        assert result.point is p
        assert not result.was_snapped
        assert result.snap_distance_km == 0.0

    def test_bremerton_snaps_into_water(self):
        p = GeoPoint(lat=47.57, lon=-122.65)
        result = snap_to_water(p, 3.0)
        assert result.was_snapped
        assert 0.1 < result.snap_distance_km < 0.3
        assert is_in_water(result.point)
        assert result.point.lon == pytest.approx(-122.6476, abs=1e-4)
        assert result.point.lat == pytest.approx(47.5682, abs=1e-4)

    def test_too_far_returns_original(self):
        p = GeoPoint(lat=46.5, lon=-122.0)
        result = snap_to_water(p, 3.0)
        assert not result.was_snapped
        assert result.point == p
        assert result.snap_distance_km > 3.0

    def test_default_radius(self):
        # ~0.18 km away: within the 5 km default
        assert snap_to_water(GeoPoint(lat=47.57, lon=-122.65)).was_snapped


class TestSnapGeometry:
    def test_offset_pushes_inside(self, square_boundary):
        result = snap_to_water(GeoPoint(lat=0, lon=1.01), 5.0, boundary=square_boundary)
        assert result.was_snapped
        assert result.snap_distance_km == pytest.approx(1.112, abs=1e-3)
        assert result.point.lon == pytest.approx(0.999)
        assert result.point.lat == pytest.approx(0.0)
        assert square_boundary.is_in_water(result.point)

    def test_custom_offset(self, square_boundary):
        result = snap_to_water(GeoPoint(lat=0, lon=1.01), 5.0, offset_deg=0.1, boundary=square_boundary)
        assert result.point.lon == pytest.approx(0.9)

    def test_beyond_radius_not_snapped(self, square_boundary):
        result = snap_to_water(GeoPoint(lat=0, lon=1.01), 1.0, boundary=square_boundary)
        assert not result.was_snapped
        assert result.point == GeoPoint(lat=0, lon=1.01)

    def test_point_on_outside_edge_not_snapped(self, square_boundary):
        # Top edge classifies as outside and the nearest boundary point is the point itself
        p = GeoPoint(lat=1, lon=0)
        result = snap_to_water(p, 5.0, boundary=square_boundary)
        assert not result.was_snapped
        assert result.snap_distance_km == 0.0
        assert result.point == p

    def test_thin_strip_falls_back_to_boundary_point(self):
        # Strip narrower than the offset: the nudged point overshoots the far edge
        strip = WaterBoundary(WaterRegion.from_lon_lat("strip", [(0, -1), (0.0005, -1), (0.0005, 1), (0, 1)]))
        result = snap_to_water(GeoPoint(lat=0, lon=-0.01), 5.0, boundary=strip)
        assert result.was_snapped
        assert result.point == GeoPoint(lat=0.0, lon=0.0)
        assert strip.is_in_water(result.point)


class TestSnappedPointsAreWater:
    def test_grid_over_puget_sound(self):
        """Every snapped position across the modeled area classifies as water."""
        checked = 0
        for i in range(96):
            lat = 47.0 + i * 0.02
            for j in range(71):
                lon = -123.6 + j * 0.02
                result = resolve_coordinates(lat, lon)
                if result.adjustment_type != "snapped":
                    continue
                checked += 1
                assert is_in_water(result.point), (lat, lon, result.point, result.snap_distance_km)
        assert checked > 0
