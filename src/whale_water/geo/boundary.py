"""Union-of-polygons water model: primary region plus supplementary bays."""
from __future__ import annotations

from typing import Optional, Sequence, Tuple

from whale_water.contracts.water_contract import GeoPoint, NearestPoint, WaterRegion
from whale_water.geo.kernel import nearest_point_on_polygon, point_in_polygon
from whale_water.geo.regions import PUGET_SOUND, SUPPLEMENTARY_REGIONS


class WaterBoundary:
    """Immutable set of water regions; a point is water if any region holds it."""

    _instance: Optional[WaterBoundary] = None

    def __init__(
        self,
        primary: WaterRegion,
        supplementary: Sequence[WaterRegion] = (),
    ):
        self._regions: Tuple[WaterRegion, ...] = (primary, *supplementary)

    @classmethod
    def get(cls) -> WaterBoundary:
        """Shared default model built from the static Puget Sound data."""
        if cls._instance is None:
            cls._instance = cls(PUGET_SOUND, SUPPLEMENTARY_REGIONS)
        return cls._instance

    @property
    def primary(self) -> WaterRegion:
        return self._regions[0]

    @property
    def supplementary(self) -> Tuple[WaterRegion, ...]:
        return self._regions[1:]

    @property
    def regions(self) -> Tuple[WaterRegion, ...]:
        return self._regions

    # ------------------------------------------------------------------

    def is_in_water(self, point: GeoPoint) -> bool:
        return any(point_in_polygon(point, region.ring) for region in self._regions)

    def nearest_boundary_point(self, point: GeoPoint) -> NearestPoint:
        """Closest point on any region outline (first region wins ties)."""
        best: Optional[NearestPoint] = None
        for region in self._regions:
            candidate = nearest_point_on_polygon(point, region.ring)
            if best is None or candidate.distance_km < best.distance_km:
                best = candidate
        return best


def is_in_water(point: GeoPoint) -> bool:
    return WaterBoundary.get().is_in_water(point)


def nearest_water_boundary_point(point: GeoPoint) -> NearestPoint:
    return WaterBoundary.get().nearest_boundary_point(point)
