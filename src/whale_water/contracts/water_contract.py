from __future__ import annotations
from dataclasses import dataclass
from math import isnan
from typing import Iterable, Tuple


class InvalidCoordinateError(ValueError):
    """Latitude/longitude outside the valid range (or NaN)."""


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lon: float

    def __post_init__(self) -> None:
        # NaN fails both comparisons, so it is rejected here as well
        if not (-90.0 <= self.lat <= 90.0) or isnan(self.lat):
            raise InvalidCoordinateError(f"latitude out of range: {self.lat!r}")
        if not (-180.0 <= self.lon <= 180.0) or isnan(self.lon):
            raise InvalidCoordinateError(f"longitude out of range: {self.lon!r}")


@dataclass(frozen=True)
class WaterRegion:
    """Closed polygon of navigable water; the closing edge is implicit."""
    name: str
    ring: Tuple[GeoPoint, ...]

    def __post_init__(self) -> None:
        ring = tuple(self.ring)
        # Literal data may repeat the first vertex to close the ring
        if len(ring) > 1 and ring[0] == ring[-1]:
            ring = ring[:-1]
        if len(set(ring)) < 3:
            raise ValueError(f"region {self.name!r} needs at least 3 distinct vertices")
        object.__setattr__(self, "ring", ring)

    @classmethod
    def from_lon_lat(cls, name: str, coords: Iterable[Tuple[float, float]]) -> WaterRegion:
        """Build a region from ``(lon, lat)`` pairs (GeoJSON order)."""
        return cls(name=name, ring=tuple(GeoPoint(lat=lat, lon=lon) for lon, lat in coords))


@dataclass(frozen=True)
class KnownLocation:
    name: str
    point: GeoPoint


@dataclass(frozen=True)
class NearestPoint:
    point: GeoPoint
    distance_km: float


@dataclass(frozen=True)
class SnapResult:
    point: GeoPoint
    was_snapped: bool
    snap_distance_km: float
