"""Planar/spherical geometry primitives for water containment and snapping.

Coordinates are treated as planar ``(lon, lat)`` for containment and
projection, which is adequate at the regional scale of the water model.
Distances are great-circle (haversine) on a sphere.
"""
from __future__ import annotations

from math import atan2, cos, radians, sin, sqrt
from typing import Optional, Sequence

from whale_water.contracts.water_contract import GeoPoint, NearestPoint


EARTH_RADIUS_KM = 6371.0


def point_in_polygon(point: GeoPoint, ring: Sequence[GeoPoint]) -> bool:
    """Even-odd ray casting along the point's latitude.

    The asymmetric ``(yi > lat) != (yj > lat)`` test keeps horizontal edges
    (and therefore ``yi == yj``) out of the crossing formula.
    """
    lat, lon = point.lat, point.lon
    inside = False
    j = len(ring) - 1
    for i in range(len(ring)):
        xi, yi = ring[i].lon, ring[i].lat
        xj, yj = ring[j].lon, ring[j].lat
        if ((yi > lat) != (yj > lat)) and (lon < (xj - xi) * (lat - yi) / (yj - yi) + xi):
            inside = not inside
        j = i
    return inside


def distance_km(p1: GeoPoint, p2: GeoPoint) -> float:
    """Great-circle distance in kilometres between two points."""
    lat1r, lon1r, lat2r, lon2r = map(radians, [p1.lat, p1.lon, p2.lat, p2.lon])
    dlat = lat2r - lat1r
    dlon = lon2r - lon1r
    a = sin(dlat / 2) ** 2 + cos(lat1r) * cos(lat2r) * sin(dlon / 2) ** 2
    # Rounding can push a past 1 for near-antipodal pairs
    a = min(1.0, a)
    return EARTH_RADIUS_KM * 2 * atan2(sqrt(a), sqrt(1 - a))


def nearest_point_on_segment(point: GeoPoint, seg_a: GeoPoint, seg_b: GeoPoint) -> GeoPoint:
    """Closest point to *point* on segment a-b, projected in (lon, lat) space."""
    dx = seg_b.lon - seg_a.lon
    dy = seg_b.lat - seg_a.lat

    if dx == 0 and dy == 0:
        return seg_a

    t = ((point.lon - seg_a.lon) * dx + (point.lat - seg_a.lat) * dy) / (dx * dx + dy * dy)
    t = max(0.0, min(1.0, t))

    return GeoPoint(lat=seg_a.lat + t * dy, lon=seg_a.lon + t * dx)


def nearest_point_on_polygon(point: GeoPoint, ring: Sequence[GeoPoint]) -> NearestPoint:
    """
    Nearest boundary point of a ring, scanning every edge including the
    implicit closing edge.

    Ties keep the first edge encountered in ring order.
    """
    best: Optional[NearestPoint] = None
    n = len(ring)
    for i in range(n):
        a = ring[i]
        b = ring[(i + 1) % n]
        candidate = nearest_point_on_segment(point, a, b)
        d = distance_km(point, candidate)
        if best is None or d < best.distance_km:
            best = NearestPoint(point=candidate, distance_km=d)

    if best is None:
        raise ValueError("ring has no vertices")
    return best
