"""Move out-of-water points onto (and just inside) the nearest water outline."""
from __future__ import annotations

import logging
from math import sqrt
from typing import Optional

from whale_water.config import settings
from whale_water.contracts.water_contract import GeoPoint, SnapResult
from whale_water.geo.boundary import WaterBoundary

log = logging.getLogger(__name__)


def snap_to_water(
    point: GeoPoint,
    max_snap_distance_km: Optional[float] = None,
    offset_deg: Optional[float] = None,
    boundary: Optional[WaterBoundary] = None,
) -> SnapResult:
    """
    Snap *point* to the nearest water boundary within *max_snap_distance_km*.

    The boundary point is pushed a fixed *offset_deg* further along the
    original->boundary direction (planar lon/lat), since a point exactly on
    an edge is classification-unstable under ray casting.  If the nudged
    point is not water (thin wedges, the self-crossing primary outline) the
    bare boundary point is tried instead.

    Failure (too far, or no candidate classifies as water) returns the
    original point with ``was_snapped=False`` and the distance that was found.
    """
    boundary = boundary or WaterBoundary.get()
    if max_snap_distance_km is None:
        max_snap_distance_km = settings.default_snap_distance_km
    if offset_deg is None:
        offset_deg = settings.snap_offset_deg

    if boundary.is_in_water(point):
        return SnapResult(point=point, was_snapped=False, snap_distance_km=0.0)

    nearest = boundary.nearest_boundary_point(point)

    if nearest.distance_km > max_snap_distance_km:
        log.debug(
            "No snap for (%.5f, %.5f): nearest water %.2f km > %.2f km",
            point.lat, point.lon, nearest.distance_km, max_snap_distance_km,
        )
        return SnapResult(point=point, was_snapped=False, snap_distance_km=nearest.distance_km)

    dx = nearest.point.lon - point.lon
    dy = nearest.point.lat - point.lat
    magnitude = sqrt(dx * dx + dy * dy)

    candidates = []
    if magnitude > 0:
        candidates.append(GeoPoint(
            lat=nearest.point.lat + (dy / magnitude) * offset_deg,
            lon=nearest.point.lon + (dx / magnitude) * offset_deg,
        ))
    candidates.append(nearest.point)

    for snapped in candidates:
        if boundary.is_in_water(snapped):
            return SnapResult(point=snapped, was_snapped=True, snap_distance_km=nearest.distance_km)

    log.debug(
        "No snap for (%.5f, %.5f): boundary point %.2f km away does not classify as water",
        point.lat, point.lon, nearest.distance_km,
    )
    return SnapResult(point=point, was_snapped=False, snap_distance_km=nearest.distance_km)
