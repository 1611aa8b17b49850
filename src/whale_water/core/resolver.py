"""Per-sighting coordinate decision: keep, snap, gazetteer fallback, or unresolved."""
from __future__ import annotations

import logging
from typing import Optional

from whale_water.config import settings
from whale_water.contracts.water_contract import GeoPoint
from whale_water.core.models import ResolutionResult
from whale_water.geo.boundary import WaterBoundary
from whale_water.geo.gazetteer import lookup_known_location
from whale_water.geo.snapping import snap_to_water

log = logging.getLogger(__name__)


def is_in_water(lat: float, lon: float) -> bool:
    """Raises ``InvalidCoordinateError`` for out-of-range or NaN input."""
    return WaterBoundary.get().is_in_water(GeoPoint(lat=lat, lon=lon))


def resolve_coordinates(
    lat: float,
    lon: float,
    location_description: str = "",
    location_method: str = "",
    max_snap_distance_km: Optional[float] = None,
    boundary: Optional[WaterBoundary] = None,
) -> ResolutionResult:
    """
    Decide where a reported sighting should be plotted.

    Order of attempts:
      1. already in water        -> ``none``
      2. snap within the radius  -> ``snapped`` (with distance)
      3. place name in the text  -> ``known_location`` (gazetteer point)
      4. otherwise               -> ``unresolved`` (original point)

    Out-of-range input raises ``InvalidCoordinateError``; unresolved is a
    normal result, not an error.
    """
    point = GeoPoint(lat=lat, lon=lon)
    boundary = boundary or WaterBoundary.get()
    if max_snap_distance_km is None:
        max_snap_distance_km = settings.max_snap_distance_km

    if boundary.is_in_water(point):
        return ResolutionResult(point=point, location_method=location_method)

    snapped = snap_to_water(point, max_snap_distance_km, boundary=boundary)
    if snapped.was_snapped:
        log.debug(
            "Snapped (%.5f, %.5f) -> (%.5f, %.5f), %.3f km",
            lat, lon, snapped.point.lat, snapped.point.lon, snapped.snap_distance_km,
        )
        return ResolutionResult(
            point=snapped.point,
            was_adjusted=True,
            adjustment_type="snapped",
            snap_distance_km=snapped.snap_distance_km,
            location_method=location_method,
        )

    known = lookup_known_location(location_description)
    if known is not None:
        log.debug("Gazetteer match for %r -> (%.5f, %.5f)", location_description, known.lat, known.lon)
        return ResolutionResult(
            point=known,
            was_adjusted=True,
            adjustment_type="known_location",
            location_method=location_method,
        )

    log.debug("Unresolved (%.5f, %.5f), nearest water %.2f km", lat, lon, snapped.snap_distance_km)
    return ResolutionResult(
        point=point,
        adjustment_type="unresolved",
        location_method=location_method,
    )
