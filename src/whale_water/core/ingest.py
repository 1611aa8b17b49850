"""Apply coordinate resolution to a batch of sighting records."""
from __future__ import annotations

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from whale_water.config import settings
from whale_water.contracts.water_contract import GeoPoint, InvalidCoordinateError
from whale_water.core.models import IngestReport, ResolutionResult, SightingRecord
from whale_water.core.resolver import resolve_coordinates

log = logging.getLogger(__name__)


# (min_lat, max_lat, min_lon, max_lon), exclusive bounds
_INLAND_BOXES = (
    (47.52, 47.62, -122.70, -122.60),  # Bremerton / Kitsap core
    (47.58, 47.68, -122.36, -122.28),  # Seattle core
    (47.40, 47.47, -122.47, -122.43),  # Vashon Island core
)
_MIN_LON = -123.3  # Olympic Peninsula interior
_MAX_LAT = 49.0    # Canadian mainland
_MIN_LAT = 47.0    # south of Olympia


def is_likely_on_land(lat: float, lon: float) -> bool:
    """Coarse screen for reports that are obviously inland or out of area."""
    for min_lat, max_lat, min_lon, max_lon in _INLAND_BOXES:
        if min_lat < lat < max_lat and min_lon < lon < max_lon:
            return True
    return lon < _MIN_LON or lat > _MAX_LAT or lat < _MIN_LAT


def parse_sighting(row: Union[SightingRecord, Mapping[str, Any]]) -> Optional[SightingRecord]:
    """Validate one raw row; rows without usable coordinates give ``None``."""
    if isinstance(row, SightingRecord):
        return row
    try:
        return SightingRecord(**row)
    except ValidationError as exc:
        log.warning("Dropping unparseable sighting row: %s", exc.errors()[0].get("msg", exc))
        return None


def annotate_sighting(
    record: SightingRecord,
    result: ResolutionResult,
    confidence_cap: Optional[float] = None,
) -> SightingRecord:
    """Return a copy of *record* moved to the resolved point.

    Adjusted records keep at most *confidence_cap* confidence.
    """
    if confidence_cap is None:
        confidence_cap = settings.adjusted_confidence_cap

    confidence = record.confidence
    if result.was_adjusted:
        confidence = min(confidence, confidence_cap)

    return record.model_copy(
        update={
            "lat": result.lat,
            "lon": result.lon,
            "original_lat": record.lat,
            "original_lon": record.lon,
            "was_adjusted": result.was_adjusted,
            "adjustment_type": result.adjustment_type,
            "snap_distance_km": result.snap_distance_km,
            "confidence": confidence,
        }
    )


def _resolve_one(
    record: SightingRecord, land_prefilter: bool
) -> Tuple[str, SightingRecord, Optional[ResolutionResult]]:
    try:
        GeoPoint(lat=record.lat, lon=record.lon)
    except InvalidCoordinateError as exc:
        log.warning("Dropping sighting %s (%s): %s", record.sighting_index, record.species, exc)
        return "invalid", record, None

    if land_prefilter and is_likely_on_land(record.lat, record.lon):
        return "land", record, None

    result = resolve_coordinates(
        record.lat,
        record.lon,
        record.location,
        record.location_method,
    )
    return "ok", record, result


def resolve_sightings(
    records: Iterable[Union[SightingRecord, Mapping[str, Any]]],
    max_workers: Optional[int] = None,
    drop_unresolved: bool = True,
    confidence_cap: Optional[float] = None,
    land_prefilter: Optional[bool] = None,
) -> IngestReport:
    """
    Resolve every record's coordinates, fanning out over a thread pool.

    *records* may be validated ``SightingRecord`` objects or raw row dicts.
    Output order follows input order.  Rows that fail validation or carry
    out-of-range coordinates are always dropped; unresolved ones are dropped
    unless *drop_unresolved* is False.  With *land_prefilter* (defaults to
    ``settings.land_prefilter``) obviously inland reports are dropped before
    any snapping is attempted.
    """
    if land_prefilter is None:
        land_prefilter = settings.land_prefilter

    parsed = [parse_sighting(row) for row in records]
    valid = [r for r in parsed if r is not None]
    dropped_invalid = len(parsed) - len(valid)
    if not valid:
        return IngestReport(dropped_invalid=dropped_invalid)

    workers = max_workers or settings.batch_workers
    with ThreadPoolExecutor(max_workers=workers) as pool:
        resolved = list(pool.map(lambda r: _resolve_one(r, land_prefilter), valid))

    counts: Counter = Counter()
    kept: List[SightingRecord] = []
    dropped_unresolved = 0
    dropped_on_land = 0

    for status, record, result in resolved:
        if status == "invalid":
            dropped_invalid += 1
            continue
        if status == "land":
            dropped_on_land += 1
            continue
        counts[result.adjustment_type] += 1
        if result.adjustment_type == "unresolved" and drop_unresolved:
            dropped_unresolved += 1
            continue
        kept.append(annotate_sighting(record, result, confidence_cap))

    if dropped_on_land:
        log.info(
            "Filtered %d likely land-based sightings (%d remain)",
            dropped_on_land, len(valid) - dropped_on_land,
        )
    if dropped_invalid or dropped_unresolved:
        log.info(
            "Dropped %d invalid and %d unresolved sightings (%d kept)",
            dropped_invalid, dropped_unresolved, len(kept),
        )

    return IngestReport(
        sightings=kept,
        counts=dict(counts),
        dropped_invalid=dropped_invalid,
        dropped_unresolved=dropped_unresolved,
        dropped_on_land=dropped_on_land,
    )
