"""Water containment / coordinate resolution endpoints."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from whale_water.contracts.water_contract import InvalidCoordinateError
from whale_water.core.ingest import resolve_sightings
from whale_water.core.models import IngestReport, ResolutionResult
from whale_water.core.resolver import is_in_water, resolve_coordinates
from whale_water.geo.boundary import WaterBoundary
from whale_water.geo.regions import regions_geojson

log = logging.getLogger(__name__)

router = APIRouter(prefix="/water", tags=["water"])


class WaterCheckOut(BaseModel):
    lat: float
    lon: float
    in_water: bool


class ResolveRequest(BaseModel):
    lat: float
    lon: float
    location_description: str = ""
    location_method: str = ""
    max_snap_distance_km: Optional[float] = Field(default=None, gt=0)


class SightingsRequest(BaseModel):
    # Raw rows; each is validated on its own so one bad row does not fail the batch
    sightings: List[Dict[str, Any]] = Field(..., min_length=1)
    drop_unresolved: bool = True
    land_prefilter: Optional[bool] = None


@router.get("/check", response_model=WaterCheckOut)
def check(lat: float = Query(...), lon: float = Query(...)):
    try:
        return WaterCheckOut(lat=lat, lon=lon, in_water=is_in_water(lat, lon))
    except InvalidCoordinateError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/resolve", response_model=ResolutionResult)
def resolve(req: ResolveRequest):
    try:
        return resolve_coordinates(
            req.lat,
            req.lon,
            req.location_description,
            req.location_method,
            max_snap_distance_km=req.max_snap_distance_km,
        )
    except InvalidCoordinateError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/sightings", response_model=IngestReport)
def resolve_batch(req: SightingsRequest):
    try:
        return resolve_sightings(
            req.sightings,
            drop_unresolved=req.drop_unresolved,
            land_prefilter=req.land_prefilter,
        )
    except Exception as e:
        log.exception("Batch sighting resolution failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/regions")
def regions() -> Dict[str, Any]:
    return regions_geojson(WaterBoundary.get())
