from __future__ import annotations

import math
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from whale_water.config import settings
from whale_water.contracts.water_contract import GeoPoint


AdjustmentType = Literal["none", "snapped", "known_location", "unresolved"]


class ResolutionResult(BaseModel):
    model_config = {"frozen": True}

    point: GeoPoint
    was_adjusted: bool = False
    adjustment_type: AdjustmentType = "none"
    snap_distance_km: Optional[float] = None

    # Carried through untouched; no policy branch keys on it yet
    location_method: str = ""

    @property
    def lat(self) -> float:
        return self.point.lat

    @property
    def lon(self) -> float:
        return self.point.lon


class SightingRecord(BaseModel):
    """One sighting row as handed over by the CSV layer (extra columns kept)."""
    model_config = {"extra": "allow"}

    lat: float
    lon: float
    species: str = "Unknown"
    pod: str = "Unknown"
    direction: str = "unknown"
    location: str = ""
    location_method: str = ""
    confidence: float = Field(default_factory=lambda: settings.default_confidence, description="0..1")
    sighting_index: int = 1

    # Filled in by ingestion
    original_lat: Optional[float] = None
    original_lon: Optional[float] = None
    was_adjusted: bool = False
    adjustment_type: Optional[AdjustmentType] = None
    snap_distance_km: Optional[float] = None

    @field_validator("species", "pod", mode="before")
    @classmethod
    def _unknown_when_blank(cls, v: Any) -> Any:
        return v or "Unknown"

    @field_validator("direction", mode="before")
    @classmethod
    def _direction_when_blank(cls, v: Any) -> Any:
        return v or "unknown"

    @field_validator("location", "location_method", mode="before")
    @classmethod
    def _empty_when_null(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("confidence", mode="before")
    @classmethod
    def _default_confidence(cls, v: Any) -> float:
        # Missing, zero or unparseable confidence falls back to the default
        try:
            f = float(v)
        except (TypeError, ValueError):
            return settings.default_confidence
        if math.isnan(f) or f == 0:
            return settings.default_confidence
        return f

    @field_validator("sighting_index", mode="before")
    @classmethod
    def _default_index(cls, v: Any) -> Any:
        return 1 if v in (None, "", 0) else v


class IngestReport(BaseModel):
    sightings: List[SightingRecord] = []
    counts: Dict[str, int] = {}
    dropped_invalid: int = 0
    dropped_unresolved: int = 0
    dropped_on_land: int = 0

    def summary(self) -> Dict[str, Any]:
        return {
            "kept": len(self.sightings),
            "dropped_invalid": self.dropped_invalid,
            "dropped_unresolved": self.dropped_unresolved,
            "dropped_on_land": self.dropped_on_land,
            **{f"n_{k}": v for k, v in sorted(self.counts.items())},
        }
