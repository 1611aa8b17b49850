"""Centralized settings for whale-water."""
from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "WHALE_WATER_"}

    # Snapping — radius used by the resolution policy vs. the bare snap call
    max_snap_distance_km: float = 3.0
    default_snap_distance_km: float = 5.0
    snap_offset_deg: float = 0.001   # ≈100 m inward nudge at 47-49°N

    # Ingestion annotations
    default_confidence: float = 0.8
    adjusted_confidence_cap: float = 0.6
    land_prefilter: bool = False     # drop obviously inland reports before snapping

    # Batch resolution
    batch_workers: int = 4

    log_level: str = "INFO"


settings = Settings()
