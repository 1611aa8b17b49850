"""FastAPI backend exposing the water-snapping engine to the ingestion layer."""
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from whale_water.geo.boundary import WaterBoundary
from whale_water.geo.gazetteer import KNOWN_LOCATIONS
from whale_water.routers import water

log = logging.getLogger(__name__)

app = FastAPI(title="Whale Water", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(water.router)


@app.get("/health")
def health():
    boundary = WaterBoundary.get()
    return {
        "status": "ok",
        "regions": len(boundary.regions),
        "known_locations": len(KNOWN_LOCATIONS),
    }
