"""Hand-authored water polygons for Puget Sound and connected straits.

The outlines are approximate, not surveyed shoreline.  The primary region is
coarse; the supplementary regions cover bays the primary outline misses.
Coordinates are ``(lon, lat)`` pairs.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, TYPE_CHECKING

from shapely.geometry import Polygon, mapping
from shapely.validation import explain_validity

from whale_water.contracts.water_contract import WaterRegion

if TYPE_CHECKING:
    from whale_water.geo.boundary import WaterBoundary

log = logging.getLogger(__name__)


PUGET_SOUND = WaterRegion.from_lon_lat("Puget Sound", [
    # Strait of Juan de Fuca entrance
    (-123.5, 48.4),
    (-123.2, 48.5),
    (-122.8, 48.55),
    (-122.5, 48.5),
    # San Juan Islands
    (-122.4, 48.6),
    (-122.3, 48.7),
    (-122.5, 48.75),
    (-122.7, 48.7),
    (-122.9, 48.6),
    (-123.1, 48.5),
    # Rosario Strait
    (-122.6, 48.45),
    (-122.45, 48.35),
    # Whidbey Island, west side
    (-122.65, 48.3),
    (-122.7, 48.1),
    (-122.75, 47.95),
    # Admiralty Inlet
    (-122.7, 47.85),
    (-122.65, 47.7),
    # Hood Canal
    (-122.75, 47.8),
    (-122.85, 47.7),
    (-122.95, 47.6),
    (-123.0, 47.5),
    (-123.1, 47.35),
    (-123.0, 47.3),
    (-122.85, 47.4),
    (-122.7, 47.5),
    # Kitsap Peninsula, east side
    (-122.55, 47.7),
    (-122.5, 47.8),
    (-122.45, 47.9),
    # Possession Sound
    (-122.35, 48.0),
    (-122.25, 48.1),
    (-122.3, 48.2),
    (-122.4, 48.25),
    # Saratoga Passage
    (-122.5, 48.15),
    (-122.55, 48.0),
    (-122.4, 47.9),
    (-122.35, 47.8),
    (-122.3, 47.7),
    # Seattle waterfront
    (-122.35, 47.65),
    (-122.38, 47.6),
    # East Passage
    (-122.35, 47.55),
    (-122.38, 47.5),
    (-122.4, 47.45),
    # Commencement Bay
    (-122.35, 47.3),
    (-122.4, 47.25),
    (-122.45, 47.2),
    # Tacoma Narrows
    (-122.55, 47.25),
    (-122.6, 47.3),
    # Carr Inlet / Henderson Bay
    (-122.65, 47.35),
    (-122.7, 47.4),
    (-122.65, 47.3),
    (-122.55, 47.2),
    # South Sound
    (-122.65, 47.15),
    (-122.8, 47.1),
    (-122.9, 47.15),
    # West side back to the strait
    (-123.0, 47.2),
    (-123.1, 47.4),
    (-123.2, 47.6),
    (-123.3, 47.8),
    (-123.4, 48.0),
    (-123.5, 48.2),
    (-123.5, 48.4),
])

COMMENCEMENT_BAY = WaterRegion.from_lon_lat("Commencement Bay", [
    (-122.45, 47.28),
    (-122.4, 47.3),
    (-122.38, 47.27),
    (-122.4, 47.24),
    (-122.45, 47.25),
    (-122.45, 47.28),
])

ELLIOTT_BAY = WaterRegion.from_lon_lat("Elliott Bay", [
    (-122.42, 47.63),
    (-122.35, 47.62),
    (-122.33, 47.58),
    (-122.38, 47.58),
    (-122.42, 47.6),
    (-122.42, 47.63),
])

RICH_PASSAGE = WaterRegion.from_lon_lat("Rich Passage / Sinclair Inlet", [
    (-122.55, 47.56),
    (-122.5, 47.54),
    (-122.52, 47.5),
    (-122.58, 47.52),
    (-122.55, 47.56),
])

SUPPLEMENTARY_REGIONS = (COMMENCEMENT_BAY, ELLIOTT_BAY, RICH_PASSAGE)


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------

def to_shapely(region: WaterRegion) -> Polygon:
    return Polygon([(p.lon, p.lat) for p in region.ring])


def describe_regions(boundary: WaterBoundary) -> List[Dict[str, Any]]:
    """
    Summarize each region of a boundary model.

    Validity is informational only: containment uses even-odd ray casting,
    so a self-intersecting outline still classifies deterministically.
    """
    out: List[Dict[str, Any]] = []
    for idx, region in enumerate(boundary.regions):
        poly = to_shapely(region)
        valid = poly.is_valid
        if not valid:
            log.debug("Region %s is not a simple polygon: %s", region.name, explain_validity(poly))
        out.append(
            {
                "name": region.name,
                "role": "primary" if idx == 0 else "supplementary",
                "vertices": len(region.ring),
                "bounds": tuple(round(b, 4) for b in poly.bounds),
                "area_deg2": poly.area,
                "is_valid": valid,
                "validity": "Valid Geometry" if valid else explain_validity(poly),
            }
        )
    return out


def regions_geojson(boundary: WaterBoundary) -> Dict[str, Any]:
    """GeoJSON FeatureCollection of the boundary's regions."""
    features = []
    for idx, region in enumerate(boundary.regions):
        features.append(
            {
                "type": "Feature",
                "properties": {
                    "name": region.name,
                    "role": "primary" if idx == 0 else "supplementary",
                },
                "geometry": mapping(to_shapely(region)),
            }
        )
    return {"type": "FeatureCollection", "features": features}
