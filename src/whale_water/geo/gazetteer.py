"""Known in-water coordinates for place names that show up in sighting reports.

Used as a fallback when a reported position is too far from modeled water
to snap.  Matching is plain case-insensitive substring containment and the
first registered name wins, so longer names that contain shorter ones
(e.g. ferry routes) are registered ahead of them.
"""
from __future__ import annotations

from typing import Optional, Sequence, Tuple

from whale_water.contracts.water_contract import GeoPoint, KnownLocation


def _known(name: str, lat: float, lon: float) -> KnownLocation:
    return KnownLocation(name=name, point=GeoPoint(lat=lat, lon=lon))


KNOWN_LOCATIONS: Tuple[KnownLocation, ...] = (
    # Major waterways
    _known("Elliott Bay", 47.605, -122.38),
    _known("Puget Sound", 47.5, -122.45),
    _known("Admiralty Inlet", 48.0, -122.65),
    _known("Hood Canal", 47.7, -122.85),
    _known("Possession Sound", 48.0, -122.35),
    _known("Saratoga Passage", 48.15, -122.5),
    _known("Rosario Strait", 48.45, -122.75),
    _known("Haro Strait", 48.5, -123.15),
    _known("Strait of Juan de Fuca", 48.3, -123.5),

    # Passages and channels
    _known("Colvos Passage", 47.45, -122.48),
    _known("Dalco Passage", 47.34, -122.47),
    _known("Rich Passage", 47.55, -122.52),
    _known("Agate Passage", 47.72, -122.57),
    _known("Tacoma Narrows", 47.27, -122.55),
    _known("East Passage", 47.45, -122.4),
    _known("Deception Pass", 48.41, -122.65),

    # Bays and inlets
    _known("Commencement Bay", 47.27, -122.42),
    _known("Carr Inlet", 47.32, -122.58),
    _known("Henderson Bay", 47.35, -122.58),
    _known("Case Inlet", 47.28, -122.82),
    _known("Sinclair Inlet", 47.55, -122.63),
    _known("Dyes Inlet", 47.62, -122.68),
    _known("Liberty Bay", 47.73, -122.62),
    _known("Eagle Harbor", 47.62, -122.52),
    _known("Quartermaster Harbor", 47.38, -122.46),
    _known("Budd Inlet", 47.07, -122.9),

    # Ferry routes (midpoints)
    _known("Edmonds Kingston", 47.81, -122.45),
    _known("Mukilteo Clinton", 47.95, -122.35),
    _known("Seattle Bainbridge", 47.62, -122.42),
    _known("Seattle Bremerton", 47.58, -122.5),
    _known("Fauntleroy Vashon", 47.52, -122.42),
    _known("Southworth Fauntleroy", 47.52, -122.47),
    _known("Point Defiance Tahlequah", 47.32, -122.5),
    _known("Anacortes", 48.5, -122.68),

    # Points and landmarks (offshore)
    _known("Point Robinson", 47.39, -122.37),
    _known("Point No Point", 47.91, -122.53),
    _known("Alki Point", 47.58, -122.42),
    _known("West Point", 47.66, -122.44),
    _known("Jefferson Head", 47.75, -122.42),
    _known("Meadow Point", 47.7, -122.4),
    _known("Three Tree Point", 47.45, -122.38),
    _known("Restoration Point", 47.56, -122.52),
    _known("Foulweather Bluff", 47.93, -122.6),
    _known("Double Bluff", 47.97, -122.52),
    _known("Marrowstone Point", 48.1, -122.69),
    _known("Bush Point", 48.03, -122.6),
    _known("Lagoon Point", 48.06, -122.53),
    _known("Possession Point", 47.9, -122.38),

    # Whale watching spots
    _known("Lime Kiln", 48.52, -123.15),
    _known("San Juan Channel", 48.53, -123.0),
    _known("Active Pass", 48.87, -123.3),
    _known("Boundary Pass", 48.75, -123.1),

    # Islands (offshore points)
    _known("Vashon Island", 47.42, -122.47),
    _known("Bainbridge Island", 47.65, -122.55),
    _known("Blake Island", 47.54, -122.49),
    _known("Hat Island", 48.02, -122.33),
    _known("Whidbey Island", 48.1, -122.6),
    _known("Camano Island", 48.18, -122.45),
    _known("Fox Island", 47.25, -122.62),
    _known("Anderson Island", 47.17, -122.7),
    _known("McNeil Island", 47.22, -122.68),

    # Shore reference points common in text reports
    _known("Golden Gardens", 47.69, -122.41),
    _known("Carkeek Park", 47.71, -122.38),
    _known("Discovery Park", 47.66, -122.42),
    _known("Shilshole", 47.68, -122.41),
    _known("Mukilteo", 47.95, -122.31),
    _known("Edmonds", 47.81, -122.39),
    _known("Kingston", 47.8, -122.5),
    _known("Manchester", 47.57, -122.55),
    _known("Southworth", 47.51, -122.5),
    _known("Harper", 47.52, -122.52),
    _known("Olalla", 47.43, -122.5),
    _known("Gig Harbor", 47.33, -122.58),
    _known("Tacoma", 47.26, -122.44),
)


def lookup_known_location(
    description: Optional[str],
    locations: Sequence[KnownLocation] = KNOWN_LOCATIONS,
) -> Optional[GeoPoint]:
    """Point of the first registered name contained in *description*, if any."""
    if not description:
        return None

    lowered = description.lower()
    for loc in locations:
        if loc.name.lower() in lowered:
            return loc.point
    return None
