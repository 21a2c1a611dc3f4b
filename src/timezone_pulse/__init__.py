"""
timezone-pulse: Geospatial and Astronomical Timezone Engine

This package is the computational core behind a world-clock dashboard:
map clicks become timezone ids, the Sun's position becomes a day/night
line, the calendar becomes DST dates, and a typed query becomes a ranked
list of zones.

Components:
    1. RegionResolver (geo)        - coordinate -> nearest catalog zone, boundary rings
    2. SolarTerminator (solar)     - solar declination, terminator, daylight test
    3. DSTTransitionScanner (zones) - DST start/end by day scan
    4. TimezoneSearchRanker (search) - multi-factor fuzzy relevance ranking

All four are pure functions over static tables and their inputs; they can
be called from any thread.

Version: 1.0.0
"""

__version__ = "1.0.0"

from .interfaces.zone_models import (
    GeoPoint,
    TimezoneRegion,
    TimezoneBoundary,
    BoundaryMatch,
    SolarPosition,
    DSTTransition,
    ZoneSnapshot,
    TimezoneCandidate,
    ZoneDescription,
)
from .geo.region_resolver import normalize_point, resolve, boundary_for
from .solar.terminator import declination_and_equation_of_center, terminator, is_daylight
from .zones.dst_scanner import transitions
from .search.ranker import score, rank

__all__ = [
    "GeoPoint",
    "TimezoneRegion",
    "TimezoneBoundary",
    "BoundaryMatch",
    "SolarPosition",
    "DSTTransition",
    "ZoneSnapshot",
    "TimezoneCandidate",
    "ZoneDescription",
    "normalize_point",
    "resolve",
    "boundary_for",
    "declination_and_equation_of_center",
    "terminator",
    "is_daylight",
    "transitions",
    "score",
    "rank",
    "__version__",
]
