#!/usr/bin/env python3
"""
Timezone Catalog Constants - Central Reference for the Map Engine

================================================================================
PURPOSE
================================================================================
Single source of truth for the static tables the map engine works from:
region anchors (nearest-city lookup), curated boundary rings, the alias
rules that map un-curated zones onto a curated boundary, the related-zone
groups, and the popular-zone set used by search ranking.

All tables are immutable and built once at import time. Nothing rewrites
them at runtime.

================================================================================
REGION ANCHORS
================================================================================
One anchor per major city, about fifty in total. Resolution is
nearest-anchor in plain (lat, lng) space, so the catalog density sets the
effective resolution: city-level, not boundary-accurate.

    Continent      │ Anchors
    ───────────────┼─────────
    North America  │ 9
    South America  │ 4
    Europe         │ 15
    Africa         │ 5
    Asia           │ 13
    Oceania        │ 8

================================================================================
BOUNDARY RINGS
================================================================================
Twelve simplified polygons, stored as (lng, lat) pairs because that is the
(x, y) order map renderers draw in. Each ring is closed (first == last).
These are visual approximations of the zone clusters, not cartographic
boundaries.

================================================================================
ALIAS RULES
================================================================================
Zones without their own ring borrow one from a curated zone. Rules are
evaluated in order (America, Europe, Asia, Australia); the first match wins.
Each continent also carries a colour-only fallback for zones that are not
members of any curated cluster. Unmatched ids get DEFAULT_COLOR and no ring.

================================================================================
REVISION HISTORY
================================================================================
2025-03-01: Related-zone groups added for map highlighting
2025-02-10: Alias cascade rewritten as an ordered rule table
2025-01-20: Initial tables extracted from the map view
"""

from typing import Dict, FrozenSet, Tuple

from ..interfaces.zone_models import GeoPoint, TimezoneRegion, TimezoneBoundary

# =============================================================================
# COORDINATE LIMITS
# =============================================================================

MAX_ABS_LATITUDE = 85.0      # Clamp to avoid polar singularities
LONGITUDE_SPAN = 360.0

# =============================================================================
# COLORS
# =============================================================================

DEFAULT_COLOR = '#6B7280'    # gray

AMERICA_FALLBACK_COLOR = '#3b82f6'     # blue
EUROPE_FALLBACK_COLOR = '#f97316'      # orange
ASIA_FALLBACK_COLOR = '#a855f7'        # purple
AUSTRALIA_FALLBACK_COLOR = '#06b6d4'   # cyan
PACIFIC_FALLBACK_COLOR = '#0ea5e9'     # sky blue
AFRICA_FALLBACK_COLOR = '#d946ef'      # fuchsia


def _region(zone_id: str, name: str, lat: float, lng: float) -> TimezoneRegion:
    return TimezoneRegion(id=zone_id, display_name=name, anchor=GeoPoint(lat=lat, lng=lng))


# =============================================================================
# REGION ANCHORS
# =============================================================================

TIMEZONE_REGIONS: Tuple[TimezoneRegion, ...] = (
    # North America
    _region('America/Los_Angeles', 'Los Angeles', 34.05, -118.24),
    _region('America/Vancouver', 'Vancouver', 49.28, -123.12),
    _region('America/Denver', 'Denver', 39.74, -104.99),
    _region('America/Phoenix', 'Phoenix', 33.45, -112.07),
    _region('America/Chicago', 'Chicago', 41.88, -87.63),
    _region('America/Mexico_City', 'Mexico City', 19.43, -99.13),
    _region('America/New_York', 'New York', 40.71, -74.01),
    _region('America/Toronto', 'Toronto', 43.65, -79.38),
    _region('America/Halifax', 'Halifax', 44.65, -63.58),

    # South America
    _region('America/Santiago', 'Santiago', -33.45, -70.67),
    _region('America/Sao_Paulo', 'São Paulo', -23.55, -46.63),
    _region('America/Argentina/Buenos_Aires', 'Buenos Aires', -34.61, -58.38),
    _region('America/Lima', 'Lima', -12.05, -77.04),

    # Europe
    _region('Europe/London', 'London', 51.51, -0.13),
    _region('Europe/Lisbon', 'Lisbon', 38.72, -9.13),
    _region('Europe/Dublin', 'Dublin', 53.35, -6.26),
    _region('Europe/Paris', 'Paris', 48.85, 2.35),
    _region('Europe/Madrid', 'Madrid', 40.42, -3.70),
    _region('Europe/Rome', 'Rome', 41.90, 12.50),
    _region('Europe/Berlin', 'Berlin', 52.52, 13.40),
    _region('Europe/Amsterdam', 'Amsterdam', 52.37, 4.89),
    _region('Europe/Zurich', 'Zurich', 47.38, 8.54),
    _region('Europe/Stockholm', 'Stockholm', 59.33, 18.06),
    _region('Europe/Helsinki', 'Helsinki', 60.17, 24.94),
    _region('Europe/Warsaw', 'Warsaw', 52.23, 21.01),
    _region('Europe/Athens', 'Athens', 37.98, 23.73),
    _region('Europe/Istanbul', 'Istanbul', 41.01, 28.97),
    _region('Europe/Moscow', 'Moscow', 55.75, 37.62),

    # Africa
    _region('Africa/Lagos', 'Lagos', 6.45, 3.40),
    _region('Africa/Cairo', 'Cairo', 30.04, 31.24),
    _region('Africa/Johannesburg', 'Johannesburg', -26.20, 28.05),
    _region('Africa/Nairobi', 'Nairobi', -1.29, 36.82),
    _region('Africa/Casablanca', 'Casablanca', 33.57, -7.59),

    # Asia
    _region('Asia/Dubai', 'Dubai', 25.20, 55.27),
    _region('Asia/Riyadh', 'Riyadh', 24.71, 46.67),
    _region('Asia/Karachi', 'Karachi', 24.86, 67.01),
    _region('Asia/Kolkata', 'Mumbai', 19.08, 72.88),     # Mumbai has no zone of its own
    _region('Asia/Kolkata', 'New Delhi', 28.61, 77.21),
    _region('Asia/Dhaka', 'Dhaka', 23.76, 90.39),
    _region('Asia/Bangkok', 'Bangkok', 13.75, 100.50),
    _region('Asia/Jakarta', 'Jakarta', -6.21, 106.85),
    _region('Asia/Singapore', 'Singapore', 1.35, 103.82),
    _region('Asia/Hong_Kong', 'Hong Kong', 22.32, 114.17),
    _region('Asia/Shanghai', 'Shanghai', 31.23, 121.47),
    _region('Asia/Seoul', 'Seoul', 37.57, 126.98),
    _region('Asia/Tokyo', 'Tokyo', 35.68, 139.76),

    # Oceania
    _region('Australia/Perth', 'Perth', -31.95, 115.86),
    _region('Australia/Adelaide', 'Adelaide', -34.93, 138.60),
    _region('Australia/Melbourne', 'Melbourne', -37.81, 144.96),
    _region('Australia/Sydney', 'Sydney', -33.87, 151.21),
    _region('Australia/Brisbane', 'Brisbane', -27.47, 153.03),
    _region('Pacific/Auckland', 'Auckland', -36.85, 174.76),
    _region('Pacific/Fiji', 'Fiji', -17.71, 178.06),
    _region('Pacific/Honolulu', 'Honolulu', 21.31, -157.86),
)

# =============================================================================
# BOUNDARY RINGS  (lng, lat)
# =============================================================================

_RAW_BOUNDARIES: Dict[str, Tuple[str, str, Tuple[Tuple[float, float], ...]]] = {
    # North America
    'America/Los_Angeles': ('Pacific Time', '#3b82f6', (
        (-135, 60), (-135, 30), (-125, 30), (-120, 32), (-118, 32.5), (-117, 32.5), (-116, 33),
        (-115, 33.5), (-114.5, 35), (-114, 38), (-114, 42), (-117, 49), (-120, 52), (-125, 55),
        (-135, 60),
    )),
    'America/Denver': ('Mountain Time', '#10b981', (
        (-114, 60), (-114, 42), (-114, 38), (-114.5, 35), (-115, 33.5), (-114, 32), (-107, 31),
        (-105, 30), (-103, 30), (-103, 49), (-103, 60), (-114, 60),
    )),
    'America/Chicago': ('Central Time', '#f59e0b', (
        (-103, 60), (-103, 49), (-103, 30), (-101, 28), (-99, 26), (-97, 25.5), (-95, 26),
        (-92, 28), (-90, 29), (-88, 30), (-88, 36), (-89, 41), (-89, 49), (-89, 60), (-103, 60),
    )),
    'America/New_York': ('Eastern Time', '#8b5cf6', (
        (-89, 60), (-89, 49), (-89, 41), (-88, 36), (-88, 30), (-83, 27), (-82, 26), (-80, 25),
        (-76, 25), (-76, 31), (-75, 35), (-75, 45), (-77, 47), (-77, 60), (-89, 60),
    )),

    # Europe
    'Europe/London': ('GMT/UTC', '#ef4444', (
        (-12, 65), (-12, 48), (-8, 40), (-2, 36), (0, 36), (2, 42), (2, 50), (1, 53),
        (0, 55), (-2, 58), (-5, 60), (-8, 62), (-12, 65),
    )),
    'Europe/Paris': ('Central European Time', '#f97316', (
        (2, 70), (2, 50), (2, 42), (0, 36), (4, 36), (8, 36), (14, 38), (19, 40),
        (22, 45), (22, 52), (20, 58), (14, 65), (8, 70), (2, 70),
    )),
    'Europe/Moscow': ('Moscow Time', '#0ea5e9', (
        (22, 70), (22, 52), (22, 45), (26, 40), (30, 40), (36, 40), (40, 40),
        (45, 45), (48, 50), (48, 58), (42, 65), (35, 70), (22, 70),
    )),

    # Asia
    'Asia/Tokyo': ('Japan Standard Time', '#ec4899', (
        (127, 34), (130, 30), (132, 30), (134, 31), (136, 32), (138, 33), (140, 34),
        (142, 35), (145, 40), (147, 44), (145, 48), (141, 47), (137, 44), (133, 40), (130, 36),
        (127, 34),
    )),
    'Asia/Shanghai': ('China Standard Time', '#a855f7', (
        (73, 55), (73, 45), (75, 35), (80, 28), (85, 25), (90, 22), (95, 20), (100, 18),
        (105, 18), (110, 18), (115, 20), (120, 22), (125, 30), (130, 35), (130, 40),
        (125, 45), (120, 50), (115, 52), (110, 55), (90, 55), (80, 55), (73, 55),
    )),
    'Asia/Kolkata': ('Indian Standard Time', '#14b8a6', (
        (68, 40), (68, 30), (70, 22), (72, 15), (75, 8), (80, 8), (85, 10),
        (90, 14), (92, 18), (92, 22), (90, 28), (85, 33), (80, 36), (72, 38), (68, 40),
    )),

    # Australia
    'Australia/Sydney': ('Eastern Australia Time', '#06b6d4', (
        (141, -45), (141, -38), (142, -34), (145, -30), (148, -28), (150, -28), (153, -28),
        (155, -30), (155, -34), (153, -38), (150, -40), (148, -42), (145, -44), (141, -45),
    )),

    # Additional
    'America/Sao_Paulo': ('Brasilia Time', '#84cc16', (
        (-60, -20), (-55, -15), (-50, -10), (-45, -8), (-40, -10), (-35, -15),
        (-35, -25), (-40, -30), (-45, -33), (-50, -33), (-55, -30), (-60, -25), (-60, -20),
    )),
    'Africa/Cairo': ('Eastern European Time', '#d946ef', (
        (22, 38), (22, 32), (25, 28), (30, 22), (35, 22), (38, 24), (38, 30),
        (35, 34), (30, 36), (25, 38), (22, 38),
    )),
}

TIMEZONE_BOUNDARIES: Dict[str, TimezoneBoundary] = {
    zone_id: TimezoneBoundary(
        zone_id=zone_id,
        display_name=name,
        color=color,
        polygon=tuple(GeoPoint(lat=float(lat), lng=float(lng)) for lng, lat in ring),
    )
    for zone_id, (name, color, ring) in _RAW_BOUNDARIES.items()
}

# =============================================================================
# ALIAS CLUSTERS
# =============================================================================
# Ordered (continent prefix, [(members, curated boundary id), ...], fallback colour).
# The prefix gates the cluster checks, as the members only ever share it.

ALIAS_CLUSTERS: Tuple[Tuple[str, Tuple[Tuple[FrozenSet[str], str], ...], str], ...] = (
    ('America/', (
        (frozenset({'America/Los_Angeles', 'America/Vancouver'}), 'America/Los_Angeles'),
        (frozenset({'America/Denver', 'America/Phoenix'}), 'America/Denver'),
        (frozenset({'America/Chicago', 'America/Mexico_City'}), 'America/Chicago'),
        (frozenset({'America/New_York', 'America/Toronto', 'America/Halifax'}), 'America/New_York'),
    ), AMERICA_FALLBACK_COLOR),
    ('Europe/', (
        (frozenset({'Europe/London', 'Europe/Dublin', 'Europe/Lisbon'}), 'Europe/London'),
        (frozenset({'Europe/Paris', 'Europe/Madrid', 'Europe/Rome', 'Europe/Berlin',
                    'Europe/Amsterdam', 'Europe/Zurich', 'Europe/Stockholm',
                    'Europe/Warsaw'}), 'Europe/Paris'),
        (frozenset({'Europe/Moscow'}), 'Europe/Moscow'),
    ), EUROPE_FALLBACK_COLOR),
    ('Asia/', (
        (frozenset({'Asia/Tokyo', 'Asia/Seoul'}), 'Asia/Tokyo'),
        (frozenset({'Asia/Shanghai', 'Asia/Hong_Kong', 'Asia/Singapore'}), 'Asia/Shanghai'),
        (frozenset({'Asia/Kolkata', 'Asia/Dhaka'}), 'Asia/Kolkata'),
    ), ASIA_FALLBACK_COLOR),
    ('Australia/', (
        (frozenset({'Australia/Sydney', 'Australia/Melbourne', 'Australia/Brisbane'}),
         'Australia/Sydney'),
    ), AUSTRALIA_FALLBACK_COLOR),
)

# Continents with a colour but no curated cluster
COLOR_ONLY_PREFIXES: Tuple[Tuple[str, str], ...] = (
    ('Pacific/', PACIFIC_FALLBACK_COLOR),
    ('Africa/', AFRICA_FALLBACK_COLOR),
)

# =============================================================================
# RELATED ZONE GROUPS
# =============================================================================
# Zones that share a ring and colour with the primary zone on the map.

RELATED_TIMEZONES: Dict[str, Tuple[str, ...]] = {
    # North America
    'America/Los_Angeles': ('America/Vancouver', 'America/Tijuana', 'America/Dawson',
                            'America/Whitehorse'),
    'America/Denver': ('America/Phoenix', 'America/Edmonton', 'America/Yellowknife',
                       'America/Boise'),
    'America/Chicago': ('America/Mexico_City', 'America/Winnipeg', 'America/Regina',
                        'America/Monterrey'),
    'America/New_York': ('America/Toronto', 'America/Montreal', 'America/Detroit',
                         'America/Halifax', 'America/Indiana/Indianapolis'),

    # Europe
    'Europe/London': ('Europe/Dublin', 'Europe/Lisbon', 'Atlantic/Reykjavik', 'Africa/Casablanca'),
    'Europe/Paris': ('Europe/Berlin', 'Europe/Madrid', 'Europe/Rome', 'Europe/Amsterdam',
                     'Europe/Brussels', 'Europe/Vienna', 'Europe/Stockholm', 'Europe/Zurich',
                     'Europe/Warsaw', 'Europe/Prague', 'Europe/Budapest', 'Europe/Copenhagen'),
    'Europe/Moscow': ('Europe/Kiev', 'Europe/Minsk', 'Europe/Tallinn', 'Europe/Riga',
                      'Europe/Vilnius'),

    # Asia
    'Asia/Tokyo': ('Asia/Seoul', 'Asia/Pyongyang', 'Pacific/Palau'),
    'Asia/Shanghai': ('Asia/Hong_Kong', 'Asia/Macau', 'Asia/Taipei', 'Asia/Singapore',
                      'Asia/Kuala_Lumpur', 'Asia/Manila', 'Asia/Brunei'),
    'Asia/Kolkata': ('Asia/Colombo', 'Asia/Kathmandu', 'Asia/Dhaka', 'Asia/Thimphu'),

    # Australia
    'Australia/Sydney': ('Australia/Melbourne', 'Australia/Brisbane', 'Australia/Hobart',
                         'Pacific/Auckland'),

    # Additional
    'America/Sao_Paulo': ('America/Rio_de_Janeiro', 'America/Fortaleza',
                          'America/Argentina/Buenos_Aires'),
    'Africa/Cairo': ('Asia/Beirut', 'Asia/Jerusalem', 'Asia/Damascus', 'Europe/Athens',
                     'Europe/Istanbul'),
}

# =============================================================================
# SEARCH TABLES
# =============================================================================

ROVER_ZONE_ID = 'Mars/Jezero'    # Perseverance rover site

POPULAR_TIMEZONES: FrozenSet[str] = frozenset({
    ROVER_ZONE_ID,

    # North America
    'America/New_York',
    'America/Chicago',
    'America/Los_Angeles',

    # Europe
    'Europe/London',
    'Europe/Berlin',
    'Europe/Paris',

    # Asia
    'Asia/Dubai',
    'Asia/Kolkata',
    'Asia/Shanghai',
    'Asia/Tokyo',
    'Asia/Singapore',

    # Australia & Pacific
    'Australia/Sydney',

    # UTC
    'Etc/UTC',
})
