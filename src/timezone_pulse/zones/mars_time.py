"""
Mars Time - the ``Mars/*`` zone catalog.

Six Martian sites (landing sites and a few imagined settlements) that ride
along with the Earth zones in search and listing. They are switched on only
on April 1st. The clock model is a simple linear one:

    mars_ms  = earth_epoch_ms × 1.0274912517            (sol / day ratio)
    local_ms = mars_ms + (east_longitude / 15) × 3699.37 s × 1000

and the sol count runs from the Perseverance landing, 2021-02-18T20:55Z.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Dict, List, Optional, Tuple

from ..interfaces.zone_models import GeoPoint, TimezoneCandidate, TimezoneRegion
from .zone_clock import to_utc

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

MARS_SOL_TO_EARTH_DAY_RATIO = 1.0274912517     # 24h 39m 35.244s
MARS_HOUR_IN_EARTH_SECONDS = 3699.37           # 1h 1m 39.37s
PERSEVERANCE_LANDING = datetime(2021, 2, 18, 20, 55, tzinfo=timezone.utc)
SOL_DURATION_MS = MARS_SOL_TO_EARTH_DAY_RATIO * 24 * 60 * 60 * 1000

MARS_REGION = 'Mars'
MARS_ABBREVIATION = 'MTC'
MARS_DAYTIME_HOURS = (7, 19)       # Local Mars hours counted as daylight


@dataclass(frozen=True)
class MarsLocation:
    """A Martian site. Longitude is degrees east of Airy-0."""
    id: str
    name: str
    city: str
    longitude: float
    latitude: float
    description: str
    rover_name: Optional[str] = None
    rover_mission: Optional[str] = None
    rover_landing_date: Optional[str] = None

    @property
    def rover_present(self) -> bool:
        return self.rover_name is not None


MARS_LOCATIONS: Tuple[MarsLocation, ...] = (
    MarsLocation(
        id='Mars/Jezero',
        name='Jezero Crater',
        city='Jezero Crater',
        longitude=77.58,
        latitude=18.38,
        description='Perseverance Rover landing site (2021)',
        rover_name='Perseverance',
        rover_mission='NASA Mars 2020 Mission',
        rover_landing_date='February 18, 2021',
    ),
    MarsLocation(
        id='Mars/Elysium',
        name='Elysium Planitia',
        city='Elysium Planitia',
        longitude=135.97,
        latitude=4.5,
        description='InSight landing site (2018)',
    ),
    MarsLocation(
        id='Mars/Gale',
        name='Gale Crater',
        city='Gale Crater',
        longitude=137.44,
        latitude=-5.08,
        description='Curiosity Rover landing site (2012)',
    ),
    MarsLocation(
        id='Mars/Olympus',
        name='Olympus City',
        city='Olympus Mons',
        longitude=226.31,
        latitude=18.39,
        description='Future settlement at the base of the largest volcano in the solar system',
    ),
    MarsLocation(
        id='Mars/Marineris',
        name='Marineris Colony',
        city='Valles Marineris',
        longitude=70.00,
        latitude=-13.8,
        description='Future settlement in the largest canyon system in the solar system',
    ),
    MarsLocation(
        id='Mars/Airy',
        name='Airy Prime',
        city='Airy-0 (Prime Meridian)',
        longitude=0.0,
        latitude=5.1,
        description='Mars Prime Meridian settlement (Airy-0 crater)',
    ),
)

_BY_ID: Dict[str, MarsLocation] = {loc.id: loc for loc in MARS_LOCATIONS}


def is_mars_zone(zone_id: str) -> bool:
    return zone_id.startswith('Mars/')


def get_location(zone_id: str) -> Optional[MarsLocation]:
    return _BY_ID.get(zone_id)


def is_mars_day(day: date) -> bool:
    """Mars zones are listed on April 1st only."""
    return day.month == 4 and day.day == 1


def mars_regions() -> Tuple[TimezoneRegion, ...]:
    """Mars sites as catalog rows (east longitude wrapped into [-180, 180))."""
    return tuple(
        TimezoneRegion(
            id=loc.id,
            display_name=loc.name,
            anchor=GeoPoint(lat=loc.latitude, lng=((loc.longitude + 180.0) % 360.0) - 180.0),
        )
        for loc in MARS_LOCATIONS
    )


# =============================================================================
# CLOCK
# =============================================================================

def current_mars_time(zone_id: str, instant: Optional[datetime] = None) -> datetime:
    """
    Local Mars time at a site, expressed as a UTC datetime.

    Unknown sites log an error and get the Earth UTC instant back.
    """
    earth = to_utc(instant or datetime.now(timezone.utc))
    location = get_location(zone_id)
    if location is None:
        logger.error(f"Unknown Mars location: {zone_id}")
        return earth

    mars_ms = earth.timestamp() * 1000.0 * MARS_SOL_TO_EARTH_DAY_RATIO
    hour_offset_ms = (location.longitude / 15.0) * MARS_HOUR_IN_EARTH_SECONDS * 1000.0
    return datetime.fromtimestamp((mars_ms + hour_offset_ms) / 1000.0, tz=timezone.utc)


def sol_number(mars_time: datetime) -> int:
    """Sols elapsed since the Perseverance landing."""
    elapsed_ms = (to_utc(mars_time) - PERSEVERANCE_LANDING).total_seconds() * 1000.0
    return math.floor(elapsed_ms / SOL_DURATION_MS)


def format_mars_time(mars_time: datetime) -> str:
    """e.g. "3:07 PM MTC (Sol 1234)"."""
    hour12 = mars_time.hour % 12 or 12
    meridiem = 'AM' if mars_time.hour < 12 else 'PM'
    return f"{hour12}:{mars_time.minute:02d} {meridiem} {MARS_ABBREVIATION} (Sol {sol_number(mars_time)})"


def mars_offset(zone_id: str) -> str:
    """Longitude offset from Airy-0 in Mars hours, as ``MTC+HH:MM``."""
    location = get_location(zone_id)
    if location is None:
        return 'MTC+0'

    longitude_hours = location.longitude / 15.0
    sign = '+' if longitude_hours >= 0 else '-'
    hours = math.floor(abs(longitude_hours))
    minutes = math.floor((abs(longitude_hours) - hours) * 60)
    return f"MTC{sign}{hours:02d}:{minutes:02d}"


def is_mars_daytime(zone_id: str, instant: Optional[datetime] = None) -> bool:
    start, end = MARS_DAYTIME_HOURS
    return start <= current_mars_time(zone_id, instant).hour < end


# =============================================================================
# CATALOG
# =============================================================================

def rover_info(zone_id: str) -> Optional[Dict[str, object]]:
    """Rover details for a site with an active rover, else None."""
    location = get_location(zone_id)
    if location is None or not location.rover_present:
        return None

    return {
        'name': location.rover_name,
        'mission': location.rover_mission or 'Unknown Mission',
        'landing_date': location.rover_landing_date or 'Unknown Date',
        'location': location.name,
        'latitude': location.latitude,
        'longitude': location.longitude,
    }


def mars_site_timezones() -> List[TimezoneCandidate]:
    """Mars sites as searchable/listable candidates."""
    candidates = []
    for location in MARS_LOCATIONS:
        offset = mars_offset(location.id)
        label = f"{location.name} [rover]" if location.rover_present else location.name
        candidates.append(TimezoneCandidate(
            id=location.id,
            name=f"{label} ({offset})",
            city=location.city,
            country=MARS_REGION,
            abbreviation=MARS_ABBREVIATION,
            offset=offset,
            region=MARS_REGION,
        ))
    return candidates
