"""
Zone Listing - the curated catalog shown in the add-timezone dialog, and
display descriptions for single zones.

Listing order is region first (fixed order below), then UTC offset string,
then name. Mars sites join the list on April 1st.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from ..geo.region_resolver import resolve
from ..geo.zone_catalog import TIMEZONE_REGIONS
from ..interfaces.zone_models import GeoPoint, TimezoneCandidate, ZoneDescription
from . import mars_time
from .zone_clock import format_utc_offset, localize, to_utc, zone_snapshot

logger = logging.getLogger(__name__)

# =============================================================================
# CATALOG
# =============================================================================

CATALOG_ZONES: Tuple[str, ...] = (
    # North America
    'America/New_York',
    'America/Chicago',
    'America/Denver',
    'America/Los_Angeles',
    'America/Anchorage',
    'Pacific/Honolulu',

    # Latin America & Caribbean
    'America/Mexico_City',
    'America/Bogota',
    'America/Argentina/Buenos_Aires',
    'America/Sao_Paulo',
    'America/Santiago',
    'America/Lima',
    'America/Toronto',
    'America/Vancouver',
    'America/Phoenix',

    # Europe
    'Europe/London',
    'Europe/Berlin',
    'Europe/Paris',
    'Europe/Rome',
    'Europe/Madrid',
    'Europe/Amsterdam',
    'Europe/Athens',
    'Europe/Moscow',
    'Europe/Istanbul',

    # Africa
    'Africa/Casablanca',
    'Africa/Lagos',
    'Africa/Johannesburg',
    'Africa/Nairobi',
    'Africa/Cairo',

    # Asia
    'Asia/Dubai',
    'Asia/Kolkata',
    'Asia/Bangkok',
    'Asia/Singapore',
    'Asia/Hong_Kong',
    'Asia/Tokyo',
    'Asia/Seoul',
    'Asia/Shanghai',
    'Asia/Jakarta',
    'Asia/Karachi',

    # Australia & Pacific
    'Australia/Sydney',
    'Australia/Melbourne',
    'Australia/Brisbane',
    'Australia/Adelaide',
    'Australia/Perth',
    'Pacific/Auckland',

    # UTC & Global
    'Etc/UTC',
    'Etc/GMT',
)

REGION_ORDER: Tuple[str, ...] = (
    'North America',
    'Europe',
    'Asia',
    'Australia & Pacific',
    'Africa',
    'UTC & Global',
    'Mars',
    'Other',
)

_PREFIX_REGIONS: Tuple[Tuple[str, str], ...] = (
    ('America/', 'North America'),
    ('Europe/', 'Europe'),
    ('Asia/', 'Asia'),
    ('Africa/', 'Africa'),
    ('Australia/', 'Australia & Pacific'),
    ('Pacific/', 'Australia & Pacific'),
    ('Etc/', 'UTC & Global'),
    ('Mars/', 'Mars'),
)

NIGHT_HOURS = (6, 18)      # Night is before 06:00 or from 18:00
WORK_HOURS = (9, 17)


def region_of(zone_id: str) -> str:
    for prefix, region in _PREFIX_REGIONS:
        if zone_id.startswith(prefix):
            return region
    return 'Other'


def _city_of(zone_id: str) -> str:
    return zone_id.split('/')[-1].replace('_', ' ')


def catalog_entry(zone_id: str, instant: datetime) -> TimezoneCandidate:
    """
    Listing row for one zone.

    Zones the database does not know get a placeholder row so one bad id
    cannot break the whole listing.
    """
    parts = zone_id.split('/')
    city = _city_of(zone_id) if len(parts) > 1 else zone_id
    country = parts[0] if len(parts) > 1 else ''

    try:
        snapshot = zone_snapshot(zone_id, instant)
    except (KeyError, ValueError) as e:
        logger.warning(f"Invalid timezone {zone_id}, using fallback data: {e}")
        return TimezoneCandidate(
            id=zone_id,
            name=f"{zone_id} (Unknown)",
            city=_city_of(zone_id),
            country='',
            abbreviation='Unknown',
            offset='Unknown',
            region=region_of(zone_id),
        )

    offset = format_utc_offset(snapshot.utc_offset_minutes)
    return TimezoneCandidate(
        id=zone_id,
        name=f"{city} ({offset})",
        city=city,
        country=country,
        abbreviation=snapshot.abbreviation,
        offset=offset,
        region=region_of(zone_id),
    )


def _listing_key(candidate: TimezoneCandidate):
    region = candidate.region if candidate.region in REGION_ORDER else 'Other'
    return (REGION_ORDER.index(region), candidate.offset or '', candidate.name)


def all_timezones(
    instant: Optional[datetime] = None,
    include_mars: Optional[bool] = None,
    zones: Tuple[str, ...] = CATALOG_ZONES
) -> List[TimezoneCandidate]:
    """
    The curated zone list, grouped and sorted for display.

    Args:
        instant: Moment used for offsets/abbreviations (default: now)
        include_mars: Force the Mars rows on/off (default: on April 1st only)
        zones: Zone ids to list

    Returns:
        Sorted list of TimezoneCandidate rows with offset and region set
    """
    instant = to_utc(instant or datetime.now(timezone.utc))
    entries = [catalog_entry(zone_id, instant) for zone_id in zones]

    if include_mars is None:
        include_mars = mars_time.is_mars_day(instant.date())
    if include_mars:
        entries.extend(mars_time.mars_site_timezones())

    return sorted(entries, key=_listing_key)


# =============================================================================
# DESCRIPTIONS
# =============================================================================

def _catalog_center(zone_id: str) -> Optional[GeoPoint]:
    """Anchor of the zone, or of a catalog row for the same city."""
    for region in TIMEZONE_REGIONS:
        if region.id == zone_id:
            return region.anchor

    city = zone_id.split('/')[-1]
    for region in TIMEZONE_REGIONS:
        if region.id.split('/')[-1] == city:
            logger.debug(f"Using coordinates from similar timezone {region.id} for {zone_id}")
            return region.anchor

    logger.debug(f"No coordinates found for timezone: {zone_id}")
    return None


def _describe_mars_zone(zone_id: str, instant: datetime) -> ZoneDescription:
    location = mars_time.get_location(zone_id)
    local = mars_time.current_mars_time(zone_id, instant)
    daytime = mars_time.is_mars_daytime(zone_id, instant)

    center = None
    for region in mars_time.mars_regions():
        if region.id == zone_id:
            center = region.anchor

    extras: Dict[str, object] = {'current_time': mars_time.format_mars_time(local)}
    rover = mars_time.rover_info(zone_id)
    if rover:
        extras['rover'] = rover

    city = location.city if location else _city_of(zone_id)
    return ZoneDescription(
        id=zone_id,
        name=f"{city}, Mars",
        city=city,
        country='Mars',
        offset=mars_time.mars_offset(zone_id),
        abbreviation=mars_time.MARS_ABBREVIATION,
        is_dst=False,
        is_night_time=not daytime,
        is_work_hours=daytime,
        center=center,
        extras=extras,
    )


def describe_zone(zone_id: str, instant: Optional[datetime] = None) -> ZoneDescription:
    """
    Display description of a zone at ``instant`` (default: now).

    Raises:
        zoneinfo.ZoneInfoNotFoundError: for an unknown Earth zone id
    """
    instant = to_utc(instant or datetime.now(timezone.utc))
    if mars_time.is_mars_zone(zone_id):
        return _describe_mars_zone(zone_id, instant)

    snapshot = zone_snapshot(zone_id, instant)
    hour = localize(zone_id, instant).hour

    parts = zone_id.split('/')
    city = _city_of(zone_id)
    country = parts[0]
    if len(parts) > 1 and parts[0] == 'Etc':
        country = 'UTC'

    night_end, night_start = NIGHT_HOURS
    work_start, work_end = WORK_HOURS

    return ZoneDescription(
        id=zone_id,
        name=f"{city}, {country}",
        city=city,
        country=country,
        offset=format_utc_offset(snapshot.utc_offset_minutes),
        abbreviation=snapshot.abbreviation,
        is_dst=snapshot.is_dst,
        is_night_time=hour < night_end or hour >= night_start,
        is_work_hours=work_start <= hour < work_end,
        center=_catalog_center(zone_id),
    )


def timezone_from_point(point: GeoPoint, instant: Optional[datetime] = None) -> ZoneDescription:
    """Resolve a map coordinate and describe the zone it lands in."""
    return describe_zone(resolve(point), instant)
