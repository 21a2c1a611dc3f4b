"""
Calendar-side timezone services.

Contains:
- zone_clock: IANA calendar primitive (offset, DST flag, abbreviation)
- dst_scanner: DST start/end discovery by day scan
- mars_time: Mars/* sites and their clock
- zone_listing: curated catalog listing and zone descriptions
"""

from .dst_scanner import transitions
from .zone_clock import zone_snapshot, make_instant, is_dst, is_valid_zone, parse_instant
from .zone_listing import all_timezones, describe_zone, timezone_from_point

__all__ = [
    'transitions',
    'zone_snapshot',
    'make_instant',
    'is_dst',
    'is_valid_zone',
    'parse_instant',
    'all_timezones',
    'describe_zone',
    'timezone_from_point',
]
