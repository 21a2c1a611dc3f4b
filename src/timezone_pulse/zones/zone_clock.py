"""
Zone Clock - the calendar/timezone primitive.

Thin wrapper over the standard library ``zoneinfo`` database (backed by the
``tzdata`` distribution). Given a zone identifier and an instant it reports
the UTC offset, DST flag and abbreviation; it can also build an instant
from civil fields in a zone.

Unknown identifiers raise ``zoneinfo.ZoneInfoNotFoundError`` (a KeyError);
callers in this package let that propagate.
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..interfaces.zone_models import ZoneSnapshot

UTC_ZONE = 'Etc/UTC'


def get_zone(zone_id: str) -> ZoneInfo:
    """
    Load a zone (ZoneInfo caches instances internally).

    Area names such as ``America`` are directories in the tz database and
    make ``ZoneInfo`` raise an OSError; they are reported as not found.
    """
    try:
        return ZoneInfo(zone_id)
    except OSError as e:
        raise ZoneInfoNotFoundError(f"No time zone found with key {zone_id}") from e


def is_valid_zone(zone_id: str) -> bool:
    """True if ``zone_id`` names a zone in the IANA database. Never raises."""
    if not zone_id:
        return False
    try:
        get_zone(zone_id)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True


def to_utc(instant: datetime) -> datetime:
    """Convert to an aware UTC datetime; naive input is taken as UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def parse_instant(text: str) -> datetime:
    """
    Parse an ISO-8601 instant ("2024-03-20T12:00:00Z", "2024-03-20").

    Raises:
        ValueError: if the text is not ISO-8601
    """
    text = text.strip()
    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'
    return to_utc(datetime.fromisoformat(text))


def localize(zone_id: str, instant: datetime) -> datetime:
    """The same instant expressed in ``zone_id`` local time."""
    return to_utc(instant).astimezone(get_zone(zone_id))


def make_instant(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    zone: str = UTC_ZONE
) -> datetime:
    """Build an aware instant from civil fields in ``zone``."""
    return datetime(year, month, day, hour, minute, tzinfo=get_zone(zone))


def is_dst(zone_id: str, instant: datetime) -> bool:
    """Whether ``zone_id`` observes DST at ``instant``."""
    return bool(localize(zone_id, instant).dst())


def zone_snapshot(zone_id: str, instant: datetime) -> ZoneSnapshot:
    """Offset, DST flag and abbreviation of a zone at one instant."""
    local = localize(zone_id, instant)
    offset = local.utcoffset()
    return ZoneSnapshot(
        utc_offset_minutes=int(offset.total_seconds() // 60) if offset else 0,
        is_dst=bool(local.dst()),
        abbreviation=local.tzname() or '',
    )


def format_utc_offset(minutes: int) -> str:
    """
    Format an offset in minutes as ``+HH:MM``.

    Examples:
        330  -> "+05:30"
        -480 -> "-08:00"
    """
    sign = '+' if minutes >= 0 else '-'
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{mins:02d}"
