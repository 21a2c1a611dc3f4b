"""
DST Transition Scanner

Finds the spring-forward and fall-back dates of a zone by walking every
civil day of a year and asking the calendar primitive whether local
midnight is in DST:

    day d not DST, day d+1 DST   ->  start = midnight of d+1
    day d DST,     day d+1 not   ->  end   = midnight of d+1

The instants reported are the first moment of the new civil day, not the
exact wall-clock switch (02:00 in most zones).

Known limitation: only the LAST flip of each kind in the year is kept. A
zone whose rules change mid-year (more than two transitions) reports just
its final start and final end.

Zones without DST return a transition with both fields None. Invalid zone
identifiers raise whatever the primitive raises. Years outside
MIN_YEAR..MAX_YEAR raise ValueError before any zone lookup.

Cost: one primitive call per day plus one, so at most 367 per scan.
Intended for settings-page interactions, not hot paths.
"""

import calendar
import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..interfaces.zone_models import DSTTransition
from . import zone_clock

logger = logging.getLogger(__name__)

DstCheck = Callable[[str, datetime], bool]

MIN_YEAR, MAX_YEAR = 1900, 2200


def transitions(
    zone_id: str,
    year: int,
    dst_check: Optional[DstCheck] = None
) -> DSTTransition:
    """
    Scan ``year`` for the DST start and end of ``zone_id``.

    Args:
        zone_id: IANA zone identifier
        year: Calendar year to scan
        dst_check: Replacement for ``zone_clock.is_dst`` (zone_id, instant) -> bool

    Returns:
        DSTTransition with local-midnight instants, or None fields if no flip
    """
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValueError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}")

    check = dst_check or zone_clock.is_dst

    dst_start: Optional[datetime] = None
    dst_end: Optional[datetime] = None
    flips = 0

    current = zone_clock.make_instant(year, 1, 1, zone=zone_id)
    current_dst = check(zone_id, current)

    for month in range(1, 13):
        days_in_month = calendar.monthrange(year, month)[1]
        for day in range(1, days_in_month + 1):
            # Aware + timedelta is wall-clock arithmetic: next local midnight
            next_day = current + timedelta(days=1)
            next_dst = check(zone_id, next_day)

            if next_dst != current_dst:
                flips += 1
                if next_dst:
                    dst_start = next_day
                else:
                    dst_end = next_day

            current, current_dst = next_day, next_dst

    if flips > 2:
        logger.warning(f"{zone_id} changed DST state {flips} times in {year}; "
                       f"keeping only the last start and end")

    logger.debug(f"DST scan {zone_id} {year}: start={dst_start}, end={dst_end}")
    return DSTTransition(zone_id=zone_id, year=year, start=dst_start, end=dst_end)
