"""Data contracts shared by the timezone engine components."""

from .zone_models import (
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

__all__ = [
    'GeoPoint',
    'TimezoneRegion',
    'TimezoneBoundary',
    'BoundaryMatch',
    'SolarPosition',
    'DSTTransition',
    'ZoneSnapshot',
    'TimezoneCandidate',
    'ZoneDescription',
]
