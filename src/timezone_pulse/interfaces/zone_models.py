"""
Timezone Engine Data Models

These dataclasses define the contract between the timezone engine and its
consumers (map view, settings page, add-timezone dialog, HTTP API). Every
result is immutable and serializes to plain JSON types via ``to_dict()``.

Contract Version: 1.0.0
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Optional, Tuple, Dict, Any


@dataclass(frozen=True)
class GeoPoint:
    """A map coordinate in decimal degrees."""
    lat: float    # [-90, 90]
    lng: float    # [-180, 180]

    def to_dict(self) -> dict:
        return {'lat': self.lat, 'lng': self.lng}


@dataclass(frozen=True)
class TimezoneRegion:
    """
    Static catalog row used as a nearest-neighbour anchor.

    Mars sites use the same shape with a ``Mars/`` id namespace; their
    anchor is in Martian areographic coordinates.
    """
    id: str                  # IANA zone id, e.g. "Europe/London"
    display_name: str        # "London"
    anchor: GeoPoint

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'display_name': self.display_name,
            'anchor': self.anchor.to_dict(),
        }


@dataclass(frozen=True)
class TimezoneBoundary:
    """Curated, simplified boundary ring for one zone cluster."""
    zone_id: str
    display_name: str        # "Pacific Time"
    color: str               # CSS color, e.g. "#3b82f6"
    polygon: Tuple[GeoPoint, ...]   # Closed ring (first == last)

    def to_dict(self) -> dict:
        return {
            'zone_id': self.zone_id,
            'display_name': self.display_name,
            'color': self.color,
            'polygon': [[p.lng, p.lat] for p in self.polygon],
        }


@dataclass(frozen=True)
class BoundaryMatch:
    """
    Result of a boundary lookup.

    ``polygon`` is None when no curated boundary applies; map rendering
    treats that as "don't draw a boundary".
    """
    color: str
    polygon: Optional[Tuple[GeoPoint, ...]] = None
    boundary_id: Optional[str] = None    # Curated boundary that matched
    rule: Optional[str] = None           # 'exact', alias rule name, or None

    def to_dict(self) -> dict:
        return {
            'color': self.color,
            'boundary_id': self.boundary_id,
            'rule': self.rule,
            'polygon': [[p.lng, p.lat] for p in self.polygon] if self.polygon else None,
        }


@dataclass(frozen=True)
class SolarPosition:
    """Sun position from the truncated solar series (degrees)."""
    declination_deg: float
    sun_longitude_deg: float          # Apparent ecliptic longitude
    equation_of_center_deg: float
    obliquity_deg: float              # Corrected for nutation
    julian_century: float             # Centuries since J2000.0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class DSTTransition:
    """
    DST start/end instants for one zone and year.

    Both fields None means no transition was found (zone does not observe DST).
    """
    zone_id: str
    year: int
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    @property
    def observes_dst(self) -> bool:
        return self.start is not None or self.end is not None

    def to_dict(self) -> dict:
        return {
            'zone_id': self.zone_id,
            'year': self.year,
            'start': self.start.isoformat() if self.start else None,
            'end': self.end.isoformat() if self.end else None,
        }


@dataclass(frozen=True)
class ZoneSnapshot:
    """What the calendar primitive knows about a zone at one instant."""
    utc_offset_minutes: int
    is_dst: bool
    abbreviation: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class TimezoneCandidate:
    """
    A searchable timezone row.

    ``offset`` and ``region`` are filled in by the catalog listing and are
    not used for scoring.
    """
    id: str
    name: str
    city: Optional[str] = None
    country: Optional[str] = None
    abbreviation: Optional[str] = None
    offset: Optional[str] = None         # "+05:30", "MTC+05:10"
    region: Optional[str] = None         # "Europe", "Mars", ...

    def search_fields(self) -> Tuple[str, ...]:
        """Lower-cased fields the ranker matches against (missing -> '')."""
        return (
            self.name.lower(),
            self.id.lower(),
            (self.city or '').lower(),
            (self.country or '').lower(),
            (self.abbreviation or '').lower(),
        )

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass(frozen=True)
class ZoneDescription:
    """Display-ready description of a zone at one instant."""
    id: str
    name: str                      # "New York, America"
    city: str
    country: str
    offset: str                    # "+HH:MM"
    abbreviation: str
    is_dst: bool
    is_night_time: bool            # Before 06:00 or from 18:00 local
    is_work_hours: bool            # 09:00-17:00 local
    center: Optional[GeoPoint] = None
    extras: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        result = asdict(self)
        result['center'] = self.center.to_dict() if self.center else None
        if not self.extras:
            result.pop('extras')
        return result
