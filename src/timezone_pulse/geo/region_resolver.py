"""
Region Resolver - map coordinate to timezone, plus boundary/colour lookup.

Resolution is a nearest-anchor search over the static region catalog using
planar distance in degrees:

    d = sqrt(Δlat² + Δlng²)

This is not a geodesic nearest neighbour. It misranks slightly near the
antimeridian and the poles, which is immaterial at city-level catalog
density. Ties go to the first anchor in catalog order.

Boundary lookup walks an ordered list of alias rules; the first rule whose
predicate matches decides the ring and colour. No match is a valid outcome
(default colour, no ring), never an error.

Usage:
    from timezone_pulse.geo.region_resolver import resolve, boundary_for

    zone_id = resolve(GeoPoint(lat=51.5, lng=-0.1))     # 'Europe/London'
    match = boundary_for('America/Vancouver')          # LA ring, blue
"""

import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np
from scipy.spatial.distance import cdist

from ..interfaces.zone_models import GeoPoint, BoundaryMatch, TimezoneRegion
from .zone_catalog import (
    ALIAS_CLUSTERS,
    COLOR_ONLY_PREFIXES,
    DEFAULT_COLOR,
    LONGITUDE_SPAN,
    MAX_ABS_LATITUDE,
    RELATED_TIMEZONES,
    TIMEZONE_BOUNDARIES,
    TIMEZONE_REGIONS,
)

logger = logging.getLogger(__name__)


# =============================================================================
# COORDINATE NORMALIZATION
# =============================================================================

def normalize_point(point: GeoPoint) -> GeoPoint:
    """
    Wrap longitude into [-180, 180) and clamp latitude into [-85, 85].

    Idempotent: normalize_point(normalize_point(p)) == normalize_point(p).
    """
    lng = point.lng
    # In-range values pass through unchanged
    if not -180.0 <= lng < 180.0:
        lng = ((lng + 180.0) % LONGITUDE_SPAN) - 180.0
        if lng >= 180.0:
            lng -= LONGITUDE_SPAN
    lat = max(-MAX_ABS_LATITUDE, min(MAX_ABS_LATITUDE, point.lat))
    return GeoPoint(lat=lat, lng=lng)


# =============================================================================
# NEAREST-ANCHOR RESOLUTION
# =============================================================================

@lru_cache(maxsize=None)
def _anchor_table(regions: Tuple[TimezoneRegion, ...]) -> np.ndarray:
    """(N, 2) array of [lat, lng] anchors, built once per catalog."""
    return np.array([[r.anchor.lat, r.anchor.lng] for r in regions], dtype=float)


def nearest_region(
    point: GeoPoint,
    regions: Sequence[TimezoneRegion] = TIMEZONE_REGIONS
) -> Tuple[TimezoneRegion, float]:
    """
    Find the catalog region closest to a point.

    Args:
        point: Query coordinate (normalized before use)
        regions: Non-empty catalog to search (any sequence)

    Returns:
        Tuple of (region, planar distance in degrees)
    """
    p = normalize_point(point)
    # Cache key must be hashable
    regions = tuple(regions)
    anchors = _anchor_table(regions)
    distances = cdist(np.array([[p.lat, p.lng]]), anchors, metric='euclidean')[0]
    # argmin returns the first minimum, so ties keep catalog order
    idx = int(np.argmin(distances))
    return regions[idx], float(distances[idx])


def resolve(point: GeoPoint) -> str:
    """Return the IANA id of the catalog anchor nearest to ``point``."""
    region, distance = nearest_region(point)
    logger.debug(f"Resolved ({point.lat:.2f}, {point.lng:.2f}) -> {region.id} "
                 f"({region.display_name}, d={distance:.2f}°)")
    return region.id


# =============================================================================
# BOUNDARY / COLOUR ALIAS RULES
# =============================================================================

@dataclass(frozen=True)
class AliasRule:
    """
    One step of the boundary fallback cascade.

    A rule with a ``boundary_id`` borrows that curated ring and its colour.
    A rule without one contributes only ``color``.
    """
    name: str
    predicate: Callable[[str], bool]
    boundary_id: Optional[str] = None
    color: Optional[str] = None

    def matches(self, zone_id: str) -> bool:
        return self.predicate(zone_id)


def _member_rule(prefix: str, members, boundary_id: str) -> AliasRule:
    return AliasRule(
        name=f"{prefix}{boundary_id.split('/')[-1]}",
        predicate=lambda z, _p=prefix, _m=members: z.startswith(_p) and z in _m,
        boundary_id=boundary_id,
    )


def _prefix_rule(prefix: str, color: str) -> AliasRule:
    return AliasRule(
        name=f"{prefix}*",
        predicate=lambda z, _p=prefix: z.startswith(_p),
        color=color,
    )


def _build_alias_rules() -> Tuple[AliasRule, ...]:
    rules: List[AliasRule] = []
    for prefix, clusters, fallback_color in ALIAS_CLUSTERS:
        for members, boundary_id in clusters:
            rules.append(_member_rule(prefix, members, boundary_id))
        rules.append(_prefix_rule(prefix, fallback_color))
    for prefix, color in COLOR_ONLY_PREFIXES:
        rules.append(_prefix_rule(prefix, color))
    return tuple(rules)


# Evaluated in order; first match wins
ALIAS_RULES: Tuple[AliasRule, ...] = _build_alias_rules()


def boundary_for(zone_id: str, rules: Sequence[AliasRule] = ALIAS_RULES) -> BoundaryMatch:
    """
    Look up the boundary ring and colour for a zone.

    Exact curated match first, then the alias rules in order. Never raises;
    an unrecognised id yields the default colour and no polygon.
    """
    if not zone_id:
        return BoundaryMatch(color=DEFAULT_COLOR)

    boundary = TIMEZONE_BOUNDARIES.get(zone_id)
    if boundary is not None:
        return BoundaryMatch(
            color=boundary.color,
            polygon=boundary.polygon,
            boundary_id=zone_id,
            rule='exact',
        )

    logger.debug(f"No exact boundary match for {zone_id}, trying alias rules")

    for rule in rules:
        if not rule.matches(zone_id):
            continue
        if rule.boundary_id is not None:
            target = TIMEZONE_BOUNDARIES[rule.boundary_id]
            return BoundaryMatch(
                color=target.color,
                polygon=target.polygon,
                boundary_id=target.zone_id,
                rule=rule.name,
            )
        return BoundaryMatch(color=rule.color or DEFAULT_COLOR, rule=rule.name)

    logger.debug(f"No boundary found for {zone_id}, using default colour")
    return BoundaryMatch(color=DEFAULT_COLOR)


def color_for(zone_id: Optional[str]) -> str:
    """CSS colour for a zone (default gray for unknown or empty ids)."""
    return boundary_for(zone_id or '').color


def related_timezones(zone_id: str) -> List[str]:
    """
    Zones that share a boundary and colour with ``zone_id``.

    Returns the primary zone followed by its group, or just ``[zone_id]``
    when it belongs to no group.
    """
    for primary, related in RELATED_TIMEZONES.items():
        if zone_id == primary or zone_id in related:
            return [primary, *related]
    return [zone_id]


# =============================================================================
# SVG EXPORT
# =============================================================================

def _valid_vertex(p: GeoPoint) -> bool:
    return (
        math.isfinite(p.lat) and math.isfinite(p.lng)
        and abs(p.lat) <= 90 and abs(p.lng) <= 180
    )


def polygon_to_path(polygon: Optional[Sequence[GeoPoint]]) -> str:
    """
    Convert a ring to an SVG path ("M x,y L x,y ... Z", x=lng, y=lat).

    Invalid vertices are dropped; fewer than three valid vertices give ''.
    """
    if not polygon:
        return ''

    valid = [p for p in polygon if _valid_vertex(p)]
    if len(valid) < 3:
        logger.warning("Not enough valid points in polygon (need at least 3)")
        return ''

    first, rest = valid[0], valid[1:]
    segments = [f"M{first.lng:g},{first.lat:g}"]
    segments.extend(f"L{p.lng:g},{p.lat:g}" for p in rest)
    segments.append('Z')
    return ' '.join(segments)
