"""
Map-side timezone lookup: coordinate resolution and boundary rings.
"""

from .region_resolver import (
    normalize_point,
    resolve,
    nearest_region,
    boundary_for,
    color_for,
    related_timezones,
    polygon_to_path,
)

__all__ = [
    'normalize_point',
    'resolve',
    'nearest_region',
    'boundary_for',
    'color_for',
    'related_timezones',
    'polygon_to_path',
]
