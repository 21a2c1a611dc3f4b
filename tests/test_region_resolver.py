"""
Unit tests for the Region Resolver module.

Tests coordinate normalization, nearest-anchor resolution, the boundary
alias cascade, related-zone groups and SVG path export.
"""

import math
import pytest


class TestNormalizePoint:
    """Test longitude wrap and latitude clamp."""

    def test_wraps_longitude(self):
        from timezone_pulse.geo.region_resolver import normalize_point
        from timezone_pulse.interfaces.zone_models import GeoPoint

        assert normalize_point(GeoPoint(lat=0, lng=190)).lng == pytest.approx(-170)
        assert normalize_point(GeoPoint(lat=0, lng=-190)).lng == pytest.approx(170)
        assert normalize_point(GeoPoint(lat=0, lng=540)).lng == pytest.approx(-180)

    def test_clamps_latitude(self):
        from timezone_pulse.geo.region_resolver import normalize_point
        from timezone_pulse.interfaces.zone_models import GeoPoint

        assert normalize_point(GeoPoint(lat=90, lng=0)).lat == 85
        assert normalize_point(GeoPoint(lat=-120, lng=0)).lat == -85
        assert normalize_point(GeoPoint(lat=45.5, lng=0)).lat == 45.5

    @pytest.mark.parametrize('lat,lng', [
        (0, 0), (89, 179.9), (-91, -181), (12.3, 720.5), (-85, -180), (85, 180),
    ])
    def test_idempotent(self, lat, lng):
        from timezone_pulse.geo.region_resolver import normalize_point
        from timezone_pulse.interfaces.zone_models import GeoPoint

        once = normalize_point(GeoPoint(lat=lat, lng=lng))
        assert normalize_point(once) == once


class TestResolve:
    """Test nearest-anchor timezone resolution."""

    @pytest.mark.parametrize('lat,lng,expected', [
        (51.5, -0.1, 'Europe/London'),
        (40.7, -74.0, 'America/New_York'),
        (35.7, 139.7, 'Asia/Tokyo'),
        (-33.9, 151.2, 'Australia/Sydney'),
        (19.0, 72.8, 'Asia/Kolkata'),
    ])
    def test_city_coordinates(self, lat, lng, expected):
        from timezone_pulse.geo.region_resolver import resolve
        from timezone_pulse.interfaces.zone_models import GeoPoint

        assert resolve(GeoPoint(lat=lat, lng=lng)) == expected

    def test_antimeridian_wrap(self):
        """lng=190 is lng=-170, closest to Honolulu."""
        from timezone_pulse.geo.region_resolver import resolve
        from timezone_pulse.interfaces.zone_models import GeoPoint

        assert resolve(GeoPoint(lat=0, lng=190)) == 'Pacific/Honolulu'

    def test_poles_resolve_to_catalog_zone(self):
        from timezone_pulse.geo.region_resolver import resolve
        from timezone_pulse.geo.zone_catalog import TIMEZONE_REGIONS
        from timezone_pulse.interfaces.zone_models import GeoPoint

        ids = {r.id for r in TIMEZONE_REGIONS}
        assert resolve(GeoPoint(lat=90, lng=0)) in ids
        assert resolve(GeoPoint(lat=-90, lng=0)) in ids

    def test_deterministic(self):
        from timezone_pulse.geo.region_resolver import resolve
        from timezone_pulse.interfaces.zone_models import GeoPoint

        point = GeoPoint(lat=10.0, lng=-30.0)
        assert len({resolve(point) for _ in range(5)}) == 1

    def test_nearest_region_distance(self):
        from timezone_pulse.geo.region_resolver import nearest_region
        from timezone_pulse.interfaces.zone_models import GeoPoint

        region, distance = nearest_region(GeoPoint(lat=51.51, lng=-0.13))
        assert region.id == 'Europe/London'
        assert distance == pytest.approx(0.0, abs=1e-9)

    def test_tie_goes_to_first_anchor(self):
        from timezone_pulse.geo.region_resolver import nearest_region
        from timezone_pulse.interfaces.zone_models import GeoPoint, TimezoneRegion

        regions = (
            TimezoneRegion(id='Zone/West', display_name='West', anchor=GeoPoint(lat=0, lng=-1)),
            TimezoneRegion(id='Zone/East', display_name='East', anchor=GeoPoint(lat=0, lng=1)),
        )
        region, distance = nearest_region(GeoPoint(lat=0, lng=0), regions)
        assert region.id == 'Zone/West'
        assert distance == pytest.approx(1.0)

    def test_accepts_list_of_regions(self):
        from timezone_pulse.geo.region_resolver import nearest_region
        from timezone_pulse.interfaces.zone_models import GeoPoint, TimezoneRegion

        regions = [
            TimezoneRegion(id='Zone/North', display_name='North', anchor=GeoPoint(lat=10, lng=0)),
            TimezoneRegion(id='Zone/South', display_name='South', anchor=GeoPoint(lat=-10, lng=0)),
        ]
        region, distance = nearest_region(GeoPoint(lat=-8, lng=0), regions)
        assert region.id == 'Zone/South'
        assert distance == pytest.approx(2.0)


class TestBoundaryFor:
    """Test the exact-then-alias boundary cascade."""

    def test_exact_match(self):
        from timezone_pulse.geo.region_resolver import boundary_for

        match = boundary_for('Europe/London')
        assert match.rule == 'exact'
        assert match.boundary_id == 'Europe/London'
        assert match.color == '#ef4444'
        assert match.polygon[0] == match.polygon[-1]

    @pytest.mark.parametrize('zone_id,boundary_id', [
        ('America/Vancouver', 'America/Los_Angeles'),
        ('America/Phoenix', 'America/Denver'),
        ('America/Mexico_City', 'America/Chicago'),
        ('America/Toronto', 'America/New_York'),
        ('America/Halifax', 'America/New_York'),
        ('Europe/Dublin', 'Europe/London'),
        ('Europe/Berlin', 'Europe/Paris'),
        ('Europe/Warsaw', 'Europe/Paris'),
        ('Asia/Seoul', 'Asia/Tokyo'),
        ('Asia/Singapore', 'Asia/Shanghai'),
        ('Asia/Dhaka', 'Asia/Kolkata'),
        ('Australia/Melbourne', 'Australia/Sydney'),
    ])
    def test_alias_members_borrow_ring(self, zone_id, boundary_id):
        from timezone_pulse.geo.region_resolver import boundary_for
        from timezone_pulse.geo.zone_catalog import TIMEZONE_BOUNDARIES

        match = boundary_for(zone_id)
        assert match.boundary_id == boundary_id
        assert match.polygon == TIMEZONE_BOUNDARIES[boundary_id].polygon
        assert match.color == TIMEZONE_BOUNDARIES[boundary_id].color

    def test_every_alias_member_has_polygon(self):
        from timezone_pulse.geo.region_resolver import boundary_for
        from timezone_pulse.geo.zone_catalog import ALIAS_CLUSTERS

        for _, clusters, _ in ALIAS_CLUSTERS:
            for members, _ in clusters:
                for zone_id in members:
                    assert boundary_for(zone_id).polygon is not None, zone_id

    @pytest.mark.parametrize('zone_id,color', [
        ('America/Bogota', '#3b82f6'),
        ('Europe/Oslo', '#f97316'),
        ('Asia/Dubai', '#a855f7'),
        ('Australia/Perth', '#06b6d4'),
        ('Pacific/Fiji', '#0ea5e9'),
        ('Africa/Lagos', '#d946ef'),
    ])
    def test_continent_fallback_is_color_only(self, zone_id, color):
        from timezone_pulse.geo.region_resolver import boundary_for

        match = boundary_for(zone_id)
        assert match.color == color
        assert match.polygon is None

    def test_unknown_zone(self):
        from timezone_pulse.geo.region_resolver import boundary_for
        from timezone_pulse.geo.zone_catalog import DEFAULT_COLOR

        match = boundary_for('Moon/Base')
        assert match.color == DEFAULT_COLOR
        assert match.polygon is None
        assert match.rule is None

    def test_empty_zone(self):
        from timezone_pulse.geo.region_resolver import boundary_for, color_for

        assert boundary_for('').polygon is None
        assert color_for(None) == '#6B7280'

    def test_custom_rules(self):
        from timezone_pulse.geo.region_resolver import AliasRule, boundary_for

        rules = (AliasRule(name='moon', predicate=lambda z: z.startswith('Moon/'), color='#ffffff'),)
        match = boundary_for('Moon/Base', rules=rules)
        assert match.color == '#ffffff'
        assert match.rule == 'moon'

    def test_to_dict_uses_lng_lat_pairs(self):
        from timezone_pulse.geo.region_resolver import boundary_for

        data = boundary_for('Asia/Tokyo').to_dict()
        assert data['polygon'][0] == [127.0, 34.0]
        assert boundary_for('Moon/Base').to_dict()['polygon'] is None


class TestRelatedTimezones:
    """Test related-zone group lookup."""

    def test_primary_zone(self):
        from timezone_pulse.geo.region_resolver import related_timezones

        group = related_timezones('Asia/Tokyo')
        assert group == ['Asia/Tokyo', 'Asia/Seoul', 'Asia/Pyongyang', 'Pacific/Palau']

    def test_member_zone_returns_whole_group(self):
        from timezone_pulse.geo.region_resolver import related_timezones

        group = related_timezones('Europe/Dublin')
        assert group[0] == 'Europe/London'
        assert 'Europe/Dublin' in group

    def test_unknown_zone(self):
        from timezone_pulse.geo.region_resolver import related_timezones

        assert related_timezones('Moon/Base') == ['Moon/Base']


class TestPolygonToPath:
    """Test SVG path export."""

    def test_triangle(self):
        from timezone_pulse.geo.region_resolver import polygon_to_path
        from timezone_pulse.interfaces.zone_models import GeoPoint

        ring = [GeoPoint(lat=0, lng=0), GeoPoint(lat=10, lng=5), GeoPoint(lat=0, lng=10.5)]
        assert polygon_to_path(ring) == 'M0,0 L5,10 L10.5,0 Z'

    def test_invalid_points_dropped(self):
        from timezone_pulse.geo.region_resolver import polygon_to_path
        from timezone_pulse.interfaces.zone_models import GeoPoint

        ring = [
            GeoPoint(lat=0, lng=0),
            GeoPoint(lat=math.nan, lng=3),
            GeoPoint(lat=95, lng=3),
            GeoPoint(lat=1, lng=1),
            GeoPoint(lat=2, lng=0),
        ]
        assert polygon_to_path(ring) == 'M0,0 L1,1 L0,2 Z'

    def test_too_few_points(self):
        from timezone_pulse.geo.region_resolver import polygon_to_path
        from timezone_pulse.interfaces.zone_models import GeoPoint

        assert polygon_to_path([GeoPoint(lat=0, lng=0), GeoPoint(lat=1, lng=1)]) == ''
        assert polygon_to_path([]) == ''
        assert polygon_to_path(None) == ''
