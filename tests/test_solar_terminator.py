"""
Unit tests for the Solar Terminator module.

Tests the solar series against known equinox/solstice declinations, the
terminator polyline bounds and polar degeneracy, and the daylight test.
"""

import pytest
from datetime import datetime, timezone


class TestSolarPosition:
    """Test declination from the truncated solar series."""

    def test_equinox_declination_near_zero(self, equinox_instant):
        from timezone_pulse.solar.terminator import declination_and_equation_of_center

        sun = declination_and_equation_of_center(equinox_instant)
        assert abs(sun.declination_deg) < 0.5
        # Sun just past the vernal point
        assert sun.sun_longitude_deg < 2 or sun.sun_longitude_deg > 358

    def test_june_solstice_declination(self, solstice_instant):
        from timezone_pulse.solar.terminator import declination_and_equation_of_center

        sun = declination_and_equation_of_center(solstice_instant)
        assert sun.declination_deg == pytest.approx(23.44, abs=0.05)
        assert sun.sun_longitude_deg == pytest.approx(90.0, abs=0.1)

    def test_december_solstice_declination(self):
        from timezone_pulse.solar.terminator import declination_and_equation_of_center

        sun = declination_and_equation_of_center(datetime(2024, 12, 21, 9, 20, tzinfo=timezone.utc))
        assert sun.declination_deg == pytest.approx(-23.44, abs=0.05)

    def test_obliquity_and_century(self):
        from timezone_pulse.solar.terminator import declination_and_equation_of_center

        sun = declination_and_equation_of_center(datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc))
        assert sun.julian_century == pytest.approx(0.0, abs=1e-9)
        assert sun.obliquity_deg == pytest.approx(23.44, abs=0.01)

    def test_naive_datetime_is_utc(self, equinox_instant):
        from timezone_pulse.solar.terminator import declination_and_equation_of_center

        naive = equinox_instant.replace(tzinfo=None)
        assert declination_and_equation_of_center(naive) == \
            declination_and_equation_of_center(equinox_instant)


class TestTerminator:
    """Test the day/night terminator polyline."""

    def test_points_within_bounds(self, equinox_instant, solstice_instant):
        from timezone_pulse.solar.terminator import terminator

        for instant in (equinox_instant, solstice_instant,
                        datetime(2024, 9, 22, 23, 59, tzinfo=timezone.utc)):
            for lat, lng in terminator(instant):
                assert -90 <= lat <= 90
                assert -180 <= lng <= 180

    def test_equinox_is_near_complete(self, equinox_instant):
        from timezone_pulse.solar.terminator import terminator

        points = terminator(equinox_instant)
        assert 85 <= len(points) <= 91
        lats = [lat for lat, _ in points]
        assert lats == sorted(lats)
        assert all(lat % 2 == 0 for lat in lats)

    def test_solstice_drops_polar_latitudes(self, equinox_instant, solstice_instant):
        from timezone_pulse.solar.terminator import terminator

        equinox = terminator(equinox_instant)
        solstice = terminator(solstice_instant)
        assert len(solstice) < len(equinox)
        # Polar day in the north, polar night in the south
        assert all(abs(lat) < 70 for lat, _ in solstice)
        assert max(lat for lat, _ in solstice) < 67

    def test_equinox_noon_terminator_near_quadrature(self, equinox_instant):
        """At 12:00 UTC the equatorial terminator sits near ±90° longitude."""
        from timezone_pulse.solar.terminator import terminator

        equator = dict(terminator(equinox_instant))[0.0]
        assert equator == pytest.approx(-90.0, abs=2.0)

    def test_returns_plain_floats(self, equinox_instant):
        from timezone_pulse.solar.terminator import terminator

        lat, lng = terminator(equinox_instant)[0]
        assert type(lat) is float
        assert type(lng) is float


class TestDaylight:
    """Test the daylight predicate."""

    def test_equator_noon_is_day(self, equinox_instant):
        from timezone_pulse.interfaces.zone_models import GeoPoint
        from timezone_pulse.solar.terminator import is_daylight, solar_elevation

        point = GeoPoint(lat=0, lng=0)
        assert is_daylight(point, equinox_instant) is True
        assert solar_elevation(point, equinox_instant) > 85

    def test_equator_midnight_is_night(self, equinox_midnight):
        from timezone_pulse.interfaces.zone_models import GeoPoint
        from timezone_pulse.solar.terminator import is_daylight

        assert is_daylight(GeoPoint(lat=0, lng=0), equinox_midnight) is False

    def test_antipode_of_noon_is_night(self, equinox_instant):
        from timezone_pulse.interfaces.zone_models import GeoPoint
        from timezone_pulse.solar.terminator import is_daylight

        assert is_daylight(GeoPoint(lat=0, lng=180), equinox_instant) is False

    def test_polar_day_and_night(self, solstice_instant):
        from timezone_pulse.interfaces.zone_models import GeoPoint
        from timezone_pulse.solar.terminator import is_daylight

        # Arctic in June: daylight at any hour; Antarctic: night
        midnight = solstice_instant.replace(hour=0, minute=0)
        assert is_daylight(GeoPoint(lat=80, lng=0), midnight) is True
        assert is_daylight(GeoPoint(lat=-80, lng=0), solstice_instant) is False
