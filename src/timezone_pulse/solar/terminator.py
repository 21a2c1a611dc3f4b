#!/usr/bin/env python3
"""
Solar Terminator - Day/Night Line and Daylight Test

================================================================================
PURPOSE
================================================================================
Locate the Sun from a UTC instant and derive two things from it:

    1. The terminator: the line on the Earth's surface where the Sun sits
       at the horizon, sampled every 2° of latitude
    2. A daylight test for a single point

Both use the same closed-form solar series. There is no iteration, no
solver and no failure mode: every finite instant gives a finite answer.

================================================================================
SOLAR POSITION (truncated series, NOAA/Meeus form)
================================================================================
Julian day from the Unix epoch, then centuries from J2000.0:

    JD = t_ms / 86 400 000 - 0.5 + 2 440 588
    T  = (JD - 2 451 545) / 36 525

    L0 = 280.46646 + T(36000.76983 + 0.0003032 T)          mean longitude
    M  = 357.52911 + T(35999.05029 - 0.0001537 T)          mean anomaly
    C  = sin(M)(1.914602 - T(0.004817 + 0.000014 T))        equation of centre
       + sin(2M)(0.019993 - 0.000101 T)
       + sin(3M) 0.000289
    λ  = L0 + C                                             sun longitude
    ε0 = 23°26'(21.448 - T(46.815 + T(0.00059 - 0.001813 T)))"
    ε  = ε0 + 0.00256 cos(125.04 - 1934.136 T)              nutation-corrected
    δ  = asin(sin ε · sin λ)                                declination

Accuracy is a few arcminutes near the present and degrades slowly away
from J2000. Good enough for drawing a map shadow, not for ephemerides.

================================================================================
TERMINATOR
================================================================================
The Sun's centre is at apparent sunrise/sunset when its geometric altitude
is h0 = -0.83° (refraction plus solar semi-diameter). For latitude φ:

    cos H0 = (sin h0 - sin φ sin δ) / (cos φ cos δ)

|cos H0| > 1 means the latitude is in polar day or polar night on that date
and is skipped, so the line is shorter near the solstices. Otherwise the
terminator longitude is

    λ_t = 180 - H0 - 15 · UT_hours       wrapped into [-180, 180]

================================================================================
DAYLIGHT TEST
================================================================================
Direct elevation at the point, without building the line:

    H = 15 · UT_hours - 180 + λ
    h = asin(sin φ sin δ + cos φ cos δ cos H)
    daylight  ⇔  h > -0.83°

================================================================================
USAGE
================================================================================
    from timezone_pulse.solar.terminator import terminator, is_daylight

    line = terminator(datetime.now(timezone.utc))      # [(lat, lng), ...]
    lit = is_daylight(GeoPoint(lat=0, lng=0), instant)

================================================================================
REFERENCES
================================================================================
- Meeus, J., "Astronomical Algorithms", 2nd ed., ch. 25
- NOAA Global Monitoring Laboratory, Solar Calculation Details
"""

import logging
import math
from datetime import datetime, timezone
from typing import List, Tuple

import numpy as np

from ..interfaces.zone_models import GeoPoint, SolarPosition

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

SUNRISE_ALTITUDE_DEG = -0.83     # Refraction + solar semi-diameter
TERMINATOR_STEP_DEG = 2
MS_PER_DAY = 86_400_000.0
UNIX_EPOCH_JD = 2440588.0        # Noon-based; with the -0.5 day gives JD 2440587.5 at the epoch
J2000_JD = 2451545.0
DAYS_PER_CENTURY = 36525.0

TerminatorPoint = Tuple[float, float]    # (lat, lng)


def _to_utc(instant: datetime) -> datetime:
    """Naive datetimes are taken as UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def _utc_hours(instant: datetime) -> float:
    """UTC time of day in hours, at minute resolution."""
    utc = _to_utc(instant)
    return (utc.hour + utc.minute / 60.0) % 24


def julian_century(instant: datetime) -> float:
    """Julian centuries since J2000.0 for an instant."""
    epoch_ms = _to_utc(instant).timestamp() * 1000.0
    julian_day = epoch_ms / MS_PER_DAY - 0.5 + UNIX_EPOCH_JD
    return (julian_day - J2000_JD) / DAYS_PER_CENTURY


def declination_and_equation_of_center(instant: datetime) -> SolarPosition:
    """
    Solar declination and ecliptic longitude for an instant.

    Args:
        instant: Moment to evaluate (naive = UTC)

    Returns:
        SolarPosition in degrees
    """
    T = julian_century(instant)

    mean_longitude = (280.46646 + T * (36000.76983 + T * 0.0003032)) % 360
    mean_anomaly = 357.52911 + T * (35999.05029 - 0.0001537 * T)
    m = math.radians(mean_anomaly)

    equation_of_center = (
        math.sin(m) * (1.914602 - T * (0.004817 + 0.000014 * T))
        + math.sin(2 * m) * (0.019993 - 0.000101 * T)
        + math.sin(3 * m) * 0.000289
    )
    sun_longitude = (mean_longitude + equation_of_center) % 360

    obliquity = 23 + (26 + (21.448 - T * (46.815 + T * (0.00059 - T * 0.001813))) / 60) / 60
    corrected_obliquity = obliquity + 0.00256 * math.cos(math.radians(125.04 - 1934.136 * T))

    declination = math.degrees(math.asin(
        math.sin(math.radians(corrected_obliquity)) * math.sin(math.radians(sun_longitude))
    ))

    return SolarPosition(
        declination_deg=declination,
        sun_longitude_deg=sun_longitude,
        equation_of_center_deg=equation_of_center,
        obliquity_deg=corrected_obliquity,
        julian_century=T,
    )


def terminator(instant: datetime) -> List[TerminatorPoint]:
    """
    Day/night terminator as (lat, lng) points, one per 2° of latitude.

    Latitudes in polar day or night for this date are omitted, so the line
    holds fewer points near the solstices than near the equinoxes.

    Args:
        instant: Moment to evaluate (naive = UTC)

    Returns:
        List of (lat, lng) with lat ascending from -90 to 90
    """
    sun = declination_and_equation_of_center(instant)
    dec = np.radians(sun.declination_deg)

    lats = np.arange(-90, 90 + TERMINATOR_STEP_DEG, TERMINATOR_STEP_DEG)
    lat_rad = np.radians(lats)

    cos_ha = (
        (math.sin(math.radians(SUNRISE_ALTITUDE_DEG)) - np.sin(lat_rad) * np.sin(dec))
        / (np.cos(lat_rad) * np.cos(dec))
    )
    crosses_horizon = np.abs(cos_ha) <= 1.0

    hour_angle = np.degrees(np.arccos(cos_ha[crosses_horizon]))
    lngs = 180.0 - hour_angle - 15.0 * _utc_hours(instant)
    lngs = np.where(lngs > 180.0, lngs - 360.0, lngs)
    lngs = np.where(lngs < -180.0, lngs + 360.0, lngs)

    points = [(float(lat), float(lng)) for lat, lng in zip(lats[crosses_horizon], lngs)]

    logger.debug(f"Terminator at {_to_utc(instant).isoformat()}: dec={sun.declination_deg:+.2f}°, "
                 f"{len(points)}/{len(lats)} latitudes cross the horizon")
    return points


def solar_elevation(point: GeoPoint, instant: datetime) -> float:
    """Solar altitude in degrees above the horizon at a point."""
    sun = declination_and_equation_of_center(instant)
    dec = math.radians(sun.declination_deg)
    lat = math.radians(point.lat)

    hour_angle = math.radians(_utc_hours(instant) * 15 - 180 + point.lng)

    sin_elevation = (
        math.sin(lat) * math.sin(dec)
        + math.cos(lat) * math.cos(dec) * math.cos(hour_angle)
    )
    # Rounding can push the product a hair past ±1 at the subsolar point
    sin_elevation = max(-1.0, min(1.0, sin_elevation))
    return math.degrees(math.asin(sin_elevation))


def is_daylight(point: GeoPoint, instant: datetime) -> bool:
    """True iff the Sun is above the apparent horizon (-0.83°) at ``point``."""
    return solar_elevation(point, instant) > SUNRISE_ALTITUDE_DEG
