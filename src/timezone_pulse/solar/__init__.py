"""Solar position, day/night terminator and daylight test."""

from .terminator import (
    declination_and_equation_of_center,
    terminator,
    solar_elevation,
    is_daylight,
)

__all__ = ['declination_and_equation_of_center', 'terminator', 'solar_elevation', 'is_daylight']
