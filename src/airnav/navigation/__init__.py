"""Derived navigation values for announcements.

Typical usage:
    from airnav.navigation import describe_nearest_runway

    print(describe_nearest_runway(db, position))
"""

from airnav.navigation.announcements import (
    METERS_TO_FEET,
    METERS_TO_MILES,
    bearing_to,
    describe_nearest_airport,
    describe_nearest_runway,
    describe_runway,
    direction_from_heading,
    elevation_feet,
    format_distance,
)

__all__ = [
    "METERS_TO_FEET",
    "METERS_TO_MILES",
    "bearing_to",
    "describe_nearest_airport",
    "describe_nearest_runway",
    "describe_runway",
    "direction_from_heading",
    "elevation_feet",
    "format_distance",
]
