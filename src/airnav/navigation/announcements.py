"""Spoken-text helpers for airport and runway announcements.

Turns entities and distances into short phrases for a speech collaborator.
Nothing here is stored; every value is derived on demand.

Typical usage:
    from airnav.navigation.announcements import describe_runway, format_distance

    speak(describe_runway(runway))          # "Runway 03, heading 93 degrees, ..."
    speak(format_distance(1609.0))          # "1.0 miles"
"""

import math

from airnav.airports.database import AirportDatabase
from airnav.airports.runway import Runway
from airnav.physics.vectors import Vector3

METERS_TO_FEET = 3.28084
METERS_TO_MILES = 0.000621371

# Below this many miles, distances are spoken in feet.
FEET_THRESHOLD_MILES = 0.1

COMPASS_POINTS = (
    "north",
    "north-northeast",
    "northeast",
    "east-northeast",
    "east",
    "east-southeast",
    "southeast",
    "south-southeast",
    "south",
    "south-southwest",
    "southwest",
    "west-southwest",
    "west",
    "west-northwest",
    "northwest",
    "north-northwest",
)


def elevation_feet(value: Runway | float) -> int:
    """Elevation in whole feet of a runway or of a height in meters."""
    meters = value.elevation if isinstance(value, Runway) else value
    return int(round(meters * METERS_TO_FEET))


def format_distance(distance_m: float) -> str:
    """Speakable distance: feet when close, miles with one decimal otherwise.

    Examples:
        >>> format_distance(100.0)
        '328 feet'
        >>> format_distance(5000.0)
        '3.1 miles'
    """
    miles = distance_m * METERS_TO_MILES
    if miles < FEET_THRESHOLD_MILES:
        return f"{int(distance_m * METERS_TO_FEET)} feet"
    return f"{miles:.1f} miles"


def bearing_to(origin: Vector3, target: Vector3) -> float:
    """Compass bearing from origin to target in degrees [0, 360).

    Examples:
        >>> bearing_to(Vector3(0, 0, 0), Vector3(10, 0, 0))
        90.0
    """
    dx = target.x - origin.x
    dy = target.y - origin.y
    if dx == 0 and dy == 0:
        return 0.0
    return math.degrees(math.atan2(dx, dy)) % 360.0


def direction_from_heading(heading: float) -> str:
    """Sixteen-point compass word for a heading."""
    index = int(((heading % 360.0) + 11.25) // 22.5) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]


def describe_runway(runway: Runway) -> str:
    """One-sentence description of a runway.

    Examples:
        >>> describe_runway(Runway("03", Vector3(0, 0, 13.9), 93.0, 800.0))
        'Runway 03, heading 93 degrees, reciprocal 21, 2625 feet long, elevation 46 feet'
    """
    if runway.number == 0:
        return (
            f"{runway.name}, heading {int(round(runway.heading))} degrees, "
            f"elevation {elevation_feet(runway)} feet"
        )
    length_ft = int(round(runway.length * METERS_TO_FEET))
    return (
        f"Runway {runway.ident}, heading {int(round(runway.heading))} degrees, "
        f"reciprocal {runway.reciprocal_number:02d}, {length_ft} feet long, "
        f"elevation {elevation_feet(runway)} feet"
    )


def describe_nearest_airport(database: AirportDatabase, position: Vector3) -> str:
    """Name, direction and distance of the nearest airport."""
    airport = database.find_nearest_airport(position)
    if airport is None:
        return "No airport found"

    if airport.contains_position(position):
        return f"At {airport.name}"

    direction = direction_from_heading(bearing_to(position, airport.center))
    distance = format_distance(position.distance_to(airport.center))
    return f"{airport.name}, {direction}, {distance}"


def describe_nearest_runway(database: AirportDatabase, position: Vector3) -> str:
    """Identifier, airport, direction and distance of the nearest runway threshold."""
    result = database.find_nearest_runway(position)
    if result is None:
        return "No runway found"

    runway, airport = result
    direction = direction_from_heading(bearing_to(position, runway.threshold))
    distance = format_distance(position.distance_to(runway.threshold))
    return f"Runway {runway.ident} at {airport.name}, {direction}, {distance}"
