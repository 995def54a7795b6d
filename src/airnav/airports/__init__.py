"""Airport facilities, approach procedures and taxi routing.

Typical usage:
    from airnav.airports import get_default_database

    db = get_default_database()
    airport = db.get_airport("LSIA")
    runway = airport.get_runway("03")
    route = db.get_taxi_route_to_runway(airport, position, runway)
    approach = runway.approach
"""

from airnav.airports.airport import Airport
from airnav.airports.approach import (
    ApproachProcedure,
    ApproachWaypoint,
    ApproachWaypointType,
    generate_standard_approach,
)
from airnav.airports.database import AirportDatabase, get_default_database
from airnav.airports.parking import ParkingPosition, ParkingType
from airnav.airports.pathfinding import TaxiPathFinder, route_length
from airnav.airports.runway import Runway, parse_runway_designation, reciprocal_runway_number
from airnav.airports.taxiway import TaxiwayGraph, TaxiwaySegment

__all__ = [
    "Airport",
    "AirportDatabase",
    "ApproachProcedure",
    "ApproachWaypoint",
    "ApproachWaypointType",
    "ParkingPosition",
    "ParkingType",
    "Runway",
    "TaxiPathFinder",
    "TaxiwayGraph",
    "TaxiwaySegment",
    "generate_standard_approach",
    "get_default_database",
    "parse_runway_designation",
    "reciprocal_runway_number",
    "route_length",
]
