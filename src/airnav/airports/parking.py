"""Parking positions (gates, ramps, hangars) at an airport.

Typical usage:
    from airnav.airports.parking import ParkingPosition, ParkingType

    stand = ParkingPosition("Cargo Ramp 1", Vector3(-1550.0, -2730.0, 14.0), 270.0, ParkingType.CARGO)
    stand.radius  # 15.0
"""

from dataclasses import dataclass, field
from enum import Enum

from airnav.physics.vectors import Vector3

HANGAR_RADIUS_M = 30.0
STANDARD_RADIUS_M = 15.0


class ParkingType(Enum):
    """Type of parking position."""

    GATE = "gate"
    RAMP = "ramp"
    HANGAR = "hangar"
    FBO = "fbo"  # Fixed Base Operator
    CARGO = "cargo"
    MILITARY = "military"


@dataclass(frozen=True)
class ParkingPosition:
    """A place an aircraft can park.

    Attributes:
        name: Human-readable name (e.g., "Terminal Gate A1", "Hangar 2")
        position: Position of the parking spot
        heading: Parked heading in degrees
        parking_type: Type of parking
        radius: Size of the spot in meters, derived from the type

    Examples:
        >>> ParkingPosition("Hangar", Vector3(0.0, 0.0, 0.0), 90.0, ParkingType.HANGAR).radius
        30.0
    """

    name: str
    position: Vector3
    heading: float
    parking_type: ParkingType = ParkingType.GATE
    radius: float = field(init=False)

    def __post_init__(self) -> None:
        radius = HANGAR_RADIUS_M if self.parking_type == ParkingType.HANGAR else STANDARD_RADIUS_M
        object.__setattr__(self, "radius", radius)

    def contains_position(self, position: Vector3) -> bool:
        """Check whether a point lies within the parking spot (horizontally)."""
        return self.position.horizontal_distance_to(position) <= self.radius
