"""Airport facility: boundary, runways, parking and taxiways."""

from dataclasses import dataclass, field

from airnav.airports.parking import ParkingPosition
from airnav.airports.runway import Runway, parse_runway_designation
from airnav.airports.taxiway import TaxiwaySegment
from airnav.physics.vectors import Vector3


@dataclass(frozen=True)
class Airport:
    """An airport and everything on its surface.

    Attributes:
        name: Airport name (e.g., "Los Santos International")
        code: Airport code (e.g., "LSIA")
        center: Center of the airport boundary
        radius: Boundary radius in meters
        runways: Runway directions, in facility order
        parking_positions: Parking positions, in facility order
        taxiways: Taxiway segments, in facility order

    Examples:
        >>> airport.contains_position(airport.center)
        True
        >>> airport.find_nearest_runway(Vector3(-1300.0, -2450.0, 14.0)).name
        '03'
    """

    name: str
    code: str
    center: Vector3
    radius: float
    runways: tuple[Runway, ...] = field(default=())
    parking_positions: tuple[ParkingPosition, ...] = field(default=())
    taxiways: tuple[TaxiwaySegment, ...] = field(default=())

    def contains_position(self, position: Vector3) -> bool:
        return self.center.distance_to(position) <= self.radius

    def find_nearest_runway(self, position: Vector3) -> Runway | None:
        """Runway whose threshold is nearest to a position (first wins ties)."""
        nearest: Runway | None = None
        nearest_distance = float("inf")

        for runway in self.runways:
            distance = position.distance_to(runway.threshold)
            if distance < nearest_distance:
                nearest_distance = distance
                nearest = runway

        return nearest

    def find_nearest_parking(self, position: Vector3) -> ParkingPosition | None:
        """Parking position nearest to a position (first wins ties)."""
        nearest: ParkingPosition | None = None
        nearest_distance = float("inf")

        for parking in self.parking_positions:
            distance = position.distance_to(parking.position)
            if distance < nearest_distance:
                nearest_distance = distance
                nearest = parking

        return nearest

    def get_runway(self, label: str) -> Runway | None:
        """Look up a runway by exact name, or by number and designator.

        "03", "3", "Runway 03" and "RWY 3" all match a runway named "03".
        """
        for runway in self.runways:
            if runway.name == label:
                return runway

        number, designator = parse_runway_designation(label)
        if number == 0:
            return None

        for runway in self.runways:
            if runway.number == number and runway.designator == designator:
                return runway
        return None

    def get_parking(self, name: str) -> ParkingPosition | None:
        """Look up a parking position by name (case-insensitive)."""
        wanted = name.strip().lower()
        for parking in self.parking_positions:
            if parking.name.lower() == wanted:
                return parking
        return None
