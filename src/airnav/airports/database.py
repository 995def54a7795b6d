"""Airport registry and taxi route queries.

The registry owns a fixed catalog of airports, answers nearest-entity
queries over it and assembles taxi routes from the taxi graph and the
path finder.

Typical usage:
    from airnav.airports.database import get_default_database

    db = get_default_database()
    airport = db.find_airport_at_position(position)
    runway = airport.get_runway("03")
    route = db.get_taxi_route_to_runway(airport, position, runway)
"""

import logging
import threading
from collections.abc import Iterable

from airnav.airports.airport import Airport
from airnav.airports.catalog import build_default_airports
from airnav.airports.parking import ParkingPosition
from airnav.airports.pathfinding import TaxiPathFinder
from airnav.airports.runway import Runway
from airnav.airports.taxiway import TaxiwayGraph
from airnav.core.config import NavigationConfig
from airnav.physics.vectors import Vector3

logger = logging.getLogger(__name__)


class AirportDatabase:
    """Catalog of airports with spatial and routing queries.

    The catalog is fixed at construction. Taxi graphs are built the first
    time an airport is routed on and reused afterwards.

    Examples:
        >>> db = AirportDatabase(build_default_airports())
        >>> db.get_airport("lsia").name
        'Los Santos International'
        >>> runway, airport = db.find_nearest_runway(Vector3(-1300.0, -2450.0, 14.0))
    """

    def __init__(self, airports: Iterable[Airport], config: NavigationConfig | None = None) -> None:
        """Initialize the registry.

        Args:
            airports: Airports in lookup order
            config: Navigation tunables, defaults when None
        """
        self.config = config or NavigationConfig()
        self.airports: tuple[Airport, ...] = tuple(airports)
        self.path_finder = TaxiPathFinder.from_config(self.config)
        self._graphs: dict[str, TaxiwayGraph] = {}
        self._graph_lock = threading.Lock()

        logger.info("Airport database ready: %d airports", len(self.airports))

    def get_all_airports(self) -> tuple[Airport, ...]:
        return self.airports

    def get_airport_count(self) -> int:
        return len(self.airports)

    def get_airport(self, code: str) -> Airport | None:
        """Get an airport by code (case-insensitive)."""
        wanted = code.strip().upper()
        for airport in self.airports:
            if airport.code.upper() == wanted:
                return airport
        return None

    def find_airport_at_position(self, position: Vector3) -> Airport | None:
        """First airport whose boundary contains the position."""
        for airport in self.airports:
            if airport.contains_position(position):
                return airport
        return None

    def find_nearest_airport(self, position: Vector3) -> Airport | None:
        """Airport whose center is nearest to the position (first wins ties)."""
        nearest: Airport | None = None
        nearest_distance = float("inf")

        for airport in self.airports:
            distance = position.distance_to(airport.center)
            if distance < nearest_distance:
                nearest_distance = distance
                nearest = airport

        return nearest

    def find_nearest_runway(self, position: Vector3) -> tuple[Runway, Airport] | None:
        """Runway threshold nearest to the position across every airport.

        Returns:
            (runway, owning airport), or None if no airport has runways
        """
        nearest: tuple[Runway, Airport] | None = None
        nearest_distance = float("inf")

        for airport in self.airports:
            for runway in airport.runways:
                distance = position.distance_to(runway.threshold)
                if distance < nearest_distance:
                    nearest_distance = distance
                    nearest = (runway, airport)

        return nearest

    def get_taxi_graph(self, airport: Airport) -> TaxiwayGraph:
        """Taxi graph of an airport, built on first use."""
        graph = self._graphs.get(airport.code)
        if graph is not None:
            return graph

        with self._graph_lock:
            graph = self._graphs.get(airport.code)
            if graph is None:
                graph = TaxiwayGraph.from_segments(airport.taxiways, self.config.merge_distance_m)
                self._graphs[airport.code] = graph
        return graph

    def get_taxi_route_to_runway(
        self, airport: Airport | None, current_position: Vector3, runway: Runway | None
    ) -> list[Vector3]:
        """Taxi route ending at a runway threshold.

        The route follows the taxi graph, then a hold-short point before
        the threshold (on the reciprocal heading), then the threshold itself.
        If the graph yields no path, the route is just hold-short and threshold.

        Args:
            airport: Airport to taxi at
            current_position: Aircraft position
            runway: Target runway

        Returns:
            Route points, empty if airport or runway is None
        """
        if airport is None or runway is None:
            return []

        route = self.path_finder.find_path(
            self.get_taxi_graph(airport), current_position, runway.threshold
        )

        hold_short = runway.threshold + Vector3.from_heading(
            runway.reciprocal_heading, self.config.hold_short_distance_m
        )
        if not route or route[-1].distance_to(hold_short) > self.config.final_point_tolerance_m:
            route.append(hold_short)

        route.append(runway.threshold)

        logger.info(
            "Taxi route at %s to runway %s: %d points", airport.code, runway.ident, len(route)
        )
        return route

    def get_taxi_route_to_parking(
        self, airport: Airport | None, current_position: Vector3, parking: ParkingPosition | None
    ) -> list[Vector3]:
        """Taxi route ending at a parking position.

        Args:
            airport: Airport to taxi at
            current_position: Aircraft position
            parking: Target parking position

        Returns:
            Route points, empty if airport or parking is None
        """
        if airport is None or parking is None:
            return []

        route = self.path_finder.find_path(
            self.get_taxi_graph(airport), current_position, parking.position
        )

        if not route or route[-1].distance_to(parking.position) > self.config.final_point_tolerance_m:
            route.append(parking.position)

        logger.info(
            "Taxi route at %s to parking %s: %d points", airport.code, parking.name, len(route)
        )
        return route


_default_database: AirportDatabase | None = None
_default_lock = threading.Lock()


def get_default_database() -> AirportDatabase:
    """Shared registry over the built-in catalog, created on first call."""
    global _default_database

    if _default_database is None:
        with _default_lock:
            if _default_database is None:
                _default_database = AirportDatabase(build_default_airports())
    return _default_database
