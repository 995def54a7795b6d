"""A* search over a taxi graph between two arbitrary points.

Start and target positions do not need to lie on the graph; each is snapped
to a nearby node first. An empty result means no taxi route is available
and callers should fall back to direct guidance.

Typical usage:
    from airnav.airports.pathfinding import TaxiPathFinder

    finder = TaxiPathFinder()
    points = finder.find_path(graph, aircraft_position, runway.threshold)
    if not points:
        print("No taxi route available")
"""

import heapq
import logging
from collections.abc import Sequence

from airnav.airports.taxiway import TaxiwayGraph
from airnav.core.config import NavigationConfig
from airnav.physics.vectors import Vector3

logger = logging.getLogger(__name__)

CONNECTION_DISTANCE = 50.0


def route_length(points: Sequence[Vector3]) -> float:
    """Total length of a polyline in meters.

    Examples:
        >>> route_length([Vector3(0, 0, 0), Vector3(3, 4, 0), Vector3(3, 10, 0)])
        11.0
    """
    return sum(a.distance_to(b) for a, b in zip(points, points[1:]))


class TaxiPathFinder:
    """Shortest-path search from an off-graph start to an off-graph target.

    Attributes:
        connection_distance: Snap radius for the start node in meters
        start_search_multiplier: Factor applied to the snap radius on retry
        end_search_multiplier: Factor applied to the snap radius for the target
        interpolation_threshold: Start-to-first-node gap that adds a lead-in point

    Examples:
        >>> finder = TaxiPathFinder()
        >>> path = finder.find_path(graph, Vector3(-5.0, 0.0, 0.0), Vector3(105.0, 0.0, 0.0))
    """

    def __init__(
        self,
        connection_distance: float = CONNECTION_DISTANCE,
        start_search_multiplier: float = 3.0,
        end_search_multiplier: float = 2.0,
        interpolation_threshold: float = 50.0,
    ) -> None:
        self.connection_distance = connection_distance
        self.start_search_multiplier = start_search_multiplier
        self.end_search_multiplier = end_search_multiplier
        self.interpolation_threshold = interpolation_threshold

    @classmethod
    def from_config(cls, config: NavigationConfig) -> "TaxiPathFinder":
        return cls(
            connection_distance=config.connection_distance_m,
            start_search_multiplier=config.start_search_multiplier,
            end_search_multiplier=config.end_search_multiplier,
            interpolation_threshold=config.interpolation_threshold_m,
        )

    def find_entry_node(self, graph: TaxiwayGraph, start: Vector3) -> int | None:
        """Node the route starts from: within the snap radius, else the wider retry radius."""
        node_id = graph.find_nearest_node(start, self.connection_distance)
        if node_id is None:
            node_id = graph.find_nearest_node(
                start, self.connection_distance * self.start_search_multiplier
            )
        return node_id

    def find_exit_node(self, graph: TaxiwayGraph, end: Vector3) -> int | None:
        """Node the route ends at: within the target radius, else the nearest anywhere."""
        node_id = graph.find_nearest_node(end, self.connection_distance * self.end_search_multiplier)
        if node_id is None:
            node_id = graph.find_nearest_node(end)
        return node_id

    def find_path(self, graph: TaxiwayGraph, start: Vector3, end: Vector3) -> list[Vector3]:
        """Find the shortest taxi path between two points.

        Args:
            graph: Taxi graph of the airport
            start: Current position, not necessarily on the graph
            end: Target position, not necessarily on the graph

        Returns:
            Node positions from the start's entry node to the target's exit
            node, possibly preceded by a lead-in point; empty if no route
        """
        start_id = self.find_entry_node(graph, start)
        if start_id is None:
            logger.warning(
                "No taxiway within %.0fm of start %s",
                self.connection_distance * self.start_search_multiplier,
                start,
            )
            return []

        end_id = self.find_exit_node(graph, end)
        if end_id is None:
            logger.warning("Taxi graph is empty, no route to %s", end)
            return []

        node_ids = self._search(graph, start_id, end_id)
        if not node_ids:
            logger.warning("No path found from node %d to node %d", start_id, end_id)
            return []

        path = [graph.nodes[node_id] for node_id in node_ids]

        if start.distance_to(path[0]) > self.interpolation_threshold:
            path.insert(0, start.lerp(path[0], 0.5))

        logger.info(
            "Found taxi path %s (%d points, %.0fm)",
            " -> ".join(str(node_id) for node_id in node_ids),
            len(path),
            route_length(path),
        )
        return path

    @staticmethod
    def _search(graph: TaxiwayGraph, start_id: int, end_id: int) -> list[int]:
        """A* from start_id to end_id.

        The frontier is a heap of (f_score, node_id), so ties on f_score go
        to the lower node id. Entries made stale by a later improvement are
        skipped when popped.

        Returns:
            Node ids from start to end, or an empty list if unreachable
        """
        goal = graph.nodes[end_id]

        g_score: dict[int, float] = {start_id: 0.0}
        f_score: dict[int, float] = {start_id: graph.nodes[start_id].distance_to(goal)}
        came_from: dict[int, int] = {}
        open_set: list[tuple[float, int]] = [(f_score[start_id], start_id)]

        while open_set:
            current_f, current = heapq.heappop(open_set)

            if current_f > f_score[current]:
                continue

            if current == end_id:
                return TaxiPathFinder._reconstruct_path(came_from, current)

            for neighbor in graph.get_neighbors(current):
                tentative_g = g_score[current] + graph.edge_length(current, neighbor)

                if tentative_g < g_score.get(neighbor, float("inf")):
                    came_from[neighbor] = current
                    g_score[neighbor] = tentative_g
                    f_score[neighbor] = tentative_g + graph.nodes[neighbor].distance_to(goal)
                    heapq.heappush(open_set, (f_score[neighbor], neighbor))

        return []

    @staticmethod
    def _reconstruct_path(came_from: dict[int, int], current: int) -> list[int]:
        path = [current]
        while current in came_from:
            current = came_from[current]
            path.append(current)
        path.reverse()
        return path
