"""Taxiway segments and the taxi graph built from them.

Facility data describes taxiways as independent line segments. The graph
builder turns their endpoints into shared nodes, merging endpoints that lie
within a small tolerance of each other, and connects them with directed
edges.

Typical usage:
    from airnav.airports.taxiway import TaxiwayGraph, TaxiwaySegment

    segments = [
        TaxiwaySegment("Alpha", Vector3(0.0, 0.0, 0.0), Vector3(100.0, 0.0, 0.0)),
        TaxiwaySegment("Bravo", Vector3(100.0, 5.0, 0.0), Vector3(100.0, 200.0, 0.0)),
    ]
    graph = TaxiwayGraph.from_segments(segments)
    graph.get_node_count()  # 3, Alpha's end and Bravo's start are merged
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from airnav.physics.vectors import Vector3

logger = logging.getLogger(__name__)

NODE_MERGE_DISTANCE = 30.0


@dataclass(frozen=True)
class TaxiwaySegment:
    """A straight piece of taxiway between two points.

    Attributes:
        name: Taxiway name (e.g., "Alpha", "Bravo 2")
        start: Start position
        end: End position
        width: Width in meters
        bidirectional: If False, the segment may only be taxied start to end

    Examples:
        >>> seg = TaxiwaySegment("Alpha", Vector3(0.0, 0.0, 0.0), Vector3(0.0, 100.0, 0.0))
        >>> seg.length
        100.0
    """

    name: str
    start: Vector3
    end: Vector3
    width: float = 23.0
    bidirectional: bool = True

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    def midpoint(self) -> Vector3:
        return (self.start + self.end) / 2.0


class TaxiwayGraph:
    """Directed graph of taxiway nodes.

    Nodes are integer ids allocated in discovery order; ``nodes`` maps them
    to positions and ``adjacency`` to the ids reachable in one edge.

    Endpoint merging is first-match-wins: an endpoint joins the first
    existing node (in id order) that is strictly closer than the merge
    distance. The result therefore depends on segment order, and merging is
    not transitive.

    Graphs returned by from_segments are frozen: they are shared by every
    route query on an airport, so adding segments afterwards raises.

    Examples:
        >>> graph = TaxiwayGraph.from_segments(airport.taxiways)
        >>> graph.get_neighbors(0)
        (1,)
    """

    def __init__(self, merge_distance: float = NODE_MERGE_DISTANCE) -> None:
        """Initialize an empty graph.

        Args:
            merge_distance: Endpoints closer than this share a node
        """
        self.merge_distance = merge_distance
        self.nodes: dict[int, Vector3] = {}
        self.adjacency: dict[int, list[int]] = {}
        self._next_id = 0
        self._frozen = False

    @classmethod
    def from_segments(
        cls, segments: Iterable[TaxiwaySegment], merge_distance: float = NODE_MERGE_DISTANCE
    ) -> "TaxiwayGraph":
        """Build a graph from taxiway segments.

        Args:
            segments: Segments in facility order
            merge_distance: Endpoint merge tolerance in meters

        Returns:
            The populated graph
        """
        graph = cls(merge_distance)
        segment_count = 0
        for segment in segments:
            graph.add_segment(segment)
            segment_count += 1

        logger.info(
            "Built taxi graph: %d segments -> %d nodes, %d edges",
            segment_count,
            graph.get_node_count(),
            graph.get_edge_count(),
        )
        graph.freeze()
        return graph

    def add_segment(self, segment: TaxiwaySegment) -> tuple[int, int]:
        """Add one segment, reusing or creating its endpoint nodes.

        Returns:
            (start node id, end node id)

        Raises:
            RuntimeError: If the graph is frozen.
        """
        if self._frozen:
            raise RuntimeError(f"Cannot add segment {segment.name} to a frozen taxi graph")

        start_id = self.find_or_add_node(segment.start)
        end_id = self.find_or_add_node(segment.end)

        if start_id == end_id:
            logger.debug("Segment %s collapsed into node %d", segment.name, start_id)
            return start_id, end_id

        self._add_edge(start_id, end_id)
        if segment.bidirectional:
            self._add_edge(end_id, start_id)

        logger.debug(
            "Segment %s: %d -> %d%s",
            segment.name,
            start_id,
            end_id,
            " (both ways)" if segment.bidirectional else "",
        )
        return start_id, end_id

    def find_or_add_node(self, position: Vector3) -> int:
        """Return the first node within merge distance, or allocate a new one."""
        if self._frozen:
            raise RuntimeError("Cannot add nodes to a frozen taxi graph")

        for node_id, node_position in self.nodes.items():
            if node_position.distance_to(position) < self.merge_distance:
                return node_id

        node_id = self._next_id
        self._next_id += 1
        self.nodes[node_id] = position
        self.adjacency[node_id] = []
        return node_id

    def freeze(self) -> None:
        """Reject further segments and nodes."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _add_edge(self, from_id: int, to_id: int) -> None:
        neighbors = self.adjacency[from_id]
        if to_id not in neighbors:
            neighbors.append(to_id)

    def get_node(self, node_id: int) -> Vector3 | None:
        return self.nodes.get(node_id)

    def get_neighbors(self, node_id: int) -> tuple[int, ...]:
        """Ids reachable from a node in one edge (empty if unknown)."""
        return tuple(self.adjacency.get(node_id, ()))

    def edge_length(self, from_id: int, to_id: int) -> float:
        return self.nodes[from_id].distance_to(self.nodes[to_id])

    def find_nearest_node(self, position: Vector3, max_distance: float = float("inf")) -> int | None:
        """Find the node nearest to a position.

        Args:
            position: Position to search from
            max_distance: Only nodes strictly closer than this are considered

        Returns:
            Node id, or None if no node qualifies

        Examples:
            >>> graph.find_nearest_node(Vector3(3.0, 4.0, 0.0), max_distance=50.0)
            0
        """
        nearest_id: int | None = None
        nearest_distance = max_distance

        for node_id, node_position in self.nodes.items():
            distance = node_position.distance_to(position)
            if distance < nearest_distance:
                nearest_distance = distance
                nearest_id = node_id

        return nearest_id

    def get_node_count(self) -> int:
        return len(self.nodes)

    def get_edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self.adjacency.values())
