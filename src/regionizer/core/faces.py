"""Face tracing over the arrangement graph.

Every undirected edge is split into two directed edges. Around each vertex
the neighbors are sorted counter-clockwise, and a directed edge ``u -> v``
is followed by ``v -> w`` where ``w`` is the neighbor of ``v`` immediately
clockwise of ``u``. Repeatedly following this rule from any directed edge
walks around exactly one face and comes back to the start, so every
directed edge belongs to exactly one traced cycle.

With this rule bounded faces are traced counter-clockwise (positive area)
and the outer boundary of each connected component clockwise (negative
area, or zero for a component without cycles).
"""

from dataclasses import replace
from fractions import Fraction
from functools import cmp_to_key

import structlog

from regionizer.core.geometry import compare_directions
from regionizer.domain import Arrangement, Region
from regionizer.exceptions import ArrangementInconsistencyError

logger = structlog.get_logger(__name__)

DirectedEdge = tuple[int, int]


def angular_order(arrangement: Arrangement, vertex: int) -> list[int]:
    """Neighbors of a vertex sorted counter-clockwise from the +x axis.

    Args:
        arrangement: Arrangement with adjacency
        vertex: Vertex id

    Returns:
        Neighbor ids in counter-clockwise order of their direction
    """
    origin = arrangement.vertices[vertex]
    vertices = arrangement.vertices

    def compare(a: int, b: int) -> int:
        return compare_directions(vertices[a] - origin, vertices[b] - origin)

    return sorted(arrangement.adjacency[vertex], key=cmp_to_key(compare))


def next_edge_map(arrangement: Arrangement) -> dict[DirectedEdge, DirectedEdge]:
    """Build the successor of every directed edge.

    For ``u -> v`` the successor is ``v -> w`` with ``w`` the neighbor
    preceding ``u`` in ``v``'s counter-clockwise order, i.e. the next one
    clockwise.

    Args:
        arrangement: Arrangement with adjacency

    Returns:
        Mapping from each directed edge to the one that follows it on its face
    """
    successor: dict[DirectedEdge, DirectedEdge] = {}
    for v in range(arrangement.vertex_count):
        order = angular_order(arrangement, v)
        for j, u in enumerate(order):
            successor[(u, v)] = (v, order[j - 1])
    return successor


class FaceExtractor:
    """Enumerates every face cycle of an arrangement.

    Attributes:
        check_cycle_area: Whether to check that the cycle areas sum to zero
    """

    def __init__(self, check_cycle_area: bool = True) -> None:
        self.check_cycle_area = check_cycle_area

    def extract(self, arrangement: Arrangement) -> Arrangement:
        """Trace all faces of the arrangement.

        Walks start from unused directed edges in (tail, head) order, so the
        output is deterministic.

        Args:
            arrangement: Arrangement with vertices and adjacency

        Returns:
            The arrangement with one hole-free Region per traced cycle,
            including the outer boundary of every component

        Raises:
            ArrangementInconsistencyError: If a directed edge has no
                successor, a walk does not close on its starting edge, or the
                cycle areas do not cancel out
        """
        successor = next_edge_map(arrangement)
        used: set[DirectedEdge] = set()
        regions: list[Region] = []

        for start in arrangement.directed_edges():
            if start in used:
                continue
            regions.append(Region(boundary=self._walk(start, successor, used)))

        traced = replace(arrangement, regions=tuple(regions))

        if self.check_cycle_area:
            total = sum((r.area(traced.vertices) for r in regions), Fraction(0))
            if total != 0:
                raise ArrangementInconsistencyError(
                    f"Face cycle areas sum to {total} instead of 0 over {len(regions)} cycles"
                )

        logger.debug("Faces traced", cycles=len(regions), directed_edges=len(used))
        return traced

    @staticmethod
    def _walk(
        start: DirectedEdge,
        successor: dict[DirectedEdge, DirectedEdge],
        used: set[DirectedEdge],
    ) -> tuple[int, ...]:
        """Follow successors from ``start`` until the walk closes."""
        cycle: list[int] = []
        edge = start
        while True:
            cycle.append(edge[0])
            used.add(edge)
            try:
                edge = successor[edge]
            except KeyError:
                raise ArrangementInconsistencyError(
                    f"Directed edge {edge} has no successor: "
                    f"vertex {edge[0]} is missing from the neighbors of {edge[1]}"
                ) from None
            if edge == start:
                return tuple(cycle)
            if edge in used:
                raise ArrangementInconsistencyError(
                    f"Walk from directed edge {start} re-entered {edge} without closing"
                )
