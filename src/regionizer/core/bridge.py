"""Hole bridging for single-cycle region output.

A region of a disconnected arrangement carries the outer cycles of the
components nested inside it as holes. The text format has room for a single
cycle per region, so each hole is spliced into the boundary through a
connector: the walk leaves the boundary at vertex ``b``, crosses to hole
vertex ``h``, goes once around the hole and returns along the same
connector. The connector is walked once in each direction and contributes
nothing to the signed area, so the spliced cycle has exactly the region's
area.

Connector selection:
1. Holes are bridged in decreasing order of their largest vertex
2. Candidates pair a vertex of the cycle built so far with a hole vertex,
   shortest first
3. A candidate is kept if it leaves both ends into the face and touches no
   boundary or hole edge anywhere but at its own ends

Key classes:
- HoleBridger: Splices the holes of a region into its boundary
"""

from collections.abc import Sequence

import structlog

from regionizer.core.geometry import comparable_distance, det, dot, segment_intersection
from regionizer.domain import Cycle, Point, Region, Segment
from regionizer.exceptions import ArrangementInconsistencyError

logger = structlog.get_logger(__name__)


def cycle_edges(cycle: Cycle, vertices: Sequence[Point]) -> list[Segment]:
    """Edges walked by a vertex-id cycle, closing edge included."""
    n = len(cycle)
    return [Segment(vertices[cycle[i]], vertices[cycle[(i + 1) % n]]) for i in range(n)]


def opens_into_face(prev: Point, corner: Point, nxt: Point, target: Point) -> bool:
    """Check whether ``target`` is seen from ``corner`` inside the face.

    The face lies to the left of the walk ``prev -> corner -> nxt``, so at
    ``corner`` it covers the directions swept counter-clockwise from
    ``nxt - corner`` to ``prev - corner``, both excluded.

    Args:
        prev: Vertex the walk arrives from
        corner: Vertex the walk turns at
        nxt: Vertex the walk leaves to
        target: Far end of a candidate connector

    Returns:
        True if the direction to ``target`` lies strictly inside the corner
    """
    first = nxt - corner
    last = prev - corner
    d = target - corner

    turn = det(first, last)
    if turn > 0:
        return det(first, d) > 0 and det(d, last) > 0
    if turn == 0 and dot(corner, nxt, prev) > 0:
        # Tip of a dangling edge: every direction but the edge itself
        return not (det(first, d) == 0 and dot(corner, nxt, target) > 0)
    return not (det(last, d) >= 0 and det(d, first) >= 0)


def _openings(cycle: Cycle, vertex: int, target: Point, vertices: Sequence[Point]) -> list[int]:
    """Positions of ``vertex`` in ``cycle`` whose corner opens towards ``target``."""
    n = len(cycle)
    return [
        i
        for i, v in enumerate(cycle)
        if v == vertex
        and opens_into_face(
            vertices[cycle[i - 1]], vertices[v], vertices[cycle[(i + 1) % n]], target
        )
    ]


def splice(ring: Cycle, at_ring: int, hole: Cycle, at_hole: int) -> Cycle:
    """Splice ``hole`` into ``ring`` through the connector between two positions.

    Args:
        ring: Cycle the hole is attached to
        at_ring: Position in ``ring`` of the connector's first end
        hole: Hole cycle
        at_hole: Position in ``hole`` of the connector's second end

    Returns:
        ``ring`` up to the first end, the full hole starting and ending at the
        second end, then the first end again and the rest of ``ring``
    """
    around = hole[at_hole:] + hole[:at_hole] + (hole[at_hole],)
    return ring[: at_ring + 1] + around + ring[at_ring:]


class HoleBridger:
    """Turns a region with holes into a single vertex-id cycle.

    Example:
        cycle = HoleBridger().bridge(region, arrangement.vertices)
        assert Polygon(tuple(vertices[i] for i in cycle)).signed_area() == region.area(vertices)
    """

    def bridge(self, region: Region, vertices: Sequence[Point]) -> Cycle:
        """Splice every hole of a region into its boundary.

        Args:
            region: Region with boundary and hole cycles
            vertices: Vertex set the cycles index into

        Returns:
            The boundary itself for a region without holes, otherwise one
            cycle walking the boundary, every hole and the connectors

        Raises:
            ArrangementInconsistencyError: If no connector reaches a hole
        """
        if not region.holes:
            return region.boundary

        ring = region.boundary
        pending = sorted(
            region.holes, key=lambda hole: max(vertices[v] for v in hole), reverse=True
        )
        obstacles = [edge for hole in pending for edge in cycle_edges(hole, vertices)]
        obstacles.extend(cycle_edges(ring, vertices))

        for hole in pending:
            at_ring, at_hole = self._connector(ring, hole, obstacles, vertices)
            b = vertices[ring[at_ring]]
            h = vertices[hole[at_hole]]
            ring = splice(ring, at_ring, hole, at_hole)
            obstacles.append(Segment(b, h))
            logger.debug("Hole bridged", connector=f"{b}-{h}", cycle_length=len(ring))

        return ring

    @staticmethod
    def _connector(
        ring: Cycle,
        hole: Cycle,
        obstacles: list[Segment],
        vertices: Sequence[Point],
    ) -> tuple[int, int]:
        """Shortest clear connector between a ring and a hole, as positions."""
        candidates = sorted(
            (comparable_distance(vertices[b], vertices[h]), b, h)
            for b in set(ring)
            for h in set(hole)
        )
        for _, b, h in candidates:
            start, end = vertices[b], vertices[h]
            at_ring = _openings(ring, b, end, vertices)
            at_hole = _openings(hole, h, start, vertices)
            if not at_ring or not at_hole:
                continue

            connector = Segment(start, end)
            ends = {start, end}
            if all(
                set(segment_intersection(connector, edge)) <= ends for edge in obstacles
            ):
                return at_ring[0], at_hole[0]

        raise ArrangementInconsistencyError(
            f"No connector reaches hole cycle {list(hole)} from cycle {list(ring)}"
        )
