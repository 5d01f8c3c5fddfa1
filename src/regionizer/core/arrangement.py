"""Arrangement construction from skeleton segments.

This module builds the planar subdivision induced by a set of segments:

1. Every segment endpoint and every pairwise intersection becomes a vertex
2. Vertices are sorted by (x, y) and deduplicated; the position is the id
3. Along every segment, consecutive vertices are joined by an edge

Intersection enumeration is quadratic in the segment count and the
point-on-segment scan is linear in the vertex count per segment, which is
fine for puzzle-scale inputs.
"""

from collections.abc import Sequence
from itertools import combinations

import structlog

from regionizer.core.geometry import comparable_distance, point_on_segment, segment_intersection
from regionizer.domain import Arrangement, Point, Polygon, Segment
from regionizer.exceptions import MalformedInputError

logger = structlog.get_logger(__name__)


def collect_vertices(segments: Sequence[Segment]) -> tuple[Point, ...]:
    """Enumerate the vertex set of an arrangement.

    Args:
        segments: Skeleton segments

    Returns:
        Endpoints and pairwise intersection points, sorted by (x, y) with
        exact duplicates removed
    """
    points: set[Point] = set()
    for segment in segments:
        points.add(segment.start)
        points.add(segment.end)

    for s, t in combinations(segments, 2):
        points.update(segment_intersection(s, t))

    return tuple(sorted(points))


def silhouette_edges(polygons: Sequence[Polygon]) -> list[Segment]:
    """Boundary edges of the silhouette polygons, as skeleton segments."""
    return [edge for polygon in polygons for edge in polygon.edges()]


class ArrangementBuilder:
    """Builds the vertex set and adjacency graph of a segment arrangement.

    The builder is stateless; ``build`` can be called for any number of
    inputs.
    """

    def build(self, segments: Sequence[Segment]) -> Arrangement:
        """Build the arrangement of a set of segments.

        Args:
            segments: Skeleton segments. Duplicates and collinear overlaps are
                allowed; they collapse onto the same edges.

        Returns:
            Arrangement with vertices and adjacency, and no regions yet

        Raises:
            MalformedInputError: If fewer than two vertices lie on a segment,
                which happens for zero-length segments
        """
        vertices = collect_vertices(segments)
        neighbors: list[set[int]] = [set() for _ in vertices]

        for segment in segments:
            on_segment = self._vertices_along(segment, vertices)
            if len(on_segment) < 2:
                raise MalformedInputError(
                    f"segment {segment.start}-{segment.end}",
                    f"only {len(on_segment)} vertex lies on it",
                )
            for a, b in zip(on_segment, on_segment[1:]):
                neighbors[a].add(b)
                neighbors[b].add(a)

        arrangement = Arrangement(
            vertices=vertices,
            adjacency=tuple(frozenset(n) for n in neighbors),
        )
        logger.debug(
            "Arrangement built",
            segments=len(segments),
            vertices=arrangement.vertex_count,
            edges=arrangement.edge_count,
        )
        return arrangement

    @staticmethod
    def _vertices_along(segment: Segment, vertices: tuple[Point, ...]) -> list[int]:
        """Ids of the vertices on a segment, ordered from its first endpoint."""
        hits = [
            (comparable_distance(segment.start, p), idx)
            for idx, p in enumerate(vertices)
            if point_on_segment(p, segment)
        ]
        hits.sort()
        return [idx for _, idx in hits]
