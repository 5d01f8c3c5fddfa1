"""Arrangement graph and region types.

The arrangement is the single context value handed from stage to stage:
the builder fills in vertices and adjacency, the face extractor adds the
traced cycles, and the filter narrows them to the retained regions. Each
stage returns a new value; none of them mutates its input.
"""

from collections import deque
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any

from regionizer.domain.primitives import Point, Polygon, format_rational

Cycle = tuple[int, ...]


@dataclass(frozen=True, slots=True)
class Region:
    """A face of the arrangement.

    Attributes:
        boundary: Vertex ids of the face boundary, in walk order
        holes: Vertex-id cycles of components nested inside the face. These
            are wound clockwise, so their areas are zero or negative.
    """

    boundary: Cycle
    holes: tuple[Cycle, ...] = ()

    def boundary_polygon(self, vertices: tuple[Point, ...]) -> Polygon:
        """Materialize the boundary cycle as a polygon."""
        return Polygon(tuple(vertices[i] for i in self.boundary))

    def area(self, vertices: tuple[Point, ...]) -> Fraction:
        """Signed area of the face, nested hole cycles included."""
        total = self.boundary_polygon(vertices).signed_area()
        for hole in self.holes:
            total += Polygon(tuple(vertices[i] for i in hole)).signed_area()
        return total

    def directed_edges(self) -> list[tuple[int, int]]:
        """Directed edges walked by the boundary and hole cycles."""
        edges = []
        for cycle in (self.boundary, *self.holes):
            n = len(cycle)
            edges.extend((cycle[i], cycle[(i + 1) % n]) for i in range(n))
        return edges

    def to_dict(self, vertices: tuple[Point, ...] | None = None) -> dict[str, Any]:
        """Serialize to dictionary.

        Args:
            vertices: When given, the exact area is included

        Returns:
            Dictionary representation of the region
        """
        data: dict[str, Any] = {
            "boundary": list(self.boundary),
            "holes": [list(h) for h in self.holes],
        }
        if vertices is not None:
            data["area"] = format_rational(self.area(vertices))
        return data


@dataclass(frozen=True, slots=True)
class Arrangement:
    """Planar subdivision induced by the skeleton.

    Attributes:
        vertices: Sorted, deduplicated points; the index is the vertex id
        adjacency: Neighbor ids for each vertex id
        regions: Face cycles or filtered regions, depending on the stage
    """

    vertices: tuple[Point, ...]
    adjacency: tuple[frozenset[int], ...]
    regions: tuple[Region, ...] = field(default=())

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def edge_count(self) -> int:
        """Number of undirected edges."""
        return sum(len(neighbors) for neighbors in self.adjacency) // 2

    def directed_edges(self) -> list[tuple[int, int]]:
        """Both directions of every edge, ordered by (tail, head)."""
        return [(u, v) for u, neighbors in enumerate(self.adjacency) for v in sorted(neighbors)]

    def component_labels(self) -> list[int]:
        """Label each vertex with the id of its connected component.

        Returns:
            List indexed by vertex id; labels are numbered from 0 in order of
            the lowest vertex id of each component
        """
        labels = [-1] * len(self.vertices)
        label = 0
        for start in range(len(self.vertices)):
            if labels[start] != -1:
                continue
            labels[start] = label
            queue = deque([start])
            while queue:
                u = queue.popleft()
                for v in self.adjacency[u]:
                    if labels[v] == -1:
                        labels[v] = label
                        queue.append(v)
            label += 1
        return labels

    def component_count(self) -> int:
        labels = self.component_labels()
        return max(labels) + 1 if labels else 0
