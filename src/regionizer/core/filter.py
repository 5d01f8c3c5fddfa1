"""Region filtering against the silhouette.

Traced face cycles are narrowed in two steps:

1. Orientation: cycles with non-positive area are outer boundaries of
   connected components. One lying inside a bounded face of another
   component becomes a hole of that face; every other one bounds the
   unbounded face and is dropped.
2. Holes: a bounded face whose boundary lies within a hole polygon of the
   silhouette is not part of the output and is dropped.
"""

from collections import defaultdict
from dataclasses import dataclass, replace

import structlog

from regionizer.core.geometry import point_in_polygon, polygon_within
from regionizer.domain import Arrangement, Polygon, Region, SilhouetteEntry

logger = structlog.get_logger(__name__)


@dataclass
class FilterReport:
    """Counts gathered while filtering.

    Attributes:
        bounded_faces: Cycles with positive area
        outer_cycles: Cycles with non-positive area
        nested_cycles: Outer cycles attached as holes of an enclosing face
        dropped_outer: Outer cycles dropped as boundaries of the unbounded face
        dropped_in_holes: Bounded faces dropped because they lie in a hole
    """

    bounded_faces: int = 0
    outer_cycles: int = 0
    nested_cycles: int = 0
    dropped_outer: int = 0
    dropped_in_holes: int = 0


def within_any_hole(polygon: Polygon, silhouette: tuple[SilhouetteEntry, ...]) -> bool:
    """Check whether a polygon lies within some hole of the silhouette."""
    return any(
        not entry.is_solid and polygon_within(polygon, entry.polygon)
        for entry in silhouette
    )


class RegionFilter:
    """Narrows traced face cycles to the regions of the silhouette.

    The filter is stateless; the report of the last call is returned
    alongside its result rather than stored.
    """

    def nest_components(self, arrangement: Arrangement) -> tuple[list[Region], FilterReport]:
        """Apply the orientation filter.

        Outer cycles of components lying inside a bounded face of another
        component are attached to the smallest such face as holes.

        Args:
            arrangement: Arrangement whose regions are hole-free traced cycles

        Returns:
            Tuple of (bounded faces with their holes, report)
        """
        vertices = arrangement.vertices
        labels = arrangement.component_labels()
        report = FilterReport()

        faces: list[tuple[Region, Polygon]] = []
        outers: list[Region] = []
        for region in arrangement.regions:
            if region.area(vertices) > 0:
                faces.append((region, region.boundary_polygon(vertices)))
            else:
                outers.append(region)
        report.bounded_faces = len(faces)
        report.outer_cycles = len(outers)

        holes: dict[int, list[tuple[int, ...]]] = defaultdict(list)
        for outer in outers:
            host = self._enclosing_face(outer, faces, labels, arrangement)
            if host is None:
                report.dropped_outer += 1
            else:
                holes[host].append(outer.boundary)
                report.nested_cycles += 1

        regions = [
            replace(region, holes=tuple(holes[i])) if i in holes else region
            for i, (region, _) in enumerate(faces)
        ]

        if arrangement.component_count() == 1 and faces and report.dropped_outer != 1:
            logger.warning(
                "Unexpected number of outer faces in a connected arrangement",
                dropped_outer=report.dropped_outer,
                bounded_faces=len(faces),
            )

        return regions, report

    def filter(
        self,
        arrangement: Arrangement,
        silhouette: tuple[SilhouetteEntry, ...],
    ) -> tuple[Arrangement, FilterReport]:
        """Keep the bounded faces that belong to the silhouette.

        Args:
            arrangement: Arrangement whose regions are the traced cycles
            silhouette: Normalized silhouette entries

        Returns:
            Tuple of (arrangement narrowed to the retained regions, report)
        """
        faces, report = self.nest_components(arrangement)

        kept: list[Region] = []
        for region in faces:
            if within_any_hole(region.boundary_polygon(arrangement.vertices), silhouette):
                report.dropped_in_holes += 1
                continue
            kept.append(region)

        logger.debug(
            "Regions filtered",
            kept=len(kept),
            dropped_outer=report.dropped_outer,
            dropped_in_holes=report.dropped_in_holes,
            nested_cycles=report.nested_cycles,
        )
        return replace(arrangement, regions=tuple(kept)), report

    @staticmethod
    def _enclosing_face(
        outer: Region,
        faces: list[tuple[Region, Polygon]],
        labels: list[int],
        arrangement: Arrangement,
    ) -> int | None:
        """Index of the smallest face of another component containing a cycle."""
        component = labels[outer.boundary[0]]
        anchor = arrangement.vertices[outer.boundary[0]]

        best: int | None = None
        best_area = None
        for i, (face, polygon) in enumerate(faces):
            if labels[face.boundary[0]] == component:
                continue
            if point_in_polygon(anchor, polygon.points) <= 0:
                continue
            area = polygon.signed_area()
            if best_area is None or area < best_area:
                best, best_area = i, area
        return best
