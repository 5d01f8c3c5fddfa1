"""Silhouette and problem representation.

A problem is the raw input of one run: silhouette polygons exactly as they
were wound in the input, and the skeleton segments. The silhouette entries
derived from it carry each polygon normalized to counter-clockwise winding
together with a flag recording whether it adds or subtracts area.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Any

from regionizer.domain.primitives import Polygon, Segment
from regionizer.exceptions import MalformedInputError


@dataclass(frozen=True, slots=True)
class SilhouetteEntry:
    """A silhouette polygon normalized to positive orientation.

    Attributes:
        polygon: Counter-clockwise polygon (strictly positive signed area)
        is_solid: True if the input winding was already counter-clockwise,
            False if the polygon was reversed and therefore marks a hole
    """

    polygon: Polygon
    is_solid: bool

    @classmethod
    def from_polygon(cls, polygon: Polygon) -> "SilhouetteEntry":
        """Normalize a raw input polygon.

        Args:
            polygon: Polygon in its input winding

        Returns:
            SilhouetteEntry with a counter-clockwise polygon

        Raises:
            MalformedInputError: If the polygon has zero area
        """
        area = polygon.signed_area()
        if area == 0:
            raise MalformedInputError(
                f"polygon {' '.join(str(p) for p in polygon.points)}",
                "silhouette polygon has zero area",
            )
        if area > 0:
            return cls(polygon=polygon, is_solid=True)
        return cls(polygon=polygon.reversed(), is_solid=False)

    def normalized(self) -> "SilhouetteEntry":
        """Normalize again; a no-op for an entry built by ``from_polygon``."""
        if self.polygon.signed_area() > 0:
            return self
        return SilhouetteEntry(polygon=self.polygon.reversed(), is_solid=not self.is_solid)

    @property
    def area(self) -> Fraction:
        """Unsigned area of the polygon."""
        return self.polygon.signed_area()

    @property
    def contribution(self) -> Fraction:
        """Area this entry adds to the silhouette (negative for holes)."""
        return self.area if self.is_solid else -self.area

    def to_dict(self) -> dict[str, Any]:
        return {"polygon": self.polygon.to_dict(), "is_solid": self.is_solid}


def normalize_silhouette(polygons: list[Polygon]) -> tuple[SilhouetteEntry, ...]:
    """Normalize every input polygon of a silhouette.

    Args:
        polygons: Polygons in their input winding

    Returns:
        Tuple of silhouette entries in input order
    """
    return tuple(SilhouetteEntry.from_polygon(p) for p in polygons)


def silhouette_area(silhouette: tuple[SilhouetteEntry, ...]) -> Fraction:
    """Total signed area of a silhouette (solids minus holes)."""
    return sum((entry.contribution for entry in silhouette), Fraction(0))


@dataclass(frozen=True, slots=True)
class Problem:
    """Raw input of a single run.

    Attributes:
        polygons: Silhouette polygons in their input winding
        segments: Skeleton segments
    """

    polygons: tuple[Polygon, ...]
    segments: tuple[Segment, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "polygons": [p.to_dict() for p in self.polygons],
            "segments": [s.to_dict() for s in self.segments],
        }
