"""Exact geometric value types.

This module defines the value types every stage of the pipeline works on:
- Point: A 2D point with rational coordinates
- Segment: A straight skeleton edge between two points
- Polygon: A closed ring of points whose orientation is significant

All coordinates are ``fractions.Fraction`` values. Nothing here ever
converts to ``float``.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Any


def format_rational(value: Fraction) -> str:
    """Format a rational as ``numerator/denominator``.

    The denominator is always written, so integers come out as ``3/1``.

    Args:
        value: Rational to format

    Returns:
        String form of the rational
    """
    return f"{value.numerator}/{value.denominator}"


@dataclass(frozen=True, slots=True, order=True)
class Point:
    """A point in 2D space with exact rational coordinates.

    Immutable and hashable. Ordering is lexicographic by (x, y), which is the
    order vertex ids are assigned in.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: Fraction
    y: Fraction

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", Fraction(self.x))
        object.__setattr__(self, "y", Fraction(self.y))

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, factor: Fraction) -> "Point":
        """Multiply both coordinates by ``factor``."""
        return Point(self.x * factor, self.y * factor)

    def __str__(self) -> str:
        return f"({format_rational(self.x)}, {format_rational(self.y)})"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y written as ``n/d`` strings
        """
        return {"x": format_rational(self.x), "y": format_rational(self.y)}


@dataclass(frozen=True, slots=True, eq=False)
class Segment:
    """A skeleton segment.

    The pair of endpoints is unordered for equality and hashing, but
    ``start`` is the endpoint vertices are measured from when they are
    sorted along the segment.

    Attributes:
        start: First endpoint
        end: Second endpoint
    """

    start: Point
    end: Point

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return {self.start, self.end} == {other.start, other.end}

    def __hash__(self) -> int:
        return hash(frozenset((self.start, self.end)))

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass(frozen=True, slots=True)
class Polygon:
    """A closed polygon.

    The ring is implicitly closed: the last point connects back to the first.
    Orientation matters: counter-clockwise rings have positive signed area.

    Attributes:
        points: Points of the ring, without a repeated closing point
    """

    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def signed_area(self) -> Fraction:
        """Calculate signed area using the shoelace formula.

        The sign of the area indicates winding direction:
        - Positive area: counter-clockwise winding
        - Negative area: clockwise winding

        Returns:
            Exact signed area, zero for fewer than three points
        """
        n = len(self.points)
        if n < 3:
            return Fraction(0)

        twice_area = Fraction(0)
        for i in range(n):
            p = self.points[i]
            q = self.points[(i + 1) % n]
            twice_area += p.x * q.y - q.x * p.y

        return twice_area / 2

    def reversed(self) -> "Polygon":
        """Return the same ring traversed in the opposite direction."""
        return Polygon(tuple(reversed(self.points)))

    def edges(self) -> list[Segment]:
        """Return the ring's edges, closing edge included."""
        n = len(self.points)
        return [Segment(self.points[i], self.points[(i + 1) % n]) for i in range(n)]

    def to_dict(self) -> dict[str, Any]:
        return {"points": [p.to_dict() for p in self.points]}
