"""Exact geometric predicates for arrangement construction.

This module provides the mathematical primitives of the pipeline:
- Cross and dot products
- Segment intersection, including collinear overlaps
- Point-on-segment and comparable distance along a segment
- Angular ordering of directions without trigonometry
- Point-in-polygon and polygon containment

Every function works on ``fractions.Fraction`` coordinates and is sign-exact:
no comparison anywhere tolerates rounding.
"""

from collections.abc import Sequence
from fractions import Fraction

from regionizer.domain import Point, Polygon, Segment


def det(u: Point, v: Point) -> Fraction:
    """Cross product of two vectors."""
    return u.x * v.y - u.y * v.x


def cross(origin: Point, a: Point, b: Point) -> Fraction:
    """Cross product of ``a - origin`` and ``b - origin``.

    Positive when ``origin -> a -> b`` turns counter-clockwise, zero when the
    three points are collinear.
    """
    return (a.x - origin.x) * (b.y - origin.y) - (a.y - origin.y) * (b.x - origin.x)


def dot(origin: Point, a: Point, b: Point) -> Fraction:
    """Dot product of ``a - origin`` and ``b - origin``."""
    return (a.x - origin.x) * (b.x - origin.x) + (a.y - origin.y) * (b.y - origin.y)


def comparable_distance(a: Point, b: Point) -> Fraction:
    """Squared Euclidean distance between two points.

    Monotone in the true distance, so it orders points along a segment
    without ever taking a square root.
    """
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def point_on_segment(point: Point, segment: Segment) -> bool:
    """Check whether a point lies on a closed segment.

    Args:
        point: The point to test
        segment: The segment, endpoints included

    Returns:
        True if the point is collinear with the segment and between its
        endpoints
    """
    if cross(segment.start, segment.end, point) != 0:
        return False
    return dot(point, segment.start, segment.end) <= 0


def segment_intersection(s: Segment, t: Segment) -> list[Point]:
    """Find the discrete intersection points of two closed segments.

    For segments crossing or touching at a single point, that point is
    returned. For collinear segments that overlap, the two endpoints of the
    shared interval are returned (one point when the overlap is a single
    shared endpoint); interior points of the overlap are never produced.

    Args:
        s: First segment
        t: Second segment

    Returns:
        Zero, one or two points, sorted

    Examples:
        >>> a = Segment(Point(0, 0), Point(2, 2))
        >>> b = Segment(Point(0, 2), Point(2, 0))
        >>> segment_intersection(a, b)
        [Point(x=Fraction(1, 1), y=Fraction(1, 1))]
    """
    r = s.end - s.start
    w = t.end - t.start
    denom = det(r, w)

    if denom == 0:
        # Parallel or degenerate: only shared endpoints of an overlap count
        shared = {
            p
            for p in (s.start, s.end, t.start, t.end)
            if point_on_segment(p, s) and point_on_segment(p, t)
        }
        return sorted(shared)

    offset = t.start - s.start
    u_s = det(offset, w) / denom
    u_t = det(offset, r) / denom
    if 0 <= u_s <= 1 and 0 <= u_t <= 1:
        return [s.start + r.scale(u_s)]
    return []


def quadrant(v: Point) -> int:
    """Quadrant of a non-zero direction vector.

    Quadrants are half-open and numbered counter-clockwise from the positive
    x axis, so every direction belongs to exactly one of them:
    0 for x > 0, y >= 0; 1 for x <= 0, y > 0; 2 for x < 0, y <= 0;
    3 for x >= 0, y < 0.

    Raises:
        ValueError: For the zero vector
    """
    if v.x > 0 and v.y >= 0:
        return 0
    if v.x <= 0 and v.y > 0:
        return 1
    if v.x < 0 and v.y <= 0:
        return 2
    if v.x >= 0 and v.y < 0:
        return 3
    raise ValueError("Zero vector has no direction")


def compare_directions(a: Point, b: Point) -> int:
    """Compare two directions by counter-clockwise angle from the x axis.

    Quadrant is the primary key; within a quadrant the sign of the cross
    product decides. Usable with ``functools.cmp_to_key``.

    Returns:
        -1 if ``a`` comes first, 1 if ``b`` comes first, 0 if they point the
        same way
    """
    qa = quadrant(a)
    qb = quadrant(b)
    if qa != qb:
        return -1 if qa < qb else 1

    c = det(a, b)
    if c > 0:
        return -1
    if c < 0:
        return 1
    return 0


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> int:
    """Locate a point relative to a polygon.

    Exact crossing-number test: a half-open upward ray rule counts edges
    crossing the horizontal line through the point, and any edge containing
    the point short-circuits to the boundary result.

    Args:
        point: The point to test
        polygon: Points of the ring, either orientation

    Returns:
        1 if strictly inside, 0 if on the boundary, -1 if strictly outside

    Examples:
        >>> square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
        >>> point_in_polygon(Point(1, 1), square)
        1
        >>> point_in_polygon(Point(2, 1), square)
        0
        >>> point_in_polygon(Point(3, 3), square)
        -1
    """
    n = len(polygon)
    result = -1
    for i in range(n):
        a = polygon[i] - point
        b = polygon[(i + 1) % n] - point
        if a.y > b.y:
            a, b = b, a

        d = det(a, b)
        if d == 0 and a.x * b.x + a.y * b.y <= 0:
            return 0
        if a.y <= 0 < b.y and d > 0:
            result = -result

    return result


def polygon_within(inner: Polygon, outer: Polygon) -> bool:
    """Check whether a polygon lies inside another, boundary included.

    Every edge of ``inner`` is split at its intersections with the edges of
    ``outer``; ``inner`` is within ``outer`` iff no vertex and no midpoint of
    a split piece lies strictly outside ``outer``. Touching or sharing
    boundary edges therefore counts as inside, and a polygon is within
    itself.

    Args:
        inner: Candidate contained polygon
        outer: Candidate containing polygon (must be simple)

    Returns:
        True if the closed region of ``inner`` is a subset of the closed
        region of ``outer``
    """
    ring = outer.points
    outer_edges = outer.edges()

    for vertex in inner.points:
        if point_in_polygon(vertex, ring) < 0:
            return False

    for edge in inner.edges():
        cuts = {edge.start, edge.end}
        for other in outer_edges:
            cuts.update(segment_intersection(edge, other))

        ordered = sorted(cuts, key=lambda p: comparable_distance(edge.start, p))
        for a, b in zip(ordered, ordered[1:]):
            midpoint = (a + b).scale(Fraction(1, 2))
            if point_in_polygon(midpoint, ring) < 0:
                return False

    return True
