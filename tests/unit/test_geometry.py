"""Unit tests for exact geometric predicates.

Tests cover:
- Cross product and comparable distance
- Segment intersection including collinear overlaps
- Angular ordering of directions
- Point-in-polygon and polygon containment
"""

from fractions import Fraction
from functools import cmp_to_key

import pytest

from regionizer.core.geometry import (
    comparable_distance,
    compare_directions,
    cross,
    point_in_polygon,
    point_on_segment,
    polygon_within,
    quadrant,
    segment_intersection,
)
from regionizer.domain import Point, Polygon, Segment


def seg(x1, y1, x2, y2) -> Segment:
    return Segment(Point(x1, y1), Point(x2, y2))


def square(x0, y0, size) -> Polygon:
    return Polygon(
        (Point(x0, y0), Point(x0 + size, y0), Point(x0 + size, y0 + size), Point(x0, y0 + size))
    )


class TestBasicMeasures:
    """Tests for cross product and distance."""

    def test_cross_sign(self):
        """Test the cross product sign gives the turn direction."""
        origin = Point(0, 0)
        assert cross(origin, Point(1, 0), Point(0, 1)) > 0
        assert cross(origin, Point(0, 1), Point(1, 0)) < 0
        assert cross(origin, Point(1, 1), Point(3, 3)) == 0

    def test_comparable_distance_is_squared(self):
        """Test comparable distance is the squared distance."""
        assert comparable_distance(Point(0, 0), Point(3, 4)) == 25
        assert comparable_distance(Point(Fraction(1, 2), 0), Point(0, 0)) == Fraction(1, 4)


class TestPointOnSegment:
    """Tests for exact point-on-segment."""

    def test_interior_point(self):
        """Test a rational point inside the segment."""
        assert point_on_segment(Point(Fraction(1, 3), Fraction(1, 3)), seg(0, 0, 1, 1))

    def test_endpoints_included(self):
        """Test both endpoints lie on the segment."""
        s = seg(0, 0, 2, 1)
        assert point_on_segment(Point(0, 0), s)
        assert point_on_segment(Point(2, 1), s)

    def test_collinear_outside(self):
        """Test a collinear point past the end is not on the segment."""
        assert not point_on_segment(Point(2, 2), seg(0, 0, 1, 1))

    def test_off_line(self):
        """A point a hair off the line is not on it."""
        p = Point(Fraction(1, 2), Fraction(1, 2) + Fraction(1, 10**30))
        assert not point_on_segment(p, seg(0, 0, 1, 1))


class TestSegmentIntersection:
    """Tests for discrete segment intersection."""

    def test_crossing(self):
        """Test two diagonals cross at one point."""
        assert segment_intersection(seg(0, 0, 2, 2), seg(0, 2, 2, 0)) == [Point(1, 1)]

    def test_rational_crossing(self):
        """Test a crossing at rational coordinates."""
        result = segment_intersection(seg(0, 0, 1, 1), seg(0, 1, 1, 0))
        assert result == [Point(Fraction(1, 2), Fraction(1, 2))]

    def test_uneven_crossing(self):
        """Test a crossing away from either midpoint."""
        result = segment_intersection(seg(0, 0, 3, 1), seg(1, 0, 1, 5))
        assert result == [Point(1, Fraction(1, 3))]

    def test_touching_at_interior(self):
        """Test an endpoint touching the other segment's interior."""
        assert segment_intersection(seg(0, 0, 2, 0), seg(1, 0, 1, 1)) == [Point(1, 0)]

    def test_shared_endpoint(self):
        """Test segments meeting at a common endpoint."""
        assert segment_intersection(seg(0, 0, 1, 0), seg(1, 0, 1, 1)) == [Point(1, 0)]

    def test_lines_cross_outside_segments(self):
        """Test supporting lines crossing beyond the segments."""
        assert segment_intersection(seg(0, 0, 1, 0), seg(2, 1, 3, -1)) == []

    def test_parallel(self):
        """Test parallel segments do not intersect."""
        assert segment_intersection(seg(0, 0, 1, 0), seg(0, 1, 1, 1)) == []

    def test_collinear_overlap(self):
        """Overlaps produce the two ends of the shared interval."""
        result = segment_intersection(seg(0, 0, 2, 0), seg(1, 0, 3, 0))
        assert result == [Point(1, 0), Point(2, 0)]

    def test_collinear_containment(self):
        """Test a segment lying inside a longer one."""
        result = segment_intersection(seg(0, 0, 3, 3), seg(2, 2, 1, 1))
        assert result == [Point(1, 1), Point(2, 2)]

    def test_collinear_touching(self):
        """Test collinear segments sharing only an endpoint."""
        assert segment_intersection(seg(0, 0, 1, 0), seg(1, 0, 2, 0)) == [Point(1, 0)]

    def test_collinear_disjoint(self):
        """Test collinear segments with a gap."""
        assert segment_intersection(seg(0, 0, 1, 0), seg(2, 0, 3, 0)) == []

    def test_identical(self):
        """Test a segment against its reversal."""
        assert segment_intersection(seg(0, 0, 1, 2), seg(1, 2, 0, 0)) == [Point(0, 0), Point(1, 2)]

    def test_degenerate_on_segment(self):
        """Test a zero-length segment on the other segment."""
        assert segment_intersection(seg(1, 0, 1, 0), seg(0, 0, 2, 0)) == [Point(1, 0)]

    def test_degenerate_off_segment(self):
        """Test a zero-length segment away from the other segment."""
        assert segment_intersection(seg(0, 0, 2, 0), seg(1, 1, 1, 1)) == []


class TestDirections:
    """Tests for quadrant-based angular ordering."""

    def test_quadrants(self):
        """Test axis directions open their quadrants."""
        assert quadrant(Point(1, 0)) == 0
        assert quadrant(Point(0, 1)) == 1
        assert quadrant(Point(-1, 0)) == 2
        assert quadrant(Point(0, -1)) == 3
        assert quadrant(Point(-1, -1)) == 2
        assert quadrant(Point(1, -1)) == 3

    def test_zero_vector(self):
        """Test the zero vector has no quadrant."""
        with pytest.raises(ValueError):
            quadrant(Point(0, 0))

    def test_full_turn_order(self):
        """Sorting yields counter-clockwise order starting at +x."""
        expected = [
            Point(1, 0),
            Point(2, 1),
            Point(1, 1),
            Point(0, 1),
            Point(-1, 1),
            Point(-1, 0),
            Point(-1, -1),
            Point(0, -1),
            Point(1, -1),
        ]
        shuffled = [expected[i] for i in (4, 8, 0, 6, 2, 7, 1, 5, 3)]
        assert sorted(shuffled, key=cmp_to_key(compare_directions)) == expected

    def test_same_direction(self):
        """Test parallel vectors compare equal."""
        assert compare_directions(Point(1, 2), Point(2, 4)) == 0

    def test_nearly_equal_directions(self):
        """Directions differing by a tiny rational angle are still strictly ordered."""
        a = Point(1, 1)
        b = Point(1, 1 + Fraction(1, 10**40))
        assert compare_directions(a, b) == -1
        assert compare_directions(b, a) == 1


class TestPointInPolygon:
    """Tests for exact point location."""

    def test_inside(self):
        """Test an interior point."""
        assert point_in_polygon(Point(1, 1), square(0, 0, 2).points) == 1

    def test_outside(self):
        """Test an exterior point."""
        assert point_in_polygon(Point(3, 3), square(0, 0, 2).points) == -1

    def test_on_edge(self):
        """Test a point on an edge."""
        assert point_in_polygon(Point(2, 1), square(0, 0, 2).points) == 0

    def test_on_vertex(self):
        """Test a polygon vertex."""
        assert point_in_polygon(Point(0, 0), square(0, 0, 2).points) == 0

    def test_orientation_independent(self):
        """Test clockwise rings classify the same way."""
        points = square(0, 0, 2).points[::-1]
        assert point_in_polygon(Point(1, 1), points) == 1
        assert point_in_polygon(Point(-1, 1), points) == -1

    def test_level_with_vertex(self):
        """A point level with a reflex vertex is classified correctly."""
        arrow = (Point(0, 0), Point(4, 0), Point(4, 4), Point(2, 2), Point(0, 4))
        assert point_in_polygon(Point(1, 2), arrow) == 1
        assert point_in_polygon(Point(2, 3), arrow) == -1


class TestPolygonWithin:
    """Tests for boundary-inclusive polygon containment."""

    def test_strictly_inside(self):
        """Test a polygon strictly inside another."""
        assert polygon_within(square(1, 1, 1), square(0, 0, 4))

    def test_outer_not_within_inner(self):
        """Test a larger polygon is not within a smaller one."""
        assert not polygon_within(square(0, 0, 4), square(1, 1, 1))

    def test_within_itself(self):
        """Test a polygon is within itself."""
        assert polygon_within(square(0, 0, 1), square(0, 0, 1))

    def test_sharing_edges(self):
        """A polygon touching the boundary from inside is within."""
        assert polygon_within(square(0, 0, 1), square(0, 0, 2))

    def test_overlapping(self):
        """Test partially overlapping polygons."""
        assert not polygon_within(square(1, 1, 2), square(0, 0, 2))

    def test_disjoint(self):
        """Test polygons far apart."""
        assert not polygon_within(square(5, 5, 1), square(0, 0, 2))

    def test_edge_leaves_through_notch(self):
        """All vertices inside is not enough when an edge crosses a notch."""
        u_shape = Polygon(
            (
                Point(0, 0),
                Point(3, 0),
                Point(3, 3),
                Point(2, 3),
                Point(2, 1),
                Point(1, 1),
                Point(1, 3),
                Point(0, 3),
            )
        )
        half = Fraction(1, 2)
        bar = Polygon(
            (
                Point(half, 2),
                Point(2 + half, 2),
                Point(2 + half, 2 + half),
                Point(half, 2 + half),
            )
        )
        assert all(point_in_polygon(p, u_shape.points) == 1 for p in bar.points)
        assert not polygon_within(bar, u_shape)
