"""Unit tests for hole bridging.

Tests cover:
- Corner wedges at convex, reflex and dangling corners
- Splicing a hole into a cycle
- Area and vertex coverage of bridged regions
- Holes no connector can reach
"""

from collections import Counter

import pytest

from regionizer.core import run
from regionizer.core.bridge import HoleBridger, opens_into_face, splice
from regionizer.domain import Point, Polygon, Region, Segment
from regionizer.exceptions import ArrangementInconsistencyError

FRAME_VERTICES = (
    Point(0, 0),
    Point(0, 4),
    Point(1, 1),
    Point(1, 3),
    Point(3, 1),
    Point(3, 3),
    Point(4, 0),
    Point(4, 4),
)


def square(x0, y0, size, clockwise=False) -> Polygon:
    polygon = Polygon(
        (Point(x0, y0), Point(x0 + size, y0), Point(x0 + size, y0 + size), Point(x0, y0 + size))
    )
    return polygon.reversed() if clockwise else polygon


def cycle_area(cycle, vertices):
    return Polygon(tuple(vertices[i] for i in cycle)).signed_area()


class TestOpensIntoFace:
    """Tests for the corner wedge predicate."""

    def test_convex_corner(self):
        """Test a convex corner opens only between its edges."""
        prev, corner, nxt = Point(0, 1), Point(0, 0), Point(1, 0)
        assert opens_into_face(prev, corner, nxt, Point(1, 1))
        assert not opens_into_face(prev, corner, nxt, Point(-1, -1))
        assert not opens_into_face(prev, corner, nxt, Point(2, 0))

    def test_reflex_corner(self):
        """Test a clockwise corner opens everywhere outside its edges."""
        prev, corner, nxt = Point(1, 0), Point(0, 0), Point(0, 1)
        assert opens_into_face(prev, corner, nxt, Point(-1, -1))
        assert not opens_into_face(prev, corner, nxt, Point(1, 1))

    def test_dangling_tip(self):
        """Test the tip of a dangling edge opens everywhere but along the edge."""
        prev, corner, nxt = Point(1, 0), Point(0, 0), Point(1, 0)
        assert opens_into_face(prev, corner, nxt, Point(-1, 0))
        assert opens_into_face(prev, corner, nxt, Point(0, 1))
        assert not opens_into_face(prev, corner, nxt, Point(2, 0))


class TestSplice:
    """Tests for splicing a hole into a cycle."""

    def test_splice(self):
        """Test the hole is walked once and the connector twice."""
        assert splice((0, 1, 2, 3), 2, (7, 8, 9), 1) == (0, 1, 2, 8, 9, 7, 8, 2, 3)

    def test_splice_at_start(self):
        """Test splicing at the first position of both cycles."""
        assert splice((0, 6, 7, 1), 0, (2, 3, 5, 4), 0) == (0, 2, 3, 5, 4, 2, 0, 6, 7, 1)


class TestHoleBridger:
    """Tests for HoleBridger class."""

    def test_region_without_holes(self):
        """Test a hole-free region keeps its boundary."""
        region = Region(boundary=(0, 6, 7, 1))
        assert HoleBridger().bridge(region, FRAME_VERTICES) == (0, 6, 7, 1)

    def test_square_with_hole(self):
        """Test the shortest clear connector joins the hole to the frame."""
        region = Region(boundary=(0, 6, 7, 1), holes=((2, 3, 5, 4),))
        cycle = HoleBridger().bridge(region, FRAME_VERTICES)
        assert cycle == (0, 2, 3, 5, 4, 2, 0, 6, 7, 1)
        assert cycle_area(cycle, FRAME_VERTICES) == region.area(FRAME_VERTICES) == 12

    def test_two_holes(self):
        """Test every hole is spliced and the area is unchanged."""
        result = run(
            [square(0, 0, 10), square(1, 1, 2, clockwise=True), square(6, 6, 2, clockwise=True)],
            [],
        )
        region = result.regions[0]
        assert len(region.holes) == 2

        cycle = HoleBridger().bridge(region, result.vertices)
        assert len(cycle) == 4 + 2 * (4 + 2)
        assert cycle_area(cycle, result.vertices) == region.area(result.vertices) == 92
        assert set(cycle) == set(range(len(result.vertices)))

    def test_connector_edges_walked_both_ways(self):
        """Test each connector appears once in each direction."""
        region = Region(boundary=(0, 6, 7, 1), holes=((2, 3, 5, 4),))
        cycle = HoleBridger().bridge(region, FRAME_VERTICES)
        walked = Counter(zip(cycle, cycle[1:] + cycle[:1]))
        assert walked[(0, 2)] == walked[(2, 0)] == 1

    def test_dangling_component(self):
        """Test a loose segment inside a face is bridged through its tip."""
        result = run([square(0, 0, 4)], [Segment(Point(1, 1), Point(2, 2))])
        region = result.regions[0]
        assert len(region.holes) == 1
        assert len(region.holes[0]) == 2

        cycle = HoleBridger().bridge(region, result.vertices)
        assert len(cycle) == 8
        assert cycle_area(cycle, result.vertices) == 16

    def test_unreachable_hole(self):
        """Test a hole walked the wrong way round cannot be reached."""
        region = Region(boundary=(0, 6, 7, 1), holes=((2, 4, 5, 3),))
        with pytest.raises(ArrangementInconsistencyError, match="No connector"):
            HoleBridger().bridge(region, FRAME_VERTICES)
