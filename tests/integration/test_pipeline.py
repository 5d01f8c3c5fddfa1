"""End-to-end tests of region extraction on small silhouettes.

Every run here goes through normalization, arrangement construction, face
tracing, filtering and area verification.
"""

from fractions import Fraction
from pathlib import Path

import pytest
import structlog
from structlog.testing import capture_logs

from regionizer.config import ArrangementConfig, RegionizerSettings
from regionizer.core import RegionPipeline, run
from regionizer.domain import Point, Polygon, Segment
from regionizer.exceptions import AreaMismatchError, MalformedInputError
from regionizer.io import ProblemReader
from regionizer.utils import PipelineLogger

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


def square(x0, y0, size, clockwise=False) -> Polygon:
    polygon = Polygon(
        (Point(x0, y0), Point(x0 + size, y0), Point(x0 + size, y0 + size), Point(x0, y0 + size))
    )
    return polygon.reversed() if clockwise else polygon


def region_areas(result) -> list[Fraction]:
    return sorted(r.area(result.vertices) for r in result.regions)


class TestScenarios:
    """Small silhouettes with known answers."""

    def test_unit_square_without_skeleton(self):
        """The silhouette edges alone bound one region."""
        result = run([square(0, 0, 1)], [])
        assert result.verified
        assert result.vertices == (Point(0, 0), Point(0, 1), Point(1, 0), Point(1, 1))
        assert [r.boundary for r in result.regions] == [(0, 2, 3, 1)]
        assert result.verification.expected == 1

    def test_bisected_square(self):
        """A horizontal cut splits the square into two halves."""
        half = Fraction(1, 2)
        result = run([square(0, 0, 1)], [Segment(Point(0, half), Point(1, half))])
        assert result.verified
        assert len(result.vertices) == 6
        assert region_areas(result) == [half, half]

    def test_square_with_hole_without_skeleton(self):
        """An unconnected hole becomes a hole cycle of the surrounding region."""
        result = run([square(0, 0, 4), square(1, 1, 2, clockwise=True)], [])
        assert result.verified
        assert len(result.regions) == 1
        region = result.regions[0]
        assert region.area(result.vertices) == 12
        assert len(region.holes) == 1
        assert result.stats.nested_cycles == 1
        assert result.stats.dropped_in_holes == 1

    def test_lone_clockwise_polygon_is_a_hole(self):
        """A clockwise polygon on its own is a hole with nothing around it."""
        result = run([square(0, 0, 1, clockwise=True)], [], strict=False)
        assert not result.verified
        assert result.verification.expected == -1
        assert result.regions == ()

    def test_regions_tile_silhouette(self):
        """Every retained region is positive and they add up exactly."""
        third = Fraction(1, 3)
        segments = [
            Segment(Point(0, third), Point(1, third)),
            Segment(Point(0, 2 * third), Point(1, 2 * third)),
            Segment(Point(0, 0), Point(1, 1)),
        ]
        result = run([square(0, 0, 1)], segments)
        areas = region_areas(result)
        assert all(a > 0 for a in areas)
        assert sum(areas) == 1
        assert len(areas) == 6


class TestFixtures:
    """Runs over the problem files in tests/fixtures."""

    def load(self, name: str):
        return ProblemReader(FIXTURES_DIR / name).load()

    def test_square_diagonals(self):
        """Test the diagonals cut the square into four quarters."""
        result = RegionPipeline().run_problem(self.load("square_diagonals.txt"))
        assert region_areas(result) == [Fraction(1, 4)] * 4
        assert result.vertices[2] == Point(Fraction(1, 2), Fraction(1, 2))

    def test_framed_hole(self):
        """The connector joins the hole to the frame; the frame face walks it twice."""
        result = RegionPipeline().run_problem(self.load("framed_hole.txt"))
        assert len(result.regions) == 1
        region = result.regions[0]
        assert region.area(result.vertices) == 12
        assert region.holes == ()
        assert len(region.boundary) == 10
        assert result.stats.dropped_in_holes == 1

    def test_folded_triangle(self):
        """Test a triangle folded along its median gives two halves."""
        result = RegionPipeline().run_problem(self.load("folded_triangle.txt"))
        assert len(result.vertices) == 4
        assert region_areas(result) == [Fraction(1, 8), Fraction(1, 8)]


class TestVerification:
    """Area conservation failures."""

    @staticmethod
    def triangle_only():
        settings = RegionizerSettings(
            arrangement=ArrangementConfig(include_silhouette_edges=False)
        )
        segments = [
            Segment(Point(0, 0), Point(1, 0)),
            Segment(Point(1, 0), Point(0, 1)),
            Segment(Point(0, 1), Point(0, 0)),
        ]
        return settings, segments

    def test_strict_mismatch_raises(self):
        """Test a strict run raises with both areas."""
        settings, segments = self.triangle_only()
        with pytest.raises(AreaMismatchError) as exc_info:
            run([square(0, 0, 1)], segments, settings=settings)
        assert exc_info.value.expected == 1
        assert exc_info.value.actual == Fraction(1, 2)

    def test_lenient_mismatch_returns_result(self):
        """Test a lenient run returns the unverified result."""
        settings, segments = self.triangle_only()
        result = run([square(0, 0, 1)], segments, settings=settings, strict=False)
        assert not result.verified
        assert result.verification.actual == Fraction(1, 2)
        assert len(result.regions) == 1

    @pytest.mark.parametrize("strict", [True, False])
    def test_mismatch_logged_once(self, strict):
        """Test an area mismatch is logged as a single error event."""
        settings, segments = self.triangle_only()
        with capture_logs() as logs:
            pipeline = RegionPipeline(settings, PipelineLogger(structlog.get_logger("regionizer")))
            try:
                pipeline.run([square(0, 0, 1)], segments, strict=strict)
            except AreaMismatchError:
                assert strict

        errors = [entry for entry in logs if entry["log_level"] == "error"]
        assert [entry["event"] for entry in errors] == ["Area verification"]
        assert errors[0]["expected"] == "1"
        assert errors[0]["actual"] == "1/2"

    def test_zero_length_segment(self):
        """A zero-length segment away from everything else is malformed."""
        with pytest.raises(MalformedInputError):
            run([square(0, 0, 1)], [Segment(Point(5, 5), Point(5, 5))])

    def test_zero_area_polygon(self):
        """Test a flat silhouette polygon is malformed."""
        flat = Polygon((Point(0, 0), Point(1, 0), Point(2, 0)))
        with pytest.raises(MalformedInputError, match="zero area"):
            run([flat], [])


class TestStats:
    """Counts reported by a run."""

    def test_connected_stats(self):
        """Test the counts of a square cut by one diagonal."""
        result = run([square(0, 0, 1)], [Segment(Point(0, 0), Point(1, 1))])
        stats = result.stats
        assert stats.vertices == 4
        assert stats.edges == 5
        assert stats.components == 1
        assert stats.cycles == 3
        assert stats.regions == 2
        assert stats.dropped_outer == 1
        assert stats.expected_area == stats.actual_area == 1
        assert stats.duration_seconds >= 0

    def test_euler_characteristic(self):
        """V - E + cycles is twice the component count."""
        result = run([square(0, 0, 4), square(1, 1, 2, clockwise=True)], [])
        stats = result.stats
        assert stats.components == 2
        assert stats.euler_characteristic == 2 * stats.components

    def test_pipeline_reusable(self):
        """A pipeline instance keeps no state between runs."""
        pipeline = RegionPipeline()
        first = pipeline.run([square(0, 0, 1)], [])
        second = pipeline.run([square(0, 0, 2)], [])
        assert first.verification.expected == 1
        assert second.verification.expected == 4
        assert first.stats is not second.stats
