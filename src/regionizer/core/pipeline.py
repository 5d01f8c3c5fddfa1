"""End-to-end region extraction.

This module chains the stages of a run:

    silhouette normalization -> arrangement -> face tracing -> filtering
    -> area verification

Each stage receives the arrangement produced by the previous one and hands
back a new value; nothing is shared between runs.
"""

import time
from collections.abc import Sequence
from dataclasses import dataclass

from regionizer.config import RegionizerSettings
from regionizer.core.arrangement import ArrangementBuilder, silhouette_edges
from regionizer.core.faces import FaceExtractor
from regionizer.core.filter import RegionFilter
from regionizer.core.verifier import AreaVerifier, VerificationResult
from regionizer.domain import (
    Arrangement,
    Point,
    Polygon,
    Problem,
    Region,
    Segment,
    SilhouetteEntry,
    normalize_silhouette,
)
from regionizer.exceptions import AreaMismatchError, RegionizerError
from regionizer.utils import ArrangementStats, PipelineLogger


@dataclass(frozen=True)
class PipelineResult:
    """Output of a run.

    Attributes:
        arrangement: Arrangement narrowed to the retained regions
        silhouette: Normalized silhouette entries
        verification: Area comparison result
        stats: Counts and timings collected along the way
    """

    arrangement: Arrangement
    silhouette: tuple[SilhouetteEntry, ...]
    verification: VerificationResult
    stats: ArrangementStats

    @property
    def vertices(self) -> tuple[Point, ...]:
        return self.arrangement.vertices

    @property
    def regions(self) -> tuple[Region, ...]:
        return self.arrangement.regions

    @property
    def verified(self) -> bool:
        return self.verification.passed


class RegionPipeline:
    """Runs the full region extraction for one input at a time.

    Example:
        pipeline = RegionPipeline()
        result = pipeline.run(polygons, segments)
        for region in result.regions:
            print(region.boundary)
    """

    def __init__(
        self,
        settings: RegionizerSettings | None = None,
        logger: PipelineLogger | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            settings: Application settings (defaults if None)
            logger: Stage logger; a fresh one is created per run if None
        """
        self.settings = settings if settings is not None else RegionizerSettings()
        self._logger = logger
        self.builder = ArrangementBuilder()
        self.extractor = FaceExtractor(
            check_cycle_area=self.settings.arrangement.check_cycle_area
        )
        self.region_filter = RegionFilter()
        self.verifier = AreaVerifier()

    def run(
        self,
        polygons: Sequence[Polygon],
        segments: Sequence[Segment],
        strict: bool = True,
    ) -> PipelineResult:
        """Extract and verify the regions of a silhouette.

        Args:
            polygons: Silhouette polygons in their input winding
            segments: Skeleton segments
            strict: Raise on an area mismatch instead of returning an
                unverified result

        Returns:
            PipelineResult; ``verified`` is always True when ``strict``

        Raises:
            MalformedInputError: For degenerate polygons or segments
            ArrangementInconsistencyError: If face tracing breaks down
            AreaMismatchError: If ``strict`` and the areas differ
        """
        log = self._logger if self._logger is not None else PipelineLogger()
        log.stats.start_time = time.time()
        log.log_input(polygons=len(polygons), segments=len(segments))

        stage = "normalize"
        try:
            silhouette = normalize_silhouette(list(polygons))

            skeleton = list(segments)
            if self.settings.arrangement.include_silhouette_edges:
                skeleton.extend(silhouette_edges(polygons))

            stage = "arrangement"
            arrangement = self.builder.build(skeleton)
            log.log_arrangement(
                vertices=arrangement.vertex_count,
                edges=arrangement.edge_count,
                components=arrangement.component_count(),
            )

            stage = "faces"
            arrangement = self.extractor.extract(arrangement)
            log.log_cycles(len(arrangement.regions))

            stage = "filter"
            arrangement, report = self.region_filter.filter(arrangement, silhouette)
            log.log_filter(
                regions=len(arrangement.regions),
                dropped_outer=report.dropped_outer,
                dropped_in_holes=report.dropped_in_holes,
                nested_cycles=report.nested_cycles,
            )

            stage = "verify"
            verification = self.verifier.verify(arrangement, silhouette)
            log.log_verification(verification.expected, verification.actual)
        except RegionizerError as e:
            log.log_failure(stage, e)
            raise
        finally:
            log.stats.end_time = time.time()

        if strict and not verification.passed:
            raise AreaMismatchError(verification.expected, verification.actual)

        return PipelineResult(
            arrangement=arrangement,
            silhouette=silhouette,
            verification=verification,
            stats=log.stats,
        )

    def run_problem(self, problem: Problem, strict: bool = True) -> PipelineResult:
        """Run the pipeline on a parsed problem."""
        return self.run(problem.polygons, problem.segments, strict=strict)


def run(
    polygons: Sequence[Polygon],
    segments: Sequence[Segment],
    settings: RegionizerSettings | None = None,
    strict: bool = True,
) -> PipelineResult:
    """Extract and verify the regions of a silhouette with a fresh pipeline.

    See ``RegionPipeline.run``.
    """
    return RegionPipeline(settings).run(polygons, segments, strict=strict)
