"""Core algorithms for regionizer.

This module contains the stages of a run:

- Exact geometry (intersections, angular order, containment)
- Arrangement construction (vertex set and adjacency graph)
- Face tracing (next-edge walks over directed edges)
- Region filtering (outer faces, nested components, silhouette holes)
- Area verification (exact comparison with the silhouette area)

All stages are:
- Stateless (a stage object can be reused across inputs)
- Pure (each returns a new Arrangement rather than mutating its input)
- Exact (no floating point anywhere)

Key functions:
- segment_intersection: Discrete intersection points of two segments
- compare_directions: Counter-clockwise order of direction vectors
- point_in_polygon: Inside/boundary/outside classification
- polygon_within: Boundary-inclusive polygon containment
- run: Full pipeline with default stages

Key classes:
- ArrangementBuilder: Builds vertices and adjacency from segments
- FaceExtractor: Traces every face cycle
- RegionFilter: Keeps the faces that belong to the silhouette
- AreaVerifier: Checks area conservation
- RegionPipeline: Chains the stages
- HoleBridger: Splices hole cycles into a single boundary cycle
"""

from regionizer.core.arrangement import ArrangementBuilder, collect_vertices
from regionizer.core.bridge import HoleBridger
from regionizer.core.faces import FaceExtractor, angular_order, next_edge_map
from regionizer.core.filter import FilterReport, RegionFilter, within_any_hole
from regionizer.core.geometry import (
    comparable_distance,
    compare_directions,
    point_in_polygon,
    point_on_segment,
    polygon_within,
    quadrant,
    segment_intersection,
)
from regionizer.core.pipeline import PipelineResult, RegionPipeline, run
from regionizer.core.verifier import AreaVerifier, VerificationResult

__all__ = [
    # Stage classes
    "ArrangementBuilder",
    "AreaVerifier",
    "FaceExtractor",
    "FilterReport",
    "HoleBridger",
    "PipelineResult",
    "RegionFilter",
    "RegionPipeline",
    "VerificationResult",
    # Stage functions
    "angular_order",
    "collect_vertices",
    "next_edge_map",
    "run",
    "within_any_hole",
    # Geometry functions
    "comparable_distance",
    "compare_directions",
    "point_in_polygon",
    "point_on_segment",
    "polygon_within",
    "quadrant",
    "segment_intersection",
]
