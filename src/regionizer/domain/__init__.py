"""Domain models for regionizer.

This module contains the value types of the pipeline. All models are:

- Immutable (frozen dataclasses over tuples)
- Exact (coordinates and areas are ``fractions.Fraction``)
- Independent of the text formats read and written by ``regionizer.io``

Key classes:
- Point, Segment, Polygon: Exact geometric values
- SilhouetteEntry: A normalized silhouette polygon with its solid/hole flag
- Problem: Raw polygons and skeleton segments of one run
- Arrangement: Vertex set, adjacency graph and regions
- Region: A face of the arrangement
"""

from regionizer.domain.arrangement import Arrangement, Cycle, Region
from regionizer.domain.primitives import Point, Polygon, Segment, format_rational
from regionizer.domain.silhouette import (
    Problem,
    SilhouetteEntry,
    normalize_silhouette,
    silhouette_area,
)

__all__: list[str] = [
    # Geometry values
    "Point",
    "Segment",
    "Polygon",
    "format_rational",
    # Input
    "Problem",
    "SilhouetteEntry",
    "normalize_silhouette",
    "silhouette_area",
    # Arrangement
    "Arrangement",
    "Cycle",
    "Region",
]
