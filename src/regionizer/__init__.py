"""Regionizer - Split silhouettes into the faces of a segment arrangement.

Regionizer reads a silhouette (one or more polygons, holes wound clockwise)
and a skeleton of straight-line segments, computes the planar arrangement
they induce with exact rational arithmetic, and writes every bounded face
that belongs to the silhouette. The run is rejected unless the retained
faces add up exactly to the silhouette's area.

Example:
    $ regionizer solve problem.txt -o regions.txt
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
