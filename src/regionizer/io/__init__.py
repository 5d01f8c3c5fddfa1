"""Problem and solution I/O for regionizer.

This module reads problem text files into domain models and writes the
retained regions back out. It is the only place that knows about the text
formats.

Key responsibilities:
- Parse silhouette polygons and skeleton segments
- Serialize vertices and regions (text or JSON)

Key classes:
- ProblemReader: Load problem files
- SolutionWriter: Write region files
"""

from regionizer.io.reader import ProblemReader, parse_problem
from regionizer.io.writer import SolutionWriter, format_json, format_text

__all__ = [
    "ProblemReader",
    "SolutionWriter",
    "format_json",
    "format_text",
    "parse_problem",
]
