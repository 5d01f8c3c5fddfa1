"""Solution writer for retained regions.

The text format lists the vertices, then the regions::

    <vertex count>
    x_num/x_den y_num/y_den
    ...
    <region count>
    <boundary length> id id id ...
    ...

Every rational is written with its denominator. A region with holes (only
present for disconnected arrangements) is written as a single cycle with
each hole spliced in through a connector walked in both directions, so the
shoelace area of every written cycle is the area of its region. The JSON
format keeps the hole cycles separate.
"""

import json
from pathlib import Path

import structlog

from regionizer.config import OutputFormat
from regionizer.core.bridge import HoleBridger
from regionizer.domain import Point, Region, format_rational

logger = structlog.get_logger(__name__)


def format_text(vertices: tuple[Point, ...], regions: tuple[Region, ...]) -> str:
    """Serialize vertices and regions to the text format.

    Args:
        vertices: Vertex set, indexed by vertex id
        regions: Retained regions

    Returns:
        Text with a trailing newline

    Raises:
        ArrangementInconsistencyError: If a hole cannot be bridged
    """
    bridger = HoleBridger()
    lines = [str(len(vertices))]
    lines.extend(f"{format_rational(p.x)} {format_rational(p.y)}" for p in vertices)
    lines.append(str(len(regions)))
    for region in regions:
        cycle = bridger.bridge(region, vertices)
        lines.append(" ".join(str(i) for i in (len(cycle), *cycle)))
    return "\n".join(lines) + "\n"


def format_json(
    vertices: tuple[Point, ...],
    regions: tuple[Region, ...],
    indent: int | None = 2,
) -> str:
    """Serialize vertices and regions to JSON.

    Args:
        vertices: Vertex set, indexed by vertex id
        regions: Retained regions
        indent: JSON indentation (None for a single line)

    Returns:
        JSON text with a trailing newline
    """
    data = {
        "vertices": [[format_rational(p.x), format_rational(p.y)] for p in vertices],
        "regions": [region.to_dict(vertices) for region in regions],
    }
    return json.dumps(data, indent=indent) + "\n"


class SolutionWriter:
    """Writes retained regions in the configured format."""

    def __init__(
        self,
        output_format: OutputFormat = OutputFormat.TEXT,
        json_indent: int | None = 2,
    ) -> None:
        self.output_format = output_format
        self.json_indent = json_indent

    def format(self, vertices: tuple[Point, ...], regions: tuple[Region, ...]) -> str:
        """Serialize to the configured format."""
        if self.output_format == OutputFormat.JSON:
            return format_json(vertices, regions, indent=self.json_indent)
        return format_text(vertices, regions)

    def save(self, vertices: tuple[Point, ...], regions: tuple[Region, ...], path: Path) -> None:
        """Write the serialized regions to a file.

        Args:
            vertices: Vertex set
            regions: Retained regions
            path: Destination path
        """
        path.write_text(self.format(vertices, regions), encoding="utf-8")
        logger.debug("Solution written", path=str(path), regions=len(regions))
