"""Logging utilities for Regionizer."""

import logging
from dataclasses import dataclass
from fractions import Fraction
from pathlib import Path

import structlog

_installed_handlers: list[logging.Handler] = []


@dataclass
class ArrangementStats:
    """Statistics from a pipeline run."""

    segments: int = 0
    vertices: int = 0
    edges: int = 0
    components: int = 0
    cycles: int = 0
    regions: int = 0
    dropped_outer: int = 0
    dropped_in_holes: int = 0
    nested_cycles: int = 0
    expected_area: Fraction | None = None
    actual_area: Fraction | None = None
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def euler_characteristic(self) -> int:
        """V - E + F over all traced cycles.

        Equals twice the component count for a correctly traced planar
        arrangement, since every component contributes one outer cycle.
        """
        return self.vertices - self.edges + self.cycles


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output (stderr)
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    _installed_handlers.append(console_handler)

    root_logger.setLevel(logging.DEBUG)
    for handler in _installed_handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("regionizer")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class PipelineLogger:
    """Logger for tracking pipeline stages and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("regionizer")
        self._stats = ArrangementStats()

    def log_input(self, polygons: int, segments: int) -> None:
        """Log the size of the input."""
        self._logger.debug("Input received", polygons=polygons, segments=segments)
        self._stats.segments = segments

    def log_arrangement(self, vertices: int, edges: int, components: int) -> None:
        """Log arrangement construction results."""
        self._logger.info(
            "Arrangement built",
            vertices=vertices,
            edges=edges,
            components=components,
        )
        self._stats.vertices = vertices
        self._stats.edges = edges
        self._stats.components = components

    def log_cycles(self, cycles: int) -> None:
        """Log face tracing results."""
        self._logger.info("Faces traced", cycles=cycles)
        self._stats.cycles = cycles

    def log_filter(
        self,
        regions: int,
        dropped_outer: int,
        dropped_in_holes: int,
        nested_cycles: int,
    ) -> None:
        """Log region filtering results."""
        self._logger.info(
            "Regions filtered",
            regions=regions,
            dropped_outer=dropped_outer,
            dropped_in_holes=dropped_in_holes,
            nested_cycles=nested_cycles,
        )
        self._stats.regions = regions
        self._stats.dropped_outer = dropped_outer
        self._stats.dropped_in_holes = dropped_in_holes
        self._stats.nested_cycles = nested_cycles

    def log_verification(self, expected: Fraction, actual: Fraction) -> None:
        """Log the area comparison."""
        passed = expected == actual
        log = self._logger.info if passed else self._logger.error
        log(
            "Area verification",
            expected=str(expected),
            actual=str(actual),
            passed=passed,
        )
        self._stats.expected_area = expected
        self._stats.actual_area = actual

    def log_failure(self, stage: str, error: Exception) -> None:
        """Log a fatal pipeline error."""
        self._logger.error(
            "Pipeline failed",
            stage=stage,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> ArrangementStats:
        """Get current pipeline statistics."""
        return self._stats
