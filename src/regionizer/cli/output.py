"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library.
Messages go to stderr so that region data written to stdout stays clean.
"""

from fractions import Fraction

from rich.console import Console
from rich.text import Text

from regionizer.utils import ArrangementStats

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Regionizer[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_problem_info(problem_path: str, solids: int, holes: int, segments: int) -> None:
    """Print problem information.

    Args:
        problem_path: Path to the problem file
        solids: Number of solid silhouette polygons
        holes: Number of hole polygons
        segments: Number of skeleton segments
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(problem_path)
    console.print(line)
    console.print(f"  {solids} solids {SYM_DOT} {holes} holes {SYM_DOT} {segments} segments")


def _format_area(value: Fraction | None) -> str:
    if value is None:
        return "n/a"
    return str(value)


def print_stats(stats: ArrangementStats) -> None:
    """Print arrangement statistics.

    Args:
        stats: Statistics collected by the pipeline
    """
    console.print(f"  Vertices              {stats.vertices}")
    console.print(f"  Edges                 {stats.edges}")
    console.print(f"  Components            {stats.components}")
    console.print(f"  Face cycles           {stats.cycles}")
    console.print(f"  Regions               {stats.regions}")
    console.print(f"  Outer faces dropped   {stats.dropped_outer}")
    console.print(f"  Faces in holes        {stats.dropped_in_holes}")
    console.print(f"  Nested components     {stats.nested_cycles}")
    console.print(f"  Silhouette area       {_format_area(stats.expected_area)}")
    console.print(f"  Region area           {_format_area(stats.actual_area)}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(output_path: str | None, stats: ArrangementStats) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file (None when written to stdout)
        stats: Statistics collected by the pipeline
    """
    console.print(
        f"\n[bold green]{SYM_OK} Verified[/bold green] in {_format_time(stats.duration_seconds)}"
    )

    line = Text("  ")
    line.append(output_path or "<stdout>", style="bold")
    console.print(line)

    console.print(
        f"  {stats.regions} regions {SYM_DOT} {stats.vertices} vertices {SYM_DOT} "
        f"area {_format_area(stats.actual_area)}"
    )


def print_verification_failure(expected: Fraction, actual: Fraction) -> None:
    """Print the two sides of a failed area check.

    Args:
        expected: Signed silhouette area
        actual: Sum of retained region areas
    """
    console.print(f"\n[bold red]{SYM_ERR} Area mismatch[/bold red]")
    console.print(f"  Silhouette area  {expected}")
    console.print(f"  Region area      {actual}")
    console.print(f"  Difference       {actual - expected}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
