"""CLI application entry point for regionizer.

This module provides the main CLI interface using Typer.
"""

import sys
from pathlib import Path
from typing import Annotated

import typer

from regionizer import __version__
from regionizer.cli.output import (
    SYM_OK,
    console,
    print_error,
    print_header,
    print_problem_info,
    print_stats,
    print_step,
    print_success,
    print_verification_failure,
)
from regionizer.config import (
    ArrangementConfig,
    LoggingConfig,
    LogLevel,
    OutputConfig,
    OutputFormat,
    RegionizerSettings,
)
from regionizer.core import RegionPipeline
from regionizer.domain import Problem
from regionizer.exceptions import AreaMismatchError, RegionizerError
from regionizer.io import ProblemReader, SolutionWriter, parse_problem
from regionizer.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="regionizer",
    help="Split a silhouette into the faces of its skeleton arrangement, verified exactly.",
    add_completion=False,
    no_args_is_help=True,
)

InputArgument = Annotated[
    Path,
    typer.Argument(
        help="Path to the problem file ('-' reads stdin)",
        show_default=False,
    ),
]
SilhouetteEdgesOption = Annotated[
    bool,
    typer.Option(
        "--silhouette-edges/--no-silhouette-edges",
        help="Add the silhouette polygon edges to the skeleton",
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    LogLevel,
    typer.Option(
        "--log-level",
        help="Console logging level",
        case_sensitive=False,
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Regionizer[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Split a silhouette into the faces of its skeleton arrangement."""


def _load_problem(input_problem: Path) -> Problem:
    """Read a problem from a file, or from stdin for '-'."""
    if str(input_problem) == "-":
        return parse_problem(sys.stdin.read())
    return ProblemReader(input_problem).load()


def _report_problem(input_problem: Path, problem: Problem) -> None:
    solids = sum(1 for p in problem.polygons if p.signed_area() > 0)
    print_problem_info(
        problem_path=str(input_problem),
        solids=solids,
        holes=len(problem.polygons) - solids,
        segments=len(problem.segments),
    )


@app.command()
def solve(
    input_problem: InputArgument,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: stdout)",
        ),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format (text|json)",
        ),
    ] = "text",
    silhouette_edges: SilhouetteEdgesOption = True,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = LogLevel.WARNING,
    quiet: QuietOption = False,
) -> None:
    """Compute, verify and write the regions of a problem.

    Nothing is written unless the retained regions add up exactly to the
    silhouette area.

    Example:
        regionizer solve problem.txt -o regions.txt
    """
    try:
        fmt = OutputFormat(output_format.lower())
    except ValueError:
        print_error(
            f"Invalid format: {output_format}",
            details="Valid values: text, json",
        )
        raise typer.Exit(code=1)

    settings = RegionizerSettings(
        arrangement=ArrangementConfig(include_silhouette_edges=silhouette_edges),
        output=OutputConfig(format=fmt),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level.value,
        file_level=settings.logging.file_log_level.value,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    try:
        if not quiet:
            print_step("Loading problem")
        problem = _load_problem(input_problem)
        if not quiet:
            _report_problem(input_problem, problem)
            print_step("Extracting regions")

        result = RegionPipeline(settings).run_problem(problem)

        writer = SolutionWriter(settings.output.format, settings.output.json_indent)
        if output is None:
            typer.echo(writer.format(result.vertices, result.regions), nl=False)
        else:
            writer.save(result.vertices, result.regions, output)

        if not quiet:
            print_success(str(output) if output else None, result.stats)

    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except AreaMismatchError as e:
        print_verification_failure(e.expected, e.actual)
        raise typer.Exit(code=1)
    except RegionizerError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def inspect(
    input_problem: InputArgument,
    silhouette_edges: SilhouetteEdgesOption = True,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = LogLevel.WARNING,
) -> None:
    """Show arrangement statistics and the area check without writing regions.

    Exits with code 1 if the area check fails.
    """
    settings = RegionizerSettings(
        arrangement=ArrangementConfig(include_silhouette_edges=silhouette_edges),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level.value,
        file_level=settings.logging.file_log_level.value,
    )

    print_header(__version__)

    try:
        print_step("Loading problem")
        problem = _load_problem(input_problem)
        _report_problem(input_problem, problem)

        print_step("Arrangement")
        result = RegionPipeline(settings).run_problem(problem, strict=False)
        print_stats(result.stats)
    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except RegionizerError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not result.verified:
        print_verification_failure(result.verification.expected, result.verification.actual)
        raise typer.Exit(code=1)

    console.print(f"\n[bold green]{SYM_OK} Area verified[/bold green]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
