"""CLI application entry point for bezkit.

This module provides the main CLI interface using Typer. Paths are given
and printed as SVG path data.
"""

from pathlib import Path
from typing import Annotated

import structlog
import typer

from bezkit import __version__
from bezkit.cli.output import (
    console,
    print_error,
    print_header,
    print_path_data,
    print_path_info,
    print_step,
    print_success,
)
from bezkit.config import (
    AlignmentMode,
    BezkitSettings,
    DashConfig,
    LoggingConfig,
    StrokeCap,
    StrokeJoin,
    StrokeStyle,
)
from bezkit.core import DashConverter, interpolate_many
from bezkit.domain import PathModel
from bezkit.exceptions import BezkitError, PathDataError
from bezkit.io import read_path_data, to_path_data, write_svg
from bezkit.utils import OperationLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="bezkit",
    help="Bezier path tools: add points at extrema, interpolate paths, convert dashed strokes.",
    add_completion=False,
    no_args_is_help=True,
)

# Shared state set by the app callback
_state: dict[str, object] = {"quiet": False, "settings": BezkitSettings()}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]bezkit[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Print only the resulting path data",
        ),
    ] = False,
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
    """Bezier path tools working on SVG path data."""
    settings = BezkitSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    _state["quiet"] = quiet
    _state["settings"] = settings


@app.command()
def extrema(
    path_data: Annotated[
        str,
        typer.Argument(help="SVG path data", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Also write the result to an SVG file"),
    ] = None,
) -> None:
    """Add points at the horizontal and vertical extrema of a path.

    Example:
        bezkit extrema "M0 0 C 0 50 100 50 100 0"
    """
    quiet = bool(_state["quiet"])

    try:
        if not quiet:
            print_header(__version__)
            print_step("Reading path")
        model = read_path_data(path_data)
        if not quiet:
            _print_model("input", model)

        added = model.add_points_at_extrema()
        OperationLogger(_logger()).log_extrema(added, len(model.subpaths))

        _emit([model], output, StrokeStyle(color="black"), quiet)
        if not quiet:
            print_success(f"{added} points added", str(output) if output else None)
    except PathDataError as e:
        print_error("Could not read path data", details=e.reason)
        raise typer.Exit(code=1)
    except BezkitError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def interpolate(
    first: Annotated[
        str,
        typer.Argument(help="SVG path data of the first path", show_default=False),
    ],
    second: Annotated[
        str,
        typer.Argument(help="SVG path data of the second path", show_default=False),
    ],
    steps: Annotated[
        int,
        typer.Option("--steps", "-n", help="Number of intermediate paths", min=1),
    ] = 1,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Also write the result to an SVG file"),
    ] = None,
) -> None:
    """Create evenly spaced paths between two paths with matching points.

    Example:
        bezkit interpolate "M0 0 L10 0" "M0 10 L10 20" --steps 3
    """
    quiet = bool(_state["quiet"])

    try:
        if not quiet:
            print_header(__version__)
            print_step("Reading paths")
        a = read_path_data(first)
        b = read_path_data(second)
        if not quiet:
            _print_model("first", a)
            _print_model("second", b)

        results = interpolate_many(a, b, steps)
        OperationLogger(_logger()).log_interpolation(steps, results[0].point_count)

        _emit(results, output, StrokeStyle(color="black"), quiet)
        if not quiet:
            print_success(f"{len(results)} paths created", str(output) if output else None)
    except PathDataError as e:
        print_error("Could not read path data", details=e.reason)
        raise typer.Exit(code=1)
    except BezkitError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def dash(
    path_data: Annotated[
        str,
        typer.Argument(help="SVG path data", show_default=False),
    ],
    pattern: Annotated[
        str,
        typer.Option("--pattern", "-p", help="Comma separated dash and gap lengths"),
    ] = "12,6",
    align: Annotated[
        bool,
        typer.Option(
            "--align/--no-align",
            help="Align dashes to corners and path ends, adjusting lengths to fit",
        ),
    ] = False,
    cap: Annotated[
        str,
        typer.Option("--cap", help="Stroke cap (butt|round|projecting)"),
    ] = "butt",
    join: Annotated[
        str,
        typer.Option("--join", help="Stroke join (miter|round|bevel)"),
    ] = "miter",
    width: Annotated[
        float,
        typer.Option("--width", "-w", help="Stroke width", min=0.0),
    ] = 1.0,
    miter_limit: Annotated[
        float,
        typer.Option("--miter-limit", help="Stroke miter limit", min=1.0),
    ] = 4.0,
    color: Annotated[
        str,
        typer.Option("--color", help="Stroke color"),
    ] = "black",
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Also write the dashes to an SVG file"),
    ] = None,
) -> None:
    """Convert a dashed stroke into separate dash paths.

    Example:
        bezkit dash "M0 0 L100 0 L100 100" --pattern 12,6 --align
    """
    quiet = bool(_state["quiet"])
    base: BezkitSettings = _state["settings"]  # type: ignore[assignment]

    try:
        lengths = [float(v) for v in pattern.split(",") if v.strip()]
        stroke = StrokeStyle(
            cap=StrokeCap(cap.lower()),
            join=StrokeJoin(join.lower()),
            width=width,
            miter_limit=miter_limit,
            color=color,
        )
    except ValueError as e:
        print_error("Invalid dash options", details=str(e))
        raise typer.Exit(code=1)

    settings = base.model_copy(
        update={
            "dash": DashConfig(
                pattern=lengths or [0.0],
                alignment=AlignmentMode.ALIGNED if align else AlignmentMode.BASIC,
            ),
            "stroke": stroke,
        }
    )

    try:
        if not quiet:
            print_header(__version__)
            print_step("Reading path")
        model = read_path_data(path_data)
        if not quiet:
            _print_model("input", model)
            print_step("Converting dashes")

        dashed = DashConverter(settings, logger=_logger()).convert(model)
        dashes = [PathModel.from_points(s.points) for s in dashed.subpaths]

        _emit(dashes, output, dashed.stroke, quiet)
        if not quiet:
            print_success(f"{dashed.dash_count} dashes created", str(output) if output else None)
    except PathDataError as e:
        print_error("Could not read path data", details=e.reason)
        raise typer.Exit(code=1)
    except BezkitError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _logger() -> structlog.stdlib.BoundLogger:
    return structlog.get_logger("bezkit")


def _print_model(label: str, model: PathModel) -> None:
    closed = sum(1 for s in model.subpaths if s.closed)
    print_path_info(label, len(model.subpaths), model.point_count, closed)


def _emit(models: list[PathModel], output: Path | None, stroke: StrokeStyle, quiet: bool) -> None:
    if not quiet:
        print_step("Result")
    for model in models:
        print_path_data(to_path_data(model))
    if output is not None:
        write_svg(models, output, stroke)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
