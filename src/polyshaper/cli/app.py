"""CLI application entry point for polyshaper.

This module provides the main CLI interface using Typer. Polygons are
given inline as space-separated ``x,y`` vertex lists, e.g.
``"0,0 4,0 4,3 0,3"``.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from polyshaper import __version__
from polyshaper.cli.output import (
    console,
    print_error,
    print_header,
    print_polygons,
    print_step,
    print_summary,
)
from polyshaper.config import ClipperConfig, LoggingConfig, PolyshaperSettings
from polyshaper.core import LETTER_SHAPES, BooleanEngine, RandomSource, rectangle_by_area
from polyshaper.domain import BooleanMode, ConsumedPolicy, FillRule, Point, Polygon
from polyshaper.exceptions import PolyshaperError
from polyshaper.utils import OperationLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="polyshaper",
    help="Boolean algebra and shape synthesis for rectilinear polygons.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class CliState:
    """Settings and collaborators shared by every command of one invocation."""

    settings: PolyshaperSettings
    engine: BooleanEngine
    random: RandomSource
    operations: OperationLogger
    verbose: bool
    quiet: bool


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Polyshaper[/bold blue] v{__version__}")
        raise typer.Exit()


def parse_polygon(value: str) -> Polygon:
    """Parse ``"x,y x,y ..."`` into a polygon.

    Raises:
        typer.BadParameter: If the text is malformed or not a valid polygon
    """
    try:
        coords = [tuple(float(c) for c in pair.split(",")) for pair in value.split()]
        return Polygon.from_tuples(coords)
    except ValueError as e:
        raise typer.BadParameter(f"'{value}' is not a list of x,y vertices") from e
    except PolyshaperError as e:
        raise typer.BadParameter(str(e)) from e


def _state(ctx: typer.Context) -> CliState:
    return ctx.obj


@app.callback()
def main_callback(
    ctx: typer.Context,
    scale: Annotated[
        float,
        typer.Option(
            "--scale",
            help="Quantization lattice points per unit",
            min=1.0,
        ),
    ] = 1024.0,
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
    seed: Annotated[
        int | None,
        typer.Option(
            "--seed",
            help="Seed for randomized commands (omit for nondeterministic runs)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="List every vertex of every result",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
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
    """Boolean algebra and shape synthesis for rectilinear polygons."""
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    settings = PolyshaperSettings(
        clipper=ClipperConfig(scale=scale),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
        random_seed=seed,
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    ctx.obj = CliState(
        settings=settings,
        engine=BooleanEngine(settings.clipper),
        random=RandomSource(settings.random_seed),
        operations=OperationLogger(logger),
        verbose=verbose,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)


def _report(state: CliState, operation: str, polygons: list[Polygon]) -> None:
    state.operations.log_complete(operation, len(polygons))
    if not state.quiet:
        print_polygons(polygons, title=operation, verbose=state.verbose)
        print_summary(state.operations.stats)


def _fail(state: CliState, operation: str, error: PolyshaperError) -> NoReturn:
    state.operations.log_error(operation, error)
    print_error(str(error))
    raise typer.Exit(code=1)


@app.command()
def shape(
    ctx: typer.Context,
    letter: Annotated[
        str,
        typer.Argument(help="Letter shape (C|E|F|H|L|T|U|X)", show_default=False),
    ],
    size_x: Annotated[float, typer.Option("--size-x", help="Enclosing box width")] = 10.0,
    size_y: Annotated[float, typer.Option("--size-y", help="Enclosing box depth")] = 10.0,
    width: Annotated[float, typer.Option("--width", "-w", help="Stroke width")] = 2.0,
    x: Annotated[float, typer.Option("--x", help="Box southwest corner x")] = 0.0,
    y: Annotated[float, typer.Option("--y", help="Box southwest corner y")] = 0.0,
) -> None:
    """Build a letter-shaped polygon inside an enclosing box."""
    state = _state(ctx)
    factory = LETTER_SHAPES.get(letter.upper())
    if factory is None:
        print_error(
            f"Unknown shape: {letter}",
            details=f"Valid values: {', '.join(LETTER_SHAPES)}",
        )
        raise typer.Exit(code=1)

    operation = f"{letter.upper()} shape"
    state.operations.log_start(operation, 0)
    try:
        polygon = factory(Point(x, y), (size_x, size_y), width)
    except PolyshaperError as e:
        _fail(state, operation, e)
    _report(state, operation, [polygon])


@app.command()
def rectangle(
    ctx: typer.Context,
    area: Annotated[float, typer.Option("--area", "-a", help="Rectangle area")],
    ratio: Annotated[float, typer.Option("--ratio", "-r", help="Width to depth ratio")] = 1.0,
    max_ratio: Annotated[
        float | None,
        typer.Option("--max-ratio", help="Draw the ratio at random from [ratio, max-ratio)"),
    ] = None,
) -> None:
    """Build a rectangle of a given area and proportion at the origin."""
    state = _state(ctx)
    state.operations.log_start("rectangle", 0)
    if max_ratio is not None:
        try:
            ratio = state.random.uniform(ratio, max_ratio)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--max-ratio") from e
        if not state.quiet:
            print_step(f"Drew ratio {ratio:g}")
    try:
        polygon = rectangle_by_area(area, ratio)
    except PolyshaperError as e:
        _fail(state, "rectangle", e)
    _report(state, "rectangle", [polygon])


@app.command()
def combine(
    ctx: typer.Context,
    subject: Annotated[
        list[str],
        typer.Option("--subject", "-s", help="Subject polygon (repeatable)"),
    ],
    clip: Annotated[
        list[str],
        typer.Option("--clip", "-c", help="Clip polygon (repeatable)"),
    ],
    mode: Annotated[
        BooleanMode,
        typer.Option("--mode", "-m", help="Boolean operation"),
    ] = BooleanMode.UNION,
) -> None:
    """Apply a boolean operation between subject and clip polygons."""
    state = _state(ctx)
    subjects = [parse_polygon(s) for s in subject]
    clips = [parse_polygon(c) for c in clip]

    if not state.quiet:
        print_step(f"{mode.value.capitalize()} of {len(subjects)} subjects and {len(clips)} clips")
    state.operations.log_start(mode.value, len(subjects) + len(clips))
    _report(state, mode.value, state.engine.combine(subjects, clips, mode))


@app.command()
def merge(
    ctx: typer.Context,
    polygon: Annotated[
        list[str],
        typer.Option("--polygon", "-p", help="Polygon to merge (repeatable)"),
    ],
    fill_rule: Annotated[
        FillRule,
        typer.Option("--fill-rule", help="Fill rule for overlapping regions"),
    ] = FillRule.NON_ZERO,
) -> None:
    """Fuse touching or overlapping polygons."""
    state = _state(ctx)
    polygons = [parse_polygon(p) for p in polygon]

    if not state.quiet:
        print_step(f"Merging {len(polygons)} polygons")
    state.operations.log_start("merge", len(polygons))
    _report(state, "merge", state.engine.merge(polygons, fill_rule))


@app.command()
def difference(
    ctx: typer.Context,
    polygon: Annotated[
        str,
        typer.Argument(help="Polygon to subtract from", show_default=False),
    ],
    subtract: Annotated[
        list[str],
        typer.Option("--subtract", "-x", help="Polygon to subtract (repeatable, in order)"),
    ],
    keep_all: Annotated[
        bool,
        typer.Option("--all", help="Keep every fragment instead of only the largest"),
    ] = False,
    on_consumed: Annotated[
        ConsumedPolicy,
        typer.Option("--on-consumed", help="With --all: stop or skip when a subtrahend consumes the polygon"),
    ] = ConsumedPolicy.STOP,
) -> None:
    """Subtract polygons in order from a polygon."""
    state = _state(ctx)
    minuend = parse_polygon(polygon)
    subtrahends = [parse_polygon(s) for s in subtract]

    if not state.quiet:
        print_step(f"Subtracting {len(subtrahends)} polygons")
    state.operations.log_start("difference", len(subtrahends) + 1)
    if keep_all:
        results = state.engine.differences(minuend, subtrahends, on_consumed)
    else:
        remainder = state.engine.difference(minuend, subtrahends)
        results = [remainder] if remainder is not None else []
    _report(state, "difference", results)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
