"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from polyshaper.domain import Polygon
from polyshaper.utils import OperationStats

console = Console()

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
    console.print(f"\n[bold]Polyshaper[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def _format_point(x: float, y: float) -> str:
    return f"({x:g}, {y:g})"


def print_polygons(polygons: Sequence[Polygon], title: str, verbose: bool = False) -> None:
    """Print a table of polygons with their area and winding.

    Args:
        polygons: Polygons to list
        title: Table title
        verbose: Whether to list every vertex instead of a count
    """
    if not polygons:
        console.print(f"  [yellow]{SYM_DOT} no geometry[/yellow]")
        return

    table = Table(title=title, title_justify="left")
    table.add_column("#", justify="right")
    table.add_column("Area", justify="right")
    table.add_column("Winding")
    table.add_column("Vertices")

    for index, polygon in enumerate(polygons):
        if verbose:
            vertices = " ".join(_format_point(v.x, v.y) for v in polygon.vertices)
        else:
            vertices = str(len(polygon.vertices))
        winding = "CW" if polygon.is_clockwise() else "CCW"
        table.add_row(str(index), f"{polygon.area():.4f}", winding, vertices)

    console.print(table)


def print_summary(stats: OperationStats) -> None:
    """Print operation statistics.

    Args:
        stats: Statistics collected during the run
    """
    error_style = "red" if stats.error_count > 0 else "green"
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] "
        f"{stats.operation_count} operations {SYM_DOT} {stats.fragment_count} fragments {SYM_DOT} "
        f"[{error_style}]{stats.error_count} errors[/{error_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
