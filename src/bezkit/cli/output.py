"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted messages for path results.
"""

from rich.console import Console
from rich.text import Text

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
    console.print(f"\n[bold]bezkit[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_path_info(label: str, subpaths: int, points: int, closed: int) -> None:
    """Print a summary of a parsed path.

    Args:
        label: Name of the path (e.g. "input")
        subpaths: Number of subpaths
        points: Total number of points
        closed: Number of closed subpaths
    """
    console.print(
        f"  {label}: {subpaths} subpaths {SYM_DOT} {points} points {SYM_DOT} {closed} closed"
    )


def print_path_data(path_data: str) -> None:
    """Print SVG path data on a single line.

    Args:
        path_data: SVG path data
    """
    # Text keeps the data free of markup interpretation
    console.print(Text(path_data), soft_wrap=True)


def print_success(message: str, output_path: str | None = None) -> None:
    """Print success message.

    Args:
        message: Summary of what was done
        output_path: SVG file written, if any
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] {message}")
    if output_path:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    line = Text.from_markup(f"\n[bold red]{SYM_ERR} Error:[/bold red] ")
    line.append(message)
    console.print(line)
    if details:
        console.print(Text(f"  {details}"))
