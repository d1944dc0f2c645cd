"""Shared utility functions for the FHEVM example kit.

Provides Rich-based console reporting and a couple of file-system helpers.
All user-facing output goes through the module-level :data:`console` so tests
can capture it in one place.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

from .errors import UnreadableSourceError

console = Console()


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The ``Path`` object that was created or already existed.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def read_source(path: str | Path, label: str | Path | None = None) -> str:
    """Read a UTF-8 source file.

    Raises:
        UnreadableSourceError: The bytes are not valid UTF-8.  The message
            names *label* (default: *path*).
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise UnreadableSourceError(label if label is not None else path, exc.reason) from exc


def write_text(path: str | Path, content: str) -> Path:
    """Create parent directories and overwrite *path* with *content*."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding="utf-8")
    return file_path


def display_path(path: str | Path, start: str | Path | None = None) -> str:
    """Return *path* relative to *start* (default cwd) when possible."""
    target = Path(path).resolve()
    base = Path(start).resolve() if start is not None else Path.cwd().resolve()
    try:
        return str(target.relative_to(base))
    except ValueError:
        return str(target)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step(number: int, name: str) -> None:
    """Print a numbered step header as a full-width rule."""
    console.print()
    console.print(Rule(f"[bold cyan] Step {number}: {name} [/bold cyan]", style="cyan"))


def print_banner(message: str, style: str = "green") -> None:
    """Print *message* framed by two rules."""
    console.print()
    console.print(Rule(style=style))
    console.print(f"[bold {style}]{escape(message)}[/bold {style}]")
    console.print(Rule(style=style))


def print_summary_table(
    rows: list[tuple[str, ...]],
    columns: tuple[str, ...] = ("Item", "Value"),
    title: str = "Summary",
) -> None:
    """Print a table with the given column headers.

    Args:
        rows: One tuple per row, same arity as *columns*.
        columns: Column headers; the first column is rendered dim.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for idx, column in enumerate(columns):
        if idx == 0:
            table.add_column(column, style="dim", no_wrap=True)
        else:
            table.add_column(column)

    for row in rows:
        table.add_row(*(str(cell) for cell in row))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_info(message: str) -> None:
    """Print a blue informational message."""
    console.print(f"[blue]{escape(message)}[/blue]")
