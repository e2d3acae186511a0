"""Console output helpers for kitty-cli.

All user-facing output goes through the two module-level Rich consoles:
``console`` for regular progress lines and ``err_console`` for errors.
User-supplied text (feature names, paths) is always printed with markup and
highlighting disabled so that brackets in a path are shown verbatim.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console()
err_console = Console(stderr=True)


def print_plain(message: str, *, target: Console | None = None) -> None:
    """Print *message* verbatim: no markup, no highlighting, no wrapping."""
    (target or console).print(
        message, markup=False, emoji=False, highlight=False, soft_wrap=True
    )


def print_created(kind: str, path: Path, *, target: Console | None = None) -> None:
    """Print a ``Created <kind>: <path>`` line."""
    print_plain(f"Created {kind}: {path}", target=target)


def print_success(message: str, *, target: Console | None = None) -> None:
    """Print a green success message."""
    (target or console).print(f"[bold green]{message}[/bold green]")


def print_error(message: str, *, target: Console | None = None) -> None:
    """Print an error line on stderr.

    The text is printed verbatim because it usually embeds an ``OSError``
    message, which may contain paths.
    """
    (target or err_console).print(
        message,
        style="bold red",
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


def print_warning(message: str, *, target: Console | None = None) -> None:
    """Print a yellow warning message."""
    (target or console).print(
        message,
        style="bold yellow",
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


def print_summary_table(
    data: dict[str, str],
    title: str = "Summary",
    *,
    target: Console | None = None,
) -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
        target: Console to print on (defaults to ``console``).
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, Text(str(value)))

    out = target or console
    out.print(table)
    out.print()
