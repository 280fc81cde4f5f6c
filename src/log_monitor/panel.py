"""Render captured statements as rich tables for debugging tests."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from log_monitor.types import CapturedStatement, Severity

SEVERITY_STYLES: dict[Severity, str] = {
    Severity.DEBUG: "dim",
    Severity.INFO: "cyan",
    Severity.WARN: "yellow",
    Severity.ERROR: "red",
    Severity.FATAL: "bold white on red",
}


def statements_table(statements: Sequence[CapturedStatement]) -> Table:
    """Return a table with one row per statement, in emission order."""

    table = Table(show_header=True, header_style="bold", expand=True)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Severity", no_wrap=True)
    table.add_column("Message", overflow="fold")

    for index, statement in enumerate(statements, start=1):
        table.add_row(
            str(index),
            Text(statement.severity.token, style=SEVERITY_STYLES[statement.severity]),
            # Text avoids interpreting brackets in messages as markup.
            Text(statement.text),
        )
    return table


def print_statements_panel(
    statements: Sequence[CapturedStatement],
    *,
    console: Console | None = None,
    title: str = "Captured log statements",
) -> None:
    """Print ``statements`` inside a panel, or a placeholder when empty."""

    console = console or Console(stderr=True)
    if not statements:
        console.print(Panel(Text("No statements captured", style="italic"), title=title))
        return

    console.print(Panel(statements_table(statements), title=f"{title} ({len(statements)})"))
