"""
CLI utility helpers — output formatting.
"""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def output_rows(rows: list[dict[str, Any]], *, as_json: bool = False, title: str = "") -> None:
    """Print ``rows`` as JSON or as a rich table with one column per key."""
    if as_json:
        console.print_json(json.dumps(rows))
        return

    table = Table(title=title or None)
    columns = list(rows[0]) if rows else []
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*(str(row.get(column, "")) for column in columns))
    console.print(table)


def output_error(error: Exception) -> None:
    """Print an error summary to stderr."""
    err_console.print(f"[bold red]{error.__class__.__name__}:[/bold red] {error}")
