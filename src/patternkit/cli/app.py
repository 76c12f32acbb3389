"""
Root Typer application for the patternkit CLI.

Each command runs one pattern end to end and prints what it observed.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from pydantic import ValidationError

from patternkit.cli.utils import console, output_error, output_rows
from patternkit.core.errors import PatternError
from patternkit.core.logging import configure_logging
from patternkit.core.settings import PatternkitSettings, get_settings

app = typer.Typer(
    name="patternkit",
    help="patternkit — classic design patterns, runnable.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from patternkit import __version__

        typer.echo(f"patternkit {__version__}")
        raise typer.Exit()


def _log_level_callback(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        return PatternkitSettings(log_level=value).log_level
    except ValidationError as e:
        raise typer.BadParameter(f"Unknown log level: {value}") from e


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Override PATTERNKIT_LOG_LEVEL.",
        callback=_log_level_callback,
    ),
) -> None:
    """patternkit CLI — parse customer files, walk collections, clone people."""
    settings = get_settings()
    configure_logging(
        level=log_level or settings.log_level,
        json_format=settings.log_format == "json",
        service=settings.service_name,
    )


# ── Template method ──────────────────────────────────────────────────────


@app.command("parse")
def parse(
    path: Path = typer.Argument(..., help="Customer data file (.json, .txt, .tsv)"),
    format: str | None = typer.Option(None, "--format", "-f", help="Override format detection, e.g. json or txt"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Parse a customer data file and print its records."""
    from patternkit.behavioural.parsers import parser_for_path

    try:
        parser = parser_for_path(path, format=format)
        records = asyncio.run(parser.parse())
    except PatternError as e:
        output_error(e)
        raise typer.Exit(code=1)

    output_rows([record.model_dump() for record in records], as_json=json_out, title="Customers")


# ── Iterator ─────────────────────────────────────────────────────────────


@app.command("iterate")
def iterate(
    items: list[str] = typer.Argument(..., help="Items to add to the collection"),
    forward: bool = typer.Option(False, "--forward", help="Walk first to last instead of last to first"),
) -> None:
    """Walk a collection with the reverse (default) or forward iterator."""
    from patternkit.behavioural.iterator import OrderedCollection

    collection = OrderedCollection(items)
    iterator = collection.iterator() if forward else collection.reverse_iterator()
    for item in iterator:
        console.print(item)


# ── Prototype ────────────────────────────────────────────────────────────


@app.command("clone")
def clone(
    deep: bool = typer.Option(True, "--deep/--shallow", help="Copy strategy"),
    street: str = typer.Option("Av. Brasil", "--street"),
    new_street: str = typer.Option("Rua Nova", "--new-street", help="Street written to the source after cloning"),
) -> None:
    """Clone a person, mutate the source's address, and show what the clone sees."""
    from patternkit.creational.prototype import Address, Person

    person = Person("Anderson", 20)
    person.add_address(Address(street, 15))
    copy = person.clone_deep() if deep else person.clone_shallow()

    person.addresses[0].street = new_street
    copy.name = "Person 2"

    output_rows(
        [
            {"who": "source", "name": person.name, "street": person.addresses[0].street},
            {"who": "clone", "name": copy.name, "street": copy.addresses[0].street},
        ],
        title="Deep clone" if deep else "Shallow clone",
    )
    shared = copy.addresses[0] is person.addresses[0]
    console.print(f"addresses shared: {shared}")


if __name__ == "__main__":
    app()
