"""
Parser registry keyed by file extension.

Usage:
    parser = parser_for_path("/data/customers.json")
    records = await parser.parse()

    register_parser(".psv", MyPipeParser)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from patternkit.behavioural.parsers.base import CustomerDataParser
from patternkit.behavioural.parsers.delimited import DelimitedCustomerDataParser
from patternkit.behavioural.parsers.structured import JsonCustomerDataParser
from patternkit.core.errors import UnsupportedFormatError

# Extension to parser mapping
_PARSERS: dict[str, type[CustomerDataParser]] = {
    ".json": JsonCustomerDataParser,
    ".txt": DelimitedCustomerDataParser,
    ".tsv": DelimitedCustomerDataParser,
}


def _normalize(ext: str) -> str:
    ext = ext.lower()
    return ext if ext.startswith(".") else f".{ext}"


def register_parser(ext: str, parser_class: type[CustomerDataParser]) -> None:
    """Map an extension (with or without the leading dot) to a parser class."""
    _PARSERS[_normalize(ext)] = parser_class


def parser_class_for(ext: str) -> type[CustomerDataParser]:
    try:
        return _PARSERS[_normalize(ext)]
    except KeyError:
        raise UnsupportedFormatError(
            f"No parser registered for extension: {ext}",
        ).with_context(supported=list_formats()) from None


def parser_for_path(
    path: str | Path,
    *,
    format: str | None = None,
    **kwargs: Any,
) -> CustomerDataParser:
    """Build the parser for ``path``, detecting the format from its extension."""
    ext = format or Path(path).suffix
    if not ext:
        raise UnsupportedFormatError(
            f"Cannot detect format for: {path}",
        ).with_context(resource=str(path))
    return parser_class_for(ext)(path, **kwargs)


def list_formats() -> list[str]:
    return sorted(_PARSERS)


__all__ = ["register_parser", "parser_class_for", "parser_for_path", "list_formats"]
