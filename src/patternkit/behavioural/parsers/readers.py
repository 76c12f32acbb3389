"""
Resource readers: the acquisition step of the parsing pipeline.

A reader turns a resource name into raw bytes. It is the only awaited step
of :meth:`CustomerDataParser.parse`; every failure surfaces as
:class:`ResourceUnavailableError`.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol, runtime_checkable

from patternkit.core.errors import ResourceUnavailableError


@runtime_checkable
class ResourceReader(Protocol):
    """Protocol for byte-read-by-name collaborators."""

    async def read(self, path: str | Path) -> bytes:
        """Return the raw bytes of ``path`` or raise ResourceUnavailableError."""
        ...


class FileResourceReader:
    """Reads local files off the event loop thread."""

    async def read(self, path: str | Path) -> bytes:
        try:
            return await asyncio.to_thread(Path(path).read_bytes)
        except OSError as e:
            raise ResourceUnavailableError(
                f"Cannot read resource: {path}",
                cause=e,
            ).with_context(resource=str(path)) from e


class InMemoryResourceReader:
    """Serves bytes from a name -> bytes mapping."""

    def __init__(self, resources: dict[str, bytes | str] | None = None) -> None:
        self._resources: dict[str, bytes] = {}
        for name, content in (resources or {}).items():
            self.put(name, content)

    def put(self, name: str, content: bytes | str) -> None:
        if isinstance(content, str):
            content = content.encode("utf-8")
        self._resources[name] = content

    async def read(self, path: str | Path) -> bytes:
        try:
            return self._resources[str(path)]
        except KeyError as e:
            raise ResourceUnavailableError(
                f"Resource not found: {path}",
                cause=e,
            ).with_context(resource=str(path)) from e


__all__ = ["ResourceReader", "FileResourceReader", "InMemoryResourceReader"]
