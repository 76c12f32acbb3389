"""
Template method: the fixed customer-data parsing pipeline.

``parse()`` is the skeleton every variant shares::

    read bytes  ->  parse_data()  ->  hook()  ->  return records
    (awaited)       (per format)      (no-op
                                      default)

Variants implement :meth:`CustomerDataParser.parse_data` and may override
:meth:`CustomerDataParser.hook`. They never override ``parse()``.

Usage:
    parser = DelimitedCustomerDataParser("customers.txt")
    records = await parser.parse()
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from pathlib import Path
from typing import final

from patternkit.behavioural.parsers.readers import FileResourceReader, ResourceReader
from patternkit.behavioural.parsers.records import Record
from patternkit.core.errors import MalformedInputError, PatternError
from patternkit.core.logging import LogContext, get_logger
from patternkit.core.settings import get_settings

logger = get_logger(__name__)


class CustomerDataParser(ABC):
    """Base class for customer-data parsers."""

    def __init__(
        self,
        path: str | Path,
        *,
        reader: ResourceReader | None = None,
        encoding: str | None = None,
    ) -> None:
        self.path = path
        self.reader = reader or FileResourceReader()
        self.encoding = encoding or get_settings().encoding

    @final
    async def parse(self) -> list[Record]:
        """Run the pipeline and return the parsed records."""
        with LogContext(parser=self.__class__.__name__, resource=str(self.path)):
            try:
                raw = await self.reader.read(self.path)
                logger.debug("parser.resource_read", bytes=len(raw))

                records = self.parse_data(raw)
                logger.info("parser.records_parsed", count=len(records))
            except PatternError as e:
                e.with_context(parser=self.__class__.__name__)
                if e.context.resource is None:
                    e.with_context(resource=str(self.path))
                logger.warning("parser.failed", **e.to_dict())
                raise

            self.hook()
            return records

    @final
    def parse_sync(self) -> list[Record]:
        """Run :meth:`parse` to completion on a fresh event loop."""
        return asyncio.run(self.parse())

    @abstractmethod
    def parse_data(self, raw: bytes) -> list[Record]:
        """Turn raw resource bytes into records."""
        ...

    def hook(self) -> None:
        """Extension point run after parsing, before returning."""
        pass

    def _decode(self, raw: bytes) -> str:
        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise MalformedInputError(
                f"Resource is not valid {self.encoding} text",
                cause=e,
            ) from e

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={str(self.path)!r})"


__all__ = ["CustomerDataParser"]
