"""Structured variant: the resource is one JSON array of customer objects."""

from __future__ import annotations

import pydantic

from patternkit.behavioural.parsers.base import CustomerDataParser
from patternkit.behavioural.parsers.records import Record, RecordList
from patternkit.core.errors import MalformedInputError
from patternkit.core.logging import get_logger

logger = get_logger(__name__)


class JsonCustomerDataParser(CustomerDataParser):
    """Parses ``[{"name": ..., "age": ..., "identifier": ...}, ...]``."""

    def parse_data(self, raw: bytes) -> list[Record]:
        text = self._decode(raw)
        try:
            return RecordList.validate_json(text)
        except pydantic.ValidationError as e:
            raise MalformedInputError(
                f"Expected a JSON array of customer records: {e.error_count()} error(s)",
                cause=e,
            ).with_context(errors=[err["msg"] for err in e.errors()]) from e

    def hook(self) -> None:
        logger.info("parser.hook_executed")


__all__ = ["JsonCustomerDataParser"]
