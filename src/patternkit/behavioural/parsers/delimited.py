"""
Delimited variant: one customer per line, three tab-separated columns.

Lines may end in ``\\n`` or ``\\r\\n``. Empty lines are skipped; any other
line without exactly three columns fails the whole parse.
"""

from __future__ import annotations

from patternkit.behavioural.parsers.base import CustomerDataParser
from patternkit.behavioural.parsers.records import Record
from patternkit.core.errors import MalformedInputError

COLUMNS = ("name", "age", "identifier")
DELIMITER = "\t"


class DelimitedCustomerDataParser(CustomerDataParser):
    """Parses ``name<TAB>age<TAB>identifier`` lines."""

    def parse_data(self, raw: bytes) -> list[Record]:
        records = []
        for line_num, line in enumerate(self._decode(raw).split("\n"), 1):
            line = line.removesuffix("\r")
            if not line:
                continue

            fields = line.split(DELIMITER)
            if len(fields) != len(COLUMNS):
                raise MalformedInputError(
                    f"Expected {len(COLUMNS)} tab-separated columns at line {line_num}, "
                    f"got {len(fields)}",
                ).with_context(line=line_num)

            records.append(Record(**dict(zip(COLUMNS, fields))))
        return records


__all__ = ["DelimitedCustomerDataParser", "COLUMNS", "DELIMITER"]
