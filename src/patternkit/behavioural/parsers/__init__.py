"""
Customer-data parsers built on a fixed template-method pipeline.

Provides a common skeleton for every input format:
- Structured (JSON array of objects)
- Delimited (tab-separated lines)
"""

from patternkit.behavioural.parsers.base import CustomerDataParser
from patternkit.behavioural.parsers.delimited import DelimitedCustomerDataParser
from patternkit.behavioural.parsers.readers import (
    FileResourceReader,
    InMemoryResourceReader,
    ResourceReader,
)
from patternkit.behavioural.parsers.records import Record
from patternkit.behavioural.parsers.registry import (
    list_formats,
    parser_class_for,
    parser_for_path,
    register_parser,
)
from patternkit.behavioural.parsers.structured import JsonCustomerDataParser

__all__ = [
    # Types
    "Record",
    # Pipeline
    "CustomerDataParser",
    "JsonCustomerDataParser",
    "DelimitedCustomerDataParser",
    # Acquisition
    "ResourceReader",
    "FileResourceReader",
    "InMemoryResourceReader",
    # Registry
    "register_parser",
    "parser_class_for",
    "parser_for_path",
    "list_formats",
]
