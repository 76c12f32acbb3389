"""
Structured error types for patternkit.

Every failure raised by the catalogue carries a category, a structured
context, and (when wrapping a lower-level exception) a chained cause, so
callers can log the error with ``to_dict()`` without losing the original
traceback.

Architecture:
    ::

        ┌──────────────────────────────────────────────────────┐
        │                    PatternError                       │
        │           (category, context, cause)                  │
        ├──────────────────────────────────────────────────────┤
        │  ResourceUnavailableError   (RESOURCE)                │
        │  MalformedInputError        (PARSE)                   │
        │  UnsupportedFormatError     (CONFIG)                  │
        └──────────────────────────────────────────────────────┘

Examples:
    Adding context to an error:

    >>> error = MalformedInputError("Expected 3 columns, got 2")
    >>> error.with_context(resource="customers.txt", line=4)
    MalformedInputError('Expected 3 columns, got 2', category=PARSE)
    >>> error.context.line
    4

    Chaining errors for root cause:

    >>> try:
    ...     raise FileNotFoundError("customers.json")
    ... except FileNotFoundError as e:
    ...     raise ResourceUnavailableError("Cannot read resource", cause=e)
    Traceback (most recent call last):
    ...
    ResourceUnavailableError: Cannot read resource

Guardrails:
    ❌ DON'T: Raise plain Exception from a pipeline stage
    ✅ DO: Use the matching PatternError subclass

    ❌ DON'T: Swallow the original exception
    ✅ DO: Pass it as cause= for error chaining
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification."""

    RESOURCE = "RESOURCE"  # Unreadable file, missing resource
    PARSE = "PARSE"  # Data decoding, shape errors
    CONFIG = "CONFIG"  # Unknown format, invalid settings
    INTERNAL = "INTERNAL"  # Bugs, unexpected state


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Attributes:
        resource: Name or path of the resource being read
        parser: Class name of the parser that failed
        line: 1-based line number for line-oriented formats
        metadata: Additional key-value pairs
    """

    resource: str | None = None
    parser: str | None = None
    line: int | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["resource", "parser", "line"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class PatternError(Exception):
    """
    Base exception for all patternkit errors.

    Subclasses set ``default_category`` to classify themselves; callers may
    still override it per instance.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> PatternError:
        """
        Add context to this error (fluent API).

        Usage:
            raise MalformedInputError("Bad line").with_context(
                resource="customers.txt",
                line=3,
            )
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class ResourceUnavailableError(PatternError):
    """The named resource could not be read; raised before any parsing."""

    default_category = ErrorCategory.RESOURCE


class MalformedInputError(PatternError):
    """Raw input did not decode into the expected record shape."""

    default_category = ErrorCategory.PARSE


class UnsupportedFormatError(PatternError):
    """No parser is registered for the requested format."""

    default_category = ErrorCategory.CONFIG


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "PatternError",
    "ResourceUnavailableError",
    "MalformedInputError",
    "UnsupportedFormatError",
]
