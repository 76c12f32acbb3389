"""Patternkit Core -- errors, structured logging, and settings shared by every pattern.

Architecture::

    errors.py      Structured error hierarchy (PatternError and subclasses)
    logging.py     structlog configuration and context helpers
    settings.py    Cached PatternkitSettings (pydantic-settings)
"""

from patternkit.core.errors import (
    ErrorCategory,
    ErrorContext,
    MalformedInputError,
    PatternError,
    ResourceUnavailableError,
    UnsupportedFormatError,
)
from patternkit.core.logging import LogContext, configure_logging, get_logger
from patternkit.core.settings import PatternkitSettings, get_settings, reset_settings

__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "PatternError",
    "ResourceUnavailableError",
    "MalformedInputError",
    "UnsupportedFormatError",
    "LogContext",
    "configure_logging",
    "get_logger",
    "PatternkitSettings",
    "get_settings",
    "reset_settings",
]
