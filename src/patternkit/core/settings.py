"""
Centralized settings for patternkit.

:class:`PatternkitSettings` is read from ``PATTERNKIT_*`` environment
variables and an optional ``.env`` file.  :func:`get_settings` builds the
instance on first access and caches it for the life of the process;
:func:`reset_settings` drops the cache so tests can re-read the environment.
"""

from __future__ import annotations

import codecs
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PatternkitSettings(BaseSettings):
    """Patternkit configuration.

    Fields
    ──────
    log_level    : structlog log level
    log_format   : ``console`` for humans, ``json`` for aggregation
    encoding     : text encoding used to decode parser resources
    service_name : service name stamped on every log event
    """

    model_config = SettingsConfigDict(
        env_prefix="PATTERNKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="INFO")
    log_format: Literal["console", "json"] = Field(default="console")
    service_name: str = Field(default="patternkit")

    # ── Parsing ──────────────────────────────────────────────────
    encoding: str = Field(default="utf-8", description="Encoding for parser resources")

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {value}") from exc
        return value


_settings: PatternkitSettings | None = None


def get_settings() -> PatternkitSettings:
    """Return the process-wide settings, building them on first access."""
    global _settings
    if _settings is None:
        _settings = PatternkitSettings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings; the next :func:`get_settings` re-reads the env."""
    global _settings
    _settings = None


__all__ = ["PatternkitSettings", "get_settings", "reset_settings"]
