"""Tests for patternkit.core.settings module.

Covers:
- Defaults
- PATTERNKIT_* environment override
- Validation of log level and encoding
- Process-wide caching and reset
"""

import pytest
from pydantic import ValidationError

from patternkit.core.settings import PatternkitSettings, get_settings, reset_settings


class TestDefaults:
    def test_default_log_level(self):
        assert PatternkitSettings().log_level == "INFO"

    def test_default_log_format(self):
        assert PatternkitSettings().log_format == "console"

    def test_default_encoding(self):
        assert PatternkitSettings().encoding == "utf-8"


class TestEnvOverride:
    def test_log_level_from_env_is_uppercased(self, monkeypatch):
        monkeypatch.setenv("PATTERNKIT_LOG_LEVEL", "debug")
        assert PatternkitSettings().log_level == "DEBUG"

    def test_log_format_from_env(self, monkeypatch):
        monkeypatch.setenv("PATTERNKIT_LOG_FORMAT", "json")
        assert PatternkitSettings().log_format == "json"

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert PatternkitSettings().log_level == "INFO"


class TestValidation:
    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            PatternkitSettings(log_level="LOUD")

    def test_unknown_encoding(self):
        with pytest.raises(ValidationError):
            PatternkitSettings(encoding="not-a-codec")

    def test_unknown_log_format(self):
        with pytest.raises(ValidationError):
            PatternkitSettings(log_format="xml")


class TestCaching:
    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_reset_rereads_environment(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("PATTERNKIT_ENCODING", "latin-1")
        assert get_settings().encoding == "utf-8"

        reset_settings()
        second = get_settings()
        assert second is not first
        assert second.encoding == "latin-1"
