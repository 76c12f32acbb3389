"""Command-line interface for patternkit."""

from patternkit.cli.app import app

__all__ = ["app"]
