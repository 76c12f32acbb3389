"""
Shared pytest fixtures and configuration for patternkit tests.

This module provides:
- Settings cache reset for test isolation
- Sample customer payloads in both supported formats
- In-memory and on-disk resource fixtures
"""

import sys
from pathlib import Path
from typing import Generator

import pytest

# Ensure patternkit package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from patternkit.behavioural.parsers import InMemoryResourceReader
from patternkit.core.settings import reset_settings


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)

        if "cli" in test_path.parts:
            item.add_marker(pytest.mark.integration)

        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings() -> Generator[None, None, None]:
    """Drop cached settings before and after each test."""
    reset_settings()
    yield
    reset_settings()


# =============================================================================
# Sample Data Fixtures
# =============================================================================


JSON_CUSTOMERS = '[{"name":"Ana","age":"20","identifier":"111"}]'
TXT_CUSTOMERS = "Ana\t20\t111\nBob\t31\t222"


@pytest.fixture
def json_customers() -> str:
    return JSON_CUSTOMERS


@pytest.fixture
def txt_customers() -> str:
    return TXT_CUSTOMERS


@pytest.fixture
def memory_reader() -> InMemoryResourceReader:
    """Reader serving customers.json and customers.txt from memory."""
    return InMemoryResourceReader(
        {
            "customers.json": JSON_CUSTOMERS,
            "customers.txt": TXT_CUSTOMERS,
        }
    )


@pytest.fixture
def customer_files(tmp_path: Path) -> dict[str, Path]:
    """Write both sample payloads to disk and return their paths by format."""
    json_path = tmp_path / "customers.json"
    json_path.write_text(JSON_CUSTOMERS, encoding="utf-8")
    txt_path = tmp_path / "customers.txt"
    txt_path.write_bytes(b"Ana\t20\t111\r\nBob\t31\t222\r\n")
    return {"json": json_path, "txt": txt_path}
