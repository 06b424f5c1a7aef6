"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
sample data files, written fresh into tmp_path for every test.
"""

from __future__ import annotations

import json
from pathlib import Path

import polars as pl
import pytest


PEOPLE_CSV = "Name,Age,Country\nJohn,30,USA\nAlice,25,UK\nBob,40,Canada\n"

PEOPLE = [
    {"name": "John", "age": 30, "country": "USA"},
    {"name": "Alice", "age": 25, "country": "UK"},
    {"name": "Bob", "age": 40, "country": "Canada"},
]

NESTED_PEOPLE = [
    {"name": "John", "age": 30, "bank": {"account": 123456, "institution": "Chase"}},
    {"name": "Alice", "age": 25, "bank": {"account": 654321, "institution": "Barclays"}},
    {"name": "Bob", "age": 40, "bank": {"account": 789456, "institution": "TD"}},
]


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, values and exceptions")
    config.addinivalue_line("markers", "detection: Format detection and sniffing")
    config.addinivalue_line("markers", "adapters: Format adapters (polars, json)")
    config.addinivalue_line("markers", "reader: FileReader facade")
    config.addinivalue_line("markers", "e2e: End-to-end tests")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


@pytest.fixture
def csv_file(tmp_path: Path) -> Path:
    """Comma-separated people file with a header row."""
    path = tmp_path / "people.csv"
    path.write_text(PEOPLE_CSV)
    return path


@pytest.fixture
def tsv_file(tmp_path: Path) -> Path:
    """Tab-separated copy of the people file."""
    path = tmp_path / "people.tsv"
    path.write_text(PEOPLE_CSV.replace(",", "\t"))
    return path


@pytest.fixture
def json_file(tmp_path: Path) -> Path:
    """Flat JSON array of people."""
    path = tmp_path / "people.json"
    path.write_text(json.dumps(PEOPLE, indent=2))
    return path


@pytest.fixture
def nested_json_file(tmp_path: Path) -> Path:
    """JSON array of people with a nested bank object."""
    path = tmp_path / "nested.json"
    path.write_text(json.dumps(NESTED_PEOPLE))
    return path


@pytest.fixture
def parquet_file(tmp_path: Path) -> Path:
    """Parquet file with name, age and country columns."""
    path = tmp_path / "people.parquet"
    pl.DataFrame(
        {
            "name": [p["name"] for p in PEOPLE],
            "age": [p["age"] for p in PEOPLE],
            "country": [p["country"] for p in PEOPLE],
        }
    ).write_parquet(path)
    return path


@pytest.fixture
def binary_file(tmp_path: Path) -> Path:
    """Extensionless file of arbitrary bytes."""
    path = tmp_path / "blob"
    path.write_bytes(bytes(range(256)) * 4)
    return path
