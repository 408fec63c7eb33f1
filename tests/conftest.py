from __future__ import annotations

import os
from typing import Iterator

import duckdb
import pytest
from hypothesis import HealthCheck, settings

from html_data import TableRenderer


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register custom command line options for the test suite."""

    group = parser.getgroup("html_data")
    group.addoption(
        "--html-data-profile",
        action="store",
        default=None,
        help="Select the Hypothesis profile to load (dev or ci).",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Declare pytest markers and configure Hypothesis defaults."""

    config.addinivalue_line("markers", "duckdb: Tests that render rows fetched through DuckDB.")

    settings.register_profile(
        "dev",
        settings(max_examples=25, deadline=500, suppress_health_check=(HealthCheck.filter_too_much,)),
    )
    settings.register_profile(
        "ci",
        settings(
            max_examples=75,
            deadline=750,
            print_blob=True,
            suppress_health_check=(HealthCheck.filter_too_much,),
        ),
    )
    selected = config.getoption("html_data_profile")
    if selected:
        settings.load_profile(selected)
    elif os.getenv("CI"):
        settings.load_profile("ci")
    else:
        settings.load_profile("dev")


@pytest.fixture
def rows() -> list[dict[str, str]]:
    return [
        {"col1": "val1", "col2": "val2", "col3": "val3"},
        {"col1": "val4", "col2": "val5", "col3": "val6"},
        {"col1": "val7", "col2": "val8", "col3": "val9"},
    ]


@pytest.fixture
def renderer() -> TableRenderer:
    return TableRenderer()


@pytest.fixture
def duckdb_connection() -> Iterator[duckdb.DuckDBPyConnection]:
    """Yield an in-memory DuckDB connection."""

    connection = duckdb.connect()
    try:
        yield connection
    finally:
        connection.close()
