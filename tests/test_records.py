from __future__ import annotations

import datetime as dt

import pyarrow as pa
import pytest

from html_data import TableRenderer
from html_data.errors import InvalidArgumentError
from html_data.records import coerce_rows, column_names, json_friendly, table_to_records


def test_table_to_records_converts_dates() -> None:
    table = pa.table({"day": [dt.date(2024, 3, 1)], "qty": [4]})
    assert table_to_records(table) == [{"day": "2024-03-01", "qty": 4}]


def test_json_friendly_leaves_other_values() -> None:
    assert json_friendly(3) == 3
    assert json_friendly(dt.datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05"


@pytest.mark.parametrize("rows", ["abc", b"abc", {"a": 1}, 5, None])
def test_coerce_rows_rejects_non_sequences(rows: object) -> None:
    with pytest.raises(InvalidArgumentError, match="Expecting sequence for rows parameter"):
        coerce_rows(rows)


def test_coerce_rows_passes_sequences_through() -> None:
    data = ({"a": 1},)
    assert coerce_rows(data) is data


def test_column_names_from_arrow_and_rows() -> None:
    assert column_names(pa.table({"x": [1], "y": [2]})) == ["x", "y"]
    assert column_names([{"b": 1, "a": 2}]) == ["b", "a"]
    assert column_names([]) == []


def test_column_names_rejects_non_mapping_first_row() -> None:
    with pytest.raises(InvalidArgumentError, match="Expecting mapping for row, str given."):
        column_names(["a"])


def test_render_accepts_arrow_table() -> None:
    table = pa.table({"name": ["Widget", "Gadget"], "qty": [3, None]})
    renderer = TableRenderer()
    renderer.configure_head(column_names(table))
    html = renderer.render(table)

    assert "<th>name</th>" in html
    assert "<td>Widget</td>\n        <td>3</td>" in html
    assert "<td>Gadget</td>\n        <td></td>" in html


@pytest.mark.duckdb
def test_render_duckdb_query_result(duckdb_connection) -> None:
    duckdb_connection.execute("CREATE TABLE sales (region VARCHAR, sold DATE, amount INTEGER)")
    duckdb_connection.execute(
        "INSERT INTO sales VALUES ('north', DATE '2024-05-01', 120), ('south', DATE '2024-05-02', 80)"
    )
    table = duckdb_connection.execute("SELECT * FROM sales ORDER BY region").fetch_arrow_table()

    renderer = TableRenderer()
    renderer.configure_column_order(["sold", "region"])
    html = renderer.render(table)

    assert "<td>2024-05-01</td>\n        <td>north</td>" in html
    assert "120" not in html
