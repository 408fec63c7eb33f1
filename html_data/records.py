"""Row sources accepted by the table renderer."""
from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Mapping, Sequence

import pyarrow as pa

from .attributes import is_sequence, type_name
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def table_to_records(table: pa.Table) -> list[dict[str, object]]:
    records: list[dict[str, object]] = []
    for row in table.to_pylist():
        converted = {key: json_friendly(value) for key, value in row.items()}
        records.append(converted)
    return records


def json_friendly(value: object) -> object:
    if isinstance(value, (dt.date, dt.datetime)):
        return value.isoformat()
    return value


def coerce_rows(rows: object) -> Sequence[Mapping[Any, Any]]:
    """Return ``rows`` as a sequence of row mappings.

    Arrow tables are converted with :func:`table_to_records`; any other input
    must already be a sequence. Each row is checked when it is rendered.
    """

    if isinstance(rows, pa.Table):
        logger.debug("Converting Arrow table with %d rows", rows.num_rows)
        return table_to_records(rows)
    if not is_sequence(rows):
        raise InvalidArgumentError(f"Expecting sequence for rows parameter, {type_name(rows)} given.")
    return rows  # type: ignore[return-value]


def column_names(rows: object) -> list[Any]:
    """Return header labels for ``rows``: Arrow column names or the first row's keys."""

    if isinstance(rows, pa.Table):
        return list(rows.column_names)
    records = coerce_rows(rows)
    if not records:
        return []
    first = records[0]
    if not isinstance(first, Mapping):
        raise InvalidArgumentError(f"Expecting mapping for row, {type_name(first)} given.")
    return list(first.keys())


__all__ = ["coerce_rows", "column_names", "json_friendly", "table_to_records"]
