"""HTML table rendering from sequences of row mappings.

A :class:`TableRenderer` turns rows (mappings of column key to cell value) into
a ``<table>`` element. Each cell is either a scalar, ``None`` or a mapping that
carries the cell text under the configured text key plus extra attributes::

    renderer = TableRenderer()
    renderer.configure_column_order(["name", "qty"], allow_missing=False)
    renderer.configure_head(["Name", {"text": "Qty", "class": "num"}])
    html = renderer.render([
        {"name": "Widget", "qty": {"text": 3, "class": "num"}, "sku": "W-1"},
    ])

Caption, head, foot, table and tbody attributes are rendered when configured,
so indentation and the row counter must be configured before them.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from .attributes import (
    ensure_mapping,
    format_attributes,
    is_numeric,
    is_scalar,
    is_sequence,
    iter_entries,
    stringify,
    type_name,
    validate_attributes,
)
from .config import Config
from .errors import CellTypeError, InvalidArgumentError, MissingColumnError, MissingKeyError
from .records import coerce_rows

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TableConfig:
    """Mutable rendering state owned by a single :class:`TableRenderer`."""

    text_key: str | int = "text"
    column_order: list[Any] = field(default_factory=list)
    allow_missing: bool = True
    missing_cell_text: str = ""
    row_attribute_keys: dict[Any, Any] = field(default_factory=dict)
    indent_unit: str = "    "
    indent_level: int = 0
    row_counter: int = 0
    row_counter_header: str = "#"
    column_elements: list[dict[str, Any]] = field(default_factory=list)
    column_widths: list[int] = field(default_factory=list)
    use_pixels: bool = False
    caption: str = ""
    head: str = ""
    foot: str = ""
    table_attributes: str = ""
    tbody_attributes: str = ""


class TableRenderer:
    """Render ``<table>`` markup from row mappings."""

    def __init__(self, config: TableConfig | None = None) -> None:
        self.config = config if config is not None else TableConfig()

    @classmethod
    def from_config(cls, config: Config | None = None) -> TableRenderer:
        settings = (config or Config()).table
        return cls(
            TableConfig(
                text_key=settings.text_key,
                allow_missing=settings.allow_missing,
                missing_cell_text=settings.missing_cell_text,
                indent_unit=settings.indent_unit,
                indent_level=settings.indent_level,
                row_counter_header=settings.row_counter_header,
                use_pixels=settings.use_pixels,
            )
        )

    # ------------------------------------------------------------------
    # configuration
    # ------------------------------------------------------------------
    def configure_column_order(
        self,
        keys: Sequence[Any] | Mapping[Any, Any],
        allow_missing: bool | None = None,
        missing_text: str | None = None,
    ) -> None:
        """Select and order the row keys rendered as cells.

        Row entries not named in ``keys`` are dropped. When a row lacks one of
        the keys, a cell holding the missing-cell text is rendered instead, or
        :class:`MissingColumnError` is raised if ``allow_missing`` is false.
        Leaving ``allow_missing`` as ``None`` keeps the current policy, which
        tolerates missing keys unless configured otherwise.
        """

        ordered = [key for _, key in self._scalar_entries(keys)]
        self.config.column_order = ordered
        if allow_missing is not None:
            self.config.allow_missing = bool(allow_missing)
        if isinstance(missing_text, str):
            self.config.missing_cell_text = missing_text

    def configure_row_attribute_keys(self, keys: Sequence[Any] | Mapping[Any, Any]) -> None:
        """Move row entries onto the ``<tr>`` element as attributes.

        A sequence uses each row key as the attribute name. A mapping maps
        attribute names to the row keys that supply their values.
        """

        entries = self._scalar_entries(keys)
        if isinstance(keys, Mapping):
            self.config.row_attribute_keys = dict(entries)
        else:
            self.config.row_attribute_keys = {key: key for _, key in entries}

    def configure_text_key(self, key: str | int) -> None:
        if isinstance(key, bool) or not isinstance(key, (str, int)):
            raise InvalidArgumentError(f"Expecting string or integer, {type_name(key)} given.")
        self.config.text_key = key

    def configure_row_counter(self, start: int | str | None = 1, header_text: object = None) -> None:
        """Prepend a counter cell to every row, starting at ``start``.

        A falsy ``start`` disables the counter and negative values are treated
        as zero. ``header_text`` labels the counter column in the head.
        """

        if not start:
            self.config.row_counter = 0
            return
        number = _whole_number(
            start, f"Expecting integer or numeric string for starting number, {type_name(start)} given."
        )
        self.config.row_counter = max(number, 0)
        if header_text is None:
            return
        if not is_scalar(header_text):
            raise InvalidArgumentError(
                f"Expecting scalar value for column header, {type_name(header_text)} given."
            )
        self.config.row_counter_header = stringify(header_text)

    def configure_indent(self, level: int | str = 0, unit: str = "    ") -> None:
        number = _whole_number(
            level, f"Expecting integer or numeric string for number of indentations, {type_name(level)} given."
        )
        if not isinstance(unit, str):
            raise InvalidArgumentError(f"Expecting string for whitespace parameter, {type_name(unit)} given.")
        self.config.indent_level = max(number, 0)
        self.config.indent_unit = unit

    def configure_column_widths(
        self,
        widths: Sequence[int] | Mapping[Any, int],
        use_pixels: bool | None = None,
    ) -> None:
        """Set ``<col>`` widths, in percent by default or in pixels.

        ``use_pixels`` left as ``None`` keeps the current unit.
        """

        if not isinstance(widths, Mapping) and not is_sequence(widths):
            raise InvalidArgumentError(f"Expecting sequence for column widths, {type_name(widths)} given.")
        values: list[int] = []
        for index, width in iter_entries(widths):
            if isinstance(width, bool) or not isinstance(width, int) or width < 1:
                raise InvalidArgumentError(
                    f"All column width values must be positive integers. See element for key '{index}'."
                )
            values.append(width)
        self.config.column_widths = values
        if use_pixels is not None:
            self.config.use_pixels = bool(use_pixels)

    def configure_column_elements(self, cols: Sequence[Mapping[str, Any]]) -> None:
        if not is_sequence(cols):
            raise InvalidArgumentError(f"Expecting sequence, {type_name(cols)} given.")
        for col in cols:
            validate_attributes(col)
        self.config.column_elements = [dict(col) for col in cols]

    def configure_head(self, headers: Sequence[Any] | Mapping[Any, Any], attributes: Mapping[str, Any] | None = None) -> None:
        attrs = format_attributes(ensure_mapping(attributes))
        text_key = self.config.text_key
        lines = [f"{self._indent(0)}<thead{attrs}>", f"{self._indent(1)}<tr>"]
        for entry in self._normalize_header(headers):
            cell_attrs = format_attributes(entry, ignore=[text_key])
            lines.append(f"{self._indent(2)}<th{cell_attrs}>{stringify(entry[text_key])}</th>")
        lines.append(f"{self._indent(1)}</tr>")
        lines.append(f"{self._indent(0)}</thead>")
        self.config.head = "\n".join(lines)

    def configure_foot(self, cells: Sequence[Any] | Mapping[Any, Any], attributes: Mapping[str, Any] | None = None) -> None:
        if not isinstance(cells, Mapping) and not is_sequence(cells):
            raise InvalidArgumentError(f"Expecting sequence or mapping for footer cells, {type_name(cells)} given.")
        attrs = format_attributes(ensure_mapping(attributes))
        lines = [f"{self._indent(0)}<tfoot{attrs}>", f"{self._indent(1)}<tr>"]
        for _, cell in iter_entries(cells):
            lines.append(f"{self._indent(2)}{self._format_cell(cell)}")
        lines.append(f"{self._indent(1)}</tr>")
        lines.append(f"{self._indent(0)}</tfoot>")
        self.config.foot = "\n".join(lines)

    def configure_caption(self, text: str | None, attributes: Mapping[str, Any] | None = None) -> None:
        if not text:
            self.config.caption = ""
            return
        if not isinstance(text, str):
            raise InvalidArgumentError(f"Expecting string for caption, {type_name(text)} given.")
        attrs = format_attributes(ensure_mapping(attributes))
        self.config.caption = f"{self._indent(0)}<caption{attrs}>{text}</caption>"

    def configure_table_attributes(self, attributes: Mapping[str, Any]) -> None:
        self.config.table_attributes = format_attributes(ensure_mapping(attributes))

    def configure_tbody_attributes(self, attributes: Mapping[str, Any]) -> None:
        self.config.tbody_attributes = format_attributes(ensure_mapping(attributes))

    # ------------------------------------------------------------------
    # rendering
    # ------------------------------------------------------------------
    def render(self, rows: object) -> str:
        """Return the complete ``<table>`` element for ``rows``.

        ``rows`` is a sequence of mappings or a :class:`pyarrow.Table`.
        """

        records = coerce_rows(rows)
        logger.debug("Rendering table with %d rows", len(records))
        cfg = self.config
        parts = [f"{self._indent(0)}<table{cfg.table_attributes}>\n"]
        for fragment in (cfg.caption, self._render_colgroup(), cfg.head, cfg.foot):
            if fragment:
                parts.append(f"{fragment}\n")
        parts.append(f"{self._indent(0)}<tbody{cfg.tbody_attributes}>\n")
        parts.extend(self.render_row(row) for row in records)
        parts.append(f"{self._indent(0)}</tbody>\n")
        parts.append(f"{self._indent(0)}</table>\n")
        return "".join(parts)

    def render_row(self, row: Mapping[Any, Any]) -> str:
        """Return one ``<tr>`` block, advancing the row counter when enabled."""

        if not isinstance(row, Mapping):
            raise InvalidArgumentError(f"Expecting mapping for row, {type_name(row)} given.")
        values = dict(row)
        row_attrs: dict[Any, Any] = {}
        for attribute, key in self.config.row_attribute_keys.items():
            if key in values:
                row_attrs[attribute] = values.pop(key)
        cells = self._format_cells(values)
        lines = [f"{self._indent(1)}<tr{format_attributes(row_attrs)}>"]
        lines.extend(f"{self._indent(2)}{cell}" for cell in cells)
        lines.append(f"{self._indent(1)}</tr>")
        return "\n".join(lines) + "\n"

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------
    def _indent(self, depth: int) -> str:
        return self.config.indent_unit * (self.config.indent_level + depth)

    def _scalar_entries(self, keys: object) -> list[tuple[Any, Any]]:
        if not isinstance(keys, Mapping) and not is_sequence(keys):
            raise InvalidArgumentError(f"Expecting sequence or mapping for keys, {type_name(keys)} given.")
        entries = list(iter_entries(keys))  # type: ignore[arg-type]
        for index, key in entries:
            if not is_scalar(key):
                raise InvalidArgumentError(f"Expecting scalar value for {index}, {type_name(key)} given.")
        return entries

    def _format_cells(self, row: Mapping[Any, Any]) -> list[str]:
        cfg = self.config
        cells: list[str] = []
        if cfg.row_counter > 0:
            cells.append(f"<td>{cfg.row_counter}</td>")
            cfg.row_counter += 1
        if not cfg.column_order:
            cells.extend(self._format_cell(value) for value in row.values())
            return cells
        for key in cfg.column_order:
            if key in row:
                cells.append(self._format_cell(row[key]))
            elif cfg.allow_missing:
                cells.append(self._format_cell(cfg.missing_cell_text))
            else:
                raise MissingColumnError(
                    f"No column '{key}' found for row. Check values in configure_column_order."
                )
        return cells

    def _format_cell(self, value: object) -> str:
        if value is None or is_scalar(value):
            return f"<td>{stringify(value)}</td>"
        if not isinstance(value, Mapping):
            raise CellTypeError(
                f"Expecting scalar, None, or mapping for table data, {type_name(value)} given."
            )
        text_key = self.config.text_key
        attrs = format_attributes(value, ignore=[text_key])
        text = value[text_key]
        if text is not None and not is_scalar(text):
            raise CellTypeError(f"Expecting scalar or None for cell text, {type_name(text)} given.")
        return f"<td{attrs}>{stringify(text)}</td>"

    def _normalize_header(self, headers: object) -> list[dict[Any, Any]]:
        if not isinstance(headers, Mapping) and not is_sequence(headers):
            raise InvalidArgumentError(
                f"Expecting sequence or mapping for header entries, {type_name(headers)} given."
            )
        text_key = self.config.text_key
        normalized: list[dict[Any, Any]] = []
        if self.config.row_counter:
            normalized.append({text_key: self.config.row_counter_header})
        for index, entry in iter_entries(headers):  # type: ignore[arg-type]
            if is_scalar(entry):
                normalized.append({text_key: entry})
                continue
            if not isinstance(entry, Mapping):
                raise CellTypeError(
                    f"Expecting scalar or mapping for the HTML th element, {type_name(entry)} given."
                )
            if text_key not in entry:
                raise MissingKeyError(f"Could not find a text value for key {index}.")
            text = entry[text_key]
            if not is_scalar(text):
                raise CellTypeError(
                    f"Expecting string or integer for column header text key, {type_name(text)} given."
                )
            normalized.append(dict(entry))
        return normalized

    def _render_colgroup(self) -> str:
        cols = [dict(col) for col in self.config.column_elements]
        if self.config.column_widths:
            cols = self._merge_widths(cols)
        if not cols:
            return ""
        lines = [f"{self._indent(0)}<colgroup>"]
        lines.extend(f"{self._indent(1)}<col{format_attributes(col)} />" for col in cols)
        lines.append(f"{self._indent(0)}</colgroup>")
        return "\n".join(lines)

    def _merge_widths(self, cols: list[dict[str, Any]]) -> list[dict[str, Any]]:
        widths = self.config.column_widths
        unit = "px" if self.config.use_pixels else "%"
        cols.extend({} for _ in range(len(widths) - len(cols)))
        for col, width in zip(cols, widths):
            style = f"width: {width}{unit};"
            if col.get("style") is not None:
                style = f"{style} {stringify(col['style'])}"
            col["style"] = style
        return cols


def _whole_number(value: object, message: str) -> int:
    if isinstance(value, bool) or not is_numeric(value):
        raise InvalidArgumentError(message)
    if isinstance(value, str):
        parsed = float(value)
        if not math.isfinite(parsed):
            raise InvalidArgumentError(message)
        return int(parsed)
    return int(value)  # type: ignore[call-overload]


__all__ = ["TableConfig", "TableRenderer"]
