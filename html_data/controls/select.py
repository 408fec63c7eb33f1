"""Selection lists."""
from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..attributes import (
    format_attributes,
    is_scalar,
    is_sequence,
    iter_entries,
    merge_attributes,
    stringify,
    type_name,
    validate_attributes,
)
from ..errors import InvalidArgumentError, MissingKeyError
from ..utils.collections import extend_unique
from ._base import render_label, require_name


class Select:
    """Render a ``<select>`` element and its ``<option>`` children.

    Passing a sequence to :meth:`set_selected` turns the list into a
    multi-select: ``multiple="multiple"`` is added and the field name gains a
    ``[]`` suffix.
    """

    def __init__(self, name: str) -> None:
        self.name = require_name(name)
        self.blank = False
        self.list_attributes: dict[str, Any] = {}
        self.selected: list[str] = []

    def render_list(
        self,
        options: Sequence[Mapping[str, Any]] | Mapping[Any, Mapping[str, Any]],
        value_key: str,
        text_key: str,
        separator: object = "\n\t",
    ) -> str | list[str]:
        if not isinstance(value_key, str):
            raise InvalidArgumentError(f"Expecting string for value parameter, {type_name(value_key)} given.")
        if not isinstance(text_key, str):
            raise InvalidArgumentError(f"Expecting string for text parameter, {type_name(text_key)} given.")
        if not isinstance(options, Mapping) and not is_sequence(options):
            raise InvalidArgumentError(f"Expecting sequence for options, {type_name(options)} given.")
        rendered = [self._render_option(option, value_key, text_key) for _, option in iter_entries(options)]
        if self.blank:
            rendered.insert(0, "<option></option>")
        opening = self._render_open()
        if isinstance(separator, str):
            return f"{opening}{separator}{separator.join(rendered)}\n</select>"
        return [opening, *rendered, "</select>"]

    def label(self, text: str, attributes: Mapping[str, Any] | None = None) -> str:
        return render_label(self.name, text, attributes)

    def set_blank(self) -> bool:
        self.blank = True
        return True

    def set_selected(self, selected: object) -> bool:
        """Mark option values as selected; ``None`` and ``False`` are ignored."""

        if selected is None or selected is False:
            return False
        if isinstance(selected, (str, int)) and not isinstance(selected, bool):
            extend_unique(self.selected, [selected])
            return True
        if not is_sequence(selected):
            raise InvalidArgumentError(
                f"Expecting string, integer, or sequence for selected parameter, {type_name(selected)} given."
            )
        self.list_attributes = {"multiple": "multiple", **self.list_attributes}
        extend_unique(self.selected, [value for value in selected if is_scalar(value)])  # type: ignore[union-attr]
        return True

    def set_list_attributes(self, attributes: Mapping[str, Any]) -> bool:
        validate_attributes(attributes)
        self.list_attributes = merge_attributes(self.list_attributes, attributes, reserved=("name",))
        return True

    def _render_open(self) -> str:
        name = f"{self.name}[]" if "multiple" in self.list_attributes else self.name
        attrs = merge_attributes({"name": name}, self.list_attributes, reserved=("name",))
        return f"<select{format_attributes(attrs)}>"

    def _render_option(self, option: object, value_key: str, text_key: str) -> str:
        if not isinstance(option, Mapping):
            raise InvalidArgumentError(f"Expecting mapping for option, {type_name(option)} given.")
        if option.get(value_key) is None:
            raise MissingKeyError(f"Option missing value key for ({value_key}).")
        if option.get(text_key) is None:
            raise MissingKeyError(f"Option missing text key for ({text_key}).")
        value = option[value_key]
        attrs: dict[str, Any] = {"value": value}
        if stringify(value) in self.selected:
            attrs["selected"] = "selected"
        extra = {key: item for key, item in option.items() if key not in (value_key, text_key)}
        attrs = merge_attributes(attrs, extra, reserved=("value", "selected"))
        return f"<option{format_attributes(attrs)}>{stringify(option[text_key])}</option>"


__all__ = ["Select"]
