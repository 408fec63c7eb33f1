"""Generic ``<input>`` elements of any HTML input type."""
from __future__ import annotations

from typing import Any, Mapping

from ..attributes import merge_attributes, split_primary
from ..errors import InvalidArgumentError
from ._base import render_label, require_name, void_element

INPUT_TYPES = frozenset(
    {
        "button",
        "checkbox",
        "color",
        "date",
        "datetime-local",
        "email",
        "file",
        "hidden",
        "image",
        "month",
        "number",
        "password",
        "radio",
        "range",
        "reset",
        "search",
        "submit",
        "tel",
        "text",
        "time",
        "url",
        "week",
    }
)
RESERVED = ("type", "name")


class Input:
    def __init__(self, name: str, input_type: str) -> None:
        self.name = require_name(name)
        input_type = require_name(input_type, label="type parameter").lower()
        if input_type not in INPUT_TYPES:
            raise InvalidArgumentError(f"Unsupported input type '{input_type}'.")
        self.input_type = input_type

    def render(self, primary: object = None, attributes: Mapping[str, Any] | None = None) -> str:
        extra = split_primary(primary, attributes, reserved=RESERVED)
        attrs = merge_attributes({"type": self.input_type, "name": self.name}, extra, reserved=RESERVED)
        return void_element("input", attrs)

    def label(self, text: str, attributes: Mapping[str, Any] | None = None) -> str:
        return render_label(self.name, text, attributes)


__all__ = ["INPUT_TYPES", "Input"]
