"""Single-line text inputs and textareas."""
from __future__ import annotations

from typing import Any, Mapping

from ..attributes import ensure_mapping, format_attributes, is_scalar, merge_attributes, split_primary, stringify, type_name
from ..errors import InvalidArgumentError
from ._base import render_label, require_name, void_element

RESERVED = ("type", "name")


class Textbox:
    """Build ``<input type="text">`` and ``<textarea>`` elements for one field name."""

    def __init__(self, name: str) -> None:
        self.name = require_name(name)

    def render(
        self,
        primary: object = None,
        attributes: Mapping[str, Any] | None = None,
        *,
        textarea: bool = False,
    ) -> str:
        """Return the input element.

        ``primary`` is either the ``value`` attribute (a scalar) or a mapping of
        attributes. ``type`` and ``name`` are always computed here.
        """

        if textarea:
            return self.textarea(primary, attributes)
        extra = split_primary(primary, attributes, reserved=RESERVED)
        attrs = merge_attributes({"type": "text", "name": self.name}, extra, reserved=RESERVED)
        return void_element("input", attrs)

    def textarea(self, text: object = None, attributes: Mapping[str, Any] | None = None) -> str:
        if text is not None and not is_scalar(text):
            raise InvalidArgumentError(f"Expecting None or scalar for text parameter, {type_name(text)} given.")
        attrs = merge_attributes({"name": self.name}, ensure_mapping(attributes), reserved=("name",))
        return f"<textarea{format_attributes(attrs)}>{stringify(text)}</textarea>"

    def label(self, text: str, attributes: Mapping[str, Any] | None = None) -> str:
        return render_label(self.name, text, attributes)


__all__ = ["Textbox"]
