"""Form, fieldset and button markup."""
from __future__ import annotations

from typing import Any, Mapping

from ..attributes import ensure_mapping, format_attributes, is_scalar, merge_attributes, stringify, type_name
from ..errors import InvalidArgumentError
from ._base import require_name, void_element

METHODS = ("GET", "POST")


class Form:
    def __init__(self, action: str, method: str) -> None:
        self.action = require_name(action, label="action parameter")
        method = require_name(method, label="method parameter").upper()
        if method not in METHODS:
            raise InvalidArgumentError("The form method must be either GET or POST.")
        self.method = method

    def open_form(self, attributes: Mapping[str, Any] | None = None) -> str:
        attrs = merge_attributes(
            {"action": self.action, "method": self.method},
            ensure_mapping(attributes),
            reserved=("action", "method"),
        )
        return f"<form{format_attributes(attrs)}>"

    def close_form(self) -> str:
        return "</form>"

    def submit_button(self, value: str, attributes: Mapping[str, Any] | None = None) -> str:
        return self._button("submit", value, attributes)

    def reset_button(self, value: str, attributes: Mapping[str, Any] | None = None) -> str:
        return self._button("reset", value, attributes)

    def hidden_input(self, name: str, value: object, attributes: Mapping[str, Any] | None = None) -> str:
        if not isinstance(name, str):
            raise InvalidArgumentError("The hidden field name must be string.")
        if not is_scalar(value):
            raise InvalidArgumentError("The hidden field value must be scalar.")
        attrs = merge_attributes(
            {"type": "hidden", "name": name, "value": stringify(value)},
            ensure_mapping(attributes),
            reserved=("type", "name", "value"),
        )
        return void_element("input", attrs)

    def open_fieldset(self, attributes: Mapping[str, Any] | None = None) -> str:
        return f"<fieldset{format_attributes(ensure_mapping(attributes))}>"

    def close_fieldset(self) -> str:
        return "</fieldset>"

    def legend(self, text: str, attributes: Mapping[str, Any] | None = None) -> str:
        if not isinstance(text, str):
            raise InvalidArgumentError(f"Expecting string for legend text, {type_name(text)} given.")
        return f"<legend{format_attributes(ensure_mapping(attributes))}>{text}</legend>"

    def _button(self, kind: str, value: object, attributes: Mapping[str, Any] | None) -> str:
        if not isinstance(value, str):
            raise InvalidArgumentError(f"Expecting string for value parameter, {type_name(value)} given.")
        attrs = merge_attributes(
            {"type": kind, "value": value},
            ensure_mapping(attributes),
            reserved=("type", "value"),
        )
        return void_element("input", attrs)


__all__ = ["Form", "METHODS"]
