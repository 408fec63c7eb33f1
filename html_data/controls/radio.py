"""Radio button groups."""
from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..attributes import (
    format_attributes,
    is_sequence,
    iter_entries,
    merge_attributes,
    type_name,
    validate_attributes,
)
from ..errors import InvalidArgumentError, MissingKeyError
from ._base import require_name, void_element

RESERVED = ("type", "name", "value", "checked")
_OPTIONS_SHAPE = "Expecting a sequence of option mappings with the text and HTML value attribute."


class Radio:
    def __init__(self, name: str) -> None:
        self.name = require_name(name)
        self.checked: str | None = None
        self.label_attributes: dict[str, Any] = {}
        self.input_attributes: dict[str, Any] = {}

    def render(
        self,
        options: Sequence[Mapping[str, Any]] | Mapping[Any, Mapping[str, Any]],
        value_key: str,
        text_key: str,
        separator: str = "",
    ) -> str:
        """Render one labelled radio button per option.

        Option entries other than ``value_key`` and ``text_key`` become
        attributes of that option's ``<label>``.
        """

        if not isinstance(value_key, str):
            raise InvalidArgumentError(f"Expecting string for value parameter, {type_name(value_key)} given.")
        if not isinstance(text_key, str):
            raise InvalidArgumentError(f"Expecting string for text parameter, {type_name(text_key)} given.")
        if not isinstance(separator, str):
            raise InvalidArgumentError(f"Expecting string for separator, {type_name(separator)} given.")
        if not isinstance(options, Mapping) and not is_sequence(options):
            raise InvalidArgumentError(_OPTIONS_SHAPE)
        rendered: list[str] = []
        for index, option in iter_entries(options):
            if not isinstance(option, Mapping):
                raise InvalidArgumentError(_OPTIONS_SHAPE)
            for key in (text_key, value_key):
                if option.get(key) is None:
                    raise MissingKeyError(f"Key {key} was not set for option {index}.")
            extra = {key: item for key, item in option.items() if key not in (value_key, text_key)}
            rendered.append(self._render_option(option[value_key], option[text_key], extra))
        return separator.join(rendered)

    def set_checked(self, value: str) -> None:
        if not isinstance(value, str):
            raise InvalidArgumentError(f"Expecting string for checked option value, {type_name(value)} given.")
        self.checked = value

    def set_label_attributes(self, attributes: Mapping[str, Any]) -> None:
        validate_attributes(attributes)
        self.label_attributes = dict(attributes)

    def set_input_attributes(self, attributes: Mapping[str, Any]) -> None:
        validate_attributes(attributes)
        self.input_attributes = merge_attributes({}, attributes, reserved=RESERVED)

    def _render_option(self, value: object, text: object, label_attributes: Mapping[str, Any]) -> str:
        if not isinstance(value, str) or value == "":
            raise InvalidArgumentError(f"Expecting non-empty string for value attribute, {type_name(value)} given.")
        if not isinstance(text, str) or text == "":
            raise InvalidArgumentError(f"Expecting non-empty string for text attribute, {type_name(text)} given.")
        validate_attributes(label_attributes)
        label = merge_attributes(self.label_attributes, label_attributes)
        attrs = merge_attributes(
            {"type": "radio", "name": self.name, "value": value},
            self.input_attributes,
            reserved=RESERVED,
        )
        if self.checked == value:
            attrs["checked"] = "checked"
        return f"<label{format_attributes(label)}>{void_element('input', attrs)}{text}</label>"


__all__ = ["Radio"]
