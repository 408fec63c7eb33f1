"""Checkboxes wrapped in labels, singly or as a checklist."""
from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..attributes import (
    ensure_mapping,
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
from ..utils.collections import option_values
from ._base import require_name, void_element

RESERVED = ("type", "name", "value")


class Checkbox:
    """Render ``<label><input type="checkbox" ... />text</label>`` elements.

    Instance-level label attributes take precedence over per-call label
    attributes; per-call input attributes take precedence over instance-level
    input attributes.
    """

    def __init__(self, name: str) -> None:
        self.name = require_name(name)
        self.label_attributes: dict[str, Any] = {}
        self.input_attributes: dict[str, Any] = {}
        self.checked: list[str] = []

    def render(
        self,
        value: object,
        text: object,
        input_attributes: object = None,
        label_attributes: Mapping[str, Any] | None = None,
    ) -> str:
        """Return one labelled checkbox.

        ``input_attributes`` may be a mapping of extra input attributes or any
        other truthy value, which marks the box as checked.
        """

        return self._render(value, text, input_attributes, label_attributes, name=self.name)

    def render_list(
        self,
        options: Sequence[Mapping[str, Any]] | Mapping[Any, Mapping[str, Any]],
        value_key: str,
        text_key: str,
        separator: object = "",
    ) -> str | list[str]:
        """Render one checkbox per option, sharing the ``name[]`` field name.

        Option entries other than ``value_key`` and ``text_key`` become input
        attributes. A string ``separator`` joins the result; anything else
        returns the list of rendered checkboxes.
        """

        if not isinstance(options, Mapping) and not is_sequence(options):
            raise InvalidArgumentError(f"Expecting sequence for options, {type_name(options)} given.")
        rendered: list[str] = []
        for index, option in iter_entries(options):
            validate_attributes(option)
            for key in (value_key, text_key):
                if option.get(key) is None:
                    raise MissingKeyError(f"Could not find key '{key}' for option '{index}' in the options array.")
            extra = {key: item for key, item in option.items() if key not in (value_key, text_key)}
            rendered.append(
                self._render(option[value_key], option[text_key], extra, None, name=f"{self.name}[]")
            )
        if isinstance(separator, str):
            return separator.join(rendered)
        return rendered

    def set_checked(self, values: Sequence[str | int]) -> None:
        if not is_sequence(values):
            raise InvalidArgumentError(f"Expecting sequence for checked values, {type_name(values)} given.")
        for index, value in enumerate(values):
            if isinstance(value, bool) or not isinstance(value, (str, int)):
                raise InvalidArgumentError(
                    f"Expecting string or integer for checked value at index {index}, {type_name(value)} given."
                )
        self.checked = option_values(values)

    def set_label_attributes(self, attributes: Mapping[str, Any]) -> None:
        validate_attributes(attributes)
        self.label_attributes = dict(attributes)

    def set_input_attributes(self, attributes: Mapping[str, Any]) -> None:
        validate_attributes(attributes)
        self.input_attributes = merge_attributes({}, attributes, reserved=RESERVED)

    def _render(
        self,
        value: object,
        text: object,
        input_attributes: object,
        label_attributes: Mapping[str, Any] | None,
        *,
        name: str,
    ) -> str:
        if not is_scalar(value):
            raise InvalidArgumentError(f"Expecting scalar for value parameter, {type_name(value)} given.")
        if not is_scalar(text):
            raise InvalidArgumentError(f"Expecting scalar for text parameter, {type_name(text)} given.")
        per_call: dict[str, Any] = {}
        if input_attributes:
            if isinstance(input_attributes, Mapping):
                validate_attributes(input_attributes)
                per_call = merge_attributes({}, input_attributes, reserved=RESERVED)
            else:
                per_call = {"checked": "checked"}
        label = merge_attributes(ensure_mapping(label_attributes), self.label_attributes)
        attrs = merge_attributes(
            {"type": "checkbox", "name": name, "value": value},
            self.input_attributes,
            per_call,
            reserved=RESERVED,
        )
        if stringify(value) in self.checked:
            attrs["checked"] = "checked"
        return f"<label{format_attributes(label)}>{void_element('input', attrs)}{stringify(text)}</label>"


__all__ = ["Checkbox"]
