"""Shared pieces for the form control builders."""
from __future__ import annotations

from typing import Any, Mapping

from ..attributes import ensure_mapping, format_attributes, merge_attributes, type_name
from ..errors import InvalidArgumentError


def require_name(name: object, *, label: str = "name parameter") -> str:
    if not isinstance(name, str):
        raise InvalidArgumentError(f"Expecting string for {label}, {type_name(name)} given.")
    return name


def render_label(target: str, text: object, attributes: Mapping[str, Any] | None = None) -> str:
    """Return a ``<label>`` pointing at ``target``; ``for`` cannot be overridden."""

    if not isinstance(text, str):
        raise InvalidArgumentError(f"Expecting string for label text, {type_name(text)} given.")
    attrs = merge_attributes({"for": target}, ensure_mapping(attributes), reserved=("for",))
    return f"<label{format_attributes(attrs)}>{text}</label>"


def void_element(tag: str, attributes: Mapping[str, Any]) -> str:
    return f"<{tag}{format_attributes(attributes)} />"


__all__ = ["render_label", "require_name", "void_element"]
