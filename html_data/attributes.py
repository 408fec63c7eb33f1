"""Attribute validation and serialisation shared by every element builder.

Attribute maps are ordered ``name -> value`` mappings. Values are interpolated
verbatim: nothing in this module escapes markup, so callers are expected to
sanitise user supplied text before handing it over.
"""
from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any, Iterable, Iterator, Mapping, Sequence

from .errors import (
    InvalidArgumentError,
    InvalidAttributeNameError,
    InvalidAttributeValueError,
    MissingKeyError,
)

_NUMERIC_PATTERN = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$")
_SCALAR_TYPES = (str, int, float, Decimal)


def is_scalar(value: object) -> bool:
    """Return ``True`` for strings, numbers and booleans."""

    return isinstance(value, _SCALAR_TYPES)


def is_numeric(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    return isinstance(value, str) and bool(_NUMERIC_PATTERN.match(value))


def is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def type_name(value: object) -> str:
    if value is None:
        return "None"
    return type(value).__name__


def stringify(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def iter_entries(values: Mapping[Any, Any] | Sequence[Any]) -> Iterator[tuple[Any, Any]]:
    """Yield ``(key, value)`` pairs from a mapping or ``(index, value)`` from a sequence."""

    if isinstance(values, Mapping):
        yield from values.items()
    else:
        yield from enumerate(values)


def ensure_mapping(value: object, *, label: str = "attribute parameter") -> dict[Any, Any]:
    """Return a mutable copy of ``value``; ``None`` becomes an empty mapping."""

    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidArgumentError(f"Expecting mapping for {label}, {type_name(value)} given.")
    return dict(value)


def is_valid_attribute_name(key: object) -> bool:
    return isinstance(key, str) and key != "" and not is_numeric(key)


def validate_attributes(attributes: Mapping[Any, Any], require_name: bool = False) -> None:
    """Check that ``attributes`` only carries scalar (or ``None``) values.

    With ``require_name`` every key must also be a usable HTML attribute name:
    a non-empty string that does not parse as a number.
    """

    if not isinstance(attributes, Mapping):
        raise InvalidArgumentError(
            f"Expecting mapping for attribute parameter, {type_name(attributes)} given."
        )
    if require_name:
        for key in attributes:
            if not is_valid_attribute_name(key):
                raise InvalidAttributeNameError(f"Expecting valid HTML attribute name, {key!r} given.")
    for key, value in attributes.items():
        if value is not None and not is_scalar(value):
            raise InvalidAttributeValueError(
                f"Expecting scalar or None for value of '{key}' attribute, {type_name(value)} given."
            )


def format_attributes(
    attributes: Mapping[Any, Any],
    ignore: Iterable[Any] | str | int = (),
) -> str:
    """Serialise ``attributes`` to `` name="value"`` tokens.

    Keys listed in ``ignore`` are removed first and must be present. The
    remaining entries are validated (names included) and rendered in insertion
    order; ``None`` renders as an empty value.
    """

    if not isinstance(attributes, Mapping):
        raise InvalidArgumentError(
            f"Expecting mapping for attribute parameter, {type_name(attributes)} given."
        )
    if isinstance(ignore, (str, int)):
        ignore = (ignore,)
    remaining = dict(attributes)
    for key in ignore:
        if key not in remaining:
            raise MissingKeyError(f"Could not find key {key} in attribute array.")
        del remaining[key]
    validate_attributes(remaining, require_name=True)
    return "".join(f' {key}="{stringify(value)}"' for key, value in remaining.items())


def merge_attributes(
    base: Mapping[str, Any],
    *overrides: Mapping[str, Any] | None,
    reserved: Iterable[str] = (),
) -> dict[str, Any]:
    """Layer ``overrides`` over ``base`` while keeping ``reserved`` keys untouched.

    Later mappings win. Reserved names coming from an override are dropped
    silently; keys already present keep their original position.
    """

    blocked = set(reserved)
    merged = dict(base)
    for override in overrides:
        if not override:
            continue
        for key, value in override.items():
            if key in blocked:
                continue
            merged[key] = value
    return merged


def split_primary(
    primary: object,
    attributes: Mapping[str, Any] | None,
    *,
    reserved: Iterable[str],
) -> dict[str, Any]:
    """Resolve the ``primary`` argument accepted by text-like inputs.

    A scalar ``primary`` becomes the ``value`` attribute and wins over any
    ``value`` in ``attributes``. A mapping is treated as extra attributes. Both
    shapes lose the ``reserved`` keys.
    """

    extra = ensure_mapping(attributes)
    blocked = tuple(reserved)
    if primary is None:
        return merge_attributes({}, extra, reserved=blocked)
    if isinstance(primary, Mapping):
        return merge_attributes({}, primary, extra, reserved=blocked)
    if is_scalar(primary):
        return merge_attributes({"value": primary}, extra, reserved=(*blocked, "value"))
    raise InvalidArgumentError(
        f"Expecting scalar or mapping for value parameter, {type_name(primary)} given."
    )


__all__ = [
    "ensure_mapping",
    "format_attributes",
    "is_numeric",
    "is_scalar",
    "is_sequence",
    "is_valid_attribute_name",
    "iter_entries",
    "merge_attributes",
    "split_primary",
    "stringify",
    "type_name",
    "validate_attributes",
]
