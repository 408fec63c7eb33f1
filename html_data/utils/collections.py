"""Collection helpers for checked and selected option values."""
from __future__ import annotations

from typing import Callable, Hashable, Iterable, Iterator, MutableSequence, TypeVar, cast

from ..attributes import stringify

T = TypeVar("T")


def unique_everseen(iterable: Iterable[T], *, key: Callable[[T], Hashable] | None = None) -> Iterator[T]:
    """Yield items from ``iterable`` in first-seen order, skipping repeats."""

    seen: set[Hashable] = set()
    for item in iterable:
        marker = key(item) if key is not None else cast(Hashable, item)
        if marker in seen:
            continue
        seen.add(marker)
        yield item


def extend_unique(target: MutableSequence[str], values: Iterable[object]) -> MutableSequence[str]:
    """Append the string form of each value in ``values`` not already in ``target``."""

    present = set(target)
    for value in values:
        text = stringify(value)
        if text in present:
            continue
        present.add(text)
        target.append(text)
    return target


def option_values(values: Iterable[object]) -> list[str]:
    """Return the de-duplicated string forms of ``values``.

    Option values are compared as they appear in markup, so ``1`` and ``"1"``
    select the same option.
    """

    return list(unique_everseen(stringify(value) for value in values))


__all__ = [
    "extend_unique",
    "option_values",
    "unique_everseen",
]
