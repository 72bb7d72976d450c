"""Container views: (key, item) pair extraction and indexed/associative split.

A container is any value that classify() reports as CONTAINER.  Its items are
viewed as an ordered list of ``(key, item)`` pairs:

- ContainerConvertible -> ``to_container()`` is called once and viewed in turn
- ContainerView        -> ``container_items()``
- Mapping              -> ``items()`` in insertion order
- anything else        -> ``enumerate(value)`` (lists, tuples, sets, ndarrays...)

Pairs whose key is an integer are *indexed* items; all other pairs are
*associative* items.  The caller's container is never modified: the view
is a fresh list.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import Any, NamedTuple

import numpy as np

from list_equality.algorithm.kinds import ItemKind, classify
from list_equality.protocols import ContainerConvertible, ContainerView

__all__ = [
    "Partition",
    "container_items",
    "is_container",
    "is_indexed_key",
    "partition",
]

Pair = tuple[Hashable, Any]


class Partition(NamedTuple):
    """The two disjoint parts of a container.

    Attributes:
        indexed:     Items with an integer key, in their original order.
        associative: Items with any other key, by key, in their original order.
    """

    indexed: tuple[Any, ...]
    associative: dict[Hashable, Any]


def is_container(value: Any) -> bool:
    """Return True if *value* can be viewed as (key, item) pairs."""
    return classify(value) is ItemKind.CONTAINER


def is_indexed_key(key: Hashable) -> bool:
    """Return True for integer keys.  Booleans are not integer keys."""
    return isinstance(key, (int, np.integer)) and not isinstance(key, bool)


def container_items(value: Any) -> list[Pair]:
    """Return the ``(key, item)`` pairs of a container.

    Args:
        value: A value for which ``is_container(value)`` holds.

    Returns:
        A new list of pairs in the container's own order.

    Raises:
        TypeError: If *value* is not a container, or its ``to_container()``
            does not return one, or its ``container_items()`` repeats
            an associative key.
    """
    if not is_container(value):
        raise TypeError(f"{type(value).__name__!r} value is not a container")

    if isinstance(value, ContainerConvertible):
        converted = value.to_container()
        if converted is value or not is_container(converted):
            raise TypeError(
                f"{type(value).__name__}.to_container() returned "
                f"{type(converted).__name__!r}, which is not a container"
            )
        return container_items(converted)

    if isinstance(value, ContainerView):
        pairs = list(value.container_items())
        _check_unique_keys(pairs, value)
        return pairs

    if isinstance(value, Mapping):
        return list(value.items())

    return list(enumerate(value))


def _check_unique_keys(pairs: list[Pair], value: Any) -> None:
    # A repeated associative key would silently drop one of the items
    seen: set[Hashable] = set()
    for key, _ in pairs:
        if is_indexed_key(key):
            continue
        if key in seen:
            raise TypeError(
                f"{type(value).__name__}.container_items() yielded key {key!r} "
                "more than once"
            )
        seen.add(key)


def partition(pairs: Iterable[Pair]) -> Partition:
    """Split pairs into indexed items and associative items."""
    indexed: list[Any] = []
    associative: dict[Hashable, Any] = {}
    for key, item in pairs:
        if is_indexed_key(key):
            indexed.append(item)
        else:
            associative[key] = item
    return Partition(tuple(indexed), associative)
