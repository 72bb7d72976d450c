"""ItemKind StrEnum and the classify() kind-detection function.

Every item is classified exactly once per comparison into one of a finite
set of kinds; the comparator dispatches its equality rule on that kind.

Classification order matters:

1. ``None``                                   -> NULL
2. bool, numbers, str, bytes, numpy scalars  -> SCALAR
   (before containers: strings and bytes are iterable)
3. IdentityComparable                        -> ENTITY
   (before containers: an entity may also be container-like)
4. files, sockets, mmaps, selectors          -> RESOURCE
   (before containers: streams are iterable)
5. one-shot iterators                        -> UNKNOWN
   (viewing them would consume the caller's data)
6. ContainerConvertible, ContainerView, Mapping, ndarray, Iterable -> CONTAINER
7. callables                                 -> CALLABLE
8. modules, Ellipsis, NotImplemented         -> UNKNOWN
9. anything else                             -> OBJECT
"""

from __future__ import annotations

import io
import mmap
import numbers
import selectors
import socket
import types
from collections.abc import Iterable, Iterator, Mapping
from enum import StrEnum, auto
from typing import Any

import numpy as np

from list_equality.protocols import (
    ContainerConvertible,
    ContainerView,
    IdentityComparable,
)

__all__ = ["ItemKind", "classify", "describe"]

_SCALAR_TYPES = (bool, numbers.Number, str, bytes, bytearray, np.generic)
_RESOURCE_TYPES = (io.IOBase, socket.socket, mmap.mmap, selectors.BaseSelector)
_CONTAINER_TYPES = (ContainerConvertible, ContainerView, Mapping, Iterable)
_UNCOMPARABLE_TYPES = (
    types.ModuleType,
    type(Ellipsis),
    type(NotImplemented),
)


class ItemKind(StrEnum):
    """The kinds of item the comparator knows how to compare.

    StrEnum values are the lowercased member names:
    - NULL      -> "null"      : None
    - SCALAR    -> "scalar"    : bool, number, string or bytes
    - ENTITY    -> "entity"    : IdentityComparable
    - CONTAINER -> "container" : a value viewable as (key, item) pairs
    - RESOURCE  -> "resource"  : an open file, socket or similar handle
    - CALLABLE  -> "callable"  : functions, methods, classes, callables
    - OBJECT    -> "object"    : any other plain object
    - UNKNOWN   -> "unknown"   : a value with no comparison rule
    """

    NULL = auto()
    SCALAR = auto()
    ENTITY = auto()
    CONTAINER = auto()
    RESOURCE = auto()
    CALLABLE = auto()
    OBJECT = auto()
    UNKNOWN = auto()


def classify(value: Any) -> ItemKind:
    """Return the ItemKind of *value*."""
    if value is None:
        return ItemKind.NULL

    if isinstance(value, _SCALAR_TYPES):
        return ItemKind.SCALAR

    if isinstance(value, np.ndarray):
        # 0-d arrays are not iterable; they wrap a single scalar
        return ItemKind.CONTAINER if value.ndim else ItemKind.SCALAR

    if isinstance(value, IdentityComparable):
        return ItemKind.ENTITY

    if isinstance(value, _RESOURCE_TYPES):
        return ItemKind.RESOURCE

    if isinstance(value, Iterator):
        return ItemKind.UNKNOWN

    if isinstance(value, _CONTAINER_TYPES):
        return ItemKind.CONTAINER

    if callable(value):
        return ItemKind.CALLABLE

    if isinstance(value, _UNCOMPARABLE_TYPES):
        return ItemKind.UNKNOWN

    return ItemKind.OBJECT


def describe(value: Any) -> str:
    """Describe the runtime kind of *value* for messages, e.g. ``"int (scalar)"``."""
    return f"{type(value).__name__} ({classify(value)})"
