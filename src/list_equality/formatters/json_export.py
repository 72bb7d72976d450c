"""JsonFormatter: pretty-printed JSON export of values for failure messages.

Containers are exported through the same views the comparator uses, so a
ContainerView or ContainerConvertible is rendered as its items.  Values JSON
cannot represent (objects, callables, resources, circular structures) fall
back to their ``repr()``.
"""

from __future__ import annotations

import json
from typing import Any

import numpy as np

from list_equality.algorithm.kinds import ItemKind, classify
from list_equality.containers.view import container_items, is_indexed_key


class JsonFormatter:
    """Render values as indented JSON.

    Satisfies the ValueFormatter protocol structurally.

    Example::

        JsonFormatter(indent=None).format({"ids": (1, 2)})
        # '{"ids": [1, 2]}'
    """

    name = "json encoded"

    def __init__(self, indent: int | None = 4) -> None:
        self.indent = indent

    def format(self, value: Any) -> str:
        try:
            return json.dumps(
                self._exportable(value),
                indent=self.indent,
                ensure_ascii=False,
                default=repr,
            )
        except (TypeError, ValueError, RecursionError):
            return repr(value)

    def _exportable(self, value: Any) -> Any:
        """Convert *value* into plain JSON-compatible data, recursively."""
        kind = classify(value)

        if kind is ItemKind.SCALAR:
            if isinstance(value, (np.generic, np.ndarray)):
                value = value.item()
            if isinstance(value, (bytes, bytearray)):
                return bytes(value).decode("utf-8", errors="replace")
            if isinstance(value, (bool, int, float, str)):
                return value
            return str(value)

        if kind is ItemKind.CONTAINER:
            pairs = container_items(value)
            # Containers holding only sequential positions export as arrays
            if all(is_indexed_key(key) for key, _ in pairs) and [
                key for key, _ in pairs
            ] == list(range(len(pairs))):
                return [self._exportable(item) for _, item in pairs]
            return {str(key): self._exportable(item) for key, item in pairs}

        if kind is ItemKind.NULL:
            return None

        return repr(value)
