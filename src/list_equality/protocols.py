"""Capability interfaces recognised by the list comparator.

Domain types opt in to container or identity semantics explicitly, by
subclassing (or ``register()``-ing with) one of the abstract base classes
below.  The comparator never sniffs for method names.

- ContainerView:        exposes its items as ordered ``(key, item)`` pairs.
- ContainerConvertible: converts itself into a native container on demand.
- IdentityComparable:   equality is decided by a durable identity, not by
                        structure or reference.

``ValueFormatter`` is the structural protocol for the diagnostic formatter
injected into the comparator.

Example::

    from list_equality.protocols import IdentityComparable

    class Invoice(IdentityComparable):
        def __init__(self, number: str) -> None:
            self.number = number

        def same_identity(self, other: object) -> bool:
            return isinstance(other, Invoice) and other.number == self.number
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "ContainerConvertible",
    "ContainerView",
    "IdentityComparable",
    "ValueFormatter",
]


class ContainerView(ABC):
    """A value viewable as an ordered sequence of ``(key, item)`` pairs.

    Integer keys mark indexed items; any other hashable key marks an
    associative item.
    """

    @abstractmethod
    def container_items(self) -> Iterable[tuple[Hashable, Any]]:
        """Yield ``(key, item)`` pairs in a stable order."""


class ContainerConvertible(ABC):
    """A value that converts itself into a native container."""

    @abstractmethod
    def to_container(self) -> Any:
        """Return a list, tuple, mapping or other container holding the items."""


class IdentityComparable(ABC):
    """An entity whose equality is decided by a durable identity."""

    @abstractmethod
    def same_identity(self, other: Any) -> bool:
        """Return True when *other* denotes the same entity as ``self``."""


@runtime_checkable
class ValueFormatter(Protocol):
    """Structural protocol for diagnostic formatters.

    ``name`` describes the rendering in messages (e.g. ``"json encoded"``).
    ``format`` must never raise: values it cannot render fall back to a
    best-effort representation.
    """

    name: str

    def format(self, value: Any) -> str: ...
