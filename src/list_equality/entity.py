"""KeyedEntity: an IdentityComparable for records with a durable key.

Two keyed entities denote the same record when they are of the same class
and carry equal identity keys, no matter how their other attributes differ
or whether they are the same Python object.

Example::

    from dataclasses import dataclass
    from list_equality.entity import KeyedEntity

    @dataclass(eq=False)
    class User(KeyedEntity):
        id: int
        name: str

        @property
        def identity_key(self) -> int:
            return self.id

    User(15, "Ann").same_identity(User(15, "Anne"))   # True
    User(15, "Ann").same_identity(User(12, "Ann"))    # False
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Hashable
from typing import Any

from list_equality.protocols import IdentityComparable

__all__ = ["KeyedEntity"]


class KeyedEntity(IdentityComparable):
    """Mixin deciding identity by class and ``identity_key``."""

    @property
    @abstractmethod
    def identity_key(self) -> Hashable:
        """The durable identifier of the record, e.g. its primary key."""

    def same_identity(self, other: Any) -> bool:
        return type(other) is type(self) and self.identity_key == other.identity_key
