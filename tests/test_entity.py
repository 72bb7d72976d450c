"""Tests for KeyedEntity identity semantics."""

from __future__ import annotations

import pytest
from sample_types import Account, User

from list_equality.entity import KeyedEntity
from list_equality.protocols import IdentityComparable


class TestSameIdentity:
    def test_equal_keys_are_same_record(self) -> None:
        assert User(15, "Ann").same_identity(User(15, "Anne"))

    def test_different_keys(self) -> None:
        assert not User(15, "Ann").same_identity(User(12, "Ann"))

    def test_different_classes_with_equal_keys(self) -> None:
        assert not User(1).same_identity(Account(1))
        assert not Account(1).same_identity(User(1))

    def test_unsaved_records_share_identity(self) -> None:
        assert User(None).same_identity(User(None))

    def test_non_entities(self) -> None:
        assert not User(1).same_identity(1)
        assert not User(1).same_identity(None)

    def test_is_symmetric(self, users: tuple[User, User, User]) -> None:
        for left in users:
            for right in users:
                assert left.same_identity(right) == right.same_identity(left)


class TestContract:
    def test_is_identity_comparable(self) -> None:
        assert isinstance(User(1), IdentityComparable)

    def test_identity_key_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            KeyedEntity()  # type: ignore[abstract]
