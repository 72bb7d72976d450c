"""Shared fixtures for the list-equality test suite."""

from __future__ import annotations

import pytest
from sample_types import User

pytest_plugins = ["pytester"]


@pytest.fixture
def users() -> tuple[User, User, User]:
    """Three users: the first and last share id 15."""
    return User(15, "Ann"), User(12, "Bob"), User(15, "Anne")
