"""Exceptions raised by the list comparator."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from list_equality.result import Divergence

__all__ = ["ListComparisonError", "UncomparableKindError"]


class ListComparisonError(Exception):
    """Base class for comparison errors.  Carries the offending Divergence."""

    def __init__(self, divergence: Divergence) -> None:
        super().__init__(divergence.describe())
        self.divergence = divergence


class UncomparableKindError(ListComparisonError, TypeError):
    """Raised when a value cannot be compared at all.

    Either a side that must be a container is not one, or an item's kind has
    no comparison rule.  Subclasses TypeError so that callers can tell
    "I don't know how to compare this" apart from an AssertionError.
    """
