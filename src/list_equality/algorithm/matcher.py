"""Greedy first-match multiset matching for indexed items.

Each expected item, in order, is paired with the first still-unused actual
item that the equality predicate accepts.  Because item equality is an
equivalence relation, any two candidates in the same class are
interchangeable, so first-match never needs to backtrack: a perfect matching
exists exactly when the greedy pass pairs every expected item.

The actual items are an immutable snapshot; consumed positions are tracked in
a boolean ``used`` mask instead of deleting from a live list.

Worst case is O(n^2) predicate calls for n items.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, NamedTuple

import numpy as np

__all__ = ["MatchOutcome", "greedy_match"]


class MatchOutcome(NamedTuple):
    """Result of greedy_match.

    Attributes:
        assignment: For each expected position, the paired actual position,
            or -1 when the expected item was not (or not yet) paired.
        unmatched:  Position of the first expected item with no partner, or
            None when every expected item was paired.
    """

    assignment: np.ndarray
    unmatched: int | None

    @property
    def complete(self) -> bool:
        return self.unmatched is None


def greedy_match(
    expected: Sequence[Any],
    actual: Sequence[Any],
    equal: Callable[[Any, Any], bool],
) -> MatchOutcome:
    """Pair every expected item with a distinct, equal actual item.

    Stops at the first expected item that cannot be paired.

    Args:
        expected: Expected items, matched in this order.
        actual:   Actual items; never modified.
        equal:    Predicate ``equal(expected_item, actual_item)``.

    Returns:
        A ``MatchOutcome`` holding the assignment found so far and the
        position of the first unpaired expected item (None on success).
    """
    used = np.zeros(len(actual), dtype=bool)
    assignment = np.full(len(expected), -1, dtype=int)

    for i, item in enumerate(expected):
        for j in np.flatnonzero(~used).tolist():
            if equal(item, actual[j]):
                used[j] = True
                assignment[i] = j
                break
        else:
            return MatchOutcome(assignment, i)

    return MatchOutcome(assignment, None)
