"""Test suite for greedy_match.

Tests empty inputs, first-match pairing, multiplicity, stopping at the first
unpaired item, and that the actual items are never modified.
"""

from __future__ import annotations

import numpy as np

from list_equality.algorithm.matcher import greedy_match


def _eq(a: object, b: object) -> bool:
    return a == b


class TestEmptyInputs:
    def test_both_empty_is_complete(self) -> None:
        outcome = greedy_match([], [], _eq)
        assert outcome.complete
        assert len(outcome.assignment) == 0

    def test_empty_actual_fails_at_first_item(self) -> None:
        outcome = greedy_match([1], [], _eq)
        assert outcome.unmatched == 0
        assert not outcome.complete

    def test_empty_expected_is_complete(self) -> None:
        assert greedy_match([], [1, 2], _eq).complete


class TestPairing:
    def test_permutation_is_fully_paired(self) -> None:
        outcome = greedy_match(["a", "b", "c"], ["c", "a", "b"], _eq)
        assert outcome.complete
        assert outcome.assignment.tolist() == [1, 2, 0]

    def test_first_match_wins(self) -> None:
        outcome = greedy_match([1], [1, 1, 1], _eq)
        assert outcome.assignment.tolist() == [0]

    def test_each_actual_item_used_once(self) -> None:
        outcome = greedy_match([1, 1], [1, 1], _eq)
        assert outcome.assignment.tolist() == [0, 1]

    def test_assignment_is_integer_array(self) -> None:
        outcome = greedy_match([1], [1], _eq)
        assert isinstance(outcome.assignment, np.ndarray)
        assert np.issubdtype(outcome.assignment.dtype, np.integer)

    def test_equivalence_classes_need_no_backtracking(self) -> None:
        # Items are equal when they have the same parity
        def same_parity(a: int, b: int) -> bool:
            return a % 2 == b % 2

        outcome = greedy_match([1, 2, 3, 4], [6, 8, 5, 7], same_parity)
        assert outcome.complete
        assert sorted(outcome.assignment.tolist()) == [0, 1, 2, 3]


class TestFailure:
    def test_stops_at_first_unpaired_item(self) -> None:
        calls: list[tuple[object, object]] = []

        def recording_eq(a: object, b: object) -> bool:
            calls.append((a, b))
            return a == b

        outcome = greedy_match([1, 9, 2], [1, 2, 3], recording_eq)
        assert outcome.unmatched == 1
        assert outcome.assignment.tolist() == [0, -1, -1]
        # Item 2 was never tried
        assert all(a != 2 for a, _ in calls)

    def test_multiplicity_mismatch(self) -> None:
        outcome = greedy_match([1, 1, 2], [1, 2, 2], _eq)
        assert outcome.unmatched == 1

    def test_actual_is_not_modified(self) -> None:
        actual = [3, 2, 1]
        greedy_match([1, 2, 3], actual, _eq)
        assert actual == [3, 2, 1]
