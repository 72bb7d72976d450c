"""Public API functions for list-equality.

This module provides the user-facing functions: lists_equal, lists_are_same,
assert_lists_equal and assert_arrays_equal.  Each call creates a fresh
ListComparator to guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from list_equality.algorithm.config import ComparisonConfig
from list_equality.comparator import ListComparator
from list_equality.errors import UncomparableKindError

if TYPE_CHECKING:
    from list_equality.protocols import ValueFormatter
    from list_equality.result import ComparisonResult

__all__ = [
    "assert_arrays_equal",
    "assert_lists_equal",
    "lists_are_same",
    "lists_equal",
]

_ARRAY_TYPES = (list, tuple, dict)


def lists_equal(
    expected: Any,
    actual: Any,
    strict: bool = False,
    formatter: ValueFormatter | None = None,
) -> ComparisonResult:
    """Compare two containers and return a ComparisonResult.

    Indexed items may appear in any order; associative items must appear
    under the same keys.  Nested containers are compared the same way.

    Args:
        expected:  The reference container.
        actual:    The container under test.
        strict:    Require identical scalar types and, for plain objects, the
                   same instance.  Defaults to False.
        formatter: Renders values in failure messages.  Defaults to
                   ``ReprFormatter``.

    Returns:
        A ``ComparisonResult``.  Uncomparable input is reported in the result
        (``result.uncomparable``), not raised.
    """
    comparator = ListComparator(
        config=ComparisonConfig(strict=strict), formatter=formatter
    )
    return comparator.compare(expected, actual)


def lists_are_same(expected: Any, actual: Any, strict: bool = False) -> bool:
    """Return True if the two containers hold the same data.

    Raises:
        UncomparableKindError: If either side is not a container, or an item
            cannot be compared.
    """
    result = lists_equal(expected, actual, strict=strict)
    if result.uncomparable:
        raise UncomparableKindError(result.divergences[0])
    return result.equal


def assert_lists_equal(
    expected: Any,
    actual: Any,
    strict: bool = False,
    formatter: ValueFormatter | None = None,
) -> None:
    """Assert that two containers hold the same data.

    Caveats:
        - plain objects are only compared by type (and, in strict mode, by
          instance); use IdentityComparable for record-like objects
        - callables are only checked for being callable
        - resources are only checked for being resources

    Raises:
        AssertionError: When the containers differ, with a message listing
            the divergence.
        UncomparableKindError: When either side is not a container or an
            item cannot be compared.
    """
    __tracebackhide__ = True
    result = lists_equal(expected, actual, strict=strict, formatter=formatter)
    if result.uncomparable:
        raise UncomparableKindError(result.divergences[0])
    if not result.equal:
        raise AssertionError(result.render())


def assert_arrays_equal(
    expected: Any,
    actual: Any,
    strict: bool = False,
    formatter: ValueFormatter | None = None,
) -> None:
    """Like assert_lists_equal, but both sides must be lists, tuples or dicts."""
    __tracebackhide__ = True
    for side, value in (("Expected", expected), ("Actual", actual)):
        if not isinstance(value, _ARRAY_TYPES):
            raise AssertionError(
                f"{side} value is not an array: {type(value).__name__}"
            )
    assert_lists_equal(expected, actual, strict=strict, formatter=formatter)
