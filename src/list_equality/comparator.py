"""ListComparator: order-tolerant structural equality for nested containers.

This is the List Equality Engine.  It decides whether two containers hold
the same data, where indexed items may appear in any order and associative
items must appear under the same keys.

Architecture:
- compare() views both sides as (key, item) pairs, checks the item counts,
  splits each side into indexed and associative parts, then compares the
  associative parts (cheap, by key) before the indexed parts (greedy
  multiset matching via ``greedy_match``).
- items_equal() classifies the expected item once and dispatches on its
  ItemKind to one equality rule.  Containers recurse into the list
  comparison; UNKNOWN has no rule and raises UncomparableKindError.
- Every structural failure becomes a Divergence and ends the comparison
  (fail fast).  A nested divergence only makes the nested item "not equal";
  it is kept as the ``cause`` of a key-value mismatch for diagnostics.
- Extra associative keys that exist only in *actual* are never reported
  directly.  The count check plus the indexed matching already reconcile the
  partition sizes, so such a key surfaces as a count mismatch or a missing
  indexed item.

The comparator holds no state between calls beyond its configuration and
formatter, so one instance may be shared across threads as long as the
compared containers are not mutated concurrently.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Hashable
from typing import TYPE_CHECKING, Any

from loguru import logger

from list_equality.algorithm.config import ComparisonConfig
from list_equality.algorithm.kinds import ItemKind, classify, describe
from list_equality.algorithm.matcher import greedy_match
from list_equality.algorithm.scalars import loose_equal, strict_equal
from list_equality.containers.view import container_items, partition
from list_equality.errors import UncomparableKindError
from list_equality.formatters import ReprFormatter
from list_equality.protocols import IdentityComparable
from list_equality.result import ComparisonResult, Divergence, DivergenceKind

if TYPE_CHECKING:
    from list_equality.protocols import ValueFormatter

__all__ = ["ListComparator"]

Path = tuple[Hashable, ...]


class ListComparator:
    """Deep, order-tolerant equality check for two containers.

    Example::

        from list_equality.comparator import ListComparator

        cmp = ListComparator()
        result = cmp.compare([1, ["a", ["x", "y"]]], [["a", ["y", "x"]], 1])
        result.equal             # True

        result = cmp.compare({"id": 1}, {"uid": 1})
        print(result.render())   # ... Item with key 'id' missing in actual list
    """

    def __init__(
        self,
        config: ComparisonConfig | None = None,
        formatter: ValueFormatter | None = None,
    ) -> None:
        """Initialise the comparator.

        Args:
            config:    Comparison parameters.  Defaults to ``ComparisonConfig()``
                       (non-strict).
            formatter: Renders values in failure messages.  Defaults to a
                       ``ReprFormatter`` limited to ``config.max_preview_length``.
        """
        self._config: ComparisonConfig = (
            config if config is not None else ComparisonConfig()
        )
        self._formatter: ValueFormatter = (
            formatter
            if formatter is not None
            else ReprFormatter(max_length=self._config.max_preview_length)
        )
        self._rules: dict[ItemKind, Callable[[Any, Any], bool]] = {
            ItemKind.NULL: self._nulls_equal,
            ItemKind.SCALAR: self._scalars_equal,
            ItemKind.ENTITY: self._entities_equal,
            ItemKind.RESOURCE: self._resources_equal,
            ItemKind.CALLABLE: self._callables_equal,
            ItemKind.OBJECT: self._objects_equal,
        }

    @property
    def config(self) -> ComparisonConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, expected: Any, actual: Any) -> ComparisonResult:
        """Compare two containers and return a ComparisonResult.

        Never raises for uncomparable input: a non-container side or an item
        without a comparison rule yields a result whose divergence kind is
        ``UNCOMPARABLE_KIND`` (see ``ComparisonResult.uncomparable``).

        Args:
            expected: The reference container.
            actual:   The container under test.

        Returns:
            A ``ComparisonResult``; ``equal`` is True when both hold the same data.
        """
        t0 = time.perf_counter()

        try:
            divergence = self._compare_lists(expected, actual, ())
        except UncomparableKindError as exc:
            divergence = exc.divergence

        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        if divergence is None:
            logger.debug("Lists are the same ({:.3f} ms)", elapsed_ms)
        else:
            logger.debug(
                "Lists differ with {} ({:.3f} ms)", divergence.kind, elapsed_ms
            )

        return ComparisonResult(
            equal=divergence is None,
            divergences=() if divergence is None else (divergence,),
            strict=self._config.strict,
            computation_time_ms=elapsed_ms,
        )

    def items_equal(self, expected: Any, actual: Any) -> bool:
        """Return True if two items are equal under the configured mode.

        Raises:
            UncomparableKindError: If *expected* has no comparison rule.
        """
        equal, _ = self._compare_items(expected, actual, ())
        return equal

    # ------------------------------------------------------------------
    # List comparison
    # ------------------------------------------------------------------

    def _compare_lists(
        self, expected: Any, actual: Any, path: Path
    ) -> Divergence | None:
        """Compare two containers, returning the first divergence or None."""
        expected_items = self._view(expected, "Expected", path)
        actual_items = self._view(actual, "Actual", path)

        if len(expected_items) != len(actual_items):
            return Divergence(
                kind=DivergenceKind.COUNT_MISMATCH,
                message=(
                    "Lists have different item count.\n"
                    f"\nExpected: {len(expected_items)}"
                    f"\nActual: {len(actual_items)}"
                ),
                path=path,
                expected=len(expected_items),
                actual=len(actual_items),
            )

        expected_indexed, expected_associative = partition(expected_items)
        actual_indexed, actual_associative = partition(actual_items)

        return self._compare_associative(
            expected_associative, actual_associative, path
        ) or self._compare_indexed(expected_indexed, actual_indexed, path)

    def _compare_associative(
        self,
        expected: dict[Hashable, Any],
        actual: dict[Hashable, Any],
        path: Path,
    ) -> Divergence | None:
        for key, item in expected.items():
            if key not in actual:
                return Divergence(
                    kind=DivergenceKind.MISSING_KEY,
                    message=f"Item with key '{key}' missing in actual list",
                    path=path,
                    key=key,
                    expected=item,
                )

            equal, cause = self._compare_items(item, actual[key], (*path, key))
            if not equal:
                return Divergence(
                    kind=DivergenceKind.KEY_VALUE_MISMATCH,
                    message=(
                        f"Actual item with key '{key}' differs from expected "
                        "item with same key."
                        f"\nExpected: {self._formatter.format(item)}"
                        f"\nActual: {self._formatter.format(actual[key])}"
                    ),
                    path=path,
                    key=key,
                    expected=item,
                    actual=actual[key],
                    cause=cause,
                )

        return None

    def _compare_indexed(
        self,
        expected: tuple[Any, ...],
        actual: tuple[Any, ...],
        path: Path,
    ) -> Divergence | None:
        outcome = greedy_match(
            expected,
            actual,
            lambda e, a: self._compare_items(e, a, path)[0],
        )
        if outcome.complete:
            return None

        missing = expected[outcome.unmatched]
        return Divergence(
            kind=DivergenceKind.MISSING_INDEXED_ITEM,
            message=f"Item missing from actual list: {self._formatter.format(missing)}",
            path=path,
            expected=missing,
        )

    # ------------------------------------------------------------------
    # Item comparison
    # ------------------------------------------------------------------

    def _compare_items(
        self, expected: Any, actual: Any, path: Path
    ) -> tuple[bool, Divergence | None]:
        """Compare two items, dispatching on the kind of *expected*.

        Returns:
            ``(equal, cause)`` where *cause* is the nested divergence when
            two containers differ, else None.
        """
        kind = classify(expected)

        if kind is ItemKind.CONTAINER:
            if classify(actual) is not ItemKind.CONTAINER:
                return False, None
            divergence = self._compare_lists(expected, actual, path)
            if divergence is not None:
                logger.trace("Nested lists differ with {}", divergence.kind)
            return divergence is None, divergence

        rule = self._rules.get(kind)
        if rule is None:
            raise UncomparableKindError(
                self._uncomparable_items(expected, actual, path)
            )
        return rule(expected, actual), None

    def _nulls_equal(self, expected: Any, actual: Any) -> bool:
        return actual is None

    def _scalars_equal(self, expected: Any, actual: Any) -> bool:
        if classify(actual) is not ItemKind.SCALAR:
            return False
        if self._config.strict:
            return strict_equal(expected, actual, self._config.nan_equal)
        return loose_equal(expected, actual, self._config.nan_equal)

    def _entities_equal(self, expected: Any, actual: Any) -> bool:
        return isinstance(actual, IdentityComparable) and bool(
            expected.same_identity(actual)
        )

    def _resources_equal(self, expected: Any, actual: Any) -> bool:
        # Contents of resources are never compared
        return classify(actual) is ItemKind.RESOURCE

    def _callables_equal(self, expected: Any, actual: Any) -> bool:
        # Behaviour of callables is never compared
        return callable(actual)

    def _objects_equal(self, expected: Any, actual: Any) -> bool:
        if type(expected) is not type(actual):
            return False
        return not self._config.strict or expected is actual

    # ------------------------------------------------------------------
    # Uncomparable input
    # ------------------------------------------------------------------

    def _view(self, value: Any, side: str, path: Path) -> list[tuple[Hashable, Any]]:
        """Return the (key, item) pairs of one side, or raise UncomparableKindError."""
        try:
            return container_items(value)
        except TypeError as exc:
            reason = (
                f"{exc}."
                if classify(value) is ItemKind.CONTAINER
                else f"Variable of type {describe(value)} given."
            )
            raise UncomparableKindError(
                Divergence(
                    kind=DivergenceKind.UNCOMPARABLE_KIND,
                    message=f"{side} value must be a list of items. {reason}",
                    path=path,
                    expected=value if side == "Expected" else None,
                    actual=value if side == "Actual" else None,
                )
            ) from exc

    def _uncomparable_items(
        self, expected: Any, actual: Any, path: Path
    ) -> Divergence:
        name = self._formatter.name
        return Divergence(
            kind=DivergenceKind.UNCOMPARABLE_KIND,
            message=(
                "Could not compare the two items:\n\n"
                f"Expected ({name}, {describe(expected)}):\n"
                f"{self._formatter.format(expected)}\n"
                f"Actual ({name}, {describe(actual)}):\n"
                f"{self._formatter.format(actual)}\n"
                f"Strict mode: {'ON' if self._config.strict else 'OFF'}\n"
            ),
            path=path,
            expected=expected,
            actual=actual,
        )
