"""Divergence records and the ComparisonResult returned by compare() calls.

A comparison either succeeds or stops at the first divergence it finds, so
``ComparisonResult.divergences`` holds at most one record.  Divergences of
nested containers are chained through ``Divergence.cause``.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

__all__ = ["ComparisonResult", "Divergence", "DivergenceKind", "format_path"]

_FAILURE_HEADER = "Failed asserting that two lists are the same. Issues:"


class DivergenceKind(StrEnum):
    """The ways two containers can fail to match.

    - COUNT_MISMATCH:       The containers hold a different number of items.
    - MISSING_KEY:          An associative key of *expected* is absent from *actual*.
    - KEY_VALUE_MISMATCH:   Both sides hold the key but the items differ.
    - MISSING_INDEXED_ITEM: No unmatched indexed item of *actual* equals an
                            indexed item of *expected*.
    - UNCOMPARABLE_KIND:    A side is not a container, or an item kind has no
                            comparison rule.
    """

    COUNT_MISMATCH = "count-mismatch"
    MISSING_KEY = "missing-key"
    KEY_VALUE_MISMATCH = "key-value-mismatch"
    MISSING_INDEXED_ITEM = "missing-indexed-item"
    UNCOMPARABLE_KIND = "uncomparable-kind"


def format_path(path: tuple[Hashable, ...]) -> str:
    """Render a key path as subscripts, e.g. ``("user", 0)`` -> ``['user'][0]``."""
    return "".join(f"[{key!r}]" for key in path)


@dataclass(frozen=True, slots=True)
class Divergence:
    """One specific way two containers failed to match.

    Attributes:
        kind:     Which rule was violated (see DivergenceKind).
        message:  Human-readable description of the divergence.
        path:     Keys leading from the root container to the container in
                  which the divergence was found.  Empty for the root.
        key:      The associative key involved, if any.
        expected: The expected value involved (count, item or container).
        actual:   The actual value involved, if any.
        cause:    The nested divergence explaining a key-value mismatch between
                  two containers; None otherwise.
    """

    kind: DivergenceKind
    message: str
    path: tuple[Hashable, ...] = ()
    key: Hashable | None = None
    expected: Any = field(default=None, compare=False)
    actual: Any = field(default=None, compare=False)
    cause: Divergence | None = None

    def describe(self) -> str:
        """Return the message prefixed with its location, followed by its causes."""
        text = self.message
        if self.path:
            text = f"At {format_path(self.path)}: {text}"
        if self.cause is not None:
            nested = self.cause.describe().replace("\n", "\n    ")
            text = f"{text}\n  Caused by: {nested}"
        return text


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Outcome of a ListComparator.compare() call.

    Attributes:
        equal:               True when the two containers hold the same data.
        divergences:         The divergence that ended the comparison; empty when
                             ``equal`` is True.
        strict:              Whether the comparison ran in strict mode.
        computation_time_ms: Wall-clock duration of the comparison in milliseconds.
    """

    equal: bool
    divergences: tuple[Divergence, ...] = ()
    strict: bool = False
    computation_time_ms: float = field(default=0.0, compare=False)

    def __bool__(self) -> bool:
        return self.equal

    @property
    def divergence(self) -> Divergence | None:
        """The first divergence, or None for an equal result."""
        return self.divergences[0] if self.divergences else None

    @property
    def uncomparable(self) -> bool:
        """True when the comparison could not be carried out at all."""
        return any(
            d.kind is DivergenceKind.UNCOMPARABLE_KIND for d in self.divergences
        )

    @property
    def issues(self) -> list[str]:
        return [d.describe() for d in self.divergences]

    def render(self) -> str:
        """Return the failure text presented by the assertion layer."""
        return "\n".join([_FAILURE_HEADER, *self.issues])
