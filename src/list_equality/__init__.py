"""List equality - order-tolerant structural equality for nested containers."""

from __future__ import annotations

from loguru import logger

from list_equality.algorithm.config import ComparisonConfig
from list_equality.api import (
    assert_arrays_equal,
    assert_lists_equal,
    lists_are_same,
    lists_equal,
)
from list_equality.comparator import ListComparator
from list_equality.entity import KeyedEntity
from list_equality.errors import ListComparisonError, UncomparableKindError
from list_equality.protocols import (
    ContainerConvertible,
    ContainerView,
    IdentityComparable,
    ValueFormatter,
)
from list_equality.result import ComparisonResult, Divergence, DivergenceKind

# Library code stays silent unless the application opts in with
# logger.enable("list_equality").
logger.disable("list_equality")

__version__: str = "0.1.0"
__all__: list[str] = [
    "ComparisonConfig",
    "ComparisonResult",
    "ContainerConvertible",
    "ContainerView",
    "Divergence",
    "DivergenceKind",
    "IdentityComparable",
    "KeyedEntity",
    "ListComparator",
    "ListComparisonError",
    "UncomparableKindError",
    "ValueFormatter",
    "assert_arrays_equal",
    "assert_lists_equal",
    "lists_are_same",
    "lists_equal",
]
