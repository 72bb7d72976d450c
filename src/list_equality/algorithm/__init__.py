"""algorithm subpackage: building blocks of the list comparator.

Provides the comparison configuration, item-kind detection, scalar
equality rules and greedy multiset matching.  Import from this module (not
from sub-modules directly) to stay on the stable public interface.

Example::

    from list_equality.algorithm import ItemKind, classify, greedy_match

    classify([1, 2])        # ItemKind.CONTAINER
    outcome = greedy_match([1, 2], [2, 1], lambda a, b: a == b)
    outcome.complete        # True
"""

from __future__ import annotations

from list_equality.algorithm.config import ComparisonConfig
from list_equality.algorithm.kinds import ItemKind, classify, describe
from list_equality.algorithm.matcher import MatchOutcome, greedy_match
from list_equality.algorithm.scalars import loose_equal, strict_equal

__all__ = [
    "ComparisonConfig",
    "ItemKind",
    "MatchOutcome",
    "classify",
    "describe",
    "greedy_match",
    "loose_equal",
    "strict_equal",
]
