"""ComparisonConfig for the list comparator.

ComparisonConfig is a frozen (immutable) dataclass holding the parameters
that decide which equivalence relation the comparator applies.
"""

from __future__ import annotations

from dataclasses import dataclass

_MIN_PREVIEW_LENGTH = 16


@dataclass(frozen=True, slots=True)
class ComparisonConfig:
    """Immutable configuration for ListComparator.

    Attributes:
        strict: When True, scalars must match in type and value ("0" != 0,
            True != 1) and plain objects must be the very same instance.
            When False, scalars compare loosely (numeric strings, numbers and
            booleans coerce) and plain objects only need the same type.
            Default False.
        nan_equal: When True, two NaN scalars are considered equal so that a
            container always equals a copy of itself.  Default True.
        max_preview_length: Maximum length of a value preview rendered by the
            default formatter in failure messages (>= 16).  Default 1000.
    """

    strict: bool = False
    nan_equal: bool = True
    max_preview_length: int = 1000

    def __post_init__(self) -> None:
        if self.max_preview_length < _MIN_PREVIEW_LENGTH:
            msg = (
                f"max_preview_length must be >= {_MIN_PREVIEW_LENGTH}, "
                f"got {self.max_preview_length}"
            )
            raise ValueError(msg)
