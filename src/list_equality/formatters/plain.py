"""ReprFormatter: length-limited repr() previews for failure messages.

The default formatter of ListComparator.  It never raises: a value whose
``__repr__`` fails is rendered with ``object.__repr__`` instead.
"""

from __future__ import annotations

from typing import Any

_ELLIPSIS = "..."


class ReprFormatter:
    """Render values with ``repr()``, truncated to ``max_length`` characters.

    Satisfies the ValueFormatter protocol structurally.

    Example::

        ReprFormatter(max_length=20).format(list(range(100)))
        # '[0, 1, 2, 3, 4, 5...'
    """

    name = "repr"

    def __init__(self, max_length: int = 1000) -> None:
        if max_length <= len(_ELLIPSIS):
            msg = f"max_length must be > {len(_ELLIPSIS)}, got {max_length}"
            raise ValueError(msg)
        self.max_length = max_length

    def format(self, value: Any) -> str:
        try:
            text = repr(value)
        except Exception:
            text = object.__repr__(value)
        if len(text) > self.max_length:
            text = text[: self.max_length - len(_ELLIPSIS)] + _ELLIPSIS
        return text
