"""Integrations subpackage for list-equality.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_lists_equal`` and ``assert_arrays_equal`` fixtures
"""

from __future__ import annotations

__all__: list[str] = []
