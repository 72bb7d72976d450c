"""Formatters subpackage for list-equality failure messages.

Formatters render values for diagnostics only; they never take part in
equality.  Both formatters satisfy the ``ValueFormatter`` Protocol
structurally:

- ReprFormatter: length-limited ``repr()`` (the comparator's default)
- JsonFormatter: indented JSON export
"""

from list_equality.formatters.json_export import JsonFormatter
from list_equality.formatters.plain import ReprFormatter

__all__ = ["JsonFormatter", "ReprFormatter"]
