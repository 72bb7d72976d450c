"""Containers subpackage: viewing values as (key, item) pairs.

Re-exports the public API for the containers module:
- container_items: ordered (key, item) pairs of any container
- partition: split pairs into indexed items and associative items
- Partition: the (indexed, associative) result of partition()
- is_container / is_indexed_key: predicates used by the comparator
"""

from list_equality.containers.view import (
    Partition,
    container_items,
    is_container,
    is_indexed_key,
    partition,
)

__all__ = [
    "Partition",
    "container_items",
    "is_container",
    "is_indexed_key",
    "partition",
]
