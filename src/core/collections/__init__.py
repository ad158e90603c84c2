"""
Collections — упорядоченные контейнеры доменных значений.
"""

from src.core.collections.node import Node
from src.core.collections.ordered_collection import (
    OrderedCollection,
    freshness_key,
    stem_length_key,
)

__all__ = [
    "Node",
    "OrderedCollection",
    "freshness_key",
    "stem_length_key",
]
