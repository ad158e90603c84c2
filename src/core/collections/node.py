"""
Node — ячейка двусвязного списка

Хранит значение и ссылки на соседей внутри одной OrderedCollection.
Вне коллекции не используется.
"""

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """Ячейка двусвязного списка: value + previous/next."""

    __slots__ = ("value", "previous", "next")

    def __init__(self, value: T):
        self.value: T = value
        self.previous: Optional["Node[T]"] = None
        self.next: Optional["Node[T]"] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"
