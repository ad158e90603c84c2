"""
OrderedCollection — упорядоченная коллекция на двусвязном списке

Хранит head, tail и count. Допускает дубликаты, сохраняет порядок вставки.

Операции:
- add: O(1) вставка в хвост
- get / remove: O(n) доступ по индексу (обход от head)
- sort_by_freshness: стабильная сортировка по freshness (1 = самый свежий)
- find_by_range: фильтр по диапазону (по умолчанию stem_length), новая коллекция
- iteration: ленивый проход от head, перезапускаемый

ИНВАРИАНТЫ:
1. head is None <=> tail is None <=> count == 0
2. Проход по next от head достигает tail ровно за count шагов
3. Проход по previous от tail достигает head ровно за count шагов
4. node.previous.next is node (не head), node.next.previous is node (не tail)

Коллекция не потокобезопасна; изменение во время итерации не определено.
"""

from operator import attrgetter
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from src.core.collections.node import Node
from src.utils.logger import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


# =============================================================================
# DEFAULT KEYS
# =============================================================================

freshness_key: Callable[[Any], int] = attrgetter("freshness")
stem_length_key: Callable[[Any], float] = attrgetter("stem_length")


# =============================================================================
# ORDERED COLLECTION
# =============================================================================


class OrderedCollection(Generic[T]):
    """
    Двусвязная упорядоченная коллекция.

    Node-ячейки принадлежат только этой коллекции и наружу не выдаются.
    Все операции синхронные; при ошибке индекса состояние не меняется.
    """

    def __init__(self) -> None:
        self._head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._count: int = 0

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> "OrderedCollection[T]":
        """
        Построение коллекции последовательными add.

        Args:
            values: Значения в порядке вставки

        Returns:
            Новая коллекция
        """
        collection: OrderedCollection[T] = cls()
        for value in values:
            collection.add(value)
        return collection

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add(self, value: T) -> None:
        """Добавление значения в хвост, O(1)."""
        node = Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            node.previous = self._tail
            self._tail = node
        self._count += 1
        logger.debug(f"add: appended {value!r}, size={self._count}")

    def remove(self, index: int) -> T:
        """
        Удаление значения по индексу.

        Args:
            index: Индекс в [0, size)

        Returns:
            Удалённое значение

        Raises:
            IndexError: Если index вне [0, size)
        """
        node = self._node_at(index)

        if node is self._head and node is self._tail:
            self._head = self._tail = None
        elif node is self._head:
            self._head = node.next
            self._head.previous = None
        elif node is self._tail:
            self._tail = node.previous
            self._tail.next = None
        else:
            node.previous.next = node.next
            node.next.previous = node.previous

        node.previous = node.next = None
        self._count -= 1
        logger.debug(f"remove: index={index} value={node.value!r}, size={self._count}")
        return node.value

    def sort_by_freshness(self, key: Optional[Callable[[T], Any]] = None) -> None:
        """
        Сортировка по возрастанию freshness (1 = самый свежий первым).

        Сортировка стабильная. Значения переставляются по существующим
        ячейкам, ссылки между ячейками не меняются. Для size <= 1 — no-op.

        Args:
            key: Ключ сортировки (default: атрибут freshness)
        """
        if self._count <= 1:
            return

        ordered = sorted(self, key=key or freshness_key)
        node = self._head
        for value in ordered:
            node.value = value
            node = node.next
        logger.debug(f"sort_by_freshness: reordered {self._count} values")

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def get(self, index: int) -> T:
        """
        Значение по индексу (обход от head).

        Raises:
            IndexError: Если index вне [0, size)
        """
        return self._node_at(index).value

    def size(self) -> int:
        """Текущее количество элементов, O(1)."""
        return self._count

    def find_by_range(
        self,
        min_value: float,
        max_value: float,
        key: Optional[Callable[[T], float]] = None,
    ) -> "OrderedCollection[T]":
        """
        Фильтр по диапазону min_value <= key(value) <= max_value.

        Границы включительные. Относительный порядок сохраняется.
        Исходная коллекция не меняется. При min_value > max_value
        результат пустой.

        Args:
            min_value: Нижняя граница (включительно)
            max_value: Верхняя граница (включительно)
            key: Атрибут для сравнения (default: stem_length)

        Returns:
            Новая коллекция с подходящими значениями
        """
        key = key or stem_length_key
        result: OrderedCollection[T] = OrderedCollection()
        for value in self:
            if min_value <= key(value) <= max_value:
                result.add(value)
        return result

    def check_invariants(self) -> None:
        """
        Проверка связности списка в обоих направлениях.

        Raises:
            AssertionError: Если нарушен любой инвариант head/tail/count/links
        """
        if self._count == 0:
            assert self._head is None and self._tail is None, "empty list must have no endpoints"
            return

        assert self._head is not None and self._tail is not None, "non-empty list must have endpoints"
        assert self._head.previous is None, "head.previous must be None"
        assert self._tail.next is None, "tail.next must be None"

        steps = 1
        node = self._head
        while node is not self._tail:
            assert node.next is not None, "forward walk ended before tail"
            assert node.next.previous is node, "next.previous must point back"
            node = node.next
            steps += 1
            assert steps <= self._count, "forward walk longer than count"
        assert steps == self._count, f"forward walk {steps} != count {self._count}"

        steps = 1
        node = self._tail
        while node is not self._head:
            assert node.previous is not None, "backward walk ended before head"
            assert node.previous.next is node, "previous.next must point forward"
            node = node.previous
            steps += 1
            assert steps <= self._count, "backward walk longer than count"
        assert steps == self._count, f"backward walk {steps} != count {self._count}"

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------

    def _node_at(self, index: int) -> Node[T]:
        if index < 0 or index >= self._count:
            raise IndexError("Index out of bounds")

        node = self._head
        for _ in range(index):
            node = node.next
        return node

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __str__(self) -> str:
        return "".join(f"{value}\n" for value in self)

    def __repr__(self) -> str:
        return f"OrderedCollection({list(self)!r})"
