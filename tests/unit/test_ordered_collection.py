"""Тесты для OrderedCollection.

Coverage:
- add / get / size в порядке вставки
- remove: head, tail, interior, единственный элемент
- Ошибки индекса без изменения состояния
- sort_by_freshness: порядок, стабильность, идемпотентность
- find_by_range: включительные границы, порядок, неизменность источника
- Итерация и связность списка
"""

import pytest

from src.core.collections import OrderedCollection
from src.core.domain import Flower


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def rose():
    return Flower.rose(10.5, 2, 50)


@pytest.fixture
def tulip():
    return Flower.tulip(7.0, 5, 30)


@pytest.fixture
def lily():
    return Flower.lily(12.0, 3, 40)


@pytest.fixture
def flowers(rose, tulip, lily):
    """Rose, Tulip, Lily в порядке вставки."""
    return OrderedCollection.from_iterable([rose, tulip, lily])


# =============================================================================
# ADD / GET / SIZE
# =============================================================================


class TestAddAndGet:
    """Вставка и доступ по индексу."""

    def test_empty_collection(self):
        collection = OrderedCollection()

        assert collection.size() == 0
        assert len(collection) == 0
        assert not collection
        assert list(collection) == []
        assert str(collection) == ""
        collection.check_invariants()

    def test_add_preserves_insertion_order(self):
        collection = OrderedCollection()
        for value in range(10):
            collection.add(value)

        assert collection.size() == 10
        assert [collection.get(i) for i in range(10)] == list(range(10))
        collection.check_invariants()

    def test_duplicates_permitted(self):
        collection = OrderedCollection.from_iterable(["a", "a", "b"])

        assert collection.size() == 3
        assert list(collection) == ["a", "a", "b"]

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_get_out_of_range(self, flowers, index):
        with pytest.raises(IndexError, match="Index out of bounds"):
            flowers.get(index)
        assert flowers.size() == 3

    def test_get_on_empty(self):
        with pytest.raises(IndexError):
            OrderedCollection().get(0)


# =============================================================================
# REMOVE
# =============================================================================


class TestRemove:
    """Удаление по индексу."""

    def test_remove_head(self, flowers, rose, tulip, lily):
        removed = flowers.remove(0)

        assert removed == rose
        assert list(flowers) == [tulip, lily]
        assert flowers.size() == 2
        flowers.check_invariants()

    def test_remove_tail(self, flowers, rose, tulip, lily):
        removed = flowers.remove(2)

        assert removed == lily
        assert list(flowers) == [rose, tulip]
        flowers.check_invariants()

    def test_remove_interior(self, flowers, rose, tulip, lily):
        removed = flowers.remove(1)

        assert removed == tulip
        assert flowers.get(0) == rose
        assert flowers.get(1) == lily
        flowers.check_invariants()

    def test_remove_only_element(self):
        collection = OrderedCollection.from_iterable(["only"])

        assert collection.remove(0) == "only"
        assert collection.size() == 0
        collection.check_invariants()

        # После опустошения коллекция снова принимает значения
        collection.add("again")
        assert list(collection) == ["again"]
        collection.check_invariants()

    def test_remove_shifts_indices(self):
        collection = OrderedCollection.from_iterable(range(6))

        collection.remove(2)

        assert collection.size() == 5
        assert [collection.get(i) for i in range(5)] == [0, 1, 3, 4, 5]

    def test_remove_all_from_head(self):
        collection = OrderedCollection.from_iterable(range(4))

        drained = [collection.remove(0) for _ in range(4)]

        assert drained == [0, 1, 2, 3]
        assert collection.size() == 0
        collection.check_invariants()

    @pytest.mark.parametrize("index", [-1, 3])
    def test_remove_out_of_range_leaves_state(self, flowers, rose, tulip, lily, index):
        with pytest.raises(IndexError, match="Index out of bounds"):
            flowers.remove(index)

        assert flowers.size() == 3
        assert list(flowers) == [rose, tulip, lily]
        flowers.check_invariants()


# =============================================================================
# SORT BY FRESHNESS
# =============================================================================


class TestSortByFreshness:
    """Сортировка по freshness."""

    def test_sort_ascending(self, flowers, rose, tulip, lily):
        flowers.sort_by_freshness()

        assert list(flowers) == [rose, lily, tulip]
        assert [f.freshness for f in flowers] == [2, 3, 5]
        flowers.check_invariants()

    def test_sort_idempotent(self, flowers):
        flowers.sort_by_freshness()
        first = list(flowers)

        flowers.sort_by_freshness()

        assert list(flowers) == first

    def test_sort_stable_for_ties(self):
        a = Flower.rose(1.0, 4, 10)
        b = Flower.tulip(2.0, 1, 10)
        c = Flower.lily(3.0, 4, 10)
        d = Flower.rose(4.0, 4, 20)
        collection = OrderedCollection.from_iterable([a, b, c, d])

        collection.sort_by_freshness()

        assert list(collection) == [b, a, c, d]

    def test_sort_non_decreasing_on_larger_input(self):
        freshness_values = [7, 1, 10, 3, 3, 9, 2, 8, 1, 5]
        collection = OrderedCollection.from_iterable(
            Flower.rose(1.0, value, 10) for value in freshness_values
        )

        collection.sort_by_freshness()

        result = [f.freshness for f in collection]
        assert result == sorted(freshness_values)
        assert collection.size() == len(freshness_values)
        collection.check_invariants()

    def test_sort_noop_for_small(self, rose):
        empty = OrderedCollection()
        empty.sort_by_freshness()
        assert empty.size() == 0

        single = OrderedCollection.from_iterable([rose])
        single.sort_by_freshness()
        assert list(single) == [rose]

    def test_sort_custom_key(self):
        collection = OrderedCollection.from_iterable([3, 1, 2])

        collection.sort_by_freshness(key=lambda value: value)

        assert list(collection) == [1, 2, 3]


# =============================================================================
# FIND BY RANGE
# =============================================================================


class TestFindByRange:
    """Фильтр по длине стебля."""

    def test_find_returns_subsequence_in_order(self, flowers, rose, lily):
        found = flowers.find_by_range(35, 55)

        assert list(found) == [rose, lily]
        assert found is not flowers
        found.check_invariants()

    def test_find_bounds_inclusive(self, flowers, rose, tulip, lily):
        assert list(flowers.find_by_range(30, 50)) == [rose, tulip, lily]
        assert list(flowers.find_by_range(40, 40)) == [lily]

    def test_find_does_not_mutate_source(self, flowers, rose, tulip, lily):
        flowers.find_by_range(35, 55)

        assert flowers.size() == 3
        assert list(flowers) == [rose, tulip, lily]

    def test_find_no_match(self, flowers):
        found = flowers.find_by_range(100, 200)

        assert found.size() == 0
        assert not found

    def test_find_inverted_range_is_empty(self, flowers):
        assert flowers.find_by_range(55, 35).size() == 0

    def test_find_result_independent_of_source(self, flowers, rose):
        found = flowers.find_by_range(35, 55)

        found.remove(0)

        assert flowers.get(0) == rose
        assert flowers.size() == 3

    def test_find_custom_key(self, flowers, tulip):
        found = flowers.find_by_range(0, 8, key=lambda f: f.price)

        assert list(found) == [tulip]


# =============================================================================
# ITERATION / RENDERING
# =============================================================================


class TestIteration:
    """Итерация и текстовое представление."""

    def test_iteration_restartable(self, flowers):
        assert list(flowers) == list(flowers)

    def test_iteration_is_lazy(self, flowers, rose, tulip):
        iterator = iter(flowers)

        assert next(iterator) == rose
        assert next(iterator) == tulip

    def test_iterator_exhaustion(self):
        iterator = iter(OrderedCollection.from_iterable([1]))

        assert next(iterator) == 1
        with pytest.raises(StopIteration):
            next(iterator)

    def test_str_one_value_per_line(self):
        collection = OrderedCollection.from_iterable(["a", "b"])

        assert str(collection) == "a\nb\n"
