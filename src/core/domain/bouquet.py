"""
Bouquet — Агрегат букета

Композиция OrderedCollection[Flower] и фиксированного набора Accessory.
Стоимость не кэшируется и пересчитывается при каждом вызове.
Сортировка и фильтрация делегируются коллекции цветов.
"""

from typing import Any, Dict, Iterable, Tuple

from src.core.collections.ordered_collection import OrderedCollection
from src.core.contracts.validators import Contract, validate_contract
from src.core.domain.accessory import Accessory
from src.core.domain.flower import Flower


class Bouquet:
    """
    Букет: коллекция цветов + кортеж аксессуаров.

    Коллекция цветов принадлежит букету; изменения через get/remove
    исходной коллекции видны в букете.
    """

    def __init__(
        self,
        flowers: OrderedCollection[Flower],
        accessories: Iterable[Accessory] = (),
    ):
        """
        Args:
            flowers: готовая коллекция цветов
            accessories: аксессуары (фиксируются в кортеж)
        """
        self._flowers = flowers
        self._accessories: Tuple[Accessory, ...] = tuple(accessories)

    @property
    def flowers(self) -> OrderedCollection[Flower]:
        return self._flowers

    @property
    def accessories(self) -> Tuple[Accessory, ...]:
        return self._accessories

    def calculate_total_cost(self) -> float:
        """
        Полная стоимость букета.

        Returns:
            Сумма цен всех цветов и всех аксессуаров на момент вызова
        """
        total_cost = 0.0
        for flower in self._flowers:
            total_cost += flower.price
        for accessory in self._accessories:
            total_cost += accessory.price
        return total_cost

    def sort_by_freshness(self) -> None:
        """Сортировка цветов по freshness (делегируется коллекции)."""
        self._flowers.sort_by_freshness()

    def find_by_range(self, min_length: float, max_length: float) -> OrderedCollection[Flower]:
        """
        Цветы с длиной стебля в [min_length, max_length].

        Returns:
            Новая коллекция, исходная не меняется
        """
        return self._flowers.find_by_range(min_length, max_length)

    def snapshot(self) -> Dict[str, Any]:
        """
        Снапшот букета в виде dict, проверенный по контракту bouquet.json.

        Returns:
            {"flowers": [...], "accessories": [...], "total_cost": float}

        Raises:
            jsonschema.ValidationError: Если снапшот нарушает контракт
        """
        snapshot = {
            "flowers": [flower.model_dump(mode="json") for flower in self._flowers],
            "accessories": [accessory.model_dump(mode="json") for accessory in self._accessories],
            "total_cost": self.calculate_total_cost(),
        }
        validate_contract(Contract.BOUQUET, snapshot)
        return snapshot

    def __str__(self) -> str:
        lines = ["Flowers:\n", str(self._flowers), "Accessories:\n"]
        lines.extend(f"{accessory}\n" for accessory in self._accessories)
        return "".join(lines)

    def __repr__(self) -> str:
        return f"Bouquet(flowers={len(self._flowers)}, accessories={len(self._accessories)})"
