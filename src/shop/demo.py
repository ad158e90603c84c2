"""Демонстрация работы магазина цветов.

Фиксированный сценарий без аргументов:
1. Сборка букета (цветы + аксессуары)
2. Вывод до и после сортировки по freshness
3. Фильтр по длине стебля
4. Полная стоимость
5. get/remove по индексу

Ошибка валидации печатается в stderr, прогон завершается нормально.
Ошибка индекса не перехватывается.
"""

import sys
from typing import Optional, TextIO

from pydantic import ValidationError

from src.core.collections.ordered_collection import OrderedCollection
from src.core.domain.accessory import Accessory
from src.core.domain.bouquet import Bouquet
from src.core.domain.flower import Flower
from src.shop.config import ShowcaseConfig
from src.utils.logger import LogContext, configure_logging, get_logger

logger = get_logger(__name__)


def describe_validation_error(exc: ValidationError) -> str:
    """Однострочное описание ошибки валидации pydantic.

    Example:
        "Invalid Flower parameters: price: Input should be greater than 0"
    """
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    return f"Invalid {exc.title} parameters: {problems}"


def build_bouquet(config: ShowcaseConfig) -> Bouquet:
    """Сборка букета из конфигурации.

    Raises:
        ValidationError: если параметры цветка или аксессуара невалидны
    """
    flowers: OrderedCollection[Flower] = OrderedCollection()
    for species, price, freshness, stem_length in config.flowers:
        flowers.add(
            Flower(species=species, price=price, freshness=freshness, stem_length=stem_length)
        )

    accessories = [Accessory(kind=kind, price=price) for kind, price in config.accessories]
    return Bouquet(flowers, accessories)


def run_showcase(config: ShowcaseConfig, out: TextIO) -> Bouquet:
    """Прогон демонстрационного сценария с выводом в out.

    Returns:
        Букет в финальном состоянии (после remove)
    """
    with LogContext(logger, "Assembling bouquet"):
        bouquet = build_bouquet(config)
    flowers = bouquet.flowers

    print("Bouquet before sorting by freshness:", file=out)
    print(bouquet, file=out)

    with LogContext(logger, "Sorting bouquet by freshness"):
        bouquet.sort_by_freshness()
    print("Bouquet after sorting by freshness:", file=out)
    print(bouquet, file=out)

    min_length = float(config.min_stem_length)
    max_length = float(config.max_stem_length)
    found = bouquet.find_by_range(min_length, max_length)
    logger.info(f"Stem length filter {min_length}-{max_length}: {found.size()} match(es)")
    if found.size() > 0:
        print(f"Flowers found within stem length range ({min_length} - {max_length} cm):", file=out)
        print(found, file=out)
    else:
        print(f"No flowers found within stem length range ({min_length} - {max_length} cm).", file=out)

    total_cost = bouquet.calculate_total_cost()
    print(f"Total cost of the bouquet: ${total_cost}", file=out)

    print(f"\nTest: Getting the flower at index {config.get_index}:", file=out)
    flower = flowers.get(config.get_index)
    print(f"Flower at index {config.get_index}: {flower}", file=out)

    print(f"\nTest: Removing the flower at index {config.remove_index} (first flower in list):", file=out)
    removed = flowers.remove(config.remove_index)
    print(f"Removed flower: {removed}", file=out)

    print(f"\nTest: Getting the flower at index {config.remove_index}:", file=out)
    flower = flowers.get(config.remove_index)
    print(f"Flower at index {config.remove_index}: {flower}", file=out)

    print("\nBouquet after removing the first flower:", file=out)
    print(bouquet, file=out)

    snapshot = bouquet.snapshot()
    logger.info(
        f"Final bouquet: {len(snapshot['flowers'])} flower(s), "
        f"{len(snapshot['accessories'])} accessory(ies), total ${snapshot['total_cost']}"
    )

    return bouquet


def main(config: Optional[ShowcaseConfig] = None) -> int:
    """Точка входа консольной демонстрации.

    Returns:
        Код завершения (0 — в том числе после ошибки валидации)
    """
    config = config or ShowcaseConfig()
    configure_logging(config.log_level)

    try:
        run_showcase(config, sys.stdout)
    except ValidationError as exc:
        logger.warning(f"Showcase aborted: {exc.title} validation failed")
        print(f"Error: {describe_validation_error(exc)}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
