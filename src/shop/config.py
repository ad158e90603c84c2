"""Конфигурация демонстрации магазина.

Состав букета, диапазон фильтра по длине стебля, индексы для get/remove
и уровень логирования.
"""

from dataclasses import dataclass, field
from typing import Tuple

from src.core.domain.accessory import AccessoryKind
from src.core.domain.flower import FlowerSpecies
from src.utils.logger import env_log_level

# (species, price, freshness, stem_length)
FlowerSpec = Tuple[FlowerSpecies, float, int, float]
# (kind, price)
AccessorySpec = Tuple[AccessoryKind, float]


DEFAULT_FLOWERS: Tuple[FlowerSpec, ...] = (
    (FlowerSpecies.ROSE, 10.5, 2, 50.0),
    (FlowerSpecies.TULIP, 7.0, 5, 30.0),
    (FlowerSpecies.LILY, 12.0, 3, 40.0),
)

DEFAULT_ACCESSORIES: Tuple[AccessorySpec, ...] = (
    (AccessoryKind.RIBBON, 2.0),
    (AccessoryKind.WRAPPER, 3.0),
    (AccessoryKind.CARD, 1.5),
)


@dataclass(frozen=True)
class ShowcaseConfig:
    """Конфигурация демонстрационного прогона.

    Значения по умолчанию воспроизводят стандартный сценарий:
    Rose/Tulip/Lily + Ribbon/Wrapper/Card, фильтр 35..55 см.
    """
    flowers: Tuple[FlowerSpec, ...] = DEFAULT_FLOWERS
    accessories: Tuple[AccessorySpec, ...] = DEFAULT_ACCESSORIES

    # Диапазон длины стебля (см), включительно
    min_stem_length: float = 35.0
    max_stem_length: float = 55.0

    # Индексы для демонстрации get/remove
    get_index: int = 1
    remove_index: int = 0

    log_level: str = field(default_factory=env_log_level)
