"""
Flower — Модель цветка

Immutable Pydantic модель. Вид цветка (Rose/Tulip/Lily) задаётся тегом
FlowerSpecies, вся валидация общая для всех видов.

Ограничения:
- price > 0
- freshness в [1, 10] (1 = самый свежий)
- stem_length > 0 (см)
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# CONSTANTS
# =============================================================================

FRESHNESS_MIN: Final[int] = 1
FRESHNESS_MAX: Final[int] = 10


# =============================================================================
# ENUMS
# =============================================================================


class FlowerSpecies(str, Enum):
    """Вид цветка (значение — отображаемое имя)"""

    ROSE = "Rose"
    TULIP = "Tulip"
    LILY = "Lily"


# =============================================================================
# FLOWER MODEL
# =============================================================================


class Flower(BaseModel):
    """
    Модель цветка.

    Immutable модель (frozen=True). Невалидные параметры приводят к
    ValidationError до создания экземпляра.
    """

    species: FlowerSpecies = Field(..., description="Вид цветка")
    price: float = Field(..., gt=0, description="Цена (USD)")
    freshness: int = Field(
        ...,
        strict=True,
        ge=FRESHNESS_MIN,
        le=FRESHNESS_MAX,
        description="Свежесть от 1 (свежий) до 10 (несвежий), строго int (bool и str не принимаются)",
    )
    stem_length: float = Field(..., gt=0, description="Длина стебля (см)")

    model_config = {"frozen": True}  # Immutable

    @property
    def name(self) -> str:
        """Отображаемое имя вида"""
        return self.species.value

    @classmethod
    def rose(cls, price: float, freshness: int, stem_length: float) -> "Flower":
        return cls(species=FlowerSpecies.ROSE, price=price, freshness=freshness, stem_length=stem_length)

    @classmethod
    def tulip(cls, price: float, freshness: int, stem_length: float) -> "Flower":
        return cls(species=FlowerSpecies.TULIP, price=price, freshness=freshness, stem_length=stem_length)

    @classmethod
    def lily(cls, price: float, freshness: int, stem_length: float) -> "Flower":
        return cls(species=FlowerSpecies.LILY, price=price, freshness=freshness, stem_length=stem_length)

    def __str__(self) -> str:
        return (
            f"{self.name} (Freshness: {self.freshness}, "
            f"Stem Length: {float(self.stem_length)} cm, Price: ${float(self.price)})"
        )
