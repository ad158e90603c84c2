"""
Accessory — Модель аксессуара букета

Immutable Pydantic модель. Тип аксессуара (Ribbon/Wrapper/Card) задаётся
тегом AccessoryKind. Цена может быть нулевой, но не отрицательной.
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class AccessoryKind(str, Enum):
    """Тип аксессуара (значение — отображаемое имя)"""

    RIBBON = "Ribbon"
    WRAPPER = "Wrapper"
    CARD = "Card"


# =============================================================================
# ACCESSORY MODEL
# =============================================================================


class Accessory(BaseModel):
    """Модель аксессуара. Immutable (frozen=True)."""

    kind: AccessoryKind = Field(..., description="Тип аксессуара")
    price: float = Field(..., ge=0, description="Цена (USD), неотрицательная")

    model_config = {"frozen": True}

    @property
    def name(self) -> str:
        return self.kind.value

    @classmethod
    def ribbon(cls, price: float) -> "Accessory":
        return cls(kind=AccessoryKind.RIBBON, price=price)

    @classmethod
    def wrapper(cls, price: float) -> "Accessory":
        return cls(kind=AccessoryKind.WRAPPER, price=price)

    @classmethod
    def card(cls, price: float) -> "Accessory":
        return cls(kind=AccessoryKind.CARD, price=price)

    def __str__(self) -> str:
        return f"{self.name} (Price: ${float(self.price)})"
