"""
Domain models and value objects.

Contains the flower shop entities: Flower, Accessory, Bouquet.
"""

from src.core.domain.accessory import Accessory, AccessoryKind
from src.core.domain.bouquet import Bouquet
from src.core.domain.flower import (
    FRESHNESS_MAX,
    FRESHNESS_MIN,
    Flower,
    FlowerSpecies,
)

__all__ = [
    # Flower model
    "Flower",
    "FlowerSpecies",
    "FRESHNESS_MIN",
    "FRESHNESS_MAX",
    # Accessory model
    "Accessory",
    "AccessoryKind",
    # Bouquet aggregate
    "Bouquet",
]
