"""Shop — консольная демонстрация магазина цветов.
"""

from .config import DEFAULT_ACCESSORIES, DEFAULT_FLOWERS, ShowcaseConfig
from .demo import build_bouquet, describe_validation_error, main, run_showcase

__all__ = [
    "DEFAULT_ACCESSORIES",
    "DEFAULT_FLOWERS",
    "ShowcaseConfig",
    "build_bouquet",
    "describe_validation_error",
    "main",
    "run_showcase",
]
