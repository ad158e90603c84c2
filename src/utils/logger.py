"""
Centralized Logging Configuration
==================================
Единая настройка логирования для всех модулей пакета.

- Стандартный logging, один stream handler на корневом логгере пакета
- Логи пишутся в stderr, stdout остаётся за консольным выводом демонстрации
- Уровень задаётся явно или через переменную окружения FLOWER_SHOP_LOG_LEVEL
- Импорт модулей ничего не настраивает: handler ставит только configure_logging()

Usage:
    from src.utils.logger import get_logger
    logger = get_logger(__name__)
    logger.debug("Node appended")
"""

import logging
import os
import sys
from datetime import datetime
from typing import Final, Optional, Union


# =============================================================================
# CONSTANTS
# =============================================================================

# Все логгеры модулей пакета — потомки этого логгера
PACKAGE_LOGGER_NAME: Final[str] = "src"

LOG_LEVEL_ENV: Final[str] = "FLOWER_SHOP_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Имя handler, который ставит configure_logging (чужие handler не трогаем)
CONSOLE_HANDLER_NAME: Final[str] = "flower-shop-console"


# =============================================================================
# CONFIGURATION
# =============================================================================


def resolve_level(level: Union[int, str]) -> int:
    """
    Преобразование уровня логирования в числовое значение.

    Args:
        level: int или имя уровня ('DEBUG', 'info', ...)

    Returns:
        Числовой уровень logging

    Raises:
        ValueError: Если имя уровня неизвестно
    """
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def env_log_level() -> str:
    """
    Уровень из FLOWER_SHOP_LOG_LEVEL.

    Неизвестное или пустое значение заменяется на DEFAULT_LOG_LEVEL.
    """
    level = os.environ.get(LOG_LEVEL_ENV, "").strip()
    try:
        resolve_level(level)
    except ValueError:
        return DEFAULT_LOG_LEVEL
    return level.upper()


class StderrHandler(logging.StreamHandler):
    """StreamHandler, который пишет в текущий sys.stderr (а не в захваченный при создании)."""

    def __init__(self):
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Настройка корневого логгера пакета.

    Повторный вызов не добавляет handler заново, только меняет уровень.

    Args:
        level: Уровень логирования (None — из окружения, см. env_log_level)

    Returns:
        Корневой логгер пакета

    Raises:
        ValueError: Если явно переданный уровень неизвестен
    """
    numeric_level = resolve_level(env_log_level() if level is None else level)
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(numeric_level)

    # Avoid adding duplicate handlers
    if not any(h.get_name() == CONSOLE_HANDLER_NAME for h in package_logger.handlers):
        console_handler = StderrHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        package_logger.addHandler(console_handler)

        # Prevent propagation to root logger
        package_logger.propagate = False

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Логгер модуля. Handler не настраивает, безопасен при импорте.

    Args:
        name: Имя логгера (обычно __name__ вызывающего модуля)

    Returns:
        Логгер, наследующий handler и уровень корневого логгера пакета

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Bouquet assembled")
        2026-10-19 10:30:00 | INFO     | src.shop.demo | Bouquet assembled
    """
    return logging.getLogger(name)


# =============================================================================
# LOG CONTEXT
# =============================================================================


class LogContext:
    """
    Context manager для логирования начала и конца операции.

    Usage:
        with LogContext(logger, "Sorting bouquet"):
            bouquet.sort_by_freshness()
    """

    def __init__(self, logger: logging.Logger, operation: str):
        self.logger = logger
        self.operation = operation
        self.start_time: Optional[datetime] = None

    def __enter__(self) -> "LogContext":
        self.start_time = datetime.now()
        self.logger.info(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        elapsed = (datetime.now() - self.start_time).total_seconds()

        if exc_type is None:
            self.logger.info(f"Completed: {self.operation} ({elapsed:.3f}s)")
        else:
            self.logger.error(f"Failed: {self.operation} ({elapsed:.3f}s) - {exc_val}")

        # Don't suppress exceptions
        return False
