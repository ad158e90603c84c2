"""
Utilities shared across the package.
"""

from src.utils.logger import (
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV,
    LogContext,
    configure_logging,
    env_log_level,
    get_logger,
    resolve_level,
)

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "LOG_LEVEL_ENV",
    "LogContext",
    "configure_logging",
    "env_log_level",
    "get_logger",
    "resolve_level",
]
