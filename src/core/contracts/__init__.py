"""
Contract Validation Module

Модуль для валидации JSON контрактов доменных моделей магазина.
"""

from .validators import (
    SCHEMA_DIR,
    Contract,
    contract_errors,
    contract_validator,
    load_schema,
    validate_contract,
)

__all__ = [
    "SCHEMA_DIR",
    "Contract",
    "contract_errors",
    "contract_validator",
    "load_schema",
    "validate_contract",
]
