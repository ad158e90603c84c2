"""
JSON Schema контракты доменных моделей

Схемы поставляются с пакетом (src/core/contracts/schema/<contract>.json)
и проверяются по Draft 2020-12. Каждая схема загружается один раз,
проходит meta-валидацию и кэшируется вместе с собранным валидатором.

Контракты:
- flower — Flower.model_dump(mode="json")
- accessory — Accessory.model_dump(mode="json")
- bouquet — Bouquet.snapshot()
"""

import json
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

from jsonschema import Draft202012Validator, SchemaError

SCHEMA_DIR = Path(__file__).parent / "schema"


class Contract(str, Enum):
    """Имя контракта = имя файла схемы без расширения"""

    FLOWER = "flower"
    ACCESSORY = "accessory"
    BOUQUET = "bouquet"


def load_schema(path: Path) -> Dict[str, Any]:
    """
    Чтение и meta-валидация файла схемы.

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    with open(path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e
    return schema


@lru_cache(maxsize=None)
def contract_validator(contract: Contract) -> Draft202012Validator:
    """Валидатор контракта (собирается один раз на процесс)."""
    return Draft202012Validator(load_schema(SCHEMA_DIR / f"{Contract(contract).value}.json"))


def validate_contract(contract: Contract, data: Dict[str, Any]) -> None:
    """
    Проверка данных против контракта.

    Raises:
        jsonschema.ValidationError: Первое найденное нарушение
    """
    contract_validator(contract).validate(data)


def contract_errors(contract: Contract, data: Dict[str, Any]) -> List[str]:
    """
    Все нарушения контракта в виде "<path>: <message>".

    Путь "$" означает корень документа. Пустой список — данные валидны.
    """
    errors = sorted(contract_validator(contract).iter_errors(data), key=lambda e: e.json_path)
    return [f"{e.json_path}: {e.message}" for e in errors]
