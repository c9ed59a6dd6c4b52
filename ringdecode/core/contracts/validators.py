"""
Контракт decode_result.json

Проверяет JSON-представление результата декодирования
(DecodeResult.model_dump(mode="json")): формат адресов, диапазон uint256,
hex-кодировку blob-ов и размер колец. Схема поставляется в пакете
(contracts/schema/) и проходит meta-validation при загрузке.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"
DECODE_RESULT_SCHEMA = "decode_result"


# =============================================================================
# SCHEMA
# =============================================================================


def load_schema(
    name: str = DECODE_RESULT_SCHEMA, schema_dir: Optional[Path] = None
) -> Dict[str, Any]:
    """
    Чтение и meta-validation схемы.

    Raises:
        FileNotFoundError: Файла схемы нет
        ValueError: Схема не является корректной Draft 2020-12
    """
    path = (schema_dir or SCHEMA_DIR) / f"{name}.json"
    if not path.exists():
        raise FileNotFoundError(f"Schema not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {path.name}: {e}") from e
    return schema


@lru_cache(maxsize=None)
def decode_result_validator() -> Draft202012Validator:
    """Валидатор контракта результата; схема читается один раз на процесс."""
    return Draft202012Validator(load_schema())


# =============================================================================
# VALIDATION
# =============================================================================


def validate_decode_result(data: Dict[str, Any]) -> None:
    """
    Валидация JSON-представления DecodeResult.

    Raises:
        ValidationError: Первое найденное нарушение контракта
    """
    decode_result_validator().validate(data)


def decode_result_errors(data: Dict[str, Any]) -> List[str]:
    """
    Все нарушения контракта в виде "<json path>: <message>".

    Пустой список означает, что данные соответствуют контракту.
    """
    errors = sorted(decode_result_validator().iter_errors(data), key=lambda e: e.json_path)
    return [f"{e.json_path}: {e.message}" for e in errors]
