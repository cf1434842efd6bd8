"""
JSON Schema Contract Validators

Проверка сырых JSON записей с долями до разбора в pydantic модели.
Схема: contracts/schema/share_set.json (Draft 2020-12).

Нарушения контракта превращаются в ShareSetContractError с путём
до поля ("1/base", "keys" или "<root>").
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

# Корень проекта: src/core/contracts/validators.py → ../../..
SCHEMA_DIR = Path(__file__).resolve().parents[3] / "contracts" / "schema"


class ShareSetContractError(ValueError):
    """Входная запись не соответствует контракту share_set."""

    def __init__(self, error: ValidationError):
        self.error = error
        self.location = "/".join(str(part) for part in error.absolute_path) or "<root>"
        super().__init__(f"Invalid share set at {self.location}: {error.message}")


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Чтение схем из каталога с кэшем и meta-валидацией."""

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self._schema_dir = Path(schema_dir)
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени без расширения.

        Raises:
            FileNotFoundError: Если файла схемы нет
            jsonschema.SchemaError: Если схема сама по себе невалидна
        """
        if schema_name not in self._schemas:
            schema_path = self._schema_dir / f"{schema_name}.json"
            if not schema_path.exists():
                raise FileNotFoundError(f"Schema not found: {schema_path}")

            schema = json.loads(schema_path.read_text(encoding="utf-8"))
            Draft202012Validator.check_schema(schema)
            self._schemas[schema_name] = schema

        return self._schemas[schema_name]


# =============================================================================
# SHARE SET VALIDATOR
# =============================================================================


class ShareSetValidator:
    """Валидатор записей share_set."""

    SCHEMA_NAME = "share_set"

    def __init__(self, loader: Optional[SchemaLoader] = None):
        loader = loader or SchemaLoader()
        self._validator = Draft202012Validator(loader.load_schema(self.SCHEMA_NAME))

    def is_valid(self, record: Any) -> bool:
        return self._validator.is_valid(record)

    def errors(self, record: Any) -> List[ShareSetContractError]:
        """Все нарушения, упорядоченные по пути до поля."""
        found = sorted(
            self._validator.iter_errors(record),
            key=lambda e: [str(part) for part in e.absolute_path],
        )
        return [ShareSetContractError(e) for e in found]

    def validate(self, record: Any) -> None:
        """
        Raises:
            ShareSetContractError: наиболее релевантное нарушение
        """
        error = best_match(self._validator.iter_errors(record))
        if error is not None:
            raise ShareSetContractError(error)


@lru_cache(maxsize=None)
def default_validator() -> ShareSetValidator:
    return ShareSetValidator()


def validate_share_set(record: Any) -> None:
    """Проверка записи валидатором по умолчанию (схема читается один раз)."""
    default_validator().validate(record)
