"""Fixtures — канонические тестовые записи и хранилища для них.

Запись фикстур — явный опциональный шаг bootstrap_fixtures(store) вне ядра.
Хранилище внедряется: FileSystemFixtureStore (каталог) или
InMemoryFixtureStore (тесты).
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from src.core.contracts import validate_share_set
from src.core.domain.share_set import ShareSet

logger = logging.getLogger(__name__)


# =============================================================================
# CANNED RECORDS
# =============================================================================

# Позиции 1..4: (1,4), (2,7), (3,12) → P(x) = x^2 + 3; доля "6" (39) лежит за n и игнорируется
TESTCASE_1: Dict[str, Any] = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}

# Свободный член 79836264049851; выбросы в позициях 2 и 8
TESTCASE_2: Dict[str, Any] = {
    "keys": {"n": 10, "k": 7},
    "1": {"base": "6", "value": "13444211440455345511"},
    "2": {"base": "15", "value": "aed7015a346d635"},
    "3": {"base": "15", "value": "6aeeb69631c227c"},
    "4": {"base": "16", "value": "e1b5e05623d881f"},
    "5": {"base": "8", "value": "316034514573652620673"},
    "6": {"base": "3", "value": "2122212201122002221120200210011020220200"},
    "7": {"base": "3", "value": "20120221122211000100210021102001201112121"},
    "8": {"base": "6", "value": "20220554335330240002224253"},
    "9": {"base": "12", "value": "45153788322a1255483"},
    "10": {"base": "7", "value": "1101613130313526312514143"},
}

DEFAULT_FIXTURES: Dict[str, Dict[str, Any]] = {
    "testcase1.json": TESTCASE_1,
    "testcase2.json": TESTCASE_2,
}


# =============================================================================
# STORES
# =============================================================================


class FixtureStore(Protocol):
    """Минимальный интерфейс текстового хранилища."""

    def exists(self, name: str) -> bool: ...

    def read_text(self, name: str) -> str: ...

    def write_text(self, name: str, text: str) -> None: ...


class FileSystemFixtureStore:
    """Хранилище в каталоге файловой системы."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def _path(self, name: str) -> Path:
        return self.root / name

    def exists(self, name: str) -> bool:
        return self._path(name).exists()

    def read_text(self, name: str) -> str:
        return self._path(name).read_text(encoding="utf-8")

    def write_text(self, name: str, text: str) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        self._path(name).write_text(text, encoding="utf-8")


class InMemoryFixtureStore:
    """Хранилище в памяти."""

    def __init__(self, files: Optional[Dict[str, str]] = None):
        self.files: Dict[str, str] = dict(files or {})

    def exists(self, name: str) -> bool:
        return name in self.files

    def read_text(self, name: str) -> str:
        try:
            return self.files[name]
        except KeyError:
            raise FileNotFoundError(f"Fixture not found: {name}") from None

    def write_text(self, name: str, text: str) -> None:
        self.files[name] = text


# =============================================================================
# BOOTSTRAP / LOAD
# =============================================================================


def bootstrap_fixtures(
    store: FixtureStore,
    fixtures: Optional[Dict[str, Dict[str, Any]]] = None,
    overwrite: bool = False,
) -> list[str]:
    """
    Запись канонических фикстур в хранилище.

    Args:
        store: Целевое хранилище
        fixtures: Имя → запись (default: DEFAULT_FIXTURES)
        overwrite: Перезаписывать существующие

    Returns:
        Имена записанных фикстур
    """
    fixtures = DEFAULT_FIXTURES if fixtures is None else fixtures

    written = []
    for name, record in fixtures.items():
        if store.exists(name) and not overwrite:
            continue
        store.write_text(name, json.dumps(record, indent=2))
        written.append(name)

    if written:
        logger.info("Test case files created: %s", ", ".join(written))
    return written


def parse_share_set(text: str) -> ShareSet:
    """
    Разбор JSON текста во входную запись.

    Raises:
        json.JSONDecodeError: невалидный JSON
        ShareSetContractError: нарушение контракта share_set
        pydantic.ValidationError: нарушение моделей
    """
    record = json.loads(text)
    validate_share_set(record)
    return ShareSet.from_record(record)


def load_share_set(store: FixtureStore, name: str) -> ShareSet:
    """Чтение и разбор записи из хранилища."""
    return parse_share_set(store.read_text(name))
