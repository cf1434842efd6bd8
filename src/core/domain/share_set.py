"""
ShareSet — Модель входной записи с долями

Immutable Pydantic модели входного JSON:

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Отсутствующие индексы пропускаются (разреженные наборы допустимы).
"""

import logging
from typing import Any

from pydantic import BaseModel, Field

from src.core.domain.point import Point
from src.core.math.base_decoding import decode_base

logger = logging.getLogger(__name__)

KEYS_FIELD = "keys"


# =============================================================================
# NESTED MODELS
# =============================================================================


class ShareSetKeys(BaseModel):
    """Заявленное количество точек n и порог k."""

    n: int = Field(..., ge=1, description="Заявленное количество точек")
    k: int = Field(..., ge=1, description="Минимально необходимое количество точек")

    model_config = {"frozen": True}


class ShareEntry(BaseModel):
    """Одна доля: строка цифр value в основании base."""

    base: str = Field(..., pattern=r"^[0-9]+$", description="Основание (строка)")
    value: str = Field(..., min_length=1, description="Строка цифр")

    model_config = {"frozen": True}

    @property
    def base_int(self) -> int:
        return int(self.base, 10)

    def decode(self) -> int:
        """
        Декодирование значения.

        Raises:
            InvalidBase, InvalidDigit: из base_decoding
        """
        return decode_base(self.value, self.base_int)


# =============================================================================
# SHARE SET
# =============================================================================


class ShareSet(BaseModel):
    """Входная запись: ключи n/k и доли по позициям."""

    keys: ShareSetKeys
    shares: dict[int, ShareEntry] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @property
    def n(self) -> int:
        return self.keys.n

    @property
    def k(self) -> int:
        return self.keys.k

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "ShareSet":
        """
        Построение из сырой JSON записи.

        Все ключи кроме "keys" трактуются как позиции долей.

        Raises:
            pydantic.ValidationError: если запись не соответствует моделям
        """
        shares = {
            int(key): entry for key, entry in record.items() if key != KEYS_FIELD
        }
        return cls.model_validate({"keys": record.get(KEYS_FIELD), "shares": shares})

    def to_record(self) -> dict[str, Any]:
        """Обратное преобразование в формат входного JSON."""
        record: dict[str, Any] = {KEYS_FIELD: self.keys.model_dump()}
        for position in sorted(self.shares):
            record[str(position)] = self.shares[position].model_dump()
        return record

    def decode_points(self) -> list[Point]:
        """
        Декодирование долей в упорядоченный по позиции список точек.

        Читаются только позиции 1..n: отсутствующие пропускаются,
        позиции больше n игнорируются с предупреждением.

        Raises:
            InvalidBase, InvalidDigit: при некорректной доле
        """
        points = []
        for position in sorted(self.shares):
            entry = self.shares[position]
            if position > self.n:
                logger.warning(
                    "Ignoring share at position %d: above declared n=%d",
                    position, self.n,
                )
                continue

            value = entry.decode()
            points.append(Point(position=position, value=value))
            logger.info(
                "Point %d: (%d, %d) - base %s, value %s",
                position, position, value, entry.base, entry.value,
            )

        if len(points) != self.n:
            logger.warning(
                "Declared n=%d but %d shares present: positions %s",
                self.n, len(points), [p.position for p in points],
            )

        return points
