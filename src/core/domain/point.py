"""
Point — точка выборки (position, value)

Immutable Pydantic модель: position — положительный индекс доли,
value — декодированное целое произвольной точности.
"""

from typing import Iterable

from pydantic import BaseModel, Field


class Point(BaseModel):
    """
    Точка выборки полинома.

    Создаётся один раз из входных данных и никогда не изменяется.
    """

    position: int = Field(..., gt=0, description="Позиция (индекс доли), > 0")
    value: int = Field(..., description="Значение полинома в позиции")

    model_config = {"frozen": True}

    def as_pair(self) -> tuple[int, int]:
        return (self.position, self.value)


def points_from_pairs(pairs: Iterable[tuple[int, int]]) -> list[Point]:
    """
    Построение списка точек из пар (position, value).

    Порядок пар сохраняется: сортировка — отдельный явный шаг
    (sort_by_position).
    """
    return [Point(position=position, value=value) for position, value in pairs]


def sort_by_position(points: Iterable[Point]) -> list[Point]:
    """Новый список точек, упорядоченный по позиции (стабильно)."""
    return sorted(points, key=lambda point: point.position)
