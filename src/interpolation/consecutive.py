"""
Consecutive Shortcut — закрытая формула для позиций 1..k

Если выбранные k точек имеют позиции ровно 1, 2, ..., k (в этом порядке),
свободный член интерполяционного полинома равен

    P(0) = sum_{i=0}^{k-1} (-1)^i * C(k, i+1) * y_i

Результат всегда целый, дробная арифметика не нужна. Совпадает
с общим вычислением Лагранжа в нуле.
"""

from typing import Sequence

from src.core.domain.point import Point
from src.core.math.combinatorics import binomial
from src.interpolation.errors import InsufficientPoints


def is_consecutive(points: Sequence[Point], k: int) -> bool:
    """True если первые k точек имеют позиции 1..k по порядку."""
    if k < 1 or len(points) < k:
        return False
    return all(points[i].position == i + 1 for i in range(k))


def consecutive_constant_term(points: Sequence[Point], k: int) -> int:
    """
    Свободный член по закрытой формуле.

    Raises:
        InsufficientPoints: если точек меньше k
        ValueError: если позиции первых k точек не равны 1..k

    Examples:
        >>> from src.core.domain.point import points_from_pairs
        >>> consecutive_constant_term(points_from_pairs([(1, 4), (2, 7), (3, 12)]), 3)
        3
    """
    if len(points) < k:
        raise InsufficientPoints(required=k, available=len(points))
    if not is_consecutive(points, k):
        positions = [point.position for point in points[:k]]
        raise ValueError(f"Positions must be exactly 1..{k}, got {positions}")

    total = 0
    for i in range(k):
        term = binomial(k, i + 1) * points[i].value
        total += -term if i % 2 else term
    return total
