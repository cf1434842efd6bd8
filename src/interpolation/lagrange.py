"""
Lagrange Evaluator — прямое вычисление интерполянта в точке

    P(x_eval) = sum_i y_i * L_i(x_eval)
    L_i(x_eval) = prod_{j != i} (x_eval - x_j) / (x_i - x_j)

Используются первые k точек. Числитель и знаменатель накапливаются
без промежуточного сокращения; сокращается только итоговая дробь.

Для свободного члена (x_eval = 0) нецелый результат — ошибка
NonIntegerResult; для диагностических позиций дробный результат
возвращается как EvaluationResult с тегом FRACTIONAL.
"""

import logging
from typing import Sequence

from src.core.domain.evaluation import EvaluationResult
from src.core.domain.point import Point
from src.core.math.exact_fraction import ExactFraction
from src.interpolation.consecutive import consecutive_constant_term, is_consecutive
from src.interpolation.errors import DuplicatePosition, InsufficientPoints, NonIntegerResult

logger = logging.getLogger(__name__)


def select_first_k(points: Sequence[Point], k: int) -> Sequence[Point]:
    """
    Первые k точек с проверкой предусловий.

    Raises:
        ValueError: если k < 1
        InsufficientPoints: если точек меньше k
        DuplicatePosition: если среди первых k есть совпадающие позиции
    """
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    if len(points) < k:
        raise InsufficientPoints(required=k, available=len(points))

    selected = points[:k]
    seen: set[int] = set()
    for point in selected:
        if point.position in seen:
            raise DuplicatePosition(point.position)
        seen.add(point.position)
    return selected


def lagrange_evaluate(
    points: Sequence[Point],
    k: int,
    x_eval: int = 0,
) -> EvaluationResult:
    """
    Значение интерполянта по первым k точкам в позиции x_eval.

    Args:
        points: Точки (используются первые k)
        k: Количество точек для интерполяции
        x_eval: Позиция вычисления (default: 0)

    Returns:
        EvaluationResult (INTEGRAL или FRACTIONAL)

    Examples:
        >>> from src.core.domain.point import points_from_pairs
        >>> pts = points_from_pairs([(1, 4), (2, 7), (3, 12)])
        >>> str(lagrange_evaluate(pts, 3, x_eval=0))
        '3'
        >>> str(lagrange_evaluate(points_from_pairs([(1, 1), (3, 2)]), 2, x_eval=0))
        '1/2'
    """
    selected = select_first_k(points, k)

    total_num = 0
    total_den = 1
    for i, point_i in enumerate(selected):
        num = point_i.value
        den = 1
        for j, point_j in enumerate(selected):
            if i == j:
                continue
            num *= x_eval - point_j.position
            den *= point_i.position - point_j.position
        total_num = total_num * den + num * total_den
        total_den *= den

    return EvaluationResult.from_fraction(ExactFraction(total_num, total_den))


def lagrange_constant_term(
    points: Sequence[Point],
    k: int,
    use_shortcut: bool = True,
) -> int:
    """
    Свободный член P(0) по первым k точкам.

    При позициях ровно 1..k используется закрытая формула
    (consecutive_constant_term), иначе общий Лагранж.

    Raises:
        InsufficientPoints, DuplicatePosition: см. select_first_k
        NonIntegerResult: если P(0) не целое
    """
    if use_shortcut and is_consecutive(points, k):
        logger.debug("Positions are 1..%d: using closed-form constant term", k)
        return consecutive_constant_term(points, k)

    result = lagrange_evaluate(points, k, x_eval=0)
    if not result.is_integral:
        raise NonIntegerResult(result.numerator, result.denominator)
    return result.value
