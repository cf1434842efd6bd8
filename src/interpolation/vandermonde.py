"""
Vandermonde Solver — точное восстановление коэффициентов полинома

Для k точек (x_r, y_r) строится система V * a = y, где
V[r][c] = x_r^c, и решается методом Гаусса с частичным выбором
ведущего элемента и обратной подстановкой над ExactFraction.

Результат: коэффициенты a_0..a_{k-1} полинома
    P(x) = a_0 + a_1 x + ... + a_{k-1} x^{k-1}
проходящего точно через все k точек.

Для различных позиций матрица Вандермонда невырождена; отсутствие
pivot возможно только при совпадающих позициях → SingularSystem.
"""

from typing import Sequence

from src.core.domain.point import Point
from src.core.math.exact_fraction import ONE, ZERO, ExactFraction
from src.interpolation.errors import SingularSystem


def build_vandermonde_system(
    points: Sequence[Point],
) -> tuple[list[list[ExactFraction]], list[ExactFraction]]:
    """
    Построение матрицы Вандермонда и правой части.

    Returns:
        (matrix, rhs): matrix[r] = [x_r^0, ..., x_r^(k-1)], rhs[r] = y_r
    """
    k = len(points)
    matrix: list[list[ExactFraction]] = []
    rhs: list[ExactFraction] = []

    for point in points:
        x = ExactFraction.from_int(point.position)
        row = []
        power = ONE
        for _ in range(k):
            row.append(power)
            power = power * x
        matrix.append(row)
        rhs.append(ExactFraction.from_int(point.value))

    return matrix, rhs


def solve_vandermonde(points: Sequence[Point]) -> tuple[ExactFraction, ...]:
    """
    Решение системы Вандермонда для k точек.

    Args:
        points: k точек (порядок произвольный)

    Returns:
        Коэффициенты (a_0, ..., a_{k-1})

    Raises:
        SingularSystem: если в каком-то столбце нет ненулевого pivot

    Examples:
        >>> from src.core.domain.point import points_from_pairs
        >>> coeffs = solve_vandermonde(points_from_pairs([(1, 4), (2, 7), (3, 12)]))
        >>> [str(c) for c in coeffs]
        ['3', '0', '1']
    """
    k = len(points)
    matrix, rhs = build_vandermonde_system(points)

    # Прямой ход
    for col in range(k):
        pivot = None
        for row in range(col, k):
            if not matrix[row][col].is_zero():
                pivot = row
                break
        if pivot is None:
            raise SingularSystem(col)

        if pivot != col:
            matrix[col], matrix[pivot] = matrix[pivot], matrix[col]
            rhs[col], rhs[pivot] = rhs[pivot], rhs[col]

        # Нормализация строки pivot: диагональ становится 1
        factor = matrix[col][col]
        for c in range(col, k):
            matrix[col][c] = matrix[col][c] / factor
        rhs[col] = rhs[col] / factor

        for row in range(col + 1, k):
            f = matrix[row][col]
            if f.is_zero():
                continue
            for c in range(col, k):
                matrix[row][c] = matrix[row][c] - f * matrix[col][c]
            rhs[row] = rhs[row] - f * rhs[col]

    # Обратная подстановка (диагональ = 1)
    coefficients = [ZERO] * k
    for i in range(k - 1, -1, -1):
        acc = rhs[i]
        for c in range(i + 1, k):
            acc = acc - matrix[i][c] * coefficients[c]
        coefficients[i] = acc

    return tuple(coefficients)


def evaluate_polynomial(coefficients: Sequence[ExactFraction], x: int) -> ExactFraction:
    """
    Точное вычисление P(x) = sum(a_i * x^i).

    Examples:
        >>> evaluate_polynomial([ExactFraction(3), ExactFraction(0), ExactFraction(1)], 6)
        ExactFraction(39, 1)
    """
    xf = ExactFraction.from_int(x)
    power = ONE
    total = ZERO
    for coefficient in coefficients:
        total = total + coefficient * power
        power = power * xf
    return total
