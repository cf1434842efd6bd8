"""
Combinatorics — перечисление подмножеств и биномиальные коэффициенты

- k_subsets: ленивое перечисление всех k-подмножеств индексов 0..n-1
  в лексикографическом порядке (backtracking с отсечением)
- binomial: точный C(n, r) через мультипликативную формулу с gcd-сокращением
"""

import math
from typing import Iterator


def k_subsets(n: int, k: int) -> Iterator[tuple[int, ...]]:
    """
    Все строго возрастающие k-кортежи индексов из 0..n-1.

    Генератор одноразовый: для нового перебора нужен новый вызов.
    На каждой глубине рассматриваются только индексы, после которых
    в пуле остаётся достаточно элементов для завершения подмножества.

    Args:
        n: Размер пула
        k: Размер подмножества

    Yields:
        Кортежи индексов в лексикографическом порядке

    Examples:
        >>> list(k_subsets(4, 2))
        [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]
        >>> len(list(k_subsets(10, 7)))
        120
    """
    if n < 0 or k < 0:
        raise ValueError(f"n and k must be non-negative, got n={n}, k={k}")
    if k > n:
        return

    path: list[int] = []

    def _extend(start: int) -> Iterator[tuple[int, ...]]:
        if len(path) == k:
            yield tuple(path)
            return
        # Последний допустимый индекс оставляет место для k - len(path) - 1 элементов
        last = n - (k - len(path))
        for i in range(start, last + 1):
            path.append(i)
            yield from _extend(i + 1)
            path.pop()

    yield from _extend(0)


def binomial(n: int, r: int) -> int:
    """
    Точный биномиальный коэффициент C(n, r).

    Инкрементальная формула c_{i+1} = c_i * (n - i) / (i + 1) с сокращением
    на gcd на каждом шаге: промежуточное произведение не превышает результат.

    Examples:
        >>> binomial(5, 2)
        10
        >>> binomial(10, 0)
        1
        >>> binomial(3, 4)
        0
    """
    if n < 0 or r < 0:
        raise ValueError(f"n and r must be non-negative, got n={n}, r={r}")
    if r > n:
        return 0

    r = min(r, n - r)
    result = 1
    for i in range(r):
        divisor = i + 1
        g = math.gcd(result, divisor)
        result //= g
        divisor //= g
        # divisor взаимно прост с result, значит делит (n - i)
        result *= (n - i) // divisor

    return result
