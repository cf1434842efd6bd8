"""Robust Consensus Selector — устойчивый выбор модели по k-подмножествам.

Алгоритм:
1. n < k → InsufficientPoints
2. Перебор всех C(n, k) подмножеств в лексикографическом порядке
3. Для каждого: solve_vandermonde (SingularSystem → подмножество пропускается)
4. Score = количество точек полного набора, для которых P(x) == y точно
5. Сохраняется модель со строго большим score (ничья → более ранняя)
6. score == n → досрочное завершение (лучше не бывает)
7. Ни одной пригодной модели → NoConsensusFound

Стоимость: C(n, k) решений O(k^3) над ExactFraction.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from src.core.domain.evaluation import EvaluationResult
from src.core.domain.point import Point
from src.core.math.combinatorics import k_subsets
from src.core.math.exact_fraction import ExactFraction
from src.interpolation.errors import InsufficientPoints, NoConsensusFound, RecoverableSubsetError
from src.interpolation.vandermonde import evaluate_polynomial, solve_vandermonde

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConsensusConfig:
    """Конфигурация селектора."""

    # Остановка на первом подмножестве, объясняющем все точки
    stop_on_perfect_fit: bool = True


@dataclass(frozen=True)
class ConsensusResult:
    """Модель одного подмножества и качество её согласия с полным набором."""

    coefficients: tuple[ExactFraction, ...]
    inlier_indices: frozenset[int]
    subset_indices: tuple[int, ...]
    score: int

    # Диагностика
    subsets_evaluated: int = 0
    subsets_singular: int = 0

    @property
    def constant_term(self) -> ExactFraction:
        """Коэффициент при x^0, т.е. P(0)."""
        return self.coefficients[0]

    def evaluate(self, x: int) -> EvaluationResult:
        return EvaluationResult.from_fraction(evaluate_polynomial(self.coefficients, x))

    def is_inlier(self, index: int) -> bool:
        return index in self.inlier_indices

    def inlier_mask(self, n: int) -> list[int]:
        """Маска 1/0 по индексам 0..n-1."""
        return [1 if i in self.inlier_indices else 0 for i in range(n)]


def score_model(
    coefficients: Sequence[ExactFraction],
    points: Sequence[Point],
) -> frozenset[int]:
    """Индексы точек, для которых модель даёт точно y."""
    return frozenset(
        index
        for index, point in enumerate(points)
        if evaluate_polynomial(coefficients, point.position).equals_int(point.value)
    )


class RobustConsensusSelector:
    """Полный перебор k-подмножеств с выбором модели максимального согласия."""

    def __init__(self, config: Optional[ConsensusConfig] = None):
        self.config = config or ConsensusConfig()

    def select(self, points: Sequence[Point], k: int) -> ConsensusResult:
        """Лучшая модель по всем k-подмножествам.

        Args:
            points: Полный набор точек (n штук)
            k: Размер подмножества (порог)

        Returns:
            ConsensusResult с наибольшим score

        Raises:
            ValueError: если k < 1
            InsufficientPoints: если n < k
            NoConsensusFound: если все подмножества вырождены
        """
        if k < 1:
            raise ValueError(f"k must be positive, got {k}")

        n = len(points)
        if n < k:
            raise InsufficientPoints(required=k, available=n)

        best: Optional[ConsensusResult] = None
        evaluated = 0
        singular = 0

        for subset in k_subsets(n, k):
            evaluated += 1
            try:
                coefficients = solve_vandermonde([points[i] for i in subset])
            except RecoverableSubsetError as e:
                singular += 1
                logger.debug("Skipping subset %s: %s", subset, e)
                continue

            inliers = score_model(coefficients, points)
            score = len(inliers)

            if best is None or score > best.score:
                best = ConsensusResult(
                    coefficients=coefficients,
                    inlier_indices=inliers,
                    subset_indices=subset,
                    score=score,
                )
                logger.debug("New best subset %s: score %d/%d", subset, score, n)

                if score == n and self.config.stop_on_perfect_fit:
                    logger.debug("Perfect fit after %d subsets, stopping early", evaluated)
                    break

        if best is None:
            raise NoConsensusFound(
                f"Failed to find a valid consensus model: all {evaluated} "
                f"subsets of size {k} were singular"
            )

        return ConsensusResult(
            coefficients=best.coefficients,
            inlier_indices=best.inlier_indices,
            subset_indices=best.subset_indices,
            score=best.score,
            subsets_evaluated=evaluated,
            subsets_singular=singular,
        )


def robust_constant_term(points: Sequence[Point], k: int) -> ConsensusResult:
    """Функциональная обёртка над RobustConsensusSelector с конфигурацией по умолчанию."""
    return RobustConsensusSelector().select(points, k)
