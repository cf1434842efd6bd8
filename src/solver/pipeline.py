"""Polynomial Solver — оркестрация восстановления свободного члена.

Поток данных:
    ShareSet → decode_points → sort_by_position → стратегия → SolveReport

Стратегии (SolverConfig.strategy):
- ROBUST: RobustConsensusSelector, свободный член = a_0 лучшей модели
- DIRECT: Лагранж по первым k точкам (с закрытой формулой для 1..k)

Диагностика: для каждой точки вычисляется значение модели в её позиции
и классификация inlier/outlier.

Решатель не выполняет ввод-вывод: все ошибки пробрасываются вызывающему.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from src.core.domain.evaluation import EvaluationResult
from src.core.domain.point import Point, sort_by_position
from src.core.domain.share_set import ShareSet
from src.interpolation.consensus import ConsensusConfig, ConsensusResult, RobustConsensusSelector
from src.interpolation.errors import NonIntegerResult
from src.interpolation.lagrange import lagrange_constant_term, lagrange_evaluate
from src.solver.config import SolverConfig, Strategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointCheck:
    """Сравнение значения модели с точкой."""

    index: int
    position: int
    value: int
    model_value: EvaluationResult
    is_inlier: bool


@dataclass(frozen=True)
class SolveReport:
    """Результат решения для одной записи."""

    constant_term: int
    k: int
    strategy: Strategy
    points: tuple[Point, ...]
    checks: tuple[PointCheck, ...]

    # Только для ROBUST
    consensus: Optional[ConsensusResult] = None

    @property
    def n(self) -> int:
        return len(self.points)

    @property
    def inlier_count(self) -> int:
        return sum(1 for check in self.checks if check.is_inlier)

    @property
    def inlier_mask(self) -> list[int]:
        return [1 if check.is_inlier else 0 for check in self.checks]


class PolynomialSolver:
    """Восстановление свободного члена полинома по доле-точкам."""

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()
        self._selector = RobustConsensusSelector(
            ConsensusConfig(stop_on_perfect_fit=self.config.stop_on_perfect_fit)
        )

    def solve(self, share_set: ShareSet) -> SolveReport:
        """
        Решение для входной записи.

        Raises:
            InvalidBase, InvalidDigit: при декодировании долей
            ReconstructionError: при невозможности восстановления
        """
        logger.info("Number of roots provided: %d", share_set.n)
        logger.info("Minimum roots required: %d", share_set.k)

        points = share_set.decode_points()
        return self.solve_points(points, share_set.k)

    def solve_points(self, points: Sequence[Point], k: int) -> SolveReport:
        """Решение для уже декодированных точек."""
        ordered = tuple(sort_by_position(points))

        if self.config.strategy == Strategy.DIRECT:
            return self._solve_direct(ordered, k)
        return self._solve_robust(ordered, k)

    def _solve_direct(self, points: tuple[Point, ...], k: int) -> SolveReport:
        constant_term = lagrange_constant_term(
            points, k, use_shortcut=self.config.use_consecutive_shortcut
        )

        checks = []
        for index, point in enumerate(points):
            model_value = lagrange_evaluate(points, k, x_eval=point.position)
            checks.append(
                PointCheck(
                    index=index,
                    position=point.position,
                    value=point.value,
                    model_value=model_value,
                    is_inlier=model_value.is_integral and model_value.value == point.value,
                )
            )

        logger.info("Constant term (direct, first %d points): %d", k, constant_term)
        return SolveReport(
            constant_term=constant_term,
            k=k,
            strategy=Strategy.DIRECT,
            points=points,
            checks=tuple(checks),
        )

    def _solve_robust(self, points: tuple[Point, ...], k: int) -> SolveReport:
        consensus = self._selector.select(points, k)

        constant = consensus.constant_term
        if not constant.is_integer():
            raise NonIntegerResult(constant.numerator, constant.denominator)

        checks = tuple(
            PointCheck(
                index=index,
                position=point.position,
                value=point.value,
                model_value=consensus.evaluate(point.position),
                is_inlier=consensus.is_inlier(index),
            )
            for index, point in enumerate(points)
        )

        logger.info(
            "Constant term (robust, subset %s, inliers %d/%d): %d",
            list(consensus.subset_indices), consensus.score, len(points), constant.numerator,
        )
        return SolveReport(
            constant_term=constant.numerator,
            k=k,
            strategy=Strategy.ROBUST,
            points=points,
            checks=checks,
            consensus=consensus,
        )
