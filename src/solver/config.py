"""Конфигурация решателя.

Стратегии:
- ROBUST: полный перебор k-подмножеств с выбором модели максимального
  согласия (устойчив к испорченным точкам), по умолчанию
- DIRECT: Лагранж по первым k точкам (быстрее, без устойчивости к выбросам)
"""

from dataclasses import dataclass
from enum import Enum


class Strategy(str, Enum):
    """Стратегия восстановления свободного члена."""
    ROBUST = "robust"
    DIRECT = "direct"


@dataclass(frozen=True)
class SolverConfig:
    """Конфигурация PolynomialSolver."""

    strategy: Strategy = Strategy.ROBUST

    # DIRECT: закрытая формула при позициях 1..k
    use_consecutive_shortcut: bool = True

    # ROBUST: досрочная остановка при score == n
    stop_on_perfect_fit: bool = True
