"""Interpolation — стратегии восстановления полинома.

- Vandermonde: точное восстановление всех коэффициентов
- Lagrange: прямое вычисление в точке (свободный член при x = 0)
- Consecutive: закрытая формула для позиций 1..k
- Consensus: устойчивый перебор k-подмножеств
"""

from .consecutive import consecutive_constant_term, is_consecutive
from .consensus import (
    ConsensusConfig,
    ConsensusResult,
    RobustConsensusSelector,
    robust_constant_term,
    score_model,
)
from .errors import (
    DuplicatePosition,
    InsufficientPoints,
    NoConsensusFound,
    NonIntegerResult,
    ReconstructionError,
    RecoverableSubsetError,
    SingularSystem,
)
from .lagrange import lagrange_constant_term, lagrange_evaluate
from .vandermonde import build_vandermonde_system, evaluate_polynomial, solve_vandermonde

__all__ = [
    "consecutive_constant_term",
    "is_consecutive",
    "ConsensusConfig",
    "ConsensusResult",
    "RobustConsensusSelector",
    "robust_constant_term",
    "score_model",
    "DuplicatePosition",
    "InsufficientPoints",
    "NoConsensusFound",
    "NonIntegerResult",
    "ReconstructionError",
    "RecoverableSubsetError",
    "SingularSystem",
    "lagrange_constant_term",
    "lagrange_evaluate",
    "build_vandermonde_system",
    "evaluate_polynomial",
    "solve_vandermonde",
]
