"""Solver — конфигурация, оркестрация, фикстуры и CLI."""

from .config import SolverConfig, Strategy
from .pipeline import PointCheck, PolynomialSolver, SolveReport

__all__ = [
    "SolverConfig",
    "Strategy",
    "PointCheck",
    "PolynomialSolver",
    "SolveReport",
]
