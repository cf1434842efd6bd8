"""
EvaluationResult — тегированный результат точного вычисления

Вариант {INTEGRAL(value) | FRACTIONAL(numerator, denominator)}.
Вызывающий код ветвится по явному тегу kind, а не по типу значения.
"""

from dataclasses import dataclass
from enum import Enum

from src.core.math.exact_fraction import ExactFraction


class EvaluationKind(str, Enum):
    """Тип результата вычисления."""

    INTEGRAL = "INTEGRAL"
    FRACTIONAL = "FRACTIONAL"


@dataclass(frozen=True)
class EvaluationResult:
    """Результат вычисления полинома в точке."""

    kind: EvaluationKind
    numerator: int
    denominator: int

    @classmethod
    def integral(cls, value: int) -> "EvaluationResult":
        return cls(kind=EvaluationKind.INTEGRAL, numerator=value, denominator=1)

    @classmethod
    def fractional(cls, numerator: int, denominator: int) -> "EvaluationResult":
        """
        Дробный результат.

        Ожидает уже сокращённую дробь с denominator > 1.
        """
        if denominator <= 1:
            raise ValueError(
                f"Fractional result requires denominator > 1, got {denominator}"
            )
        return cls(
            kind=EvaluationKind.FRACTIONAL,
            numerator=numerator,
            denominator=denominator,
        )

    @classmethod
    def from_fraction(cls, fraction: ExactFraction) -> "EvaluationResult":
        if fraction.is_integer():
            return cls.integral(fraction.numerator)
        return cls.fractional(fraction.numerator, fraction.denominator)

    @property
    def is_integral(self) -> bool:
        return self.kind == EvaluationKind.INTEGRAL

    @property
    def value(self) -> int:
        """
        Целое значение.

        Raises:
            ValueError: если результат дробный
        """
        if self.kind != EvaluationKind.INTEGRAL:
            raise ValueError(f"Result is fractional: {self}")
        return self.numerator

    def as_fraction(self) -> ExactFraction:
        return ExactFraction(self.numerator, self.denominator)

    def __str__(self) -> str:
        if self.kind == EvaluationKind.INTEGRAL:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"
