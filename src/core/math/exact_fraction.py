"""
Exact Fraction — точная рациональная арифметика

Модуль предоставляет рациональное число над целыми произвольной точности:
- Хранение только в несократимом виде (gcd(|num|, den) == 1)
- Знаменатель всегда положительный
- Все операции возвращают новый сокращённый экземпляр

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0
2. gcd(|numerator|, denominator) == 1
3. Никаких float преобразований (точность не теряется)
4. Экземпляры immutable
"""

import math


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ZeroDenominator(ZeroDivisionError):
    """
    Попытка создать дробь с нулевым знаменателем.

    При корректной арифметике недостижимо: появление означает нарушение
    внутреннего инварианта.
    """
    pass


class DivisionByZero(ZeroDivisionError):
    """Деление на дробь с нулевым числителем."""
    pass


# =============================================================================
# EXACT FRACTION
# =============================================================================


class ExactFraction:
    """
    Несократимая дробь numerator/denominator.

    Examples:
        >>> ExactFraction(6, -4)
        ExactFraction(-3, 2)
        >>> ExactFraction(1, 2) + ExactFraction(1, 3)
        ExactFraction(5, 6)
        >>> str(ExactFraction(10, 5))
        '2'
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1):
        if denominator == 0:
            raise ZeroDenominator(
                f"Zero denominator for numerator={numerator}"
            )

        if denominator < 0:
            numerator = -numerator
            denominator = -denominator

        g = math.gcd(abs(numerator), denominator)
        object.__setattr__(self, "_numerator", numerator // g)
        object.__setattr__(self, "_denominator", denominator // g)

    def __setattr__(self, name, value):
        raise AttributeError(f"ExactFraction is immutable (cannot set {name})")

    @classmethod
    def from_int(cls, value: int) -> "ExactFraction":
        return cls(value, 1)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "ExactFraction") -> "ExactFraction":
        return ExactFraction(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def sub(self, other: "ExactFraction") -> "ExactFraction":
        return ExactFraction(
            self._numerator * other._denominator - other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def mul(self, other: "ExactFraction") -> "ExactFraction":
        return ExactFraction(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def div(self, other: "ExactFraction") -> "ExactFraction":
        """
        Деление на другую дробь.

        Raises:
            DivisionByZero: если числитель делителя равен 0
        """
        if other._numerator == 0:
            raise DivisionByZero(f"Division of {self} by zero fraction")
        return ExactFraction(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    def __add__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.sub(other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other.sub(self)

    def __mul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.mul(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.div(other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other.div(self)

    def __neg__(self) -> "ExactFraction":
        return ExactFraction(-self._numerator, self._denominator)

    # -------------------------------------------------------------------------
    # Сравнения и проверки
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_integer(self) -> bool:
        return self._denominator == 1

    def equals_int(self, value: int) -> bool:
        """True если дробь целая и равна value."""
        return self._denominator == 1 and self._numerator == value

    def __eq__(self, other) -> bool:
        if isinstance(other, ExactFraction):
            return (
                self._numerator == other._numerator
                and self._denominator == other._denominator
            )
        if isinstance(other, int) and not isinstance(other, bool):
            return self.equals_int(other)
        return NotImplemented

    def __hash__(self) -> int:
        # Целое значение хешируется как int: ExactFraction(2) == 2
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __reduce__(self):
        return (ExactFraction, (self._numerator, self._denominator))

    def __repr__(self) -> str:
        return f"ExactFraction({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"


ZERO = ExactFraction(0, 1)
ONE = ExactFraction(1, 1)


def _coerce(value):
    if isinstance(value, ExactFraction):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return ExactFraction(value, 1)
    return NotImplemented
