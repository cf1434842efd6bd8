"""Ошибки реконструкции полинома.

Две категории:
- ReconstructionError: фатальные ошибки, прерывают решение целиком
- RecoverableSubsetError: ошибки конкретного подмножества точек,
  поглощаются циклом RobustConsensusSelector (подмножество пропускается)
"""


class ReconstructionError(Exception):
    """Базовая фатальная ошибка реконструкции."""
    pass


class DuplicatePosition(ReconstructionError):
    """Две выбранные точки имеют одинаковую позицию."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"Duplicate position among selected points: x={position}")


class NonIntegerResult(ReconstructionError):
    """Свободный член не сократился до целого (несогласованные данные)."""

    def __init__(self, numerator: int, denominator: int):
        self.numerator = numerator
        self.denominator = denominator
        super().__init__(
            f"Constant term is not an integer: {numerator}/{denominator}"
        )


class InsufficientPoints(ReconstructionError):
    """Точек меньше порога k."""

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(f"Need at least {required} points, got {available}")


class NoConsensusFound(ReconstructionError):
    """Полный перебор не дал ни одной пригодной модели."""
    pass


class RecoverableSubsetError(ArithmeticError):
    """Базовая ошибка подмножества, не выходящая за пределы селектора."""
    pass


class SingularSystem(RecoverableSubsetError):
    """Матрица Вандермонда подмножества вырождена (нет pivot в столбце)."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Singular Vandermonde system: no pivot in column {column}")
