"""
Base Decoding — декодирование строк цифр в произвольном основании

Алфавит цифр: '0'..'9' → 0..9, 'a'..'z' → 10..35 (регистр не важен).
Допустимые основания: 2..36.

Декодирование выполняется накоплением result = result * base + digit
над целыми произвольной точности (значения в сотни цифр не теряют точность).
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MIN_BASE: Final[int] = 2
MAX_BASE: Final[int] = 36

# Каноническая запись цифр (нижний регистр)
DIGIT_ALPHABET: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidBase(ValueError):
    """Основание вне диапазона [2, 36]."""
    pass


class InvalidDigit(ValueError):
    """Символ не является допустимой цифрой для данного основания."""
    pass


# =============================================================================
# DECODING / ENCODING
# =============================================================================


def validate_base(base: int) -> int:
    """
    Проверка основания.

    Raises:
        InvalidBase: если base вне [MIN_BASE, MAX_BASE]
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(f"Base must be an integer, got {base!r}")
    if base < MIN_BASE or base > MAX_BASE:
        raise InvalidBase(
            f"Base must be between {MIN_BASE} and {MAX_BASE}, got {base}"
        )
    return base


def digit_value(char: str) -> int:
    """
    Значение одной цифры без учёта основания.

    Raises:
        InvalidDigit: если символ вне алфавита 0-9a-z
    """
    ch = char.lower()
    if len(ch) != 1:
        raise InvalidDigit(f"Invalid character {char!r}: not in 0-9a-z")
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10
    raise InvalidDigit(f"Invalid character {char!r}: not in 0-9a-z")


def decode_base(digits: str, base: int) -> int:
    """
    Декодирование строки цифр в неотрицательное целое.

    Args:
        digits: Строка цифр (регистр не важен)
        base: Основание системы счисления [2, 36]

    Returns:
        Декодированное целое (пустая строка → 0)

    Raises:
        InvalidBase: если основание вне [2, 36]
        InvalidDigit: если символ недопустим для основания

    Examples:
        >>> decode_base("111", 2)
        7
        >>> decode_base("213", 4)
        39
        >>> decode_base("FF", 16)
        255
    """
    validate_base(base)

    result = 0
    for char in digits:
        value = digit_value(char)
        if value >= base:
            raise InvalidDigit(f"Invalid character {char!r} for base {base}")
        result = result * base + value

    return result


def encode_base(value: int, base: int) -> str:
    """
    Каноническая запись неотрицательного целого в основании base.

    Обратна decode_base для канонических строк (нижний регистр,
    без ведущих нулей, ноль → "0").

    Examples:
        >>> encode_base(39, 4)
        '213'
        >>> encode_base(0, 7)
        '0'
    """
    validate_base(base)
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")

    if value == 0:
        return "0"

    digits = []
    while value:
        value, remainder = divmod(value, base)
        digits.append(DIGIT_ALPHABET[remainder])

    return "".join(reversed(digits))
