"""
Тесты для Base Decoding

Проверяемые инварианты:
1. Алфавит 0-9a-z, регистр не важен
2. Совпадение с int(s, base) для всех оснований 2..36
3. Каноническая запись: encode_base(decode_base(s)) == s
4. InvalidBase вне [2, 36], InvalidDigit для недопустимых символов
"""

import random

import pytest

from src.core.math.base_decoding import (
    DIGIT_ALPHABET,
    MAX_BASE,
    MIN_BASE,
    InvalidBase,
    InvalidDigit,
    decode_base,
    digit_value,
    encode_base,
)
from src.solver.fixtures import TESTCASE_1, TESTCASE_2


# =============================================================================
# ТЕСТЫ: Декодирование
# =============================================================================


class TestDecodeBase:
    """Декодирование строк цифр."""

    @pytest.mark.parametrize(
        "digits,base,expected",
        [
            ("4", 10, 4),
            ("111", 2, 7),
            ("12", 10, 12),
            ("213", 4, 39),
            ("ff", 16, 255),
            ("FF", 16, 255),
            ("zz", 36, 1295),
            ("0", 2, 0),
            ("000101", 2, 5),
        ],
    )
    def test_known_values(self, digits, base, expected):
        assert decode_base(digits, base) == expected

    def test_empty_string_is_zero(self):
        assert decode_base("", 10) == 0

    def test_case_insensitive(self):
        assert decode_base("aBcDeF", 16) == decode_base("abcdef", 16)

    @pytest.mark.parametrize("record", [TESTCASE_1, TESTCASE_2])
    def test_fixture_values_match_builtin(self, record):
        """Большие значения фикстур совпадают с int(s, base)."""
        for key, entry in record.items():
            if key == "keys":
                continue
            base = int(entry["base"])
            assert decode_base(entry["value"], base) == int(entry["value"], base)

    def test_hundreds_of_digits(self):
        digits = "7" * 400
        assert decode_base(digits, 8) == int(digits, 8)

    def test_randomized_against_builtin(self):
        rng = random.Random(36)
        for _ in range(200):
            base = rng.randint(MIN_BASE, MAX_BASE)
            length = rng.randint(1, 60)
            digits = "".join(rng.choice(DIGIT_ALPHABET[:base]) for _ in range(length))
            assert decode_base(digits, base) == int(digits, base)


# =============================================================================
# ТЕСТЫ: Ошибки
# =============================================================================


class TestDecodeErrors:
    """InvalidBase и InvalidDigit."""

    @pytest.mark.parametrize("base", [-1, 0, 1, 37, 100])
    def test_invalid_base(self, base):
        with pytest.raises(InvalidBase, match="between 2 and 36"):
            decode_base("1", base)

    def test_non_integer_base(self):
        with pytest.raises(InvalidBase):
            decode_base("1", "10")

    @pytest.mark.parametrize(
        "digits,base",
        [
            ("2", 2),
            ("12", 2),
            ("g", 16),
            ("9", 8),
            ("-1", 10),
            ("1 0", 10),
            ("1.5", 10),
            ("é", 36),
        ],
    )
    def test_invalid_digit(self, digits, base):
        with pytest.raises(InvalidDigit):
            decode_base(digits, base)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            decode_base("z", 10)
        with pytest.raises(ValueError):
            decode_base("1", 99)

    def test_digit_value(self):
        assert digit_value("0") == 0
        assert digit_value("9") == 9
        assert digit_value("a") == 10
        assert digit_value("Z") == 35
        with pytest.raises(InvalidDigit):
            digit_value("_")


# =============================================================================
# ТЕСТЫ: Каноническая запись
# =============================================================================


class TestEncodeBase:
    """encode_base как обратная операция для канонических строк."""

    def test_known_values(self):
        assert encode_base(39, 4) == "213"
        assert encode_base(255, 16) == "ff"
        assert encode_base(0, 7) == "0"

    def test_canonical_round_trip(self):
        rng = random.Random(7)
        for _ in range(200):
            base = rng.randint(MIN_BASE, MAX_BASE)
            length = rng.randint(1, 40)
            digits = rng.choice(DIGIT_ALPHABET[1:base]) + "".join(
                rng.choice(DIGIT_ALPHABET[:base]) for _ in range(length - 1)
            )
            assert encode_base(decode_base(digits, base), base) == digits

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            encode_base(-1, 10)

    def test_invalid_base(self):
        with pytest.raises(InvalidBase):
            encode_base(10, 1)
