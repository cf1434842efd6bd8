"""
Core math modules

Точные арифметические примитивы над целыми произвольной точности.
"""

# Exact Fraction
from src.core.math.exact_fraction import (
    ONE,
    ZERO,
    DivisionByZero,
    ExactFraction,
    ZeroDenominator,
)

# Base Decoding
from src.core.math.base_decoding import (
    DIGIT_ALPHABET,
    MAX_BASE,
    MIN_BASE,
    InvalidBase,
    InvalidDigit,
    decode_base,
    digit_value,
    encode_base,
    validate_base,
)

# Combinatorics
from src.core.math.combinatorics import (
    binomial,
    k_subsets,
)

__all__ = [
    # Exact Fraction: Types
    "ExactFraction",
    "ONE",
    "ZERO",
    # Exact Fraction: Exceptions
    "DivisionByZero",
    "ZeroDenominator",
    # Base Decoding: Constants
    "DIGIT_ALPHABET",
    "MAX_BASE",
    "MIN_BASE",
    # Base Decoding: Exceptions
    "InvalidBase",
    "InvalidDigit",
    # Base Decoding: Functions
    "decode_base",
    "digit_value",
    "encode_base",
    "validate_base",
    # Combinatorics: Functions
    "binomial",
    "k_subsets",
]
