"""
Core math modules для fracnum

Целочисленные примитивы для разбора и форматирования чисел с фиксированной дробной частью.
"""

# Digit codec
from src.core.math.digits import (
    # Constants
    DIGITS,
    INT64_MAX,
    INT64_MIN,
    NOT_A_DIGIT,
    RADIX_MAX,
    RADIX_MIN,
    # Radix & range
    fits_int64,
    is_supported_radix,
    # Char ↔ digit
    digit_char,
    digit_value,
    pop_digit,
    to_digit,
)

__all__ = [
    # Digit codec — Constants
    "DIGITS",
    "INT64_MAX",
    "INT64_MIN",
    "NOT_A_DIGIT",
    "RADIX_MAX",
    "RADIX_MIN",
    # Digit codec — Radix & range
    "fits_int64",
    "is_supported_radix",
    # Digit codec — Char ↔ digit
    "digit_char",
    "digit_value",
    "pop_digit",
    "to_digit",
]
