"""
Digits — Radix Digit Codec & Int64 Bounds

Общие примитивы для парсера и форматтера дробных чисел:
- Отображение символ ↔ цифра для оснований 2..36
- Проверка поддерживаемого основания
- Границы знакового 64-битного целого
- Шаг деления с остатком для эмиссии цифр

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ввод регистронезависим ("A" == "a" == 10), вывод всегда в нижнем регистре
2. Символ вне [0-9a-zA-Z] или цифра >= radix никогда не "подрезаются"
3. Таблица DIGITS неизменяема и не требует инициализации
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Глифы цифр: 0-9, затем a-z
DIGITS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

RADIX_MIN: Final[int] = 2
RADIX_MAX: Final[int] = len(DIGITS)

INT64_MIN: Final[int] = -(1 << 63)
INT64_MAX: Final[int] = (1 << 63) - 1

# Маркер "не цифра" для to_digit / digit_value
NOT_A_DIGIT: Final[int] = -1


# =============================================================================
# ОСНОВАНИЕ И ДИАПАЗОН
# =============================================================================


def is_supported_radix(radix: int) -> bool:
    """
    Проверка, что основание в диапазоне [RADIX_MIN, RADIX_MAX].

    Examples:
        >>> is_supported_radix(10)
        True
        >>> is_supported_radix(1)
        False
        >>> is_supported_radix(37)
        False
    """
    return RADIX_MIN <= radix <= RADIX_MAX


def fits_int64(value: int) -> bool:
    """True если value помещается в знаковое 64-битное целое."""
    return INT64_MIN <= value <= INT64_MAX


# =============================================================================
# СИМВОЛ → ЦИФРА
# =============================================================================


def to_digit(char: str) -> int:
    """
    Значение цифры для символа без учёта основания.

    Только ASCII: "0"-"9" → 0-9, "a"-"z" / "A"-"Z" → 10-35.
    Всё остальное (включая не-ASCII буквы и цифры) → NOT_A_DIGIT.

    Args:
        char: Одиночный символ

    Returns:
        Значение цифры [0, 35] или NOT_A_DIGIT

    Examples:
        >>> to_digit("7")
        7
        >>> to_digit("F")
        15
        >>> to_digit(".")
        -1
    """
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "a" <= char <= "z":
        return ord(char) - ord("a") + 10
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    return NOT_A_DIGIT


def digit_value(char: str, radix: int) -> int:
    """
    Значение цифры с проверкой основания.

    Args:
        char: Одиночный символ
        radix: Основание (предполагается уже проверенным)

    Returns:
        Значение цифры [0, radix) или NOT_A_DIGIT

    Examples:
        >>> digit_value("9", 10)
        9
        >>> digit_value("a", 10)
        -1
        >>> digit_value("Z", 36)
        35
    """
    digit = to_digit(char)
    if digit >= radix:
        return NOT_A_DIGIT
    return digit


# =============================================================================
# ЦИФРА → СИМВОЛ
# =============================================================================


def digit_char(digit: int) -> str:
    """
    Символ для значения цифры (нижний регистр).

    Raises:
        ValueError: Если digit вне [0, 35]
    """
    if not 0 <= digit < len(DIGITS):
        raise ValueError(f"digit must be in [0, {len(DIGITS) - 1}], got {digit}")
    return DIGITS[digit]


def pop_digit(num: int, radix: int) -> tuple[int, int]:
    """
    Отделение младшей цифры неотрицательной величины.

    Args:
        num: Неотрицательная величина
        radix: Основание

    Returns:
        (частное, младшая цифра)

    Examples:
        >>> pop_digit(12345, 10)
        (1234, 5)
        >>> pop_digit(255, 16)
        (15, 15)
    """
    return divmod(num, radix)
