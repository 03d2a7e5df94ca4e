"""Parser — разбор дробной строки в масштабированное int64.

Строка вида [+|-]mantissa[.fraction] разбирается в целое, "умноженное" на
radix ** frac. Например, для frac=2, radix=10: "123.45" → 12345, а "123.456"
отклоняется, т.к. превышает отведённую точность.

State machine:
- SIGN → MANT_START (знак) | MANT (цифра)
- MANT_START → MANT (цифра)
- MANT → MANT (цифра) | FRAC_START (точка)
- FRAC_START → FRAC (цифра)
- FRAC → FRAC (цифра)

Допустимые конечные состояния: MANT, FRAC.
"""

import logging
from enum import Enum
from typing import Final, FrozenSet, Mapping, Optional, Tuple, Union

from src.core.math.digits import (
    INT64_MAX,
    INT64_MIN,
    NOT_A_DIGIT,
    digit_value,
    is_supported_radix,
)
from src.fracnum.errors import (
    EmptyInputError,
    Int64OverflowError,
    Int64UnderflowError,
    InvalidDigitError,
    PrecisionExceededError,
    UnexpectedEndOfInputError,
    UnsupportedRadixError,
    reject,
    validate_frac,
)

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class ParseStep(str, Enum):
    """Состояние разбора."""

    SIGN = "SIGN"
    MANT_START = "MANT_START"
    MANT = "MANT"
    FRAC_START = "FRAC_START"
    FRAC = "FRAC"


class CharClass(str, Enum):
    """Класс входного символа относительно основания."""

    SIGN = "SIGN"
    DOT = "DOT"
    DIGIT = "DIGIT"
    OTHER = "OTHER"


TRANSITIONS: Final[Mapping[Tuple[ParseStep, CharClass], ParseStep]] = {
    (ParseStep.SIGN, CharClass.SIGN): ParseStep.MANT_START,
    (ParseStep.SIGN, CharClass.DIGIT): ParseStep.MANT,
    (ParseStep.MANT_START, CharClass.DIGIT): ParseStep.MANT,
    (ParseStep.MANT, CharClass.DIGIT): ParseStep.MANT,
    (ParseStep.MANT, CharClass.DOT): ParseStep.FRAC_START,
    (ParseStep.FRAC_START, CharClass.DIGIT): ParseStep.FRAC,
    (ParseStep.FRAC, CharClass.DIGIT): ParseStep.FRAC,
}

ACCEPTING_STEPS: Final[FrozenSet[ParseStep]] = frozenset({ParseStep.MANT, ParseStep.FRAC})


def classify_char(char: str, radix: int) -> CharClass:
    """Классификация символа; буква/цифра вне основания → OTHER."""
    if char == "+" or char == "-":
        return CharClass.SIGN
    if char == ".":
        return CharClass.DOT
    if digit_value(char, radix) != NOT_A_DIGIT:
        return CharClass.DIGIT
    return CharClass.OTHER


def next_step(step: ParseStep, char_class: CharClass) -> Optional[ParseStep]:
    """
    Единственная функция перехода.

    Returns:
        Следующее состояние или None, если символ недопустим в состоянии step
    """
    return TRANSITIONS.get((step, char_class))


def _accumulate(num: int, radix: int, sign: int, digit: int, text: str, frac: int) -> int:
    """num * radix + sign * digit с контролем границ int64."""
    result = num * radix + sign * digit
    if sign > 0 and result > INT64_MAX:
        raise reject(Int64OverflowError(text, radix, frac), logger)
    if sign < 0 and result < INT64_MIN:
        raise reject(Int64UnderflowError(text, radix, frac), logger)
    return result


def parse_frac(text: str, frac: int, radix: int) -> int:
    """
    Разбор дробной строки в масштабированное целое.

    Лишние цифры дробной части (дальше frac-й) допускаются только если все
    они равны 0; недостающие дополняются нулями, так что результат всегда
    содержит ровно frac дробных разрядов.

    Args:
        text: Текст вида [+|-]digits[.digits]
        frac: Число дробных разрядов (>= 0)
        radix: Основание [2, 36]

    Returns:
        Масштабированное целое в диапазоне int64

    Raises:
        EmptyInputError: Пустой текст
        UnsupportedRadixError: radix вне [2, 36]
        InvalidDigitError: Недопустимый символ (с символом и позицией)
        PrecisionExceededError: Ненулевая цифра дальше frac-й позиции
        Int64OverflowError / Int64UnderflowError: Выход за пределы int64
        UnexpectedEndOfInputError: Текст закончился без цифр в текущей части
        ValueError: frac < 0

    Examples:
        >>> parse_frac("123.45", 2, 10)
        12345
        >>> parse_frac("-123.4", 2, 10)
        -12340
        >>> parse_frac("FF", 0, 16)
        255
    """
    if len(text) == 0:
        raise reject(EmptyInputError(radix, frac), logger)
    if not is_supported_radix(radix):
        raise reject(UnsupportedRadixError(text, radix, frac), logger)
    validate_frac(frac, text)

    sign = 1
    num = 0
    frac_digits = 0
    step = ParseStep.SIGN

    for position, char in enumerate(text):
        char_class = classify_char(char, radix)
        new_step = next_step(step, char_class)
        if new_step is None:
            raise reject(InvalidDigitError(text, radix, frac, char, position), logger)
        step = new_step

        if char_class == CharClass.SIGN:
            if char == "-":
                sign = -1
            continue
        if char_class == CharClass.DOT:
            continue

        digit = digit_value(char, radix)

        if step == ParseStep.FRAC:
            frac_digits += 1
            if frac_digits > frac:
                # Нули за пределами точности не несут информации
                if digit == 0:
                    continue
                raise reject(PrecisionExceededError(text, radix, frac), logger)

        num = _accumulate(num, radix, sign, digit, text, frac)

    if step not in ACCEPTING_STEPS:
        raise reject(UnexpectedEndOfInputError(text, radix, frac), logger)

    if num != 0:
        for _ in range(frac_digits, frac):
            num = _accumulate(num, radix, sign, 0, text, frac)

    return num


def unmarshal_frac(src: BytesLike, frac: int, radix: int) -> int:
    """То же, что parse_frac, но для байтов (UTF-8; битые байты → U+FFFD)."""
    return parse_frac(bytes(src).decode("utf-8", errors="replace"), frac, radix)


# =============================================================================
# FIXED-RADIX SHORTCUTS
# =============================================================================


def parse_bin(text: str, frac: int) -> int:
    """parse_frac(text, frac, 2)"""
    return parse_frac(text, frac, 2)


def parse_oct(text: str, frac: int) -> int:
    """parse_frac(text, frac, 8)"""
    return parse_frac(text, frac, 8)


def parse_dec(text: str, frac: int) -> int:
    """parse_frac(text, frac, 10)"""
    return parse_frac(text, frac, 10)


def parse_hex(text: str, frac: int) -> int:
    """parse_frac(text, frac, 16)"""
    return parse_frac(text, frac, 16)


def unmarshal_bin(src: BytesLike, frac: int) -> int:
    """unmarshal_frac(src, frac, 2)"""
    return unmarshal_frac(src, frac, 2)


def unmarshal_oct(src: BytesLike, frac: int) -> int:
    """unmarshal_frac(src, frac, 8)"""
    return unmarshal_frac(src, frac, 8)


def unmarshal_dec(src: BytesLike, frac: int) -> int:
    """unmarshal_frac(src, frac, 10)"""
    return unmarshal_frac(src, frac, 10)


def unmarshal_hex(src: BytesLike, frac: int) -> int:
    """unmarshal_frac(src, frac, 16)"""
    return unmarshal_frac(src, frac, 16)
