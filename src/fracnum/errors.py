"""
Errors — Иерархия ошибок разбора и форматирования

Каждая ошибка:
- наследует FracError (а значит и ValueError)
- несёт kind (FracErrorKind) для ветвления без isinstance
- несёт исходные text / radix / frac для воспроизведения

Ни одна ошибка не подавляется внутри библиотеки: всё пробрасывается
непосредственному вызывающему.
"""

import logging
from enum import Enum
from typing import Optional


# =============================================================================
# ENUMS
# =============================================================================


class FracErrorKind(str, Enum):
    """Вид ошибки разбора/форматирования."""

    EMPTY_INPUT = "EMPTY_INPUT"
    UNSUPPORTED_RADIX = "UNSUPPORTED_RADIX"
    INVALID_DIGIT = "INVALID_DIGIT"
    PRECISION_EXCEEDED = "PRECISION_EXCEEDED"
    OVERFLOW = "OVERFLOW"
    UNDERFLOW = "UNDERFLOW"
    UNEXPECTED_END_OF_INPUT = "UNEXPECTED_END_OF_INPUT"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FracError(ValueError):
    """
    Базовая ошибка fracnum.

    Attributes:
        kind: Вид ошибки
        text: Исходный текст (для форматтера: str(value))
        radix: Основание вызова
        frac: Размер дробной части вызова
    """

    kind: FracErrorKind

    def __init__(self, text: str, radix: int, frac: int, reason: str):
        self.text = text
        self.radix = radix
        self.frac = frac
        self.reason = reason
        super().__init__(
            f"can't convert {text!r} (radix {radix}, fraction {frac}): {reason}"
        )


class EmptyInputError(FracError):
    """Пустой текст на входе parse."""

    kind = FracErrorKind.EMPTY_INPUT

    def __init__(self, radix: int, frac: int):
        super().__init__("", radix, frac, "empty input")


class UnsupportedRadixError(FracError):
    """Основание вне [2, 36]; проверяется до любой другой обработки."""

    kind = FracErrorKind.UNSUPPORTED_RADIX

    def __init__(self, text: str, radix: int, frac: int):
        super().__init__(text, radix, frac, f"unsupported radix {radix}")


class InvalidDigitError(FracError):
    """
    Символ не является цифрой данного основания.

    Attributes:
        char: Недопустимый символ
        position: Индекс символа в тексте (с нуля)
    """

    kind = FracErrorKind.INVALID_DIGIT

    def __init__(self, text: str, radix: int, frac: int, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(
            text, radix, frac, f"found non-digit character {char!r} at position {position}"
        )


class PrecisionExceededError(FracError):
    """Ненулевая цифра дальше frac-й позиции дробной части."""

    kind = FracErrorKind.PRECISION_EXCEEDED

    def __init__(self, text: str, radix: int, frac: int):
        super().__init__(
            text, radix, frac, "fractional part exceeds allotted fractional precision"
        )


class Int64OverflowError(FracError, OverflowError):
    """Накопление превысило INT64_MAX."""

    kind = FracErrorKind.OVERFLOW

    def __init__(self, text: str, radix: int, frac: int):
        super().__init__(text, radix, frac, "overflow of int64")


class Int64UnderflowError(FracError, OverflowError):
    """Накопление опустилось ниже INT64_MIN."""

    kind = FracErrorKind.UNDERFLOW

    def __init__(self, text: str, radix: int, frac: int):
        super().__init__(text, radix, frac, "underflow of int64")


class UnexpectedEndOfInputError(FracError):
    """Текст закончился, не дойдя до допустимого конечного состояния."""

    kind = FracErrorKind.UNEXPECTED_END_OF_INPUT

    def __init__(self, text: str, radix: int, frac: int):
        super().__init__(text, radix, frac, "unexpected end of input")


def validate_frac(frac: int, text: Optional[str] = None) -> None:
    """
    Валидация размера дробной части.

    Raises:
        ValueError: Если frac < 0
    """
    if frac < 0:
        context = f" (input {text!r})" if text is not None else ""
        raise ValueError(f"frac must be non-negative, got {frac}{context}")


def reject(error: FracError, log: logging.Logger) -> FracError:
    """Фиксация отказа в логе (DEBUG) перед raise."""
    log.debug(
        "fracnum rejected: kind=%s text=%r radix=%s frac=%s",
        error.kind.value,
        error.text,
        error.radix,
        error.frac,
    )
    return error
