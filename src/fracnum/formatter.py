"""
Formatter — масштабированное int64 → минимальная дробная строка

Целое "делится" на radix ** frac. Например, для frac=2, radix=10:
12345 → "123.45", 12300 → "123".

Каноническая форма:
- Хвостовые нули дробной части всегда отбрасываются
- Ведущие цифры целой части никогда не отбрасываются ("0.05", не ".05")
- Точка не выводится, если вся дробная часть нулевая

parse_frac является левым обратным к format_frac на канонических строках.
"""

import logging
from typing import List, Optional

from src.core.math.digits import (
    INT64_MIN,
    digit_char,
    fits_int64,
    is_supported_radix,
    pop_digit,
)
from src.fracnum.errors import (
    Int64OverflowError,
    Int64UnderflowError,
    UnsupportedRadixError,
    reject,
    validate_frac,
)

logger = logging.getLogger(__name__)


def _emit_reversed(value: int, frac: int, radix: int) -> List[str]:
    """Символы результата от младшего к старшему."""
    out: List[str] = []
    magnitude = abs(value)

    trailing = True
    remaining = frac
    while remaining > 0:
        remaining -= 1
        magnitude, digit = pop_digit(magnitude, radix)

        if digit == 0 and trailing:
            continue
        trailing = False

        out.append(digit_char(digit))
        if remaining == 0:
            out.append(".")

    while magnitude >= radix:
        magnitude, digit = pop_digit(magnitude, radix)
        out.append(digit_char(digit))
    out.append(digit_char(magnitude))

    if value < 0:
        out.append("-")
    return out


def _check_args(value: int, frac: int, radix: int) -> None:
    if not is_supported_radix(radix):
        raise reject(UnsupportedRadixError(str(value), radix, frac), logger)
    validate_frac(frac)
    if not fits_int64(value):
        if value < INT64_MIN:
            raise reject(Int64UnderflowError(str(value), radix, frac), logger)
        raise reject(Int64OverflowError(str(value), radix, frac), logger)


def format_frac(value: int, frac: int, radix: int) -> str:
    """
    Форматирование масштабированного целого как дробного числа.

    Args:
        value: Масштабированное целое (int64)
        frac: Число дробных разрядов (>= 0)
        radix: Основание [2, 36]

    Returns:
        Минимальная строка без хвостовых дробных нулей

    Raises:
        UnsupportedRadixError: radix вне [2, 36]
        Int64OverflowError / Int64UnderflowError: value вне int64
        ValueError: frac < 0

    Examples:
        >>> format_frac(12345, 2, 10)
        '123.45'
        >>> format_frac(12300, 2, 10)
        '123'
        >>> format_frac(-5, 3, 10)
        '-0.005'
        >>> format_frac(255, 0, 16)
        'ff'
    """
    _check_args(value, frac, radix)
    return "".join(reversed(_emit_reversed(value, frac, radix)))


def append_frac(
    buf: Optional[bytearray], value: int, frac: int, radix: int
) -> bytearray:
    """
    То же, что format_frac, но дописывает ASCII-текст в буфер.

    Буфер расширяется на месте и возвращается; при buf=None создаётся новый.
    При ошибке буфер не изменяется.
    """
    _check_args(value, frac, radix)
    chars = _emit_reversed(value, frac, radix)
    if buf is None:
        buf = bytearray()
    buf.extend("".join(reversed(chars)).encode("ascii"))
    return buf


# =============================================================================
# FIXED-RADIX SHORTCUTS
# =============================================================================


def format_bin(value: int, frac: int) -> str:
    """format_frac(value, frac, 2)"""
    return format_frac(value, frac, 2)


def format_oct(value: int, frac: int) -> str:
    """format_frac(value, frac, 8)"""
    return format_frac(value, frac, 8)


def format_dec(value: int, frac: int) -> str:
    """format_frac(value, frac, 10)"""
    return format_frac(value, frac, 10)


def format_hex(value: int, frac: int) -> str:
    """format_frac(value, frac, 16)"""
    return format_frac(value, frac, 16)


def append_bin(buf: Optional[bytearray], value: int, frac: int) -> bytearray:
    """append_frac(buf, value, frac, 2)"""
    return append_frac(buf, value, frac, 2)


def append_oct(buf: Optional[bytearray], value: int, frac: int) -> bytearray:
    """append_frac(buf, value, frac, 8)"""
    return append_frac(buf, value, frac, 8)


def append_dec(buf: Optional[bytearray], value: int, frac: int) -> bytearray:
    """append_frac(buf, value, frac, 10)"""
    return append_frac(buf, value, frac, 10)


def append_hex(buf: Optional[bytearray], value: int, frac: int) -> bytearray:
    """append_frac(buf, value, frac, 16)"""
    return append_frac(buf, value, frac, 16)
