"""fracnum — целые с фиксированной дробной частью ↔ текст.

Разбор и форматирование без округления, float и bignum-арифметики,
для оснований 2..36:
- parse_frac / unmarshal_frac: текст (или байты) → масштабированное int64
- format_frac / append_frac: масштабированное int64 → минимальный текст
- FracFormat: закреплённые (frac, radix) как immutable конфигурация
"""

from .codec import FracFormat
from .errors import (
    EmptyInputError,
    FracError,
    FracErrorKind,
    Int64OverflowError,
    Int64UnderflowError,
    InvalidDigitError,
    PrecisionExceededError,
    UnexpectedEndOfInputError,
    UnsupportedRadixError,
)
from .formatter import (
    append_bin,
    append_dec,
    append_frac,
    append_hex,
    append_oct,
    format_bin,
    format_dec,
    format_frac,
    format_hex,
    format_oct,
)
from .parser import (
    parse_bin,
    parse_dec,
    parse_frac,
    parse_hex,
    parse_oct,
    unmarshal_bin,
    unmarshal_dec,
    unmarshal_frac,
    unmarshal_hex,
    unmarshal_oct,
)

__all__ = [
    # Config
    "FracFormat",
    # Errors
    "FracError",
    "FracErrorKind",
    "EmptyInputError",
    "UnsupportedRadixError",
    "InvalidDigitError",
    "PrecisionExceededError",
    "Int64OverflowError",
    "Int64UnderflowError",
    "UnexpectedEndOfInputError",
    # Parser
    "parse_frac",
    "parse_bin",
    "parse_oct",
    "parse_dec",
    "parse_hex",
    "unmarshal_frac",
    "unmarshal_bin",
    "unmarshal_oct",
    "unmarshal_dec",
    "unmarshal_hex",
    # Formatter
    "format_frac",
    "format_bin",
    "format_oct",
    "format_dec",
    "format_hex",
    "append_frac",
    "append_bin",
    "append_oct",
    "append_dec",
    "append_hex",
]
