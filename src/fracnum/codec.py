"""
FracFormat — закреплённые параметры (frac, radix)

Immutable Pydantic модель для вызывающих, которые хранят формат числа в
конфигурации (JSON/dict) и не хотят передавать frac и radix в каждый вызов.

Пример:
    usd = FracFormat.decimal(2)
    usd.parse("19.99")       # 1999
    usd.format(1999)         # "19.99"
    FracFormat.model_validate({"frac": 8, "radix": 10})
"""

from typing import Optional

from pydantic import BaseModel, Field

from src.core.math.digits import RADIX_MAX, RADIX_MIN
from src.fracnum.formatter import append_frac, format_frac
from src.fracnum.parser import BytesLike, parse_frac, unmarshal_frac


class FracFormat(BaseModel):
    """
    Формат числа с фиксированной дробной частью.

    Один и тот же FracFormat должен использоваться и для parse, и для
    format: frac не хранится в самом целом.
    """

    frac: int = Field(..., ge=0, description="Число дробных разрядов")
    radix: int = Field(
        default=10, ge=RADIX_MIN, le=RADIX_MAX, description="Основание [2, 36]"
    )

    model_config = {"frozen": True}

    @classmethod
    def binary(cls, frac: int) -> "FracFormat":
        return cls(frac=frac, radix=2)

    @classmethod
    def octal(cls, frac: int) -> "FracFormat":
        return cls(frac=frac, radix=8)

    @classmethod
    def decimal(cls, frac: int) -> "FracFormat":
        return cls(frac=frac, radix=10)

    @classmethod
    def hexadecimal(cls, frac: int) -> "FracFormat":
        return cls(frac=frac, radix=16)

    def parse(self, text: str) -> int:
        """parse_frac с закреплёнными frac/radix."""
        return parse_frac(text, self.frac, self.radix)

    def unmarshal(self, src: BytesLike) -> int:
        """unmarshal_frac с закреплёнными frac/radix."""
        return unmarshal_frac(src, self.frac, self.radix)

    def format(self, value: int) -> str:
        """format_frac с закреплёнными frac/radix."""
        return format_frac(value, self.frac, self.radix)

    def append(self, buf: Optional[bytearray], value: int) -> bytearray:
        """append_frac с закреплёнными frac/radix."""
        return append_frac(buf, value, self.frac, self.radix)
