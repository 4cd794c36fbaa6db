"""
Primitive specs — метаданные built-in numeric types

Единственный источник параметров для conformance templates:
ширина, знаковость, границы (integer) и раскладка битов (IEEE-754 float).
Все производные значения вычисляются из полей, без таблиц констант.
"""

import math
from typing import Final

from pydantic import BaseModel, Field, field_validator, model_validator


INT_WIDTHS: Final[tuple[int, ...]] = (8, 16, 32, 64, 128)


# =============================================================================
# INTEGER SPEC
# =============================================================================


class IntSpec(BaseModel):
    """
    Fixed-width two's-complement integer.

    Immutable модель.
    """

    name: str = Field(..., min_length=1, description="Имя типа (i8, u64, ...)")
    bits: int = Field(..., description="Ширина в битах")
    signed: bool = Field(..., description="Знаковый тип")

    model_config = {"frozen": True}

    @field_validator("bits")
    @classmethod
    def validate_bits(cls, v: int) -> int:
        if v not in INT_WIDTHS:
            raise ValueError(f"bits must be one of {INT_WIDTHS}, got {v}")
        return v

    @property
    def modulus(self) -> int:
        return 1 << self.bits

    @property
    def mask(self) -> int:
        return self.modulus - 1

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else self.mask

    @property
    def byte_width(self) -> int:
        return self.bits // 8

    def contains(self, n: int) -> bool:
        return self.min <= n <= self.max

    def wrap(self, n: int) -> int:
        """n по модулю 2^bits в диапазоне [min, max]."""
        return ((n - self.min) & self.mask) + self.min

    def saturate(self, n: int) -> int:
        """n, ограниченное [min, max]."""
        if n < self.min:
            return self.min
        if n > self.max:
            return self.max
        return n


# =============================================================================
# FLOAT SPEC
# =============================================================================


class FloatSpec(BaseModel):
    """
    IEEE-754 binary float.

    Все константы (inf, NaN, MAX, EPSILON, ...) выводятся из раскладки
    битов: 1 sign bit, exponent_bits, fraction_bits.
    """

    name: str = Field(..., min_length=1, description="Имя типа (f32, f64)")
    bits: int = Field(..., description="Ширина в битах")
    exponent_bits: int = Field(..., gt=0, description="Ширина поля экспоненты")
    fraction_bits: int = Field(..., gt=0, description="Ширина поля мантиссы (без скрытого бита)")

    model_config = {"frozen": True}

    @field_validator("bits")
    @classmethod
    def validate_bits(cls, v: int) -> int:
        if v not in (32, 64):
            raise ValueError(f"bits must be 32 or 64, got {v}")
        return v

    @model_validator(mode="after")
    def validate_layout(self) -> "FloatSpec":
        if 1 + self.exponent_bits + self.fraction_bits != self.bits:
            raise ValueError(
                f"1 + exponent_bits + fraction_bits must equal bits ({self.bits}), "
                f"got 1 + {self.exponent_bits} + {self.fraction_bits}"
            )
        return self

    @property
    def numpy_name(self) -> str:
        return f"float{self.bits}"

    @property
    def bits_numpy_name(self) -> str:
        return f"uint{self.bits}"

    @property
    def byte_width(self) -> int:
        return self.bits // 8

    @property
    def mantissa_digits(self) -> int:
        """Число значащих двоичных цифр (включая скрытый бит)."""
        return self.fraction_bits + 1

    @property
    def bias(self) -> int:
        return (1 << (self.exponent_bits - 1)) - 1

    @property
    def sign_mask(self) -> int:
        return 1 << (self.bits - 1)

    @property
    def fraction_mask(self) -> int:
        return (1 << self.fraction_bits) - 1

    @property
    def exponent_field_max(self) -> int:
        return (1 << self.exponent_bits) - 1

    @property
    def exponent_mask(self) -> int:
        return self.exponent_field_max << self.fraction_bits

    @property
    def infinity_bits(self) -> int:
        return self.exponent_mask

    @property
    def nan_bits(self) -> int:
        """Quiet NaN: все биты экспоненты и старший бит мантиссы."""
        return self.exponent_mask | (1 << (self.fraction_bits - 1))

    @property
    def max_bits(self) -> int:
        return ((self.exponent_field_max - 1) << self.fraction_bits) | self.fraction_mask

    @property
    def min_positive_bits(self) -> int:
        return 1 << self.fraction_bits

    @property
    def epsilon_bits(self) -> int:
        return (self.bias - self.fraction_bits) << self.fraction_bits

    @property
    def one_bits(self) -> int:
        return self.bias << self.fraction_bits

    @property
    def max_finite_int(self) -> int:
        """MAX как точное целое: (2^p - 1) * 2^(bias - p + 1)."""
        p = self.mantissa_digits
        return ((1 << p) - 1) << (self.bias - p + 1)

    def round_int(self, n: int) -> float:
        """
        Целое n, округлённое к ближайшему значению формата (ties to even).

        Returns:
            Python float, точно равный округлённому значению;
            ±inf если результат больше MAX
        """
        if n == 0:
            return 0.0

        magnitude = abs(n)
        shift = magnitude.bit_length() - self.mantissa_digits
        if shift > 0:
            quotient = magnitude >> shift
            remainder = magnitude & ((1 << shift) - 1)
            half = 1 << (shift - 1)
            if remainder > half or (remainder == half and quotient & 1):
                quotient += 1
            magnitude = quotient << shift

        if magnitude > self.max_finite_int:
            return math.inf if n > 0 else -math.inf
        return float(magnitude) if n > 0 else -float(magnitude)


# =============================================================================
# BUILT-IN SPECS
# =============================================================================

I8: Final[IntSpec] = IntSpec(name="i8", bits=8, signed=True)
I16: Final[IntSpec] = IntSpec(name="i16", bits=16, signed=True)
I32: Final[IntSpec] = IntSpec(name="i32", bits=32, signed=True)
I64: Final[IntSpec] = IntSpec(name="i64", bits=64, signed=True)
I128: Final[IntSpec] = IntSpec(name="i128", bits=128, signed=True)

U8: Final[IntSpec] = IntSpec(name="u8", bits=8, signed=False)
U16: Final[IntSpec] = IntSpec(name="u16", bits=16, signed=False)
U32: Final[IntSpec] = IntSpec(name="u32", bits=32, signed=False)
U64: Final[IntSpec] = IntSpec(name="u64", bits=64, signed=False)
U128: Final[IntSpec] = IntSpec(name="u128", bits=128, signed=False)

F32: Final[FloatSpec] = FloatSpec(name="f32", bits=32, exponent_bits=8, fraction_bits=23)
F64: Final[FloatSpec] = FloatSpec(name="f64", bits=64, exponent_bits=11, fraction_bits=52)
