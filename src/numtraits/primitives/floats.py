"""
Float conformance templates — core и full tier для IEEE-754 binary floats

FloatCoreConformance не использует math backend: константы, классификация,
знак и декомпозиция работают через битовое представление (numpy view),
арифметика — через numpy scalars под np.errstate, поэтому 1/0 == inf
и 0/0 == nan без предупреждений.

FloatConformance добавляет Real (через внедрённый MathBackend) и Euclid.
Результаты float32 вычисляются в binary64 и округляются до single precision.
"""

import math
import operator
from typing import Any, Callable, Final

import numpy as np

from numtraits.backend.base import MathBackend
from numtraits.base import Conformance
from numtraits.capabilities.bits import ToFromBytes
from numtraits.capabilities.cast import NumCast
from numtraits.capabilities.coerced import Coerced
from numtraits.capabilities.dist import Distance, Norm
from numtraits.capabilities.euclid import Euclid
from numtraits.capabilities.float import Float, FloatCore, FpCategory
from numtraits.capabilities.identities import Num, Two
from numtraits.capabilities.pow import Inv, Pow
from numtraits.capabilities.safe_cast import Layout, NumberKind, SafeCast
from numtraits.capabilities.sign import Signed
from numtraits.primitives.parsing import parse_float
from numtraits.primitives.specs import FloatSpec
from numtraits.registry import CapabilityError

DEGREES_PER_RADIAN: Final[float] = 180.0 / math.pi
RADIANS_PER_DEGREE: Final[float] = math.pi / 180.0


# =============================================================================
# CORE TIER
# =============================================================================


class FloatCoreConformance(
    Conformance,
    Num,
    Two,
    Signed,
    NumCast,
    SafeCast,
    Coerced,
    Pow,
    Inv,
    FloatCore,
    ToFromBytes,
    Norm,
    Distance,
):
    """
    Conformance float типа без math backend.

    Args:
        numeric_type: Тип значений (np.float32, np.float64, float)
        spec: Раскладка битов формата
    """

    def __init__(self, numeric_type: type, spec: FloatSpec) -> None:
        super().__init__(numeric_type)
        self.spec = spec
        self._dtype = np.dtype(spec.numpy_name)
        self._bits_dtype = np.dtype(spec.bits_numpy_name)
        self._scalar = self._dtype.type

    def coerce(self, value: Any) -> Any:
        """
        Значение типа или Python int/float литерал.

        Литерал округляется к ближайшему значению формата, как числовой
        литерал в исходном коде.

        Raises:
            TypeError: Значение другого типа (включая bool и другие ширины)
        """
        if type(value) is self.numeric_type:
            return value
        if type(value) is int:
            return self.as_from_int(value)
        if type(value) is float:
            return self.as_from_float(value)
        return super().coerce(value)

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _make(self, value: Any) -> Any:
        with np.errstate(over="ignore"):
            return self.numeric_type(self._scalar(value))

    def _np(self, x: Any) -> Any:
        return self._scalar(self.coerce(x))

    def _binary(self, op: Callable[[Any, Any], Any], x: Any, y: Any) -> Any:
        with np.errstate(all="ignore"):
            return self._make(op(self._np(x), self._np(y)))

    def _fields(self, x: Any) -> tuple[int, int, int]:
        """(sign, biased exponent, fraction) битового представления."""
        bits = self.to_bits(x)
        spec = self.spec
        sign = bits >> (spec.bits - 1)
        exponent = (bits & spec.exponent_mask) >> spec.fraction_bits
        return sign, exponent, bits & spec.fraction_mask

    def _scale(self, x: Any, factor: float) -> Any:
        with np.errstate(all="ignore"):
            return self._make(self._np(x) * self._scalar(factor))

    # =========================================================================
    # NUM
    # =========================================================================

    def zero(self) -> Any:
        return self._make(0.0)

    def one(self) -> Any:
        return self._make(1.0)

    def two(self) -> Any:
        return self._make(2.0)

    def add(self, x: Any, y: Any) -> Any:
        return self._binary(operator.add, x, y)

    def sub(self, x: Any, y: Any) -> Any:
        return self._binary(operator.sub, x, y)

    def mul(self, x: Any, y: Any) -> Any:
        return self._binary(operator.mul, x, y)

    def div(self, x: Any, y: Any) -> Any:
        return self._binary(operator.truediv, x, y)

    def rem(self, x: Any, y: Any) -> Any:
        return self._binary(np.fmod, x, y)

    def from_str_radix(self, text: str, radix: int) -> Any:
        return self.as_from_float(parse_float(text, radix))

    # =========================================================================
    # CONSTANTS
    # =========================================================================

    def nan(self) -> Any:
        return self.from_bits(self.spec.nan_bits)

    def infinity(self) -> Any:
        return self.from_bits(self.spec.infinity_bits)

    def neg_infinity(self) -> Any:
        return self.from_bits(self.spec.infinity_bits | self.spec.sign_mask)

    def neg_zero(self) -> Any:
        return self.from_bits(self.spec.sign_mask)

    def min_value(self) -> Any:
        return self.from_bits(self.spec.max_bits | self.spec.sign_mask)

    def min_positive_value(self) -> Any:
        return self.from_bits(self.spec.min_positive_bits)

    def epsilon(self) -> Any:
        return self.from_bits(self.spec.epsilon_bits)

    def max_value(self) -> Any:
        return self.from_bits(self.spec.max_bits)

    # =========================================================================
    # BITS
    # =========================================================================

    def to_bits(self, x: Any) -> int:
        """
        Битовое представление как беззнаковое целое.

        Examples:
            >>> FloatCoreConformance(np.float32, F32).to_bits(np.float32(1.0))
            1065353216
        """
        value = np.array(self._np(x), dtype=self._dtype)
        return int(value.view(self._bits_dtype).item())

    def from_bits(self, bits: int) -> Any:
        """
        Raises:
            ValueError: bits вне [0, 2**width)
        """
        bits = operator.index(bits)
        if not 0 <= bits < (1 << self.spec.bits):
            raise ValueError(f"bits must be in [0, 2**{self.spec.bits}), got {bits}")
        value = np.array(bits, dtype=self._bits_dtype).view(self._dtype)
        return self.numeric_type(value[()])

    def integer_decode(self, x: Any) -> tuple[int, int, int]:
        sign_bit, exponent, fraction = self._fields(x)
        if exponent == 0:
            mantissa = fraction << 1
        else:
            mantissa = fraction | (1 << self.spec.fraction_bits)
        exponent -= self.spec.bias + self.spec.fraction_bits
        return mantissa, exponent, -1 if sign_bit else 1

    def to_bytes(self, x: Any, byteorder: str) -> bytes:
        return self.to_bits(x).to_bytes(self.spec.byte_width, byteorder)

    def from_bytes(self, data: bytes, byteorder: str) -> Any:
        data = bytes(data)
        if len(data) != self.spec.byte_width:
            raise ValueError(
                f"{self.spec.name} requires exactly {self.spec.byte_width} bytes, got {len(data)}"
            )
        return self.from_bits(int.from_bytes(data, byteorder))

    # =========================================================================
    # CLASSIFICATION
    # =========================================================================

    def classify(self, x: Any) -> FpCategory:
        _, exponent, fraction = self._fields(x)
        if exponent == self.spec.exponent_field_max:
            return FpCategory.NAN if fraction else FpCategory.INFINITE
        if exponent == 0:
            return FpCategory.SUBNORMAL if fraction else FpCategory.ZERO
        return FpCategory.NORMAL

    def is_nan(self, x: Any) -> bool:
        return self.classify(x) is FpCategory.NAN

    def is_infinite(self, x: Any) -> bool:
        return self.classify(x) is FpCategory.INFINITE

    def is_finite(self, x: Any) -> bool:
        return self.classify(x) not in (FpCategory.NAN, FpCategory.INFINITE)

    def is_sign_positive(self, x: Any) -> bool:
        return not self.is_sign_negative(x)

    def is_sign_negative(self, x: Any) -> bool:
        sign_bit, _, _ = self._fields(x)
        return sign_bit == 1

    # =========================================================================
    # SIGN
    # =========================================================================

    def is_positive(self, x: Any) -> bool:
        return bool(self._np(x) > 0)

    def is_negative(self, x: Any) -> bool:
        return bool(self._np(x) < 0)

    def abs(self, x: Any) -> Any:
        return self.from_bits(self.to_bits(x) & ~self.spec.sign_mask)

    def signum(self, x: Any) -> Any:
        """±1 по знаку; ±0.0 и NaN возвращаются как есть."""
        x = self.coerce(x)
        if self.is_nan(x) or self._np(x) == 0:
            return x
        return self.copysign(self.one(), x)

    def abs_sub(self, x: Any, y: Any) -> Any:
        a, b = self._np(x), self._np(y)
        if a <= b:
            return self.zero()
        with np.errstate(all="ignore"):
            return self._make(a - b)

    # =========================================================================
    # OPERATIONS
    # =========================================================================

    def min(self, x: Any, y: Any) -> Any:
        with np.errstate(invalid="ignore"):
            return self._make(np.fmin(self._np(x), self._np(y)))

    def max(self, x: Any, y: Any) -> Any:
        with np.errstate(invalid="ignore"):
            return self._make(np.fmax(self._np(x), self._np(y)))

    def clamp(self, x: Any, lo: Any, hi: Any) -> Any:
        """
        Raises:
            ValueError: lo > hi или один из концов NaN
        """
        value, low, high = self._np(x), self._np(lo), self._np(hi)
        if not low <= high:
            raise ValueError(f"clamp requires lo <= hi, got lo={low}, hi={high}")
        if value < low:
            value = low
        if value > high:
            value = high
        return self._make(value)

    def copysign(self, x: Any, sign: Any) -> Any:
        sign_mask = self.spec.sign_mask
        magnitude = self.to_bits(x) & ~sign_mask
        return self.from_bits(magnitude | (self.to_bits(sign) & sign_mask))

    def recip(self, x: Any) -> Any:
        return self.div(self.one(), x)

    def powi(self, x: Any, n: int) -> Any:
        n = operator.index(n)
        base = self._np(x)
        result = self._scalar(1.0)
        k = abs(n)
        with np.errstate(all="ignore"):
            while k:
                if k & 1:
                    result = result * base
                k >>= 1
                if k:
                    base = base * base
            if n < 0:
                result = self._scalar(1.0) / result
        return self._make(result)

    def to_degrees(self, x: Any) -> Any:
        return self._scale(x, DEGREES_PER_RADIAN)

    def to_radians(self, x: Any) -> Any:
        return self._scale(x, RADIANS_PER_DEGREE)

    # =========================================================================
    # CAST
    # =========================================================================

    def to_exact(self, x: Any) -> float:
        return float(self.coerce(x))

    def from_int(self, n: int) -> Any | None:
        rounded = self.spec.round_int(n)
        if not math.isfinite(rounded) or int(rounded) != n:
            return None
        return self._make(rounded)

    def from_float(self, f: float) -> Any | None:
        if not math.isfinite(f):
            return self._make(f)
        value = self._make(f)
        return value if float(value) == f else None

    def as_from_int(self, n: int) -> Any:
        return self._make(self.spec.round_int(n))

    def as_from_float(self, f: float) -> Any:
        return self._make(f)

    # =========================================================================
    # SAFE CAST / NORM
    # =========================================================================

    def layout(self) -> Layout:
        return Layout(kind=NumberKind.FLOAT, bits=self.spec.bits, signed=True)

    def norm(self, x: Any) -> Any:
        return self.abs(x)

    def distance(self, x: Any, y: Any) -> Any:
        return self.abs(self.sub(x, y))

    # =========================================================================
    # POW / INV
    # =========================================================================

    def pow(self, base: Any, exp: Any) -> Any:
        """
        Целый показатель → powi. Дробный показатель требует full tier.

        Raises:
            CapabilityError: Показатель float без full float tier
        """
        if isinstance(exp, (int, np.integer)) and not isinstance(exp, bool):
            return self.powi(base, exp)
        raise CapabilityError(
            f"{self.spec.name} pow with a {type(exp).__name__} exponent requires the full float tier"
        )

    def inv(self, x: Any) -> Any:
        return self.div(self.one(), x)


# =============================================================================
# FULL TIER
# =============================================================================


class FloatConformance(FloatCoreConformance, Float, Euclid):
    """
    Full float tier: FloatCore + Real через внедрённый MathBackend.

    Args:
        numeric_type: Тип значений
        spec: Раскладка битов формата
        backend: Реализация трансцендентных функций
    """

    def __init__(self, numeric_type: type, spec: FloatSpec, backend: MathBackend) -> None:
        super().__init__(numeric_type, spec)
        self.backend = backend

    def _apply(self, fn: Callable[..., float], *args: Any) -> Any:
        return self._make(fn(*(float(self.coerce(a)) for a in args)))

    # =========================================================================
    # ROUNDING
    # =========================================================================

    def floor(self, x: Any) -> Any:
        return self._apply(self.backend.floor, x)

    def ceil(self, x: Any) -> Any:
        return self._apply(self.backend.ceil, x)

    def trunc(self, x: Any) -> Any:
        return self._apply(self.backend.trunc, x)

    def round(self, x: Any) -> Any:
        """Half away from zero: 2.5 → 3.0, -2.5 → -3.0, -0.4 → -0.0."""
        value = float(self.coerce(x))
        truncated = self.backend.trunc(value)
        if abs(value - truncated) >= 0.5:
            truncated += math.copysign(1.0, value)
        return self._make(truncated)

    def fract(self, x: Any) -> Any:
        value = float(self.coerce(x))
        return self._make(value - self.backend.trunc(value))

    def mul_add(self, x: Any, a: Any, b: Any) -> Any:
        return self._apply(self.backend.mul_add, x, a, b)

    # =========================================================================
    # POWERS / LOGARITHMS
    # =========================================================================

    def sqrt(self, x: Any) -> Any:
        return self._apply(self.backend.sqrt, x)

    def cbrt(self, x: Any) -> Any:
        return self._apply(self.backend.cbrt, x)

    def powf(self, x: Any, y: Any) -> Any:
        return self._apply(self.backend.powf, x, y)

    def hypot(self, x: Any, y: Any) -> Any:
        return self._apply(self.backend.hypot, x, y)

    def exp(self, x: Any) -> Any:
        return self._apply(self.backend.exp, x)

    def exp2(self, x: Any) -> Any:
        return self._apply(self.backend.exp2, x)

    def exp_m1(self, x: Any) -> Any:
        return self._apply(self.backend.exp_m1, x)

    def ln(self, x: Any) -> Any:
        return self._apply(self.backend.ln, x)

    def log(self, x: Any, base: Any) -> Any:
        """Логарифм по произвольному основанию: ln(x) / ln(base)."""
        numerator = np.float64(self.backend.ln(float(self.coerce(x))))
        denominator = np.float64(self.backend.ln(float(self.coerce(base))))
        with np.errstate(all="ignore"):
            return self._make(numerator / denominator)

    def log2(self, x: Any) -> Any:
        return self._apply(self.backend.log2, x)

    def log10(self, x: Any) -> Any:
        return self._apply(self.backend.log10, x)

    def ln_1p(self, x: Any) -> Any:
        return self._apply(self.backend.ln_1p, x)

    # =========================================================================
    # TRIGONOMETRY
    # =========================================================================

    def sin(self, x: Any) -> Any:
        return self._apply(self.backend.sin, x)

    def cos(self, x: Any) -> Any:
        return self._apply(self.backend.cos, x)

    def tan(self, x: Any) -> Any:
        return self._apply(self.backend.tan, x)

    def asin(self, x: Any) -> Any:
        return self._apply(self.backend.asin, x)

    def acos(self, x: Any) -> Any:
        return self._apply(self.backend.acos, x)

    def atan(self, x: Any) -> Any:
        return self._apply(self.backend.atan, x)

    def atan2(self, y: Any, x: Any) -> Any:
        return self._apply(self.backend.atan2, y, x)

    def sinh(self, x: Any) -> Any:
        return self._apply(self.backend.sinh, x)

    def cosh(self, x: Any) -> Any:
        return self._apply(self.backend.cosh, x)

    def tanh(self, x: Any) -> Any:
        return self._apply(self.backend.tanh, x)

    def asinh(self, x: Any) -> Any:
        return self._apply(self.backend.asinh, x)

    def acosh(self, x: Any) -> Any:
        return self._apply(self.backend.acosh, x)

    def atanh(self, x: Any) -> Any:
        return self._apply(self.backend.atanh, x)

    # =========================================================================
    # POW / EUCLID
    # =========================================================================

    def pow(self, base: Any, exp: Any) -> Any:
        if isinstance(exp, (float, np.floating)):
            return self.powf(base, exp)
        return super().pow(base, exp)

    def div_euclid(self, x: Any, v: Any) -> Any:
        """
        Частное q такое, что x == q * v + rem_euclid(x, v).

        Examples:
            >>> FloatConformance(float, F64, NativeMathBackend()).div_euclid(-7.0, 4.0)
            -2.0
        """
        a, b = self._np(x), self._np(v)
        with np.errstate(all="ignore"):
            q = np.trunc(a / b)
            if np.fmod(a, b) < 0:
                q = q - 1 if b > 0 else q + 1
        return self._make(q)

    def rem_euclid(self, x: Any, v: Any) -> Any:
        """Неотрицательный остаток: 0 <= r < |v| для конечных x и v != 0."""
        a, b = self._np(x), self._np(v)
        with np.errstate(all="ignore"):
            r = np.fmod(a, b)
            if r < 0:
                r = r + np.abs(b)
        return self._make(r)
