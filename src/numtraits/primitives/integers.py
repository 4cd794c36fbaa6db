"""
Integer conformance template — все capability sets для fixed-width integer

Один шаблон на все ширины: поведение определяется только IntSpec
(bits, signed, min, max). Операнды приводятся к Python int, результат
вычисляется точно и затем:
- wrapping: по модулю 2^bits
- checked: None если точный результат вне [min, max]
- saturating: ограничивается [min, max]
- overflowing: (wrapped, вышел ли точный результат из диапазона)

Деление усекается к нулю, остаток имеет знак делимого (-7 / 2 == -3,
-7 % 2 == -1). Для MIN / -1 переполняется частное, поэтому checked_rem
возвращает None, а overflowing_rem сообщает флаг переполнения.
"""

import math
import operator
from typing import Any

from numtraits.base import Conformance
from numtraits.capabilities.bits import PrimInt, ToFromBytes, WideningMul
from numtraits.capabilities.bounds import Bounded
from numtraits.capabilities.cast import NumCast
from numtraits.capabilities.checked import CheckedOps
from numtraits.capabilities.coerced import Coerced
from numtraits.capabilities.dist import Distance, Norm
from numtraits.capabilities.euclid import CheckedEuclid
from numtraits.capabilities.identities import Num, ParseNumError, Two
from numtraits.capabilities.overflowing import OverflowingOps
from numtraits.capabilities.pow import Pow, validate_exponent
from numtraits.capabilities.safe_cast import Layout, NumberKind, SignCast
from numtraits.capabilities.saturating import Saturating
from numtraits.capabilities.sign import Signed, Unsigned
from numtraits.capabilities.wrapping import WrappingOps
from numtraits.primitives.parsing import parse_int
from numtraits.primitives.specs import IntSpec


class IntegerConformance(
    Conformance,
    Num,
    Two,
    Bounded,
    CheckedOps,
    WrappingOps,
    Saturating,
    OverflowingOps,
    CheckedEuclid,
    NumCast,
    SignCast,
    Coerced,
    Pow,
    PrimInt,
    ToFromBytes,
    Norm,
    Distance,
):
    """
    Общая часть signed и unsigned integer conformances.

    Args:
        numeric_type: Тип значений (np.int8, ..., Int128)
        spec: Метаданные ширины и знаковости
    """

    def __init__(self, numeric_type: type, spec: IntSpec) -> None:
        super().__init__(numeric_type)
        self.spec = spec

    def coerce(self, value: Any) -> Any:
        """
        Значение типа или Python int литерал, точно представимый в типе.

        Raises:
            ValueError: Литерал вне [min, max]
            TypeError: Значение другого типа (включая bool и другие ширины)
        """
        if type(value) is self.numeric_type:
            return value
        if type(value) is int:
            if not self.spec.contains(value):
                raise ValueError(
                    f"{value} is out of range for {self.spec.name} "
                    f"[{self.spec.min}, {self.spec.max}]"
                )
            return self._make(value)
        return super().coerce(value)

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _make(self, n: int) -> Any:
        return self.numeric_type(n)

    def _int(self, x: Any) -> int:
        return int(self.coerce(x))

    def _wrap(self, n: int) -> Any:
        return self._make(self.spec.wrap(n))

    def _checked(self, n: int) -> Any | None:
        return self._make(n) if self.spec.contains(n) else None

    def _saturate(self, n: int) -> Any:
        return self._make(self.spec.saturate(n))

    def _overflowing(self, n: int) -> tuple[Any, bool]:
        return self._wrap(n), not self.spec.contains(n)

    def _operands(self, x: Any, y: Any) -> tuple[int, int]:
        return self._int(x), self._int(y)

    def _divisor(self, x: Any, y: Any) -> tuple[int, int]:
        a, b = self._operands(x, y)
        if b == 0:
            raise ZeroDivisionError(f"{self.spec.name} division by zero")
        return a, b

    @staticmethod
    def _truncdiv(a: int, b: int) -> tuple[int, int]:
        """Частное с усечением к нулю и остаток со знаком делимого."""
        q = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            q = -q
        return q, a - q * b

    def _in_width(self, shift: int) -> bool:
        return 0 <= shift < self.spec.bits

    def _pattern(self, x: Any) -> int:
        """Беззнаковый битовый паттерн значения."""
        return self._int(x) & self.spec.mask

    # =========================================================================
    # NUM
    # =========================================================================

    def zero(self) -> Any:
        return self._make(0)

    def one(self) -> Any:
        return self._make(1)

    def two(self) -> Any:
        return self._make(2)

    def add(self, x: Any, y: Any) -> Any:
        a, b = self._operands(x, y)
        return self._wrap(a + b)

    def sub(self, x: Any, y: Any) -> Any:
        a, b = self._operands(x, y)
        return self._wrap(a - b)

    def mul(self, x: Any, y: Any) -> Any:
        a, b = self._operands(x, y)
        return self._wrap(a * b)

    def div(self, x: Any, y: Any) -> Any:
        a, b = self._divisor(x, y)
        q, _ = self._truncdiv(a, b)
        return self._wrap(q)

    def rem(self, x: Any, y: Any) -> Any:
        a, b = self._divisor(x, y)
        _, r = self._truncdiv(a, b)
        return self._make(r)

    def from_str_radix(self, text: str, radix: int) -> Any:
        n = parse_int(text, radix)
        if not self.spec.contains(n):
            raise ParseNumError(f"number {text!r} is out of range for {self.spec.name}")
        return self._make(n)

    # =========================================================================
    # BOUNDED
    # =========================================================================

    def min_value(self) -> Any:
        return self._make(self.spec.min)

    def max_value(self) -> Any:
        return self._make(self.spec.max)

    # =========================================================================
    # CHECKED
    # =========================================================================

    def checked_add(self, x: Any, y: Any) -> Any | None:
        a, b = self._operands(x, y)
        return self._checked(a + b)

    def checked_sub(self, x: Any, y: Any) -> Any | None:
        a, b = self._operands(x, y)
        return self._checked(a - b)

    def checked_mul(self, x: Any, y: Any) -> Any | None:
        a, b = self._operands(x, y)
        return self._checked(a * b)

    def checked_div(self, x: Any, y: Any) -> Any | None:
        a, b = self._operands(x, y)
        if b == 0:
            return None
        q, _ = self._truncdiv(a, b)
        return self._checked(q)

    def checked_rem(self, x: Any, y: Any) -> Any | None:
        a, b = self._operands(x, y)
        if b == 0:
            return None
        q, r = self._truncdiv(a, b)
        if not self.spec.contains(q):
            return None
        return self._make(r)

    def checked_neg(self, x: Any) -> Any | None:
        return self._checked(-self._int(x))

    def checked_shl(self, x: Any, shift: int) -> Any | None:
        shift = operator.index(shift)
        if not self._in_width(shift):
            return None
        return self._wrap(self._int(x) << shift)

    def checked_shr(self, x: Any, shift: int) -> Any | None:
        shift = operator.index(shift)
        if not self._in_width(shift):
            return None
        return self._make(self._int(x) >> shift)

    # =========================================================================
    # WRAPPING
    # =========================================================================

    def wrapping_add(self, x: Any, y: Any) -> Any:
        return self.add(x, y)

    def wrapping_sub(self, x: Any, y: Any) -> Any:
        return self.sub(x, y)

    def wrapping_mul(self, x: Any, y: Any) -> Any:
        return self.mul(x, y)

    def wrapping_div(self, x: Any, y: Any) -> Any:
        return self.div(x, y)

    def wrapping_rem(self, x: Any, y: Any) -> Any:
        return self.rem(x, y)

    def wrapping_neg(self, x: Any) -> Any:
        return self._wrap(-self._int(x))

    def wrapping_shl(self, x: Any, shift: int) -> Any:
        shift = operator.index(shift) & (self.spec.bits - 1)
        return self._wrap(self._int(x) << shift)

    def wrapping_shr(self, x: Any, shift: int) -> Any:
        shift = operator.index(shift) & (self.spec.bits - 1)
        return self._make(self._int(x) >> shift)

    # =========================================================================
    # SATURATING
    # =========================================================================

    def saturating_add(self, x: Any, y: Any) -> Any:
        a, b = self._operands(x, y)
        return self._saturate(a + b)

    def saturating_sub(self, x: Any, y: Any) -> Any:
        a, b = self._operands(x, y)
        return self._saturate(a - b)

    def saturating_mul(self, x: Any, y: Any) -> Any:
        a, b = self._operands(x, y)
        return self._saturate(a * b)

    def saturating_div(self, x: Any, y: Any) -> Any:
        a, b = self._divisor(x, y)
        q, _ = self._truncdiv(a, b)
        return self._saturate(q)

    # =========================================================================
    # OVERFLOWING
    # =========================================================================

    def overflowing_add(self, x: Any, y: Any) -> tuple[Any, bool]:
        a, b = self._operands(x, y)
        return self._overflowing(a + b)

    def overflowing_sub(self, x: Any, y: Any) -> tuple[Any, bool]:
        a, b = self._operands(x, y)
        return self._overflowing(a - b)

    def overflowing_mul(self, x: Any, y: Any) -> tuple[Any, bool]:
        a, b = self._operands(x, y)
        return self._overflowing(a * b)

    def overflowing_div(self, x: Any, y: Any) -> tuple[Any, bool]:
        a, b = self._divisor(x, y)
        q, _ = self._truncdiv(a, b)
        return self._overflowing(q)

    def overflowing_rem(self, x: Any, y: Any) -> tuple[Any, bool]:
        a, b = self._divisor(x, y)
        q, r = self._truncdiv(a, b)
        return self._make(r), not self.spec.contains(q)

    def overflowing_neg(self, x: Any) -> tuple[Any, bool]:
        return self._overflowing(-self._int(x))

    def overflowing_shl(self, x: Any, shift: int) -> tuple[Any, bool]:
        shift = operator.index(shift)
        return self.wrapping_shl(x, shift), not self._in_width(shift)

    def overflowing_shr(self, x: Any, shift: int) -> tuple[Any, bool]:
        shift = operator.index(shift)
        return self.wrapping_shr(x, shift), not self._in_width(shift)

    # =========================================================================
    # EUCLID
    # =========================================================================

    @staticmethod
    def _euclid(a: int, b: int) -> tuple[int, int]:
        r = a % abs(b)
        return (a - r) // b, r

    def div_euclid(self, x: Any, v: Any) -> Any:
        a, b = self._divisor(x, v)
        q, _ = self._euclid(a, b)
        return self._wrap(q)

    def rem_euclid(self, x: Any, v: Any) -> Any:
        a, b = self._divisor(x, v)
        _, r = self._euclid(a, b)
        return self._make(r)

    def checked_div_euclid(self, x: Any, v: Any) -> Any | None:
        a, b = self._operands(x, v)
        if b == 0:
            return None
        q, _ = self._euclid(a, b)
        return self._checked(q)

    def checked_rem_euclid(self, x: Any, v: Any) -> Any | None:
        a, b = self._operands(x, v)
        if b == 0:
            return None
        q, r = self._euclid(a, b)
        if not self.spec.contains(q):
            return None
        return self._make(r)

    # =========================================================================
    # CAST
    # =========================================================================

    def to_exact(self, x: Any) -> int:
        return self._int(x)

    def from_int(self, n: int) -> Any | None:
        return self._checked(n)

    def from_float(self, f: float) -> Any | None:
        if not math.isfinite(f) or not f.is_integer():
            return None
        return self._checked(int(f))

    def as_from_int(self, n: int) -> Any:
        return self._wrap(n)

    def as_from_float(self, f: float) -> Any:
        """Усечение к нулю с насыщением; NaN → 0."""
        if math.isnan(f):
            return self.zero()
        if math.isinf(f):
            return self._make(self.spec.max if f > 0 else self.spec.min)
        return self._saturate(int(f))

    # =========================================================================
    # SAFE CAST / NORM
    # =========================================================================

    def layout(self) -> Layout:
        return Layout(kind=NumberKind.INTEGER, bits=self.spec.bits, signed=self.spec.signed)

    def norm(self, x: Any) -> Any:
        """|x| в беззнаковом типе той же ширины."""
        return self.counterpart(False).as_from_int(abs(self._int(x)))

    def distance(self, x: Any, y: Any) -> Any:
        a, b = self._operands(x, y)
        return self.counterpart(False).as_from_int(abs(a - b))

    # =========================================================================
    # POW
    # =========================================================================

    def pow(self, base: Any, exp: Any) -> Any:
        """base ** exp по модулю 2^bits."""
        exp = validate_exponent(exp)
        return self._wrap(pow(self._int(base), exp, self.spec.modulus))

    # =========================================================================
    # BITS
    # =========================================================================

    def bits(self) -> int:
        return self.spec.bits

    def count_ones(self, x: Any) -> int:
        return self._pattern(x).bit_count()

    def leading_zeros(self, x: Any) -> int:
        return self.spec.bits - self._pattern(x).bit_length()

    def trailing_zeros(self, x: Any) -> int:
        u = self._pattern(x)
        if u == 0:
            return self.spec.bits
        return (u & -u).bit_length() - 1

    def rotate_left(self, x: Any, n: int) -> Any:
        bits = self.spec.bits
        u = self._pattern(x)
        n = operator.index(n) % bits
        return self._wrap(((u << n) | (u >> (bits - n))) & self.spec.mask)

    def rotate_right(self, x: Any, n: int) -> Any:
        return self.rotate_left(x, -operator.index(n))

    def swap_bytes(self, x: Any) -> Any:
        u = self._pattern(x)
        return self._wrap(int.from_bytes(u.to_bytes(self.spec.byte_width, "little"), "big"))

    def reverse_bits(self, x: Any) -> Any:
        u = self._pattern(x)
        return self._wrap(int(format(u, f"0{self.spec.bits}b")[::-1], 2))

    def to_bytes(self, x: Any, byteorder: str) -> bytes:
        return self._int(x).to_bytes(self.spec.byte_width, byteorder, signed=self.spec.signed)

    def from_bytes(self, data: bytes, byteorder: str) -> Any:
        data = bytes(data)
        if len(data) != self.spec.byte_width:
            raise ValueError(
                f"{self.spec.name} requires exactly {self.spec.byte_width} bytes, got {len(data)}"
            )
        return self._make(int.from_bytes(data, byteorder, signed=self.spec.signed))


class SignedIntConformance(IntegerConformance, Signed):
    """
    Conformance знакового integer.

    abs(MIN) и signum(MIN) * abs(MIN) следуют wrapping семантике:
    abs(MIN) == MIN.
    """

    def is_positive(self, x: Any) -> bool:
        return self._int(x) > 0

    def is_negative(self, x: Any) -> bool:
        return self._int(x) < 0

    def abs(self, x: Any) -> Any:
        return self._wrap(abs(self._int(x)))

    def signum(self, x: Any) -> Any:
        a = self._int(x)
        return self._make((a > 0) - (a < 0))

    def abs_sub(self, x: Any, y: Any) -> Any:
        a, b = self._operands(x, y)
        if a <= b:
            return self.zero()
        return self._wrap(a - b)


class UnsignedIntConformance(IntegerConformance, Unsigned, WideningMul):
    """Conformance беззнакового integer."""

    def widening_mul(self, x: Any, y: Any) -> tuple[Any, Any]:
        """
        Полное произведение двойной ширины как (low, high).

        Examples:
            >>> UnsignedIntConformance(np.uint8, U8).widening_mul(np.uint8(200), np.uint8(3))
            (np.uint8(88), np.uint8(2))
        """
        product = self._int(x) * self._int(y)
        return self._make(product & self.spec.mask), self._make(product >> self.spec.bits)
