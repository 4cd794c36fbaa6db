"""
BigIntConformance — conformance для Python int (неограниченная точность)

int не имеет границ: Bounded, wrapping/saturating/overflowing операции
и битовые capability sets не заявляются. Checked операции возвращают
None только при делении на ноль. Деление усекается к нулю, как у
fixed-width integer. Для int доступен точный cast в обе стороны;
best-effort as_() в int не определён (нет границ для насыщения).
"""

import math
from typing import Any

from numtraits.base import Conformance
from numtraits.capabilities.cast import NumCast
from numtraits.capabilities.checked import (
    CheckedAdd,
    CheckedDiv,
    CheckedMul,
    CheckedNeg,
    CheckedRem,
    CheckedSub,
)
from numtraits.capabilities.euclid import CheckedEuclid
from numtraits.capabilities.identities import Num, Two
from numtraits.capabilities.pow import Pow, validate_exponent
from numtraits.capabilities.sign import Signed
from numtraits.primitives.parsing import parse_int


class BigIntConformance(
    Conformance,
    Num,
    Two,
    Signed,
    CheckedAdd,
    CheckedSub,
    CheckedMul,
    CheckedDiv,
    CheckedRem,
    CheckedNeg,
    CheckedEuclid,
    NumCast,
    Pow,
):
    """Python int."""

    def __init__(self) -> None:
        super().__init__(int)

    @staticmethod
    def _divisor(y: int) -> int:
        if y == 0:
            raise ZeroDivisionError("int division by zero")
        return y

    # Num

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def two(self) -> int:
        return 2

    def add(self, x: Any, y: Any) -> int:
        return self.coerce(x) + self.coerce(y)

    def sub(self, x: Any, y: Any) -> int:
        return self.coerce(x) - self.coerce(y)

    def mul(self, x: Any, y: Any) -> int:
        return self.coerce(x) * self.coerce(y)

    def div(self, x: Any, y: Any) -> int:
        x, y = self.coerce(x), self._divisor(self.coerce(y))
        q = abs(x) // abs(y)
        return q if (x < 0) == (y < 0) else -q

    def rem(self, x: Any, y: Any) -> int:
        x, y = self.coerce(x), self.coerce(y)
        return x - self.div(x, y) * y

    def from_str_radix(self, text: str, radix: int) -> int:
        return parse_int(text, radix)

    # Sign

    def is_positive(self, x: Any) -> bool:
        return self.coerce(x) > 0

    def is_negative(self, x: Any) -> bool:
        return self.coerce(x) < 0

    def abs(self, x: Any) -> int:
        return abs(self.coerce(x))

    def signum(self, x: Any) -> int:
        x = self.coerce(x)
        return (x > 0) - (x < 0)

    def abs_sub(self, x: Any, y: Any) -> int:
        x, y = self.coerce(x), self.coerce(y)
        return x - y if x > y else 0

    # Checked

    def checked_add(self, x: Any, y: Any) -> int:
        return self.add(x, y)

    def checked_sub(self, x: Any, y: Any) -> int:
        return self.sub(x, y)

    def checked_mul(self, x: Any, y: Any) -> int:
        return self.mul(x, y)

    def checked_div(self, x: Any, y: Any) -> int | None:
        if self.coerce(y) == 0:
            return None
        return self.div(x, y)

    def checked_rem(self, x: Any, y: Any) -> int | None:
        if self.coerce(y) == 0:
            return None
        return self.rem(x, y)

    def checked_neg(self, x: Any) -> int:
        return -self.coerce(x)

    # Euclid

    def div_euclid(self, x: Any, v: Any) -> int:
        x, v = self.coerce(x), self._divisor(self.coerce(v))
        return (x - x % abs(v)) // v

    def rem_euclid(self, x: Any, v: Any) -> int:
        x, v = self.coerce(x), self._divisor(self.coerce(v))
        return x % abs(v)

    def checked_div_euclid(self, x: Any, v: Any) -> int | None:
        if self.coerce(v) == 0:
            return None
        return self.div_euclid(x, v)

    def checked_rem_euclid(self, x: Any, v: Any) -> int | None:
        if self.coerce(v) == 0:
            return None
        return self.rem_euclid(x, v)

    # Cast

    def to_exact(self, x: Any) -> int:
        return self.coerce(x)

    def from_int(self, n: int) -> int:
        return n

    def from_float(self, f: float) -> int | None:
        if not math.isfinite(f) or not f.is_integer():
            return None
        return int(f)

    # Pow

    def pow(self, base: Any, exp: Any) -> int:
        return self.coerce(base) ** validate_exponent(exp)
