"""
Int128 / UInt128 — 128-битные fixed-width integer value types

numpy не имеет 128-битных integer, поэтому расширенная пара реализована
здесь. Поведение повторяет numpy scalar integers: значение вне диапазона
при создании → OverflowError, арифметические операторы берут результат
по модулю 2^128, операторы `//` и `%` используют floor division, как у numpy.
Conformance (Num.div/rem и семейства) считает через Python int и
усекает к нулю независимо от операторов.
"""

import numbers
from typing import Any

from numtraits.primitives.specs import I128, U128, IntSpec


class WideInt:
    """Базовый класс 128-битных integer."""

    __slots__ = ("_value",)

    SPEC: IntSpec

    def __init__(self, value: Any = 0) -> None:
        if isinstance(value, WideInt):
            n = value._value
        elif isinstance(value, numbers.Integral):
            n = int(value)
        else:
            raise TypeError(
                f"{type(self).__name__}() expects an integer, got {type(value).__name__}"
            )
        if not self.SPEC.contains(n):
            raise OverflowError(f"Python integer {n} out of bounds for {self.SPEC.name}")
        self._value = n

    @classmethod
    def _wrapped(cls, n: int) -> "WideInt":
        return cls(cls.SPEC.wrap(n))

    @staticmethod
    def _operand(other: Any) -> int | None:
        if isinstance(other, WideInt):
            return other._value
        if isinstance(other, numbers.Integral) and not isinstance(other, bool):
            return int(other)
        return None

    # Conversions

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __float__(self) -> float:
        return float(self._value)

    def __bool__(self) -> bool:
        return self._value != 0

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    # Comparison

    def __eq__(self, other: object) -> bool:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._value == value

    def __lt__(self, other: Any) -> bool:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._value < value

    def __le__(self, other: Any) -> bool:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._value <= value

    def __gt__(self, other: Any) -> bool:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._value > value

    def __ge__(self, other: Any) -> bool:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._value >= value

    # Arithmetic (wrapping)

    def __add__(self, other: Any) -> "WideInt":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._wrapped(self._value + value)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "WideInt":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._wrapped(self._value - value)

    def __rsub__(self, other: Any) -> "WideInt":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._wrapped(value - self._value)

    def __mul__(self, other: Any) -> "WideInt":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._wrapped(self._value * value)

    __rmul__ = __mul__

    def __floordiv__(self, other: Any) -> "WideInt":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._wrapped(self._value // value)

    def __rfloordiv__(self, other: Any) -> "WideInt":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._wrapped(value // self._value)

    def __mod__(self, other: Any) -> "WideInt":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._wrapped(self._value % value)

    def __rmod__(self, other: Any) -> "WideInt":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._wrapped(value % self._value)

    def __neg__(self) -> "WideInt":
        return self._wrapped(-self._value)

    def __pos__(self) -> "WideInt":
        return self

    def __abs__(self) -> "WideInt":
        return self._wrapped(abs(self._value))

    # Bitwise

    def __invert__(self) -> "WideInt":
        return self._wrapped(~self._value)

    def __and__(self, other: Any) -> "WideInt":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._wrapped(self._value & value)

    __rand__ = __and__

    def __or__(self, other: Any) -> "WideInt":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._wrapped(self._value | value)

    __ror__ = __or__

    def __xor__(self, other: Any) -> "WideInt":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._wrapped(self._value ^ value)

    __rxor__ = __xor__

    def __lshift__(self, other: Any) -> "WideInt":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._wrapped(self._value << value)

    def __rshift__(self, other: Any) -> "WideInt":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._wrapped(self._value >> value)


class Int128(WideInt):
    """Знаковый 128-битный integer."""

    __slots__ = ()
    SPEC = I128


class UInt128(WideInt):
    """Беззнаковый 128-битный integer."""

    __slots__ = ()
    SPEC = U128
