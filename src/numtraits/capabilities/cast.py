"""
Casting — точное и best-effort преобразование между numeric types

Два тира:
- cast(x, T): NumCast, значение T только если преобразование сохраняет
  значение точно (диапазон, знак, дробная часть, точность float).
  Иначе None. NaN и ±inf сохраняются при float → float.
- as_(x, T): AsPrimitive, повторяет нативное numeric преобразование:
  integer narrowing отбрасывает старшие биты, смена знака
  реинтерпретирует битовый паттерн, float → int усекает к нулю и
  насыщается до границ (NaN → 0), int → float и float64 → float32
  округляют к ближайшему (overflow → inf). Никогда не падает.

Источник отдаёт точное значение через ToPrimitive.to_exact(): Python int
для integer types, Python float для float types (float32 расширяется точно).
Conformance источника ищется в registry приёмника.
"""

from abc import abstractmethod
from typing import Any

from numtraits.base import Capability
from numtraits.registry import registry_of, require


# =============================================================================
# CAPABILITY SETS
# =============================================================================


class ToPrimitive(Capability):
    """Источник преобразования."""

    @abstractmethod
    def to_exact(self, x: Any) -> int | float:
        """Точное значение x: Python int (integer) или Python float (float)."""


class FromPrimitive(Capability):
    """Приёмник точного преобразования."""

    @abstractmethod
    def from_int(self, n: int) -> Any | None:
        """Значение типа, равное n, или None если n непредставимо точно."""

    @abstractmethod
    def from_float(self, f: float) -> Any | None:
        """Значение типа, равное f, или None если f непредставимо точно."""

    def from_exact(self, value: int | float) -> Any | None:
        if isinstance(value, bool):
            raise TypeError("bool is not a numeric source")
        if isinstance(value, int):
            return self.from_int(value)
        if isinstance(value, float):
            return self.from_float(value)
        raise TypeError(f"expected int or float, got {type(value).__name__}")


class NumCast(ToPrimitive, FromPrimitive):
    """Точное преобразование из любого ToPrimitive типа."""

    def cast_from(self, value: Any) -> Any | None:
        source = registry_of(self).require(type(value), ToPrimitive)
        return self.from_exact(source.to_exact(value))


class AsPrimitive(ToPrimitive):
    """Best-effort преобразование с семантикой нативного numeric cast."""

    @abstractmethod
    def as_from_int(self, n: int) -> Any: ...

    @abstractmethod
    def as_from_float(self, f: float) -> Any: ...

    def as_from(self, value: Any) -> Any:
        exact = registry_of(self).require(type(value), ToPrimitive).to_exact(value)
        if isinstance(exact, int):
            return self.as_from_int(exact)
        return self.as_from_float(exact)


# =============================================================================
# GENERIC FUNCTIONS
# =============================================================================


def to_exact(x: Any) -> int | float:
    return require(type(x), ToPrimitive).to_exact(x)


def cast(value: Any, target: type) -> Any | None:
    """
    Точное преобразование value в target.

    Examples:
        >>> cast(np.int32(-1), np.uint8) is None
        True
        >>> cast(np.int32(256), np.uint8) is None
        True
        >>> cast(np.float64(3.0), np.int16)
        np.int16(3)
        >>> cast(np.float64(2.5), np.int16) is None
        True
    """
    return require(target, NumCast).cast_from(value)


def as_(value: Any, target: type) -> Any:
    """
    Best-effort преобразование value в target.

    Examples:
        >>> as_(np.int16(768), np.uint8)
        np.uint8(0)
        >>> as_(np.float64(-1e10), np.int32)
        np.int32(-2147483648)
        >>> as_(np.float64(float("nan")), np.uint8)
        np.uint8(0)
    """
    return require(target, AsPrimitive).as_from(value)
