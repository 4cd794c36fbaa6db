"""
Overflowing arithmetic — wrapped результат и флаг overflow

Каждая операция возвращает (wrapping результат, произошёл ли wrap).
Для сдвигов флаг означает shift >= bits (величина сдвига маскируется).
"""

from abc import abstractmethod
from typing import Any

from numtraits.base import Capability
from numtraits.registry import require


class OverflowingAdd(Capability):
    @abstractmethod
    def overflowing_add(self, x: Any, y: Any) -> tuple[Any, bool]: ...


class OverflowingSub(Capability):
    @abstractmethod
    def overflowing_sub(self, x: Any, y: Any) -> tuple[Any, bool]: ...


class OverflowingMul(Capability):
    @abstractmethod
    def overflowing_mul(self, x: Any, y: Any) -> tuple[Any, bool]: ...


class OverflowingDiv(Capability):
    @abstractmethod
    def overflowing_div(self, x: Any, y: Any) -> tuple[Any, bool]: ...


class OverflowingRem(Capability):
    @abstractmethod
    def overflowing_rem(self, x: Any, y: Any) -> tuple[Any, bool]: ...


class OverflowingNeg(Capability):
    @abstractmethod
    def overflowing_neg(self, x: Any) -> tuple[Any, bool]: ...


class OverflowingShl(Capability):
    @abstractmethod
    def overflowing_shl(self, x: Any, shift: int) -> tuple[Any, bool]: ...


class OverflowingShr(Capability):
    @abstractmethod
    def overflowing_shr(self, x: Any, shift: int) -> tuple[Any, bool]: ...


class OverflowingOps(
    OverflowingAdd,
    OverflowingSub,
    OverflowingMul,
    OverflowingDiv,
    OverflowingRem,
    OverflowingNeg,
    OverflowingShl,
    OverflowingShr,
):
    """Полный набор overflowing операций fixed-width integer."""


def overflowing_add(x: Any, y: Any) -> tuple[Any, bool]:
    """
    Examples:
        >>> overflowing_add(np.int8(127), 1)
        (np.int8(-128), True)
    """
    return require(type(x), OverflowingAdd).overflowing_add(x, y)


def overflowing_sub(x: Any, y: Any) -> tuple[Any, bool]:
    return require(type(x), OverflowingSub).overflowing_sub(x, y)


def overflowing_mul(x: Any, y: Any) -> tuple[Any, bool]:
    return require(type(x), OverflowingMul).overflowing_mul(x, y)


def overflowing_div(x: Any, y: Any) -> tuple[Any, bool]:
    return require(type(x), OverflowingDiv).overflowing_div(x, y)


def overflowing_rem(x: Any, y: Any) -> tuple[Any, bool]:
    return require(type(x), OverflowingRem).overflowing_rem(x, y)


def overflowing_neg(x: Any) -> tuple[Any, bool]:
    return require(type(x), OverflowingNeg).overflowing_neg(x)


def overflowing_shl(x: Any, shift: int) -> tuple[Any, bool]:
    return require(type(x), OverflowingShl).overflowing_shl(x, shift)


def overflowing_shr(x: Any, shift: int) -> tuple[Any, bool]:
    return require(type(x), OverflowingShr).overflowing_shr(x, shift)
