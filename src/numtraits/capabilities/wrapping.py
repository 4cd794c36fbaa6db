"""
Wrapping arithmetic — результат по модулю 2^bits

Никогда не сообщает об overflow. Величина сдвига маскируется (shift & (bits - 1)).
Деление и остаток на ноль наследуют поведение примитива: ZeroDivisionError.
"""

from abc import abstractmethod
from typing import Any

from numtraits.base import Capability
from numtraits.registry import require


class WrappingAdd(Capability):
    @abstractmethod
    def wrapping_add(self, x: Any, y: Any) -> Any: ...


class WrappingSub(Capability):
    @abstractmethod
    def wrapping_sub(self, x: Any, y: Any) -> Any: ...


class WrappingMul(Capability):
    @abstractmethod
    def wrapping_mul(self, x: Any, y: Any) -> Any: ...


class WrappingDiv(Capability):
    @abstractmethod
    def wrapping_div(self, x: Any, y: Any) -> Any:
        """MIN / -1 == MIN для signed типов."""


class WrappingRem(Capability):
    @abstractmethod
    def wrapping_rem(self, x: Any, y: Any) -> Any: ...


class WrappingNeg(Capability):
    @abstractmethod
    def wrapping_neg(self, x: Any) -> Any:
        """-MIN == MIN для signed; для unsigned 2^bits - x."""


class WrappingShl(Capability):
    @abstractmethod
    def wrapping_shl(self, x: Any, shift: int) -> Any: ...


class WrappingShr(Capability):
    @abstractmethod
    def wrapping_shr(self, x: Any, shift: int) -> Any: ...


class WrappingOps(
    WrappingAdd,
    WrappingSub,
    WrappingMul,
    WrappingDiv,
    WrappingRem,
    WrappingNeg,
    WrappingShl,
    WrappingShr,
):
    """Полный набор wrapping операций fixed-width integer."""


def wrapping_add(x: Any, y: Any) -> Any:
    """
    Examples:
        >>> wrapping_add(np.uint8(255), 1)
        np.uint8(0)
    """
    return require(type(x), WrappingAdd).wrapping_add(x, y)


def wrapping_sub(x: Any, y: Any) -> Any:
    return require(type(x), WrappingSub).wrapping_sub(x, y)


def wrapping_mul(x: Any, y: Any) -> Any:
    return require(type(x), WrappingMul).wrapping_mul(x, y)


def wrapping_div(x: Any, y: Any) -> Any:
    return require(type(x), WrappingDiv).wrapping_div(x, y)


def wrapping_rem(x: Any, y: Any) -> Any:
    return require(type(x), WrappingRem).wrapping_rem(x, y)


def wrapping_neg(x: Any) -> Any:
    return require(type(x), WrappingNeg).wrapping_neg(x)


def wrapping_shl(x: Any, shift: int) -> Any:
    return require(type(x), WrappingShl).wrapping_shl(x, shift)


def wrapping_shr(x: Any, shift: int) -> Any:
    return require(type(x), WrappingShr).wrapping_shr(x, shift)
