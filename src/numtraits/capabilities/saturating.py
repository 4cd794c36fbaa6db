"""
Saturating arithmetic — результат ограничен [min_value(), max_value()]

Никогда не сообщает об overflow. Деление на ноль: ZeroDivisionError.
"""

from abc import abstractmethod
from typing import Any

from numtraits.base import Capability
from numtraits.registry import require


class SaturatingAdd(Capability):
    @abstractmethod
    def saturating_add(self, x: Any, y: Any) -> Any: ...


class SaturatingSub(Capability):
    @abstractmethod
    def saturating_sub(self, x: Any, y: Any) -> Any: ...


class SaturatingMul(Capability):
    @abstractmethod
    def saturating_mul(self, x: Any, y: Any) -> Any: ...


class SaturatingDiv(Capability):
    @abstractmethod
    def saturating_div(self, x: Any, y: Any) -> Any:
        """MIN / -1 == MAX для signed типов."""


class Saturating(SaturatingAdd, SaturatingSub, SaturatingMul, SaturatingDiv):
    """Полный набор saturating операций."""


def saturating_add(x: Any, y: Any) -> Any:
    """
    Examples:
        >>> saturating_add(np.uint8(255), 1)
        np.uint8(255)
        >>> saturating_add(np.int8(-100), -100)
        np.int8(-128)
    """
    return require(type(x), SaturatingAdd).saturating_add(x, y)


def saturating_sub(x: Any, y: Any) -> Any:
    return require(type(x), SaturatingSub).saturating_sub(x, y)


def saturating_mul(x: Any, y: Any) -> Any:
    return require(type(x), SaturatingMul).saturating_mul(x, y)


def saturating_div(x: Any, y: Any) -> Any:
    return require(type(x), SaturatingDiv).saturating_div(x, y)
