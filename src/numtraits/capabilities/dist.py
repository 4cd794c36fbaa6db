"""
Norm / Distance — модуль значения и расстояние между значениями

Норма float — abs(x) в том же типе. Норма signed integer — |x| в
беззнаковом типе той же ширины, поэтому норма MIN представима
(norm(i8 -128) == u8 128). Норма unsigned integer — само значение.

Расстояние — норма разности, вычисленной точно: distance(i8 -128, i8 127)
== u8 255, distance(u8 3, u8 5) == u8 2.
"""

from abc import abstractmethod
from typing import Any

from numtraits.base import Capability
from numtraits.registry import CapabilityError, require


class Norm(Capability):
    """Неотрицательная норма значения."""

    @abstractmethod
    def norm(self, x: Any) -> Any: ...

    def normalized(self, x: Any) -> Any:
        """
        x / norm(x).

        Определено только если норма имеет тип x (float, unsigned integer).
        Для integer результат — целочисленное деление.
        """
        n = self.norm(x)
        if type(n) is not self.numeric_type:
            raise CapabilityError(
                f"{self.name} norm is {type(n).__name__}; normalized requires a norm of the same type"
            )
        return self.div(x, n)


class Distance(Capability):
    """Расстояние между двумя значениями типа."""

    @abstractmethod
    def distance(self, x: Any, y: Any) -> Any: ...


def norm(x: Any) -> Any:
    """
    Examples:
        >>> norm(np.float32(-2.0))
        np.float32(2.0)
        >>> norm(np.int8(-128))
        np.uint8(128)
    """
    return require(type(x), Norm).norm(x)


def normalized(x: Any) -> Any:
    """
    Examples:
        >>> normalized(-4.0)
        -1.0
    """
    return require(type(x), Norm).normalized(x)


def distance(x: Any, y: Any) -> Any:
    """
    Examples:
        >>> distance(np.float32(2.0), np.float32(-3.0))
        np.float32(5.0)
    """
    return require(type(x), Distance).distance(x, y)
