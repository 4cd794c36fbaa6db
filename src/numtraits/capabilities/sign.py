"""
Sign — знак значения, модуль и signum

Sign — общий контракт; Signed и Unsigned — его реализации для знаковых
и беззнаковых типов. Unsigned удовлетворяет контракту тривиально:
значение никогда не отрицательно, abs() — identity.

Граничный случай: abs(MIN) для signed integer непредставим и
возвращает MIN (wrap). Это поведение примитива, оно не проверяется.
"""

from abc import abstractmethod
from typing import Any

from numtraits.base import Capability
from numtraits.registry import require


class Sign(Capability):
    """Запрос знака, модуль и signum."""

    @abstractmethod
    def is_positive(self, x: Any) -> bool:
        """x > 0 (ноль и NaN не положительны)."""

    @abstractmethod
    def is_negative(self, x: Any) -> bool:
        """x < 0 (ноль и NaN не отрицательны)."""

    @abstractmethod
    def abs(self, x: Any) -> Any:
        """Модуль; для signed integer abs(MIN) == MIN."""

    @abstractmethod
    def signum(self, x: Any) -> Any:
        """-1, 0 или 1 в представлении типа."""


class Signed(Sign):
    """Знаковые типы: signed integer и float."""

    @abstractmethod
    def abs_sub(self, x: Any, y: Any) -> Any:
        """x - y если x > y, иначе zero."""


class Unsigned(Sign):
    """
    Беззнаковые типы.

    Реализация по умолчанию опирается на zero()/one() conformance (Num).
    """

    def is_positive(self, x: Any) -> bool:
        return not self.is_zero(self.coerce(x))

    def is_negative(self, x: Any) -> bool:
        self.coerce(x)
        return False

    def abs(self, x: Any) -> Any:
        return self.coerce(x)

    def signum(self, x: Any) -> Any:
        return self.zero() if self.is_zero(self.coerce(x)) else self.one()


def is_positive(x: Any) -> bool:
    return require(type(x), Sign).is_positive(x)


def is_negative(x: Any) -> bool:
    return require(type(x), Sign).is_negative(x)


def abs_(x: Any) -> Any:
    """
    Модуль значения.

    Examples:
        >>> abs_(np.int8(-5))
        np.int8(5)
        >>> abs_(np.int8(-128))  # wrap
        np.int8(-128)
    """
    return require(type(x), Sign).abs(x)


def signum(x: Any) -> Any:
    return require(type(x), Sign).signum(x)


def abs_sub(x: Any, y: Any) -> Any:
    return require(type(x), Signed).abs_sub(x, y)
