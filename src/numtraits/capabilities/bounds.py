"""
Bounded — границы представимых значений fixed-width типов

Только для fixed-width integer: границы точные. Float не реализует Bounded,
конечные экстремумы и бесконечности доступны через FloatCore.
"""

from abc import abstractmethod
from typing import Any

from numtraits.base import Capability
from numtraits.registry import require


class LowerBounded(Capability):
    """Типы с нижней границей."""

    @abstractmethod
    def min_value(self) -> Any:
        """Наименьшее представимое значение."""


class UpperBounded(Capability):
    """Типы с верхней границей."""

    @abstractmethod
    def max_value(self) -> Any:
        """Наибольшее представимое значение."""


class Bounded(LowerBounded, UpperBounded):
    """Типы с обеими границами."""


def min_value(numeric_type: type) -> Any:
    """
    Examples:
        >>> min_value(np.int8)
        np.int8(-128)
    """
    return require(numeric_type, LowerBounded).min_value()


def max_value(numeric_type: type) -> Any:
    """
    Examples:
        >>> max_value(np.uint16)
        np.uint16(65535)
    """
    return require(numeric_type, UpperBounded).max_value()
