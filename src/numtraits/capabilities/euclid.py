"""
Euclid — евклидово деление

rem_euclid(x, v) всегда в [0, |v|), div_euclid подбирается так, что
x == div_euclid(x, v) * v + rem_euclid(x, v).
"""

from abc import abstractmethod
from typing import Any

from numtraits.base import Capability
from numtraits.registry import require


class Euclid(Capability):
    @abstractmethod
    def div_euclid(self, x: Any, v: Any) -> Any: ...

    @abstractmethod
    def rem_euclid(self, x: Any, v: Any) -> Any: ...

    def div_rem_euclid(self, x: Any, v: Any) -> tuple[Any, Any]:
        return self.div_euclid(x, v), self.rem_euclid(x, v)


class CheckedEuclid(Euclid):
    @abstractmethod
    def checked_div_euclid(self, x: Any, v: Any) -> Any | None:
        """None при делении на ноль или overflow."""

    @abstractmethod
    def checked_rem_euclid(self, x: Any, v: Any) -> Any | None: ...


def div_euclid(x: Any, v: Any) -> Any:
    """
    Examples:
        >>> div_euclid(np.int32(-7), 4)
        np.int32(-2)
        >>> div_euclid(np.int32(7), -4)
        np.int32(-1)
    """
    return require(type(x), Euclid).div_euclid(x, v)


def rem_euclid(x: Any, v: Any) -> Any:
    """
    Examples:
        >>> rem_euclid(np.int32(-7), 4)
        np.int32(1)
        >>> rem_euclid(np.int32(7), -4)
        np.int32(3)
    """
    return require(type(x), Euclid).rem_euclid(x, v)


def div_rem_euclid(x: Any, v: Any) -> tuple[Any, Any]:
    return require(type(x), Euclid).div_rem_euclid(x, v)


def checked_div_euclid(x: Any, v: Any) -> Any | None:
    return require(type(x), CheckedEuclid).checked_div_euclid(x, v)


def checked_rem_euclid(x: Any, v: Any) -> Any | None:
    return require(type(x), CheckedEuclid).checked_rem_euclid(x, v)
