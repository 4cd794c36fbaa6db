"""
Identities & Num — аддитивная/мультипликативная единица и базовая арифметика

Законы:
    zero() + a == a,  a + zero() == a
    one() * a == a,   a * one() == a
    two() * a == a + a

Identity вычисляется из литерала при каждом вызове (без кэширования).
Для float zero()/one() совпадают побитово с литералами 0.0/1.0.
"""

from abc import abstractmethod
from typing import Any

from numtraits.base import Capability
from numtraits.registry import require


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ParseNumError(ValueError):
    """Ошибка разбора числа в from_str_radix (пустая строка, цифра вне radix, overflow)."""
    pass


# =============================================================================
# CAPABILITY SETS
# =============================================================================


class Zero(Capability):
    """Аддитивная единица."""

    @abstractmethod
    def zero(self) -> Any:
        """Аддитивная единица типа, `0`."""

    def is_zero(self, x: Any) -> bool:
        """True если x равен аддитивной единице."""
        return bool(x == self.zero())


class One(Capability):
    """Мультипликативная единица."""

    @abstractmethod
    def one(self) -> Any:
        """Мультипликативная единица типа, `1`."""

    def is_one(self, x: Any) -> bool:
        """True если x равен мультипликативной единице."""
        return bool(x == self.one())


class Two(One):
    """Удвоенная мультипликативная единица."""

    @abstractmethod
    def two(self) -> Any:
        """`2` в представлении типа."""

    def is_two(self, x: Any) -> bool:
        return bool(x == self.two())


class Num(Zero, One):
    """
    Минимальный numeric capability set.

    add/sub/mul/div/rem: для fixed-width integer результат берётся по
    модулю 2^bits, деление усекается к нулю, остаток имеет знак делимого
    (-7 / 2 == -3, -7 % 2 == -1). Float rem тоже усекающий (fmod).
    Целочисленное деление на ноль бросает ZeroDivisionError, float деление
    следует IEEE.
    """

    @abstractmethod
    def add(self, x: Any, y: Any) -> Any: ...

    @abstractmethod
    def sub(self, x: Any, y: Any) -> Any: ...

    @abstractmethod
    def mul(self, x: Any, y: Any) -> Any: ...

    @abstractmethod
    def div(self, x: Any, y: Any) -> Any: ...

    @abstractmethod
    def rem(self, x: Any, y: Any) -> Any: ...

    @abstractmethod
    def from_str_radix(self, text: str, radix: int) -> Any:
        """
        Разбор строки в системе счисления radix.

        Raises:
            ParseNumError: Если строка некорректна или значение непредставимо
            ValueError: Если radix вне [2, 36]
        """


# =============================================================================
# GENERIC FUNCTIONS
# =============================================================================


def zero(numeric_type: type) -> Any:
    """
    Аддитивная единица numeric_type.

    Examples:
        >>> zero(np.int32)
        np.int32(0)
    """
    return require(numeric_type, Zero).zero()


def is_zero(x: Any) -> bool:
    return require(type(x), Zero).is_zero(x)


def one(numeric_type: type) -> Any:
    """Мультипликативная единица numeric_type."""
    return require(numeric_type, One).one()


def is_one(x: Any) -> bool:
    return require(type(x), One).is_one(x)


def two(numeric_type: type) -> Any:
    return require(numeric_type, Two).two()


def is_two(x: Any) -> bool:
    return require(type(x), Two).is_two(x)


def from_str_radix(numeric_type: type, text: str, radix: int = 10) -> Any:
    """
    Разбор строки в значение numeric_type.

    Examples:
        >>> from_str_radix(np.uint8, "ff", 16)
        np.uint8(255)
        >>> from_str_radix(np.uint8, "100", 16)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ParseNumError: ...
    """
    return require(numeric_type, Num).from_str_radix(text, radix)


def validate_radix(radix: int) -> None:
    """
    Raises:
        ValueError: Если radix вне [2, 36]
    """
    if not 2 <= radix <= 36:
        raise ValueError(f"radix must be in [2, 36], got {radix}")
