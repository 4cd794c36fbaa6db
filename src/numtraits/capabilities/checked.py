"""
Checked arithmetic — операции, сообщающие о неудаче вместо wrap

Каждая операция возвращает математически точный результат либо None,
если результат непредставим в типе. Деление и остаток на ноль → None.

Сдвиги: None тогда и только тогда, когда величина сдвига отрицательна
или >= bits(T). Биты, вытесненные допустимым сдвигом, отбрасываются.
"""

from abc import abstractmethod
from typing import Any

from numtraits.base import Capability
from numtraits.registry import require


# =============================================================================
# CAPABILITY SETS
# =============================================================================


class CheckedAdd(Capability):
    @abstractmethod
    def checked_add(self, x: Any, y: Any) -> Any | None:
        """Сложение; None при overflow."""


class CheckedSub(Capability):
    @abstractmethod
    def checked_sub(self, x: Any, y: Any) -> Any | None:
        """Вычитание; None при underflow."""


class CheckedMul(Capability):
    @abstractmethod
    def checked_mul(self, x: Any, y: Any) -> Any | None:
        """Умножение; None при overflow/underflow."""


class CheckedDiv(Capability):
    @abstractmethod
    def checked_div(self, x: Any, y: Any) -> Any | None:
        """Деление; None при делении на ноль или overflow (MIN / -1)."""


class CheckedRem(Capability):
    @abstractmethod
    def checked_rem(self, x: Any, y: Any) -> Any | None:
        """Остаток; None при делении на ноль или если частное переполняется (MIN % -1)."""


class CheckedNeg(Capability):
    @abstractmethod
    def checked_neg(self, x: Any) -> Any | None:
        """Отрицание; None если -x непредставимо (MIN signed, любое ненулевое unsigned)."""


class CheckedShl(Capability):
    @abstractmethod
    def checked_shl(self, x: Any, shift: int) -> Any | None:
        """Сдвиг влево; None если shift < 0 или shift >= bits."""


class CheckedShr(Capability):
    @abstractmethod
    def checked_shr(self, x: Any, shift: int) -> Any | None:
        """Сдвиг вправо; None если shift < 0 или shift >= bits."""


class CheckedOps(
    CheckedAdd,
    CheckedSub,
    CheckedMul,
    CheckedDiv,
    CheckedRem,
    CheckedNeg,
    CheckedShl,
    CheckedShr,
):
    """Полный набор checked операций fixed-width integer."""


# =============================================================================
# GENERIC FUNCTIONS
# =============================================================================


def checked_add(x: Any, y: Any) -> Any | None:
    """
    Examples:
        >>> checked_add(np.uint8(250), 5)
        np.uint8(255)
        >>> checked_add(np.uint8(250), 6) is None
        True
    """
    return require(type(x), CheckedAdd).checked_add(x, y)


def checked_sub(x: Any, y: Any) -> Any | None:
    return require(type(x), CheckedSub).checked_sub(x, y)


def checked_mul(x: Any, y: Any) -> Any | None:
    return require(type(x), CheckedMul).checked_mul(x, y)


def checked_div(x: Any, y: Any) -> Any | None:
    return require(type(x), CheckedDiv).checked_div(x, y)


def checked_rem(x: Any, y: Any) -> Any | None:
    return require(type(x), CheckedRem).checked_rem(x, y)


def checked_neg(x: Any) -> Any | None:
    return require(type(x), CheckedNeg).checked_neg(x)


def checked_shl(x: Any, shift: int) -> Any | None:
    """
    Examples:
        >>> checked_shl(np.uint8(1), 7)
        np.uint8(128)
        >>> checked_shl(np.uint8(1), 8) is None
        True
    """
    return require(type(x), CheckedShl).checked_shl(x, shift)


def checked_shr(x: Any, shift: int) -> Any | None:
    return require(type(x), CheckedShr).checked_shr(x, shift)
