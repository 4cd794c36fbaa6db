"""
Pow & Inv — возведение в степень и обратное значение

pow() — возведение в степень квадратами через One и Num.mul, поэтому
работает для integer types так же, как для float. exp == 0 → one().
Для fixed-width integer результат берётся по модулю 2^bits (не проверяется);
checked_pow() возвращает None при overflow.

inv(x) == one() / x. Деление на ноль не проверяется отдельно: результат
определяется делением типа (для float: inf).
"""

import numbers
from abc import abstractmethod
from typing import Any

from numtraits.base import Capability
from numtraits.capabilities.checked import CheckedMul
from numtraits.capabilities.identities import Num, One
from numtraits.registry import REGISTRY, require


# =============================================================================
# CAPABILITY SETS
# =============================================================================


class Pow(Capability):
    """Возведение значения в степень."""

    @abstractmethod
    def pow(self, base: Any, exp: Any) -> Any:
        """
        base ** exp.

        Integer types: exp — неотрицательный int. Float types: int (powi)
        или float (powf, требует full float tier).
        """


class Inv(Capability):
    """Мультипликативная обратная величина."""

    @abstractmethod
    def inv(self, x: Any) -> Any: ...


# =============================================================================
# GENERIC FUNCTIONS
# =============================================================================


def validate_exponent(exp: int) -> int:
    """
    Raises:
        TypeError: Если exp не целое (bool не принимается)
        ValueError: Если exp < 0
    """
    if isinstance(exp, bool) or not isinstance(exp, numbers.Integral):
        raise TypeError(f"exponent must be an int, got {type(exp).__name__}")
    exp = int(exp)
    if exp < 0:
        raise ValueError(f"exponent must be non-negative, got {exp}")
    return exp


def pow_by_squaring(conformance: Num, base: Any, exp: int) -> Any:
    """
    Возведение в степень квадратами через conformance.mul.

    Args:
        conformance: Num conformance типа base
        base: Основание
        exp: Неотрицательный показатель

    Returns:
        base ** exp в арифметике типа
    """
    exp = validate_exponent(exp)
    if exp == 0:
        return conformance.one()

    while exp & 1 == 0:
        base = conformance.mul(base, base)
        exp >>= 1
    if exp == 1:
        return base

    acc = base
    while exp > 1:
        exp >>= 1
        base = conformance.mul(base, base)
        if exp & 1 == 1:
            acc = conformance.mul(acc, base)
    return acc


def pow(base: Any, exp: int) -> Any:
    """
    base ** exp для любого Num типа.

    Если тип реализует Pow, используется его conformance. Тип ищется в
    default registry.

    Examples:
        >>> pow(np.int32(2), 10)
        np.int32(1024)
        >>> pow(np.int8(-3), 3)
        np.int8(-27)
    """
    numeric_type = type(base)
    if REGISTRY.satisfies(numeric_type, Pow):
        return require(numeric_type, Pow).pow(base, exp)
    return pow_by_squaring(require(numeric_type, Num), base, exp)


def checked_pow(base: Any, exp: int) -> Any | None:
    """
    base ** exp; None при overflow.

    Examples:
        >>> checked_pow(np.int8(2), 4)
        np.int8(16)
        >>> checked_pow(np.int8(7), 8) is None
        True
    """
    numeric_type = type(base)
    checked = require(numeric_type, CheckedMul)
    identity = require(numeric_type, One)

    exp = validate_exponent(exp)
    if exp == 0:
        return identity.one()

    while exp & 1 == 0:
        base = checked.checked_mul(base, base)
        if base is None:
            return None
        exp >>= 1
    if exp == 1:
        return base

    acc = base
    while exp > 1:
        exp >>= 1
        base = checked.checked_mul(base, base)
        if base is None:
            return None
        if exp & 1 == 1:
            acc = checked.checked_mul(acc, base)
            if acc is None:
                return None
    return acc


def inv(x: Any) -> Any:
    """
    Examples:
        >>> inv(np.float64(4.0))
        np.float64(0.25)
        >>> inv(np.float64(0.0))
        np.float64(inf)
    """
    return require(type(x), Inv).inv(x)
