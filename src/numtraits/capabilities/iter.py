"""
Checked folds — сумма и произведение последовательности с проверкой overflow
"""

from typing import Any, Iterable

from numtraits.capabilities.checked import CheckedAdd, CheckedMul
from numtraits.capabilities.identities import One, Zero
from numtraits.registry import require


def checked_sum(values: Iterable[Any], numeric_type: type) -> Any | None:
    """
    Сумма слева направо; None при первом overflow.

    Пустая последовательность → zero(numeric_type). Для signed типов
    результат зависит от порядка элементов.

    Examples:
        >>> checked_sum([np.int8(120), np.int8(8), np.int8(-1)], np.int8) is None
        True
        >>> checked_sum([np.int8(-1), np.int8(120), np.int8(8)], np.int8)
        np.int8(127)
    """
    checked = require(numeric_type, CheckedAdd)
    acc = require(numeric_type, Zero).zero()
    for value in values:
        acc = checked.checked_add(acc, value)
        if acc is None:
            return None
    return acc


def checked_product(values: Iterable[Any], numeric_type: type) -> Any | None:
    """
    Произведение слева направо; None при первом overflow.

    Пустая последовательность → one(numeric_type).
    """
    checked = require(numeric_type, CheckedMul)
    acc = require(numeric_type, One).one()
    for value in values:
        acc = checked.checked_mul(acc, value)
        if acc is None:
            return None
    return acc
