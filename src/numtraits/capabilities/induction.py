"""
Induction — n-е значение последовательности zero, one, one + one, ...

Доступно для любого Num типа. Для типов с CheckedAdd переполнение
последовательности бросает OverflowError (nth(np.int8, 128)); float
насыщается до inf по правилам сложения.
"""

import operator
from typing import Any

from numtraits.capabilities.checked import CheckedAdd
from numtraits.capabilities.identities import Num
from numtraits.registry import require


def nth(numeric_type: type, n: int) -> Any:
    """
    Сумма n единиц типа.

    Считается удвоением, поэтому стоимость O(log n).

    Raises:
        ValueError: n < 0
        OverflowError: Сумма вне диапазона типа

    Examples:
        >>> nth(np.int8, 127)
        np.int8(127)
        >>> nth(np.float32, 3)
        np.float32(3.0)
    """
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"nth requires a non-negative index, got {n}")

    num = require(numeric_type, Num)
    if isinstance(num, CheckedAdd):

        def add(x: Any, y: Any) -> Any:
            total = num.checked_add(x, y)
            if total is None:
                raise OverflowError(f"nth({num.name}, {n}) overflows {num.name}")
            return total
    else:
        add = num.add

    acc, step = num.zero(), num.one()
    remaining = n
    while remaining:
        if remaining & 1:
            acc = add(acc, step)
        remaining >>= 1
        if remaining:
            step = add(step, step)
    return acc
