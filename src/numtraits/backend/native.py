"""
NativeMathBackend — трансцендентные функции через stdlib math

stdlib math бросает ValueError/OverflowError там, где IEEE-754 возвращает
NaN или ±inf. Backend приводит эти случаи к IEEE результатам.
"""

import math
from typing import Callable

from numtraits.backend.base import MathBackend


def _ieee(fn: Callable[..., float], *args: float, overflow: float = math.inf) -> float:
    """Вызов math функции: ValueError → NaN, OverflowError → overflow."""
    try:
        return fn(*args)
    except OverflowError:
        return overflow
    except ValueError:
        return math.nan


def _is_odd_integer(y: float) -> bool:
    return math.isfinite(y) and y.is_integer() and int(y) % 2 == 1


def _integral(fn: Callable[[float], int], x: float) -> float:
    # math.floor/ceil/trunc возвращают int и теряют знак нуля
    if not math.isfinite(x):
        return x
    result = float(fn(x))
    if result == 0.0:
        return math.copysign(0.0, x)
    return result


class NativeMathBackend(MathBackend):
    """Платформенный libm (через модуль math) с IEEE нормализацией."""

    name = "native"

    def floor(self, x: float) -> float:
        return _integral(math.floor, x)

    def ceil(self, x: float) -> float:
        return _integral(math.ceil, x)

    def trunc(self, x: float) -> float:
        return _integral(math.trunc, x)

    def sqrt(self, x: float) -> float:
        return _ieee(math.sqrt, x)

    def cbrt(self, x: float) -> float:
        return math.cbrt(x)

    def powf(self, x: float, y: float) -> float:
        """
        IEEE pow: pow(±0, y < 0) → ±inf (знак только для нечётного целого y),
        отрицательное основание с нецелым показателем → NaN.
        """
        try:
            return math.pow(x, y)
        except OverflowError:
            negative = x < 0 and _is_odd_integer(y)
            return -math.inf if negative else math.inf
        except ValueError:
            if x == 0.0:
                return math.copysign(math.inf, x) if _is_odd_integer(y) else math.inf
            return math.nan

    def hypot(self, x: float, y: float) -> float:
        return _ieee(math.hypot, x, y)

    def exp(self, x: float) -> float:
        return _ieee(math.exp, x)

    def exp2(self, x: float) -> float:
        return _ieee(math.exp2, x)

    def exp_m1(self, x: float) -> float:
        return _ieee(math.expm1, x)

    def ln(self, x: float) -> float:
        if x == 0.0:
            return -math.inf
        return _ieee(math.log, x)

    def log2(self, x: float) -> float:
        if x == 0.0:
            return -math.inf
        return _ieee(math.log2, x)

    def log10(self, x: float) -> float:
        if x == 0.0:
            return -math.inf
        return _ieee(math.log10, x)

    def ln_1p(self, x: float) -> float:
        if x == -1.0:
            return -math.inf
        return _ieee(math.log1p, x)

    def sin(self, x: float) -> float:
        return _ieee(math.sin, x)

    def cos(self, x: float) -> float:
        return _ieee(math.cos, x)

    def tan(self, x: float) -> float:
        return _ieee(math.tan, x)

    def asin(self, x: float) -> float:
        return _ieee(math.asin, x)

    def acos(self, x: float) -> float:
        return _ieee(math.acos, x)

    def atan(self, x: float) -> float:
        return math.atan(x)

    def atan2(self, y: float, x: float) -> float:
        return math.atan2(y, x)

    def sinh(self, x: float) -> float:
        return _ieee(math.sinh, x, overflow=math.copysign(math.inf, x))

    def cosh(self, x: float) -> float:
        return _ieee(math.cosh, x)

    def tanh(self, x: float) -> float:
        return math.tanh(x)

    def asinh(self, x: float) -> float:
        return math.asinh(x)

    def acosh(self, x: float) -> float:
        return _ieee(math.acosh, x)

    def atanh(self, x: float) -> float:
        if x == 1.0 or x == -1.0:
            return math.copysign(math.inf, x)
        return _ieee(math.atanh, x)
