"""
NumpyMathBackend — трансцендентные функции через numpy ufuncs

ufuncs уже следуют IEEE-754; предупреждения floating-point подавляются
через np.errstate на время вызова.
"""

import numpy as np

from numtraits.backend.base import MathBackend


def _call(ufunc: np.ufunc, *args: float) -> float:
    with np.errstate(all="ignore"):
        return float(ufunc(*(np.float64(a) for a in args)))


class NumpyMathBackend(MathBackend):
    """Substitute backend на numpy (не зависит от поведения модуля math)."""

    name = "numpy"

    def floor(self, x: float) -> float:
        return _call(np.floor, x)

    def ceil(self, x: float) -> float:
        return _call(np.ceil, x)

    def trunc(self, x: float) -> float:
        return _call(np.trunc, x)

    def sqrt(self, x: float) -> float:
        return _call(np.sqrt, x)

    def cbrt(self, x: float) -> float:
        return _call(np.cbrt, x)

    def powf(self, x: float, y: float) -> float:
        return _call(np.power, x, y)

    def hypot(self, x: float, y: float) -> float:
        return _call(np.hypot, x, y)

    def exp(self, x: float) -> float:
        return _call(np.exp, x)

    def exp2(self, x: float) -> float:
        return _call(np.exp2, x)

    def exp_m1(self, x: float) -> float:
        return _call(np.expm1, x)

    def ln(self, x: float) -> float:
        return _call(np.log, x)

    def log2(self, x: float) -> float:
        return _call(np.log2, x)

    def log10(self, x: float) -> float:
        return _call(np.log10, x)

    def ln_1p(self, x: float) -> float:
        return _call(np.log1p, x)

    def sin(self, x: float) -> float:
        return _call(np.sin, x)

    def cos(self, x: float) -> float:
        return _call(np.cos, x)

    def tan(self, x: float) -> float:
        return _call(np.tan, x)

    def asin(self, x: float) -> float:
        return _call(np.arcsin, x)

    def acos(self, x: float) -> float:
        return _call(np.arccos, x)

    def atan(self, x: float) -> float:
        return _call(np.arctan, x)

    def atan2(self, y: float, x: float) -> float:
        return _call(np.arctan2, y, x)

    def sinh(self, x: float) -> float:
        return _call(np.sinh, x)

    def cosh(self, x: float) -> float:
        return _call(np.cosh, x)

    def tanh(self, x: float) -> float:
        return _call(np.tanh, x)

    def asinh(self, x: float) -> float:
        return _call(np.arcsinh, x)

    def acosh(self, x: float) -> float:
        return _call(np.arccosh, x)

    def atanh(self, x: float) -> float:
        return _call(np.arctanh, x)
