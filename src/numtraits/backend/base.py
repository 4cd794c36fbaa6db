"""
MathBackend — интерфейс трансцендентных функций для full float tier

Backend работает с Python float (binary64) и следует IEEE-754:
- domain error → NaN
- полюс → ±inf
- overflow → ±inf

Backend никогда не бросает исключений для float аргументов. Conformance
float32 вычисляет в binary64 и округляет результат до single precision.
"""

import math
from abc import ABC, abstractmethod
from fractions import Fraction


class MathBackend(ABC):
    """Набор трансцендентных операций с идентичными сигнатурами для всех backends."""

    name: str = "abstract"

    # Округление

    @abstractmethod
    def floor(self, x: float) -> float: ...

    @abstractmethod
    def ceil(self, x: float) -> float: ...

    @abstractmethod
    def trunc(self, x: float) -> float: ...

    # Степени и корни

    @abstractmethod
    def sqrt(self, x: float) -> float: ...

    @abstractmethod
    def cbrt(self, x: float) -> float: ...

    @abstractmethod
    def powf(self, x: float, y: float) -> float: ...

    @abstractmethod
    def hypot(self, x: float, y: float) -> float: ...

    # Экспоненты и логарифмы

    @abstractmethod
    def exp(self, x: float) -> float: ...

    @abstractmethod
    def exp2(self, x: float) -> float: ...

    @abstractmethod
    def exp_m1(self, x: float) -> float: ...

    @abstractmethod
    def ln(self, x: float) -> float: ...

    @abstractmethod
    def log2(self, x: float) -> float: ...

    @abstractmethod
    def log10(self, x: float) -> float: ...

    @abstractmethod
    def ln_1p(self, x: float) -> float: ...

    # Тригонометрия

    @abstractmethod
    def sin(self, x: float) -> float: ...

    @abstractmethod
    def cos(self, x: float) -> float: ...

    @abstractmethod
    def tan(self, x: float) -> float: ...

    @abstractmethod
    def asin(self, x: float) -> float: ...

    @abstractmethod
    def acos(self, x: float) -> float: ...

    @abstractmethod
    def atan(self, x: float) -> float: ...

    @abstractmethod
    def atan2(self, y: float, x: float) -> float: ...

    # Гиперболические

    @abstractmethod
    def sinh(self, x: float) -> float: ...

    @abstractmethod
    def cosh(self, x: float) -> float: ...

    @abstractmethod
    def tanh(self, x: float) -> float: ...

    @abstractmethod
    def asinh(self, x: float) -> float: ...

    @abstractmethod
    def acosh(self, x: float) -> float: ...

    @abstractmethod
    def atanh(self, x: float) -> float: ...

    # Fused multiply-add

    def mul_add(self, x: float, a: float, b: float) -> float:
        """
        x * a + b с одним округлением.

        Для конечных аргументов произведение и сумма вычисляются точно
        в рациональных числах и округляются один раз. Нулевой точный
        результат и неконечные аргументы считаются по IEEE (знак нуля,
        NaN/inf пропагация).

        Examples:
            >>> NativeMathBackend().mul_add(0.1, 10.0, -1.0)
            5.551115123125783e-17
        """
        if not (math.isfinite(x) and math.isfinite(a) and math.isfinite(b)):
            return x * a + b

        exact = Fraction(x) * Fraction(a) + Fraction(b)
        if exact == 0:
            return x * a + b
        try:
            return float(exact)
        except OverflowError:
            return math.inf if exact > 0 else -math.inf

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
