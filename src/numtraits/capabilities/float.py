"""
Float tiers — FloatCore, Real, Float

FloatCore — операции без внешнего math backend: классификация
(NaN/inf/finite/normal/subnormal), константы из битовых паттернов,
min/max с IEEE семантикой (NaN никогда не предпочитается числу),
copysign, битовая декомпозиция (mantissa, exponent, sign).

Real — трансцендентные функции и округление; требует math backend.

Float(Real, FloatCore) — полный тир. Любая Float conformance является
FloatCore conformance с идентичными результатами (наследование).
"""

from abc import abstractmethod
from enum import Enum
from typing import Any

from numtraits.base import Capability
from numtraits.registry import require


# =============================================================================
# ENUMS
# =============================================================================


class FpCategory(str, Enum):
    """Категория IEEE-754 значения."""

    NAN = "NAN"
    INFINITE = "INFINITE"
    ZERO = "ZERO"
    SUBNORMAL = "SUBNORMAL"
    NORMAL = "NORMAL"


# =============================================================================
# CORE TIER
# =============================================================================


class FloatCore(Capability):
    """
    Float операции без math backend.

    Константы и классификация выводятся из битового представления,
    поэтому тир работает без трансцендентных функций.
    """

    # Константы

    @abstractmethod
    def nan(self) -> Any: ...

    @abstractmethod
    def infinity(self) -> Any: ...

    @abstractmethod
    def neg_infinity(self) -> Any: ...

    @abstractmethod
    def neg_zero(self) -> Any: ...

    @abstractmethod
    def min_value(self) -> Any:
        """Наименьшее конечное значение (-MAX)."""

    @abstractmethod
    def min_positive_value(self) -> Any:
        """Наименьшее положительное нормальное значение."""

    @abstractmethod
    def epsilon(self) -> Any:
        """Разница между 1.0 и следующим представимым значением."""

    @abstractmethod
    def max_value(self) -> Any:
        """Наибольшее конечное значение."""

    # Битовое представление

    @abstractmethod
    def to_bits(self, x: Any) -> int: ...

    @abstractmethod
    def from_bits(self, bits: int) -> Any: ...

    @abstractmethod
    def integer_decode(self, x: Any) -> tuple[int, int, int]:
        """
        (mantissa, exponent, sign) такие, что x == sign * mantissa * 2**exponent.

        Для NaN и inf результат определяется битами, а не значением.
        """

    @abstractmethod
    def classify(self, x: Any) -> FpCategory: ...

    # Классификация

    @abstractmethod
    def is_nan(self, x: Any) -> bool: ...

    @abstractmethod
    def is_infinite(self, x: Any) -> bool: ...

    @abstractmethod
    def is_finite(self, x: Any) -> bool: ...

    def is_normal(self, x: Any) -> bool:
        return self.classify(x) is FpCategory.NORMAL

    def is_subnormal(self, x: Any) -> bool:
        return self.classify(x) is FpCategory.SUBNORMAL

    @abstractmethod
    def is_sign_positive(self, x: Any) -> bool:
        """Знаковый бит сброшен (включая +0.0, +inf и NaN с положительным знаком)."""

    @abstractmethod
    def is_sign_negative(self, x: Any) -> bool: ...

    # Операции

    @abstractmethod
    def min(self, x: Any, y: Any) -> Any:
        """Минимум; если один аргумент NaN, возвращается другой."""

    @abstractmethod
    def max(self, x: Any, y: Any) -> Any:
        """Максимум; если один аргумент NaN, возвращается другой."""

    @abstractmethod
    def clamp(self, x: Any, lo: Any, hi: Any) -> Any:
        """Ограничение [lo, hi]; NaN пропагирует. lo > hi → ValueError."""

    @abstractmethod
    def copysign(self, x: Any, sign: Any) -> Any: ...

    @abstractmethod
    def abs(self, x: Any) -> Any: ...

    @abstractmethod
    def signum(self, x: Any) -> Any: ...

    @abstractmethod
    def recip(self, x: Any) -> Any: ...

    @abstractmethod
    def powi(self, x: Any, n: int) -> Any:
        """x в целой степени n (возведение в квадрат, n < 0 → recip)."""

    @abstractmethod
    def to_degrees(self, x: Any) -> Any: ...

    @abstractmethod
    def to_radians(self, x: Any) -> Any: ...


# =============================================================================
# FULL TIER
# =============================================================================


class Real(Capability):
    """Округление и трансцендентные функции (требует math backend)."""

    @abstractmethod
    def floor(self, x: Any) -> Any: ...

    @abstractmethod
    def ceil(self, x: Any) -> Any: ...

    @abstractmethod
    def round(self, x: Any) -> Any:
        """Округление half away from zero."""

    @abstractmethod
    def trunc(self, x: Any) -> Any: ...

    @abstractmethod
    def fract(self, x: Any) -> Any:
        """x - trunc(x)."""

    @abstractmethod
    def mul_add(self, x: Any, a: Any, b: Any) -> Any:
        """x * a + b с одним округлением."""

    @abstractmethod
    def sqrt(self, x: Any) -> Any: ...

    @abstractmethod
    def cbrt(self, x: Any) -> Any: ...

    @abstractmethod
    def exp(self, x: Any) -> Any: ...

    @abstractmethod
    def exp2(self, x: Any) -> Any: ...

    @abstractmethod
    def exp_m1(self, x: Any) -> Any: ...

    @abstractmethod
    def ln(self, x: Any) -> Any: ...

    @abstractmethod
    def log(self, x: Any, base: Any) -> Any: ...

    @abstractmethod
    def log2(self, x: Any) -> Any: ...

    @abstractmethod
    def log10(self, x: Any) -> Any: ...

    @abstractmethod
    def ln_1p(self, x: Any) -> Any: ...

    @abstractmethod
    def powf(self, x: Any, y: Any) -> Any: ...

    @abstractmethod
    def hypot(self, x: Any, y: Any) -> Any: ...

    @abstractmethod
    def sin(self, x: Any) -> Any: ...

    @abstractmethod
    def cos(self, x: Any) -> Any: ...

    @abstractmethod
    def tan(self, x: Any) -> Any: ...

    def sin_cos(self, x: Any) -> tuple[Any, Any]:
        return self.sin(x), self.cos(x)

    @abstractmethod
    def asin(self, x: Any) -> Any: ...

    @abstractmethod
    def acos(self, x: Any) -> Any: ...

    @abstractmethod
    def atan(self, x: Any) -> Any: ...

    @abstractmethod
    def atan2(self, y: Any, x: Any) -> Any: ...

    @abstractmethod
    def sinh(self, x: Any) -> Any: ...

    @abstractmethod
    def cosh(self, x: Any) -> Any: ...

    @abstractmethod
    def tanh(self, x: Any) -> Any: ...

    @abstractmethod
    def asinh(self, x: Any) -> Any: ...

    @abstractmethod
    def acosh(self, x: Any) -> Any: ...

    @abstractmethod
    def atanh(self, x: Any) -> Any: ...


class Float(Real, FloatCore):
    """Полный float тир: Real + FloatCore."""


# =============================================================================
# GENERIC FUNCTIONS (CORE TIER)
# =============================================================================


def nan(numeric_type: type) -> Any:
    return require(numeric_type, FloatCore).nan()


def infinity(numeric_type: type) -> Any:
    return require(numeric_type, FloatCore).infinity()


def neg_infinity(numeric_type: type) -> Any:
    return require(numeric_type, FloatCore).neg_infinity()


def neg_zero(numeric_type: type) -> Any:
    return require(numeric_type, FloatCore).neg_zero()


def epsilon(numeric_type: type) -> Any:
    return require(numeric_type, FloatCore).epsilon()


def min_positive_value(numeric_type: type) -> Any:
    return require(numeric_type, FloatCore).min_positive_value()


def is_nan(x: Any) -> bool:
    """
    Examples:
        >>> is_nan(np.float64(0.0) / np.float64(0.0))  # doctest: +SKIP
        True
    """
    return require(type(x), FloatCore).is_nan(x)


def is_infinite(x: Any) -> bool:
    return require(type(x), FloatCore).is_infinite(x)


def is_finite(x: Any) -> bool:
    return require(type(x), FloatCore).is_finite(x)


def is_normal(x: Any) -> bool:
    return require(type(x), FloatCore).is_normal(x)


def is_subnormal(x: Any) -> bool:
    return require(type(x), FloatCore).is_subnormal(x)


def classify(x: Any) -> FpCategory:
    return require(type(x), FloatCore).classify(x)


def fmin(x: Any, y: Any) -> Any:
    """
    IEEE минимум: NaN никогда не предпочитается числу.

    Examples:
        >>> fmin(float("nan"), 1.0)
        1.0
    """
    return require(type(x), FloatCore).min(x, y)


def fmax(x: Any, y: Any) -> Any:
    return require(type(x), FloatCore).max(x, y)


def copysign(x: Any, sign: Any) -> Any:
    return require(type(x), FloatCore).copysign(x, sign)


def to_bits(x: Any) -> int:
    return require(type(x), FloatCore).to_bits(x)


def from_bits(numeric_type: type, bits: int) -> Any:
    return require(numeric_type, FloatCore).from_bits(bits)


def integer_decode(x: Any) -> tuple[int, int, int]:
    """
    Examples:
        >>> integer_decode(2.0)
        (4503599627370496, -51, 1)
    """
    return require(type(x), FloatCore).integer_decode(x)


# =============================================================================
# GENERIC FUNCTIONS (FULL TIER)
# =============================================================================


def floor(x: Any) -> Any:
    return require(type(x), Real).floor(x)


def ceil(x: Any) -> Any:
    return require(type(x), Real).ceil(x)


def round_(x: Any) -> Any:
    """Округление half away from zero: round_(2.5) == 3.0, round_(-2.5) == -3.0."""
    return require(type(x), Real).round(x)


def trunc(x: Any) -> Any:
    return require(type(x), Real).trunc(x)


def fract(x: Any) -> Any:
    return require(type(x), Real).fract(x)


def sqrt(x: Any) -> Any:
    return require(type(x), Real).sqrt(x)


def mul_add(x: Any, a: Any, b: Any) -> Any:
    return require(type(x), Real).mul_add(x, a, b)


def powf(x: Any, y: Any) -> Any:
    return require(type(x), Real).powf(x, y)
