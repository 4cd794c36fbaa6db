"""
Тесты full float tier и math backends

Проверяет:
1. IEEE семантику особых случаев для обоих backends (domain → NaN, полюс → ±inf)
2. Backends не бросают исключений
3. Округление (round half away from zero), fract, mul_add с одним округлением
4. Округление результатов float32 до single precision
5. Euclid для float
"""

import math

import numpy as np
import pytest

from numtraits import (
    ceil,
    div_euclid,
    floor,
    fract,
    mul_add,
    pow,
    powf,
    rem_euclid,
    round_,
    sqrt,
    trunc,
)
from numtraits.backend import MathBackend, NativeMathBackend, NumpyMathBackend
from numtraits.primitives import FloatConformance
from numtraits.primitives.specs import F32, F64

BACKENDS = [NativeMathBackend(), NumpyMathBackend()]

NAN = math.nan
INF = math.inf

# (операция, аргументы, ожидаемый результат)
IEEE_SPECIAL_CASES = [
    ("sqrt", (-1.0,), NAN),
    ("sqrt", (4.0,), 2.0),
    ("ln", (0.0,), -INF),
    ("ln", (-1.0,), NAN),
    ("log2", (0.0,), -INF),
    ("log2", (8.0,), 3.0),
    ("log10", (-0.0,), -INF),
    ("ln_1p", (-1.0,), -INF),
    ("ln_1p", (-2.0,), NAN),
    ("exp", (1000.0,), INF),
    ("exp", (-INF,), 0.0),
    ("exp2", (2000.0,), INF),
    ("exp2", (10.0,), 1024.0),
    ("exp_m1", (1000.0,), INF),
    ("exp_m1", (0.0,), 0.0),
    ("powf", (0.0, -1.0), INF),
    ("powf", (-0.0, -1.0), -INF),
    ("powf", (-0.0, -2.0), INF),
    ("powf", (-8.0, 0.5), NAN),
    ("powf", (10.0, 400.0), INF),
    ("powf", (-10.0, 401.0), -INF),
    ("powf", (2.0, 10.0), 1024.0),
    ("hypot", (3.0, 4.0), 5.0),
    ("hypot", (INF, NAN), INF),
    ("sin", (INF,), NAN),
    ("cos", (-INF,), NAN),
    ("asin", (2.0,), NAN),
    ("acos", (1.0,), 0.0),
    ("sinh", (1000.0,), INF),
    ("sinh", (-1000.0,), -INF),
    ("cosh", (-1000.0,), INF),
    ("tanh", (INF,), 1.0),
    ("asinh", (0.0,), 0.0),
    ("acosh", (0.5,), NAN),
    ("acosh", (1.0,), 0.0),
    ("atanh", (1.0,), INF),
    ("atanh", (-1.0,), -INF),
    ("atanh", (2.0,), NAN),
    ("floor", (-0.5,), -1.0),
    ("floor", (INF,), INF),
    ("trunc", (-1.7,), -1.0),
    ("trunc", (NAN,), NAN),
]

SPECIAL_INPUTS = [NAN, INF, -INF, 0.0, -0.0, -1.0, 1.0, 2.0, 0.5, 1e308, -1e308, 5e-324]

UNARY_METHODS = [
    "floor", "ceil", "trunc", "sqrt", "cbrt", "exp", "exp2", "exp_m1", "ln",
    "log2", "log10", "ln_1p", "sin", "cos", "tan", "asin", "acos", "atan",
    "sinh", "cosh", "tanh", "asinh", "acosh", "atanh",
]
BINARY_METHODS = ["powf", "hypot", "atan2"]


def _assert_ieee_equal(result: float, expected: float) -> None:
    if math.isnan(expected):
        assert math.isnan(result)
    else:
        assert result == expected


# =============================================================================
# ТЕСТЫ BACKENDS
# =============================================================================


@pytest.mark.parametrize("backend", BACKENDS, ids=lambda b: b.name)
class TestMathBackends:
    """Оба backends дают IEEE результаты"""

    @pytest.mark.parametrize("operation, args, expected", IEEE_SPECIAL_CASES)
    def test_ieee_special_cases(
        self, backend: MathBackend, operation: str, args: tuple, expected: float
    ) -> None:
        """Domain error → NaN, полюс → ±inf, overflow → ±inf"""
        _assert_ieee_equal(getattr(backend, operation)(*args), expected)

    def test_never_raises(self, backend: MathBackend) -> None:
        """Ни одна операция не бросает исключений на особых значениях"""
        for name in UNARY_METHODS:
            for x in SPECIAL_INPUTS:
                assert isinstance(getattr(backend, name)(x), float), (name, x)
        for name in BINARY_METHODS:
            for x in SPECIAL_INPUTS:
                for y in SPECIAL_INPUTS:
                    assert isinstance(getattr(backend, name)(x, y), float), (name, x, y)

    def test_ceil_keeps_negative_zero(self, backend: MathBackend) -> None:
        """ceil(-0.5) == -0.0"""
        result = backend.ceil(-0.5)
        assert result == 0.0
        assert math.copysign(1.0, result) == -1.0

    def test_cbrt_of_negative(self, backend: MathBackend) -> None:
        """cbrt определён для отрицательных"""
        assert backend.cbrt(-27.0) == pytest.approx(-3.0)

    def test_mul_add_single_rounding(self, backend: MathBackend) -> None:
        """mul_add округляет один раз"""
        assert 0.1 * 10.0 - 1.0 == 0.0
        assert backend.mul_add(0.1, 10.0, -1.0) == 5.551115123125783e-17
        assert backend.mul_add(1e308, 10.0, 0.0) == INF
        assert math.isnan(backend.mul_add(INF, 0.0, 1.0))
        exact_zero = backend.mul_add(2.0, 3.0, -6.0)
        assert exact_zero == 0.0
        assert math.copysign(1.0, exact_zero) == 1.0


# =============================================================================
# ТЕСТЫ FLOAT CONFORMANCE
# =============================================================================


@pytest.mark.parametrize("backend", BACKENDS, ids=lambda b: b.name)
class TestFloatConformance:
    """Real операции full tier через внедрённый backend"""

    def test_round_half_away_from_zero(self, backend: MathBackend) -> None:
        """round(2.5) == 3, round(-2.5) == -3, round(-0.4) == -0.0"""
        f64 = FloatConformance(float, F64, backend)
        assert f64.round(2.5) == 3.0
        assert f64.round(-2.5) == -3.0
        assert f64.round(0.49999999999999994) == 0.0
        assert f64.round(1.4) == 1.0
        negative_zero = f64.round(-0.4)
        assert negative_zero == 0.0
        assert math.copysign(1.0, negative_zero) == -1.0
        assert f64.round(INF) == INF
        assert math.isnan(f64.round(NAN))

    def test_fract(self, backend: MathBackend) -> None:
        """fract(x) == x - trunc(x)"""
        f64 = FloatConformance(np.float64, F64, backend)
        assert f64.fract(np.float64(1.75)) == 0.75
        assert f64.fract(np.float64(-1.75)) == -0.75
        assert math.isnan(f64.fract(np.float64(INF)))

    def test_log_with_base(self, backend: MathBackend) -> None:
        """log(x, base) == ln(x) / ln(base)"""
        f64 = FloatConformance(float, F64, backend)
        assert f64.log(8.0, 2.0) == pytest.approx(3.0)
        assert f64.log(2.0, 1.0) == INF

    def test_sin_cos(self, backend: MathBackend) -> None:
        """sin_cos возвращает пару"""
        f64 = FloatConformance(float, F64, backend)
        assert f64.sin_cos(0.0) == (0.0, 1.0)
        assert f64.atan2(1.0, 1.0) == pytest.approx(math.pi / 4)

    def test_float32_results_are_rounded(self, backend: MathBackend) -> None:
        """Результаты float32 округлены до single precision"""
        f32 = FloatConformance(np.float32, F32, backend)
        result = f32.sqrt(np.float32(2.0))
        assert type(result) is np.float32
        assert result == np.float32(math.sqrt(2.0))
        assert f32.exp(np.float32(100.0)) == INF
        assert f32.mul_add(np.float32(2.0), np.float32(3.0), np.float32(1.0)) == 7.0


# =============================================================================
# ТЕСТЫ GENERIC ФУНКЦИЙ (default registry)
# =============================================================================


class TestGenericFunctions:
    """Generic функции full tier на default registry"""

    def test_rounding_functions(self) -> None:
        """floor/ceil/round_/trunc/fract"""
        assert floor(np.float64(-1.5)) == -2.0
        assert ceil(np.float32(1.2)) == 2.0
        assert round_(-2.5) == -3.0
        assert trunc(np.float64(2.9)) == 2.0
        assert fract(2.25) == 0.25

    def test_sqrt_and_powf(self) -> None:
        """sqrt, powf и mul_add"""
        assert sqrt(np.float64(9.0)) == 3.0
        assert math.isnan(sqrt(-1.0))
        assert powf(np.float64(2.0), 0.5) == pytest.approx(math.sqrt(2.0))
        assert mul_add(0.1, 10.0, -1.0) == 5.551115123125783e-17

    def test_pow_with_float_exponent(self) -> None:
        """pow() с float показателем использует powf"""
        assert pow(np.float64(4.0), 0.5) == 2.0
        assert pow(np.float64(2.0), 3) == 8.0

    def test_float_euclid(self) -> None:
        """div_euclid/rem_euclid для float"""
        assert div_euclid(np.float64(-7.0), 4.0) == -2.0
        assert rem_euclid(np.float64(-7.0), 4.0) == 1.0
        assert div_euclid(7.0, -4.0) == -1.0
        assert rem_euclid(7.0, -4.0) == 3.0
        assert rem_euclid(np.float32(-0.5), np.float32(2.0)) == 1.5
