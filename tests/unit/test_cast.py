"""
Тесты casting: точный cast() и best-effort as_()

Проверяет:
1. Отклонение значений вне диапазона для всех пар типов
2. Round-trip через более широкий тип той же знаковости
3. Точность int → float и float64 → float32
4. Семантику нативного numeric cast в as_()
"""

import math

import numpy as np
import pytest

from numtraits import (
    CapabilityError,
    Int128,
    UInt128,
    as_,
    cast,
    max_value,
    min_value,
    to_exact,
)

SIGNED_CHAIN = [np.int8, np.int16, np.int32, np.int64, Int128]
UNSIGNED_CHAIN = [np.uint8, np.uint16, np.uint32, np.uint64, UInt128]
UNSIGNED_TARGETS = UNSIGNED_CHAIN


def _widening_pairs(chain: list) -> list:
    return [(chain[i], chain[j]) for i in range(len(chain)) for j in range(i + 1, len(chain))]


# =============================================================================
# ТЕСТЫ ТОЧНОГО CAST
# =============================================================================


class TestCastRejection:
    """cast() отклоняет непредставимые значения"""

    @pytest.mark.parametrize("target", UNSIGNED_TARGETS, ids=lambda t: t.__name__)
    def test_negative_one_to_unsigned(self, target: type) -> None:
        """-1i32 → любой unsigned → None"""
        assert cast(np.int32(-1), target) is None
        assert cast(-1, target) is None

    def test_out_of_range_narrowing(self) -> None:
        """256i32 → u8 → None, 255 проходит"""
        assert cast(np.int32(256), np.uint8) is None
        assert cast(np.int32(255), np.uint8) == 255
        assert cast(np.int16(-129), np.int8) is None
        assert cast(np.uint8(128), np.int8) is None
        assert cast(np.uint64(2**64 - 1), np.int64) is None

    @pytest.mark.parametrize(
        "source, target",
        [(s, t) for s in SIGNED_CHAIN + UNSIGNED_CHAIN for t in SIGNED_CHAIN + UNSIGNED_CHAIN],
        ids=lambda t: t.__name__,
    )
    def test_every_pair_respects_target_range(self, source: type, target: type) -> None:
        """Для каждой пары: результат есть iff значение в диапазоне target"""
        low, high = int(min_value(target)), int(max_value(target))
        for value in (min_value(source), max_value(source), source(0), source(1)):
            result = cast(value, target)
            if low <= int(value) <= high:
                assert result == int(value)
                assert type(result) is target
            else:
                assert result is None

    def test_fractional_and_non_finite_floats(self) -> None:
        """Дробная часть, NaN и inf не приводятся к integer"""
        assert cast(np.float64(2.5), np.int16) is None
        assert cast(np.float64(3.0), np.int16) == 3
        assert cast(np.float64(math.nan), np.int32) is None
        assert cast(np.float64(math.inf), np.int64) is None
        assert cast(np.float32(16777216.0), np.int32) == 16777216
        assert cast(-0.0, np.uint8) == 0

    def test_int_to_float_must_be_exact(self) -> None:
        """2**53 + 1 непредставимо в float64"""
        assert cast(2**53 + 1, np.float64) is None
        assert cast(2**53, np.float64) == 2.0**53
        assert cast(np.int64(2**53 + 1), float) is None
        assert cast(np.int32(16777217), np.float32) is None
        assert cast(np.int32(16777216), np.float32) == 16777216.0
        assert cast(UInt128(2**128 - 1), np.float64) is None

    def test_float64_to_float32_must_be_exact(self) -> None:
        """Потеря точности или overflow → None, NaN и inf сохраняются"""
        assert cast(np.float64(0.1), np.float32) is None
        assert cast(np.float64(0.5), np.float32) == 0.5
        assert cast(np.float64(1e300), np.float32) is None
        assert math.isnan(cast(np.float64(math.nan), np.float32))
        assert cast(np.float64(-math.inf), np.float32) == -math.inf

    def test_python_int_and_float(self) -> None:
        """int и float участвуют в cast как source и target"""
        assert cast(np.uint64(2**64 - 1), int) == 2**64 - 1
        assert cast(2**64, np.uint64) is None
        assert cast(1.5, int) is None
        assert cast(np.float32(0.25), float) == 0.25
        assert type(cast(np.int8(3), float)) is float


class TestCastRoundTrip:
    """Round-trip через более широкий тип той же знаковости"""

    @pytest.mark.parametrize(
        "narrow, wide",
        _widening_pairs(SIGNED_CHAIN) + _widening_pairs(UNSIGNED_CHAIN),
        ids=lambda t: t.__name__,
    )
    def test_widen_and_back(self, narrow: type, wide: type) -> None:
        """cast(cast(x, wide), narrow) == x"""
        for x in (min_value(narrow), max_value(narrow), narrow(0), narrow(1)):
            widened = cast(x, wide)
            assert widened is not None
            back = cast(widened, narrow)
            assert back == x
            assert type(back) is narrow

    def test_float32_through_float64(self) -> None:
        """float32 → float64 → float32 без потерь"""
        for x in (np.float32(0.1), np.float32(-3.4e38), np.float32(1e-45)):
            assert cast(cast(x, np.float64), np.float32) == x


# =============================================================================
# ТЕСТЫ BEST-EFFORT AS_
# =============================================================================


class TestAsPrimitive:
    """as_() повторяет нативное numeric преобразование"""

    def test_integer_narrowing_keeps_low_bits(self) -> None:
        """Сужение отбрасывает старшие биты, смена знака реинтерпретирует"""
        assert as_(np.int16(768), np.uint8) == 0
        assert as_(np.int16(-1), np.uint16) == 65535
        assert as_(np.uint8(200), np.int8) == -56
        assert as_(Int128(-1), np.uint64) == 2**64 - 1
        assert as_(2**70 + 5, np.uint8) == 5

    def test_float_to_int_truncates_and_saturates(self) -> None:
        """Усечение к нулю, насыщение, NaN → 0"""
        assert as_(np.float64(-3.9), np.int8) == -3
        assert as_(np.float64(3.9), np.int8) == 3
        assert as_(np.float64(-3.9), np.uint8) == 0
        assert as_(np.float64(-1e10), np.int32) == -(2**31)
        assert as_(np.float64(1e10), np.uint8) == 255
        assert as_(np.float64(math.nan), np.uint8) == 0
        assert as_(np.float64(math.inf), np.int64) == 2**63 - 1
        assert as_(np.float32(-math.inf), Int128) == -(2**127)

    def test_int_to_float_rounds_ties_to_even(self) -> None:
        """int → float округляет к ближайшему, ties to even"""
        assert as_(2**53 + 1, np.float64) == 2.0**53
        assert as_(2**53 + 3, np.float64) == 2.0**53 + 4
        assert as_(np.int32(16777217), np.float32) == 16777216.0
        assert as_(np.int32(16777219), np.float32) == 16777220.0

    def test_int_to_float_overflow_is_inf(self) -> None:
        """u128::MAX → float32 переполняется в inf"""
        assert as_(UInt128(2**128 - 1), np.float32) == math.inf
        assert as_(-(2**1024), np.float64) == -math.inf

    def test_float64_to_float32_rounds(self) -> None:
        """float64 → float32 округляет, overflow → inf"""
        assert as_(np.float64(0.1), np.float32) == np.float32(0.1)
        assert as_(np.float64(1e300), np.float32) == math.inf
        assert math.isnan(as_(math.nan, np.float32))

    def test_result_type(self) -> None:
        """as_ возвращает значение target типа"""
        assert type(as_(np.float64(1.0), np.uint16)) is np.uint16
        assert type(as_(np.int64(1), float)) is float

    def test_int_is_not_a_best_effort_target(self) -> None:
        """int не имеет границ для насыщения, as_ в int не определён"""
        with pytest.raises(CapabilityError):
            as_(np.int8(5), int)

    def test_to_exact(self) -> None:
        """to_exact: Python int для integer, Python float для float"""
        assert to_exact(np.uint64(2**64 - 1)) == 2**64 - 1
        assert type(to_exact(np.int8(-1))) is int
        assert to_exact(np.float32(0.5)) == 0.5
        assert type(to_exact(np.float32(0.5))) is float
