"""
Тесты identities и Num

Проверяет:
1. zero/one/two и их предикаты для всех built-in типов
2. Законы x + zero == x, x * one == x
3. Битовые паттерны float identities
4. Семантику Num.div/Num.rem (усечение к нулю, wrap, деление на ноль)
5. from_str_radix для integer и float
"""

import math

import numpy as np
import pytest

from numtraits import (
    REGISTRY,
    Bounded,
    Int128,
    Num,
    ParseNumError,
    UInt128,
    conformance_of,
    from_str_radix,
    is_one,
    is_two,
    is_zero,
    one,
    to_bits,
    two,
    zero,
)


def _samples(conformance):
    """Представительные значения типа: identities, 7 и границы (если есть)."""
    values = [conformance.zero(), conformance.one(), conformance.from_str_radix("7", 10)]
    if isinstance(conformance, Bounded):
        values += [conformance.min_value(), conformance.max_value()]
    return values


# =============================================================================
# ТЕСТЫ IDENTITIES
# =============================================================================


class TestIdentityValues:
    """Тесты zero/one/two"""

    def test_zero_has_numeric_type(self) -> None:
        """zero(T) возвращает значение типа T"""
        assert zero(np.int32) == 0
        assert type(zero(np.int32)) is np.int32
        assert type(zero(np.float32)) is np.float32
        assert type(zero(float)) is float
        assert type(zero(Int128)) is Int128

    def test_one_and_two(self) -> None:
        """one(T) и two(T) для integer и float"""
        assert one(np.uint8) == 1
        assert two(np.uint8) == 2
        assert one(np.float64) == 1.0
        assert two(UInt128) == 2
        assert one(int) == 1

    def test_predicates(self) -> None:
        """is_zero/is_one/is_two согласованы с равенством"""
        assert is_zero(np.int8(0))
        assert not is_zero(np.int8(1))
        assert is_zero(np.float64(-0.0))
        assert is_one(np.uint16(1))
        assert not is_one(np.uint16(2))
        assert is_two(2.0)

    def test_float_identity_bit_patterns(self) -> None:
        """Float identities совпадают с точными битовыми паттернами 0.0 и 1.0"""
        assert to_bits(zero(np.float64)) == 0
        assert to_bits(one(np.float64)) == 0x3FF0000000000000
        assert to_bits(zero(np.float32)) == 0
        assert to_bits(one(np.float32)) == 0x3F800000

    def test_identities_not_memoized(self) -> None:
        """Identities вычисляются заново при каждом вызове"""
        assert zero(Int128) is not zero(Int128)


class TestIdentityLaws:
    """Законы x + zero == x и x * one == x для каждого зарегистрированного типа"""

    @pytest.mark.parametrize("numeric_type", REGISTRY.types(Num), ids=lambda t: t.__name__)
    def test_additive_identity(self, numeric_type: type) -> None:
        """x + zero() == x"""
        conformance = conformance_of(numeric_type)
        for x in _samples(conformance):
            assert conformance.add(x, conformance.zero()) == x

    @pytest.mark.parametrize("numeric_type", REGISTRY.types(Num), ids=lambda t: t.__name__)
    def test_multiplicative_identity(self, numeric_type: type) -> None:
        """x * one() == x"""
        conformance = conformance_of(numeric_type)
        for x in _samples(conformance):
            assert conformance.mul(x, conformance.one()) == x


# =============================================================================
# ТЕСТЫ NUM
# =============================================================================


class TestNumArithmetic:
    """Тесты add/sub/mul/div/rem"""

    def test_truncating_division_and_remainder(self) -> None:
        """Деление усекается к нулю, остаток имеет знак делимого"""
        i8 = conformance_of(np.int8)
        assert i8.div(np.int8(-7), np.int8(2)) == -3
        assert i8.rem(np.int8(-7), np.int8(2)) == -1
        assert i8.rem(np.int8(7), np.int8(-2)) == 1
        assert i8.rem(np.int8(-128), np.int8(-1)) == 0

    def test_fixed_width_arithmetic_wraps(self) -> None:
        """Переполнение в Num операциях берётся по модулю 2^bits"""
        i8 = conformance_of(np.int8)
        u8 = conformance_of(np.uint8)
        assert i8.div(np.int8(-128), np.int8(-1)) == -128
        assert u8.add(np.uint8(255), np.uint8(1)) == 0
        assert u8.sub(np.uint8(0), np.uint8(1)) == 255

    def test_integer_division_by_zero_raises(self) -> None:
        """Целочисленное деление на ноль → ZeroDivisionError"""
        u32 = conformance_of(np.uint32)
        with pytest.raises(ZeroDivisionError, match="division by zero"):
            u32.div(np.uint32(1), np.uint32(0))
        with pytest.raises(ZeroDivisionError):
            u32.rem(np.uint32(1), np.uint32(0))
        with pytest.raises(ZeroDivisionError):
            conformance_of(int).div(1, 0)

    def test_float_division_follows_ieee(self) -> None:
        """Float деление на ноль даёт inf/NaN без исключений"""
        f64 = conformance_of(np.float64)
        assert f64.div(np.float64(1.0), np.float64(0.0)) == math.inf
        assert math.isnan(f64.div(np.float64(0.0), np.float64(0.0)))
        assert math.isnan(conformance_of(float).rem(1.0, 0.0))

    def test_result_keeps_numeric_type(self) -> None:
        """Результат операции имеет numeric type конформанса"""
        assert type(conformance_of(np.int16).mul(np.int16(3), 4)) is np.int16
        assert type(conformance_of(np.float32).add(np.float32(1.5), 2)) is np.float32

    def test_literal_operands(self) -> None:
        """Python литералы приводятся к типу, другие numeric types отклоняются"""
        u8 = conformance_of(np.uint8)
        assert u8.add(np.uint8(1), 2) == 3
        with pytest.raises(ValueError, match="out of range"):
            u8.add(np.uint8(1), 256)
        with pytest.raises(TypeError):
            u8.add(np.uint8(1), np.int8(1))
        with pytest.raises(TypeError):
            u8.add(np.uint8(1), True)


# =============================================================================
# ТЕСТЫ FROM_STR_RADIX
# =============================================================================


class TestFromStrRadix:
    """Тесты разбора строк"""

    def test_integer_radix(self) -> None:
        """Разбор integer в системах счисления 2..36"""
        assert from_str_radix(np.uint8, "ff", 16) == 255
        assert from_str_radix(np.uint8, "FF", 16) == 255
        assert from_str_radix(np.int8, "-80", 16) == -128
        assert from_str_radix(np.uint8, "-0") == 0
        assert from_str_radix(np.int32, "+101", 2) == 5
        assert from_str_radix(int, "zz", 36) == 1295

    def test_integer_out_of_range(self) -> None:
        """Значение вне диапазона → ParseNumError"""
        with pytest.raises(ParseNumError, match="out of range"):
            from_str_radix(np.uint8, "100", 16)
        with pytest.raises(ParseNumError, match="out of range"):
            from_str_radix(np.uint8, "-1")

    def test_integer_wide_bounds(self) -> None:
        """128-битные границы разбираются точно"""
        assert from_str_radix(Int128, str(-(2**127))) == Int128(-(2**127))
        assert from_str_radix(UInt128, "f" * 32, 16) == 2**128 - 1

    @pytest.mark.parametrize("text", ["", "-", " 1", "1_0", "0x1f", "12a"])
    def test_integer_malformed(self, text: str) -> None:
        """Пробелы, подчёркивания, префиксы и чужие цифры отклоняются"""
        with pytest.raises(ParseNumError):
            from_str_radix(np.int32, text, 16 if text == "0x1f" else 10)

    def test_invalid_radix(self) -> None:
        """radix вне [2, 36] → ValueError"""
        with pytest.raises(ValueError, match="radix must be in"):
            from_str_radix(np.int32, "1", 37)
        with pytest.raises(ValueError, match="radix must be in"):
            from_str_radix(np.float64, "1", 1)

    def test_parse_error_is_value_error(self) -> None:
        """ParseNumError наследует ValueError"""
        assert issubclass(ParseNumError, ValueError)

    def test_float_decimal(self) -> None:
        """Десятичные float с экспонентой"""
        assert from_str_radix(np.float64, "1.5e3") == 1500.0
        assert from_str_radix(np.float64, ".5") == 0.5
        assert from_str_radix(np.float32, "0.1") == np.float32(0.1)
        assert math.copysign(1.0, from_str_radix(float, "-0")) == -1.0

    def test_float_other_radix(self) -> None:
        """Дробная часть в произвольной системе счисления"""
        assert from_str_radix(np.float64, "ff.8", 16) == 255.5
        assert from_str_radix(float, "-10.01", 2) == -2.25

    def test_float_specials(self) -> None:
        """inf/infinity/nan в любом регистре"""
        assert from_str_radix(np.float64, "inf") == math.inf
        assert from_str_radix(np.float64, "-Infinity") == -math.inf
        assert math.isnan(from_str_radix(np.float32, "NaN"))

    @pytest.mark.parametrize("text", ["", "1_0", "1e", "abc", "1.2.3"])
    def test_float_malformed(self, text: str) -> None:
        """Некорректные float строки → ParseNumError"""
        with pytest.raises(ParseNumError):
            from_str_radix(np.float64, text)

    @pytest.mark.parametrize("text", ["\u0663", "1.\u0665", "\uff11", "1e\u0662"])
    def test_float_rejects_non_ascii_digits(self, text: str) -> None:
        """Цифры других алфавитов (арабские, fullwidth) не принимаются"""
        with pytest.raises(ParseNumError):
            from_str_radix(np.float64, text)

    @pytest.mark.parametrize("text", ["\u0663", "\uff11", "\u212a"])
    def test_integer_rejects_non_ascii_digits(self, text: str) -> None:
        """Unicode цифры и буквы, похожие на ASCII, не принимаются"""
        with pytest.raises(ParseNumError):
            from_str_radix(np.int32, text, 36)
