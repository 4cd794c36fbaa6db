"""
Тесты bit-level capabilities и байтового представления

Проверяет:
1. bits, count_ones/count_zeros, leading_zeros/trailing_zeros
2. rotate_left/rotate_right, swap_bytes, reverse_bits
3. widening_mul для unsigned
4. to_*_bytes / from_*_bytes для integer и float
"""

import struct
import sys

import numpy as np
import pytest

from numtraits import (
    CapabilityError,
    Int128,
    UInt128,
    bits,
    count_ones,
    count_zeros,
    from_be_bytes,
    from_le_bytes,
    from_ne_bytes,
    leading_zeros,
    reverse_bits,
    rotate_left,
    rotate_right,
    swap_bytes,
    to_be_bytes,
    to_le_bytes,
    to_ne_bytes,
    trailing_zeros,
    widening_mul,
)


# =============================================================================
# ТЕСТЫ BIT OPERATIONS
# =============================================================================


class TestBitCounts:
    """Подсчёт битов над two's-complement паттерном"""

    def test_bits(self) -> None:
        """Ширина типа"""
        assert bits(np.int8) == 8
        assert bits(np.uint64) == 64
        assert bits(Int128) == 128

    def test_count_ones_and_zeros(self) -> None:
        """count_ones + count_zeros == bits"""
        assert count_ones(np.int8(-1)) == 8
        assert count_zeros(np.int8(-1)) == 0
        assert count_ones(np.uint16(0b1011)) == 3
        assert count_zeros(np.uint16(1)) == 15
        assert count_ones(Int128(-1)) == 128

    def test_leading_and_trailing_zeros(self) -> None:
        """Нулевое значение → bits"""
        assert leading_zeros(np.uint32(1)) == 31
        assert leading_zeros(np.int8(-1)) == 0
        assert leading_zeros(np.uint8(0)) == 8
        assert trailing_zeros(np.int32(0)) == 32
        assert trailing_zeros(np.uint8(8)) == 3
        assert trailing_zeros(np.int16(-32768)) == 15

    def test_bigint_has_no_bit_ops(self) -> None:
        """Python int не имеет фиксированной ширины"""
        with pytest.raises(CapabilityError, match="int does not satisfy PrimInt"):
            count_ones(5)


class TestBitPermutations:
    """Тесты rotate / swap / reverse"""

    def test_rotate(self) -> None:
        """Сдвиг по кругу"""
        assert rotate_left(np.uint8(0b10000001), 1) == 0b00000011
        assert rotate_right(np.uint8(0b00000011), 1) == 0b10000001
        assert rotate_left(np.int8(-128), 1) == 1
        assert rotate_left(np.uint8(0b10000001), 9) == 0b00000011
        assert rotate_left(np.uint16(0xABCD), 16) == 0xABCD

    def test_swap_bytes(self) -> None:
        """Перестановка байтов"""
        assert swap_bytes(np.uint32(0x12345678)) == 0x78563412
        assert swap_bytes(np.int16(0x0102)) == 0x0201
        assert swap_bytes(np.uint8(5)) == 5

    def test_reverse_bits(self) -> None:
        """Обращение порядка битов"""
        assert reverse_bits(np.uint8(1)) == 128
        assert reverse_bits(np.int8(1)) == -128
        assert reverse_bits(np.uint16(0x00F0)) == 0x0F00
        assert reverse_bits(UInt128(1)) == UInt128(2**127)


class TestWideningMul:
    """Тесты widening_mul"""

    def test_low_and_high_halves(self) -> None:
        """Полное произведение как (low, high)"""
        low, high = widening_mul(np.uint8(255), 2)
        assert (low, high) == (254, 1)
        assert type(low) is np.uint8
        assert widening_mul(np.uint64(2**63), np.uint64(4)) == (0, 2)
        assert widening_mul(UInt128(2**127), UInt128(2)) == (UInt128(0), UInt128(1))

    def test_signed_types_do_not_conform(self) -> None:
        """widening_mul только для unsigned"""
        with pytest.raises(CapabilityError):
            widening_mul(np.int8(1), 1)


# =============================================================================
# ТЕСТЫ BYTES
# =============================================================================


class TestIntegerBytes:
    """Байтовое представление integer"""

    def test_byte_orders(self) -> None:
        """big / little / native"""
        value = np.uint32(0x12345678)
        assert to_be_bytes(value) == b"\x12\x34\x56\x78"
        assert to_le_bytes(value) == b"\x78\x56\x34\x12"
        assert to_ne_bytes(value) == (0x12345678).to_bytes(4, sys.byteorder)

    def test_signed_values(self) -> None:
        """Отрицательные значения — two's complement"""
        assert to_be_bytes(np.int16(-2)) == b"\xff\xfe"
        assert from_be_bytes(np.int16, b"\xff\xfe") == -2
        assert to_le_bytes(Int128(-1)) == b"\xff" * 16

    def test_from_bytes(self) -> None:
        """Восстановление значения нужного типа"""
        result = from_le_bytes(np.uint16, b"\x01\x02")
        assert result == 0x0201
        assert type(result) is np.uint16
        assert from_ne_bytes(np.int64, to_ne_bytes(np.int64(-12345))) == -12345
        assert from_be_bytes(UInt128, b"\x00" * 15 + b"\x07") == UInt128(7)

    def test_wrong_length(self) -> None:
        """Длина не равна ширине типа → ValueError"""
        with pytest.raises(ValueError, match="u32 requires exactly 4 bytes, got 3"):
            from_le_bytes(np.uint32, b"\x00\x00\x00")


class TestFloatBytes:
    """Байтовое представление float"""

    def test_float64(self) -> None:
        """Биты IEEE-754 binary64"""
        assert to_be_bytes(np.float64(1.0)) == b"\x3f\xf0" + b"\x00" * 6
        assert to_le_bytes(2.5) == struct.pack("<d", 2.5)

    def test_float32(self) -> None:
        """Биты IEEE-754 binary32"""
        assert to_be_bytes(np.float32(1.5)) == struct.pack(">f", 1.5)
        result = from_le_bytes(np.float32, struct.pack("<f", -0.25))
        assert result == -0.25
        assert type(result) is np.float32

    def test_wrong_length(self) -> None:
        """Длина не равна ширине типа → ValueError"""
        with pytest.raises(ValueError, match="f64 requires exactly 8 bytes, got 4"):
            from_be_bytes(np.float64, b"\x00" * 4)
