"""
Bit-level capabilities — ширина, битовые операции, widening mul, байты
"""

import sys
from abc import abstractmethod
from typing import Any

from numtraits.base import Capability
from numtraits.registry import require


class Bits(Capability):
    @abstractmethod
    def bits(self) -> int:
        """Ширина типа в битах."""


class PrimInt(Bits):
    """Битовые операции fixed-width integer (над two's-complement паттерном)."""

    @abstractmethod
    def count_ones(self, x: Any) -> int: ...

    def count_zeros(self, x: Any) -> int:
        return self.bits() - self.count_ones(x)

    @abstractmethod
    def leading_zeros(self, x: Any) -> int: ...

    @abstractmethod
    def trailing_zeros(self, x: Any) -> int: ...

    @abstractmethod
    def rotate_left(self, x: Any, n: int) -> Any: ...

    @abstractmethod
    def rotate_right(self, x: Any, n: int) -> Any: ...

    @abstractmethod
    def swap_bytes(self, x: Any) -> Any: ...

    @abstractmethod
    def reverse_bits(self, x: Any) -> Any: ...


class WideningMul(Capability):
    @abstractmethod
    def widening_mul(self, x: Any, y: Any) -> tuple[Any, Any]:
        """Полное произведение без overflow: (младшая половина, старшая половина)."""


class ToFromBytes(Capability):
    """Представление значения в памяти как байты."""

    @abstractmethod
    def to_bytes(self, x: Any, byteorder: str) -> bytes: ...

    @abstractmethod
    def from_bytes(self, data: bytes, byteorder: str) -> Any:
        """
        Raises:
            ValueError: Если длина data не равна ширине типа в байтах
        """

    def to_be_bytes(self, x: Any) -> bytes:
        return self.to_bytes(x, "big")

    def to_le_bytes(self, x: Any) -> bytes:
        return self.to_bytes(x, "little")

    def to_ne_bytes(self, x: Any) -> bytes:
        return self.to_bytes(x, sys.byteorder)

    def from_be_bytes(self, data: bytes) -> Any:
        return self.from_bytes(data, "big")

    def from_le_bytes(self, data: bytes) -> Any:
        return self.from_bytes(data, "little")

    def from_ne_bytes(self, data: bytes) -> Any:
        return self.from_bytes(data, sys.byteorder)


# =============================================================================
# GENERIC FUNCTIONS
# =============================================================================


def bits(numeric_type: type) -> int:
    return require(numeric_type, Bits).bits()


def count_ones(x: Any) -> int:
    return require(type(x), PrimInt).count_ones(x)


def count_zeros(x: Any) -> int:
    return require(type(x), PrimInt).count_zeros(x)


def leading_zeros(x: Any) -> int:
    return require(type(x), PrimInt).leading_zeros(x)


def trailing_zeros(x: Any) -> int:
    return require(type(x), PrimInt).trailing_zeros(x)


def rotate_left(x: Any, n: int) -> Any:
    return require(type(x), PrimInt).rotate_left(x, n)


def rotate_right(x: Any, n: int) -> Any:
    return require(type(x), PrimInt).rotate_right(x, n)


def swap_bytes(x: Any) -> Any:
    return require(type(x), PrimInt).swap_bytes(x)


def reverse_bits(x: Any) -> Any:
    return require(type(x), PrimInt).reverse_bits(x)


def widening_mul(x: Any, y: Any) -> tuple[Any, Any]:
    """
    Examples:
        >>> widening_mul(np.uint8(255), 2)
        (np.uint8(254), np.uint8(1))
    """
    return require(type(x), WideningMul).widening_mul(x, y)


def to_be_bytes(x: Any) -> bytes:
    """
    Examples:
        >>> to_be_bytes(np.uint32(0x12345678))
        b'\\x124Vx'
    """
    return require(type(x), ToFromBytes).to_be_bytes(x)


def to_le_bytes(x: Any) -> bytes:
    return require(type(x), ToFromBytes).to_le_bytes(x)


def to_ne_bytes(x: Any) -> bytes:
    return require(type(x), ToFromBytes).to_ne_bytes(x)


def from_be_bytes(numeric_type: type, data: bytes) -> Any:
    return require(numeric_type, ToFromBytes).from_be_bytes(data)


def from_le_bytes(numeric_type: type, data: bytes) -> Any:
    return require(numeric_type, ToFromBytes).from_le_bytes(data)


def from_ne_bytes(numeric_type: type, data: bytes) -> Any:
    return require(numeric_type, ToFromBytes).from_ne_bytes(data)
