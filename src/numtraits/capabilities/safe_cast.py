"""
Safe casts — преобразования с ограничением по раскладке типов

Разрешённость преобразования определяется парой типов, а не значением:
- grow: та же знаковость и вид (integer/float), ширина не уменьшается
  (i8 → i32, u16 → u128, f32 → f64). Значение сохраняется точно.
- trim: та же знаковость и вид, ширина не увеличивается (i64 → i16,
  f64 → f32). Лишние старшие биты отбрасываются, float округляется.
- size: та же знаковость и вид, любая ширина.
- signed()/unsigned(): реинтерпретация битов integer той же ширины
  (u8 200 → i8 -56).

Запрещённая пара → CapabilityError. Сама конверсия выполняется с
семантикой as_(); преобразование без ограничений — это as_().
"""

from abc import abstractmethod
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, Field

from numtraits.capabilities.cast import AsPrimitive
from numtraits.registry import CapabilityError, registry_of, require


# =============================================================================
# LAYOUT
# =============================================================================


class NumberKind(str, Enum):
    """Вид представления."""

    INTEGER = "INTEGER"
    FLOAT = "FLOAT"


class Layout(BaseModel):
    """
    Раскладка fixed-width типа: вид, ширина, знаковость.

    Immutable модель; float всегда знаковый.
    """

    kind: NumberKind = Field(..., description="integer или float")
    bits: int = Field(..., gt=0, description="Ширина в битах")
    signed: bool = Field(..., description="Знаковый тип")

    model_config = {"frozen": True}

    def same_family(self, other: "Layout") -> bool:
        return self.kind == other.kind and self.signed == other.signed

    def grows_into(self, other: "Layout") -> bool:
        return self.same_family(other) and other.bits >= self.bits

    def trims_into(self, other: "Layout") -> bool:
        return self.same_family(other) and other.bits <= self.bits

    def sizes_into(self, other: "Layout") -> bool:
        return self.same_family(other)


# =============================================================================
# CAPABILITY SETS
# =============================================================================


class SafeCast(AsPrimitive):
    """Приёмник grow/trim/size преобразований."""

    @abstractmethod
    def layout(self) -> Layout: ...

    def _convert(self, value: Any, allowed: Callable[[Layout, Layout], bool], verb: str) -> Any:
        source = registry_of(self).require(type(value), SafeCast)
        if not allowed(source.layout(), self.layout()):
            raise CapabilityError(f"{source.name} does not {verb} into {self.name}")
        return self.as_from(value)

    def grow_from(self, value: Any) -> Any:
        return self._convert(value, Layout.grows_into, "grow")

    def trim_from(self, value: Any) -> Any:
        return self._convert(value, Layout.trims_into, "trim")

    def size_from(self, value: Any) -> Any:
        return self._convert(value, Layout.sizes_into, "size")


class SignCast(SafeCast):
    """
    Integer с парным типом противоположной знаковости той же ширины.

    Парный тип ищется в registry conformance.
    """

    def counterpart(self, signed: bool) -> "SignCast":
        """Conformance типа той же ширины с заданной знаковостью."""
        layout = self.layout()
        if layout.signed == signed:
            return self
        wanted = layout.model_copy(update={"signed": signed})
        registry = registry_of(self)
        for numeric_type in registry.types(SignCast):
            conformance = registry.require(numeric_type, SignCast)
            if conformance.layout() == wanted:
                return conformance
        kind = "signed" if signed else "unsigned"
        raise CapabilityError(f"{self.name} has no registered {kind} counterpart")

    def signed(self, x: Any) -> Any:
        """Битовый паттерн x как знаковое значение той же ширины."""
        return self.counterpart(True).as_from(self.coerce(x))

    def unsigned(self, x: Any) -> Any:
        """Битовый паттерн x как беззнаковое значение той же ширины."""
        return self.counterpart(False).as_from(self.coerce(x))


# =============================================================================
# GENERIC FUNCTIONS
# =============================================================================


def layout_of(numeric_type: type) -> Layout:
    return require(numeric_type, SafeCast).layout()


def grows_into(source: type, target: type) -> bool:
    """True если source → target является grow преобразованием."""
    return layout_of(source).grows_into(layout_of(target))


def trims_into(source: type, target: type) -> bool:
    return layout_of(source).trims_into(layout_of(target))


def grow_into(value: Any, target: type) -> Any:
    """
    Расширение без потери значения.

    Examples:
        >>> grow_into(np.int8(-5), np.int64)
        np.int64(-5)
        >>> grow_into(np.uint8(5), np.int64)
        Traceback (most recent call last):
        ...
        numtraits.registry.CapabilityError: uint8 does not grow into int64
    """
    return require(target, SafeCast).grow_from(value)


def trim_into(value: Any, target: type) -> Any:
    """
    Сужение с отбрасыванием старших битов.

    Examples:
        >>> trim_into(np.int32(300), np.int8)
        np.int8(44)
        >>> trim_into(np.float64(0.1), np.float32)
        np.float32(0.1)
    """
    return require(target, SafeCast).trim_from(value)


def size_into(value: Any, target: type) -> Any:
    """Смена ширины без смены знаковости."""
    return require(target, SafeCast).size_from(value)


def signed(x: Any) -> Any:
    """
    Examples:
        >>> signed(np.uint8(200))
        np.int8(-56)
    """
    return require(type(x), SignCast).signed(x)


def unsigned(x: Any) -> Any:
    """
    Examples:
        >>> unsigned(np.int16(-1))
        np.uint16(65535)
    """
    return require(type(x), SignCast).unsigned(x)
