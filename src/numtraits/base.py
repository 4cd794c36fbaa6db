"""
Capability / Conformance — базовые классы иерархии

Capability set — абстрактный класс с набором операций и их семантикой.
Capability sets расширяют друг друга наследованием (Num(Zero, One) и т.д.).

Conformance — объект, привязанный ровно к одному numeric type и являющийся
экземпляром каждого capability, который он заявляет (включая расширяемые).
Операции принимают значения numeric type явными аргументами.
"""

from abc import ABC
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from numtraits.registry import Registry


class Capability(ABC):
    """Базовый класс всех capability sets."""

    __slots__ = ()


class Conformance:
    """
    Привязка numeric type к capability sets.

    Конкретные conformances наследуют Conformance и нужные Capability
    классы. Значения другого типа приводятся через coerce().

    registry: Registry, в котором зарегистрирована conformance. Операции,
    которым нужна conformance другого типа (cast_from, as_from, safe casts),
    ищут её там же; None до регистрации.
    """

    def __init__(self, numeric_type: type) -> None:
        self.numeric_type = numeric_type
        self.registry: "Registry | None" = None

    @property
    def name(self) -> str:
        return self.numeric_type.__name__

    def capabilities(self) -> list[type[Capability]]:
        """Все capability sets, которым удовлетворяет conformance (по MRO)."""
        return [
            cls
            for cls in type(self).__mro__
            if issubclass(cls, Capability) and cls is not Capability
        ]

    def coerce(self, value: Any) -> Any:
        """
        Приведение операнда к numeric type.

        Базовая реализация принимает только значения самого типа.

        Raises:
            TypeError: Если значение другого типа
        """
        if type(value) is self.numeric_type:
            return value
        raise TypeError(
            f"expected {self.name} operand, got {type(value).__name__}: {value!r}"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"
