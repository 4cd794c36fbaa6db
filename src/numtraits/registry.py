"""
Registry — привязка numeric types к conformances

Каждый тип имеет не более одной conformance, поэтому явная и blanket
conformance (через наследование capability sets) не могут конфликтовать.

Built-in conformances закрыты: их нельзя заменить или зарегистрировать
повторно. Для новых типов registry открыт.

Conformance принадлежит не более чем одному registry: register() привязывает
её (conformance.registry), unregister() отвязывает. Свободные функции
(cast, as_, pow, checked_add, ...) работают с default registry REGISTRY;
для другого registry операции вызываются на его conformances.
"""

import logging
from typing import TypeVar

from numtraits.base import Capability, Conformance

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=Capability)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CapabilityError(TypeError):
    """
    Тип не удовлетворяет требуемому capability set.

    Аналог невыполненного generic bound: возникает, если тип не
    зарегистрирован или его conformance не заявляет capability.
    """
    pass


class ConformanceError(TypeError):
    """Некорректная или конфликтующая регистрация conformance."""
    pass


# =============================================================================
# REGISTRY
# =============================================================================


class Registry:
    """
    Таблица type → conformance.

    Built-in типы регистрируются с builtin=True и после этого закрыты.
    """

    def __init__(self) -> None:
        self._conformances: dict[type, Conformance] = {}
        self._builtin: set[type] = set()

    def register(self, conformance: Conformance, *, builtin: bool = False) -> None:
        """
        Регистрация conformance для её numeric type.

        Args:
            conformance: Conformance нового типа
            builtin: Пометить тип как built-in (закрыт для изменений)

        Raises:
            ConformanceError: Если объект не Conformance, тип built-in,
                тип уже имеет conformance или conformance привязана к
                другому registry
        """
        if not isinstance(conformance, Conformance):
            raise ConformanceError(
                f"expected a Conformance instance, got {type(conformance).__name__}"
            )

        numeric_type = conformance.numeric_type
        if numeric_type in self._builtin:
            raise ConformanceError(
                f"conformances of built-in type {numeric_type.__name__} are closed"
            )
        if numeric_type in self._conformances:
            raise ConformanceError(
                f"{numeric_type.__name__} already has a conformance: "
                f"{self._conformances[numeric_type]!r}"
            )
        if conformance.registry is not None and conformance.registry is not self:
            raise ConformanceError(f"{conformance!r} is already registered in another registry")

        self._conformances[numeric_type] = conformance
        conformance.registry = self
        if builtin:
            self._builtin.add(numeric_type)

        logger.debug(
            "Registered %r (builtin=%s, capabilities=%d)",
            conformance,
            builtin,
            len(conformance.capabilities()),
        )

    def unregister(self, numeric_type: type) -> None:
        """
        Удаление conformance пользовательского типа.

        Raises:
            ConformanceError: Если тип built-in
            CapabilityError: Если тип не зарегистрирован
        """
        if numeric_type in self._builtin:
            raise ConformanceError(
                f"conformances of built-in type {numeric_type.__name__} are closed"
            )
        conformance = self.conformance_of(numeric_type)
        del self._conformances[numeric_type]
        conformance.registry = None

    def is_builtin(self, numeric_type: type) -> bool:
        return numeric_type in self._builtin

    def conformance_of(self, numeric_type: type) -> Conformance:
        """
        Conformance типа.

        Raises:
            CapabilityError: Если тип не зарегистрирован
        """
        try:
            return self._conformances[numeric_type]
        except KeyError:
            raise CapabilityError(
                f"{getattr(numeric_type, '__name__', numeric_type)} is not a registered numeric type"
            ) from None

    def satisfies(self, numeric_type: type, capability: type[Capability]) -> bool:
        """True если тип зарегистрирован и удовлетворяет capability."""
        conformance = self._conformances.get(numeric_type)
        return conformance is not None and isinstance(conformance, capability)

    def require(self, numeric_type: type, capability: type[C]) -> C:
        """
        Conformance типа, удовлетворяющая capability.

        Raises:
            CapabilityError: Если тип не зарегистрирован или не удовлетворяет
        """
        conformance = self.conformance_of(numeric_type)
        if not isinstance(conformance, capability):
            raise CapabilityError(
                f"{numeric_type.__name__} does not satisfy {capability.__name__}"
            )
        return conformance

    def types(self, capability: type[Capability] | None = None) -> list[type]:
        """Зарегистрированные типы (опционально только удовлетворяющие capability)."""
        if capability is None:
            return list(self._conformances)
        return [t for t, c in self._conformances.items() if isinstance(c, capability)]

    def __contains__(self, numeric_type: object) -> bool:
        return numeric_type in self._conformances

    def __len__(self) -> int:
        return len(self._conformances)


# Default registry; built-in conformances устанавливаются при импорте numtraits
REGISTRY = Registry()


def registry_of(conformance: Conformance) -> Registry:
    """Registry conformance; REGISTRY, если она не зарегистрирована."""
    return conformance.registry if conformance.registry is not None else REGISTRY


def register(conformance: Conformance) -> None:
    """Регистрация пользовательской conformance в default registry."""
    REGISTRY.register(conformance)


def conformance_of(numeric_type: type) -> Conformance:
    return REGISTRY.conformance_of(numeric_type)


def satisfies(numeric_type: type, capability: type[Capability]) -> bool:
    return REGISTRY.satisfies(numeric_type, capability)


def require(numeric_type: type, capability: type[C]) -> C:
    return REGISTRY.require(numeric_type, capability)
