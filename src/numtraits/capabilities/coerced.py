"""
Coerced — приведение к float типу и обратно с семантикой as_()

coerce_into(x, F): x как значение float типа F (округление к ближайшему).
coerce_from(f, T): float f как значение T (для integer — усечение к нулю
с насыщением, NaN → 0).
"""

from typing import Any

from numtraits.capabilities.cast import AsPrimitive
from numtraits.capabilities.float import FloatCore
from numtraits.registry import CapabilityError, registry_of, require


class Coerced(AsPrimitive):
    """Примитив, приводимый к float типам и из них."""

    def _float_conformance(self, float_type: type) -> "Coerced":
        target = registry_of(self).require(float_type, Coerced)
        if not isinstance(target, FloatCore):
            raise CapabilityError(f"{float_type.__name__} is not a float type")
        return target

    def coerce_into(self, x: Any, float_type: type) -> Any:
        return self._float_conformance(float_type).as_from(self.coerce(x))

    def coerce_from(self, f: Any) -> Any:
        self._float_conformance(type(f))
        return self.as_from(f)


def coerce_into(x: Any, float_type: type) -> Any:
    """
    Examples:
        >>> coerce_into(np.int32(5), np.float32)
        np.float32(5.0)
    """
    return require(type(x), Coerced).coerce_into(x, float_type)


def coerce_from(f: Any, numeric_type: type) -> Any:
    """
    Examples:
        >>> coerce_from(np.float64(-2.7), np.int8)
        np.int8(-2)
    """
    return require(numeric_type, Coerced).coerce_from(f)
