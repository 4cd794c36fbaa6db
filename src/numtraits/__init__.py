"""
numtraits — иерархия numeric capabilities для Python

Generic код запрашивает у типа ровно те операции, которые ему нужны
(Zero, Bounded, CheckedAdd, FloatCore, ...), а conformances связывают
конкретные numeric types (numpy scalars, Int128/UInt128, int, float)
с этими capability sets.

При импорте built-in conformances устанавливаются в default registry
согласно Features.from_env().
"""

from numtraits.base import Capability, Conformance
from numtraits.capabilities import *  # noqa: F403
from numtraits.capabilities import __all__ as _capabilities_all
from numtraits.config import Features, MathBackendKind
from numtraits.primitives import Int128, UInt128, install_builtins
from numtraits.registry import (
    REGISTRY,
    CapabilityError,
    ConformanceError,
    Registry,
    conformance_of,
    register,
    registry_of,
    require,
    satisfies,
)

install_builtins(REGISTRY, Features.from_env())

__version__ = "0.3.0"

__all__ = [
    # Core
    "Capability",
    "Conformance",
    # Registry
    "REGISTRY",
    "Registry",
    "CapabilityError",
    "ConformanceError",
    "register",
    "conformance_of",
    "registry_of",
    "satisfies",
    "require",
    # Config
    "Features",
    "MathBackendKind",
    # 128-bit types
    "Int128",
    "UInt128",
    *_capabilities_all,
]
