"""
Primitive conformance layer — built-in numeric types

Каждый built-in тип получает conformance из одного параметризованного
шаблона, управляемого IntSpec/FloatSpec. Какие тиры устанавливаются,
определяет Features.
"""

import logging
from typing import Final

import numpy as np

from numtraits.backend import create_backend
from numtraits.base import Conformance
from numtraits.config import Features
from numtraits.primitives.bigint import BigIntConformance
from numtraits.primitives.floats import FloatConformance, FloatCoreConformance
from numtraits.primitives.integers import (
    IntegerConformance,
    SignedIntConformance,
    UnsignedIntConformance,
)
from numtraits.primitives.specs import (
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    I128,
    U8,
    U16,
    U32,
    U64,
    U128,
    FloatSpec,
    IntSpec,
)
from numtraits.primitives.wide import Int128, UInt128, WideInt
from numtraits.registry import Registry

logger = logging.getLogger(__name__)


# =============================================================================
# BUILT-IN TYPES
# =============================================================================

SIGNED_INTEGERS: Final[tuple[tuple[type, IntSpec], ...]] = (
    (np.int8, I8),
    (np.int16, I16),
    (np.int32, I32),
    (np.int64, I64),
)

UNSIGNED_INTEGERS: Final[tuple[tuple[type, IntSpec], ...]] = (
    (np.uint8, U8),
    (np.uint16, U16),
    (np.uint32, U32),
    (np.uint64, U64),
)

# Python float: binary64, как np.float64
FLOATS: Final[tuple[tuple[type, FloatSpec], ...]] = (
    (np.float32, F32),
    (np.float64, F64),
    (float, F64),
)


def builtin_conformances(features: Features) -> list[Conformance]:
    """
    Conformances всех built-in типов для набора features.

    Args:
        features: Включённые тиры

    Returns:
        Список conformances (по одной на тип)
    """
    conformances: list[Conformance] = [
        SignedIntConformance(numeric_type, spec) for numeric_type, spec in SIGNED_INTEGERS
    ]
    conformances += [
        UnsignedIntConformance(numeric_type, spec) for numeric_type, spec in UNSIGNED_INTEGERS
    ]

    if features.i128:
        conformances.append(SignedIntConformance(Int128, I128))
        conformances.append(UnsignedIntConformance(UInt128, U128))

    if features.float_full:
        backend = create_backend(features.math_backend)
        conformances += [
            FloatConformance(numeric_type, spec, backend) for numeric_type, spec in FLOATS
        ]
    else:
        conformances += [
            FloatCoreConformance(numeric_type, spec) for numeric_type, spec in FLOATS
        ]

    conformances.append(BigIntConformance())
    return conformances


def install_builtins(registry: Registry, features: Features | None = None) -> None:
    """
    Регистрация built-in conformances (закрытых для изменения).

    Args:
        registry: Целевой registry
        features: Включённые тиры (default: всё включено)

    Raises:
        ConformanceError: Если built-in тип уже зарегистрирован в registry
    """
    features = features or Features()
    conformances = builtin_conformances(features)
    for conformance in conformances:
        registry.register(conformance, builtin=True)

    logger.debug(
        "Installed %d built-in conformances (float_full=%s, math_backend=%s, i128=%s)",
        len(conformances),
        features.float_full,
        features.math_backend.value,
        features.i128,
    )


__all__ = [
    # Installation
    "builtin_conformances",
    "install_builtins",
    "SIGNED_INTEGERS",
    "UNSIGNED_INTEGERS",
    "FLOATS",
    # Templates
    "IntegerConformance",
    "SignedIntConformance",
    "UnsignedIntConformance",
    "FloatCoreConformance",
    "FloatConformance",
    "BigIntConformance",
    # Specs
    "IntSpec",
    "FloatSpec",
    # 128-bit types
    "WideInt",
    "Int128",
    "UInt128",
]
