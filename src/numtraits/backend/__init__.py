"""
Math backends для full float tier.

Оба backend реализуют MathBackend с идентичными сигнатурами и IEEE
семантикой на Python float; выбор задаётся Features.math_backend.
"""

from numtraits.backend.base import MathBackend
from numtraits.backend.native import NativeMathBackend
from numtraits.backend.numpy_backend import NumpyMathBackend
from numtraits.config import MathBackendKind


def create_backend(kind: MathBackendKind) -> MathBackend:
    """
    Backend по типу из конфигурации.

    Raises:
        ValueError: Если kind не распознан
    """
    kind = MathBackendKind(kind)
    if kind is MathBackendKind.NATIVE:
        return NativeMathBackend()
    if kind is MathBackendKind.NUMPY:
        return NumpyMathBackend()
    raise ValueError(f"Unknown math backend: {kind}")


__all__ = [
    "MathBackend",
    "NativeMathBackend",
    "NumpyMathBackend",
    "create_backend",
]
