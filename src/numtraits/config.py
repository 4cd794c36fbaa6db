"""
Features — конфигурация capability-тиров

Определяет, какие тиры numeric capabilities устанавливаются для built-in типов:
- float_full: полный float tier (Real/Float, требует math backend)
- math_backend: какой backend используется для трансцендентных функций
- i128: устанавливать ли conformances для Int128/UInt128

Отключённый тир просто не регистрируется. Код, зависящий только от нижних
тиров, ведёт себя идентично при любой комбинации флагов.
"""

import os
from enum import Enum
from typing import Final, Mapping

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENVIRONMENT
# =============================================================================

ENV_FLOAT_FULL: Final[str] = "NUMTRAITS_FLOAT_FULL"
ENV_MATH_BACKEND: Final[str] = "NUMTRAITS_MATH_BACKEND"
ENV_I128: Final[str] = "NUMTRAITS_I128"

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


# =============================================================================
# ENUMS
# =============================================================================


class MathBackendKind(str, Enum):
    """Реализация трансцендентных функций для full float tier."""

    NATIVE = "native"  # stdlib math (платформенный libm)
    NUMPY = "numpy"  # numpy ufuncs


# =============================================================================
# FEATURES
# =============================================================================


class Features(BaseModel):
    """
    Набор feature-флагов для установки built-in conformances.

    Immutable модель. По умолчанию включено всё, backend — stdlib math.
    """

    float_full: bool = Field(True, description="Full float tier (Real/Float)")
    math_backend: MathBackendKind = Field(
        MathBackendKind.NATIVE, description="Backend трансцендентных функций"
    )
    i128: bool = Field(True, description="Conformances для Int128/UInt128")

    model_config = {"frozen": True}

    @field_validator("math_backend", mode="before")
    @classmethod
    def normalize_backend(cls, v: object) -> object:
        """Имя backend нечувствительно к регистру и пробелам"""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Features":
        """
        Чтение флагов из переменных окружения.

        Args:
            environ: Источник переменных (default: os.environ)

        Returns:
            Features; отсутствующие переменные берут значения по умолчанию

        Raises:
            ValueError: Если значение флага не распознано
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        if ENV_FLOAT_FULL in env:
            values["float_full"] = _parse_flag(ENV_FLOAT_FULL, env[ENV_FLOAT_FULL])
        if ENV_I128 in env:
            values["i128"] = _parse_flag(ENV_I128, env[ENV_I128])
        if ENV_MATH_BACKEND in env:
            values["math_backend"] = env[ENV_MATH_BACKEND]

        return cls(**values)


def _parse_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")
