"""
Конфигурация поведения WideInteger в спорных местах формата.

Значения по умолчанию сохраняют совместимость с существующим форматом.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class WideIntConfig:
    """Конфигурация конверсий и binary codec.

    - strict_float_narrowing: False → to_f32/to_f64 переинтерпретируют младшие
      байты (legacy); True → bounds check и численная конверсия
    - strict_binary_decode: False → неиспользуемый payload заменяется нулём
      (с warning в лог); True → DecodeError
    """
    strict_float_narrowing: bool = False
    strict_binary_decode: bool = False


DEFAULT_CONFIG: Final[WideIntConfig] = WideIntConfig()

STRICT_CONFIG: Final[WideIntConfig] = WideIntConfig(
    strict_float_narrowing=True,
    strict_binary_decode=True,
)
