"""
Contract Validation Module

Модуль для валидации wire контрактов WideInteger.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    WideIntegerWireValidator,
    validate_wide_integer_wire,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "WideIntegerWireValidator",
    # Functions
    "validate_wide_integer_wire",
]
