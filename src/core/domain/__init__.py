"""
Domain models and value objects.

Contains the WideInteger scalar: a 512-bit signed integer value type.
"""

from src.core.domain.wide_integer import WideInteger

__all__ = [
    "WideInteger",
]
