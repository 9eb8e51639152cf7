"""
Native Widths — Таблица нативных типов и narrowing-конверсии

Для каждой нативной ширины (i8..i128, u8..u128, isize, usize, f32, f64)
один раз при импорте вычисляются границы [minimum, maximum].

Narrowing-конверсия:
1. Bounds check против предвычисленных границ (обе границы, в том числе
   неотрицательность для беззнаковых типов)
2. Извлечение младших byte_size байт little-endian представления
3. Интерпретация как целевой тип

Вне диапазона возвращается None (не ошибка): контракт используется
внешней системой значений для проверки "помещается ли значение".

ВНИМАНИЕ: f32/f64 в legacy режиме не проверяют границы и переинтерпретируют
младшие 4/8 байт как IEEE-754, что для больших значений численно бессмысленно.
"""

import struct
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional

from src.core.math.i512 import to_le_bytes


class NativeKind(str, Enum):
    """Нативный тип фиксированной ширины"""

    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    ISIZE = "isize"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    USIZE = "usize"
    F32 = "f32"
    F64 = "f64"

    @property
    def is_float(self) -> bool:
        return self in (NativeKind.F32, NativeKind.F64)


@dataclass(frozen=True)
class NativeBounds:
    """Границы и раскладка нативного типа."""

    kind: NativeKind
    byte_size: int
    signed: bool
    minimum: int
    maximum: int


def _int_bounds(kind: NativeKind, bits: int, signed: bool) -> NativeBounds:
    if signed:
        minimum = -(1 << (bits - 1))
        maximum = (1 << (bits - 1)) - 1
    else:
        minimum = 0
        maximum = (1 << bits) - 1
    return NativeBounds(kind, bits // 8, signed, minimum, maximum)


def _float_bounds(kind: NativeKind, byte_size: int, max_value: float) -> NativeBounds:
    # Целая часть максимального конечного float (используется только в strict режиме)
    return NativeBounds(kind, byte_size, True, -int(max_value), int(max_value))


_F32_MAX: Final[float] = struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]

# Платформа считается 64-битной: isize/usize имеют ширину 64 бита
_POINTER_BITS: Final[int] = 64

NATIVE_BOUNDS: Final[dict[NativeKind, NativeBounds]] = {
    NativeKind.I8: _int_bounds(NativeKind.I8, 8, True),
    NativeKind.I16: _int_bounds(NativeKind.I16, 16, True),
    NativeKind.I32: _int_bounds(NativeKind.I32, 32, True),
    NativeKind.I64: _int_bounds(NativeKind.I64, 64, True),
    NativeKind.I128: _int_bounds(NativeKind.I128, 128, True),
    NativeKind.ISIZE: _int_bounds(NativeKind.ISIZE, _POINTER_BITS, True),
    NativeKind.U8: _int_bounds(NativeKind.U8, 8, False),
    NativeKind.U16: _int_bounds(NativeKind.U16, 16, False),
    NativeKind.U32: _int_bounds(NativeKind.U32, 32, False),
    NativeKind.U64: _int_bounds(NativeKind.U64, 64, False),
    NativeKind.U128: _int_bounds(NativeKind.U128, 128, False),
    NativeKind.USIZE: _int_bounds(NativeKind.USIZE, _POINTER_BITS, False),
    NativeKind.F32: _float_bounds(NativeKind.F32, 4, _F32_MAX),
    NativeKind.F64: _float_bounds(NativeKind.F64, 8, sys.float_info.max),
}

_FLOAT_FORMATS: Final[dict[NativeKind, str]] = {
    NativeKind.F32: "<f",
    NativeKind.F64: "<d",
}


# =============================================================================
# BOUNDS CHECK
# =============================================================================


def fits_native(value: int, kind: NativeKind) -> bool:
    """
    Проверка, что значение лежит в диапазоне нативного типа.

    Для float типов проверяется диапазон конечных значений.
    """
    bounds = NATIVE_BOUNDS[kind]
    return bounds.minimum <= value <= bounds.maximum


# =============================================================================
# NARROWING
# =============================================================================


def narrow_int(value: int, kind: NativeKind) -> Optional[int]:
    """
    Bounds-checked конверсия в целочисленный нативный тип.

    Args:
        value: Значение в диапазоне I512
        kind: Целевой целочисленный тип

    Returns:
        Значение целевого типа, либо None если не помещается

    Raises:
        ValueError: Если kind — float тип

    Examples:
        >>> narrow_int(127, NativeKind.I8)
        127
        >>> narrow_int(128, NativeKind.I8) is None
        True
        >>> narrow_int(-1, NativeKind.U8) is None
        True
    """
    if kind.is_float:
        raise ValueError(f"{kind.value} is not an integer kind, use narrow_float")

    bounds = NATIVE_BOUNDS[kind]
    if value < bounds.minimum or value > bounds.maximum:
        return None

    low = to_le_bytes(value)[: bounds.byte_size]
    return int.from_bytes(low, "little", signed=bounds.signed)


def narrow_float(value: int, kind: NativeKind, strict: bool = False) -> Optional[float]:
    """
    Конверсия в f32/f64.

    Args:
        value: Значение в диапазоне I512
        kind: NativeKind.F32 или NativeKind.F64
        strict: False → legacy переинтерпретация младших байт без bounds check;
                True → None вне диапазона конечных float, иначе ближайший float

    Returns:
        float (в legacy режиме всегда), либо None в strict режиме вне диапазона

    Raises:
        ValueError: Если kind — не float тип
    """
    if not kind.is_float:
        raise ValueError(f"{kind.value} is not a float kind, use narrow_int")

    fmt = _FLOAT_FORMATS[kind]
    bounds = NATIVE_BOUNDS[kind]

    if not strict:
        low = to_le_bytes(value)[: bounds.byte_size]
        return struct.unpack(fmt, low)[0]

    if value < bounds.minimum or value > bounds.maximum:
        return None

    # Округление до ширины целевого типа через упаковку
    return struct.unpack(fmt, struct.pack(fmt, float(value)))[0]
