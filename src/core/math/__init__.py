"""
Core math modules

512-битный примитив дополнительного кода и narrowing в нативные типы.
"""

# I512 primitive
from src.core.math.i512 import (
    # Constants
    BITS,
    BYTE_LENGTH,
    I512_MAX,
    I512_MIN,
    LIMB_BITS,
    LIMB_COUNT,
    # Normalization
    checked,
    fits,
    wrap,
    # Truncating division
    trunc_div,
    trunc_rem,
    # Wrapping arithmetic
    wrapping_abs,
    wrapping_add,
    wrapping_div,
    wrapping_mul,
    wrapping_neg,
    wrapping_pow,
    wrapping_rem,
    wrapping_sub,
    # Checked arithmetic
    checked_add,
    checked_div,
    checked_mul,
    checked_rem,
    checked_sub,
    # Limbs & bytes
    from_le_bytes,
    from_limbs,
    to_le_bytes,
    to_limbs,
    # Radix
    format_radix,
    parse_radix,
)

# Native widths
from src.core.math.native import (
    NATIVE_BOUNDS,
    NativeBounds,
    NativeKind,
    fits_native,
    narrow_float,
    narrow_int,
)

__all__ = [
    # I512 — Constants
    "BITS",
    "BYTE_LENGTH",
    "I512_MAX",
    "I512_MIN",
    "LIMB_BITS",
    "LIMB_COUNT",
    # I512 — Normalization
    "checked",
    "fits",
    "wrap",
    # I512 — Truncating division
    "trunc_div",
    "trunc_rem",
    # I512 — Wrapping arithmetic
    "wrapping_abs",
    "wrapping_add",
    "wrapping_div",
    "wrapping_mul",
    "wrapping_neg",
    "wrapping_pow",
    "wrapping_rem",
    "wrapping_sub",
    # I512 — Checked arithmetic
    "checked_add",
    "checked_div",
    "checked_mul",
    "checked_rem",
    "checked_sub",
    # I512 — Limbs & bytes
    "from_le_bytes",
    "from_limbs",
    "to_le_bytes",
    "to_limbs",
    # I512 — Radix
    "format_radix",
    "parse_radix",
    # Native widths — Types
    "NATIVE_BOUNDS",
    "NativeBounds",
    "NativeKind",
    # Native widths — Functions
    "fits_native",
    "narrow_float",
    "narrow_int",
]
