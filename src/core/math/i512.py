"""
I512 — 512-битное целое в дополнительном коде

Примитив, на котором построен WideInteger. Значение хранится как обычный
Python int в каноническом знаковом диапазоне [I512_MIN, I512_MAX];
переполнение обрабатывается явной маской по модулю 2**512.

Модуль обеспечивает:
- Wrapping арифметику (младшие 512 бит истинного результата)
- Checked арифметику (None при выходе за диапазон)
- Усекающее деление (округление к нулю), остаток со знаком делимого
- Разложение на limbs (8 × 64 бит, little-endian) и байты
- Разбор и форматирование в системах счисления 2..16

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все функции принимают и возвращают значения в диапазоне [I512_MIN, I512_MAX]
2. Wrapping функции никогда не бросают исключений при переполнении
3. Checked функции возвращают None ровно тогда, когда wrapping дал бы другой результат
4. Все операции детерминированы и не имеют состояния
"""

import re
from typing import Final, Optional, Sequence

# =============================================================================
# КОНСТАНТЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

BITS: Final[int] = 512

# Limb — одно 64-битное слово многословного представления
LIMB_BITS: Final[int] = 64
LIMB_COUNT: Final[int] = BITS // LIMB_BITS
LIMB_MASK: Final[int] = (1 << LIMB_BITS) - 1

BYTE_LENGTH: Final[int] = BITS // 8

MODULUS: Final[int] = 1 << BITS
MASK: Final[int] = MODULUS - 1

I512_MIN: Final[int] = -(1 << (BITS - 1))
I512_MAX: Final[int] = (1 << (BITS - 1)) - 1

U32_MAX: Final[int] = (1 << 32) - 1

_DIGITS: Final[str] = "0123456789abcdef"

# Системы счисления со встроенным форматированием int
_FORMAT_SPECS: Final[dict[int, str]] = {2: "b", 8: "o", 10: "d", 16: "x"}


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def wrap(value: int) -> int:
    """
    Приведение произвольного int к 512-битному дополнительному коду.

    Оставляет младшие 512 бит и интерпретирует старший бит как знак.

    Examples:
        >>> wrap(I512_MAX + 1) == I512_MIN
        True
        >>> wrap(-1)
        -1
    """
    v = value & MASK
    if v > I512_MAX:
        return v - MODULUS
    return v


def fits(value: int) -> bool:
    """Проверка, что значение представимо без переполнения."""
    return I512_MIN <= value <= I512_MAX


def checked(value: int) -> Optional[int]:
    """Значение, если оно представимо, иначе None."""
    if fits(value):
        return value
    return None


# =============================================================================
# УСЕКАЮЩЕЕ ДЕЛЕНИЕ
# =============================================================================


def trunc_div(a: int, b: int) -> int:
    """
    Деление с округлением к нулю (в отличие от // в Python, округляющего вниз).

    Examples:
        >>> trunc_div(-7, 2)
        -3
        >>> trunc_div(7, -2)
        -3
    """
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        return -q
    return q


def trunc_rem(a: int, b: int) -> int:
    """
    Остаток усекающего деления: знак совпадает со знаком делимого.

    Examples:
        >>> trunc_rem(-7, 2)
        -1
        >>> trunc_rem(7, -2)
        1
    """
    return a - b * trunc_div(a, b)


# =============================================================================
# WRAPPING АРИФМЕТИКА
# =============================================================================


def wrapping_neg(a: int) -> int:
    return wrap(-a)


def wrapping_abs(a: int) -> int:
    """abs в дополнительном коде: abs(I512_MIN) == I512_MIN."""
    return wrap(abs(a))


def wrapping_add(a: int, b: int) -> int:
    return wrap(a + b)


def wrapping_sub(a: int, b: int) -> int:
    return wrap(a - b)


def wrapping_mul(a: int, b: int) -> int:
    return wrap(a * b)


def wrapping_div(a: int, b: int) -> int:
    """
    Усекающее деление с wrapping: I512_MIN / -1 == I512_MIN.

    Raises:
        ZeroDivisionError: Если b == 0
    """
    if b == 0:
        raise ZeroDivisionError("WideInteger division by zero")
    return wrap(trunc_div(a, b))


def wrapping_rem(a: int, b: int) -> int:
    """
    Остаток усекающего деления: I512_MIN % -1 == 0.

    Raises:
        ZeroDivisionError: Если b == 0
    """
    if b == 0:
        raise ZeroDivisionError("WideInteger remainder by zero")
    return wrap(trunc_rem(a, b))


def wrapping_pow(base: int, exp: int) -> int:
    """
    Целочисленная степень по модулю 2**512.

    Args:
        base: Основание
        exp: Показатель (беззнаковое 32-битное)

    Raises:
        ValueError: Если exp вне диапазона u32
    """
    if exp < 0 or exp > U32_MAX:
        raise ValueError(f"exponent must fit in u32, got {exp}")
    return wrap(pow(base, exp, MODULUS))


# =============================================================================
# CHECKED АРИФМЕТИКА
# =============================================================================


def checked_add(a: int, b: int) -> Optional[int]:
    return checked(a + b)


def checked_sub(a: int, b: int) -> Optional[int]:
    return checked(a - b)


def checked_mul(a: int, b: int) -> Optional[int]:
    return checked(a * b)


def checked_div(a: int, b: int) -> Optional[int]:
    """None при делении на ноль и при переполнении (I512_MIN / -1)."""
    if b == 0:
        return None
    return checked(trunc_div(a, b))


def checked_rem(a: int, b: int) -> Optional[int]:
    """None при делении на ноль и для I512_MIN % -1 (переполнение частного)."""
    if b == 0:
        return None
    if a == I512_MIN and b == -1:
        return None
    return trunc_rem(a, b)


# =============================================================================
# LIMBS И БАЙТЫ
# =============================================================================


def to_limbs(a: int) -> tuple[int, ...]:
    """
    Разложение на 64-битные limbs, младший первым.

    Returns:
        Кортеж из LIMB_COUNT беззнаковых 64-битных слов
    """
    u = a & MASK
    return tuple((u >> (LIMB_BITS * i)) & LIMB_MASK for i in range(LIMB_COUNT))


def from_limbs(limbs: Sequence[int]) -> int:
    """
    Сборка значения из 64-битных limbs (младший первым).

    Raises:
        ValueError: Если число limbs != LIMB_COUNT или limb вне [0, 2**64)
    """
    if len(limbs) != LIMB_COUNT:
        raise ValueError(f"expected {LIMB_COUNT} limbs, got {len(limbs)}")

    u = 0
    for i, limb in enumerate(limbs):
        if limb < 0 or limb > LIMB_MASK:
            raise ValueError(f"limb {i} out of range: {limb}")
        u |= limb << (LIMB_BITS * i)
    return wrap(u)


def to_le_bytes(a: int) -> bytes:
    """64 байта little-endian в дополнительном коде."""
    return (a & MASK).to_bytes(BYTE_LENGTH, "little")


def from_le_bytes(data: bytes) -> Optional[int]:
    """
    Значение из little-endian буфера.

    Returns:
        Значение, либо None если длина буфера != BYTE_LENGTH
    """
    if len(data) != BYTE_LENGTH:
        return None
    return int.from_bytes(data, "little", signed=True)


# =============================================================================
# СИСТЕМЫ СЧИСЛЕНИЯ
# =============================================================================

_RADIX_PATTERNS: Final[dict[int, "re.Pattern[str]"]] = {
    radix: re.compile(f"-?[{re.escape(_DIGITS[:radix])}]+", re.IGNORECASE)
    for radix in range(2, 17)
}


def parse_radix(text: str, radix: int) -> int:
    """
    Разбор знакового целого в заданной системе счисления.

    Грамматика: ["-"] digit+ (без пробелов, '+', '_' и префиксов).

    Raises:
        ValueError: Если текст невалиден или значение вне диапазона I512
    """
    pattern = _RADIX_PATTERNS.get(radix)
    if pattern is None:
        raise ValueError(f"radix must be in [2, 16], got {radix}")

    if pattern.fullmatch(text) is None:
        raise ValueError(f"invalid digit found in {text!r} for radix {radix}")

    value = int(text, radix)
    if not fits(value):
        raise ValueError(f"number too large to fit in target type: {text!r}")
    return value


def format_radix(a: int, radix: int) -> str:
    """
    Форматирование в заданной системе счисления (цифры в нижнем регистре).

    Examples:
        >>> format_radix(255, 16)
        'ff'
        >>> format_radix(-255, 16)
        '-ff'
    """
    if radix < 2 or radix > 16:
        raise ValueError(f"radix must be in [2, 16], got {radix}")

    spec = _FORMAT_SPECS.get(radix)
    if spec is not None:
        return format(a, spec)

    if a == 0:
        return "0"

    magnitude = abs(a)
    digits = []
    while magnitude:
        magnitude, d = divmod(magnitude, radix)
        digits.append(_DIGITS[d])

    if a < 0:
        digits.append("-")
    return "".join(reversed(digits))
