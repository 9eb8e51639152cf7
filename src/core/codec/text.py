"""
Text Codec — Текстовые представления WideInteger

Два разных текстовых формата:
1. Wire форма (транспорт/serde): шестнадцатеричная, "0x..." / "-0x..."
2. Конструктор из текста: десятичная, ["-"] digit+

Human display (str(WideInteger)) — десятичный и не связан с wire формой.

Грамматика wire формы:
    ("-0x" | "0x") <hex-digit>+
Цифры при кодировании в нижнем регистре и представляют абсолютное значение;
знак передаётся необязательным "-" перед "0x".
"""

from typing import Final

from src.core.errors import ConversionError, DecodeError
from src.core.math.i512 import format_radix, parse_radix

WIRE_PREFIX: Final[str] = "0x"
WIRE_NEGATIVE_PREFIX: Final[str] = "-0x"


# =============================================================================
# WIRE ФОРМА (HEX)
# =============================================================================


def encode_wire(value: int) -> str:
    """
    Кодирование в wire форму.

    Examples:
        >>> encode_wire(255)
        '0xff'
        >>> encode_wire(-255)
        '-0xff'
        >>> encode_wire(0)
        '0x0'
    """
    digits = format_radix(value, 16)
    if digits.startswith("-"):
        return WIRE_NEGATIVE_PREFIX + digits[1:]
    return WIRE_PREFIX + digits


def decode_wire(text: str) -> int:
    """
    Декодирование wire формы.

    Знак определяется ведущим "-"; префикс "-0x" (3 символа) или "0x"
    (2 символа) проверяется и отрезается, остаток разбирается как base-16.

    Args:
        text: Wire строка

    Returns:
        Значение в диапазоне I512

    Raises:
        DecodeError: Если отсутствует префикс, есть не-hex символы
                     или значение вне диапазона I512
    """
    negative = text.startswith("-")
    prefix = WIRE_NEGATIVE_PREFIX if negative else WIRE_PREFIX

    if not text.startswith(prefix):
        raise DecodeError(f"Invalid WideInteger wire text {text!r}: missing '{prefix}' prefix")

    body = text[len(prefix):]
    if body.startswith("-"):
        raise DecodeError(f"Invalid WideInteger wire text {text!r}: unexpected sign after prefix")

    try:
        return parse_radix("-" + body if negative else body, 16)
    except ValueError as e:
        raise DecodeError(f"Invalid WideInteger wire text {text!r}: {e}") from e


# =============================================================================
# ДЕСЯТИЧНЫЙ ТЕКСТ (КОНСТРУКТОР)
# =============================================================================


def parse_decimal(text: str) -> int:
    """
    Разбор десятичного литерала ["-"] digit+.

    Raises:
        ConversionError: Если текст невалиден или значение вне диапазона I512

    Examples:
        >>> parse_decimal("-42")
        -42
    """
    try:
        return parse_radix(text, 10)
    except ValueError as e:
        raise ConversionError(text) from e
