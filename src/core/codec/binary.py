"""
Binary Codec — Персистентное представление WideInteger

Фиксированный формат, ревизия 1:
- ровно 64 байта
- little-endian, дополнительный код
- 8 limbs по 64 бита, младший первым
- без framing, length prefix и checksum (это ответственность вызывающего)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Запись всегда пишет все 64 байта или бросает RevisionIOError
2. Чтение из потока получает ровно 64 байта или бросает RevisionIOError
3. I/O ошибки не повторяются, а пробрасываются с кодом ОС (0 если недоступен)

ВНИМАНИЕ (silent degradation): payload, который нельзя интерпретировать как
I512 (длина != 64), в режиме по умолчанию молча заменяется нулём. Это
маскирует повреждение данных; strict_binary_decode включает DecodeError.
"""

import logging
from typing import BinaryIO, Final

from src.core.config import DEFAULT_CONFIG, WideIntConfig
from src.core.errors import DecodeError, RevisionIOError
from src.core.math.i512 import BYTE_LENGTH, from_le_bytes, to_le_bytes

logger = logging.getLogger(__name__)

REVISION: Final[int] = 1

PAYLOAD_SIZE: Final[int] = BYTE_LENGTH


def encode_payload(value: int) -> bytes:
    """64-байтовое представление значения."""
    return to_le_bytes(value)


def decode_payload(data: bytes, config: WideIntConfig = DEFAULT_CONFIG) -> int:
    """
    Восстановление значения из payload.

    Args:
        data: Байтовый буфер
        config: Конфигурация (strict_binary_decode)

    Returns:
        Значение, либо 0 если буфер не интерпретируется (legacy режим)

    Raises:
        DecodeError: Если буфер не интерпретируется и strict_binary_decode=True
    """
    value = from_le_bytes(bytes(data))
    if value is not None:
        return value

    if config.strict_binary_decode:
        raise DecodeError(
            f"Invalid WideInteger payload: expected {PAYLOAD_SIZE} bytes, got {len(data)}"
        )

    logger.warning(
        "Invalid WideInteger payload of %d bytes (expected %d), substituting zero",
        len(data),
        PAYLOAD_SIZE,
    )
    return 0


def write_payload(writer: BinaryIO, value: int) -> None:
    """
    Запись 64-байтового payload в поток.

    Raises:
        RevisionIOError: Если поток отказал или перестал принимать байты
    """
    view = memoryview(encode_payload(value))
    offset = 0
    while offset < PAYLOAD_SIZE:
        try:
            written = writer.write(view[offset:])
        except OSError as e:
            raise RevisionIOError(e.errno or 0, "write") from e
        if not written:
            raise RevisionIOError(0, "write")
        offset += written


def read_payload(reader: BinaryIO, config: WideIntConfig = DEFAULT_CONFIG) -> int:
    """
    Чтение ровно 64 байт из потока и восстановление значения.

    Raises:
        RevisionIOError: Если поток отказал или закончился раньше 64 байт
    """
    buf = bytearray()
    while len(buf) < PAYLOAD_SIZE:
        try:
            chunk = reader.read(PAYLOAD_SIZE - len(buf))
        except OSError as e:
            raise RevisionIOError(e.errno or 0, "read") from e
        if not chunk:
            # Unexpected EOF: кода ОС нет
            raise RevisionIOError(0, "read")
        buf.extend(chunk)

    return decode_payload(bytes(buf), config)
