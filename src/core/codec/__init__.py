"""
Codecs для WideInteger: wire форма (hex текст) и binary форма (64 байта).
"""

from src.core.codec.binary import (
    PAYLOAD_SIZE,
    REVISION,
    decode_payload,
    encode_payload,
    read_payload,
    write_payload,
)
from src.core.codec.text import (
    WIRE_NEGATIVE_PREFIX,
    WIRE_PREFIX,
    decode_wire,
    encode_wire,
    parse_decimal,
)

__all__ = [
    # Binary codec
    "PAYLOAD_SIZE",
    "REVISION",
    "decode_payload",
    "encode_payload",
    "read_payload",
    "write_payload",
    # Text codec
    "WIRE_NEGATIVE_PREFIX",
    "WIRE_PREFIX",
    "decode_wire",
    "encode_wire",
    "parse_decimal",
]
