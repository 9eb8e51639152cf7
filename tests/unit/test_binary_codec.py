"""
Тесты Binary Codec (персистентная форма)

Проверяет:
1. Ровно 64 байта little-endian в дополнительном коде
2. Round trip через поток
3. Пробрасывание I/O ошибок с кодом ОС (0 если недоступен)
4. Silent degradation: невалидный payload → zero() (legacy) / DecodeError (strict)
"""

import errno
import io
import logging

import pytest

from src.core.codec.binary import PAYLOAD_SIZE, REVISION, decode_payload, read_payload
from src.core.config import STRICT_CONFIG
from src.core.domain import WideInteger
from src.core.errors import DecodeError, RevisionIOError
from src.core.math.i512 import I512_MAX, I512_MIN

# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ПОТОКИ
# =============================================================================


class FailingWriter(io.RawIOBase):
    """Поток, отказывающий при записи."""

    def __init__(self, code: int):
        super().__init__()
        self.code = code

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        raise OSError(self.code, "simulated write failure")


class StalledWriter(io.RawIOBase):
    """Поток, принимающий только первые n байт."""

    def __init__(self, capacity: int):
        super().__init__()
        self.capacity = capacity
        self.data = bytearray()

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        room = self.capacity - len(self.data)
        chunk = bytes(data[:room])
        self.data.extend(chunk)
        return len(chunk)


class FailingReader(io.RawIOBase):
    """Поток, отказывающий при чтении."""

    def __init__(self, code: int):
        super().__init__()
        self.code = code

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        raise OSError(self.code, "simulated read failure")


class TrickleReader(io.RawIOBase):
    """Поток, отдающий по одному байту за вызов."""

    def __init__(self, data: bytes):
        super().__init__()
        self.buffer = io.BytesIO(data)

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        return self.buffer.read(1)


# =============================================================================
# ТЕСТЫ ФОРМАТА
# =============================================================================


class TestPayloadLayout:
    """Тесты раскладки 64 байт"""

    def test_revision(self) -> None:
        assert REVISION == 1
        assert WideInteger.revision() == 1

    def test_size(self) -> None:
        assert PAYLOAD_SIZE == 64
        assert len(WideInteger.zero().to_payload()) == 64

    def test_known_patterns(self) -> None:
        assert WideInteger.one().to_payload() == b"\x01" + b"\x00" * 63
        assert WideInteger.from_int(-1).to_payload() == b"\xff" * 64
        assert WideInteger.min_value().to_payload() == b"\x00" * 63 + b"\x80"
        assert WideInteger.max_value().to_payload() == b"\xff" * 63 + b"\x7f"

    def test_limbs_little_endian(self) -> None:
        """Второй 64-битный limb начинается с байта 8"""
        payload = WideInteger.from_int(2**64).to_payload()
        assert payload[8] == 1
        assert payload[:8] == b"\x00" * 8


# =============================================================================
# ТЕСТЫ ПОТОКОВОГО ROUND TRIP
# =============================================================================


class TestStreamRoundTrip:
    """Тесты serialize_revisioned/deserialize_revisioned"""

    @pytest.mark.parametrize("value", [0, 1, -1, 2**64, -(2**400) + 3, I512_MAX, I512_MIN])
    def test_roundtrip(self, value: int) -> None:
        buf = io.BytesIO()
        WideInteger.from_int(value).serialize_revisioned(buf)
        assert len(buf.getvalue()) == 64

        buf.seek(0)
        assert WideInteger.deserialize_revisioned(buf) == WideInteger.from_int(value)

    def test_reads_exactly_64_bytes(self) -> None:
        """Хвост потока после payload не потребляется"""
        buf = io.BytesIO(WideInteger.from_int(7).to_payload() + b"tail")
        assert WideInteger.deserialize_revisioned(buf) == WideInteger.from_int(7)
        assert buf.read() == b"tail"

    def test_short_chunks_assembled(self) -> None:
        reader = TrickleReader(WideInteger.from_int(-99).to_payload())
        assert WideInteger.deserialize_revisioned(reader) == WideInteger.from_int(-99)


# =============================================================================
# ТЕСТЫ I/O ОШИБОК
# =============================================================================


class TestIOErrors:
    """I/O ошибки пробрасываются с кодом ОС"""

    def test_write_failure_carries_errno(self) -> None:
        with pytest.raises(RevisionIOError) as exc_info:
            WideInteger.one().serialize_revisioned(FailingWriter(errno.ENOSPC))
        assert exc_info.value.code == errno.ENOSPC

    def test_stalled_writer(self) -> None:
        writer = StalledWriter(capacity=10)
        with pytest.raises(RevisionIOError) as exc_info:
            WideInteger.one().serialize_revisioned(writer)
        assert exc_info.value.code == 0
        assert len(writer.data) == 10

    def test_read_failure_carries_errno(self) -> None:
        with pytest.raises(RevisionIOError) as exc_info:
            WideInteger.deserialize_revisioned(FailingReader(errno.EIO))
        assert exc_info.value.code == errno.EIO

    def test_unexpected_eof_code_zero(self) -> None:
        with pytest.raises(RevisionIOError, match="os error 0") as exc_info:
            WideInteger.deserialize_revisioned(io.BytesIO(b"\x00" * 10))
        assert exc_info.value.code == 0

    def test_empty_stream(self) -> None:
        with pytest.raises(RevisionIOError):
            read_payload(io.BytesIO(b""))


# =============================================================================
# ТЕСТЫ SILENT DEGRADATION
# =============================================================================


class TestInvalidPayload:
    """Невалидный payload: zero() по умолчанию, DecodeError в strict режиме"""

    def test_any_64_bytes_are_valid(self) -> None:
        expected = int.from_bytes(b"\xab" * 64, "little", signed=True)
        assert WideInteger.from_payload(b"\xab" * 64).value == expected
        assert WideInteger.from_payload(bytearray(b"\xab" * 64)).value == expected

    def test_wrong_length_substitutes_zero(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="src.core.codec.binary"):
            value = WideInteger.from_payload(b"\x01" * 10)
        assert value == WideInteger.zero()
        assert "substituting zero" in caplog.text

    def test_strict_raises(self) -> None:
        with pytest.raises(DecodeError, match="expected 64 bytes, got 10"):
            WideInteger.from_payload(b"\x01" * 10, STRICT_CONFIG)
        with pytest.raises(DecodeError):
            decode_payload(b"", STRICT_CONFIG)

    def test_strict_accepts_valid(self) -> None:
        payload = WideInteger.from_int(-5).to_payload()
        assert WideInteger.from_payload(payload, STRICT_CONFIG) == WideInteger.from_int(-5)
