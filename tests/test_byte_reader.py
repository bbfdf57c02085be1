import io

import pytest

from wav_stream.audio.byte_reader import read_exact, read_le_i16, read_le_u16, read_le_u32, skip
from wav_stream.errors import ShortReadError


class _TrickleSource:
    """Returns at most ``step`` bytes per read call."""

    def __init__(self, data: bytes, step: int = 1) -> None:
        self._data = io.BytesIO(data)
        self._step = step
        self.calls = 0

    def read(self, size: int = -1) -> bytes:
        self.calls += 1
        return self._data.read(min(size, self._step))


def test_read_exact_tolerates_partial_reads() -> None:
    source = _TrickleSource(b"RIFFWAVE", step=3)
    assert read_exact(source, 8) == b"RIFFWAVE"
    assert source.calls == 3


def test_read_exact_raises_on_short_read() -> None:
    with pytest.raises(ShortReadError) as excinfo:
        read_exact(io.BytesIO(b"RIF"), 4)
    assert excinfo.value.expected == 4
    assert excinfo.value.received == 3


def test_short_read_is_an_eof_error() -> None:
    with pytest.raises(EOFError):
        read_le_u32(io.BytesIO(b""))


def test_little_endian_integers() -> None:
    source = io.BytesIO(b"\x34\x12\x78\x56\x34\x12\xfd\xff\x02\x00")
    assert read_le_u16(source) == 0x1234
    assert read_le_u32(source) == 0x12345678
    assert read_le_i16(source) == -3
    assert read_le_i16(source) == 2


def test_skip_discards_exactly_the_requested_bytes() -> None:
    source = _TrickleSource(bytes(range(200)), step=7)
    skip(source, 150)
    assert read_exact(source, 1) == bytes([150])


def test_skip_past_end_raises() -> None:
    with pytest.raises(ShortReadError):
        skip(io.BytesIO(b"\x00" * 10), 11)
