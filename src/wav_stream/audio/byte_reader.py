"""Exact-length reads and little-endian integers from a byte source."""

from __future__ import annotations

from typing import Protocol

from wav_stream.errors import ShortReadError

_SKIP_BLOCK_SIZE = 64 * 1024


class ByteSource(Protocol):
    def read(self, size: int = -1, /) -> bytes: ...


def read_exact(source: ByteSource, size: int) -> bytes:
    if size < 0:
        raise ValueError("size must be >= 0")
    buffer = bytearray()
    while len(buffer) < size:
        chunk = source.read(size - len(buffer))
        if not chunk:
            raise ShortReadError(expected=size, received=len(buffer))
        buffer += chunk
    return bytes(buffer)


def read_le_u16(source: ByteSource) -> int:
    return int.from_bytes(read_exact(source, 2), "little")


def read_le_i16(source: ByteSource) -> int:
    value = read_le_u16(source)
    return value - 0x10000 if value & 0x8000 else value


def read_le_u32(source: ByteSource) -> int:
    return int.from_bytes(read_exact(source, 4), "little")


def skip(source: ByteSource, size: int) -> None:
    # Chunks can be up to 4 GiB, so discard in blocks instead of one read.
    remaining = size
    while remaining > 0:
        step = min(remaining, _SKIP_BLOCK_SIZE)
        read_exact(source, step)
        remaining -= step
