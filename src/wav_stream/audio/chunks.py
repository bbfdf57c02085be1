"""RIFF chunk header parsing and chunk layout walking."""

from __future__ import annotations

from collections.abc import Iterator

from wav_stream.audio.byte_reader import ByteSource, read_exact, read_le_u32, skip
from wav_stream.audio.models import ChunkHeader, ChunkKind
from wav_stream.errors import FormatError, ShortReadError

RIFF_PREAMBLE_SIZE = 12
CHUNK_HEADER_SIZE = 8

_CHUNK_KINDS: dict[bytes, ChunkKind] = {
    b"fmt ": ChunkKind.FMT,
    b"data": ChunkKind.DATA,
}


def read_chunk_header(source: ByteSource) -> ChunkHeader:
    tag = read_exact(source, 4)
    length = read_le_u32(source)
    return ChunkHeader(tag=tag, kind=_CHUNK_KINDS.get(tag, ChunkKind.UNKNOWN), length=length)


def read_riff_preamble(source: ByteSource) -> int:
    """Validate the RIFF/WAVE preamble and return the declared file length."""
    if read_exact(source, 4) != b"RIFF":
        raise FormatError("no RIFF tag found")
    file_length = read_le_u32(source)
    if read_exact(source, 4) != b"WAVE":
        raise FormatError("no WAVE tag found")
    return file_length


def iter_chunks(source: ByteSource) -> Iterator[tuple[str, int, int]]:
    """Yield ``(tag, offset, length)`` for each chunk after the preamble.

    Odd-sized chunks are followed by a pad byte. Iteration stops quietly when
    the stream ends, including in the middle of a truncated chunk body.
    """
    read_riff_preamble(source)
    offset = RIFF_PREAMBLE_SIZE
    while True:
        try:
            header = read_chunk_header(source)
        except ShortReadError:
            return
        yield header.name, offset, header.length
        padded = header.length + (header.length % 2)
        try:
            skip(source, padded)
        except ShortReadError:
            return
        offset += CHUNK_HEADER_SIZE + padded
