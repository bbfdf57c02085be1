"""Decoding of single interleaved samples into integer targets."""

from __future__ import annotations

from enum import Enum

from wav_stream.audio.byte_reader import ByteSource, read_exact
from wav_stream.errors import DecodeError


class SampleType(str, Enum):
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"

    @property
    def bits(self) -> int:
        return _SAMPLE_TYPE_BITS[self]


_SAMPLE_TYPE_BITS: dict[SampleType, int] = {
    SampleType.I8: 8,
    SampleType.I16: 16,
    SampleType.I32: 32,
}


def decode_sample(raw: bytes, bits: int, sample_type: SampleType = SampleType.I16) -> int:
    target = SampleType(sample_type)
    if bits > target.bits:
        raise DecodeError(f"{bits}-bit sample too wide for {target.value}")
    if not raw:
        raise DecodeError("empty sample window")
    # 8-bit WAV data is unsigned with a 128 offset; wider widths are signed.
    if len(raw) == 1:
        return raw[0] - 128
    value = int.from_bytes(raw, "little", signed=True)
    # Valid bits are left-justified in the storage container.
    padding_bits = len(raw) * 8 - bits
    if padding_bits > 0:
        value >>= padding_bits
    return value


def read_sample(
    source: ByteSource,
    bytes_per_sample: int,
    bits: int,
    sample_type: SampleType = SampleType.I16,
) -> int:
    raw = read_exact(source, bytes_per_sample)
    return decode_sample(raw, bits, sample_type)
