"""Interpretation of the fmt chunk for WAVE_FORMAT_PCM and WAVE_FORMAT_EXTENSIBLE."""

from __future__ import annotations

import logging
from typing import Callable

from wav_stream.audio.byte_reader import ByteSource, read_exact, read_le_u16, read_le_u32, skip
from wav_stream.audio.models import PCM_SUBFORMAT_GUID, FormatTag, WavSpec, WavSpecEx
from wav_stream.errors import FormatError, UnsupportedError

logger = logging.getLogger(__name__)

# WAVEFORMAT plus wBitsPerSample.
MIN_FMT_CHUNK_SIZE = 16
PCM_FMT_CHUNK_SIZE = 16
EXTENSIBLE_FMT_CHUNK_SIZE = 40
EXTENSIBLE_CB_SIZE = 22

_FormatHandler = Callable[[ByteSource, int, WavSpec], WavSpecEx]


def read_fmt_chunk(source: ByteSource, chunk_length: int) -> WavSpecEx:
    if chunk_length < MIN_FMT_CHUNK_SIZE:
        raise FormatError("invalid fmt chunk size")

    format_tag = read_le_u16(source)
    channels = read_le_u16(source)
    sample_rate = read_le_u32(source)
    avg_bytes_per_sec = read_le_u32(source)
    block_align = read_le_u16(source)
    bits_per_sample = read_le_u16(source)

    # Block align and byte rate are redundant; a mismatch means a corrupt header.
    if channels == 0:
        raise FormatError("inconsistent fmt chunk")
    if bits_per_sample != (block_align // channels) * 8 or avg_bytes_per_sec != block_align * sample_rate:
        raise FormatError("inconsistent fmt chunk")
    if bits_per_sample % 8 != 0:
        raise FormatError("bits per sample is not a multiple of 8")

    spec = WavSpec(channels=channels, sample_rate=sample_rate, bits_per_sample=bits_per_sample)

    try:
        tag = FormatTag(format_tag)
    except ValueError as exc:
        raise UnsupportedError(f"unsupported format tag 0x{format_tag:04x}") from exc

    spec_ex = _FORMAT_HANDLERS[tag](source, chunk_length, spec)
    logger.debug("fmt chunk: tag=%s spec=%s bytes_per_sample=%d", tag.name, spec_ex.spec, spec_ex.bytes_per_sample)
    return spec_ex


def _read_format_pcm(source: ByteSource, chunk_length: int, spec: WavSpec) -> WavSpecEx:
    if chunk_length != PCM_FMT_CHUNK_SIZE:
        raise FormatError("unexpected fmt chunk size")
    if spec.bits_per_sample not in {8, 16}:
        raise FormatError("bits per sample is not 8 or 16")
    return WavSpecEx(spec=spec, bytes_per_sample=spec.bits_per_sample // 8)


def _read_format_extensible(source: ByteSource, chunk_length: int, spec: WavSpec) -> WavSpecEx:
    if chunk_length < EXTENSIBLE_FMT_CHUNK_SIZE:
        raise FormatError("unexpected fmt chunk size")
    if spec.bits_per_sample == 0:
        raise FormatError("bits per sample is zero")

    cb_size = read_le_u16(source)
    if cb_size != EXTENSIBLE_CB_SIZE:
        raise FormatError("unexpected WAVEFORMATEXTENSIBLE size")

    valid_bits_per_sample = read_le_u16(source)
    if valid_bits_per_sample == 0 or valid_bits_per_sample > spec.bits_per_sample:
        raise FormatError("invalid valid bits per sample")
    read_le_u32(source)  # channel mask
    subformat = read_exact(source, 16)
    if subformat != PCM_SUBFORMAT_GUID:
        raise UnsupportedError(f"unsupported sub-format {subformat.hex()}")

    # Keep the scanner aligned on the next chunk header.
    skip(source, chunk_length - EXTENSIBLE_FMT_CHUNK_SIZE)

    return WavSpecEx(
        spec=WavSpec(
            channels=spec.channels,
            sample_rate=spec.sample_rate,
            bits_per_sample=valid_bits_per_sample,
        ),
        bytes_per_sample=spec.bits_per_sample // 8,
    )


_FORMAT_HANDLERS: dict[FormatTag, _FormatHandler] = {
    FormatTag.PCM: _read_format_pcm,
    FormatTag.EXTENSIBLE: _read_format_extensible,
}
