"""Streaming decoder for RIFF/WAVE audio files."""

from wav_stream.audio import (
    LoadedWaveform,
    SampleType,
    WavReader,
    WavSamples,
    WavSpec,
    load_wav_mono_float32,
    open_wav,
)
from wav_stream.errors import (
    DecodeError,
    FormatError,
    ReaderBusyError,
    ReaderClosedError,
    ShortReadError,
    UnsupportedError,
    WavError,
)

__all__ = [
    "DecodeError",
    "FormatError",
    "LoadedWaveform",
    "ReaderBusyError",
    "ReaderClosedError",
    "SampleType",
    "ShortReadError",
    "UnsupportedError",
    "WavError",
    "WavReader",
    "WavSamples",
    "WavSpec",
    "load_wav_mono_float32",
    "open_wav",
]
