"""WAVE container parsing and streaming sample access."""

from wav_stream.audio.chunks import iter_chunks, read_chunk_header
from wav_stream.audio.fmt import read_fmt_chunk
from wav_stream.audio.models import ChunkHeader, ChunkKind, FormatTag, WavSpec, WavSpecEx
from wav_stream.audio.reader import WavReader, WavSamples
from wav_stream.audio.sample import SampleType, decode_sample
from wav_stream.audio.wav_loader import LoadedWaveform, load_wav_mono_float32, open_wav

__all__ = [
    "ChunkHeader",
    "ChunkKind",
    "FormatTag",
    "LoadedWaveform",
    "SampleType",
    "WavReader",
    "WavSamples",
    "WavSpec",
    "WavSpecEx",
    "decode_sample",
    "iter_chunks",
    "load_wav_mono_float32",
    "open_wav",
    "read_chunk_header",
    "read_fmt_chunk",
]
