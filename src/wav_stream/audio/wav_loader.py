"""File-level WAV helpers built on the streaming reader."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from wav_stream.audio.reader import WavReader
from wav_stream.audio.sample import SampleType


@dataclass(slots=True)
class LoadedWaveform:
    sample_rate: int
    channels: int
    frame_count: int
    bits_per_sample: int
    samples: list[float]

    @property
    def duration_sec(self) -> float:
        if self.sample_rate <= 0:
            return 0.0
        return self.frame_count / self.sample_rate


def open_wav(path: str | Path) -> WavReader:
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(str(file_path))
    return WavReader.open(file_path)


def load_wav_mono_float32(path: str | Path) -> LoadedWaveform:
    with open_wav(path) as reader:
        spec = reader.spec
        scale = _full_scale(spec.bits_per_sample)
        samples: list[float] = []
        frame: list[int] = []
        with reader.samples(SampleType.I32) as sequence:
            for value in sequence:
                frame.append(value)
                if len(frame) < spec.channels:
                    continue
                total = sum(frame) / scale
                samples.append(max(min(total / spec.channels, 1.0), -1.0))
                frame = []
        return LoadedWaveform(
            sample_rate=spec.sample_rate,
            channels=spec.channels,
            frame_count=reader.duration(),
            bits_per_sample=spec.bits_per_sample,
            samples=samples,
        )


def _full_scale(bits_per_sample: int) -> float:
    if bits_per_sample <= 1:
        return 1.0
    return float(1 << (bits_per_sample - 1))
