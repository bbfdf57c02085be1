"""Streaming WAVE reader.

A ``WavReader`` reads the header and the fmt chunk when it is created and then
stops at the first content byte of the data chunk. Samples are read on demand
through ``WavReader.samples``; no internal buffering is performed on the
underlying byte source.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from types import TracebackType

from wav_stream.audio.byte_reader import ByteSource, skip
from wav_stream.audio.chunks import read_chunk_header, read_riff_preamble
from wav_stream.audio.fmt import read_fmt_chunk
from wav_stream.audio.models import ChunkKind, WavSpec, WavSpecEx
from wav_stream.audio.sample import SampleType, read_sample
from wav_stream.errors import FormatError, ReaderBusyError, ReaderClosedError

logger = logging.getLogger(__name__)


def read_until_data(source: ByteSource) -> tuple[WavSpecEx, int]:
    """Scan chunks up to the data chunk.

    Returns the fmt information and the data chunk length in bytes. The source
    is left at the first content byte of the data chunk. A stream that ends
    before a data chunk raises ``ShortReadError``.
    """
    spec_ex: WavSpecEx | None = None
    while True:
        header = read_chunk_header(source)
        logger.debug("chunk %r length=%d", header.name, header.length)
        if header.kind is ChunkKind.FMT:
            if spec_ex is not None:
                logger.warning("second fmt chunk found; it replaces the first one")
            spec_ex = read_fmt_chunk(source, header.length)
        elif header.kind is ChunkKind.DATA:
            if spec_ex is None:
                raise FormatError("missing fmt chunk")
            return spec_ex, header.length
        else:
            skip(source, header.length)


class WavReader:
    def __init__(self, source: ByteSource, *, owns_source: bool = False) -> None:
        file_length = read_riff_preamble(source)
        logger.debug("RIFF file length field=%d", file_length)
        spec_ex, data_length = read_until_data(source)

        num_samples = data_length // spec_ex.bytes_per_sample
        # Every interleaved frame must have a sample for each channel.
        if num_samples % spec_ex.spec.channels != 0:
            raise FormatError("invalid data chunk length")

        self._spec = spec_ex.spec
        self._bytes_per_sample = spec_ex.bytes_per_sample
        self._num_samples = num_samples
        self._samples_read = 0
        self._source = source
        self._owns_source = owns_source
        self._in_use = False
        self._closed = False

    @classmethod
    def open(cls, path: str | Path) -> WavReader:
        file_path = Path(path)
        handle = io.BufferedReader(io.FileIO(file_path, "rb"))
        try:
            return cls(handle, owns_source=True)
        except BaseException:
            handle.close()
            raise

    @property
    def spec(self) -> WavSpec:
        return self._spec

    @property
    def bytes_per_sample(self) -> int:
        return self._bytes_per_sample

    @property
    def samples_read(self) -> int:
        return self._samples_read

    def duration(self) -> int:
        """Number of frames, independent of how many samples were read."""
        return self._num_samples // self._spec.channels

    def len(self) -> int:
        """Number of interleaved samples, independent of how many were read."""
        return self._num_samples

    def __len__(self) -> int:
        return self._num_samples

    def remaining(self) -> int:
        return self._num_samples - self._samples_read

    def samples(self, sample_type: SampleType | str = SampleType.I16) -> WavSamples:
        """Borrow the reader for a sample sequence.

        The sequence continues where a previous one stopped. Only one sequence
        can be active at a time; it is released on exhaustion, ``close()``,
        leaving its ``with`` block or when the sequence is garbage collected.
        """
        if self._closed:
            raise ReaderClosedError("reader is closed")
        if self._in_use:
            raise ReaderBusyError("a sample sequence is already active for this reader")
        target = SampleType(sample_type)
        self._in_use = True
        return WavSamples(self, target)

    def close(self) -> None:
        self._closed = True
        if self._owns_source:
            self._source.close()  # type: ignore[attr-defined]

    def __enter__(self) -> WavReader:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _next_sample(self, sample_type: SampleType) -> int | None:
        if self._samples_read >= self._num_samples:
            return None
        self._samples_read += 1
        return read_sample(self._source, self._bytes_per_sample, self._spec.bits_per_sample, sample_type)

    def _release(self) -> None:
        self._in_use = False


class WavSamples:
    """Iterator over interleaved samples borrowed from a ``WavReader``."""

    def __init__(self, reader: WavReader, sample_type: SampleType) -> None:
        self._reader: WavReader | None = reader
        self._sample_type = sample_type

    @property
    def sample_type(self) -> SampleType:
        return self._sample_type

    @property
    def remaining(self) -> int:
        """Samples this sequence can still yield; 0 once it is closed."""
        if self._reader is None:
            return 0
        return self._reader.remaining()

    def __iter__(self) -> WavSamples:
        return self

    def __next__(self) -> int:
        if self._reader is None:
            raise StopIteration
        value = self._reader._next_sample(self._sample_type)
        if value is None:
            self.close()
            raise StopIteration
        return value

    def __len__(self) -> int:
        return self.remaining

    def __length_hint__(self) -> int:
        return self.remaining

    def close(self) -> None:
        if self._reader is not None:
            self._reader._release()
            self._reader = None

    def __del__(self) -> None:
        self.close()

    def __enter__(self) -> WavSamples:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
