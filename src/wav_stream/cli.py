"""Command-line interface for inspecting WAV files."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from itertools import islice
from pathlib import Path

from wav_stream.audio.chunks import iter_chunks
from wav_stream.audio.sample import SampleType
from wav_stream.audio.wav_loader import open_wav
from wav_stream.errors import WavError

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wav-inspect",
        description="Show the format and samples of a RIFF/WAVE file.",
    )
    parser.add_argument("file", type=Path, help="WAV file path")
    parser.add_argument(
        "--samples",
        type=int,
        default=0,
        metavar="N",
        help="Print the first N interleaved samples",
    )
    parser.add_argument("--chunks", action="store_true", help="Print the chunk layout of the file")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        with open_wav(args.file) as reader:
            spec = reader.spec
            print(f"channels:        {spec.channels}")
            print(f"sample rate:     {spec.sample_rate} Hz")
            print(f"bits per sample: {spec.bits_per_sample} ({reader.bytes_per_sample} bytes stored)")
            print(f"samples:         {reader.len()}")
            print(f"duration:        {reader.duration()} frames")
            if args.samples > 0:
                with reader.samples(SampleType.I32) as sequence:
                    values = list(islice(sequence, args.samples))
                print("first samples:   " + " ".join(str(value) for value in values))

        if args.chunks:
            with args.file.open("rb") as handle:
                for tag, offset, length in iter_chunks(handle):
                    print(f"chunk {tag!r:8} @ {offset}, size={length}")
    except (WavError, EOFError, OSError) as exc:
        logger.debug("inspection failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
