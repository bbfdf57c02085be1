"""Core WAV data model shared by the reader and its surfaces."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

# KSDATAFORMAT_SUBTYPE_PCM as stored on disk.
PCM_SUBFORMAT_GUID = bytes(
    [0x01, 0x00, 0x00, 0x00, 0x00, 0x00, 0x10, 0x00, 0x80, 0x00, 0x00, 0xAA, 0x00, 0x38, 0x9B, 0x71]
)


class FormatTag(IntEnum):
    PCM = 0x0001
    EXTENSIBLE = 0xFFFE


class ChunkKind(str, Enum):
    FMT = "fmt"
    DATA = "data"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class WavSpec:
    """Stream properties as found in the fmt chunk.

    ``bits_per_sample`` is the number of valid bits, which can be fewer than
    the bits used to store a sample.
    """

    channels: int
    sample_rate: int
    bits_per_sample: int


@dataclass(frozen=True, slots=True)
class WavSpecEx:
    spec: WavSpec
    bytes_per_sample: int


@dataclass(slots=True)
class ChunkHeader:
    tag: bytes
    kind: ChunkKind
    length: int

    @property
    def name(self) -> str:
        return self.tag.decode("ascii", errors="replace")
