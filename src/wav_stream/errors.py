"""Error taxonomy for WAV decoding."""

from __future__ import annotations


class WavError(Exception):
    """Base class for errors raised by the decoder itself."""


class FormatError(WavError):
    """Raised when the container structure is malformed or inconsistent."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class UnsupportedError(WavError):
    """Raised for structurally valid files that use an unhandled encoding."""

    def __init__(self, reason: str = "unsupported wave format") -> None:
        super().__init__(reason)
        self.reason = reason


class DecodeError(WavError):
    """Raised when a sample cannot be represented in the requested type."""


class ReaderBusyError(WavError):
    """Raised when a sample sequence is requested while another one is active."""


class ReaderClosedError(WavError):
    """Raised when a sample sequence is requested from a closed reader."""


class ShortReadError(EOFError):
    """Raised when the byte source ends before the requested bytes arrived."""

    def __init__(self, expected: int, received: int) -> None:
        super().__init__(f"failed to read enough bytes: expected {expected}, got {received}")
        self.expected = expected
        self.received = received
