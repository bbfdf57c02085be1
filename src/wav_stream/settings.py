"""Environment-driven service settings."""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, Field

DEFAULT_MAX_BODY_BYTES = 64 * 1024 * 1024
DEFAULT_MAX_PREVIEW_SAMPLES = 4096
DEFAULT_LOG_LEVEL = "WARNING"


class ServiceSettings(BaseModel):
    max_body_bytes: int = Field(default=DEFAULT_MAX_BODY_BYTES, ge=44)
    max_preview_samples: int = Field(default=DEFAULT_MAX_PREVIEW_SAMPLES, ge=1)
    log_level: str = DEFAULT_LOG_LEVEL

    @staticmethod
    def from_env() -> ServiceSettings:
        max_body_bytes = _int_from_env("WAV_STREAM_MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES)
        max_preview = _int_from_env("WAV_STREAM_MAX_PREVIEW_SAMPLES", DEFAULT_MAX_PREVIEW_SAMPLES)
        log_level = os.getenv("WAV_STREAM_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            log_level = DEFAULT_LOG_LEVEL
        return ServiceSettings(
            max_body_bytes=max(max_body_bytes, 44),
            max_preview_samples=max(max_preview, 1),
            log_level=log_level,
        )


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name, str(default)).strip()
    try:
        return int(raw)
    except ValueError:
        return default
