"""FastAPI request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel


class InspectResponse(BaseModel):
    channels: int
    sample_rate: int
    bits_per_sample: int
    bytes_per_sample: int
    num_samples: int
    duration: int
    duration_sec: float


class SamplesResponse(BaseModel):
    offset: int
    count: int
    remaining: int
    samples: list[int]
