"""HTTP endpoints for inspecting uploaded WAV files."""

from __future__ import annotations

import io
import logging
from itertools import islice

from fastapi import FastAPI, HTTPException, Query, Request

from wav_stream.api.schemas import InspectResponse, SamplesResponse
from wav_stream.audio.reader import WavReader
from wav_stream.audio.sample import SampleType
from wav_stream.errors import DecodeError, FormatError, ShortReadError, UnsupportedError
from wav_stream.settings import ServiceSettings

logger = logging.getLogger(__name__)


def create_app(settings: ServiceSettings | None = None) -> FastAPI:
    app = FastAPI(title="wav-stream API", version="0.1.0")
    config = settings or ServiceSettings.from_env()
    logging.getLogger("wav_stream").setLevel(config.log_level)

    async def _open_body(request: Request) -> WavReader:
        body = await request.body()
        if len(body) > config.max_body_bytes:
            raise HTTPException(status_code=413, detail=f"body exceeds {config.max_body_bytes} bytes")
        try:
            return WavReader(io.BytesIO(body))
        except (FormatError, ShortReadError) as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except UnsupportedError as exc:
            raise HTTPException(status_code=415, detail=str(exc)) from exc

    @app.get("/")
    def root() -> dict[str, str]:
        return {
            "service": "wav-stream API",
            "status": "ok",
            "docs": "/docs",
        }

    @app.post("/v1/wav/inspect", response_model=InspectResponse)
    async def inspect_wav(request: Request) -> InspectResponse:
        reader = await _open_body(request)
        spec = reader.spec
        return InspectResponse(
            channels=spec.channels,
            sample_rate=spec.sample_rate,
            bits_per_sample=spec.bits_per_sample,
            bytes_per_sample=reader.bytes_per_sample,
            num_samples=reader.len(),
            duration=reader.duration(),
            duration_sec=reader.duration() / spec.sample_rate if spec.sample_rate else 0.0,
        )

    @app.post("/v1/wav/samples", response_model=SamplesResponse)
    async def read_samples(
        request: Request,
        offset: int = Query(default=0, ge=0),
        limit: int | None = Query(default=None, ge=1),
    ) -> SamplesResponse:
        reader = await _open_body(request)
        count = min(limit or config.max_preview_samples, config.max_preview_samples)
        try:
            with reader.samples(SampleType.I32) as sequence:
                for _ in islice(sequence, offset):
                    pass
                samples = list(islice(sequence, count))
        except DecodeError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except ShortReadError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        logger.debug("served %d samples from offset %d", len(samples), offset)
        return SamplesResponse(
            offset=offset,
            count=len(samples),
            remaining=reader.remaining(),
            samples=samples,
        )

    return app


app = create_app()
