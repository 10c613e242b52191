"""
Route registration for the frame counter API.

Responsibilities:
- Define HTTP endpoints
- Stream multipart uploads, stopping as soon as the size cap is passed
- Run the frame scan off the event loop
- Map failures to JSON error responses
- Pull dependencies from app.state
"""

from __future__ import annotations

import uuid
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from streaming_form_data import StreamingFormDataParser
from streaming_form_data.parser import ParseFailedException
from streaming_form_data.targets import ValueTarget
from streaming_form_data.validators import MaxSizeValidator, ValidationError

from config import AppConfig
from constants import UPLOAD_FIELD_NAME, UPLOAD_FORM_OVERHEAD_BYTES
from mp3.counter import inspect_mp3
from mp3.errors import FrameCounterError
from observability.logger import EventLog
from observability.metrics import timed


NO_FILE_MESSAGE = "No file uploaded. Use 'file' field in form-data."


class UploadError(Exception):
    """Raised when an upload cannot be read (over the size cap, malformed body)."""


def register_routes(app: FastAPI) -> None:
    """Register all routes and error handlers on the FastAPI app."""
    @app.get("/health")
    async def health() -> dict[str, str]: # pyright: ignore[reportUnusedFunction]
        return {"status": "ok"}

    @app.post("/file-upload")
    async def file_upload(request: Request) -> JSONResponse: # pyright: ignore[reportUnusedFunction]
        config: AppConfig = app.state.config
        event_log: EventLog = app.state.event_log

        upload = await _read_upload(request, max_bytes=config.max_upload_bytes)
        if upload is None:
            return JSONResponse(status_code=400, content={"error": NO_FILE_MESSAGE})

        data = upload.value
        request_id = uuid.uuid4().hex[:12]

        with timed(
            "mp3_frame_count",
            request_id=request_id,
            details={"size_bytes": len(data)},
            sink=event_log.emit,
        ):
            # CPU-bound byte scan; keep the event loop free for other requests
            report = await run_in_threadpool(inspect_mp3, data)

        event_log.emit({
            "event_type": "MP3_FRAMES_COUNTED",
            "request_id": request_id,
            "filename": upload.multipart_filename,
            "size_bytes": len(data),
            "frame_count": report.frame_count,
            "scanned_frame_count": report.scanned_frame_count,
            "audio_start_offset": report.audio_start_offset,
            "has_vbr_header": report.has_vbr_header,
        })

        return JSONResponse(content={"frameCount": report.frame_count})

    app.add_exception_handler(UploadError, _upload_error_handler)
    app.add_exception_handler(FrameCounterError, _frame_counter_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)


async def _read_upload(request: Request, *, max_bytes: int) -> Optional[ValueTarget]:
    """
    Stream the request body through a multipart parser.

    Returns:
        The target holding the `file` part, or None when the body has no
        file part under that name (not multipart, absent, or a text field).

    Raises:
        UploadError as soon as the file part (or the whole body) passes the
        cap; the rest of the body is never read.
    """
    content_type = request.headers.get("content-type", "")
    if not content_type.startswith("multipart/form-data"):
        return None

    try:
        parser = StreamingFormDataParser(headers={"Content-Type": content_type})
    except ValueError as exc:
        raise UploadError("Malformed multipart body") from exc

    target = ValueTarget(validator=MaxSizeValidator(max_bytes))
    parser.register(UPLOAD_FIELD_NAME, target)

    body_limit = max_bytes + UPLOAD_FORM_OVERHEAD_BYTES
    received = 0

    try:
        async for chunk in request.stream():
            received += len(chunk)
            if received > body_limit:
                raise UploadError("File too large")
            parser.data_received(chunk)
    except ValidationError as exc:
        raise UploadError("File too large") from exc
    except ParseFailedException as exc:
        raise UploadError("Malformed multipart body") from exc

    if target.multipart_filename is None:
        return None

    return target


# ------------------------------------------------------------------
# Error handlers
# ------------------------------------------------------------------

def _event_log(request: Request) -> EventLog:
    return request.app.state.event_log


async def _upload_error_handler(request: Request, exc: Exception) -> JSONResponse:
    _event_log(request).emit({
        "event_type": "UPLOAD_REJECTED",
        "message": str(exc),
    })
    return JSONResponse(status_code=400, content={"error": f"Upload error: {exc}"})


async def _frame_counter_error_handler(request: Request, exc: Exception) -> JSONResponse:
    _event_log(request).emit({
        "event_type": "MP3_COUNT_REJECTED",
        "exception": type(exc).__name__,
        "message": str(exc),
    })
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    _event_log(request).emit({
        "event_type": "HTTP_UNHANDLED_ERROR",
        "exception": type(exc).__name__,
        "message": str(exc),
    })
    return JSONResponse(status_code=500, content={"error": "Internal server error"})
