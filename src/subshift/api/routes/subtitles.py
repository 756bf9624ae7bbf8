# src/subshift/api/routes/subtitles.py
from __future__ import annotations

from pathlib import PurePath
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, File, UploadFile
from fastapi.responses import Response

from subshift.api.config import load_config
from subshift.api.errors import InvalidUploadError, UploadTooLargeError
from subshift.api.schemas.subtitles import (
    DownloadRequest,
    ErrorResponse,
    ShiftRequest,
    ShiftResponse,
    UploadResponse,
)
from subshift.api.services.subtitles_service import (
    load_subtitles,
    render_download,
    shift_payload,
)

router = APIRouter(prefix="/api", tags=["subtitles"])

SRT_MEDIA_TYPE = "application/x-subrip"

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    413: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _check_extension(filename: Optional[str], allowed: list[str]) -> None:
    suffix = PurePath(filename or "").suffix.lower()
    if suffix not in allowed:
        raise InvalidUploadError(
            "Please upload an SRT file (.srt)",
            details={"filename": filename, "allowed_extensions": allowed},
        )


def _human_size(n: int) -> str:
    mb = 1024 * 1024
    return f"{n // mb}MB" if n >= mb else f"{n} bytes"


def _content_disposition(filename: str) -> str:
    # Plain filename= for old clients (ASCII only), filename*= carries the real name.
    ascii_name = filename.encode("ascii", "replace").decode("ascii").replace('"', "_")
    return f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename)}"


@router.post("/upload", response_model=UploadResponse, responses=_ERROR_RESPONSES)
def upload(file: Optional[UploadFile] = File(None)) -> UploadResponse:
    cfg = load_config()

    if file is None or not file.filename:
        raise InvalidUploadError("Please select an SRT file to upload", details={"field": "file"})

    _check_extension(file.filename, cfg.allowed_extensions)

    # Read one byte past the limit so oversize uploads are detected without buffering them whole.
    data = file.file.read(cfg.max_upload_bytes + 1)
    if len(data) > cfg.max_upload_bytes:
        raise UploadTooLargeError(
            f"File size must be less than {_human_size(cfg.max_upload_bytes)}",
            details={"max_upload_bytes": cfg.max_upload_bytes},
        )

    res = load_subtitles(data=data, filename=file.filename)
    return UploadResponse(**res)


@router.post("/shift", response_model=ShiftResponse, responses=_ERROR_RESPONSES)
def shift(req: ShiftRequest) -> ShiftResponse:
    res = shift_payload(
        cues=req.to_cues(),
        offset_ms=req.offset_ms,
        mode=req.mode,
        start_time=req.start_time,
        end_time=req.end_time,
    )
    return ShiftResponse(**res)


@router.post(
    "/download",
    response_class=Response,
    responses={**_ERROR_RESPONSES, 200: {"content": {SRT_MEDIA_TYPE: {}}}},
)
def download(req: DownloadRequest) -> Response:
    rendered = render_download(cues=req.to_cues(), filename=req.filename)
    return Response(
        content=rendered.content,
        media_type=SRT_MEDIA_TYPE,
        headers={"Content-Disposition": _content_disposition(rendered.filename)},
    )
