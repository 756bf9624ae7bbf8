# src/subshift/api/services/subtitles_service.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from subshift.api.metrics import inc_cues_shifted, inc_file_decoded, inc_file_encoded
from subshift.core.errors import EmptySubtitleError
from subshift.core.operations import (
    decode_subtitles,
    encode_subtitles,
    shift_subtitles,
    suggest_output_filename,
)
from subshift.core.shift import ShiftMode
from subshift.core.subtitle.models import SubtitleCue
from subshift.core.timestamps import format_timestamp
from subshift.utils.logger import get_logger

logger = get_logger("subshift.api")


@dataclass(frozen=True)
class RenderedSubtitle:
    content: str
    filename: str


def _cue_json(cue: SubtitleCue) -> Dict[str, Any]:
    return {
        "index": cue.index,
        "start": format_timestamp(cue.start_ms),
        "end": format_timestamp(cue.end_ms),
        "start_ms": cue.start_ms,
        "end_ms": cue.end_ms,
        "text": cue.text,
    }


def decode_bytes(data: bytes) -> str:
    # utf-8-sig drops a BOM; undecodable bytes become U+FFFD instead of failing
    return data.decode("utf-8-sig", errors="replace")


def load_subtitles(*, data: bytes, filename: Optional[str]) -> Dict[str, Any]:
    """
    Decode an uploaded file into the /upload response payload.

    Raises EmptySubtitleError (left for the error handler) when no cue is found.
    """
    try:
        res = decode_subtitles(decode_bytes(data))
    except EmptySubtitleError:
        inc_file_decoded("empty")
        logger.info(f"UPLOAD_EMPTY filename={filename!r} bytes={len(data)}")
        raise

    inc_file_decoded("ok")
    logger.info(f"UPLOAD_OK filename={filename!r} bytes={len(data)} cues={res.cue_count}")

    return {
        "success": True,
        "filename": filename,
        "cue_count": res.cue_count,
        "duration": {
            "start": format_timestamp(res.first_start_ms),
            "end": format_timestamp(res.last_end_ms),
            "start_ms": res.first_start_ms,
            "end_ms": res.last_end_ms,
        },
        "cues": [_cue_json(c) for c in res.cues],
    }


def shift_payload(
    *,
    cues: Iterable[SubtitleCue],
    offset_ms: int,
    mode: ShiftMode,
    start_time: Optional[str] = None,
    end_time: Optional[str] = None,
) -> Dict[str, Any]:
    shifted = shift_subtitles(cues, offset_ms, mode, start_time, end_time)

    inc_cues_shifted(mode.value, len(shifted))
    logger.info(f"SHIFT_OK mode={mode.value} offset_ms={offset_ms} cues={len(shifted)}")

    return {
        "success": True,
        "offset_ms": offset_ms,
        "mode": mode,
        "cues": [_cue_json(c) for c in shifted],
    }


def render_download(*, cues: Iterable[SubtitleCue], filename: Optional[str]) -> RenderedSubtitle:
    content = encode_subtitles(cues)
    out_name = suggest_output_filename(filename)

    inc_file_encoded()
    logger.info(f"DOWNLOAD_OK filename={out_name!r} chars={len(content)}")
    return RenderedSubtitle(content=content, filename=out_name)
