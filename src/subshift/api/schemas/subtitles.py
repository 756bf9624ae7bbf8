# src/subshift/api/schemas/subtitles.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from subshift.core.shift import ShiftMode
from subshift.core.subtitle.models import SubtitleCue
from subshift.core.timestamps import format_timestamp


class ErrorBody(BaseModel):
    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)
    request_id: str = ""


class ErrorResponse(BaseModel):
    error: ErrorBody


class CueIn(BaseModel):
    """
    Cue as sent back by the client. start_ms/end_ms are authoritative;
    formatted start/end strings are accepted and ignored.
    """

    index: int = Field(..., ge=1)
    start_ms: int = Field(..., ge=0)
    end_ms: int = Field(..., ge=0)
    text: str = ""
    start: Optional[str] = None
    end: Optional[str] = None

    def to_cue(self) -> SubtitleCue:
        return SubtitleCue(index=self.index, start_ms=self.start_ms, end_ms=self.end_ms, text=self.text)


class CueOut(BaseModel):
    index: int
    start: str
    end: str
    start_ms: int
    end_ms: int
    text: str

    @classmethod
    def from_cue(cls, cue: SubtitleCue) -> "CueOut":
        return cls(
            index=cue.index,
            start=format_timestamp(cue.start_ms),
            end=format_timestamp(cue.end_ms),
            start_ms=cue.start_ms,
            end_ms=cue.end_ms,
            text=cue.text,
        )


class Duration(BaseModel):
    start: str
    end: str
    start_ms: int
    end_ms: int


class UploadResponse(BaseModel):
    success: bool = True
    filename: Optional[str] = None
    cue_count: int
    duration: Duration
    cues: List[CueOut]


class ShiftRequest(BaseModel):
    cues: List[CueIn] = Field(..., min_length=1, description="Cues as returned by /upload or a previous /shift")
    offset_ms: int = Field(..., description="Positive delays cues, negative advances them")
    mode: ShiftMode = Field(ShiftMode.FULL, description="full: every cue; partial: cues starting inside the window")
    start_time: Optional[str] = Field(None, description="Window start (partial mode), e.g. 00:01:30,000 or 1:30")
    end_time: Optional[str] = Field(None, description="Window end (partial mode)")

    def to_cues(self) -> List[SubtitleCue]:
        return [c.to_cue() for c in self.cues]


class ShiftResponse(BaseModel):
    success: bool = True
    offset_ms: int
    mode: ShiftMode
    cues: List[CueOut]


class DownloadRequest(BaseModel):
    cues: List[CueIn] = Field(..., min_length=1)
    filename: Optional[str] = Field(None, description="Original file name; used to derive the download name")

    def to_cues(self) -> List[SubtitleCue]:
        return [c.to_cue() for c in self.cues]
