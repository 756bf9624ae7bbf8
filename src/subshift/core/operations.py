from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Iterable, Optional, Tuple, Union

from subshift.core.errors import EmptySubtitleError, InvalidWindowError
from subshift.core.shift import ShiftMode, ShiftWindow, shift_cues
from subshift.core.subtitle.models import SubtitleCue, SubtitleDoc
from subshift.core.subtitle.srt_io import decode, encode, read_srt
from subshift.core.timestamps import parse_timestamp
from subshift.utils.logger import get_logger

logger = get_logger("subshift.core")

DEFAULT_OUTPUT_FILENAME = "shifted-subtitles.srt"
SHIFTED_SUFFIX = "-shifted"


@dataclass(frozen=True)
class DecodeResult:
    cues: Tuple[SubtitleCue, ...]

    @property
    def cue_count(self) -> int:
        return len(self.cues)

    @property
    def first_start_ms(self) -> int:
        return self.cues[0].start_ms

    @property
    def last_end_ms(self) -> int:
        return self.cues[-1].end_ms


def decode_subtitles(raw_text: str) -> DecodeResult:
    """
    Parse SubRip text into cues.

    Raises EmptySubtitleError when no cue could be read; a DecodeResult always
    holds at least one cue.
    """
    return _require_cues(decode(raw_text))


def read_subtitles(path: Union[str, Path]) -> DecodeResult:
    """
    Read and decode a .srt file (UTF-8, optional BOM, bad bytes replaced).

    Same empty-file policy as decode_subtitles.
    """
    return _require_cues(read_srt(path, encoding="utf-8-sig"))


def _require_cues(doc: SubtitleDoc) -> DecodeResult:
    if not doc.cues:
        logger.info("DECODE_EMPTY source=%s", doc.source_path or "-")
        raise EmptySubtitleError()
    logger.debug("DECODE_DONE cues=%d source=%s", doc.total_cues, doc.source_path or "-")
    return DecodeResult(cues=doc.cues)


def shift_subtitles(
    cues: Iterable[SubtitleCue],
    offset_ms: int,
    mode: Union[ShiftMode, str] = ShiftMode.FULL,
    window_start: Optional[str] = None,
    window_end: Optional[str] = None,
) -> Tuple[SubtitleCue, ...]:
    """
    Shift cues by offset_ms.

    In partial mode the window bounds are raw user strings parsed with
    parse_timestamp (so garbage bounds become 0). A window whose start is
    after its end raises InvalidWindowError before anything is shifted.
    Window strings are ignored in full mode.
    """
    mode = ShiftMode(mode)

    window: Optional[ShiftWindow] = None
    if mode is ShiftMode.PARTIAL:
        start_ms = parse_timestamp(window_start)
        end_ms = parse_timestamp(window_end)
        if start_ms > end_ms:
            raise InvalidWindowError(start_ms, end_ms)
        window = ShiftWindow(start_ms=start_ms, end_ms=end_ms)

    out = shift_cues(cues, offset_ms, window)
    logger.debug(
        "SHIFT_DONE mode=%s offset_ms=%d cues=%d window=%s",
        mode.value,
        offset_ms,
        len(out),
        f"{window.start_ms}-{window.end_ms}" if window else "-",
    )
    return out


def encode_subtitles(cues: Iterable[SubtitleCue]) -> str:
    return encode(cues)


def suggest_output_filename(filename: Optional[str]) -> str:
    """
    Stable default naming for shifted output:
      movie.srt -> movie-shifted.srt
      movie     -> movie-shifted.srt
      (none)    -> shifted-subtitles.srt
    """
    if not filename or not filename.strip():
        return DEFAULT_OUTPUT_FILENAME

    # Uploaded names can carry client-side directories (either separator).
    name = PurePath(filename.replace("\\", "/")).name
    if not name:
        return DEFAULT_OUTPUT_FILENAME

    p = PurePath(name)
    suffix = p.suffix or ".srt"
    stem = p.stem if p.suffix else name
    return f"{stem}{SHIFTED_SUFFIX}{suffix}"
