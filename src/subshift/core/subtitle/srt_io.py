from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Iterable, List

import srt

from .models import SubtitleCue, SubtitleDoc

_ONE_MS = timedelta(milliseconds=1)


def _td_to_ms(td: timedelta) -> int:
    return td // _ONE_MS


def _ms_to_td(ms: int) -> timedelta:
    return timedelta(milliseconds=ms)


def decode(raw: str, *, source_path: str | None = None) -> SubtitleDoc:
    """
    Decode SubRip text into a SubtitleDoc.

    - Strips a leading BOM.
    - Blocks the library cannot tokenize are skipped, not raised.
    - Only Subtitle nodes are kept; they are re-numbered from 1 in file order.
    - An empty doc is a valid result here; callers decide whether it is an error.
    """
    raw = (raw or "").lstrip("\ufeff")

    cues: List[SubtitleCue] = []
    for node in srt.parse(raw, ignore_errors=True):
        if not isinstance(node, srt.Subtitle):
            continue
        cues.append(
            SubtitleCue(
                index=len(cues) + 1,
                start_ms=_td_to_ms(node.start),
                end_ms=_td_to_ms(node.end),
                text=node.content,
            )
        )

    return SubtitleDoc(cues=tuple(cues), source_path=source_path)


def encode(cues: Iterable[SubtitleCue]) -> str:
    """
    Encode cues into SubRip text.

    Cues are numbered by position. reindex=False keeps srt.compose from
    sorting the cues or dropping zero-length ones.
    Blank lines inside a cue's text are collapsed (SubRip uses them as the
    block separator), so "a\\n\\nb" is written as "a\\nb".
    """
    nodes = [
        srt.Subtitle(
            index=i,
            start=_ms_to_td(cue.start_ms),
            end=_ms_to_td(cue.end_ms),
            content=cue.text,
        )
        for i, cue in enumerate(cues, start=1)
    ]
    return srt.compose(nodes, reindex=False)


def read_srt(path: str | Path, encoding: str = "utf-8") -> SubtitleDoc:
    p = Path(path)
    raw = p.read_text(encoding=encoding, errors="replace")
    return decode(raw, source_path=str(p))


def write_srt(doc: SubtitleDoc | Iterable[SubtitleCue], path: str | Path, encoding: str = "utf-8") -> Path:
    """
    Write cues into a .srt file.

    - Re-numbers cues from 1.
    - Writes normalized timecodes.
    """
    p = Path(path)
    content = encode(doc)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding=encoding)
    return p
