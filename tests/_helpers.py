# tests/_helpers.py
from __future__ import annotations

from typing import List, Sequence, Tuple

from subshift.core.subtitle.models import SubtitleCue

SAMPLE_SRT = (
    "1\n00:00:01,000 --> 00:00:04,000\nHello there.\n\n"
    "2\n00:00:20,000 --> 00:00:22,500\nTwo lines\nof text\n\n"
    "3\n00:00:50,000 --> 00:00:53,250\nGoodbye.\n\n"
)


def make_cues(spans: Sequence[Tuple[int, int]], text: str = "line") -> List[SubtitleCue]:
    return [
        SubtitleCue(index=i, start_ms=s, end_ms=e, text=f"{text} {i}")
        for i, (s, e) in enumerate(spans, start=1)
    ]
