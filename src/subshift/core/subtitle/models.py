from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class SubtitleCue:
    """
    A single subtitle cue.

    Notes:
    - index is 1-based parse order, not the number written in the file.
    - start_ms/end_ms are absolute timeline times in milliseconds.
    - text preserves line breaks with '\n' and is never rewritten here.
    - No validation on construction: input timings are trusted as decoded,
      the shift engine is responsible for restoring end_ms >= start_ms.
    """
    index: int
    start_ms: int
    end_ms: int
    text: str

    @property
    def lines(self) -> List[str]:
        return self.text.split("\n")

    def with_times(self, start_ms: Optional[int] = None, end_ms: Optional[int] = None) -> "SubtitleCue":
        return SubtitleCue(
            index=self.index,
            start_ms=self.start_ms if start_ms is None else start_ms,
            end_ms=self.end_ms if end_ms is None else end_ms,
            text=self.text,
        )


@dataclass(frozen=True)
class SubtitleDoc:
    cues: Tuple[SubtitleCue, ...] = field(default_factory=tuple)
    source_path: Optional[str] = None  # optional, for trace/debug

    def __iter__(self) -> Iterator[SubtitleCue]:
        return iter(self.cues)

    @property
    def total_cues(self) -> int:
        return len(self.cues)

    @property
    def first_start_ms(self) -> Optional[int]:
        return self.cues[0].start_ms if self.cues else None

    @property
    def last_end_ms(self) -> Optional[int]:
        return self.cues[-1].end_ms if self.cues else None
