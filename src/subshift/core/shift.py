from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from subshift.core.subtitle.models import SubtitleCue


class ShiftMode(str, Enum):
    FULL = "full"
    PARTIAL = "partial"


@dataclass(frozen=True)
class ShiftWindow:
    """
    Inclusive [start_ms, end_ms] range matched against a cue's start time.

    Not validated: an inverted window is legal and simply matches no cue.
    """
    start_ms: int
    end_ms: int

    def contains(self, ms: int) -> bool:
        return self.start_ms <= ms <= self.end_ms


def shift_cue(cue: SubtitleCue, offset_ms: int) -> SubtitleCue:
    # Clamp both ends at 0, then force end_ms >= start_ms.
    new_start = max(0, cue.start_ms + offset_ms)
    new_end = max(new_start, max(0, cue.end_ms + offset_ms))
    return cue.with_times(start_ms=new_start, end_ms=new_end)


def shift_cues(
    cues: Iterable[SubtitleCue],
    offset_ms: int,
    window: Optional[ShiftWindow] = None,
) -> Tuple[SubtitleCue, ...]:
    """
    Shift cues by offset_ms (positive = later, negative = earlier).

    - window is None: every cue is shifted.
    - window given: only cues whose pre-shift start_ms lies in the window.
    Order and index are preserved; the input is never mutated.
    """
    out = []
    for cue in cues:
        if window is None or window.contains(cue.start_ms):
            out.append(shift_cue(cue, offset_ms))
        else:
            out.append(cue.with_times())
    return tuple(out)
