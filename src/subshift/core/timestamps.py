from __future__ import annotations

import re
from typing import Any

# First match wins; order is most to least specific.
# re.ASCII: only 0-9 count as digits, not other Unicode Nd characters.
_FULL_RE = re.compile(r"^(\d{1,2}):(\d{2}):(\d{2})[,.](\d{3})$", re.ASCII)
_HMS_RE = re.compile(r"^(\d{1,2}):(\d{2}):(\d{2})$", re.ASCII)
_MS_RE = re.compile(r"^(\d{1,2}):(\d{2})$", re.ASCII)
_SECONDS_RE = re.compile(r"^(\d+)$", re.ASCII)


def _tc_to_ms(h: int, m: int, s: int, ms: int = 0) -> int:
    return (((h * 60) + m) * 60 + s) * 1000 + ms


def parse_timestamp(value: Any) -> int:
    """
    Parse a user-entered clock string into milliseconds.

    Accepted forms: "H:MM:SS,mmm", "H:MM:SS.mmm", "H:MM:SS", "M:SS" and a bare
    integer number of seconds.

    Lenient on purpose: anything unrecognised (None, "", non-str, garbage)
    yields 0 instead of raising.
    """
    if not value or not isinstance(value, str):
        return 0

    s = value.strip()

    m = _FULL_RE.match(s)
    if m:
        return _tc_to_ms(int(m.group(1)), int(m.group(2)), int(m.group(3)), int(m.group(4)))

    m = _HMS_RE.match(s)
    if m:
        return _tc_to_ms(int(m.group(1)), int(m.group(2)), int(m.group(3)))

    m = _MS_RE.match(s)
    if m:
        return _tc_to_ms(0, int(m.group(1)), int(m.group(2)))

    m = _SECONDS_RE.match(s)
    if m:
        return int(m.group(1)) * 1000

    return 0


def format_timestamp(ms: int) -> str:
    # SRT timestamp: HH:MM:SS,mmm (hours are not wrapped at 24)
    total_s, milli = divmod(int(ms), 1000)
    total_m, sec = divmod(total_s, 60)
    hour, minute = divmod(total_m, 60)
    return f"{hour:02d}:{minute:02d}:{sec:02d},{milli:03d}"
