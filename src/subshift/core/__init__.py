from subshift.core.errors import EmptySubtitleError, InvalidWindowError, SubshiftError
from subshift.core.operations import (
    DecodeResult,
    decode_subtitles,
    encode_subtitles,
    read_subtitles,
    shift_subtitles,
    suggest_output_filename,
)
from subshift.core.shift import ShiftMode, ShiftWindow, shift_cues
from subshift.core.subtitle.models import SubtitleCue, SubtitleDoc
from subshift.core.timestamps import format_timestamp, parse_timestamp

__all__ = [
    "DecodeResult",
    "EmptySubtitleError",
    "InvalidWindowError",
    "ShiftMode",
    "ShiftWindow",
    "SubshiftError",
    "SubtitleCue",
    "SubtitleDoc",
    "decode_subtitles",
    "encode_subtitles",
    "format_timestamp",
    "parse_timestamp",
    "read_subtitles",
    "shift_cues",
    "shift_subtitles",
    "suggest_output_filename",
]
