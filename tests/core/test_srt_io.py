from pathlib import Path

from subshift.core.subtitle.models import SubtitleCue
from subshift.core.subtitle.srt_io import decode, encode, read_srt, write_srt
from tests._helpers import SAMPLE_SRT


def _timings(doc):
    return [(c.start_ms, c.end_ms, c.text) for c in doc.cues]


def test_decode_assigns_fresh_indices_and_keeps_text_lines() -> None:
    raw = (
        "7\n00:00:01,000 --> 00:00:02,000\nHello\n\n"
        "42\n00:00:03,500 --> 00:00:04,000\nWorld\nagain\n\n"
    )

    doc = decode(raw)

    assert doc.total_cues == 2
    assert [c.index for c in doc.cues] == [1, 2]
    assert doc.cues[0].start_ms == 1000
    assert doc.cues[1].start_ms == 3500
    assert doc.cues[1].end_ms == 4000
    assert doc.cues[1].lines == ["World", "again"]
    assert doc.first_start_ms == 1000
    assert doc.last_end_ms == 4000


def test_decode_strips_bom_and_handles_crlf() -> None:
    raw = "\ufeff1\r\n00:00:01,000 --> 00:00:02,000\r\nHello\r\n\r\n"

    doc = decode(raw)

    assert doc.total_cues == 1
    assert doc.cues[0].text == "Hello"


def test_decode_without_cues_returns_empty_doc() -> None:
    assert decode("").total_cues == 0
    assert decode("just some words\nnothing else\n").total_cues == 0
    assert decode("").first_start_ms is None


def test_encode_numbers_by_position_and_keeps_order() -> None:
    cues = [
        SubtitleCue(index=9, start_ms=5000, end_ms=6000, text="later"),
        SubtitleCue(index=3, start_ms=1000, end_ms=2000, text="earlier"),
    ]

    out = encode(cues)

    assert out == (
        "1\n00:00:05,000 --> 00:00:06,000\nlater\n\n"
        "2\n00:00:01,000 --> 00:00:02,000\nearlier\n\n"
    )


def test_encode_keeps_zero_length_cues() -> None:
    cues = [SubtitleCue(index=1, start_ms=0, end_ms=0, text="clamped")]

    out = encode(cues)

    assert out.startswith("1\n00:00:00,000 --> 00:00:00,000\nclamped\n")
    assert decode(out).total_cues == 1


def test_roundtrip_is_stable() -> None:
    once = decode(encode(decode(SAMPLE_SRT)))
    twice = decode(encode(decode(encode(decode(SAMPLE_SRT)))))

    assert _timings(once) == _timings(decode(SAMPLE_SRT))
    assert _timings(twice) == _timings(once)


def test_srt_file_roundtrip(tmp_path: Path) -> None:
    src = tmp_path / "in.srt"
    src.write_text(
        "1\n00:00:00,000 --> 00:00:01,000\nHello\n\n"
        "2\n00:00:01,000 --> 00:00:02,000\nWorld\n\n",
        encoding="utf-8",
    )

    doc = read_srt(src)
    assert doc.total_cues == 2
    assert doc.source_path == str(src)

    out = write_srt(doc, tmp_path / "nested" / "out.srt")

    doc2 = read_srt(out)
    assert _timings(doc2) == [(0, 1000, "Hello"), (1000, 2000, "World")]


def test_encode_collapses_blank_lines_inside_cue_text() -> None:
    # SubRip has no way to express an empty line inside a cue; it ends the block.
    cues = [SubtitleCue(index=1, start_ms=1000, end_ms=2000, text="a\n\nb")]

    out = encode(cues)

    assert out == "1\n00:00:01,000 --> 00:00:02,000\na\nb\n\n"
    assert decode(out).cues[0].text == "a\nb"
