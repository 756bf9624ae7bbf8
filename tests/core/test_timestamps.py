import pytest

from subshift.core.timestamps import format_timestamp, parse_timestamp


@pytest.mark.parametrize(
    "text, expected",
    [
        ("01:02:03,456", 3_723_456),
        ("01:02:03.456", 3_723_456),
        ("1:02:03,456", 3_723_456),
        ("01:02:03", 3_723_000),
        ("1:30", 90_000),
        ("12:05", 725_000),
        ("90", 90_000),
        ("0", 0),
        ("  00:00:05,250  ", 5_250),
    ],
)
def test_parse_timestamp_accepted_forms(text: str, expected: int) -> None:
    assert parse_timestamp(text) == expected


def test_parse_then_format_canonical() -> None:
    ms = parse_timestamp("01:02:03,456")
    assert ms == 3723456
    assert format_timestamp(ms) == "01:02:03,456"


@pytest.mark.parametrize(
    "value",
    [
        "not a time",
        "",
        "   ",
        None,
        1500,
        "-5",
        "1:2:3",
        "01:02:03,45",
        "01:02:03,4567",
        "123:00:00",
        "00:00:01;000",
        "\u0661\u0662",
        "\uff11:\uff13\uff10",
        "00:01:\u0663\u0660,000",
    ],
)
def test_parse_timestamp_soft_fails_to_zero(value) -> None:
    # Documented leniency: unrecognised input is never an error, it means 0 ms.
    assert parse_timestamp(value) == 0


def test_format_timestamp_padding_and_unbounded_hours() -> None:
    assert format_timestamp(0) == "00:00:00,000"
    assert format_timestamp(7) == "00:00:00,007"
    assert format_timestamp(61_001) == "00:01:01,001"
    assert format_timestamp(25 * 3_600_000) == "25:00:00,000"
    assert format_timestamp(100 * 3_600_000 + 5) == "100:00:00,005"
