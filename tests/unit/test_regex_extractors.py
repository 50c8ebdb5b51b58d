"""Individual extraction rules."""

import pytest

from quicklog.parsing.regex_extractors import (
    OVERSIZED_DURATION_SECONDS,
    extract_description,
    extract_duration,
    extract_issue_key,
    extract_start_time,
)


def test_extract_issue_key_uppercases():
    assert extract_issue_key("worked on proj2-77 today") == "PROJ2-77"
    assert extract_issue_key("nothing here") is None
    assert extract_issue_key("1AB-3") is None


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("2h30m", 9000),
        ("1.5h", 5400),
        ("2 hours", 7200),
        ("45m", 2700),
        ("20 minutes", 1200),
        ("1h 15min", 4500),
        ("0.25h", 900),
    ],
)
def test_extract_duration_shapes(text, expected):
    assert extract_duration(f"ABC-1 {text}") == expected


def test_extract_duration_ignores_issue_key_digits():
    assert extract_duration("ABC-15 review") is None


def test_extract_duration_ignores_at_time():
    assert extract_duration("ABC-1 @ 9 meeting") is None
    assert extract_duration("ABC-1 30m @ 9am") == 1800


def test_extract_duration_prefers_combined_over_hours():
    assert extract_duration("3h5m and 10m") == 3 * 3600 + 5 * 60


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("@ 9am", "09:00:00"),
        ("@9:45 pm", "21:45:00"),
        ("@ 12am", "00:00:00"),
        ("@ 12pm", "12:00:00"),
        ("@ 14:30", "14:30:00"),
        ("@ 7", "07:00:00"),
        ("@ 24:00", None),
        ("@ 9:75", None),
        ("no time", None),
    ],
)
def test_extract_start_time(text, expected):
    assert extract_start_time(text) == expected


def test_extract_description_strips_recognized_tokens():
    assert extract_description("ABC-123 2h30m @ 14:00 team meeting") == "team meeting"
    assert extract_description("ABC-1 45m: retro") == "retro"
    assert extract_description("ABC-1 45m") == ""


def test_duration_too_large_to_convert_reads_as_oversized():
    assert extract_duration("1" + "0" * 400 + "h") == OVERSIZED_DURATION_SECONDS
    assert extract_duration("7" * 4500 + "m") >= OVERSIZED_DURATION_SECONDS
