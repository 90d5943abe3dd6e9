"""Unit tests for INDEX timestamp parsing and IndexPoint."""

from __future__ import annotations

from datetime import timedelta

import pytest

from cuekit.cue.models import CD_SAMPLES_PER_FRAME, IndexPoint
from cuekit.cue.timestamp import parse_timestamp
from cuekit.exceptions import TimestampFormatError


def test_parse_zero() -> None:
    assert parse_timestamp("00:00:00") == IndexPoint(timedelta(0), 0)


def test_parse_minutes_seconds_frames() -> None:
    point = parse_timestamp("07:22:50")
    assert point.timestamp == timedelta(minutes=7, seconds=22)
    assert point.frame == 50


def test_frame_kept_verbatim() -> None:
    assert parse_timestamp("00:00:99").frame == 99


def test_seconds_not_clamped() -> None:
    assert parse_timestamp("01:75:00").timestamp == timedelta(seconds=135)


@pytest.mark.parametrize(
    "token",
    ["0:00:00", "000:00:00", "00:00", "00:00:00:00", "00.00.00", "aa:bb:cc", "", "+1:00:00", "00:00:0"],
)
def test_invalid_format(token: str) -> None:
    with pytest.raises(TimestampFormatError) as exc_info:
        parse_timestamp(token)
    assert exc_info.value.token == token
    assert "expected MM:SS:FF" in str(exc_info.value)


def test_non_ascii_digits_rejected() -> None:
    with pytest.raises(TimestampFormatError):
        parse_timestamp("\u0660\u0660:\u0660\u0660:\u0660\u0660")


def test_str_round_trips_format() -> None:
    assert str(parse_timestamp("03:45:07")) == "03:45:07"


def test_ordering_by_timestamp_then_frame() -> None:
    a = parse_timestamp("00:01:10")
    b = parse_timestamp("00:01:11")
    c = parse_timestamp("00:02:00")
    assert a < b < c
    assert not a < parse_timestamp("00:01:10")


def test_sample_position() -> None:
    """07:22:50 = 442 seconds + 50 frames."""
    point = parse_timestamp("07:22:50")
    assert point.total_frames == 442 * 75 + 50
    assert point.samples == 442 * 44100 + 50 * CD_SAMPLES_PER_FRAME
