from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from apus_wall.phase import (
    COUNTDOWN_MINUTES,
    COUNTDOWN_NOW,
    COUNTDOWN_ONE_MINUTE,
    DisplayPhase,
    RoomStyle,
    classify_phase,
    end_of_minute,
    format_local_time,
    minutes_left,
)

ZURICH = ZoneInfo("Europe/Zurich")
NOW = datetime(2024, 5, 14, 10, 15, 20, tzinfo=ZURICH)


def _running(end: datetime) -> DisplayPhase:
    start = datetime(2024, 5, 14, 10, 0, tzinfo=ZURICH)
    return classify_phase(NOW, start, end, ZURICH)


def test_end_of_minute_moves_to_last_second():
    moved = end_of_minute(NOW)
    assert (moved.hour, moved.minute, moved.second) == (10, 15, 59)
    assert moved.microsecond == 999


def test_missing_start_or_end_is_empty():
    end = datetime(2024, 5, 14, 11, 0, tzinfo=ZURICH)
    assert classify_phase(NOW, None, end, ZURICH).style is RoomStyle.EMPTY
    assert classify_phase(NOW, end, None, ZURICH).style is RoomStyle.EMPTY
    assert classify_phase(NOW, None, None, ZURICH).style is RoomStyle.EMPTY


def test_future_session_is_next_with_local_range():
    start = datetime(2024, 5, 14, 8, 30, tzinfo=timezone.utc)
    end = datetime(2024, 5, 14, 9, 15, tzinfo=timezone.utc)
    phase = classify_phase(NOW, start, end, ZURICH)
    assert phase.style is RoomStyle.NEXT
    assert phase.time_range == "10:30 - 11:15"
    assert phase.minutes_left is None


def test_session_starting_later_this_minute_is_running():
    start = datetime(2024, 5, 14, 10, 15, 45, tzinfo=ZURICH)
    end = datetime(2024, 5, 14, 11, 0, tzinfo=ZURICH)
    assert classify_phase(NOW, start, end, ZURICH).style is RoomStyle.RUNNING


def test_session_ending_now_shows_ending_now():
    phase = _running(end_of_minute(NOW))
    assert phase.style is RoomStyle.RUNNING
    assert phase.minutes_left == 0
    assert phase.countdown_message() == (COUNTDOWN_NOW, ())
    assert _running(NOW).countdown_message() == (COUNTDOWN_NOW, ())


def test_less_than_half_a_minute_left_shows_ending_now():
    assert _running(datetime(2024, 5, 14, 10, 16, tzinfo=ZURICH)).minutes_left == 0
    assert _running(datetime(2024, 5, 14, 10, 16, 29, tzinfo=ZURICH)).minutes_left == 0


def test_one_minute_left_is_singular():
    phase = _running(datetime(2024, 5, 14, 10, 17, tzinfo=ZURICH))
    assert phase.minutes_left == 1
    assert phase.countdown_message() == (COUNTDOWN_ONE_MINUTE, ())


def test_half_minute_rounds_up():
    phase = _running(datetime(2024, 5, 14, 10, 16, 30, tzinfo=ZURICH))
    assert phase.minutes_left == 1


def test_three_minutes_left_is_plural():
    phase = _running(datetime(2024, 5, 14, 10, 19, tzinfo=ZURICH))
    assert phase.minutes_left == 3
    assert phase.countdown_message() == (COUNTDOWN_MINUTES, (3,))


def test_session_already_over_shows_ending_now():
    phase = _running(datetime(2024, 5, 14, 10, 5, tzinfo=ZURICH))
    assert phase.minutes_left < 0
    assert phase.countdown_message() == (COUNTDOWN_NOW, ())


def test_minutes_left_rounds_half_up():
    start = datetime(2024, 5, 14, 10, 0, tzinfo=ZURICH)
    assert minutes_left(start, start + timedelta(seconds=90)) == 2
    assert minutes_left(start, start + timedelta(seconds=150)) == 3
    assert minutes_left(start, start + timedelta(seconds=89)) == 1


def test_countdown_message_requires_running_phase():
    with pytest.raises(ValueError):
        DisplayPhase(RoomStyle.EMPTY).countdown_message()


def test_format_local_time_keeps_seconds_when_present():
    value = datetime(2024, 5, 14, 8, 30, 15, tzinfo=timezone.utc)
    assert format_local_time(value, ZURICH) == "10:30:15"


def test_room_style_css_classes():
    assert RoomStyle.NONE.css_style == ""
    assert RoomStyle.RUNNING.css_style == "running-session"


def test_session_starting_next_minute_is_next():
    start = datetime(2024, 5, 14, 10, 16, tzinfo=ZURICH)
    end = datetime(2024, 5, 14, 11, 0, tzinfo=ZURICH)
    phase = classify_phase(NOW, start, end, ZURICH)
    assert phase.style is RoomStyle.NEXT
    assert phase.time_range == "10:16 - 11:00"


def test_format_local_time_keeps_fractional_seconds():
    half = datetime(2024, 5, 14, 8, 30, 0, 500000, tzinfo=timezone.utc)
    odd = datetime(2024, 5, 14, 8, 30, 0, 123456, tzinfo=timezone.utc)
    assert format_local_time(half, ZURICH) == "10:30:00.500"
    assert format_local_time(odd, ZURICH) == "10:30:00.123456"
    assert format_local_time(half.replace(microsecond=0), ZURICH) == "10:30"
