"""Time phase classification for a room card."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from enum import Enum
from typing import Optional, Tuple

COUNTDOWN_NOW = "event.session.countdown.now"
COUNTDOWN_ONE_MINUTE = "event.session.countdown.one-minute"
COUNTDOWN_MINUTES = "event.session.countdown.minutes"


class RoomStyle(Enum):
    NONE = ""
    EMPTY = "empty-session"
    NEXT = "next-session"
    RUNNING = "running-session"

    @property
    def css_style(self) -> str:
        return self.value


@dataclass(frozen=True)
class DisplayPhase:
    style: RoomStyle
    time_range: Optional[str] = None
    minutes_left: Optional[int] = None

    def countdown_message(self) -> Tuple[str, tuple]:
        """Translation key and arguments for a running session's countdown."""
        if self.style is not RoomStyle.RUNNING or self.minutes_left is None:
            raise ValueError(f"No countdown for phase {self.style.name}")
        if self.minutes_left <= 0:
            return COUNTDOWN_NOW, ()
        if self.minutes_left == 1:
            return COUNTDOWN_ONE_MINUTE, ()
        return COUNTDOWN_MINUTES, (self.minutes_left,)


def end_of_minute(now: datetime) -> datetime:
    # Closest datetime equivalent of second 59, nanosecond 999.
    return now.replace(second=59, microsecond=999)


def seconds_between(start: datetime, end: datetime) -> int:
    return (end - start) // timedelta(seconds=1)


def minutes_left(now: datetime, end_time: datetime) -> int:
    """Whole minutes until end_time, rounded half up."""
    return math.floor(seconds_between(now, end_time) / 60 + 0.5)


def format_local_time(value: datetime, timezone: tzinfo) -> str:
    """Wall-clock time as ``HH:MM``, adding seconds and fractions only when set."""
    local = value.astimezone(timezone)
    if local.microsecond:
        fraction = f"{local.microsecond:06d}"
        if local.microsecond % 1000 == 0:
            fraction = fraction[:3]
        return f"{local:%H:%M:%S}.{fraction}"
    if local.second:
        return local.strftime("%H:%M:%S")
    return local.strftime("%H:%M")


def format_time_range(start_time: datetime, end_time: datetime, timezone: tzinfo) -> str:
    return f"{format_local_time(start_time, timezone)} - {format_local_time(end_time, timezone)}"


def classify_phase(
    now: datetime,
    start_time: Optional[datetime],
    end_time: Optional[datetime],
    timezone: tzinfo,
) -> DisplayPhase:
    """Classify a session relative to the current minute.

    ``now`` is moved to the last instant of its minute before comparing, so a
    session starting later in the current minute already counts as running.
    """
    now = end_of_minute(now)
    if start_time is None or end_time is None:
        return DisplayPhase(RoomStyle.EMPTY)
    if start_time > now:
        return DisplayPhase(
            RoomStyle.NEXT,
            time_range=format_time_range(start_time, end_time, timezone),
        )
    return DisplayPhase(RoomStyle.RUNNING, minutes_left=minutes_left(now, end_time))
