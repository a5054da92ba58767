"""HTML room card for the social wall."""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from html import escape
from typing import List, Optional, Sequence, Union
from zoneinfo import ZoneInfo

from .i18n import Translator, load_translator
from .models import Language, Room, Session, Speaker, Track
from .phase import RoomStyle, classify_phase

logger = logging.getLogger(__name__)

NBSP = "<span>&nbsp;</span>"


def _icon(name: str) -> str:
    return f'<vaadin-icon icon="vaadin:{name}"></vaadin-icon>'


def _div(css_class: str, children: Sequence[str]) -> str:
    return f'<div class="{css_class}">{"".join(children)}</div>'


def _zone(timezone: Union[str, tzinfo]) -> tzinfo:
    if isinstance(timezone, str):
        return ZoneInfo(timezone)
    return timezone


class RoomView:
    """One room card: title, speakers, room, time and an image block.

    The time phase is computed once while the card is built and is available
    afterwards as ``room_style``.
    """

    def __init__(
        self,
        timezone: Union[str, tzinfo],
        room: Room,
        title: Optional[str] = None,
        speakers: Sequence[Speaker] = (),
        start_time: Optional[datetime] = None,
        end_time: Optional[datetime] = None,
        language: Optional[Language] = None,
        track: Optional[Track] = None,
        translator: Optional[Translator] = None,
        now: Optional[datetime] = None,
        locale: str = "en",
    ) -> None:
        self.timezone = _zone(timezone)
        self.room = room
        self.title = title
        self.speakers: List[Speaker] = list(speakers)
        self.start_time = start_time
        self.end_time = end_time
        self.language = language
        self.track = track
        self.translator = translator or load_translator(locale)
        if now is None:
            now = datetime.now(self.timezone)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=self.timezone)
        self._now = now
        self._room_style = RoomStyle.NONE

        children = [
            self._create_title(),
            self._create_speakers(),
            self._create_room(),
            self._create_time(),
            self._create_image(),
        ]
        classes = " ".join(c for c in ("room-view", self._room_style.css_style) if c)
        self._html = _div(classes, children)
        logger.debug("Room %s rendered as %s", room.room_id, self._room_style.name)

    @classmethod
    def for_room(cls, timezone: Union[str, tzinfo], room: Room, **kwargs) -> "RoomView":
        return cls(timezone, room, **kwargs)

    @classmethod
    def for_session(cls, timezone: Union[str, tzinfo], session: Session, **kwargs) -> "RoomView":
        return cls(
            timezone,
            session.room,
            title=session.title,
            speakers=session.speakers,
            start_time=session.start_date,
            end_time=session.end_date,
            language=session.language,
            track=session.track,
            **kwargs,
        )

    @property
    def room_style(self) -> RoomStyle:
        return self._room_style

    def render(self) -> str:
        return self._html

    def __html__(self) -> str:
        return self._html

    def __str__(self) -> str:
        return self._html

    def _create_title(self) -> str:
        text = self.title if self.title is not None else self.translator.get("event.room.empty")
        children = [f"<h3>{escape(text)}</h3>"]
        if self.language is not None:
            children.append(
                f'<img class="language" src="{escape(self.language.flag_file_name)}"'
                f' alt="{escape(self.language.language_code)}">'
            )
        return _div("title", children)

    def _create_speakers(self) -> str:
        if not self.speakers:
            return _div("speakers", [NBSP])
        joined = ", ".join(speaker.full_name for speaker in self.speakers)
        return _div("speakers", [_icon("user"), f"<span>{escape(joined)}</span>"])

    def _create_room(self) -> str:
        return _div("room", [_icon("location-arrow-circle"), escape(self.room.name)])

    def _create_time(self) -> str:
        phase = classify_phase(self._now, self.start_time, self.end_time, self.timezone)
        self._room_style = phase.style
        if phase.style is RoomStyle.EMPTY:
            return _div("time", [NBSP])
        if phase.style is RoomStyle.NEXT:
            return _div("time", [_icon("alarm"), escape(phase.time_range or "")])
        key, args = phase.countdown_message()
        return _div("time", [_icon("hourglass"), escape(self.translator.get(key, *args))])

    def _create_image(self) -> str:
        avatars = [
            f'<vaadin-avatar name="{escape(speaker.full_name)}"'
            f' img="{escape(speaker.image_url or "")}"></vaadin-avatar>'
            for speaker in self.speakers
            if speaker.has_image
        ]
        if not avatars:
            return self._create_track()
        return _div("avatar", [_div("avatar-group", avatars)])

    def _create_track(self) -> str:
        if self.track is None or not self.track.svg_code:
            return _div("track", [])
        return _div("track", [self.track.svg_code])
