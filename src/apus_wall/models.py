"""Data models for the Apus wall."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

FLAGS_PATH = "images/flags"


@dataclass(frozen=True)
class Room:
    room_id: str
    name: str


@dataclass(frozen=True)
class Speaker:
    full_name: str
    image_url: Optional[str] = None

    @property
    def has_image(self) -> bool:
        return bool(self.image_url and self.image_url.strip())


@dataclass(frozen=True)
class Track:
    track_id: str
    svg_code: Optional[str] = None


@dataclass(frozen=True)
class Language:
    code: str
    flags_path: str = FLAGS_PATH

    @property
    def language_code(self) -> str:
        return self.code

    @property
    def flag_file_name(self) -> str:
        return f"{self.flags_path.rstrip('/')}/{self.code}.svg"


@dataclass(frozen=True)
class Session:
    session_id: str
    room: Room
    title: str
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    speakers: List[Speaker] = field(default_factory=list)
    language: Optional[Language] = None
    track: Optional[Track] = None


def parse_language(code: Optional[str], flags_path: str = FLAGS_PATH) -> Optional[Language]:
    """Map a raw language code to a Language, or None when it is unknown."""
    value = (code or "").strip().lower()
    if not value or value == "unknown":
        return None
    return Language(code=value, flags_path=flags_path)
