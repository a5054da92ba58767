"""Session and room persistence."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Dict, Optional, Union

from .models import FLAGS_PATH, Room, Session, Speaker, Track, parse_language


def _parse_datetime(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        raise ValueError(f"Timestamp needs a UTC offset: {value}")
    return parsed


def room_from_dict(data: Dict[str, Any]) -> Room:
    return Room(room_id=str(data.get("room_id", "")), name=str(data.get("name", "")))


def session_from_dict(data: Dict[str, Any], flags_path: str = FLAGS_PATH) -> Session:
    track_data = data.get("track")
    return Session(
        session_id=str(data.get("session_id", "")),
        room=room_from_dict(data.get("room") or {}),
        title=data["title"],
        start_date=_parse_datetime(data.get("start_date")),
        end_date=_parse_datetime(data.get("end_date")),
        speakers=[
            Speaker(full_name=s["full_name"], image_url=s.get("image_url"))
            for s in data.get("speakers", [])
        ],
        language=parse_language(data.get("language"), flags_path),
        track=Track(**track_data) if track_data else None,
    )


def session_to_dict(session: Session) -> Dict[str, Any]:
    return {
        "session_id": session.session_id,
        "room": {"room_id": session.room.room_id, "name": session.room.name},
        "title": session.title,
        "start_date": session.start_date.isoformat() if session.start_date else None,
        "end_date": session.end_date.isoformat() if session.end_date else None,
        "speakers": [
            {"full_name": s.full_name, "image_url": s.image_url} for s in session.speakers
        ],
        "language": session.language.code if session.language else None,
        "track": (
            {"track_id": session.track.track_id, "svg_code": session.track.svg_code}
            if session.track
            else None
        ),
    }


def load_card(path: str, flags_path: str = FLAGS_PATH) -> Union[Room, Session]:
    """Load a session, or a bare room when the file has no session title."""
    with open(path, "r", encoding="utf-8") as handle:
        data = json.load(handle)
    if "title" not in data:
        return room_from_dict(data.get("room") or data)
    return session_from_dict(data, flags_path)


def save_session(path: str, session: Session) -> None:
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(session_to_dict(session), handle, indent=2)
