from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Track:
    """Represents a catalog track with metadata."""
    id: str
    title: str
    artist: str
    album: str
    album_art: str = ""
    duration: int = 0  # seconds

    @classmethod
    def from_api(cls, record: dict[str, Any]) -> Track:
        """Build a Track from an API-shaped record.
        
        Args:
            record: Mapping with id, title, artist, album, albumArt and duration keys.
            
        Returns:
            Track instance. Missing text fields fall back to "Unknown ..." labels.
        """
        return cls(
            id=str(record.get("id", "")),
            title=record.get("title") or "Unknown Title",
            artist=record.get("artist") or "Unknown Artist",
            album=record.get("album") or "Unknown Album",
            album_art=record.get("albumArt") or "",
            duration=int(record.get("duration") or 0),
        )

    def to_api(self) -> dict[str, Any]:
        """Return the API-shaped record for this track."""
        return {
            "id": self.id,
            "title": self.title,
            "artist": self.artist,
            "album": self.album,
            "albumArt": self.album_art,
            "duration": self.duration,
        }


def format_time(seconds: float) -> str:
    """Format seconds as M:SS."""
    seconds = max(0, int(seconds))
    minutes, remaining = divmod(seconds, 60)
    return f"{minutes}:{remaining:02d}"
