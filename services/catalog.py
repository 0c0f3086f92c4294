from __future__ import annotations

import logging
import random
from datetime import datetime, timezone
from typing import Any

from models.track import Track
from services.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

RECENTLY_PLAYED_TABLE = "recently_played"
MADE_FOR_YOU_TABLE = "made_for_you"
POPULAR_ALBUMS_TABLE = "popular_albums"

DEFAULT_USER_ID = "default-user"
PLAYLIST_DURATION = 210
DEFAULT_RELEASE_DATE = "2023-01-01"


class CatalogService:
    """Reads and writes the catalog tables, returning tracks in the player's shape."""

    def __init__(self, client: SupabaseClient):
        self.client = client

    # Recently played

    def recently_played(self, limit: int = 10) -> list[Track]:
        """Return the most recently played tracks, newest first."""
        rows = self.client.select(
            RECENTLY_PLAYED_TABLE, order="played_at", descending=True, limit=limit
        )
        return [_recently_played_to_track(row) for row in rows]

    def add_recently_played(self, track: Track, user_id: str = DEFAULT_USER_ID) -> Track:
        """Record a play of a track.

        Args:
            track: Track that was played.
            user_id: Owner of the history entry.

        Returns:
            The stored entry as a Track.
        """
        row = self.client.insert(RECENTLY_PLAYED_TABLE, {
            "id": _new_row_id(track.id),
            "title": track.title,
            "artist": track.artist,
            "album": track.album,
            "image_url": track.album_art or None,
            "duration": track.duration,
            "played_at": datetime.now(timezone.utc).isoformat(),
            "user_id": user_id,
        })
        logger.info(f"Recorded play of {track.title} by {track.artist}")
        return _recently_played_to_track(row)

    def remove_recently_played(self, entry_id: str) -> None:
        self.client.delete(RECENTLY_PLAYED_TABLE, entry_id)
        logger.info(f"Removed recently played entry {entry_id}")

    # Made for you

    def made_for_you(self) -> list[Track]:
        """Return personalized playlists, newest first."""
        rows = self.client.select(MADE_FOR_YOU_TABLE, order="created_at", descending=True)
        return [_playlist_to_track(row) for row in rows]

    def add_made_for_you(
        self,
        title: str,
        description: str,
        image: str | None = None,
        playlist_type: str = "personalized",
        user_id: str = DEFAULT_USER_ID,
    ) -> Track:
        row = self.client.insert(MADE_FOR_YOU_TABLE, {
            "id": _new_row_id(title),
            "title": title,
            "description": description,
            "image_url": image,
            "playlist_type": playlist_type,
            "user_id": user_id,
        })
        return _playlist_to_track(row)

    def update_made_for_you(self, playlist_id: str, **updates: Any) -> Track:
        row = self.client.update(MADE_FOR_YOU_TABLE, playlist_id, updates)
        return _playlist_to_track(row)

    # Popular albums

    def popular_albums(self, limit: int = 20) -> list[Track]:
        """Return albums ordered by popularity score, highest first."""
        rows = self.client.select(
            POPULAR_ALBUMS_TABLE, order="popularity_score", descending=True, limit=limit
        )
        return [_album_to_track(row) for row in rows]

    def add_popular_album(
        self,
        title: str,
        artist: str,
        duration: int,
        image: str | None = None,
        release_date: str | None = None,
        popularity_score: int | None = None,
    ) -> Track:
        if popularity_score is None:
            popularity_score = random.randint(0, 99)
        row = self.client.insert(POPULAR_ALBUMS_TABLE, {
            "id": _new_row_id(title),
            "title": title,
            "artist": artist,
            "image_url": image,
            "duration": duration,
            "release_date": release_date or DEFAULT_RELEASE_DATE,
            "popularity_score": popularity_score,
        })
        return _album_to_track(row)

    def update_popularity(self, album_id: str, score: int) -> Track:
        row = self.client.update(POPULAR_ALBUMS_TABLE, album_id, {"popularity_score": score})
        return _album_to_track(row)


def _recently_played_to_track(row: dict[str, Any]) -> Track:
    return Track.from_api({
        "id": row.get("id"),
        "title": row.get("title"),
        "artist": row.get("artist"),
        "album": row.get("album"),
        "albumArt": row.get("image_url"),
        "duration": row.get("duration"),
    })


def _playlist_to_track(row: dict[str, Any]) -> Track:
    # Playlists render in the same cards as tracks: description under the
    # title, playlist type in the album slot.
    return Track.from_api({
        "id": row.get("id"),
        "title": row.get("title"),
        "artist": row.get("description"),
        "album": row.get("playlist_type"),
        "albumArt": row.get("image_url"),
        "duration": PLAYLIST_DURATION,
    })


def _album_to_track(row: dict[str, Any]) -> Track:
    return Track.from_api({
        "id": row.get("id"),
        "title": row.get("title"),
        "artist": row.get("artist"),
        "album": row.get("title"),
        "albumArt": row.get("image_url"),
        "duration": row.get("duration"),
    })


def _new_row_id(seed: str) -> str:
    # The tables use text primary keys without a server-side default.
    slug = "".join(c if c.isalnum() else "-" for c in seed.lower()).strip("-")[:32] or "row"
    return f"{slug}-{datetime.now(timezone.utc).strftime('%Y%m%d%H%M%S%f')}"
