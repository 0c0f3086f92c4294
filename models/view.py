from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

PLAYLIST_KEY_PREFIX = "playlist-"


class ViewKind(Enum):
    """Which content pane is visible."""
    HOME = "home"
    SEARCH = "search"
    LIBRARY = "library"
    PLAYLIST = "playlist"


@dataclass(frozen=True)
class View:
    """A content pane, with the playlist id when the pane is a playlist."""
    kind: ViewKind
    playlist_id: str | None = None

    def __post_init__(self) -> None:
        if self.kind is ViewKind.PLAYLIST and self.playlist_id is None:
            raise ValueError("Playlist view requires a playlist id")
        if self.kind is not ViewKind.PLAYLIST and self.playlist_id is not None:
            raise ValueError(f"{self.kind.value} view does not take a playlist id")

    @classmethod
    def home(cls) -> View:
        return cls(ViewKind.HOME)

    @classmethod
    def search(cls) -> View:
        return cls(ViewKind.SEARCH)

    @classmethod
    def library(cls) -> View:
        return cls(ViewKind.LIBRARY)

    @classmethod
    def playlist(cls, playlist_id: str) -> View:
        return cls(ViewKind.PLAYLIST, str(playlist_id))

    @property
    def key(self) -> str:
        """History key, e.g. "home" or "playlist-42"."""
        if self.kind is ViewKind.PLAYLIST:
            return f"{PLAYLIST_KEY_PREFIX}{self.playlist_id}"
        return self.kind.value

    def __str__(self) -> str:
        return self.key
