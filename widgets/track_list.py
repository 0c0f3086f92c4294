from __future__ import annotations

from textual.widgets import ListView, ListItem, Static
from models.track import Track, format_time
import logging

logger = logging.getLogger(__name__)


class TrackList(ListView):
    """List of catalog tracks with a marker on the one currently loaded."""
    
    BINDINGS = [
        ("j", "cursor_down", "Move down"),
        ("k", "cursor_up", "Move up"),
    ]
    
    def __init__(self, *args, show_duration: bool = True, empty_text: str = "Nothing here yet", **kwargs):
        super().__init__(*args, **kwargs)
        self.tracks: list[Track] = []
        self.show_duration = show_duration
        self.empty_text = empty_text
        self._playing_id: str | None = None
    
    def set_tracks(self, tracks: list[Track]) -> None:
        """Replace the listed tracks."""
        self.tracks = list(tracks)
        self.clear()
        
        if not self.tracks:
            self.append(ListItem(Static(self.empty_text, classes="empty-list")))
            return
        
        for track in self.tracks:
            self.append(ListItem(Static(self._format_track(track), markup=False)))
        
        logger.debug(f"{self.id}: populated with {len(self.tracks)} tracks")
    
    def track_at(self, index: int | None) -> Track | None:
        """Return the track at a list index, or None for the placeholder row."""
        if index is None or not 0 <= index < len(self.tracks):
            return None
        return self.tracks[index]
    
    def mark_playing(self, track_id: str | None) -> None:
        """Move the play indicator to the given track."""
        if track_id == self._playing_id:
            return
        self._playing_id = track_id
        
        for idx, track in enumerate(self.tracks):
            if idx >= len(self.children):
                break
            item = self.children[idx]
            if isinstance(item, ListItem):
                item.query_one(Static).update(self._format_track(track))
    
    def _format_track(self, track: Track) -> str:
        marker = "♪" if track.id == self._playing_id else " "
        line = f"{marker} {track.title} - {track.artist}"
        if track.album and track.album != track.title:
            line += f" ({track.album})"
        if self.show_duration:
            line += f" [{format_time(track.duration)}]"
        return line
