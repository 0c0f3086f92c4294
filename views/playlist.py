from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label, ListView, Static

from models.track import Track
from services.shell import Shell
from widgets.track_list import TrackList

logger = logging.getLogger(__name__)


class PlaylistView(Vertical):
    """Playlist pane for the playlist selected in the sidebar or library."""
    
    def __init__(self, shell: Shell, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.shell = shell
        self.playlists: dict[str, Track] = {}
        self.playlist_id: str | None = None
    
    def compose(self) -> ComposeResult:
        yield Label("Playlist", id="playlist-title", classes="view-title", markup=False)
        yield Static("", id="playlist-description", classes="view-subtitle", markup=False)
        yield TrackList(id="playlist-tracks", empty_text="Playlist not found")
    
    def set_playlists(self, playlists: list[Track]) -> None:
        self.playlists = {playlist.id: playlist for playlist in playlists}
        if self.playlist_id is not None:
            self.show_playlist(self.playlist_id)
    
    def show_playlist(self, playlist_id: str) -> None:
        """Render the playlist with the given id, or a not-found state."""
        self.playlist_id = playlist_id
        playlist = self.playlists.get(playlist_id)
        title = self.query_one("#playlist-title", Label)
        description = self.query_one("#playlist-description", Static)
        tracks = self.query_one("#playlist-tracks", TrackList)
        
        if playlist is None:
            logger.debug(f"Playlist {playlist_id} not loaded")
            title.update("Playlist")
            description.update(f"Selected playlist {playlist_id}")
            tracks.set_tracks([])
            return
        
        title.update(playlist.title)
        description.update(f"{playlist.artist} · {playlist.album}")
        tracks.set_tracks([playlist])
        current = self.shell.state.current_track
        tracks.mark_playing(current.id if current else None)
    
    def on_list_view_selected(self, event: ListView.Selected) -> None:
        event.stop()
        track = self.query_one("#playlist-tracks", TrackList).track_at(event.list_view.index)
        if track is not None:
            self.shell.on_play_track(track)
