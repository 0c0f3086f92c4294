from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Button, Label, ListView

from models.track import Track
from services.shell import Shell
from widgets.track_list import TrackList

logger = logging.getLogger(__name__)


class Sidebar(Vertical):
    """Navigation buttons and the user's playlists."""
    
    DEFAULT_CSS = """
    Sidebar {
        width: 32;
        background: #121212;
        border-right: solid #2a2a2a;
        padding: 1;
    }
    
    Sidebar > Button {
        width: 100%;
        margin-bottom: 1;
    }
    
    Sidebar > Label {
        color: #ffc72c;
        text-style: bold;
        padding: 1 0 1 0;
    }
    """
    
    def __init__(self, shell: Shell, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.shell = shell
    
    def compose(self) -> ComposeResult:
        yield Button("⌂ Home", id="nav-home")
        yield Button("⌕ Search", id="nav-search")
        yield Button("▤ Your Library", id="nav-library")
        yield Label("Playlists")
        yield TrackList(id="sidebar-playlists", show_duration=False, empty_text="No playlists")
    
    def set_playlists(self, playlists: list[Track]) -> None:
        self.query_one("#sidebar-playlists", TrackList).set_tracks(playlists)
    
    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Map navigation buttons to shell intents."""
        if event.button.id == "nav-home":
            self.shell.on_home_click()
        elif event.button.id == "nav-search":
            self.shell.on_search_click()
        elif event.button.id == "nav-library":
            self.shell.on_library_toggle()
        else:
            return
        event.stop()
    
    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Open the selected playlist."""
        event.stop()
        playlist_list = self.query_one("#sidebar-playlists", TrackList)
        playlist = playlist_list.track_at(event.list_view.index)
        if playlist is None:
            return
        logger.debug(f"Sidebar opened playlist {playlist.id}")
        self.shell.on_playlist_click(playlist.id)
