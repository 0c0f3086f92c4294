from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label, ListView

from models.track import Track
from services.shell import Shell
from widgets.track_list import TrackList


class LibraryView(Vertical):
    """Library pane listing the user's playlists."""
    
    def __init__(self, shell: Shell, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.shell = shell
    
    def compose(self) -> ComposeResult:
        yield Label("Your Library", classes="view-title")
        yield Label("Your playlists and saved music", classes="view-subtitle")
        yield TrackList(id="library-playlists", show_duration=False, empty_text="No playlists yet")
    
    def set_playlists(self, playlists: list[Track]) -> None:
        self.query_one("#library-playlists", TrackList).set_tracks(playlists)
    
    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Open the selected playlist."""
        event.stop()
        playlist = self.query_one("#library-playlists", TrackList).track_at(event.list_view.index)
        if playlist is not None:
            self.shell.on_playlist_click(playlist.id)
