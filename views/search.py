from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Input, Label, ListView, Static

from models.track import Track
from services.shell import SetSearchQuery, Shell
from widgets.track_list import TrackList


def search_tracks(tracks: list[Track], query: str) -> list[Track]:
    """Return tracks whose title, artist or album contains the query, ignoring case."""
    needle = query.strip().casefold()
    if not needle:
        return []
    
    seen: set[str] = set()
    results = []
    for track in tracks:
        if track.id in seen:
            continue
        haystack = f"{track.title} {track.artist} {track.album}".casefold()
        if needle in haystack:
            seen.add(track.id)
            results.append(track)
    return results


class SearchView(Vertical):
    """Search pane filtering the tracks already loaded from the catalog."""
    
    def __init__(self, shell: Shell, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.shell = shell
        self.catalog_tracks: list[Track] = []
    
    def compose(self) -> ComposeResult:
        yield Label("Search", classes="view-title")
        yield Input(placeholder="What do you want to listen to?", id="search-input")
        yield Static("Search for artists, songs, or albums", id="search-status", markup=False)
        yield TrackList(id="search-results", empty_text="No results")
    
    def set_catalog(self, tracks: list[Track]) -> None:
        self.catalog_tracks = tracks
        self._show_results(self.shell.state.search_query)
    
    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.shell.dispatch(SetSearchQuery(event.value))
        self._show_results(event.value)
    
    def _show_results(self, query: str) -> None:
        status = self.query_one("#search-status", Static)
        results_list = self.query_one("#search-results", TrackList)
        
        if not query.strip():
            status.update("Search for artists, songs, or albums")
            results_list.set_tracks([])
            return
        
        results = search_tracks(self.catalog_tracks, query)
        status.update(f'Search results for "{query}" ({len(results)})')
        results_list.set_tracks(results)
    
    def on_list_view_selected(self, event: ListView.Selected) -> None:
        event.stop()
        track = self.query_one("#search-results", TrackList).track_at(event.list_view.index)
        if track is not None:
            self.shell.on_play_track(track)
