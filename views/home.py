from __future__ import annotations

import logging

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import Button, Label, ListView, Static

from services.feeds import Feed
from services.shell import Shell
from styles import COLOR_ERROR
from widgets.track_list import TrackList

logger = logging.getLogger(__name__)


class HomeView(VerticalScroll):
    """Home pane: recently played, made for you and popular albums."""
    
    DEFAULT_CSS = """
    HomeView .feed-section {
        height: auto;
        margin-bottom: 1;
    }
    
    HomeView .feed-title {
        color: #ffc72c;
        text-style: bold;
    }
    
    HomeView .feed-error-row {
        height: auto;
    }
    
    HomeView TrackList {
        height: auto;
        max-height: 12;
    }
    """
    
    class ReloadRequested(Message):
        """Posted when the user asks to reload a failed section."""
        
        def __init__(self, feed_name: str) -> None:
            super().__init__()
            self.feed_name = feed_name
    
    def __init__(self, shell: Shell, feeds: list[Feed], *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.shell = shell
        self.feeds = feeds
    
    def compose(self) -> ComposeResult:
        yield Label("Good to see you", id="home-greeting")
        for feed in self.feeds:
            with Vertical(classes="feed-section", id=f"{feed.name}-section"):
                yield Label(feed.title, classes="feed-title")
                with Horizontal(classes="feed-error-row", id=f"{feed.name}-error-row"):
                    yield Static("", classes="feed-error", id=f"{feed.name}-error", markup=False)
                    yield Button("↻ Reload", id=f"{feed.name}-reload", variant="default")
                yield TrackList(id=f"{feed.name}-list", empty_text="Loading...")
    
    def on_mount(self) -> None:
        for feed in self.feeds:
            self.query_one(f"#{feed.name}-error-row", Horizontal).display = False
    
    def show_feed(self, feed: Feed) -> None:
        """Render a feed's tracks and error state."""
        error_row = self.query_one(f"#{feed.name}-error-row", Horizontal)
        track_list = self.query_one(f"#{feed.name}-list", TrackList)
        
        if feed.error:
            self.query_one(f"#{feed.name}-error", Static).update(
                Text(f"Failed to load {feed.title.lower()}: {feed.error}", style=COLOR_ERROR)
            )
        error_row.display = bool(feed.error)
        
        track_list.empty_text = "Nothing to show" if not feed.error else "No cached data"
        track_list.set_tracks(feed.tracks)
        current = self.shell.state.current_track
        track_list.mark_playing(current.id if current else None)
    
    def mark_playing(self, track_id: str | None) -> None:
        for track_list in self.query(TrackList):
            track_list.mark_playing(track_id)
    
    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if not button_id.endswith("-reload"):
            return
        event.stop()
        feed_name = button_id[: -len("-reload")]
        logger.info(f"Reload requested for {feed_name}")
        self.post_message(self.ReloadRequested(feed_name))
    
    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Play the selected track."""
        event.stop()
        if not isinstance(event.list_view, TrackList):
            return
        track = event.list_view.track_at(event.list_view.index)
        if track is not None:
            self.shell.on_play_track(track)
