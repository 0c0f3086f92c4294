from textual.app import App, ComposeResult
from textual.widgets import Footer, ContentSwitcher
from textual.containers import Horizontal
from textual.binding import Binding
import asyncio
import logging
import sys
import time

from config import DATA_DIR, ConfigError, Settings, load_settings
from models.track import Track
from models.view import ViewKind
from services.cache import DiskCache
from services.catalog import CatalogService
from services.feeds import Feed, build_feeds
from services.shell import (
    CycleRepeatMode,
    GoBack,
    GoForward,
    Intent,
    NextTrack,
    PlayTrack,
    PreviousTrack,
    Seek,
    SetVolume,
    Shell,
    ShellState,
    Tick,
    ToggleLiked,
    ToggleMute,
    TogglePlayPause,
    ToggleShuffle,
)
from services.supabase_client import CatalogError, SupabaseClient
from views import HomeView, SearchView, LibraryView, PlaylistView
from widgets import Header, HelpScreen, PlayerBar, Sidebar
from widgets.header import VIEW_TITLES

TICK_INTERVAL = 0.5
VOLUME_STEP = 5
SEEK_STEP = 10

VIEW_IDS = {
    ViewKind.HOME: "home-view",
    ViewKind.SEARCH: "search-view",
    ViewKind.LIBRARY: "library-view",
    ViewKind.PLAYLIST: "playlist-view",
}

DATA_DIR.mkdir(parents=True, exist_ok=True)
log_file = DATA_DIR / 'sigtune.log'

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler(log_file)
    ]
)

logger = logging.getLogger(__name__)


class SigtuneApp(App):
    """A terminal streaming-player shell built with Textual."""

    CSS_PATH = "styles/app.tcss"
    TITLE = "SIGTUNE"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("space", "play_pause", "Play/Pause"),
        Binding("n", "next_track", "Next"),
        Binding("p", "previous_track", "Prev"),
        Binding("]", "seek_forward", "+10s", show=False),
        Binding("[", "seek_back", "-10s", show=False),
        Binding("+", "volume_up", "Vol+"),
        Binding("=", "volume_up", "Vol+", show=False),
        Binding("-", "volume_down", "Vol-"),
        Binding("m", "toggle_mute", "Mute"),
        Binding("s", "toggle_shuffle", "Shuffle"),
        Binding("r", "cycle_repeat", "Repeat"),
        Binding("l", "toggle_like", "Like", show=False),
        Binding("1", "go_home", "Home", show=False),
        Binding("2", "go_search", "Search", show=False),
        Binding("3", "go_library", "Library", show=False),
        Binding("b", "go_back", "Back"),
        Binding("alt+left", "go_back", "Back", show=False),
        Binding("f", "go_forward", "Forward"),
        Binding("alt+right", "go_forward", "Forward", show=False),
        Binding("h", "show_help", "Help"),
        Binding("?", "show_help", "Help", show=False),
    ]

    def __init__(
        self,
        settings: Settings | None = None,
        catalog: CatalogService | None = None,
        shell: Shell | None = None,
        *args,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)

        logger.info("Starting SIGTUNE application")

        self.settings = settings or load_settings()
        self.shell = shell or Shell()
        self.catalog = catalog
        self._client: SupabaseClient | None = None
        unavailable_reason = ""

        if self.catalog is None:
            try:
                self._client = SupabaseClient(
                    self.settings.supabase_url,
                    self.settings.supabase_key,
                    timeout=self.settings.http_timeout,
                )
                self.catalog = CatalogService(self._client)
            except ConfigError as e:
                logger.warning(f"Catalog unavailable: {e}")
                unavailable_reason = "Catalog not configured (set SUPABASE_URL and SUPABASE_ANON_KEY)"

        self.cache = DiskCache(self.settings.cache_dir)
        self.feeds: list[Feed] = build_feeds(self.catalog, self.cache, unavailable_reason)
        self._last_tick = time.monotonic()
        self._unsubscribe = None
        logger.info("Services initialized successfully")

    def compose(self) -> ComposeResult:
        """Compose the main application layout."""
        yield Header()

        with Horizontal(id="body"):
            yield Sidebar(self.shell, id="sidebar")
            with ContentSwitcher(id="view-switcher", initial=VIEW_IDS[ViewKind.HOME]):
                yield HomeView(self.shell, self.feeds, id=VIEW_IDS[ViewKind.HOME])
                yield SearchView(self.shell, id=VIEW_IDS[ViewKind.SEARCH])
                yield LibraryView(self.shell, id=VIEW_IDS[ViewKind.LIBRARY])
                yield PlaylistView(self.shell, id=VIEW_IDS[ViewKind.PLAYLIST])

        yield PlayerBar(id="player-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Subscribe to shell state and start loading the catalog."""
        self._unsubscribe = self.shell.subscribe(self._on_state_change)
        self._render_state(self.shell.state)

        for feed in self.feeds:
            self.load_feed(feed)
            self.set_interval(feed.refresh_interval, lambda feed=feed: self.load_feed(feed, force=True))

        self._last_tick = time.monotonic()
        self.set_interval(TICK_INTERVAL, self._tick)

    def on_unmount(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()
        if self._client:
            self._client.close()

    # Catalog

    def load_feed(self, feed: Feed, force: bool = False) -> None:
        """Load a feed in a background worker."""
        self.run_worker(self._load_feed(feed, force), group=f"feed-{feed.name}")

    async def _load_feed(self, feed: Feed, force: bool) -> None:
        await asyncio.to_thread(feed.load, force)

        if feed.error and not feed.tracks:
            self.notify(
                f"❌ Failed to load {feed.title.lower()}",
                severity="error",
                timeout=5
            )
        self._show_feed(feed)

    def _show_feed(self, feed: Feed) -> None:
        """Push a loaded feed to every widget that displays it."""
        self.query_one(HomeView).show_feed(feed)

        if feed.name == "made_for_you":
            self.query_one(Sidebar).set_playlists(feed.tracks)
            self.query_one(LibraryView).set_playlists(feed.tracks)
            self.query_one(PlaylistView).set_playlists(feed.tracks)

        all_tracks = [track for loaded in self.feeds for track in loaded.tracks]
        self.query_one(SearchView).set_catalog(all_tracks)

    def on_home_view_reload_requested(self, message: HomeView.ReloadRequested) -> None:
        for feed in self.feeds:
            if feed.name == message.feed_name:
                self.load_feed(feed, force=True)

    async def _record_play(self, track: Track) -> None:
        """Add a played track to the recently played table."""
        if self.catalog is None:
            return

        try:
            await asyncio.to_thread(self.catalog.add_recently_played, track)
        except CatalogError as e:
            logger.error(f"Error recording play of {track.title}: {e}")
            self.notify("Could not save to recently played", severity="warning", timeout=3)
            return

        for feed in self.feeds:
            if feed.name == "recently_played":
                self.load_feed(feed, force=True)

    # State rendering

    def _on_state_change(self, state: ShellState, intent: Intent) -> None:
        self._render_state(state)

        if isinstance(intent, PlayTrack):
            logger.info(f"Playing {intent.track.title} by {intent.track.artist}")
            self.run_worker(self._record_play(intent.track), group="record-play")

    def _render_state(self, state: ShellState) -> None:
        """Bring every widget in line with the shell state."""
        view = state.view
        switcher = self.query_one("#view-switcher", ContentSwitcher)
        if switcher.current != VIEW_IDS[view.kind]:
            switcher.current = VIEW_IDS[view.kind]

        playlist_view = self.query_one(PlaylistView)
        if view.kind is ViewKind.PLAYLIST and playlist_view.playlist_id != view.playlist_id:
            playlist_view.show_playlist(view.playlist_id)

        header = self.query_one(Header)
        header.can_go_back = state.navigation.can_go_back
        header.can_go_forward = state.navigation.can_go_forward
        header.view_title = VIEW_TITLES[view.kind.value]

        self.query_one(PlayerBar).update_state(state.current_track, state.transport)

        track_id = state.current_track.id if state.current_track else None
        self.query_one(HomeView).mark_playing(track_id)

    def _tick(self) -> None:
        now = time.monotonic()
        elapsed = now - self._last_tick
        self._last_tick = now
        self.shell.dispatch(Tick(elapsed))

    # Actions

    def action_quit(self) -> None:
        """Handle quit action for clean shutdown."""
        self.exit()

    def action_play_pause(self) -> None:
        if self.shell.state.current_track is None:
            self.notify("Select a song to play", timeout=2)
            return
        self.shell.dispatch(TogglePlayPause())

    def action_next_track(self) -> None:
        self.shell.dispatch(NextTrack())

    def action_previous_track(self) -> None:
        self.shell.dispatch(PreviousTrack())

    def action_seek_forward(self) -> None:
        self.shell.dispatch(Seek(self.shell.state.transport.current_time + SEEK_STEP))

    def action_seek_back(self) -> None:
        self.shell.dispatch(Seek(self.shell.state.transport.current_time - SEEK_STEP))

    def action_volume_up(self) -> None:
        """Increase volume."""
        state = self.shell.dispatch(SetVolume(self.shell.state.transport.volume + VOLUME_STEP))
        self.notify(f"🔊 Volume ▲ {state.transport.volume}%", timeout=1.5)

    def action_volume_down(self) -> None:
        """Decrease volume."""
        state = self.shell.dispatch(SetVolume(self.shell.state.transport.volume - VOLUME_STEP))
        volume_pct = state.transport.volume
        mute_icon = "🔇" if volume_pct == 0 else "🔉"
        self.notify(f"{mute_icon} Volume ▼ {volume_pct}%", timeout=1.5)

    def action_toggle_mute(self) -> None:
        """Toggle mute state."""
        state = self.shell.dispatch(ToggleMute())
        if state.transport.muted:
            self.notify("🔇 Muted", timeout=1.5)
        else:
            self.notify(f"🔊 Unmuted {state.transport.volume}%", timeout=1.5)

    def action_toggle_shuffle(self) -> None:
        self.shell.dispatch(ToggleShuffle())

    def action_cycle_repeat(self) -> None:
        self.shell.dispatch(CycleRepeatMode())

    def action_toggle_like(self) -> None:
        if self.shell.state.current_track is None:
            return
        self.shell.dispatch(ToggleLiked())

    def action_go_home(self) -> None:
        self.shell.on_home_click()

    def action_go_search(self) -> None:
        self.shell.on_search_click()

    def action_go_library(self) -> None:
        self.shell.on_library_toggle()

    def action_go_back(self) -> None:
        self.shell.dispatch(GoBack())

    def action_go_forward(self) -> None:
        self.shell.dispatch(GoForward())

    def action_show_help(self) -> None:
        """Show help screen."""
        self.push_screen(HelpScreen())


def main():
    """Entry point for the SIGTUNE application.

    Handles initialization errors and provides user-friendly error messages.
    """
    try:
        logger.info("=" * 60)
        logger.info("SIGTUNE starting up")
        logger.info("=" * 60)

        app = SigtuneApp()
        app.run()

        logger.info("SIGTUNE shut down cleanly")

    except ConfigError as e:
        logger.critical(f"Invalid configuration: {e}")
        print("\n❌ SIGTUNE cannot start\n")
        print(f"{e}\n")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("SIGTUNE interrupted by user")
        print("\n\nGoodbye! 👋\n")
        sys.exit(0)
    except Exception as e:
        logger.critical(f"Unexpected fatal error: {type(e).__name__}: {e}", exc_info=True)
        print("\n❌ SIGTUNE encountered an unexpected error\n")
        print(f"{type(e).__name__}: {e}\n")
        print(f"Check {log_file} for more details.\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
