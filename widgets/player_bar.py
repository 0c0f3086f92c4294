from textual.app import ComposeResult
from textual.containers import Vertical
from textual.reactive import reactive
from textual.widgets import Static
from textual.css.query import NoMatches
from rich.text import Text

from models.playback import RepeatMode, TransportState
from models.track import Track, format_time
from styles import COLOR_ACCENT, COLOR_PRIMARY, COLOR_HIGHLIGHT, COLOR_MUTED, COLOR_DIM, COLOR_INACTIVE

PROGRESS_BAR_WIDTH = 50
VOLUME_BAR_WIDTH = 20

REPEAT_LABELS = {
    RepeatMode.OFF: "OFF",
    RepeatMode.ALL: "ALL",
    RepeatMode.ONE: "ONE",
}


class PlayerBar(Vertical):
    """Bottom bar showing the loaded track and transport state."""
    
    DEFAULT_CSS = """
    PlayerBar {
        height: 5;
        background: #181818;
        border-top: solid #2a2a2a;
        padding: 0 2;
    }
    """
    
    transport: reactive[TransportState] = reactive(TransportState, always_update=True)
    track: reactive[Track | None] = reactive(None, always_update=True)
    
    def compose(self) -> ComposeResult:
        yield Static(self._render_track_line(), id="player-track")
        yield Static(self._render_progress_line(), id="player-progress")
        yield Static(self._render_controls_line(), id="player-controls")
    
    def update_state(self, track: Track | None, transport: TransportState) -> None:
        """Render a new track and transport state."""
        self.track = track
        self.transport = transport
    
    def _render_track_line(self) -> Text:
        result = Text()
        if self.track is None:
            result.append("Select a song to play", style=f"{COLOR_PRIMARY} bold")
            result.append("  ·  Choose from your library", style=COLOR_MUTED)
            return result
        
        result.append("♥ " if self.transport.liked else "♡ ", style=COLOR_PRIMARY)
        result.append(self.track.title, style=f"{COLOR_PRIMARY} bold")
        result.append(f"  ·  {self.track.artist}", style=COLOR_MUTED)
        result.append(f"  ·  {self.track.album}", style=COLOR_DIM)
        return result
    
    def _render_progress_line(self) -> Text:
        result = Text()
        duration = self.track.duration if self.track else 0
        position = self.transport.current_time
        filled = int((position / duration) * PROGRESS_BAR_WIDTH) if duration > 0 else 0
        filled = min(filled, PROGRESS_BAR_WIDTH)
        
        icon = "⏸" if self.transport.is_playing else "▶"
        result.append(f"{icon}  ", style=f"{COLOR_PRIMARY} bold")
        result.append(f"{format_time(position):>5} ", style=COLOR_MUTED)
        result.append("━" * filled, style=COLOR_PRIMARY)
        result.append("─" * (PROGRESS_BAR_WIDTH - filled), style=COLOR_INACTIVE)
        result.append(f" {format_time(duration)}", style=COLOR_MUTED)
        return result
    
    def _render_controls_line(self) -> Text:
        result = Text()
        
        result.append("Shuffle ", style=COLOR_MUTED)
        if self.transport.shuffle:
            result.append("ON", style=f"{COLOR_PRIMARY} bold")
        else:
            result.append("OFF", style=COLOR_DIM)
        
        result.append("   Repeat ", style=COLOR_MUTED)
        repeat_style = COLOR_DIM if self.transport.repeat_mode is RepeatMode.OFF else f"{COLOR_PRIMARY} bold"
        result.append(REPEAT_LABELS[self.transport.repeat_mode], style=repeat_style)
        
        result.append("   Volume ", style=COLOR_MUTED)
        result.append("│", style=COLOR_MUTED)
        if self.transport.muted:
            result.append("─" * VOLUME_BAR_WIDTH, style=COLOR_INACTIVE)
            result.append("│ ", style=COLOR_MUTED)
            result.append("MUTED", style=f"{COLOR_MUTED} bold")
            return result
        
        filled_bars = int((self.transport.volume / 100) * VOLUME_BAR_WIDTH)
        for i in range(VOLUME_BAR_WIDTH):
            if i < filled_bars:
                if i < VOLUME_BAR_WIDTH * 0.5:
                    result.append("█", style=COLOR_ACCENT)
                elif i < VOLUME_BAR_WIDTH * 0.75:
                    result.append("█", style=COLOR_PRIMARY)
                else:
                    result.append("█", style=COLOR_HIGHLIGHT)
            else:
                result.append("─", style=COLOR_INACTIVE)
        result.append("│ ", style=COLOR_MUTED)
        result.append(f"{self.transport.volume}%", style=f"{COLOR_PRIMARY} bold")
        return result
    
    def _refresh_lines(self) -> None:
        try:
            self.query_one("#player-track", Static).update(self._render_track_line())
            self.query_one("#player-progress", Static).update(self._render_progress_line())
            self.query_one("#player-controls", Static).update(self._render_controls_line())
        except NoMatches:
            pass
    
    def watch_transport(self, new_value: TransportState) -> None:
        self._refresh_lines()
    
    def watch_track(self, new_value: Track | None) -> None:
        self._refresh_lines()
