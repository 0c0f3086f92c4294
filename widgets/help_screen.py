from __future__ import annotations

from textual.screen import ModalScreen
from textual.widgets import Static, Button
from textual.containers import Container, VerticalScroll
from textual.css.query import NoMatches
from textual.app import ComposeResult
from textual import events

HELP_TEXT = """[bold #ffc72c]♫ SIGTUNE - Terminal Streaming Player[/bold #ffc72c]

[bold]NAVIGATION[/bold]
  1           Home
  2           Search
  3           Your Library
  b / Alt+←   Back
  f / Alt+→   Forward
  j/k         Move down/up in a list
  Enter       Play selected track / open selected playlist
  Tab         Move between sidebar and content

[bold]PLAYBACK CONTROLS[/bold]
  Space       Play/Pause
  n           Next (restarts the current track)
  p           Previous (restarts the current track)
  ]           Seek forward 10s
  [           Seek back 10s
  s           Toggle shuffle
  r           Cycle repeat (off → all → one)
  l           Like / unlike the current track

[bold]VOLUME CONTROLS[/bold]
  +/=         Increase volume
  -           Decrease volume
  m           Toggle mute

[bold]OTHER[/bold]
  h/?         Show this help
  q           Quit application

[bold]CATALOG[/bold]
  • Home sections load from Supabase (SUPABASE_URL, SUPABASE_ANON_KEY)
  • Responses are cached on disk and refreshed in the background
  • If a section fails to load, press its Reload button"""


class HelpScreen(ModalScreen[None]):
    """Modal screen displaying help information."""
    
    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }
    
    #help-container {
        width: 80;
        height: 90%;
        background: #121212;
        border: thick #cc9a06;
        padding: 1 2;
    }
    
    #help-scroll {
        width: 100%;
        height: 1fr;
        margin-bottom: 1;
    }
    
    #help-content {
        width: 100%;
        height: auto;
    }
    
    #help-close-button {
        width: 100%;
        height: auto;
        background: #181818;
        color: #ffc72c;
        border: solid #ffc72c;
        text-style: bold;
    }
    
    #help-close-button:hover {
        background: #2a2a2a;
        color: #ffd700;
    }
    
    #help-close-button:focus {
        border: solid #ffd700;
    }
    """
    
    def compose(self) -> ComposeResult:
        """Compose the help screen."""
        with Container(id="help-container"):
            with VerticalScroll(id="help-scroll"):
                yield Static(HELP_TEXT, id="help-content")
            
            yield Button("Close (Esc)", id="help-close-button", variant="primary")
    
    def on_mount(self) -> None:
        """Focus the button when screen mounts."""
        self.call_after_refresh(self._focus_button)
    
    def _focus_button(self) -> None:
        """Set focus to close button."""
        try:
            button = self.query_one("#help-close-button", Button)
            button.focus()
        except NoMatches:
            pass
    
    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle close button press."""
        if event.button.id == "help-close-button":
            self.dismiss()
    
    async def on_key(self, event: events.Key) -> None:
        """Handle key events."""
        if event.key == "escape":
            self.dismiss()
            event.prevent_default()
            event.stop()
        elif event.key == "j":
            scroll = self.query_one("#help-scroll", VerticalScroll)
            scroll.scroll_down()
            event.prevent_default()
            event.stop()
        elif event.key == "k":
            scroll = self.query_one("#help-scroll", VerticalScroll)
            scroll.scroll_up()
            event.prevent_default()
            event.stop()
