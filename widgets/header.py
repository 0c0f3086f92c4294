from textual.widgets import Static
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.containers import Vertical
from textual.app import ComposeResult
from rich.text import Text
from styles import COLOR_PRIMARY, COLOR_MUTED, COLOR_DIM, COLOR_INACTIVE

SIGTUNE_ASCII = """
 ┏━┓╻┏━╸╺┳╸╻ ╻┏┓╻┏━╸
 ┗━┓┃┃╺┓ ┃ ┃ ┃┃┗┫┣╸ 
 ┗━┛╹┗━┛ ╹ ┗━┛╹ ╹┗━╸
"""

VIEW_TITLES = {
    "home": "Home",
    "search": "Search",
    "library": "Your Library",
    "playlist": "Playlist",
}


class Header(Vertical):
    can_go_back: reactive[bool] = reactive(False)
    can_go_forward: reactive[bool] = reactive(False)
    view_title: reactive[str] = reactive("Home")
    
    def compose(self) -> ComposeResult:
        yield Static(SIGTUNE_ASCII, id="header-logo")
        yield Static(self._render_nav_bar(), id="header-nav")
        yield Static("─" * 80, id="header-divider")
    
    def _render_nav_bar(self) -> Text:
        result = Text()
        
        result.append(" ◀ ", style=f"{COLOR_PRIMARY} bold" if self.can_go_back else COLOR_INACTIVE)
        result.append("Back", style=COLOR_MUTED if self.can_go_back else COLOR_DIM)
        result.append("   ")
        result.append("Forward", style=COLOR_MUTED if self.can_go_forward else COLOR_DIM)
        result.append(" ▶ ", style=f"{COLOR_PRIMARY} bold" if self.can_go_forward else COLOR_INACTIVE)
        result.append("    │    ", style=COLOR_DIM)
        result.append(self.view_title, style=f"{COLOR_PRIMARY} bold")
        
        return result
    
    def _refresh_nav_bar(self) -> None:
        try:
            self.query_one("#header-nav", Static).update(self._render_nav_bar())
        except NoMatches:
            pass
    
    def watch_can_go_back(self, new_value: bool) -> None:
        self._refresh_nav_bar()
    
    def watch_can_go_forward(self, new_value: bool) -> None:
        self._refresh_nav_bar()
    
    def watch_view_title(self, new_value: str) -> None:
        self._refresh_nav_bar()
