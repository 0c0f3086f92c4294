from .header import Header
from .help_screen import HelpScreen
from .player_bar import PlayerBar
from .sidebar import Sidebar
from .track_list import TrackList

__all__ = [
    "Header",
    "HelpScreen",
    "PlayerBar",
    "Sidebar",
    "TrackList",
]
