from .track import Track, format_time
from .view import View, ViewKind
from .navigation import NavigationHistory
from .playback import RepeatMode, TransportState

__all__ = [
    "Track",
    "format_time",
    "View",
    "ViewKind",
    "NavigationHistory",
    "RepeatMode",
    "TransportState",
]
