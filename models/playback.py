from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_VOLUME = 80
MAX_VOLUME = 100


class RepeatMode(Enum):
    """Repeat modes, in the order the repeat button cycles through them."""
    OFF = "off"
    ALL = "all"
    ONE = "one"

    def next(self) -> RepeatMode:
        modes = list(RepeatMode)
        return modes[(modes.index(self) + 1) % len(modes)]


@dataclass(frozen=True)
class TransportState:
    """Playback flags shown by the player bar."""
    is_playing: bool = False
    current_time: float = 0.0
    volume: int = DEFAULT_VOLUME
    shuffle: bool = False
    repeat_mode: RepeatMode = RepeatMode.OFF
    liked: bool = False
    muted: bool = False
    volume_before_mute: int = DEFAULT_VOLUME

    @property
    def state_label(self) -> str:
        return "Playing" if self.is_playing else "Paused"
