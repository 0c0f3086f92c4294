"""
Player/Navigation Shell

Single owner of the UI state. Widgets never mutate state directly: they
dispatch intents, the reducer computes the next ShellState, and subscribed
listeners re-render from it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable

from models.navigation import NavigationHistory
from models.playback import TransportState
from models.track import Track
from models.view import View
from services import navigation, transport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShellState:
    """Complete shell state: navigation, playback and the search box."""
    navigation: NavigationHistory = field(default_factory=NavigationHistory)
    transport: TransportState = field(default_factory=TransportState)
    current_track: Track | None = None
    search_query: str = ""

    @property
    def view(self) -> View:
        return self.navigation.current


class Intent:
    """Base class for user intents."""


@dataclass(frozen=True)
class NavigateTo(Intent):
    target: View


@dataclass(frozen=True)
class GoBack(Intent):
    pass


@dataclass(frozen=True)
class GoForward(Intent):
    pass


@dataclass(frozen=True)
class PlayTrack(Intent):
    track: Track


@dataclass(frozen=True)
class TogglePlayPause(Intent):
    pass


@dataclass(frozen=True)
class Seek(Intent):
    time: float


@dataclass(frozen=True)
class SetVolume(Intent):
    volume: int


@dataclass(frozen=True)
class ToggleMute(Intent):
    pass


@dataclass(frozen=True)
class ToggleShuffle(Intent):
    pass


@dataclass(frozen=True)
class CycleRepeatMode(Intent):
    pass


@dataclass(frozen=True)
class ToggleLiked(Intent):
    pass


@dataclass(frozen=True)
class NextTrack(Intent):
    pass


@dataclass(frozen=True)
class PreviousTrack(Intent):
    pass


@dataclass(frozen=True)
class Tick(Intent):
    elapsed: float


@dataclass(frozen=True)
class SetSearchQuery(Intent):
    query: str


def reduce(state: ShellState, intent: Intent) -> ShellState:
    """Compute the state that follows an intent.

    Args:
        state: Current shell state.
        intent: Intent to apply.

    Returns:
        Next shell state. Intents that change nothing return an equal state.

    Raises:
        TypeError: If the intent type is not handled.
    """
    if isinstance(intent, NavigateTo):
        return replace(state, navigation=navigation.navigate_to(state.navigation, intent.target))
    if isinstance(intent, GoBack):
        return replace(state, navigation=navigation.go_back(state.navigation))
    if isinstance(intent, GoForward):
        return replace(state, navigation=navigation.go_forward(state.navigation))
    if isinstance(intent, PlayTrack):
        return replace(state, current_track=intent.track, transport=transport.play(state.transport))
    if isinstance(intent, Seek):
        return replace(
            state, transport=transport.seek(state.transport, intent.time, state.current_track)
        )
    if isinstance(intent, SetVolume):
        return replace(state, transport=transport.set_volume(state.transport, intent.volume))
    if isinstance(intent, Tick):
        return replace(
            state, transport=transport.advance(state.transport, intent.elapsed, state.current_track)
        )
    if isinstance(intent, SetSearchQuery):
        return replace(state, search_query=intent.query)

    toggle = _TRANSPORT_TOGGLES.get(type(intent))
    if toggle is None:
        raise TypeError(f"Unhandled intent: {type(intent).__name__}")
    return replace(state, transport=toggle(state.transport))


_TRANSPORT_TOGGLES: dict[type, Callable[[TransportState], TransportState]] = {
    TogglePlayPause: transport.toggle_play_pause,
    ToggleMute: transport.toggle_mute,
    ToggleShuffle: transport.toggle_shuffle,
    CycleRepeatMode: transport.cycle_repeat_mode,
    ToggleLiked: transport.toggle_liked,
    NextTrack: transport.next_track,
    PreviousTrack: transport.previous_track,
}


Listener = Callable[[ShellState, Intent], None]


class Shell:
    """State container that applies intents and notifies listeners."""

    def __init__(self, state: ShellState | None = None):
        self._state = state or ShellState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> ShellState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with every new state and the intent that produced it.

        Returns:
            Function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, intent: Intent) -> ShellState:
        """Apply an intent and notify listeners.

        Listeners are skipped when the state is unchanged, except for PlayTrack:
        replaying the loaded track is still a play.
        """
        previous = self._state
        self._state = reduce(previous, intent)

        if self._state == previous and not isinstance(intent, PlayTrack):
            return self._state

        if not isinstance(intent, Tick):
            logger.debug(
                f"{type(intent).__name__}: view={self._state.view.key} "
                f"history={self._state.navigation.keys} cursor={self._state.navigation.cursor} "
                f"playing={self._state.transport.is_playing}"
            )

        for listener in list(self._listeners):
            listener(self._state, intent)
        return self._state

    # Sidebar callbacks

    def on_home_click(self) -> None:
        self.dispatch(NavigateTo(View.home()))

    def on_search_click(self) -> None:
        self.dispatch(NavigateTo(View.search()))

    def on_library_toggle(self) -> None:
        self.dispatch(NavigateTo(View.library()))

    def on_playlist_click(self, playlist_id: str) -> None:
        self.dispatch(NavigateTo(View.playlist(playlist_id)))

    def on_play_track(self, track: Track) -> None:
        self.dispatch(PlayTrack(track))
