"""Tests for the shell reducer and state container."""

from __future__ import annotations

import pytest

from models.playback import RepeatMode
from models.track import Track
from models.view import View
from services.shell import (
    CycleRepeatMode,
    GoBack,
    GoForward,
    Intent,
    NavigateTo,
    PlayTrack,
    Seek,
    SetSearchQuery,
    SetVolume,
    Shell,
    ShellState,
    Tick,
    TogglePlayPause,
    reduce,
)

TRACK_X = Track(id="t1", title="First", artist="A", album="X", duration=200)
TRACK_Y = Track(id="t2", title="Second", artist="B", album="Y", duration=180)


def test_initial_state() -> None:
    state = ShellState()
    assert state.view == View.home()
    assert state.current_track is None
    assert state.transport.is_playing is False


def test_play_replaces_track_and_resets_time() -> None:
    state = reduce(ShellState(), PlayTrack(TRACK_X))
    state = reduce(state, Seek(120))
    state = reduce(state, TogglePlayPause())

    state = reduce(state, PlayTrack(TRACK_Y))
    assert state.current_track == TRACK_Y
    assert state.transport.is_playing is True
    assert state.transport.current_time == 0


def test_seek_past_end_clamps_to_loaded_track() -> None:
    state = reduce(ShellState(), PlayTrack(TRACK_X))
    state = reduce(state, Seek(250))
    assert state.transport.current_time == 200


def test_navigation_intents() -> None:
    state = reduce(ShellState(), NavigateTo(View.search()))
    state = reduce(state, NavigateTo(View.library()))
    state = reduce(state, GoBack())
    assert state.view == View.search()
    state = reduce(state, GoForward())
    assert state.view == View.library()


def test_navigation_leaves_playback_alone() -> None:
    playing = reduce(ShellState(), PlayTrack(TRACK_X))
    state = reduce(playing, NavigateTo(View.playlist("42")))
    assert state.transport == playing.transport
    assert state.current_track == TRACK_X


def test_tick_advances_current_track() -> None:
    state = reduce(ShellState(), PlayTrack(TRACK_X))
    state = reduce(state, Tick(2.0))
    assert state.transport.current_time == 2.0


def test_search_query() -> None:
    assert reduce(ShellState(), SetSearchQuery("jazz")).search_query == "jazz"


def test_unknown_intent_raises() -> None:
    class Teleport(Intent):
        pass

    with pytest.raises(TypeError):
        reduce(ShellState(), Teleport())


def test_dispatch_notifies_listeners_with_intent() -> None:
    shell = Shell()
    received = []
    shell.subscribe(lambda state, intent: received.append((state, intent)))

    shell.dispatch(SetVolume(30))

    assert len(received) == 1
    state, intent = received[0]
    assert state.transport.volume == 30
    assert intent == SetVolume(30)
    assert shell.state is state


def test_dispatch_skips_listeners_when_nothing_changes() -> None:
    shell = Shell()
    received = []
    shell.subscribe(lambda state, intent: received.append(intent))

    shell.dispatch(GoBack())
    shell.dispatch(Tick(1.0))

    assert received == []


def test_replaying_loaded_track_still_notifies() -> None:
    shell = Shell()
    received = []
    shell.subscribe(lambda state, intent: received.append(intent))

    shell.on_play_track(TRACK_X)
    shell.on_play_track(TRACK_X)

    assert received == [PlayTrack(TRACK_X), PlayTrack(TRACK_X)]


def test_unsubscribe() -> None:
    shell = Shell()
    received = []
    unsubscribe = shell.subscribe(lambda state, intent: received.append(intent))
    unsubscribe()
    shell.dispatch(CycleRepeatMode())
    assert received == []
    assert shell.state.transport.repeat_mode is RepeatMode.ALL


def test_sidebar_callbacks_follow_browse_scenario() -> None:
    shell = Shell()

    shell.on_search_click()
    shell.on_playlist_click("42")
    shell.dispatch(GoBack())
    shell.on_library_toggle()

    navigation = shell.state.navigation
    assert navigation.keys == ["home", "search", "library"]
    assert navigation.cursor == 2
    assert not navigation.can_go_forward

    shell.on_home_click()
    assert shell.state.view == View.home()


def test_sidebar_play_track() -> None:
    shell = Shell()
    shell.on_play_track(TRACK_X)
    assert shell.state.current_track == TRACK_X
    assert shell.state.transport.is_playing is True
