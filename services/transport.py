"""Transitions over the player bar's transport state.

There is no audio engine behind these: every function maps a TransportState
(and, where it matters, the loaded track) to a new TransportState.
"""

from __future__ import annotations

from dataclasses import replace

from models.playback import MAX_VOLUME, RepeatMode, TransportState
from models.track import Track


def play(state: TransportState) -> TransportState:
    """Start a newly loaded track from the beginning."""
    return replace(state, is_playing=True, current_time=0.0, liked=False)


def toggle_play_pause(state: TransportState) -> TransportState:
    return replace(state, is_playing=not state.is_playing)


def seek(state: TransportState, time: float, track: Track | None) -> TransportState:
    """Move the playback position.
    
    Args:
        state: Current transport state.
        time: Requested position in seconds.
        track: Loaded track, used as the upper bound. None means no upper bound.
        
    Returns:
        New state with the position clamped to [0, track.duration].
    """
    position = max(0.0, float(time))
    if track is not None:
        position = min(position, float(track.duration))
    return replace(state, current_time=position)


def set_volume(state: TransportState, volume: int) -> TransportState:
    """Set the volume, clamped to [0, 100]. A non-zero volume clears mute."""
    level = max(0, min(MAX_VOLUME, int(volume)))
    if level > 0:
        return replace(state, volume=level, muted=False)
    return replace(state, volume=level)


def toggle_mute(state: TransportState) -> TransportState:
    if state.muted:
        return replace(state, muted=False, volume=state.volume_before_mute)
    return replace(state, muted=True, volume_before_mute=state.volume, volume=0)


def toggle_shuffle(state: TransportState) -> TransportState:
    return replace(state, shuffle=not state.shuffle)


def cycle_repeat_mode(state: TransportState) -> TransportState:
    """Advance off -> all -> one -> off."""
    return replace(state, repeat_mode=state.repeat_mode.next())


def toggle_liked(state: TransportState) -> TransportState:
    return replace(state, liked=not state.liked)


def next_track(state: TransportState) -> TransportState:
    # No queue: skipping only rewinds the loaded track.
    return replace(state, current_time=0.0)


def previous_track(state: TransportState) -> TransportState:
    return replace(state, current_time=0.0)


def advance(state: TransportState, elapsed: float, track: Track | None) -> TransportState:
    """Move the position forward while playing.
    
    Reaching the end of the track restarts it under repeat-one and pauses
    at the end otherwise.
    
    Args:
        state: Current transport state.
        elapsed: Seconds since the previous tick.
        track: Loaded track.
        
    Returns:
        New transport state, or the same one when paused or nothing is loaded.
    """
    if not state.is_playing or track is None or elapsed <= 0:
        return state
    
    position = state.current_time + elapsed
    if position < track.duration:
        return replace(state, current_time=position)
    
    if state.repeat_mode is RepeatMode.ONE:
        return replace(state, current_time=0.0)
    return replace(state, current_time=float(track.duration), is_playing=False)
