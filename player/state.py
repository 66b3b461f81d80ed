import math
from dataclasses import dataclass, replace
from typing import Optional

from .events import (
    DurationKnown,
    MediaFailed,
    MediaReady,
    Pause,
    Play,
    PlaybackEvent,
    Seek,
    TimeUpdate,
    ToggleMute,
)
from .timefmt import clamp


@dataclass(frozen=True)
class PlaybackState:
    """
    Playback state of a single video.

    duration stays NaN until the media reports usable metadata.
    """
    current_time: float = 0.0
    duration: float = math.nan
    is_playing: bool = False
    is_muted: bool = False
    is_media_ready: bool = False
    load_error: Optional[str] = None

    @property
    def has_duration(self) -> bool:
        return math.isfinite(self.duration) and self.duration > 0


def _position(state: PlaybackState, t: float) -> float:
    if state.has_duration:
        return clamp(t, 0.0, state.duration)
    return max(t, 0.0)


def reduce(state: PlaybackState, event: PlaybackEvent) -> PlaybackState:
    """
    Pure transition function: returns the state after event.
    """
    if isinstance(event, Play):
        return replace(state, is_playing=True)

    if isinstance(event, Pause):
        return replace(state, is_playing=False)

    if isinstance(event, TimeUpdate):
        if not math.isfinite(event.time):
            return state
        return replace(state, current_time=_position(state, event.time))

    if isinstance(event, DurationKnown):
        state = replace(state, duration=float(event.duration))
        if not state.has_duration:
            return state
        return replace(
            state,
            is_media_ready=True,
            load_error=None,
            current_time=_position(state, state.current_time),
        )

    if isinstance(event, MediaReady):
        return replace(state, is_media_ready=True, load_error=None)

    if isinstance(event, Seek):
        if not math.isfinite(event.time) or not state.has_duration:
            return state
        return replace(state, current_time=clamp(event.time, 0.0, state.duration))

    if isinstance(event, ToggleMute):
        return replace(state, is_muted=not state.is_muted)

    if isinstance(event, MediaFailed):
        return replace(
            state,
            is_playing=False,
            is_media_ready=False,
            load_error=event.reason,
        )

    raise ValueError(f"Unknown playback event: {event!r}")
