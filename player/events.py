from dataclasses import dataclass


@dataclass(frozen=True)
class PlaybackEvent:
    """
    Base class for events fed to the playback reducer.
    """


@dataclass(frozen=True)
class Play(PlaybackEvent):
    pass


@dataclass(frozen=True)
class Pause(PlaybackEvent):
    pass


@dataclass(frozen=True)
class TimeUpdate(PlaybackEvent):
    time: float


@dataclass(frozen=True)
class DurationKnown(PlaybackEvent):
    duration: float


@dataclass(frozen=True)
class MediaReady(PlaybackEvent):
    pass


@dataclass(frozen=True)
class Seek(PlaybackEvent):
    time: float


@dataclass(frozen=True)
class ToggleMute(PlaybackEvent):
    pass


@dataclass(frozen=True)
class MediaFailed(PlaybackEvent):
    reason: str
