import logging
import math
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Sequence, Tuple

from .timefmt import clamp

logger = logging.getLogger(__name__)

# (src, mime type) alternatives; the backend picks the first it can play
MediaSource = Tuple[str, str]

Listener = Callable[[], None]

MEDIA_EVENTS = (
    "play",
    "pause",
    "timeupdate",
    "loadedmetadata",
    "durationchange",
    "loadeddata",
    "canplay",
    "error",
)


def source_alternatives(video_url: str) -> List[MediaSource]:
    return [
        (video_url, "video/webm"),
        (video_url, "video/mp4"),
    ]


# ==================================================
# Media Backend Contract
# ==================================================

class MediaBackend(ABC):
    """
    Abstract media backend.

    Mirrors the small surface of a platform video element: imperative
    controls plus named event callbacks read back through properties.
    """

    def __init__(self):
        self._listeners: Dict[str, List[Listener]] = {}

    # ---------------- listeners ----------------

    def add_listener(self, event: str, callback: Listener) -> None:
        self._listeners.setdefault(event, []).append(callback)

    def remove_listener(self, event: str, callback: Listener) -> None:
        callbacks = self._listeners.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def listener_count(self) -> int:
        return sum(len(v) for v in self._listeners.values())

    def emit(self, event: str) -> None:
        for callback in list(self._listeners.get(event, [])):
            callback()

    # ---------------- controls ----------------

    @abstractmethod
    def load(self, sources: Sequence[MediaSource]) -> None:
        raise NotImplementedError

    @abstractmethod
    def play(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def pause(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_current_time(self, t: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_muted(self, muted: bool) -> None:
        raise NotImplementedError

    # ---------------- readings ----------------

    @property
    @abstractmethod
    def current_time(self) -> float:
        raise NotImplementedError

    @property
    @abstractmethod
    def duration(self) -> float:
        raise NotImplementedError

    @property
    def error(self) -> str:
        return ""


# ==================================================
# Simulated Backend (deterministic, in-memory)
# ==================================================

class SimulatedMediaBackend(MediaBackend):
    """
    In-memory backend driven by an explicit clock.

    Events are delivered synchronously. Nothing plays until
    finish_loading() reports metadata, mirroring preload="metadata".
    """

    SUPPORTED_TYPES = ("video/webm", "video/mp4")

    def __init__(self, duration: float = math.nan, supported_types=SUPPORTED_TYPES):
        super().__init__()
        self._media_duration = duration
        self._supported = tuple(supported_types)
        self._duration = math.nan
        self._time = 0.0
        self._paused = True
        self._error = ""
        self.muted = False
        self.src = None

    def load(self, sources: Sequence[MediaSource]) -> None:
        self.src = None
        self._error = ""
        for src, mime in sources:
            if mime in self._supported:
                self.src = src
                break

        if self.src is None:
            self.fail("No playable source")
            return

        logger.debug("Loading %s", self.src)

    def finish_loading(self, duration: float = None) -> None:
        if self.src is None:
            return

        self._error = ""
        if duration is not None:
            self._media_duration = duration

        self._duration = self._media_duration
        self.emit("loadedmetadata")
        self.emit("durationchange")
        self.emit("loadeddata")
        self.emit("canplay")

    def fail(self, reason: str) -> None:
        self._error = reason
        self._paused = True
        logger.warning("Media error: %s", reason)
        self.emit("error")

    def play(self) -> None:
        if self._error or not self._paused:
            return
        self._paused = False
        self.emit("play")

    def pause(self) -> None:
        if self._paused:
            return
        self._paused = True
        self.emit("pause")

    def set_current_time(self, t: float) -> None:
        if math.isfinite(self._duration):
            t = clamp(t, 0.0, self._duration)
        self._time = max(t, 0.0)
        self.emit("timeupdate")

    def set_muted(self, muted: bool) -> None:
        self.muted = bool(muted)

    def advance(self, seconds: float) -> None:
        """
        Move the clock forward while playing; pauses at the end.
        """
        if self._paused:
            return

        self._time += seconds
        ended = math.isfinite(self._duration) and self._time >= self._duration
        if ended:
            self._time = self._duration

        self.emit("timeupdate")

        if ended:
            self.pause()

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def current_time(self) -> float:
        return self._time

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def error(self) -> str:
        return self._error
