import logging
from typing import Callable, List, Sequence

from .bookmarks import ViolationBookmark, parse_bookmarks
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
from .media import MediaBackend, source_alternatives
from .state import PlaybackState, reduce
from .timefmt import clamp, is_finite

logger = logging.getLogger(__name__)

SKIP_SECONDS = 10

StateListener = Callable[[PlaybackState], None]


class ViolationTimelinePlayer:
    """
    Video playback bound to a set of violation bookmarks.

    All state changes go through reduce(); backend callbacks and user
    operations only translate into events. Operations that need media
    metadata are silent no-ops until it is available.
    """

    def __init__(
        self,
        video_url: str,
        violations: Sequence[str],
        backend: MediaBackend,
    ):
        self.video_url = video_url
        self.backend = backend
        self.state = PlaybackState()
        self.bookmarks: List[ViolationBookmark] = parse_bookmarks(violations)

        self._subscribers: List[StateListener] = []
        self._disposed = False
        self._handlers = {
            "play": lambda: self.dispatch(Play()),
            "pause": lambda: self.dispatch(Pause()),
            "timeupdate": lambda: self.dispatch(TimeUpdate(self.backend.current_time)),
            "loadedmetadata": self._on_duration,
            "durationchange": self._on_duration,
            "loadeddata": lambda: self.dispatch(MediaReady()),
            "canplay": lambda: self.dispatch(MediaReady()),
            "error": self._on_error,
        }

        for event, handler in self._handlers.items():
            backend.add_listener(event, handler)

        backend.load(source_alternatives(video_url))

    # ---------------- state plumbing ----------------

    def dispatch(self, event: PlaybackEvent) -> None:
        if self._disposed:
            return

        new_state = reduce(self.state, event)
        if new_state == self.state:
            return

        self.state = new_state
        for callback in list(self._subscribers):
            callback(new_state)

    def subscribe(self, callback: StateListener) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _on_duration(self) -> None:
        self.dispatch(DurationKnown(self.backend.duration))

    def _on_error(self) -> None:
        self.dispatch(MediaFailed(self.backend.error or "Failed to load video"))

    def set_violations(self, violations: Sequence[str]) -> None:
        self.bookmarks = parse_bookmarks(violations)

    def dispose(self) -> None:
        """
        Detach from the backend. Later backend events are ignored.
        """
        if self._disposed:
            return

        for event, handler in self._handlers.items():
            self.backend.remove_listener(event, handler)

        self._subscribers.clear()
        self._disposed = True

    # ---------------- operations ----------------

    def toggle_play(self) -> None:
        if not self.state.is_media_ready:
            return

        if self.state.is_playing:
            self.backend.pause()
        else:
            self.backend.play()

    def toggle_mute(self) -> None:
        self.dispatch(ToggleMute())
        self.backend.set_muted(self.state.is_muted)

    def seek_to(self, time: float) -> None:
        if not is_finite(time) or not self.state.has_duration:
            return

        target = clamp(time, 0.0, self.state.duration)
        self.backend.set_current_time(target)
        self.dispatch(Seek(target))

    def handle_scrub_click(self, click_x_fraction: float) -> None:
        if not is_finite(click_x_fraction) or not self.state.has_duration:
            return
        self.seek_to(click_x_fraction * self.state.duration)

    def skip_forward(self) -> None:
        self.seek_to(self.state.current_time + SKIP_SECONDS)

    def skip_backward(self) -> None:
        self.seek_to(self.state.current_time - SKIP_SECONDS)

    def seek_to_bookmark(self, bookmark: ViolationBookmark) -> None:
        self.seek_to(bookmark.window_start)

    # ---------------- queries ----------------

    def is_bookmark_active(self, bookmark: ViolationBookmark) -> bool:
        return bookmark.contains(self.state.current_time)

    def active_bookmarks(self) -> List[ViolationBookmark]:
        return [b for b in self.bookmarks if self.is_bookmark_active(b)]
