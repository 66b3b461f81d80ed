from .bookmarks import ViolationBookmark, parse_bookmarks
from .engine import ViolationTimelinePlayer
from .media import MediaBackend, SimulatedMediaBackend
from .state import PlaybackState, reduce
from .timefmt import format_time

__all__ = [
    "MediaBackend",
    "PlaybackState",
    "SimulatedMediaBackend",
    "ViolationBookmark",
    "ViolationTimelinePlayer",
    "format_time",
    "parse_bookmarks",
    "reduce",
]
