"""
Framework-agnostic render model for the violation player.

A host UI draws exactly what build_view() returns. Every number is
finite; with unknown duration all positions collapse to 0.
"""

from typing import Any, Dict, List, Sequence

from .bookmarks import ViolationBookmark
from .media import source_alternatives
from .state import PlaybackState
from .timefmt import format_time, fraction


def _percent(value: float, duration: float) -> float:
    return round(fraction(value, duration) * 100, 4)


def marker_for(bookmark: ViolationBookmark, duration: float) -> Dict[str, Any]:
    left = _percent(bookmark.window_start, duration)
    right = _percent(bookmark.violation_time, duration)
    return {
        "left": left,
        "width": round(right - left, 4),
        "seek_to": bookmark.window_start,
        "title": f"{bookmark.display_range} - {bookmark.description}",
        "category": bookmark.category,
    }


def build_view(
    state: PlaybackState,
    bookmarks: Sequence[ViolationBookmark],
    video_url: str,
) -> Dict[str, Any]:
    markers: List[Dict[str, Any]] = [
        marker_for(b, state.duration) for b in bookmarks
    ]

    entries: List[Dict[str, Any]] = [
        {
            "label": b.label,
            "display_range": b.display_range,
            "description": b.description,
            "category": b.category,
            "active": b.contains(state.current_time),
            "seek_to": b.window_start,
        }
        for b in bookmarks
    ]

    return {
        "media": {
            "sources": [
                {"src": src, "type": mime}
                for src, mime in source_alternatives(video_url)
            ],
            "muted": state.is_muted,
            "playing": state.is_playing,
        },
        "progress": _percent(state.current_time, state.duration),
        "markers": markers,
        "bookmarks": entries,
        "clock": f"{format_time(state.current_time)} / {format_time(state.duration)}",
        "controls": {
            "play_enabled": state.is_media_ready,
            "playing": state.is_playing,
            "muted": state.is_muted,
        },
        "error": state.load_error,
    }
