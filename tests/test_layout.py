import math

from player.bookmarks import parse_bookmarks
from player.layout import build_view, marker_for
from player.state import PlaybackState
from tests.conftest import VIDEO_URL


def _numbers(view):
    yield view["progress"]
    for m in view["markers"]:
        yield m["left"]
        yield m["width"]


def test_unknown_duration_degrades_to_zero():
    bookmarks = parse_bookmarks(["[01:00] a", "[03:10] b"])
    view = build_view(PlaybackState(current_time=30), bookmarks, VIDEO_URL)

    assert all(n == 0 for n in _numbers(view))
    assert all(math.isfinite(n) for n in _numbers(view))
    assert view["clock"] == "00:30 / 00:00"
    assert view["controls"]["play_enabled"] is False


def test_infinite_duration_degrades_to_zero():
    bookmarks = parse_bookmarks(["[01:00] a"])
    view = build_view(PlaybackState(current_time=30, duration=math.inf), bookmarks, VIDEO_URL)
    assert all(n == 0 for n in _numbers(view))


def test_marker_spans_window():
    (b,) = parse_bookmarks(["[03:10] Face not visible"])
    m = marker_for(b, 200.0)

    assert m["left"] == 65.0
    assert m["width"] == 30.0
    assert m["seek_to"] == 130
    assert m["title"] == "02:10 - 03:10 - Face not visible"


def test_marker_past_end_is_clamped():
    (b,) = parse_bookmarks(["[05:00] late"])
    m = marker_for(b, 260.0)

    assert m["left"] + m["width"] <= 100.0


def test_view_progress_and_active_entries():
    bookmarks = parse_bookmarks(["[01:00] a", "[03:00] b"])
    state = PlaybackState(current_time=45, duration=300, is_media_ready=True)

    view = build_view(state, bookmarks, VIDEO_URL)

    assert view["progress"] == 15.0
    assert [e["active"] for e in view["bookmarks"]] == [True, False]
    assert view["bookmarks"][1]["seek_to"] == 120
    assert view["controls"]["play_enabled"] is True
    assert view["clock"] == "00:45 / 05:00"


def test_empty_bookmarks_plain_progress():
    state = PlaybackState(current_time=50, duration=100, is_media_ready=True)
    view = build_view(state, [], VIDEO_URL)

    assert view["markers"] == []
    assert view["bookmarks"] == []
    assert view["progress"] == 50.0


def test_media_sources_offer_webm_and_mp4():
    view = build_view(PlaybackState(), [], VIDEO_URL)

    assert view["media"]["sources"] == [
        {"src": VIDEO_URL, "type": "video/webm"},
        {"src": VIDEO_URL, "type": "video/mp4"},
    ]


def test_error_is_exposed():
    view = build_view(PlaybackState(load_error="404"), [], VIDEO_URL)
    assert view["error"] == "404"
