# cli/commands.py
import json
import logging
import math
from typing import List, Optional

from player.bookmarks import parse_bookmarks
from player.categories import summarize
from player.config import Config
from player.engine import ViolationTimelinePlayer
from player.layout import build_view
from player.media import SimulatedMediaBackend
from player.session import ReviewSession
from player.session_source import DbSessionSource, JsonSessionSource
from review_db import SessionDAO

from .render import render_player

logger = logging.getLogger(__name__)


# ==================================================
# Session Source Selection
# ==================================================

def load_session(source: str, input_path: Optional[str], session_id: Optional[str]) -> ReviewSession:
    if source == "json":
        if not input_path:
            raise ValueError("JSON source requires input path")
        return JsonSessionSource(input_path).load()

    if source == "db":
        if not session_id:
            raise ValueError("DB source requires --session")
        return DbSessionSource(session_id).load()

    raise ValueError(source)


def open_player(session: ReviewSession, duration: Optional[float] = None):
    """
    Mount a player on a simulated backend and finish loading the media.
    """
    if duration is None:
        duration = session.duration_seconds
    if duration is None:
        duration = math.nan

    backend = SimulatedMediaBackend(duration=duration)
    player = ViolationTimelinePlayer(session.video_url, session.violations, backend)
    backend.finish_loading()
    return player, backend


# ==================================================
# Bookmark Commands
# ==================================================

def run_bookmarks(source: str, input_path: Optional[str], session_id: Optional[str]):
    session = load_session(source, input_path, session_id)
    bookmarks = parse_bookmarks(session.violations)

    print(f"=== BOOKMARKS ({session.id}) ===")
    print(f"Video: {session.video_url}")
    print(f"Violations: {len(session.violations)} • Bookmarks: {len(bookmarks)}")

    for b in bookmarks:
        print(f"[{b.display_range}] {b.description} ({b.category})")


def run_summary(source: str, input_path: Optional[str], session_id: Optional[str]):
    session = load_session(source, input_path, session_id)
    summary = summarize(parse_bookmarks(session.violations))
    summary["session_id"] = session.id
    summary["skipped"] = len(session.violations) - summary["total"]

    print(json.dumps(summary, indent=2))


def run_view(
    source: str,
    input_path: Optional[str],
    session_id: Optional[str],
    at: float,
    duration: Optional[float] = None,
):
    session = load_session(source, input_path, session_id)
    player, _ = open_player(session, duration)
    player.seek_to(at)

    view = build_view(player.state, player.bookmarks, player.video_url)
    player.dispose()

    print(json.dumps(view, indent=2))


# ==================================================
# Scripted Playback
# ==================================================

def parse_steps(script: str) -> List[List[str]]:
    steps = []
    for raw in script.replace("\n", ";").split(";"):
        parts = raw.split()
        if parts:
            steps.append(parts)
    return steps


def apply_step(player: ViolationTimelinePlayer, backend: SimulatedMediaBackend, step: List[str]) -> None:
    command, args = step[0].lower(), step[1:]

    if command == "play":
        if not player.state.is_playing:
            player.toggle_play()
    elif command == "pause":
        if player.state.is_playing:
            player.toggle_play()
    elif command == "toggle":
        player.toggle_play()
    elif command == "mute":
        player.toggle_mute()
    elif command == "fwd":
        player.skip_forward()
    elif command == "back":
        player.skip_backward()
    elif command == "seek" and len(args) == 1:
        player.seek_to(float(args[0]))
    elif command == "scrub" and len(args) == 1:
        player.handle_scrub_click(float(args[0]))
    elif command == "bookmark" and len(args) == 1:
        index = int(args[0])
        if not 0 <= index < len(player.bookmarks):
            raise ValueError(f"No bookmark #{index}")
        player.seek_to_bookmark(player.bookmarks[index])
    elif command == "tick" and len(args) == 1:
        backend.advance(float(args[0]))
    elif command == "fail":
        backend.fail(" ".join(args) or "Failed to load video")
    else:
        raise ValueError(f"Invalid step: {' '.join(step)}")


def run_play(
    source: str,
    input_path: Optional[str],
    session_id: Optional[str],
    script: str,
    duration: Optional[float] = None,
):
    session = load_session(source, input_path, session_id)
    player, backend = open_player(session, duration)
    width = Config.track_width()

    print(f"=== PLAYBACK ({session.id}) ===")
    print(render_player(build_view(player.state, player.bookmarks, player.video_url), width))

    try:
        for step in parse_steps(script):
            apply_step(player, backend, step)
            print(f"\n> {' '.join(step)}")
            print(render_player(build_view(player.state, player.bookmarks, player.video_url), width))
    finally:
        player.dispose()


# ==================================================
# Review Database Commands
# ==================================================

def run_import(input_path: str, session_id: Optional[str] = None):
    session = JsonSessionSource(input_path).load()
    if session_id:
        session.id = session_id

    dao = SessionDAO()
    dao.save_session(session)
    print(f"[OK] Session '{session.id}' imported ({len(session.violations)} violations)")


def run_sessions():
    dao = SessionDAO()
    records = dao.list_sessions()

    if not records:
        print("No sessions found.")
        return

    print("=== SESSIONS ===")
    for r in records:
        count = len(r.to_session().violations)
        print(f"{r.id} | {r.video_url} | violations={count} | updated={r.updated_at}")
