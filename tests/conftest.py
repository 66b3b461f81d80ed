import json

import pytest

from player.engine import ViolationTimelinePlayer
from player.media import SimulatedMediaBackend

VIDEO_URL = "https://cdn.example.com/recordings/attempt-42.webm"

VIOLATIONS = [
    "[03:10] Face not visible",
    "[00:30] Multiple faces detected",
    "no timestamp here",
    "[02:40] Mobile phone detected",
]


@pytest.fixture
def backend():
    return SimulatedMediaBackend(duration=300.0)


@pytest.fixture
def player(backend):
    p = ViolationTimelinePlayer(VIDEO_URL, VIOLATIONS, backend)
    backend.finish_loading()
    yield p
    p.dispose()


@pytest.fixture
def make_player():
    def _make(duration=100.0, violations=(), load=True):
        backend = SimulatedMediaBackend(duration=duration)
        p = ViolationTimelinePlayer(VIDEO_URL, list(violations), backend)
        if load:
            backend.finish_loading()
        return p, backend

    return _make


@pytest.fixture
def session_file(tmp_path):
    path = tmp_path / "session.json"
    path.write_text(
        json.dumps(
            {
                "id": "attempt-42",
                "video_url": VIDEO_URL,
                "duration_seconds": 300,
                "violations": VIOLATIONS,
            }
        ),
        encoding="utf-8",
    )
    return str(path)


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "reviews.db")
