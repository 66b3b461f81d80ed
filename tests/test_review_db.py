import sqlite3

import pytest

from player.session import ReviewSession
from review_db import SessionDAO


def test_save_and_get(db_path):
    dao = SessionDAO(db_path)
    dao.save_session(
        ReviewSession(
            id="s1",
            video_url="https://cdn.example.com/s1.mp4",
            violations=["[00:10] a", "[00:20] b"],
            duration_seconds=120.0,
            assessment_id="a-1",
        )
    )

    session = dao.get_session("s1")

    assert session.video_url == "https://cdn.example.com/s1.mp4"
    assert session.violations == ["[00:10] a", "[00:20] b"]
    assert session.duration_seconds == 120.0
    assert session.assessment_id == "a-1"
    assert session.user_id is None


def test_get_missing_returns_none(db_path):
    assert SessionDAO(db_path).get_session("nope") is None


def test_save_replaces_and_keeps_created_at(db_path):
    dao = SessionDAO(db_path)
    dao.save_session(ReviewSession(id="s1", video_url="u1"))
    first = dao.list_sessions()[0]

    dao.save_session(ReviewSession(id="s1", video_url="u2", violations=["[00:01] x"]))
    records = dao.list_sessions()

    assert len(records) == 1
    assert records[0].video_url == "u2"
    assert records[0].created_at == first.created_at
    assert records[0].to_session().violations == ["[00:01] x"]


def test_list_empty(db_path):
    assert SessionDAO(db_path).list_sessions() == []


@pytest.mark.parametrize(
    "session",
    [
        ReviewSession(id="", video_url="u"),
        ReviewSession(id="s", video_url=""),
        ReviewSession(id="x" * 200, video_url="u"),
        ReviewSession(id="s", video_url="u", violations=[123]),
    ],
)
def test_invalid_sessions_rejected(db_path, session):
    with pytest.raises(ValueError):
        SessionDAO(db_path).save_session(session)


class _BrokenConnection:
    def __init__(self):
        self.closed = False

    def cursor(self):
        return self

    def execute(self, *args):
        raise sqlite3.OperationalError("disk I/O error")

    def close(self):
        self.closed = True


@pytest.mark.parametrize(
    "call",
    [
        lambda dao: dao.save_session(ReviewSession(id="s1", video_url="u")),
        lambda dao: dao.get_session("s1"),
        lambda dao: dao.list_sessions(),
    ],
)
def test_connection_closed_when_query_fails(db_path, monkeypatch, call):
    dao = SessionDAO(db_path)
    conn = _BrokenConnection()
    monkeypatch.setattr("review_db.dao.get_connection", lambda db_path=None: conn)

    with pytest.raises(sqlite3.OperationalError):
        call(dao)

    assert conn.closed
