import json

import pytest

from player.session_source import DbSessionSource, JsonSessionSource, session_from_dict
from review_db import SessionDAO
from tests.conftest import VIDEO_URL, VIOLATIONS


def test_json_source(session_file):
    session = JsonSessionSource(session_file).load()

    assert session.id == "attempt-42"
    assert session.video_url == VIDEO_URL
    assert session.violations == VIOLATIONS
    assert session.duration_seconds == 300.0


def test_original_field_names_are_merged():
    session = session_from_dict(
        {
            "id": "s1",
            "recording_url": VIDEO_URL,
            "recording_duration_seconds": 90,
            "violation_timestamps": ["[00:10] Tab switch detected"],
            "face_violations": ["[00:20] Face not visible"],
            "object_violations": ["[00:30] Phone detected", None],
        }
    )

    assert session.video_url == VIDEO_URL
    assert session.duration_seconds == 90.0
    assert session.violations == [
        "[00:10] Tab switch detected",
        "[00:20] Face not visible",
        "[00:30] Phone detected",
    ]


def test_missing_url_rejected():
    with pytest.raises(ValueError):
        session_from_dict({"violations": []})


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(RuntimeError) as exc:
        JsonSessionSource(str(path)).load()

    assert isinstance(exc.value.__cause__, json.JSONDecodeError)


def test_non_object_json(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(ValueError):
        JsonSessionSource(str(path)).load()


def test_db_source(session_file, db_path):
    dao = SessionDAO(db_path)
    dao.save_session(JsonSessionSource(session_file).load())

    session = DbSessionSource("attempt-42", dao=dao).load()

    assert session.violations == VIOLATIONS


def test_db_source_unknown_id(db_path):
    with pytest.raises(LookupError):
        DbSessionSource("missing", dao=SessionDAO(db_path)).load()


@pytest.mark.parametrize(
    "data",
    [
        {"video_url": VIDEO_URL, "violations": 5},
        {"video_url": VIDEO_URL, "face_violations": {"00:10": "Face not visible"}},
    ],
)
def test_violation_feed_must_be_a_list(data):
    with pytest.raises(ValueError):
        session_from_dict(data)
