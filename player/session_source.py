from abc import ABC, abstractmethod
import json
import logging
from typing import Any, Dict, List

from review_db import SessionDAO

from .session import ReviewSession

logger = logging.getLogger(__name__)

# Violation feeds as stored by the proctoring service, merged in this order
VIOLATION_FIELDS = ("violation_timestamps", "face_violations", "object_violations")


# ==================================================
# Session Source Contract
# ==================================================

class SessionSource(ABC):
    """
    Abstract session source.

    A session source is responsible ONLY for producing
    a ReviewSession ready for playback.
    """

    @abstractmethod
    def load(self) -> ReviewSession:
        raise NotImplementedError


def _as_strings(value: Any, name: str) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise ValueError(f"{name} must be a list of strings")
    return [v for v in value if isinstance(v, str)]


def session_from_dict(data: Dict[str, Any], default_id: str = "") -> ReviewSession:
    """
    Build a session from a record using either field naming.
    """
    video_url = data.get("video_url") or data.get("recording_url")
    if not video_url:
        raise ValueError("Session has no video_url / recording_url")

    if "violations" in data:
        violations = _as_strings(data["violations"], "violations")
    else:
        violations = []
        for name in VIOLATION_FIELDS:
            violations.extend(_as_strings(data.get(name), name))

    duration = data.get("duration_seconds", data.get("recording_duration_seconds"))

    return ReviewSession(
        id=str(data.get("id") or default_id),
        video_url=str(video_url),
        violations=violations,
        duration_seconds=float(duration) if duration is not None else None,
        assessment_id=data.get("assessment_id"),
        user_id=data.get("user_id"),
    )


# ==================================================
# JSON Session Source (Default)
# ==================================================

class JsonSessionSource(SessionSource):
    """
    Session source backed by a single JSON document.
    """

    def __init__(self, path: str):
        self.path = path

    def load(self) -> ReviewSession:
        with open(self.path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as err:
                raise RuntimeError(
                    f"Invalid JSON in {self.path}: {err}"
                ) from err

        if not isinstance(data, dict):
            raise ValueError(f"{self.path}: expected a JSON object")

        session = session_from_dict(data, default_id=self.path)
        logger.info(
            "Loaded session %s with %d violation(s)",
            session.id,
            len(session.violations),
        )
        return session


# ==================================================
# Review DB Session Source
# ==================================================

class DbSessionSource(SessionSource):
    """
    Session source backed by the local review database.
    """

    def __init__(self, session_id: str, dao=None):
        self.session_id = session_id
        self.dao = dao

    def load(self) -> ReviewSession:
        if self.dao is None:
            self.dao = SessionDAO()

        session = self.dao.get_session(self.session_id)
        if session is None:
            raise LookupError(f"Unknown session '{self.session_id}'")

        return session
