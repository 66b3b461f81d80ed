import json
import logging
from datetime import datetime, timezone
from typing import List, Optional

from player.session import ReviewSession

from .db import get_connection, init_db
from .models import SessionRecord

logger = logging.getLogger(__name__)


# --------------------------------------------------
# Input Validation Boundary
# --------------------------------------------------

def _validate_text(value: Optional[str], max_len: int = 255) -> str:
    """
    Validation for all externally supplied text.
    """
    if value is None:
        return ""

    if not isinstance(value, str):
        raise ValueError("Invalid input type")

    value = value.strip()

    if len(value) > max_len:
        raise ValueError(f"Input exceeds {max_len} characters")

    return value


def _validate_violations(violations) -> List[str]:
    return [_validate_text(v, 2000) for v in violations]


# --------------------------------------------------
# Session DAO
# --------------------------------------------------

class SessionDAO:
    def __init__(self, db_path=None):
        self.db_path = db_path
        init_db(db_path)

    def save_session(self, session: ReviewSession) -> None:
        now = datetime.now(timezone.utc).isoformat()

        session_id = _validate_text(session.id, 128)
        if not session_id:
            raise ValueError("Session id is required")

        video_url = _validate_text(session.video_url, 2048)
        if not video_url:
            raise ValueError("Session video_url is required")

        violations_json = json.dumps(_validate_violations(session.violations))
        assessment_id = _validate_text(session.assessment_id, 128) or None
        user_id = _validate_text(session.user_id, 128) or None

        conn = get_connection(self.db_path)
        try:
            cur = conn.cursor()

            existing = cur.execute(
                "SELECT created_at FROM sessions WHERE id = ?", (session_id,)
            ).fetchone()
            created_at = existing["created_at"] if existing else now

            cur.execute(
                """
                INSERT OR REPLACE INTO sessions (
                    id,
                    video_url,
                    violations_json,
                    duration_seconds,
                    assessment_id,
                    user_id,
                    created_at,
                    updated_at
                )
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    session_id,
                    video_url,
                    violations_json,
                    session.duration_seconds,
                    assessment_id,
                    user_id,
                    created_at,
                    now,
                ),
            )

            conn.commit()
        finally:
            conn.close()

        logger.info("Saved session %s", session_id)

    def get_session(self, session_id: str) -> Optional[ReviewSession]:
        session_id = _validate_text(session_id, 128)

        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                "SELECT * FROM sessions WHERE id = ?",
                (session_id,),
            ).fetchone()
        finally:
            conn.close()

        if row is None:
            return None

        return SessionRecord(**dict(row)).to_session()

    def list_sessions(self) -> List[SessionRecord]:
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute(
                "SELECT * FROM sessions ORDER BY created_at DESC, id"
            ).fetchall()
        finally:
            conn.close()

        return [SessionRecord(**dict(row)) for row in rows]
