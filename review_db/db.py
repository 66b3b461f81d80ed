import sqlite3

from player.config import Config


def get_connection(db_path=None):
    """
    Create a hardened SQLite connection.
    """
    conn = sqlite3.connect(db_path or Config.REVIEW_DB_PATH)
    conn.row_factory = sqlite3.Row

    # ---------------- SAFETY HARDENING ----------------
    # Crash safety + concurrent reads
    conn.execute("PRAGMA journal_mode=WAL;")
    conn.execute("PRAGMA synchronous=NORMAL;")
    conn.execute("PRAGMA foreign_keys=ON;")
    # --------------------------------------------------

    return conn


def init_db(db_path=None):
    """
    Initialise review database schema (idempotent).
    """
    conn = get_connection(db_path)
    try:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS sessions (
                id TEXT PRIMARY KEY,
                video_url TEXT NOT NULL,
                violations_json TEXT NOT NULL,
                duration_seconds REAL,
                assessment_id TEXT,
                user_id TEXT,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
            """
        )
        conn.commit()
    finally:
        conn.close()
