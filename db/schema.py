"""
SQLite schema for Footy Career.
One DB file holds every named save slot plus the hall of fame of retired players.
A save slot stores the serialized GameState bytes as-is.
"""
import sqlite3
from pathlib import Path

# Default save path (relative to project root)
DB_DIR = "data"
DB_FILENAME = "footy.db"


def get_db_path() -> Path:
    """Return absolute path to the default save DB file."""
    root = Path(__file__).resolve().parent.parent
    return root / DB_DIR / DB_FILENAME


def _ensure_db_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def get_connection(db_path: str | Path | None = None) -> sqlite3.Connection:
    """Open a connection to the save DB. Creates dir and file if needed.
    timeout: seconds to wait for lock (avoids 'database is locked' under concurrent requests).
    """
    path = Path(db_path) if db_path else get_db_path()
    _ensure_db_dir(path)
    conn = sqlite3.connect(str(path), timeout=15.0)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(conn: sqlite3.Connection | None = None) -> None:
    """Create all tables if they do not exist."""
    close = False
    if conn is None:
        conn = get_connection()
        close = True
    try:
        conn.executescript("""
            CREATE TABLE IF NOT EXISTS save_slots (
                slot TEXT PRIMARY KEY,
                payload BLOB NOT NULL,
                player_name TEXT,
                year INTEGER NOT NULL DEFAULT 1,
                round INTEGER NOT NULL DEFAULT 1,
                phase TEXT NOT NULL,
                format_version INTEGER NOT NULL DEFAULT 1,
                updated_at TEXT DEFAULT (datetime('now'))
            );

            CREATE TABLE IF NOT EXISTS hall_of_fame (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                position TEXT NOT NULL,
                retired_year INTEGER NOT NULL,
                retired_age INTEGER NOT NULL,
                seasons INTEGER NOT NULL DEFAULT 0,
                level INTEGER NOT NULL DEFAULT 1,
                matches INTEGER NOT NULL DEFAULT 0,
                goals INTEGER NOT NULL DEFAULT 0,
                votes INTEGER NOT NULL DEFAULT 0,
                premierships INTEGER NOT NULL DEFAULT 0,
                record TEXT NOT NULL,
                created_at TEXT DEFAULT (datetime('now'))
            );
        """)
        conn.commit()
    finally:
        if close:
            conn.close()

