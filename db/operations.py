"""
Database operations for Footy Career.
Save slots hold the serialize() bytes of a GameState; the hall of fame keeps one row
per retired player with the headline numbers broken out for listing.
"""
import json
import re
import sqlite3
from typing import Any

from .schema import get_connection
from models.errors import NotFoundError, ValidationError
from models.state import FORMAT_VERSION, GameState, HallOfFameRecord, deserialize, serialize

SLOT_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,32}$")


def validate_slot_name(slot: str) -> str:
    """Slot names are 1-32 characters of letters, digits, '_' or '-'."""
    if not isinstance(slot, str) or not SLOT_PATTERN.match(slot):
        raise ValidationError(
            f"Invalid save slot name {slot!r}",
            {"field": "slot", "pattern": SLOT_PATTERN.pattern},
        )
    return slot


def save_game(conn: sqlite3.Connection, slot: str, state: GameState) -> None:
    """Write *state* to *slot*, replacing whatever was there."""
    validate_slot_name(slot)
    payload = serialize(state)
    player_name = state.profile.name if state.profile is not None else None
    conn.execute(
        """
        INSERT INTO save_slots (slot, payload, player_name, year, round, phase, format_version, updated_at)
        VALUES (?, ?, ?, ?, ?, ?, ?, datetime('now'))
        ON CONFLICT(slot) DO UPDATE SET
            payload = excluded.payload,
            player_name = excluded.player_name,
            year = excluded.year,
            round = excluded.round,
            phase = excluded.phase,
            format_version = excluded.format_version,
            updated_at = excluded.updated_at
        """,
        (slot, payload, player_name, state.year, state.round, state.phase, FORMAT_VERSION),
    )
    conn.commit()


def load_game(conn: sqlite3.Connection | None, slot: str) -> GameState:
    """Read and decode the state in *slot*.

    Raises NotFoundError for an empty slot and CorruptSaveError when the stored
    payload cannot be decoded.
    """
    validate_slot_name(slot)
    close = False
    if conn is None:
        conn = get_connection()
        close = True
    try:
        row = conn.execute("SELECT payload FROM save_slots WHERE slot = ?", (slot,)).fetchone()
        if row is None:
            raise NotFoundError(f"No save in slot {slot!r}", {"slot": slot})
        return deserialize(bytes(row["payload"]))
    finally:
        if close:
            conn.close()


def list_saves(conn: sqlite3.Connection | None = None) -> list[dict[str, Any]]:
    """Return slot metadata, most recently written first. Payloads are not decoded."""
    close = False
    if conn is None:
        conn = get_connection()
        close = True
    try:
        rows = conn.execute(
            """SELECT slot, player_name, year, round, phase, format_version, updated_at
               FROM save_slots ORDER BY updated_at DESC, slot"""
        ).fetchall()
        return [dict(r) for r in rows]
    finally:
        if close:
            conn.close()


def delete_save(conn: sqlite3.Connection, slot: str) -> None:
    validate_slot_name(slot)
    cur = conn.execute("DELETE FROM save_slots WHERE slot = ?", (slot,))
    conn.commit()
    if cur.rowcount == 0:
        raise NotFoundError(f"No save in slot {slot!r}", {"slot": slot})


def insert_hall_of_fame(conn: sqlite3.Connection, record: HallOfFameRecord) -> int:
    """Insert a retired player and return the row id."""
    stats = record.career_stats
    cur = conn.execute(
        """
        INSERT INTO hall_of_fame (name, position, retired_year, retired_age, seasons, level,
                                  matches, goals, votes, premierships, record)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (
            record.name,
            record.position,
            record.retired_year,
            record.retired_age,
            record.seasons,
            record.level,
            stats.matches,
            stats.goals,
            stats.votes,
            stats.premierships,
            json.dumps(record.to_dict(), sort_keys=True),
        ),
    )
    conn.commit()
    return cur.lastrowid


def get_hall_of_fame(conn: sqlite3.Connection | None = None) -> list[HallOfFameRecord]:
    """Every retired player, best careers (most games) first."""
    close = False
    if conn is None:
        conn = get_connection()
        close = True
    try:
        rows = conn.execute(
            "SELECT record FROM hall_of_fame ORDER BY matches DESC, goals DESC, id"
        ).fetchall()
        return [HallOfFameRecord.from_dict(json.loads(r["record"])) for r in rows]
    finally:
        if close:
            conn.close()
