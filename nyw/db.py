"""SQLite storage of locks and the applications recorded with them."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from datetime import datetime

from nyw.errors import ApplicationError
from nyw.i18n import Label
from nyw.models import Application, Lock, LockAdd

_SCHEMA = """
CREATE TABLE IF NOT EXISTS locks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    hash TEXT NOT NULL,
    timestamp DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP
);
CREATE TABLE IF NOT EXISTS applications (
    id INTEGER NOT NULL,
    name TEXT NOT NULL,
    action TEXT NOT NULL
);
"""


@contextmanager
def _database_errors() -> Iterator[None]:
    try:
        yield
    except sqlite3.Error as exc:
        raise ApplicationError(Label.ERROR_DATABASE_ERROR, [str(exc)]) from exc


def connect(path) -> sqlite3.Connection:
    """Open (creating if missing) the lock database at *path*."""
    try:
        conn = sqlite3.connect(path)
    except sqlite3.Error as exc:
        raise ApplicationError(Label.ERROR_GET_POOL_ERROR, [str(exc)]) from exc
    with _database_errors():
        conn.executescript(_SCHEMA)
    return conn


def save_applications(conn: sqlite3.Connection, applications: Iterable[Application]) -> None:
    """Insert every application row."""
    rows = [(app.id, app.name, app.action) for app in applications]
    with _database_errors(), conn:
        conn.executemany(
            "INSERT INTO applications (id, name, action) VALUES (?, ?, ?)", rows
        )


def get_applications_by_lock_id(conn: sqlite3.Connection, lock_id: int) -> list[Application]:
    with _database_errors():
        rows = conn.execute(
            "SELECT id, name, action FROM applications WHERE id = ?", (lock_id,)
        ).fetchall()
    return [Application(*row) for row in rows]


def get_applications_by_lock_id_and_action(
    conn: sqlite3.Connection, lock_id: int, action: str
) -> list[Application]:
    with _database_errors():
        rows = conn.execute(
            "SELECT id, name, action FROM applications WHERE id = ? AND action = ?",
            (lock_id, action),
        ).fetchall()
    return [Application(*row) for row in rows]


def get_latest_lock_id(conn: sqlite3.Connection) -> int | None:
    """Id of the most recent lock, or None if there is none."""
    with _database_errors():
        row = conn.execute(
            "SELECT id FROM locks ORDER BY timestamp DESC, id DESC LIMIT 1"
        ).fetchone()
    return row[0] if row is not None else None


def get_lock_by_id(conn: sqlite3.Connection, lock_id: int) -> Lock | None:
    with _database_errors():
        row = conn.execute(
            "SELECT id, hash, timestamp FROM locks WHERE id = ?", (lock_id,)
        ).fetchone()
    if row is None:
        return None
    lock_id, lock_hash, timestamp = row
    return Lock(id=lock_id, hash=lock_hash, timestamp=datetime.fromisoformat(timestamp))


def save_lock(conn: sqlite3.Connection, lock: LockAdd) -> Lock:
    """Insert a lock and return it as stored."""
    with _database_errors(), conn:
        cursor = conn.execute("INSERT INTO locks (hash) VALUES (?)", (lock.hash,))
    stored = get_lock_by_id(conn, cursor.lastrowid)
    if stored is None:
        raise ApplicationError(Label.ERROR_DATABASE_ERROR, ["inserted lock not found"])
    return stored