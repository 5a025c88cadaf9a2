from __future__ import annotations

import logging
import os
import sqlite3
import uuid
from collections.abc import Callable, Iterable
from datetime import date, datetime, timezone
from decimal import Decimal
from pathlib import Path

from errors import QueryError, WriteError
from models import LogDraft, LogEntry

logger = logging.getLogger(__name__)

SnapshotCallback = Callable[[list[LogEntry]], None]
ErrorCallback = Callable[[QueryError], None]


def _get_db_path() -> Path:
    """Get database path from environment variable or default location."""
    if env_path := os.environ.get("INTERNLOG_DB"):
        return Path(env_path)
    return Path(__file__).parent / "data" / "internlog.db"


DB_PATH = _get_db_path()

# Live queries, notified after every committed write for their user.
_subscriptions: list[Subscription] = []


def get_connection() -> sqlite3.Connection:
    DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(DB_PATH)
    conn.row_factory = sqlite3.Row
    return conn


def init_db():
    """Create tables if they don't exist."""
    conn = get_connection()
    conn.executescript("""
        CREATE TABLE IF NOT EXISTS logs (
            id TEXT PRIMARY KEY,
            user_id TEXT NOT NULL,
            date TEXT NOT NULL,
            hours TEXT,
            description TEXT NOT NULL,
            work_link TEXT,
            created_at TEXT NOT NULL
        );

        CREATE INDEX IF NOT EXISTS idx_logs_user_date ON logs(user_id, date);
    """)
    conn.commit()
    conn.close()


def _row_to_entry(row: sqlite3.Row) -> LogEntry:
    return LogEntry(
        id=row["id"],
        user_id=row["user_id"],
        date=date.fromisoformat(row["date"]),
        hours=Decimal(row["hours"]) if row["hours"] is not None else None,
        description=row["description"],
        work_link=row["work_link"],
        created_at=datetime.fromisoformat(row["created_at"]) if row["created_at"] else None,
    )


def _draft_values(draft: LogDraft) -> tuple:
    return (
        draft.date.isoformat(),
        str(draft.hours) if draft.hours is not None else None,
        draft.description,
        draft.work_link or None,
    )


def get_entries(user_id: str) -> list[LogEntry]:
    """All entries owned by a user, newest date first."""
    try:
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT * FROM logs WHERE user_id = ? ORDER BY date DESC, rowid",
                (user_id,),
            ).fetchall()
        finally:
            conn.close()
        return [_row_to_entry(row) for row in rows]
    except (sqlite3.Error, ValueError, ArithmeticError) as exc:
        # ValueError/InvalidOperation come from malformed stored rows
        raise QueryError(f"Could not query logs: {exc}") from exc


def get_entry(user_id: str, entry_id: str) -> LogEntry | None:
    """Get a single entry owned by a user."""
    try:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT * FROM logs WHERE id = ? AND user_id = ?",
                (entry_id, user_id),
            ).fetchone()
        finally:
            conn.close()
        return _row_to_entry(row) if row else None
    except (sqlite3.Error, ValueError, ArithmeticError) as exc:
        raise QueryError(f"Could not read log {entry_id}: {exc}") from exc


def create_entry(user_id: str, draft: LogDraft) -> str:
    """Insert a new entry and return its id.

    The caller's snapshot is not touched here; it changes when the live
    query delivers.
    """
    entry_id = uuid.uuid4().hex
    created_at = datetime.now(timezone.utc).isoformat()
    try:
        conn = get_connection()
        try:
            conn.execute(
                """
                INSERT INTO logs (id, user_id, date, hours, description, work_link, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (entry_id, user_id, *_draft_values(draft), created_at),
            )
            conn.commit()
        finally:
            conn.close()
    except sqlite3.Error as exc:
        logger.error("Error adding log for %s: %s", user_id, exc)
        raise WriteError(f"Could not save log: {exc}") from exc

    logger.info("Created log %s for %s on %s", entry_id, user_id, draft.date)
    _notify(user_id)
    return entry_id


def update_entry(user_id: str, entry_id: str, draft: LogDraft) -> None:
    """Overwrite date, hours, description and link of an existing entry."""
    try:
        conn = get_connection()
        try:
            cursor = conn.execute(
                """
                UPDATE logs SET date = ?, hours = ?, description = ?, work_link = ?
                WHERE id = ? AND user_id = ?
                """,
                (*_draft_values(draft), entry_id, user_id),
            )
            conn.commit()
            updated = cursor.rowcount
        finally:
            conn.close()
    except sqlite3.Error as exc:
        logger.error("Error updating log %s: %s", entry_id, exc)
        raise WriteError(f"Could not update log: {exc}") from exc

    if updated == 0:
        raise WriteError(f"Log {entry_id} no longer exists")

    logger.info("Updated log %s", entry_id)
    _notify(user_id)


def delete_entries(user_id: str, entry_ids: Iterable[str]) -> None:
    """Delete a batch of entries in one transaction.

    Either every id is removed or, if any of them is missing or owned by
    someone else, none are.
    """
    ids = list(dict.fromkeys(entry_ids))
    if not ids:
        return

    try:
        conn = get_connection()
        try:
            deleted = 0
            for entry_id in ids:
                cursor = conn.execute(
                    "DELETE FROM logs WHERE id = ? AND user_id = ?",
                    (entry_id, user_id),
                )
                deleted += cursor.rowcount
            if deleted != len(ids):
                conn.rollback()
            else:
                conn.commit()
        finally:
            conn.close()
    except sqlite3.Error as exc:
        logger.error("Error deleting logs: %s", exc)
        raise WriteError(f"Could not delete logs: {exc}") from exc

    if deleted != len(ids):
        raise WriteError(f"Only {deleted} of {len(ids)} logs exist; nothing was deleted")

    logger.info("Deleted %d logs for %s", len(ids), user_id)
    _notify(user_id)


# --- Live queries ---


class Subscription:
    """A live query over one user's entries.

    Delivers the full ordered snapshot on creation and after each write.
    A failed query is reported once; the subscription then stays loaded
    with an empty snapshot and delivers nothing further.
    """

    def __init__(self, user_id: str, on_snapshot: SnapshotCallback, on_error: ErrorCallback | None = None):
        self.user_id = user_id
        self.on_snapshot = on_snapshot
        self.on_error = on_error
        self.entries: list[LogEntry] = []
        self.loaded = False
        self.failed = False
        self.active = True

    def cancel(self) -> None:
        if not self.active:
            return
        self.active = False
        if self in _subscriptions:
            _subscriptions.remove(self)
        logger.debug("Cancelled live query for %s", self.user_id)

    def deliver(self, only_if_changed: bool = False) -> None:
        if not self.active or self.failed:
            return
        try:
            entries = get_entries(self.user_id)
        except QueryError as exc:
            self._fail(exc)
            return

        if only_if_changed and self.loaded and entries == self.entries:
            return
        self.entries = entries
        self.loaded = True
        self.on_snapshot(list(entries))

    def _fail(self, exc: QueryError) -> None:
        self.failed = True
        self.loaded = True
        self.entries = []
        if self in _subscriptions:
            _subscriptions.remove(self)
        logger.error("Live query for %s failed: %s", self.user_id, exc)
        if self.on_error is not None:
            self.on_error(exc)


def subscribe(user_id: str, on_snapshot: SnapshotCallback, on_error: ErrorCallback | None = None) -> Subscription:
    """Start a live query for a user's entries; call cancel() on teardown."""
    subscription = Subscription(user_id, on_snapshot, on_error)
    _subscriptions.append(subscription)
    logger.debug("Started live query for %s", user_id)
    subscription.deliver()
    return subscription


def _notify(user_id: str) -> None:
    for subscription in list(_subscriptions):
        if subscription.user_id == user_id:
            subscription.deliver()


def refresh() -> None:
    """Re-run live queries and deliver any that changed (e.g. writes from another process)."""
    for subscription in list(_subscriptions):
        subscription.deliver(only_if_changed=True)
