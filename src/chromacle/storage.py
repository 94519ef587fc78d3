"""Session and stats persistence over a simple key-value store."""

from __future__ import annotations

import json
import logging
import sqlite3
from pathlib import Path
from typing import Protocol, runtime_checkable

from chromacle.config import DEFAULT_DB_PATH, MAX_GUESSES, SESSION_KEY, STATS_KEY, WIN_THRESHOLD
from chromacle.models import Session, Stats

logger = logging.getLogger(__name__)

_PARSE_ERRORS = (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError)


@runtime_checkable
class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Non-durable store, used when the database is unavailable and in tests."""

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(data or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class SqliteStore:
    def __init__(self, db_path: Path = DEFAULT_DB_PATH) -> None:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(str(db_path))
        self._init_db()

    def _init_db(self) -> None:
        self.conn.execute("""
            CREATE TABLE IF NOT EXISTS kv (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        self.conn.commit()

    def get(self, key: str) -> str | None:
        row = self.conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        self.conn.execute(
            """INSERT INTO kv (key, value) VALUES (?, ?)
               ON CONFLICT(key) DO UPDATE SET value = excluded.value,
                                              updated_at = CURRENT_TIMESTAMP""",
            (key, value),
        )
        self.conn.commit()

    def close(self) -> None:
        self.conn.close()


def load_session(store: KeyValueStore, today: str) -> Session | None:
    """Return today's stored session, or None if absent, unreadable, stale, or inconsistent."""
    raw = store.get(SESSION_KEY)
    if not raw:
        return None
    try:
        session = Session.from_dict(json.loads(raw))
    except _PARSE_ERRORS as exc:
        logger.warning("Discarding unreadable session: %s", exc)
        return None
    if session.date != today:
        logger.debug("Stored session is from %s, today is %s", session.date, today)
        return None
    problem = _session_problem(session)
    if problem:
        logger.warning("Discarding inconsistent session: %s", problem)
        return None
    return session


def _session_problem(session: Session) -> str | None:
    count = len(session.guesses)
    if count > MAX_GUESSES:
        return f"{count} guesses"
    if session.game_over != (session.won or count == MAX_GUESSES):
        return f"gameOver={session.game_over} with won={session.won} after {count} guesses"
    if session.won and (not session.guesses or session.guesses[-1].closeness > WIN_THRESHOLD):
        return "won without a winning guess"
    if any(g.closeness <= WIN_THRESHOLD for g in session.guesses[:-1]):
        return "play continued after a winning guess"
    if session.guesses and not session.won and session.guesses[-1].closeness <= WIN_THRESHOLD:
        return "winning guess not marked as won"
    return None


def save_session(store: KeyValueStore, session: Session) -> None:
    store.set(SESSION_KEY, json.dumps(session.to_dict(), ensure_ascii=False))


def load_stats(store: KeyValueStore) -> Stats:
    """Return stored stats, or zeroed stats if absent or unreadable."""
    raw = store.get(STATS_KEY)
    if not raw:
        return Stats()
    try:
        stats = Stats.from_dict(json.loads(raw))
    except _PARSE_ERRORS as exc:
        logger.warning("Discarding unreadable stats: %s", exc)
        return Stats()
    if not _stats_consistent(stats):
        logger.warning("Discarding inconsistent stats: %s", stats)
        return Stats()
    return stats


def _stats_consistent(stats: Stats) -> bool:
    if min(stats.played, stats.won, stats.streak, stats.max_streak) < 0:
        return False
    return stats.streak <= stats.max_streak <= stats.won <= stats.played


def save_stats(store: KeyValueStore, stats: Stats) -> None:
    store.set(STATS_KEY, json.dumps(stats.to_dict()))
