"""SQLite-backed response cache shared across CLI invocations."""
import json
import logging
import sqlite3
import time
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from domain.interfaces import IResponseCache

logger = logging.getLogger(__name__)


class SqliteResponseCache(IResponseCache):
    """Stores assembled responses as JSON with their fetch time (epoch seconds)."""

    def __init__(self, db_path: Path | str, ttl_seconds: float, clock: Callable[[], float] = time.time):
        self.db_path = str(db_path)
        if self.db_path != ":memory:":
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._conn = sqlite3.connect(self.db_path)
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._conn.execute("PRAGMA synchronous=NORMAL")
        self._create_tables()

    def _create_tables(self) -> None:
        self._conn.execute(
            "CREATE TABLE IF NOT EXISTS response_cache (cache_key TEXT PRIMARY KEY, payload TEXT NOT NULL, fetched_at REAL NOT NULL)"
        )
        self._conn.commit()

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        row = self._conn.execute(
            "SELECT payload, fetched_at FROM response_cache WHERE cache_key = ?", (key,)
        ).fetchone()
        if row is None:
            return None
        payload, fetched_at = row
        if self._clock() - fetched_at > self.ttl_seconds:
            self._conn.execute("DELETE FROM response_cache WHERE cache_key = ?", (key,))
            self._conn.commit()
            return None
        try:
            return json.loads(payload)
        except ValueError:
            logger.warning(f"Discarding unreadable cache entry {key}")
            return None

    def set(self, key: str, value: Dict[str, Any]) -> None:
        self._conn.execute(
            "INSERT OR REPLACE INTO response_cache(cache_key, payload, fetched_at) VALUES(?, ?, ?)",
            (key, json.dumps(value, ensure_ascii=False, default=str), self._clock()),
        )
        self._conn.commit()

    def purge_expired(self) -> int:
        cur = self._conn.execute(
            "DELETE FROM response_cache WHERE fetched_at < ?", (self._clock() - self.ttl_seconds,)
        )
        self._conn.commit()
        return cur.rowcount

    def close(self) -> None:
        self._conn.close()
