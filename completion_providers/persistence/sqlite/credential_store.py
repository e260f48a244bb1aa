"""SQLite-backed ``CredentialStore``.

Each operation opens a short-lived session on a worker thread
(``asyncio.to_thread``) so the event loop never blocks on disk I/O or lock
waits. Writes are upserts keyed by endpoint URL; deletes are idempotent.
"""

from __future__ import annotations

import asyncio
import sqlite3
from typing import Optional, Tuple

from .engine import db_session


class CredentialRepoSqlite:
    """Synchronous SQL operations over an open connection (no implicit commit)."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def get(self, url: str) -> Optional[Tuple[str, bytes]]:
        row = self.conn.execute(
            "SELECT username, secret FROM credentials WHERE url = ?", (url,)
        ).fetchone()
        return (row["username"], bytes(row["secret"])) if row else None

    def upsert(self, url: str, username: str, secret: bytes) -> None:
        self.conn.execute(
            "INSERT INTO credentials(url, username, secret, updated_at) VALUES(?, ?, ?, CURRENT_TIMESTAMP) "
            "ON CONFLICT(url) DO UPDATE SET username=excluded.username, secret=excluded.secret, "
            "updated_at=CURRENT_TIMESTAMP",
            (url, username, sqlite3.Binary(secret)),
        )

    def delete(self, url: str) -> None:
        self.conn.execute("DELETE FROM credentials WHERE url = ?", (url,))


class SqliteCredentialStore:
    """Persist ``(username, secret)`` pairs per endpoint URL in SQLite."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    def _read(self, url: str) -> Optional[Tuple[str, bytes]]:
        with db_session(self.db_path) as conn:
            return CredentialRepoSqlite(conn).get(url)

    def _write(self, url: str, username: str, secret: bytes) -> None:
        with db_session(self.db_path) as conn:
            CredentialRepoSqlite(conn).upsert(url, username, secret)

    def _delete(self, url: str) -> None:
        with db_session(self.db_path) as conn:
            CredentialRepoSqlite(conn).delete(url)

    async def read(self, url: str) -> Optional[Tuple[str, bytes]]:
        return await asyncio.to_thread(self._read, url)

    async def write(self, url: str, username: str, secret: bytes) -> None:
        await asyncio.to_thread(self._write, url, username, bytes(secret))

    async def delete(self, url: str) -> None:
        await asyncio.to_thread(self._delete, url)


__all__ = ["CredentialRepoSqlite", "SqliteCredentialStore"]
