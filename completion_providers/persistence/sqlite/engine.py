"""SQLite engine helpers for the credential store.

Purpose
-------
Provide safe, centralized helpers for opening SQLite connections and ensuring
the ``credentials`` table exists.

External dependencies
---------------------
- Standard library only (``sqlite3``). No side effects at import time.

Timeout and reliability strategy
--------------------------------
- Applies a standard ``busy_timeout`` (milliseconds) from
  ``completion_providers.config.defaults`` to mitigate lock contention.
- Enables WAL journaling and NORMAL synchronous mode for durability with good
  interactive performance.
"""

from __future__ import annotations

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from ...config.defaults import (
    SQLITE_BUSY_TIMEOUT_MS,
    SQLITE_JOURNAL_MODE,
    SQLITE_SYNCHRONOUS,
)

DB_PATH_ENV = "PROVIDERS_CREDENTIALS_DB"
DEFAULT_DB_PATH = Path.home() / ".completion_providers" / "credentials.db"


def get_db_path(db_path: Optional[str] = None) -> Path:
    """Return a concrete database file path.

    Precedence: explicit ``db_path``, then ``PROVIDERS_CREDENTIALS_DB``, then
    ``DEFAULT_DB_PATH``. ``~`` is expanded.
    """
    raw = db_path or os.getenv(DB_PATH_ENV)
    return Path(raw).expanduser() if raw else DEFAULT_DB_PATH


def create_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Open a SQLite connection with the standard PRAGMA settings.

    The parent directory is created when missing. ``row_factory`` is
    ``sqlite3.Row``.
    """
    path = get_db_path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    conn.row_factory = sqlite3.Row
    conn.execute(f"PRAGMA journal_mode={SQLITE_JOURNAL_MODE};")
    conn.execute(f"PRAGMA synchronous={SQLITE_SYNCHRONOUS};")
    conn.execute(f"PRAGMA busy_timeout={SQLITE_BUSY_TIMEOUT_MS};")  # ms
    return conn


def init_schema(conn: sqlite3.Connection) -> None:
    """Create the ``credentials`` table if it does not exist, then commit.

    ``url`` is the endpoint the secret belongs to; ``secret`` is stored as the
    raw bytes handed to the store.
    """
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS credentials (
            url TEXT PRIMARY KEY,
            username TEXT NOT NULL,
            secret BLOB NOT NULL,
            updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
        );
        """
    )
    conn.commit()


@contextmanager
def db_session(db_path: Optional[str] = None) -> Iterator[sqlite3.Connection]:
    """Context manager yielding a connection with schema initialized.

    Commits on normal exit, rolls back on exception, always closes.
    """
    conn = create_connection(db_path)
    try:
        init_schema(conn)
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


__all__ = ["DEFAULT_DB_PATH", "DB_PATH_ENV", "get_db_path", "create_connection", "init_schema", "db_session"]
