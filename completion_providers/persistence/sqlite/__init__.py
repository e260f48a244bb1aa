"""SQLite persistence for provider credentials."""

from .credential_store import CredentialRepoSqlite, SqliteCredentialStore
from .engine import create_connection, db_session, get_db_path, init_schema

__all__ = [
    "CredentialRepoSqlite",
    "SqliteCredentialStore",
    "create_connection",
    "db_session",
    "get_db_path",
    "init_schema",
]
