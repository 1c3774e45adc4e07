"""
SQLite database integration.

``Database`` turns the configured connection string into something
``sqlite3`` can open, hands out short‑lived connections
(``get_connection``/``get_cursor``) and creates the ``users`` table on
startup (``init_db``).  Every repository call opens its own
connection, so the object can be shared by concurrently running
request handlers.

In‑memory stores use a named shared‑cache database.  SQLite drops such
a database as soon as its last connection closes, so an anchor
connection is kept open until ``close`` is called.
"""

import logging
import os
import sqlite3
import uuid
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

from .config import Settings
from .exceptions import DatabaseConfigError

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    email TEXT NOT NULL
);
"""

_MEMORY_TARGETS = {"", ":memory:"}


def parse_database_url(url: str) -> Tuple[str, bool]:
    """Split a connection string into ``(path, in_memory)``.

    Understands ``sqlite:///relative.db``, ``sqlite:////abs/path.db``,
    bare file paths, ``sqlite://`` and ``:memory:``.  Relative paths are
    resolved against the current working directory.  Any other scheme
    raises ``DatabaseConfigError``.
    """
    url = (url or "").strip()
    path = url
    if "://" in url:
        scheme, rest = url.split("://", 1)
        if scheme.lower() not in {"sqlite", "sqlite3"}:
            raise DatabaseConfigError(f"Unsupported database scheme '{scheme}' in DB_URL")
        # The first slash after the scheme separator belongs to the URL
        # syntax, not the path.
        path = rest[1:] if rest.startswith("/") else rest
    if path in _MEMORY_TARGETS:
        return ":memory:", True
    return os.path.abspath(path), False


class Database:
    """Connection factory for the users store."""

    def __init__(self, url: str, user: str = "", password: str = "") -> None:
        self.url = url
        self.path, self.in_memory = parse_database_url(url)
        if user or password:
            logger.debug("DB_USER/DB_PASSWORD are ignored by the SQLite store")
        self._memory_uri: Optional[str] = None
        self._anchor: Optional[sqlite3.Connection] = None
        if self.in_memory:
            self._memory_uri = f"file:aws_demo_{uuid.uuid4().hex}?mode=memory&cache=shared"
            self._anchor = self._connect()

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.database_url, settings.database_user, settings.database_password)

    def _connect(self) -> sqlite3.Connection:
        if self.in_memory:
            conn = sqlite3.connect(self._memory_uri, uri=True, check_same_thread=False)
        else:
            conn = sqlite3.connect(self.path, check_same_thread=False)
        # Return rows as dict‑like objects keyed by column name
        conn.row_factory = sqlite3.Row
        return conn

    def get_connection(self) -> sqlite3.Connection:
        """Create and return a new connection.  Callers must close it."""
        return self._connect()

    @contextmanager
    def get_cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor; commit on success, roll back on error, always close."""
        conn = self.get_connection()
        try:
            yield conn.cursor()
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_db(self) -> None:
        """Create the ``users`` table if it does not exist yet."""
        with self.get_cursor() as cursor:
            cursor.executescript(SCHEMA)
        logger.info("Database ready at %s", ":memory:" if self.in_memory else self.path)

    def close(self) -> None:
        if self._anchor is not None:
            self._anchor.close()
            self._anchor = None
