"""
Persistence for users.

``UserRepository`` maps ``User`` records onto the ``users`` table with
explicit parameterised statements.  Each method opens its own
connection through ``Database.get_cursor``, which commits on success
and rolls back on failure, so reads always observe previously
completed writes.
"""

import logging
import sqlite3
from typing import List, Optional

from ..core.db import Database
from ..core.exceptions import UserNotFoundError
from ..schemas.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Store for ``User`` records."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def count(self) -> int:
        with self.db.get_cursor() as cursor:
            row = cursor.execute("SELECT COUNT(*) AS count FROM users").fetchone()
            return row["count"]

    def find_all(self) -> List[User]:
        """Return every user, ordered by id."""
        with self.db.get_cursor() as cursor:
            rows = cursor.execute("SELECT id, name, email FROM users ORDER BY id ASC").fetchall()
            return [self._row_to_user(row) for row in rows]

    def find_by_id(self, user_id: int) -> Optional[User]:
        with self.db.get_cursor() as cursor:
            row = cursor.execute(
                "SELECT id, name, email FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
            return self._row_to_user(row) if row else None

    def exists_by_id(self, user_id: int) -> bool:
        with self.db.get_cursor() as cursor:
            row = cursor.execute("SELECT 1 FROM users WHERE id = ?", (user_id,)).fetchone()
            return row is not None

    def save(self, user: User) -> User:
        """Insert ``user`` when it has no id, otherwise update it in place.

        Returns a new ``User`` carrying the stored values.  Updating an
        id that is not in the table raises ``UserNotFoundError``.
        """
        if user.id is None:
            return self._insert(user)
        return self._update(user)

    def delete_by_id(self, user_id: int) -> bool:
        """Delete the user with ``user_id``.  Returns whether a row was removed."""
        with self.db.get_cursor() as cursor:
            cursor.execute("DELETE FROM users WHERE id = ?", (user_id,))
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info("Deleted user %s", user_id)
        return deleted

    def _insert(self, user: User) -> User:
        with self.db.get_cursor() as cursor:
            cursor.execute(
                "INSERT INTO users (name, email) VALUES (?, ?)",
                (user.name, user.email),
            )
            user_id = cursor.lastrowid
        logger.info("Created user %s (%s)", user_id, user.email)
        return User(id=user_id, name=user.name, email=user.email)

    def _update(self, user: User) -> User:
        with self.db.get_cursor() as cursor:
            cursor.execute(
                "UPDATE users SET name = ?, email = ? WHERE id = ?",
                (user.name, user.email, user.id),
            )
            if cursor.rowcount == 0:
                raise UserNotFoundError(user.id)
        logger.info("Updated user %s", user.id)
        return User(id=user.id, name=user.name, email=user.email)

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> User:
        return User(id=row["id"], name=row["name"], email=row["email"])
