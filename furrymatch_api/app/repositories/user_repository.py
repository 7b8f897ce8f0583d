"""
Repository for the ``users`` table.

Accounts are addressed by ``login`` as often as by ``id``, so this
repository adds login and email lookups on top of the generic CRUD.
Logins and emails are compared lower-cased.
"""

from typing import Optional

from furrymatch_api.app.core.db import get_connection
from furrymatch_api.app.repositories.base import BaseRepository
from furrymatch_api.app.schemas.user import UserRecord


class UserRepository(BaseRepository[UserRecord]):
    table = "users"
    model = UserRecord
    columns = ("login", "email", "first_name", "last_name", "password", "activated", "role_id")
    sortable = frozenset({"id", "login", "email", "first_name", "last_name"})

    def find_by_login(self, login: str) -> Optional[UserRecord]:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT * FROM users WHERE login = ?", (login.lower(),)
            ).fetchone()
            return self._to_entity(row) if row else None
        finally:
            conn.close()

    def exists_by_email(self, email: str) -> bool:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT 1 FROM users WHERE lower(email) = ?", (email.lower(),)
            ).fetchone()
            return row is not None
        finally:
            conn.close()

    def delete_by_login(self, login: str) -> bool:
        conn = get_connection()
        try:
            cursor = conn.execute("DELETE FROM users WHERE login = ?", (login.lower(),))
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()

    def first_admin_id(self) -> Optional[int]:
        """Id of the earliest administrator, who may not delete itself."""
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id FROM users WHERE role_id = 1 ORDER BY id ASC LIMIT 1"
            ).fetchone()
            return row["id"] if row else None
        finally:
            conn.close()
