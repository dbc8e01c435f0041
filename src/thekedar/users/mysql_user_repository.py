from __future__ import annotations

from typing import Optional
from uuid import UUID

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_uuid, db_cursor, fetchone, new_id
from .model import User
from .repository import UserRepository

_COLUMNS = "id, phone, name, created_at, updated_at"


def _to_user(row: dict) -> User:
    return User(
        id=as_uuid(row["id"]),
        phone=row["phone"],
        name=row.get("name") or "",
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: UUID) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE id=%s", (str(user_id),))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_phone(self, phone: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE phone=%s", (phone,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_or_create(self, phone: str) -> tuple[User, bool]:
        with db_cursor(self._conn_factory) as (_, cur):
            # The unique key on phone makes concurrent first logins collapse into one row.
            cur.execute("INSERT IGNORE INTO users(id, phone) VALUES(%s,%s)", (new_id(), phone))
            created = cur.rowcount > 0
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE phone=%s", (phone,))
            return _to_user(fetchone(cur)), created

    def update_name(self, user_id: UUID, name: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE users SET name=%s, updated_at=CURRENT_TIMESTAMP WHERE id=%s",
                (name, str(user_id)),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE id=%s", (str(user_id),))
            row = fetchone(cur)
            return _to_user(row) if row else None
