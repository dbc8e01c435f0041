from __future__ import annotations

from typing import Optional, Sequence
from uuid import UUID

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_uuid, db_cursor, fetchall, fetchone, new_id
from .model import Project
from .repository import ProjectRepository

_COLUMNS = "id, user_id, name, description, created_at, updated_at"


def _to_project(row: dict) -> Project:
    return Project(
        id=as_uuid(row["id"]),
        user_id=as_uuid(row["user_id"]),
        name=row["name"],
        description=row.get("description") or "",
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class MySQLProjectRepository(ProjectRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, user_id: UUID, name: str, description: str) -> Project:
        project_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO projects(id, user_id, name, description) VALUES(%s,%s,%s,%s)",
                (project_id, str(user_id), name, description),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM projects WHERE id=%s", (project_id,))
            return _to_project(fetchone(cur))

    def get_by_id(self, project_id: UUID) -> Optional[Project]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM projects WHERE id=%s", (str(project_id),))
            row = fetchone(cur)
            return _to_project(row) if row else None

    def list_by_user(self, user_id: UUID) -> Sequence[Project]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM projects WHERE user_id=%s ORDER BY created_at DESC",
                (str(user_id),),
            )
            return [_to_project(r) for r in fetchall(cur)]

    def update(self, project_id: UUID, *, name: str, description: str) -> Optional[Project]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE projects
                SET name=%s, description=%s, updated_at=CURRENT_TIMESTAMP
                WHERE id=%s
                """,
                (name, description, str(project_id)),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM projects WHERE id=%s", (str(project_id),))
            row = fetchone(cur)
            return _to_project(row) if row else None

    def delete(self, project_id: UUID) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM projects WHERE id=%s", (str(project_id),))
            return cur.rowcount > 0

    def is_owner(self, project_id: UUID, user_id: UUID) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT 1 AS owned FROM projects WHERE id=%s AND user_id=%s",
                (str(project_id), str(user_id)),
            )
            return fetchone(cur) is not None
