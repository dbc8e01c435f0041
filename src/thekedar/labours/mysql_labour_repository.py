from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence
from uuid import UUID

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, as_uuid, db_cursor, fetchall, fetchone, new_id
from .model import Labour
from .repository import LabourRepository

_COLUMNS = "id, name, phone, daily_wage, created_at, updated_at"


def _to_labour(row: dict) -> Labour:
    return Labour(
        id=as_uuid(row["id"]),
        name=row["name"],
        phone=row.get("phone") or "",
        daily_wage=as_decimal(row["daily_wage"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class MySQLLabourRepository(LabourRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, name: str, phone: str, daily_wage: Decimal) -> Labour:
        labour_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO labours(id, name, phone, daily_wage) VALUES(%s,%s,%s,%s)",
                (labour_id, name, phone, daily_wage),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM labours WHERE id=%s", (labour_id,))
            return _to_labour(fetchone(cur))

    def get_by_id(self, labour_id: UUID) -> Optional[Labour]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM labours WHERE id=%s", (str(labour_id),))
            row = fetchone(cur)
            return _to_labour(row) if row else None

    def list_all(self) -> Sequence[Labour]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM labours ORDER BY name ASC")
            return [_to_labour(r) for r in fetchall(cur)]

    def list_by_project(self, project_id: UUID) -> Sequence[Labour]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT l.id, l.name, l.phone, l.daily_wage, l.created_at, l.updated_at
                FROM labours l
                INNER JOIN project_labours pl ON l.id = pl.labour_id
                WHERE pl.project_id=%s
                ORDER BY l.name ASC
                """,
                (str(project_id),),
            )
            return [_to_labour(r) for r in fetchall(cur)]

    def update(self, labour_id: UUID, *, name: str, phone: str, daily_wage: Decimal) -> Optional[Labour]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE labours
                SET name=%s, phone=%s, daily_wage=%s, updated_at=CURRENT_TIMESTAMP
                WHERE id=%s
                """,
                (name, phone, daily_wage, str(labour_id)),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM labours WHERE id=%s", (str(labour_id),))
            row = fetchone(cur)
            return _to_labour(row) if row else None

    def delete(self, labour_id: UUID) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM labours WHERE id=%s", (str(labour_id),))
            return cur.rowcount > 0

    def assign_to_project(self, project_id: UUID, labour_id: UUID) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT IGNORE INTO project_labours(project_id, labour_id) VALUES(%s,%s)",
                (str(project_id), str(labour_id)),
            )

    def remove_from_project(self, project_id: UUID, labour_id: UUID) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM project_labours WHERE project_id=%s AND labour_id=%s",
                (str(project_id), str(labour_id)),
            )
            return cur.rowcount > 0

    def is_assigned(self, project_id: UUID, labour_id: UUID) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT 1 AS assigned FROM project_labours WHERE project_id=%s AND labour_id=%s",
                (str(project_id), str(labour_id)),
            )
            return fetchone(cur) is not None
