from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Sequence
from uuid import UUID

from ..core.enums import WorkStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_uuid, db_cursor, fetchall, fetchone, new_id
from .model import WorkDay, WorkDayWithLabour
from .repository import WorkDayRepository

_COLUMNS = "id, project_id, labour_id, work_date, status, notes, created_at"


def _to_work_day(row: dict) -> WorkDay:
    return WorkDay(
        id=as_uuid(row["id"]),
        project_id=as_uuid(row["project_id"]),
        labour_id=as_uuid(row["labour_id"]),
        work_date=row["work_date"],
        status=WorkStatus(row["status"]),
        notes=row.get("notes") or "",
        created_at=row["created_at"],
    )


def _to_work_day_with_labour(row: dict) -> WorkDayWithLabour:
    return WorkDayWithLabour(
        id=as_uuid(row["id"]),
        project_id=as_uuid(row["project_id"]),
        labour_id=as_uuid(row["labour_id"]),
        work_date=row["work_date"],
        status=WorkStatus(row["status"]),
        notes=row.get("notes") or "",
        created_at=row["created_at"],
        labour_name=row["labour_name"],
    )


class MySQLWorkDayRepository(WorkDayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        project_id: UUID,
        labour_id: UUID,
        work_date: date,
        status: WorkStatus,
        notes: str,
    ) -> WorkDay:
        work_day_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO work_days(id, project_id, labour_id, work_date, status, notes)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (work_day_id, str(project_id), str(labour_id), work_date, status.value, notes),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM work_days WHERE id=%s", (work_day_id,))
            return _to_work_day(fetchone(cur))

    def get_by_id(self, work_day_id: UUID) -> Optional[WorkDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM work_days WHERE id=%s", (str(work_day_id),))
            row = fetchone(cur)
            return _to_work_day(row) if row else None

    def list_by_project(self, project_id: UUID) -> Sequence[WorkDayWithLabour]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT w.id, w.project_id, w.labour_id, w.work_date, w.status, w.notes, w.created_at,
                       l.name AS labour_name
                FROM work_days w
                INNER JOIN labours l ON w.labour_id = l.id
                WHERE w.project_id=%s
                ORDER BY w.work_date DESC, l.name ASC
                """,
                (str(project_id),),
            )
            return [_to_work_day_with_labour(r) for r in fetchall(cur)]

    def list_by_project_and_date(self, project_id: UUID, work_date: date) -> Sequence[WorkDayWithLabour]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT w.id, w.project_id, w.labour_id, w.work_date, w.status, w.notes, w.created_at,
                       l.name AS labour_name
                FROM work_days w
                INNER JOIN labours l ON w.labour_id = l.id
                WHERE w.project_id=%s AND w.work_date=%s
                ORDER BY l.name ASC
                """,
                (str(project_id), work_date),
            )
            return [_to_work_day_with_labour(r) for r in fetchall(cur)]

    def list_by_labour(self, labour_id: UUID) -> Sequence[WorkDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM work_days WHERE labour_id=%s ORDER BY work_date DESC",
                (str(labour_id),),
            )
            return [_to_work_day(r) for r in fetchall(cur)]

    def update(self, work_day_id: UUID, *, status: WorkStatus, notes: str) -> Optional[WorkDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE work_days SET status=%s, notes=%s WHERE id=%s",
                (status.value, notes, str(work_day_id)),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM work_days WHERE id=%s", (str(work_day_id),))
            row = fetchone(cur)
            return _to_work_day(row) if row else None

    def delete(self, work_day_id: UUID) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM work_days WHERE id=%s", (str(work_day_id),))
            return cur.rowcount > 0

    def count_by_status(self, project_id: UUID, labour_id: UUID) -> Mapping[WorkStatus, int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT status, COUNT(*) AS days
                FROM work_days
                WHERE project_id=%s AND labour_id=%s
                GROUP BY status
                """,
                (str(project_id), str(labour_id)),
            )
            return {WorkStatus(r["status"]): int(r["days"]) for r in fetchall(cur)}
