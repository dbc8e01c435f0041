from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence
from uuid import UUID

from ..core.enums import PaymentType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, as_uuid, db_cursor, fetchall, fetchone, new_id
from .model import Payment, PaymentWithLabour
from .repository import PaymentRepository

_COLUMNS = "id, project_id, labour_id, amount, payment_date, payment_type, notes, created_at"


def _to_payment(row: dict) -> Payment:
    return Payment(
        id=as_uuid(row["id"]),
        project_id=as_uuid(row["project_id"]),
        labour_id=as_uuid(row["labour_id"]),
        amount=as_decimal(row["amount"]),
        payment_date=row["payment_date"],
        payment_type=PaymentType(row["payment_type"]),
        notes=row.get("notes") or "",
        created_at=row["created_at"],
    )


class MySQLPaymentRepository(PaymentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        project_id: UUID,
        labour_id: UUID,
        amount: Decimal,
        payment_date: date,
        payment_type: PaymentType,
        notes: str,
    ) -> Payment:
        payment_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payments(id, project_id, labour_id, amount, payment_date, payment_type, notes)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (payment_id, str(project_id), str(labour_id), amount, payment_date, payment_type.value, notes),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM payments WHERE id=%s", (payment_id,))
            return _to_payment(fetchone(cur))

    def get_by_id(self, payment_id: UUID) -> Optional[Payment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM payments WHERE id=%s", (str(payment_id),))
            row = fetchone(cur)
            return _to_payment(row) if row else None

    def list_by_project(self, project_id: UUID) -> Sequence[PaymentWithLabour]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT p.id, p.project_id, p.labour_id, p.amount, p.payment_date, p.payment_type,
                       p.notes, p.created_at, l.name AS labour_name
                FROM payments p
                INNER JOIN labours l ON p.labour_id = l.id
                WHERE p.project_id=%s
                ORDER BY p.payment_date DESC, l.name ASC
                """,
                (str(project_id),),
            )
            return [
                PaymentWithLabour(
                    id=as_uuid(r["id"]),
                    project_id=as_uuid(r["project_id"]),
                    labour_id=as_uuid(r["labour_id"]),
                    amount=as_decimal(r["amount"]),
                    payment_date=r["payment_date"],
                    payment_type=PaymentType(r["payment_type"]),
                    notes=r.get("notes") or "",
                    created_at=r["created_at"],
                    labour_name=r["labour_name"],
                )
                for r in fetchall(cur)
            ]

    def list_by_labour(self, labour_id: UUID) -> Sequence[Payment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM payments WHERE labour_id=%s ORDER BY payment_date DESC",
                (str(labour_id),),
            )
            return [_to_payment(r) for r in fetchall(cur)]

    def delete(self, payment_id: UUID) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM payments WHERE id=%s", (str(payment_id),))
            return cur.rowcount > 0

    def total_paid(self, project_id: UUID, labour_id: UUID) -> Decimal:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COALESCE(SUM(amount), 0) AS total
                FROM payments
                WHERE project_id=%s AND labour_id=%s
                """,
                (str(project_id), str(labour_id)),
            )
            row = fetchone(cur)
            return as_decimal(row["total"] if row else None)
