from __future__ import annotations

from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def new_id() -> str:
    return str(uuid4())


def as_uuid(value: Any) -> UUID:
    """CHAR(36) columns come back as str (or bytes with some connector builds)."""
    if isinstance(value, UUID):
        return value
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("ascii")
    return UUID(str(value))


def as_decimal(value: Any) -> Decimal:
    """DECIMAL columns arrive as Decimal; SUM() over no rows arrives as None."""
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))
