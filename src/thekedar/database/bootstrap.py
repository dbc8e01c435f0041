from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Iterable, Mapping

from .connection import DBConfig, open_connection

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"

_DATABASE_DIRECTIVE = re.compile(r"^\s*(CREATE\s+DATABASE|USE)\b", re.IGNORECASE)


def iter_schema_statements(sql: str) -> Iterable[str]:
    """Split a schema file into statements.

    ``--`` comment lines and any ``CREATE DATABASE`` / ``USE`` statement are
    dropped so the schema applies to whichever database is configured.
    Statements must not carry ``;`` inside literals.
    """
    body = "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))
    for chunk in body.split(";"):
        stmt = chunk.strip()
        if stmt and not _DATABASE_DIRECTIVE.match(stmt):
            yield stmt


def ensure_database_exists(config: DBConfig) -> None:
    conn = open_connection(config, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: Mapping[str, Any], *, schema_path: str | Path = SCHEMA_PATH) -> None:
    config = DBConfig.from_mapping(db_config)
    ensure_database_exists(config)

    statements = list(iter_schema_statements(Path(schema_path).read_text(encoding="utf-8")))
    conn = open_connection(config)
    try:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info(
        "schema applied to %s@%s:%s/%s (%d statements)",
        config.user,
        config.host,
        config.port,
        config.database,
        len(statements),
    )


def list_tables(db_config: Mapping[str, Any]) -> list[str]:
    conn = open_connection(DBConfig.from_mapping(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
