import re

from thekedar.database.bootstrap import SCHEMA_PATH, iter_schema_statements
from thekedar.database.connection import DBConfig


def test_comments_and_database_directives_are_dropped():
    sql = "-- header\nCREATE DATABASE foo;\nUSE foo;\nCREATE TABLE t (\n  id INT -- key\n);\n"

    assert list(iter_schema_statements(sql)) == ["CREATE TABLE t (\n  id INT -- key\n)"]


def test_shipped_schema_creates_every_table():
    statements = list(iter_schema_statements(SCHEMA_PATH.read_text(encoding="utf-8")))
    created = [m.group(1) for m in (re.search(r"CREATE TABLE IF NOT EXISTS (\w+)", s) for s in statements) if m]

    assert created == ["users", "projects", "labours", "project_labours", "work_days", "payments"]
    assert len(statements) == len(created)


def test_db_config_from_settings_mapping():
    config = DBConfig.from_mapping({"host": "db", "port": "3307", "user": "app", "password": "pw", "database": "x"})

    assert (config.host, config.port, config.database, config.connection_timeout) == ("db", 3307, "x", 10)
