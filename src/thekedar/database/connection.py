from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    connection_timeout: int = 10

    @classmethod
    def from_mapping(cls, db_config: Mapping[str, Any]) -> "DBConfig":
        """Build from a settings ``DB_CONFIG`` dict, filling the usual defaults."""
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "labour_thekedar")),
            connection_timeout=int(db_config.get("connection_timeout", 10)),
        )


def open_connection(config: DBConfig, *, with_database: bool = True):
    kwargs = {"database": config.database} if with_database else {}
    return mysql.connector.connect(
        host=config.host,
        port=config.port,
        user=config.user,
        password=config.password,
        connection_timeout=config.connection_timeout,
        use_pure=True,
        **kwargs,
    )


class DatabaseConnection:
    """Connection factory handed to the MySQL repositories.

    Every repository call opens and closes its own connection, so an
    abandoned request holds nothing past the statement it was running.
    """

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    def connect(self):
        return open_connection(self._config)
