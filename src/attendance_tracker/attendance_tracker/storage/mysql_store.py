from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import mysql.connector

from ..core.exceptions import StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .repository import KeyValueStore, decode_value, encode_value

logger = logging.getLogger(__name__)


class MySQLKeyValueStore(KeyValueStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @property
    def connection(self) -> DatabaseConnection:
        return self._conn_factory

    def get(self, key: str) -> Optional[Any]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT v FROM kv_store WHERE k=%s", (key,))
                row = fetchone(cur)
        except mysql.connector.Error as e:
            logger.error("Failed to read %r from kv_store: %s", key, e)
            raise StorageError("Could not load data from the database.") from e
        return decode_value(key, row["v"] if row else None)

    def set(self, key: str, value: Any) -> None:
        self.set_many({key: value})

    def set_many(self, values: Mapping[str, Any]) -> None:
        encoded = [(k, encode_value(k, v)) for k, v in values.items()]
        try:
            # One transaction: db_cursor commits on success, rolls back otherwise.
            with db_cursor(self._conn_factory) as (_, cur):
                for k, raw in encoded:
                    cur.execute(
                        """
                        INSERT INTO kv_store(k, v) VALUES(%s, %s)
                        ON DUPLICATE KEY UPDATE v=VALUES(v)
                        """,
                        (k, raw),
                    )
        except mysql.connector.Error as e:
            logger.error("Failed to write %s to kv_store: %s", sorted(values), e)
            raise StorageError("Could not save data to the database.") from e

    def remove(self, key: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("DELETE FROM kv_store WHERE k=%s", (key,))
        except mysql.connector.Error as e:
            logger.error("Failed to delete %r from kv_store: %s", key, e)
            raise StorageError("Could not delete data from the database.") from e

    def keys(self) -> list[str]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT k FROM kv_store ORDER BY k")
                rows = fetchall(cur)
        except mysql.connector.Error as e:
            logger.error("Failed to list kv_store keys: %s", e)
            raise StorageError("Could not load data from the database.") from e
        return [r["k"] for r in rows]
