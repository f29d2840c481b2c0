from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, Generic, List, Optional, Sequence, TypeVar

from .connection import DatabaseConnection

T = TypeVar("T")


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


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def normalize_mysql_time(value: Any) -> Optional[time]:
    """Normalize MySQL TIME values across connector implementations.

    mysql-connector can return TIME as:
    - datetime.time
    - datetime.timedelta
    - string (e.g. '08:30:00')
    """

    if value is None:
        return None

    if isinstance(value, time):
        return value

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        hours = total_seconds // 3600
        minutes = (total_seconds % 3600) // 60
        seconds = total_seconds % 60
        return time(hour=hours, minute=minutes, second=seconds)

    if isinstance(value, str):
        parts = value.strip().split(":")
        if len(parts) < 2:
            raise ValueError(f"Invalid time string: {value!r}")
        hours = int(parts[0])
        minutes = int(parts[1])
        seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
        return time(hour=hours, minute=minutes, second=seconds)

    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")


class MySQLTable(Generic[T]):
    """Table gateway: maps one MySQL table to one dataclass.

    Subclasses declare ``table``, ``key`` and ``columns`` (key first) plus the two
    row mappers. Every table carries an auto-increment ``seq`` column so
    ``list_all`` returns rows in insertion order.
    """

    table: str = ""
    key: str = ""
    columns: Sequence[str] = ()

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def to_row(self, record: T) -> Dict[str, Any]:
        raise NotImplementedError

    def from_row(self, row: Dict[str, Any]) -> T:
        raise NotImplementedError

    def list_all(self) -> Sequence[T]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {', '.join(self.columns)} FROM {self.table} ORDER BY seq")
            return [self.from_row(r) for r in fetchall(cur)]

    def insert(self, record: T) -> None:
        row = self.to_row(record)
        placeholders = ", ".join(["%s"] * len(self.columns))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO {self.table} ({', '.join(self.columns)}) VALUES ({placeholders})",
                tuple(row[c] for c in self.columns),
            )

    def update(self, record: T) -> bool:
        row = self.to_row(record)
        fields = [c for c in self.columns if c != self.key]
        assignments = ", ".join(f"{c}=%s" for c in fields)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE {self.table} SET {assignments} WHERE {self.key}=%s",
                tuple(row[c] for c in fields) + (row[self.key],),
            )
            return cur.rowcount > 0

    def delete_by_id(self, record_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {self.table} WHERE {self.key}=%s", (record_id,))
            return cur.rowcount > 0
