from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from ..core.exceptions import PersistenceError
from ..database.repository import TableRepository
from ..employees.model import Employee
from ..history.model import HistoryLog
from ..positions.model import Position
from ..roles.model import Role
from ..schools.model import School
from ..work_entries.model import EditRecord, WorkEntry

logger = logging.getLogger(__name__)

T = TypeVar("T")


def new_id() -> str:
    return str(uuid.uuid4())


class Collection(Generic[T]):
    """In-memory mirror of one table, keyed by id and kept in insertion order.

    Writes go to the repository first; the mirror only changes once the
    repository call returned, so a failing backend leaves it untouched.
    """

    def __init__(self, name: str, repo: TableRepository[T], key: str):
        self.name = name
        self._repo = repo
        self._key = key
        self._items: dict[str, T] = {}

    def id_of(self, record: T) -> str:
        return getattr(record, self._key)

    def load(self) -> None:
        rows = self._call("load", self._repo.list_all)
        self._items = {self.id_of(r): r for r in rows}

    def get(self, record_id: Optional[str]) -> Optional[T]:
        if record_id is None:
            return None
        return self._items.get(record_id)

    def all(self) -> list[T]:
        return list(self._items.values())

    def where(self, **filters: Any) -> list[T]:
        return [r for r in self._items.values() if all(getattr(r, k) == v for k, v in filters.items())]

    def exists(self, **filters: Any) -> bool:
        return any(all(getattr(r, k) == v for k, v in filters.items()) for r in self._items.values())

    def insert(self, record: T) -> T:
        self._call("insert", self._repo.insert, record)
        self._items[self.id_of(record)] = record
        return record

    def update(self, record: T) -> T:
        record_id = self.id_of(record)
        if not self._call("update", self._repo.update, record):
            raise PersistenceError(f"{self.name}: no row with id {record_id}")
        # dict assignment keeps the key where it was
        self._items[record_id] = record
        return record

    def delete(self, record_id: str) -> None:
        self._call("delete", self._repo.delete_by_id, record_id)
        self._items.pop(record_id, None)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items.values()))

    def _call(self, op: str, fn: Callable[..., Any], *args: Any) -> Any:
        try:
            return fn(*args)
        except PersistenceError:
            raise
        except Exception as exc:
            logger.exception("Persistence failure: %s %s", op, self.name)
            raise PersistenceError(f"No se pudo completar la operación ({op} {self.name})") from exc


@dataclass(frozen=True)
class Tables:
    """The seven record tables the core consumes."""

    employees: TableRepository[Employee]
    schools: TableRepository[School]
    positions: TableRepository[Position]
    roles: TableRepository[Role]
    work_entries: TableRepository[WorkEntry]
    edit_records: TableRepository[EditRecord]
    history_logs: TableRepository[HistoryLog]


class RecordStore:
    """Owns every entity collection. Other components only read derived views."""

    def __init__(self, tables: Tables):
        self.employees: Collection[Employee] = Collection("employees", tables.employees, "employee_id")
        self.schools: Collection[School] = Collection("schools", tables.schools, "school_id")
        self.positions: Collection[Position] = Collection("positions", tables.positions, "position_id")
        self.roles: Collection[Role] = Collection("roles", tables.roles, "role_id")
        self.work_entries: Collection[WorkEntry] = Collection("work_entries", tables.work_entries, "entry_id")
        self.edit_records: Collection[EditRecord] = Collection("edit_records", tables.edit_records, "edit_id")
        self.history_logs: Collection[HistoryLog] = Collection("history_logs", tables.history_logs, "log_id")

    def collections(self) -> tuple[Collection, ...]:
        return (
            self.employees,
            self.schools,
            self.positions,
            self.roles,
            self.work_entries,
            self.edit_records,
            self.history_logs,
        )

    def load(self) -> None:
        for c in self.collections():
            c.load()
        logger.debug("Record store loaded: %s", {c.name: len(c) for c in self.collections()})
