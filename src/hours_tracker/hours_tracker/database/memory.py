from __future__ import annotations

from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


class InMemoryTable(Generic[T]):
    """Dictionary-backed table, used for tests and the ``memory`` storage backend."""

    def __init__(self, key: str, rows: Sequence[T] = ()):
        self._key = key
        self._rows: dict[str, T] = {}
        for r in rows:
            self._rows[getattr(r, key)] = r

    def list_all(self) -> Sequence[T]:
        return list(self._rows.values())

    def insert(self, record: T) -> None:
        record_id = getattr(record, self._key)
        if record_id in self._rows:
            raise KeyError(f"Duplicate id {record_id!r}")
        self._rows[record_id] = record

    def update(self, record: T) -> bool:
        record_id = getattr(record, self._key)
        if record_id not in self._rows:
            return False
        self._rows[record_id] = record
        return True

    def delete_by_id(self, record_id: str) -> bool:
        return self._rows.pop(record_id, None) is not None
