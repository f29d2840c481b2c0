from __future__ import annotations

from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class TableRepository(Protocol[T]):
    """Persistence interface for one record table.

    Note (DIP): the record store depends on this interface, never on a concrete
    database. Any table-oriented backend offering these four calls will do.
    """

    def list_all(self) -> Sequence[T]:
        raise NotImplementedError

    def insert(self, record: T) -> None:
        raise NotImplementedError

    def update(self, record: T) -> bool:
        raise NotImplementedError

    def delete_by_id(self, record_id: str) -> bool:
        raise NotImplementedError
