from dataclasses import replace

import pytest

from src.hours_tracker.hours_tracker.container import build_container, build_memory_tables
from src.hours_tracker.hours_tracker.core.exceptions import PersistenceError
from src.hours_tracker.hours_tracker.database.memory import InMemoryTable
from src.hours_tracker.hours_tracker.schools.model import School
from src.hours_tracker.hours_tracker.store.record_store import Collection


class FlakyTable(InMemoryTable):
    """In-memory table whose writes can be switched to fail."""

    def __init__(self, key, rows=()):
        super().__init__(key, rows)
        self.fail = False

    def _check(self):
        if self.fail:
            raise OSError("connection lost")

    def insert(self, record):
        self._check()
        super().insert(record)

    def update(self, record):
        self._check()
        return super().update(record)

    def delete_by_id(self, record_id):
        self._check()
        return super().delete_by_id(record_id)


@pytest.fixture
def table():
    return FlakyTable("school_id", [School("s1", "Colegio A"), School("s2", "Colegio B")])


@pytest.fixture
def schools(table):
    c = Collection("schools", table, "school_id")
    c.load()
    return c


def test_load_keeps_insertion_order(schools):
    assert [s.name for s in schools] == ["Colegio A", "Colegio B"]
    assert schools.get("s2").name == "Colegio B"
    assert schools.get(None) is None


def test_where_and_exists(schools):
    assert schools.where(name="Colegio A") == [School("s1", "Colegio A")]
    assert schools.exists(name="Colegio B")
    assert not schools.exists(name="Colegio C")


def test_update_keeps_position(schools):
    schools.update(School("s1", "Colegio Z"))
    assert [s.name for s in schools] == ["Colegio Z", "Colegio B"]


def test_failed_writes_leave_memory_unchanged(schools, table):
    table.fail = True

    with pytest.raises(PersistenceError):
        schools.insert(School("s3", "Colegio C"))
    with pytest.raises(PersistenceError):
        schools.update(School("s1", "Colegio Z"))
    with pytest.raises(PersistenceError):
        schools.delete("s2")

    assert schools.all() == [School("s1", "Colegio A"), School("s2", "Colegio B")]


def test_update_of_row_missing_in_backend(schools):
    with pytest.raises(PersistenceError):
        schools.update(School("s9", "Fantasma"))
    assert schools.get("s9") is None


def test_duplicate_insert_is_a_persistence_error(schools):
    with pytest.raises(PersistenceError):
        schools.insert(School("s1", "Otra"))
    assert schools.get("s1").name == "Colegio A"


def test_service_failure_leaves_no_history():
    table = FlakyTable("school_id")
    table.fail = True
    c = build_container(tables=replace(build_memory_tables(), schools=table))

    with pytest.raises(PersistenceError):
        c.school_service.create_school("Colegio C")

    assert len(c.store.schools) == 0
    assert len(c.store.history_logs) == 0
