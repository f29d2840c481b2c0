from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

from ..common.validators import require_non_empty, require_non_negative_hours
from ..core.constants import EMPLOYEE_PLACEHOLDER, SCHOOL_PLACEHOLDER
from ..core.enums import EntityType, HistoryAction
from ..core.exceptions import PersistenceError, ValidationError
from ..history.service import HistoryService
from ..state import AppState
from ..store.record_store import new_id
from .model import EditRecord, NewWorkEntry, WorkEntry
from .submission import WorkEntrySubmission, normalize


def _fmt_hours(hours: float) -> str:
    return f"{hours:g}"


class WorkEntryService:
    """Use case: record, correct and remove hours, keeping the edit trail in step."""

    def __init__(self, state: AppState, history: HistoryService):
        self._state = state
        self._history = history

    @property
    def _store(self):
        return self._state.store

    def _names(self, employee_id: str, school_id: str) -> tuple[str, str]:
        employee = self._store.employees.get(employee_id)
        school = self._store.schools.get(school_id)
        return (
            employee.name if employee else EMPLOYEE_PLACEHOLDER,
            school.name if school else SCHOOL_PLACEHOLDER,
        )

    def get_work_entry(self, entry_id: str) -> Optional[WorkEntry]:
        return self._store.work_entries.get(entry_id)

    def list_work_entries(self) -> list[WorkEntry]:
        return self._store.work_entries.all()

    def entries_for_employee_and_date(self, employee_id: str, work_date: date) -> list[WorkEntry]:
        return self._store.work_entries.where(employee_id=employee_id, work_date=work_date)

    def edit_records_for(self, entry_id: str) -> list[EditRecord]:
        return self._store.edit_records.where(entry_id=entry_id)

    def add_work_entry(self, new_entry: NewWorkEntry) -> WorkEntry:
        require_non_empty(new_entry.employee_id, "Empleado")
        require_non_empty(new_entry.school_id, "Colegio")
        hours = require_non_negative_hours(new_entry.hours)

        entry = WorkEntry(
            entry_id=new_id(),
            employee_id=new_entry.employee_id,
            school_id=new_entry.school_id,
            work_date=new_entry.work_date,
            hours=hours,
            start_time=new_entry.start_time,
            end_time=new_entry.end_time,
            last_edited_by=self._state.actor_name(),
            last_edited_at=self._state.now(),
        )
        self._store.work_entries.insert(entry)

        employee_name, school_name = self._names(entry.employee_id, entry.school_id)
        self._history.record(
            HistoryAction.CREATE,
            f"Se registraron {_fmt_hours(entry.hours)} horas para {employee_name} en {school_name}",
            entity_type=EntityType.WORK_ENTRY,
            entity_name=employee_name,
        )
        return entry

    def submit(self, submission: WorkEntrySubmission) -> list[WorkEntry]:
        return [self.add_work_entry(e) for e in normalize(submission)]

    def update_work_entry(self, entry: WorkEntry, editor_name: Optional[str] = None) -> WorkEntry:
        prior = self._store.work_entries.get(entry.entry_id)
        if not prior:
            raise ValidationError("El registro de horas no existe")
        hours = require_non_negative_hours(entry.hours)

        editor = editor_name or self._state.actor_name()
        now = self._state.now()
        updated = replace(entry, hours=hours, last_edited_by=editor, last_edited_at=now)

        # Edit record first: an hours change is never stored without its trail.
        record = None
        if prior.hours != hours:
            record = self._store.edit_records.insert(
                EditRecord(
                    edit_id=new_id(),
                    entry_id=entry.entry_id,
                    edited_by=editor,
                    edited_at=now,
                    previous_hours=prior.hours,
                    new_hours=hours,
                )
            )
        try:
            self._store.work_entries.update(updated)
        except PersistenceError:
            if record:
                self._store.edit_records.delete(record.edit_id)
            raise

        employee_name, school_name = self._names(updated.employee_id, updated.school_id)
        self._history.record(
            HistoryAction.UPDATE,
            f"Se actualizaron las horas de {employee_name} en {school_name} a {_fmt_hours(hours)}h",
            entity_type=EntityType.WORK_ENTRY,
            entity_name=employee_name,
        )
        return updated

    def delete_work_entry(self, entry_id: str) -> None:
        entry = self._store.work_entries.get(entry_id)
        if not entry:
            raise ValidationError("El registro de horas no existe")

        self._delete_entries([entry])

        employee_name, school_name = self._names(entry.employee_id, entry.school_id)
        self._history.record(
            HistoryAction.DELETE,
            f"Se eliminó el registro de horas de {employee_name} en {school_name}",
            entity_type=EntityType.WORK_ENTRY,
            entity_name=employee_name,
        )

    # Cascade helpers for school/employee deletes (the caller writes the history entry).

    def delete_entries_for_school(self, school_id: str) -> int:
        return self._delete_entries(self._store.work_entries.where(school_id=school_id))

    def delete_entries_for_employee(self, employee_id: str) -> int:
        return self._delete_entries(self._store.work_entries.where(employee_id=employee_id))

    def _delete_entries(self, entries: list[WorkEntry]) -> int:
        # Edit records first so none is ever left pointing at a missing entry.
        for entry in entries:
            for record in self._store.edit_records.where(entry_id=entry.entry_id):
                self._store.edit_records.delete(record.edit_id)
            self._store.work_entries.delete(entry.entry_id)
        return len(entries)
