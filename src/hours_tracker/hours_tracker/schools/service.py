from __future__ import annotations

from typing import Optional

from ..common.validators import require_non_empty
from ..core.enums import EntityType, HistoryAction
from ..core.exceptions import GuardedDeleteError, ValidationError
from ..employees.service import EmployeeService
from ..history.service import HistoryService
from ..state import AppState
from ..store.record_store import new_id
from ..work_entries.service import WorkEntryService
from .model import School


class SchoolService:
    def __init__(
        self,
        state: AppState,
        history: HistoryService,
        work_entries: WorkEntryService,
        employees: EmployeeService,
    ):
        self._state = state
        self._history = history
        self._work_entries = work_entries
        self._employees = employees

    @property
    def _schools(self):
        return self._state.store.schools

    def get_school(self, school_id: str) -> Optional[School]:
        return self._schools.get(school_id)

    def list_schools(self) -> list[School]:
        return self._schools.all()

    def has_work_entries(self, school_id: str) -> bool:
        return self._state.store.work_entries.exists(school_id=school_id)

    def _require(self, school_id: str) -> School:
        school = self._schools.get(school_id)
        if not school:
            raise ValidationError("El colegio no existe")
        return school

    def create_school(self, name: str) -> School:
        school = School(school_id=new_id(), name=require_non_empty(name, "Nombre del colegio"))
        self._schools.insert(school)
        self._history.record(
            HistoryAction.CREATE,
            f"Se añadió el colegio {school.name}",
            entity_type=EntityType.SCHOOL,
            entity_name=school.name,
        )
        return school

    def update_school(self, school_id: str, name: str) -> School:
        self._require(school_id)
        school = School(school_id=school_id, name=require_non_empty(name, "Nombre del colegio"))
        self._schools.update(school)
        self._history.record(
            HistoryAction.UPDATE,
            f"Se actualizó el colegio {school.name}",
            entity_type=EntityType.SCHOOL,
            entity_name=school.name,
        )
        return school

    def delete_school(self, school_id: str) -> None:
        """Guarded delete: refused while any work entry still references the school."""

        school = self._require(school_id)
        if self.has_work_entries(school_id):
            message = f"No se puede eliminar el colegio {school.name}: tiene registros de horas asociados"
            self._history.record_error(message, entity_type=EntityType.SCHOOL, entity_name=school.name)
            raise GuardedDeleteError(message)

        self._employees.unassign_school(school_id)
        self._schools.delete(school_id)
        self._history.record(
            HistoryAction.DELETE,
            f"Se eliminó el colegio {school.name}",
            entity_type=EntityType.SCHOOL,
            entity_name=school.name,
        )

    def delete_school_and_reset_hours(self, school_id: str) -> int:
        """Cascading delete: work entries (and their edit records) first, then the school.

        Returns the number of work entries removed.
        """

        school = self._require(school_id)
        removed = self._work_entries.delete_entries_for_school(school_id)
        self._employees.unassign_school(school_id)
        self._schools.delete(school_id)
        self._history.record(
            HistoryAction.DELETE,
            f"Se eliminó el colegio {school.name} y todos sus registros asociados",
            entity_type=EntityType.SCHOOL,
            entity_name=school.name,
            details=f"{removed} registros de horas eliminados",
        )
        return removed
