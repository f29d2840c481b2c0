from __future__ import annotations

from dataclasses import replace
from typing import Optional

from werkzeug.security import generate_password_hash

from ..common.validators import optional_text, require_min_length, require_non_empty
from ..core.constants import ADMIN_ROLE_NAME, MIN_USERNAME_LENGTH
from ..core.enums import EntityType, HistoryAction
from ..core.exceptions import InvariantError, ValidationError
from ..history.service import HistoryService
from ..session.service import AuthService
from ..state import AppState
from ..store.record_store import new_id
from ..work_entries.service import WorkEntryService
from .model import Employee, EmployeeData


class EmployeeService:
    """Use case: manage employees (admin)."""

    def __init__(
        self,
        state: AppState,
        history: HistoryService,
        work_entries: WorkEntryService,
        auth: AuthService,
    ):
        self._state = state
        self._history = history
        self._work_entries = work_entries
        self._auth = auth

    @property
    def _employees(self):
        return self._state.store.employees

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get(employee_id)

    def list_employees(self, *, active_only: bool = False, search: str = "") -> list[Employee]:
        """``search`` matches name, position or email, case-insensitively."""

        employees = self._employees.where(active=True) if active_only else self._employees.all()
        term = search.strip().lower()
        if not term:
            return employees
        return [e for e in employees if any(term in (text or "").lower() for text in (e.name, e.position, e.email))]

    def _other_active_admins(self, employee_id: str) -> int:
        return sum(1 for e in self._employees if e.is_admin and e.active and e.employee_id != employee_id)

    def _validate(self, data: EmployeeData, *, current: Optional[Employee]) -> EmployeeData:
        current_id = current.employee_id if current else None
        name = require_non_empty(data.name, "Nombre")
        email = optional_text(data.email)
        username = optional_text(data.username)
        role = optional_text(data.role)

        if username:
            require_min_length(username, "El nombre de usuario", MIN_USERNAME_LENGTH)
            if any(e.username == username and e.employee_id != current_id for e in self._employees):
                raise ValidationError("El nombre de usuario ya está en uso. Por favor, elija otro.")

        if email and any(e.email == email and e.employee_id != current_id for e in self._employees):
            raise ValidationError("El email ya está en uso por otro empleado.")

        if role:
            if not self._state.store.roles.exists(name=role):
                raise ValidationError(f"El rol {role} no existe")
            has_password = bool(data.password) or bool(current and current.password_hash)
            if not username or not has_password:
                raise ValidationError(
                    "Para usuarios con privilegios, debe proporcionar un nombre de usuario y contraseña."
                )

        return EmployeeData(
            name=name,
            position=(data.position or "").strip(),
            phone=(data.phone or "").strip(),
            email=email or "",
            active=bool(data.active),
            username=username,
            password=data.password or None,
            role=role,
            assigned_schools=tuple(dict.fromkeys(data.assigned_schools)),
        )

    def create_employee(self, data: EmployeeData) -> Employee:
        data = self._validate(data, current=None)
        employee = Employee(
            employee_id=new_id(),
            name=data.name,
            position=data.position,
            phone=data.phone,
            email=data.email,
            active=data.active,
            username=data.username,
            password_hash=generate_password_hash(data.password) if data.password else None,
            role=data.role,
            assigned_schools=data.assigned_schools,
        )
        self._employees.insert(employee)
        self._history.record(
            HistoryAction.CREATE,
            f"Se añadió el empleado {employee.name}",
            entity_type=EntityType.EMPLOYEE,
            entity_name=employee.name,
        )
        return employee

    def update_employee(self, employee_id: str, data: EmployeeData) -> Employee:
        current = self._employees.get(employee_id)
        if not current:
            raise ValidationError("El empleado no existe")
        data = self._validate(data, current=current)

        loses_admin = current.is_admin and current.active and (data.role != ADMIN_ROLE_NAME or not data.active)
        if loses_admin and self._other_active_admins(employee_id) == 0:
            message = "No se puede cambiar el rol del último administrador"
            self._history.record_error(message, entity_type=EntityType.EMPLOYEE, entity_name=current.name)
            raise InvariantError(message)

        updated = Employee(
            employee_id=current.employee_id,
            name=data.name,
            position=data.position,
            phone=data.phone,
            email=data.email,
            active=data.active,
            username=data.username,
            password_hash=generate_password_hash(data.password) if data.password else current.password_hash,
            role=data.role,
            assigned_schools=data.assigned_schools,
        )
        self._employees.update(updated)
        self._auth.refresh(updated)
        self._history.record(
            HistoryAction.UPDATE,
            f"Se actualizó el empleado {updated.name}",
            entity_type=EntityType.EMPLOYEE,
            entity_name=updated.name,
        )
        return updated

    def delete_employee(self, employee_id: str) -> None:
        """Hard delete, cascading to the employee's work entries and their edit records."""

        employee = self._employees.get(employee_id)
        if not employee:
            raise ValidationError("El empleado no existe")

        if employee.is_admin and employee.active and self._other_active_admins(employee_id) == 0:
            message = "No se puede eliminar el último administrador"
            self._history.record_error(message, entity_type=EntityType.EMPLOYEE, entity_name=employee.name)
            raise InvariantError(message)

        removed = self._work_entries.delete_entries_for_employee(employee_id)
        self._employees.delete(employee_id)
        self._auth.forget(employee_id)
        self._history.record(
            HistoryAction.DELETE,
            f"Se eliminó el empleado {employee.name}",
            entity_type=EntityType.EMPLOYEE,
            entity_name=employee.name,
            details=f"{removed} registros de horas eliminados" if removed else None,
        )

    def unassign_school(self, school_id: str) -> None:
        for e in self._employees:
            if school_id in e.assigned_schools:
                self._employees.update(
                    replace(e, assigned_schools=tuple(s for s in e.assigned_schools if s != school_id))
                )

    def rename_position(self, old_name: str, new_name: str) -> None:
        for e in self._employees.where(position=old_name):
            self._employees.update(replace(e, position=new_name))

    def reassign_role(self, old_name: str, new_name: Optional[str]) -> None:
        for e in self._employees.where(role=old_name):
            updated = replace(e, role=new_name)
            self._employees.update(updated)
            self._auth.refresh(updated)
