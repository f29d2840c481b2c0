from __future__ import annotations

from typing import Optional

from ..common.validators import require_non_empty
from ..core.constants import ADMIN_ROLE_NAME
from ..core.enums import EntityType, HistoryAction
from ..core.exceptions import InvariantError, ValidationError
from ..employees.service import EmployeeService
from ..history.service import HistoryService
from ..state import AppState
from ..store.record_store import new_id
from .model import Permissions, Role


class RoleService:
    """Use case: manage roles (privileges).

    At least one role named "Administrador" must always exist, so an admin can
    always be assigned. This is separate from the employee-level rule that an
    active administrator must always exist.
    """

    def __init__(self, state: AppState, history: HistoryService, employees: EmployeeService):
        self._state = state
        self._history = history
        self._employees = employees

    @property
    def _roles(self):
        return self._state.store.roles

    def get_role(self, role_id: str) -> Optional[Role]:
        return self._roles.get(role_id)

    def list_roles(self) -> list[Role]:
        return self._roles.all()

    def _is_last_admin_role(self, role: Role) -> bool:
        return role.is_admin and len(self._roles.where(name=ADMIN_ROLE_NAME)) <= 1

    def create_role(self, name: str, permissions: Optional[Permissions] = None) -> Role:
        role = Role(
            role_id=new_id(),
            name=require_non_empty(name, "Nombre del rol"),
            permissions=permissions or Permissions(),
        )
        self._roles.insert(role)
        self._history.record(
            HistoryAction.CREATE,
            f"Se añadió el rol {role.name}",
            entity_type=EntityType.ROLE,
            entity_name=role.name,
        )
        return role

    def update_role(self, role_id: str, name: str, permissions: Permissions) -> Role:
        current = self._roles.get(role_id)
        if not current:
            raise ValidationError("El rol no existe")

        role = Role(role_id=role_id, name=require_non_empty(name, "Nombre del rol"), permissions=permissions)
        if role.name != current.name and self._is_last_admin_role(current):
            message = "No se puede renombrar el único rol de Administrador"
            self._history.record_error(message, entity_type=EntityType.ROLE, entity_name=current.name)
            raise InvariantError(message)

        self._roles.update(role)
        if role.name != current.name and not self._roles.exists(name=current.name):
            self._employees.reassign_role(current.name, role.name)
        self._history.record(
            HistoryAction.UPDATE,
            f"Se actualizó el rol {role.name}",
            entity_type=EntityType.ROLE,
            entity_name=role.name,
        )
        return role

    def delete_role(self, role_id: str) -> None:
        role = self._roles.get(role_id)
        if not role:
            raise ValidationError("El rol no existe")

        if self._is_last_admin_role(role):
            message = "Intento de eliminar el único rol de Administrador"
            self._history.record_error(message, entity_type=EntityType.ROLE, entity_name=role.name)
            raise InvariantError(message)

        self._roles.delete(role_id)
        if not self._roles.exists(name=role.name):
            self._employees.reassign_role(role.name, None)
        self._history.record(
            HistoryAction.DELETE,
            f"Se eliminó el rol {role.name}",
            entity_type=EntityType.ROLE,
            entity_name=role.name,
        )
