from __future__ import annotations

import json
import logging
from typing import Optional, Union

from werkzeug.security import check_password_hash

from ..core.enums import Permission
from ..core.exceptions import AuthenticationError
from ..employees.model import Employee
from ..state import AppState
from .slot import SessionSlot

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: log in / out and keep the session principal in its slot."""

    def __init__(self, state: AppState, slot: SessionSlot):
        self._state = state
        self._slot = slot

    @property
    def current_user(self) -> Optional[Employee]:
        return self._state.session.principal

    def login(self, username: str, password: str) -> Employee:
        user = next((e for e in self._state.store.employees if e.username == username), None)
        if not user or not user.active or not user.password_hash:
            raise AuthenticationError("Usuario o contraseña incorrectos")

        try:
            ok = check_password_hash(user.password_hash, password)
        except Exception:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Usuario o contraseña incorrectos")

        self._set_principal(user)
        logger.info("Login: %s", user.username)
        return user

    def logout(self) -> None:
        self._state.session.principal = None
        self._slot.clear()

    def restore(self) -> Optional[Employee]:
        """Re-open the persisted session if its employee still exists and is active.

        Anything else (unreadable slot, deleted or deactivated employee) silently
        clears the slot.
        """

        raw = self._slot.read()
        if not raw:
            return None

        try:
            employee_id = json.loads(raw)["employee_id"]
        except (ValueError, KeyError, TypeError):
            logger.warning("Discarding unreadable session slot")
            self.logout()
            return None

        employee = self._state.store.employees.get(employee_id)
        if not employee or not employee.active:
            self.logout()
            return None

        self._set_principal(employee)
        return employee

    def refresh(self, employee: Employee) -> None:
        """Propagate an edit of the logged-in employee to the session."""
        if not self._state.session.is_current(employee.employee_id):
            return
        if not employee.active:
            self.logout()
            return
        self._set_principal(employee)

    def forget(self, employee_id: str) -> None:
        if self._state.session.is_current(employee_id):
            self.logout()

    def has_permission(self, permission: Union[Permission, str]) -> bool:
        permission = Permission(permission)
        principal = self._state.session.principal
        if not principal or not principal.role:
            return False
        return any(r.permissions.allows(permission) for r in self._state.store.roles.where(name=principal.role))

    def _set_principal(self, employee: Employee) -> None:
        self._state.session.principal = employee
        self._slot.write(json.dumps(employee.public_dict(), ensure_ascii=False))
