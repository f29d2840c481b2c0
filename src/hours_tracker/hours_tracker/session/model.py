from __future__ import annotations

from typing import Optional

from ..employees.model import Employee


class Session:
    """Who is logged in right now. Empty means every action is attributed to the system."""

    def __init__(self, principal: Optional[Employee] = None):
        self.principal = principal

    @property
    def is_authenticated(self) -> bool:
        return self.principal is not None

    def is_current(self, employee_id: str) -> bool:
        return self.principal is not None and self.principal.employee_id == employee_id
