from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.constants import ADMIN_ROLE_NAME


@dataclass(frozen=True)
class Employee:
    """Entidad de dominio: Empleado.

    Nota: objeto de datos puro (sin acceso a la base de datos). ``active`` es el
    indicador de baja lógica; ``password_hash`` nunca sale de la capa de servicio.
    """

    employee_id: str
    name: str
    position: str
    phone: str = ""
    email: str = ""
    active: bool = True
    username: Optional[str] = None
    password_hash: Optional[str] = None
    role: Optional[str] = None
    assigned_schools: tuple[str, ...] = ()

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE_NAME

    def public_dict(self) -> dict:
        """Serializable view without credentials."""
        return {
            "employee_id": self.employee_id,
            "name": self.name,
            "position": self.position,
            "phone": self.phone,
            "email": self.email,
            "active": self.active,
            "username": self.username,
            "role": self.role,
            "assigned_schools": list(self.assigned_schools),
        }


@dataclass(frozen=True)
class EmployeeData:
    """Input for create/update. ``password=None`` on update keeps the stored one."""

    name: str
    position: str
    phone: str = ""
    email: str = ""
    active: bool = True
    username: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None
    assigned_schools: tuple[str, ...] = field(default_factory=tuple)
