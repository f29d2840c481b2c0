from __future__ import annotations

from dataclasses import dataclass, field

from ..core.constants import ADMIN_ROLE_NAME
from ..core.enums import Permission


@dataclass(frozen=True)
class Permissions:
    create: bool = False
    read: bool = True
    update: bool = False
    delete: bool = False

    @classmethod
    def full(cls) -> "Permissions":
        return cls(create=True, read=True, update=True, delete=True)

    @classmethod
    def from_dict(cls, data: dict) -> "Permissions":
        return cls(
            create=bool(data.get("create", False)),
            read=bool(data.get("read", False)),
            update=bool(data.get("update", False)),
            delete=bool(data.get("delete", False)),
        )

    def to_dict(self) -> dict:
        return {"create": self.create, "read": self.read, "update": self.update, "delete": self.delete}

    def allows(self, permission: Permission) -> bool:
        return bool(getattr(self, permission.value))


@dataclass(frozen=True)
class Role:
    """Privilegio: nombre + permisos CRUD."""

    role_id: str
    name: str
    permissions: Permissions = field(default_factory=Permissions)

    @property
    def is_admin(self) -> bool:
        return self.name == ADMIN_ROLE_NAME
