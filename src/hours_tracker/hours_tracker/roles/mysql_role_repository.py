from __future__ import annotations

import json
from typing import Any, Dict

from ..database.mysql_base import MySQLTable
from .model import Permissions, Role


class MySQLRoleRepository(MySQLTable[Role]):
    table = "roles"
    key = "id"
    columns = ("id", "name", "permissions")

    def to_row(self, record: Role) -> Dict[str, Any]:
        return {
            "id": record.role_id,
            "name": record.name,
            "permissions": json.dumps(record.permissions.to_dict()),
        }

    def from_row(self, row: Dict[str, Any]) -> Role:
        return Role(
            role_id=row["id"],
            name=row["name"],
            permissions=Permissions.from_dict(json.loads(row.get("permissions") or "{}")),
        )
