from __future__ import annotations

import json
from typing import Any, Dict

from ..database.mysql_base import MySQLTable
from .model import Employee


class MySQLEmployeeRepository(MySQLTable[Employee]):
    table = "employees"
    key = "id"
    columns = (
        "id", "name", "position", "phone", "email", "active",
        "username", "password_hash", "role", "assigned_schools",
    )

    def to_row(self, record: Employee) -> Dict[str, Any]:
        return {
            "id": record.employee_id,
            "name": record.name,
            "position": record.position,
            "phone": record.phone,
            "email": record.email,
            "active": 1 if record.active else 0,
            "username": record.username,
            "password_hash": record.password_hash,
            "role": record.role,
            "assigned_schools": json.dumps(list(record.assigned_schools)),
        }

    def from_row(self, row: Dict[str, Any]) -> Employee:
        return Employee(
            employee_id=row["id"],
            name=row["name"],
            position=row.get("position") or "",
            phone=row.get("phone") or "",
            email=row.get("email") or "",
            active=bool(row.get("active", True)),
            username=row.get("username"),
            password_hash=row.get("password_hash"),
            role=row.get("role"),
            assigned_schools=tuple(json.loads(row.get("assigned_schools") or "[]")),
        )
