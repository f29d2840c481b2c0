from __future__ import annotations

from typing import Any, Dict

from ..database.mysql_base import MySQLTable
from .model import School


class MySQLSchoolRepository(MySQLTable[School]):
    table = "schools"
    key = "id"
    columns = ("id", "name")

    def to_row(self, record: School) -> Dict[str, Any]:
        return {"id": record.school_id, "name": record.name}

    def from_row(self, row: Dict[str, Any]) -> School:
        return School(school_id=row["id"], name=row["name"])
