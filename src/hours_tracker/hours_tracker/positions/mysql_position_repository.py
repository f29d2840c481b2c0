from __future__ import annotations

from typing import Any, Dict

from ..database.mysql_base import MySQLTable
from .model import Position


class MySQLPositionRepository(MySQLTable[Position]):
    table = "positions"
    key = "id"
    columns = ("id", "name")

    def to_row(self, record: Position) -> Dict[str, Any]:
        return {"id": record.position_id, "name": record.name}

    def from_row(self, row: Dict[str, Any]) -> Position:
        return Position(position_id=row["id"], name=row["name"])
