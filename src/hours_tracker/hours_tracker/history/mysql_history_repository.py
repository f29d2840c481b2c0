from __future__ import annotations

from typing import Any, Dict

from ..core.constants import SYSTEM_ACTOR
from ..database.mysql_base import MySQLTable
from .model import HistoryLog


class MySQLHistoryRepository(MySQLTable[HistoryLog]):
    """Append-only in practice: the service never calls ``update`` or ``delete_by_id``."""

    table = "history_logs"
    key = "id"
    columns = (
        "id", "action", "description", "timestamp", "performed_by",
        "entity_type", "entity_name", "details",
    )

    def to_row(self, record: HistoryLog) -> Dict[str, Any]:
        return {
            "id": record.log_id,
            "action": record.action,
            "description": record.description,
            "timestamp": record.timestamp,
            "performed_by": record.performed_by,
            "entity_type": record.entity_type,
            "entity_name": record.entity_name,
            "details": record.details,
        }

    def from_row(self, row: Dict[str, Any]) -> HistoryLog:
        return HistoryLog(
            log_id=row["id"],
            action=row.get("action") or "",
            description=row.get("description") or "",
            timestamp=row["timestamp"],
            performed_by=row.get("performed_by") or SYSTEM_ACTOR,
            entity_type=row.get("entity_type"),
            entity_name=row.get("entity_name"),
            details=row.get("details"),
        )
