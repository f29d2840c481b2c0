from __future__ import annotations

from typing import Any, Dict

from ..database.mysql_base import MySQLTable, normalize_mysql_time
from .model import EditRecord, WorkEntry


class MySQLWorkEntryRepository(MySQLTable[WorkEntry]):
    table = "work_entries"
    key = "id"
    columns = (
        "id", "employee_id", "school_id", "date", "hours",
        "start_time", "end_time", "last_edited_by", "last_edited_at",
    )

    def to_row(self, record: WorkEntry) -> Dict[str, Any]:
        return {
            "id": record.entry_id,
            "employee_id": record.employee_id,
            "school_id": record.school_id,
            "date": record.work_date,
            "hours": record.hours,
            "start_time": record.start_time,
            "end_time": record.end_time,
            "last_edited_by": record.last_edited_by,
            "last_edited_at": record.last_edited_at,
        }

    def from_row(self, row: Dict[str, Any]) -> WorkEntry:
        return WorkEntry(
            entry_id=row["id"],
            employee_id=row["employee_id"],
            school_id=row["school_id"],
            work_date=row["date"],
            # DECIMAL comes back as Decimal
            hours=float(row["hours"]),
            start_time=normalize_mysql_time(row.get("start_time")),
            end_time=normalize_mysql_time(row.get("end_time")),
            last_edited_by=row.get("last_edited_by"),
            last_edited_at=row.get("last_edited_at"),
        )


class MySQLEditRecordRepository(MySQLTable[EditRecord]):
    table = "edit_records"
    key = "id"
    columns = ("id", "work_entry_id", "edited_by", "edited_at", "previous_hours", "new_hours")

    def to_row(self, record: EditRecord) -> Dict[str, Any]:
        return {
            "id": record.edit_id,
            "work_entry_id": record.entry_id,
            "edited_by": record.edited_by,
            "edited_at": record.edited_at,
            "previous_hours": record.previous_hours,
            "new_hours": record.new_hours,
        }

    def from_row(self, row: Dict[str, Any]) -> EditRecord:
        return EditRecord(
            edit_id=row["id"],
            entry_id=row["work_entry_id"],
            edited_by=row["edited_by"],
            edited_at=row["edited_at"],
            previous_hours=float(row["previous_hours"]),
            new_hours=float(row["new_hours"]),
        )
