from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional


@dataclass(frozen=True)
class WorkEntry:
    """Entidad de dominio: horas trabajadas por un empleado en un colegio y fecha."""

    entry_id: str
    employee_id: str
    school_id: str
    work_date: date
    hours: float
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    last_edited_by: Optional[str] = None
    last_edited_at: Optional[datetime] = None


@dataclass(frozen=True)
class EditRecord:
    """Immutable audit row for one change of ``WorkEntry.hours``."""

    edit_id: str
    entry_id: str
    edited_by: str
    edited_at: datetime
    previous_hours: float
    new_hours: float


@dataclass(frozen=True)
class NewWorkEntry:
    employee_id: str
    school_id: str
    work_date: date
    hours: float
    start_time: Optional[time] = None
    end_time: Optional[time] = None
