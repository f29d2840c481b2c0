"""Time-windowed hour totals and groupings over work entries.

Pure functions: every query re-scans the rows it is given. Ordering of the
"touched" views follows the order of the collection passed in.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..employees.model import Employee
from ..schools.model import School
from ..work_entries.model import WorkEntry
from .windows import Window


@dataclass(frozen=True)
class EmployeeHours:
    employee: Employee
    hours: float


def _sum(entries: Iterable[WorkEntry], window: Optional[Window]) -> float:
    return sum(e.hours for e in entries if window is None or window.contains(e.work_date))


def total_hours(entries: Iterable[WorkEntry], window: Optional[Window] = None) -> float:
    return _sum(entries, window)


def total_hours_for_employee(entries: Iterable[WorkEntry], employee_id: str, window: Optional[Window] = None) -> float:
    return _sum((e for e in entries if e.employee_id == employee_id), window)


def total_hours_for_school(entries: Iterable[WorkEntry], school_id: str, window: Optional[Window] = None) -> float:
    return _sum((e for e in entries if e.school_id == school_id), window)


def total_hours_for_employee_and_school(
    entries: Iterable[WorkEntry],
    employee_id: str,
    school_id: str,
    window: Optional[Window] = None,
) -> float:
    return _sum((e for e in entries if e.employee_id == employee_id and e.school_id == school_id), window)


def hours_by_school_and_month(
    entries: Iterable[WorkEntry],
    employees: Sequence[Employee],
    school_id: str,
    month: int,
    year: int,
) -> list[EmployeeHours]:
    """Hours per employee at one school in one month.

    Groups are ordered by first appearance in ``entries``; groups whose employee
    no longer exists are dropped.
    """

    window = Window.month(year, month)
    totals: dict[str, float] = {}
    for e in entries:
        if e.school_id == school_id and window.contains(e.work_date):
            totals[e.employee_id] = totals.get(e.employee_id, 0.0) + e.hours

    by_id = {emp.employee_id: emp for emp in employees}
    return [EmployeeHours(by_id[eid], hours) for eid, hours in totals.items() if eid in by_id]


def schools_touched_by_employee(
    entries: Iterable[WorkEntry],
    schools: Sequence[School],
    employee_id: str,
) -> list[School]:
    touched = {e.school_id for e in entries if e.employee_id == employee_id}
    return [s for s in schools if s.school_id in touched]


def employees_touched_by_school(
    entries: Iterable[WorkEntry],
    employees: Sequence[Employee],
    school_id: str,
) -> list[Employee]:
    """Employees with hours logged at the school OR assigned to it (a union)."""
    touched = {e.employee_id for e in entries if e.school_id == school_id}
    return [emp for emp in employees if emp.employee_id in touched or school_id in emp.assigned_schools]
