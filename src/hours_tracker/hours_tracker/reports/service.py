from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import month_name
from ..core.constants import DEFAULT_WEEK_START, UNKNOWN_PLACEHOLDER
from ..employees.model import Employee
from ..schools.model import School
from ..state import AppState
from . import aggregation as agg
from .windows import Window


@dataclass(frozen=True)
class ReportLine:
    name: str
    hours: float


@dataclass(frozen=True)
class SchoolReport:
    school_id: str
    school_name: str
    employees: list[ReportLine]
    total_hours: float


@dataclass(frozen=True)
class MonthlyReport:
    month: int
    year: int
    schools: list[SchoolReport]

    @property
    def title(self) -> str:
        return f"{month_name(self.month)} {self.year}"

    @property
    def total_hours(self) -> float:
        return sum(s.total_hours for s in self.schools)


@dataclass(frozen=True)
class SchoolOverview:
    school: School
    total_hours: float
    month_hours: float
    entry_count: int
    employee_count: int


@dataclass(frozen=True)
class DashboardSummary:
    active_employees: int
    schools: int
    total_hours: float
    month_hours: float
    week_hours: float


class HoursReportService:
    """Aggregate queries bound to the live collections and the clock.

    "This week / month / year" always means the period containing ``clock()``.
    """

    def __init__(self, state: AppState, *, week_start: int = DEFAULT_WEEK_START):
        self._state = state
        self._week_start = week_start

    @property
    def _entries(self):
        return self._state.store.work_entries.all()

    def _today(self) -> date:
        return self._state.now().date()

    def this_week(self) -> Window:
        return Window.week(self._state.now(), self._week_start)

    def this_month(self) -> Window:
        today = self._today()
        return Window.month(today.year, today.month)

    def this_year(self) -> Window:
        return Window.year(self._today().year)

    # Employee

    def employee_hours_by_day(self, employee_id: str, day: date) -> float:
        return agg.total_hours_for_employee(self._entries, employee_id, Window.day(day))

    def employee_hours_this_week(self, employee_id: str) -> float:
        return agg.total_hours_for_employee(self._entries, employee_id, self.this_week())

    def employee_hours_this_month(self, employee_id: str) -> float:
        return agg.total_hours_for_employee(self._entries, employee_id, self.this_month())

    def employee_hours_this_year(self, employee_id: str) -> float:
        return agg.total_hours_for_employee(self._entries, employee_id, self.this_year())

    def employee_hours_in(self, employee_id: str, window: Window) -> float:
        return agg.total_hours_for_employee(self._entries, employee_id, window)

    # School

    def school_hours_this_month(self, school_id: str) -> float:
        return agg.total_hours_for_school(self._entries, school_id, self.this_month())

    def school_hours_in(self, school_id: str, window: Window) -> float:
        return agg.total_hours_for_school(self._entries, school_id, window)

    def employee_school_hours_this_month(self, employee_id: str, school_id: str) -> float:
        return agg.total_hours_for_employee_and_school(self._entries, employee_id, school_id, self.this_month())

    def hours_by_school_and_month(self, school_id: str, month: int, year: int) -> list[agg.EmployeeHours]:
        return agg.hours_by_school_and_month(
            self._entries, self._state.store.employees.all(), school_id, month, year
        )

    def schools_touched_by_employee(self, employee_id: str) -> list[School]:
        return agg.schools_touched_by_employee(self._entries, self._state.store.schools.all(), employee_id)

    def employees_touched_by_school(self, school_id: str) -> list[Employee]:
        return agg.employees_touched_by_school(self._entries, self._state.store.employees.all(), school_id)

    # Report views

    def monthly_report(self, month: int, year: int) -> MonthlyReport:
        """Per school: hours per employee in the month. Deleted names show as "Desconocido"."""

        window = Window.month(year, month)
        store = self._state.store

        grouped: dict[str, dict[str, float]] = {}
        for e in self._entries:
            if not window.contains(e.work_date):
                continue
            per_employee = grouped.setdefault(e.school_id, {})
            per_employee[e.employee_id] = per_employee.get(e.employee_id, 0.0) + e.hours

        schools: list[SchoolReport] = []
        for school_id, per_employee in grouped.items():
            school = store.schools.get(school_id)
            lines = []
            for employee_id, hours in per_employee.items():
                employee = store.employees.get(employee_id)
                lines.append(ReportLine(employee.name if employee else UNKNOWN_PLACEHOLDER, hours))
            schools.append(
                SchoolReport(
                    school_id=school_id,
                    school_name=school.name if school else UNKNOWN_PLACEHOLDER,
                    employees=lines,
                    total_hours=sum(line.hours for line in lines),
                )
            )
        return MonthlyReport(month=month, year=year, schools=schools)

    def employee_school_breakdown(self, employee_id: str, month: int, year: int) -> list[ReportLine]:
        window = Window.month(year, month)
        rows = []
        for school in self.schools_touched_by_employee(employee_id):
            hours = agg.total_hours_for_employee_and_school(self._entries, employee_id, school.school_id, window)
            if hours > 0:
                rows.append(ReportLine(school.name, hours))
        return rows

    def school_overview(self) -> list[SchoolOverview]:
        month = self.this_month()
        return [
            SchoolOverview(
                school=s,
                total_hours=agg.total_hours_for_school(self._entries, s.school_id),
                month_hours=agg.total_hours_for_school(self._entries, s.school_id, month),
                entry_count=len(self._state.store.work_entries.where(school_id=s.school_id)),
                employee_count=len(self.employees_touched_by_school(s.school_id)),
            )
            for s in self._state.store.schools.all()
        ]

    def dashboard_summary(self, employee_id: Optional[str] = None) -> DashboardSummary:
        entries = self._entries
        if employee_id:
            entries = [e for e in entries if e.employee_id == employee_id]
        return DashboardSummary(
            active_employees=len(self._state.store.employees.where(active=True)),
            schools=len(self._state.store.schools),
            total_hours=agg.total_hours(entries),
            month_hours=agg.total_hours(entries, self.this_month()),
            week_hours=agg.total_hours(entries, self.this_week()),
        )
