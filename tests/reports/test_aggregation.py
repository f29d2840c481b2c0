from datetime import date

from src.hours_tracker.hours_tracker.employees.model import Employee
from src.hours_tracker.hours_tracker.reports import aggregation as agg
from src.hours_tracker.hours_tracker.reports.windows import Window
from src.hours_tracker.hours_tracker.schools.model import School
from src.hours_tracker.hours_tracker.work_entries.model import WorkEntry


def _entry(entry_id, employee_id, school_id, d, hours):
    return WorkEntry(entry_id=entry_id, employee_id=employee_id, school_id=school_id, work_date=d, hours=hours)


ENTRIES = [
    _entry("w1", "x", "a", date(2023, 9, 1), 3),
    _entry("w2", "x", "b", date(2023, 9, 30), 4),
    _entry("w3", "x", "a", date(2023, 10, 1), 5),
    _entry("w4", "y", "a", date(2023, 9, 12), 2),
    _entry("w5", "gone", "a", date(2023, 9, 13), 9),
]

EMPLOYEES = [
    Employee("y", "Yolanda", "Profesora"),
    Employee("x", "Xavier", "Profesor"),
    Employee("z", "Zoe", "Profesora", assigned_schools=("a",)),
]

SCHOOLS = [School("b", "Colegio B"), School("a", "Colegio A"), School("c", "Colegio C")]


def test_month_windows_split_at_month_boundary():
    assert agg.total_hours_for_employee(ENTRIES, "x", Window.month(2023, 9)) == 7
    assert agg.total_hours_for_employee(ENTRIES, "x", Window.month(2023, 10)) == 5


def test_totals_by_school_and_pair():
    sept = Window.month(2023, 9)

    assert agg.total_hours_for_school(ENTRIES, "a", sept) == 3 + 2 + 9
    assert agg.total_hours_for_employee_and_school(ENTRIES, "x", "a", sept) == 3
    assert agg.total_hours_for_employee_and_school(ENTRIES, "x", "a") == 8
    assert agg.total_hours(ENTRIES) == 23


def test_hours_by_school_and_month_drops_missing_employees():
    rows = agg.hours_by_school_and_month(ENTRIES, EMPLOYEES, "a", 9, 2023)

    assert [(r.employee.name, r.hours) for r in rows] == [("Xavier", 3), ("Yolanda", 2)]


def test_schools_touched_follow_collection_order():
    touched = agg.schools_touched_by_employee(ENTRIES, SCHOOLS, "x")
    assert [s.school_id for s in touched] == ["b", "a"]


def test_employees_touched_is_union_with_assignment():
    touched = agg.employees_touched_by_school(ENTRIES, EMPLOYEES, "a")
    assert [e.employee_id for e in touched] == ["y", "x", "z"]

    assert agg.employees_touched_by_school(ENTRIES, EMPLOYEES, "c") == []
