from datetime import date

import pytest

from src.hours_tracker.hours_tracker.employees.model import EmployeeData
from src.hours_tracker.hours_tracker.work_entries.model import NewWorkEntry, WorkEntry


@pytest.fixture
def data(container, admin):
    a = container.school_service.create_school("Colegio A")
    b = container.school_service.create_school("Colegio B")
    ana = container.employee_service.create_employee(EmployeeData(name="Ana", position="Profesora"))
    luis = container.employee_service.create_employee(
        EmployeeData(name="Luis", position="Profesor", assigned_schools=(b.school_id,))
    )

    def log(emp, school, d, hours):
        container.work_entry_service.add_work_entry(
            NewWorkEntry(employee_id=emp.employee_id, school_id=school.school_id, work_date=d, hours=hours)
        )

    log(ana, a, date(2023, 9, 9), 1)  # Saturday of the previous week
    log(ana, a, date(2023, 9, 10), 2)
    log(ana, b, date(2023, 9, 15), 3)
    log(ana, a, date(2023, 8, 31), 4)
    log(luis, a, date(2023, 9, 12), 5)
    log(ana, a, date(2022, 9, 12), 6)
    return {"a": a, "b": b, "ana": ana, "luis": luis}


def test_this_week_month_year_follow_the_clock(container, data):
    reports = container.report_service
    ana = data["ana"].employee_id

    assert reports.employee_hours_this_week(ana) == 2 + 3
    assert reports.employee_hours_this_month(ana) == 1 + 2 + 3
    assert reports.employee_hours_this_year(ana) == 1 + 2 + 3 + 4
    assert reports.employee_hours_by_day(ana, date(2023, 9, 15)) == 3


def test_school_and_pair_totals(container, data):
    reports = container.report_service

    assert reports.school_hours_this_month(data["a"].school_id) == 1 + 2 + 5
    assert reports.employee_school_hours_this_month(data["ana"].employee_id, data["b"].school_id) == 3


def test_touched_views(container, data):
    reports = container.report_service

    assert reports.schools_touched_by_employee(data["luis"].employee_id) == [data["a"]]
    assert [e.name for e in reports.employees_touched_by_school(data["b"].school_id)] == ["Ana", "Luis"]
    rows = reports.hours_by_school_and_month(data["a"].school_id, 9, 2023)
    assert [(r.employee.name, r.hours) for r in rows] == [("Ana", 3), ("Luis", 5)]


def test_monthly_report_uses_placeholder_for_missing_records(container, data):
    container.store.work_entries.insert(
        WorkEntry(entry_id="orphan", employee_id="ghost", school_id="gone", work_date=date(2023, 9, 20), hours=7)
    )

    report = container.report_service.monthly_report(9, 2023)

    assert report.title == "Septiembre 2023"
    by_school = {s.school_name: s for s in report.schools}
    assert set(by_school) == {"Colegio A", "Colegio B", "Desconocido"}
    assert by_school["Colegio A"].total_hours == 8
    assert by_school["Desconocido"].employees[0].name == "Desconocido"
    assert report.total_hours == 1 + 2 + 3 + 5 + 7


def test_employee_school_breakdown_skips_empty_schools(container, data):
    rows = container.report_service.employee_school_breakdown(data["ana"].employee_id, 8, 2023)

    assert [(r.name, r.hours) for r in rows] == [("Colegio A", 4)]


def test_school_overview_and_dashboard(container, data):
    overview = {o.school.name: o for o in container.report_service.school_overview()}

    assert overview["Colegio A"].total_hours == 1 + 2 + 4 + 5 + 6
    assert overview["Colegio A"].month_hours == 8
    assert overview["Colegio A"].entry_count == 5
    assert overview["Colegio B"].entry_count == 1
    assert overview["Colegio B"].employee_count == 2

    summary = container.report_service.dashboard_summary()
    assert summary.active_employees == 3
    assert summary.schools == 2
    assert summary.total_hours == 21
    assert summary.week_hours == 2 + 3 + 5

    mine = container.report_service.dashboard_summary(data["luis"].employee_id)
    assert mine.total_hours == 5
