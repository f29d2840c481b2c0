"""Ejemplo: usar la capa de servicios sin base de datos (tablas en memoria).

Registra horas, corrige una entrada y exporta el informe mensual a Excel.
"""

from dataclasses import replace
from datetime import datetime

from src.hours_tracker.hours_tracker.container import build_memory_container
from src.hours_tracker.hours_tracker.database.bootstrap import ensure_default_records
from src.hours_tracker.hours_tracker.employees.model import EmployeeData
from src.hours_tracker.hours_tracker.reports.export import monthly_report_frame, to_excel_bytes
from src.hours_tracker.hours_tracker.work_entries.submission import parse_submission


def main():
    container = build_memory_container(clock=lambda: datetime(2023, 9, 15, 10, 0))
    ensure_default_records(container.store, admin_password="admin")
    container.auth_service.login("admin", "admin")

    school = container.school_service.create_school("Colegio San José")
    ana = container.employee_service.create_employee(
        EmployeeData(name="Ana", position="Profesora", assigned_schools=(school.school_id,))
    )

    submission = parse_submission(
        {"date": "2023-09-14", "school_id": school.school_id, "hours": "4"},
        employee_id=ana.employee_id,
    )
    [entry] = container.work_entry_service.submit(submission)
    container.work_entry_service.update_work_entry(replace(entry, hours=4.5))

    print("Horas este mes:", container.report_service.employee_hours_this_month(ana.employee_id))
    report = container.report_service.monthly_report(9, 2023)
    print(monthly_report_frame(report))
    print("Excel:", len(to_excel_bytes(monthly_report_frame(report))), "bytes")

    for log in container.history_service.list_logs(limit=5):
        print(log.timestamp, log.action, log.description)


if __name__ == "__main__":
    main()
