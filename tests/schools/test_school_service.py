from dataclasses import replace
from datetime import date

import pytest

from src.hours_tracker.hours_tracker.core.exceptions import GuardedDeleteError, ValidationError
from src.hours_tracker.hours_tracker.employees.model import EmployeeData
from src.hours_tracker.hours_tracker.work_entries.model import NewWorkEntry


def _setup(container):
    school = container.school_service.create_school("Colegio A")
    emp = container.employee_service.create_employee(
        EmployeeData(name="Ana", position="Profesora", assigned_schools=(school.school_id,))
    )
    return school, emp


def _log_hours(container, emp, school, hours=3):
    return container.work_entry_service.add_work_entry(
        NewWorkEntry(employee_id=emp.employee_id, school_id=school.school_id, work_date=date(2023, 9, 14), hours=hours)
    )


def test_guarded_delete_then_force_delete(container, admin):
    school, emp = _setup(container)
    entry = _log_hours(container, emp, school)

    with pytest.raises(GuardedDeleteError):
        container.school_service.delete_school(school.school_id)

    assert container.store.schools.get(school.school_id) is not None
    assert container.history_service.list_logs()[0].action == "Error"

    removed = container.school_service.delete_school_and_reset_hours(school.school_id)

    assert removed == 1
    assert container.store.schools.get(school.school_id) is None
    assert container.store.work_entries.get(entry.entry_id) is None
    log = container.history_service.list_logs()[0]
    assert log.description == "Se eliminó el colegio Colegio A y todos sus registros asociados"


def test_force_delete_removes_edit_records(container, admin):
    school, emp = _setup(container)
    entry = _log_hours(container, emp, school)
    container.work_entry_service.update_work_entry(replace(entry, hours=6))

    container.school_service.delete_school_and_reset_hours(school.school_id)

    assert not container.store.work_entries.exists(school_id=school.school_id)
    assert len(container.store.edit_records) == 0


def test_delete_school_without_entries_unassigns_employees(container, admin):
    school, emp = _setup(container)

    container.school_service.delete_school(school.school_id)

    assert container.store.schools.get(school.school_id) is None
    assert container.store.employees.get(emp.employee_id).assigned_schools == ()
    assert container.history_service.list_logs()[0].description == "Se eliminó el colegio Colegio A"


def test_force_delete_also_unassigns_employees(container, admin):
    school, emp = _setup(container)
    _log_hours(container, emp, school)

    container.school_service.delete_school_and_reset_hours(school.school_id)

    assert container.store.employees.get(emp.employee_id).assigned_schools == ()


def test_create_and_rename_school(container, admin):
    school = container.school_service.create_school("  Colegio B ")
    assert school.name == "Colegio B"

    renamed = container.school_service.update_school(school.school_id, "Colegio C")

    assert container.store.schools.get(school.school_id).name == "Colegio C"
    assert renamed.name == "Colegio C"
    assert container.history_service.list_logs()[0].description == "Se actualizó el colegio Colegio C"


def test_blank_school_name_is_rejected(container, admin):
    with pytest.raises(ValidationError):
        container.school_service.create_school("   ")
    assert len(container.store.schools) == 0
