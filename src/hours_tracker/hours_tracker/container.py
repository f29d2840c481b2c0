from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .common.datetime_utils import now_local
from .core.constants import DEFAULT_WEEK_START
from .database.connection import DBConfig, DatabaseConnection
from .database.memory import InMemoryTable
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeeService
from .history.mysql_history_repository import MySQLHistoryRepository
from .history.service import HistoryService
from .positions.mysql_position_repository import MySQLPositionRepository
from .positions.service import PositionService
from .reports.service import HoursReportService
from .roles.mysql_role_repository import MySQLRoleRepository
from .roles.service import RoleService
from .schools.mysql_school_repository import MySQLSchoolRepository
from .schools.service import SchoolService
from .session.service import AuthService
from .session.slot import MemorySessionSlot, SessionSlot
from .state import AppState
from .store.record_store import RecordStore, Tables
from .work_entries.mysql_work_entry_repository import MySQLEditRecordRepository, MySQLWorkEntryRepository
from .work_entries.service import WorkEntryService


@dataclass(frozen=True)
class Container:
    state: AppState
    store: RecordStore

    history_service: HistoryService
    auth_service: AuthService
    work_entry_service: WorkEntryService
    employee_service: EmployeeService
    school_service: SchoolService
    position_service: PositionService
    role_service: RoleService
    report_service: HoursReportService


def build_mysql_tables(db_config: dict) -> Tables:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return Tables(
        employees=MySQLEmployeeRepository(conn),
        schools=MySQLSchoolRepository(conn),
        positions=MySQLPositionRepository(conn),
        roles=MySQLRoleRepository(conn),
        work_entries=MySQLWorkEntryRepository(conn),
        edit_records=MySQLEditRecordRepository(conn),
        history_logs=MySQLHistoryRepository(conn),
    )


def build_memory_tables() -> Tables:
    return Tables(
        employees=InMemoryTable("employee_id"),
        schools=InMemoryTable("school_id"),
        positions=InMemoryTable("position_id"),
        roles=InMemoryTable("role_id"),
        work_entries=InMemoryTable("entry_id"),
        edit_records=InMemoryTable("edit_id"),
        history_logs=InMemoryTable("log_id"),
    )


def build_container(
    *,
    tables: Tables,
    session_slot: Optional[SessionSlot] = None,
    week_start: int = DEFAULT_WEEK_START,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    store = RecordStore(tables)
    state = AppState(store=store, clock=clock)

    history_service = HistoryService(state)
    auth_service = AuthService(state, session_slot or MemorySessionSlot())
    work_entry_service = WorkEntryService(state, history_service)
    employee_service = EmployeeService(state, history_service, work_entry_service, auth_service)
    school_service = SchoolService(state, history_service, work_entry_service, employee_service)
    position_service = PositionService(state, history_service, employee_service)
    role_service = RoleService(state, history_service, employee_service)
    report_service = HoursReportService(state, week_start=week_start)

    return Container(
        state=state,
        store=store,
        history_service=history_service,
        auth_service=auth_service,
        work_entry_service=work_entry_service,
        employee_service=employee_service,
        school_service=school_service,
        position_service=position_service,
        role_service=role_service,
        report_service=report_service,
    )


def build_memory_container(**kwargs) -> Container:
    """Container over empty in-memory tables (tests, demos)."""
    return build_container(tables=build_memory_tables(), **kwargs)
