import json
from dataclasses import replace

import pytest

from src.hours_tracker.hours_tracker.container import build_container, build_memory_tables
from src.hours_tracker.hours_tracker.core.exceptions import AuthenticationError
from src.hours_tracker.hours_tracker.database.bootstrap import ensure_default_records
from src.hours_tracker.hours_tracker.session.slot import FileSessionSlot, MemorySessionSlot


def test_login_returns_the_active_employee(container):
    user = container.auth_service.login("admin", "admin")

    assert user.username == "admin"
    assert container.auth_service.current_user == user
    assert container.state.session.is_authenticated


def test_login_fails_for_inactive_employee(container):
    admin = container.store.employees.where(username="admin")[0]
    container.store.employees.update(replace(admin, active=False))

    with pytest.raises(AuthenticationError):
        container.auth_service.login("admin", "admin")
    assert container.auth_service.current_user is None


@pytest.mark.parametrize("username, password", [("admin", "wrong"), ("nobody", "admin"), ("ADMIN", "admin")])
def test_login_fails_for_bad_credentials(container, username, password):
    with pytest.raises(AuthenticationError):
        container.auth_service.login(username, password)


def test_slot_holds_public_fields_only(container):
    slot = MemorySessionSlot()
    c = build_container(tables=build_memory_tables(), session_slot=slot)
    ensure_default_records(c.store, admin_password="admin")

    c.auth_service.login("admin", "admin")

    data = json.loads(slot.read())
    assert data["username"] == "admin"
    assert "password_hash" not in data

    c.auth_service.logout()
    assert slot.read() is None


def test_restore_reopens_session_for_active_employee():
    tables = build_memory_tables()
    slot = MemorySessionSlot()
    first = build_container(tables=tables, session_slot=slot)
    ensure_default_records(first.store, admin_password="admin")
    user = first.auth_service.login("admin", "admin")

    second = build_container(tables=tables, session_slot=slot)
    second.store.load()

    assert second.auth_service.restore() == user
    assert second.state.actor_name() == "Administrador"


def test_restore_discards_deleted_or_unreadable_sessions():
    tables = build_memory_tables()
    slot = MemorySessionSlot(json.dumps({"employee_id": "ghost"}))
    c = build_container(tables=tables, session_slot=slot)

    assert c.auth_service.restore() is None
    assert slot.read() is None

    slot.write("not json")
    assert c.auth_service.restore() is None
    assert slot.read() is None


def test_file_slot_round_trip(tmp_path):
    path = tmp_path / "session.json"
    slot = FileSessionSlot(path)

    assert slot.read() is None
    slot.write('{"employee_id": "e1"}')

    assert json.loads(path.read_text(encoding="utf-8")) == {"currentUser": '{"employee_id": "e1"}'}
    assert FileSessionSlot(path).read() == '{"employee_id": "e1"}'

    slot.clear()
    assert slot.read() is None
