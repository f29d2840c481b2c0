from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.hours_tracker.hours_tracker.container import build_memory_container
from src.hours_tracker.hours_tracker.database.bootstrap import ensure_default_records


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    # Friday 15 Sept 2023
    return FakeClock(datetime(2023, 9, 15, 10, 0))


@pytest.fixture
def container(clock):
    c = build_memory_container(clock=clock)
    ensure_default_records(c.store, admin_password="admin")
    return c


@pytest.fixture
def admin(container):
    return container.auth_service.login("admin", "admin")
