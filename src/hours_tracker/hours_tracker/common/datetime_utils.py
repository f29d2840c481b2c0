from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional

MONTH_NAMES = (
    "Enero", "Febrero", "Marzo", "Abril", "Mayo", "Junio",
    "Julio", "Agosto", "Septiembre", "Octubre", "Noviembre", "Diciembre",
)

# Indexed by Python weekday (Monday == 0).
DAY_NAMES = ("Lunes", "Martes", "Miércoles", "Jueves", "Viernes", "Sábado", "Domingo")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_clock_time(value: Optional[str]) -> Optional[time]:
    """Parse an optional HH:MM string; blank means no time."""
    v = (value or "").strip()
    if not v:
        return None
    return datetime.strptime(v, "%H:%M").time()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def start_of_day(d: date) -> datetime:
    return datetime.combine(d, time.min)


def end_of_day(d: date) -> datetime:
    # Millisecond precision: 23:59:59.999
    return datetime.combine(d, time(23, 59, 59, 999000))


def last_day_of_month(year: int, month: int) -> date:
    if month == 12:
        return date(year, 12, 31)
    return date(year, month + 1, 1) - timedelta(days=1)


def month_name(month: int) -> str:
    """Spanish name of a 1-based month number."""
    return MONTH_NAMES[month - 1]


def day_name(d: date) -> str:
    return DAY_NAMES[d.weekday()]


def format_date(d: date) -> str:
    """e.g. '25 Septiembre 2023'."""
    return f"{d.day} {month_name(d.month)} {d.year}"


def current_week_dates(anchor: Optional[date] = None) -> list[date]:
    """Monday-to-Sunday dates of the week containing ``anchor`` (today by default)."""
    anchor = anchor or now_local().date()
    monday = anchor - timedelta(days=anchor.weekday())
    return [monday + timedelta(days=i) for i in range(7)]
