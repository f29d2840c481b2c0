from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Union

from ..common.datetime_utils import end_of_day, last_day_of_month, start_of_day
from ..core.constants import DEFAULT_WEEK_START
from ..core.enums import WindowKind


@dataclass(frozen=True)
class Window:
    """Calendar-aligned, inclusive range: start at 00:00:00.000, end at 23:59:59.999."""

    kind: WindowKind
    start: datetime
    end: datetime

    def contains(self, value: Union[date, datetime]) -> bool:
        if not isinstance(value, datetime):
            value = start_of_day(value)
        return self.start <= value <= self.end

    @classmethod
    def _span(cls, kind: WindowKind, first: date, last: date) -> "Window":
        return cls(kind=kind, start=start_of_day(first), end=end_of_day(last))

    @classmethod
    def day(cls, d: date) -> "Window":
        return cls._span(WindowKind.DAY, d, d)

    @classmethod
    def week(cls, now: Union[date, datetime], week_start: int = DEFAULT_WEEK_START) -> "Window":
        """The week containing ``now``; ``week_start`` is a Python weekday (Sunday == 6)."""
        today = now.date() if isinstance(now, datetime) else now
        first = today - timedelta(days=(today.weekday() - week_start) % 7)
        return cls._span(WindowKind.WEEK, first, first + timedelta(days=6))

    @classmethod
    def month(cls, year: int, month: int) -> "Window":
        if not 1 <= month <= 12:
            raise ValueError(f"month must be 1..12, got {month}")
        return cls._span(WindowKind.MONTH, date(year, month, 1), last_day_of_month(year, month))

    @classmethod
    def year(cls, year: int) -> "Window":
        return cls._span(WindowKind.YEAR, date(year, 1, 1), date(year, 12, 31))
