from datetime import date, datetime, time

from src.hours_tracker.hours_tracker.common.datetime_utils import (
    current_week_dates,
    day_name,
    end_of_day,
    format_date,
    last_day_of_month,
    month_name,
    parse_clock_time,
)


def test_spanish_names():
    assert month_name(1) == "Enero"
    assert month_name(12) == "Diciembre"
    assert day_name(date(2023, 9, 17)) == "Domingo"
    assert format_date(date(2023, 9, 5)) == "5 Septiembre 2023"


def test_end_of_day_has_millisecond_precision():
    assert end_of_day(date(2023, 9, 1)) == datetime(2023, 9, 1, 23, 59, 59, 999000)


def test_last_day_of_month():
    assert last_day_of_month(2023, 2) == date(2023, 2, 28)
    assert last_day_of_month(2023, 12) == date(2023, 12, 31)


def test_current_week_is_monday_to_sunday():
    week = current_week_dates(date(2023, 9, 15))

    assert week[0] == date(2023, 9, 11)
    assert week[-1] == date(2023, 9, 17)
    assert len(week) == 7


def test_parse_clock_time():
    assert parse_clock_time("07:45") == time(7, 45)
    assert parse_clock_time("  ") is None
    assert parse_clock_time(None) is None
