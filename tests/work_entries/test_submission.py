from datetime import date, time

import pytest

from src.hours_tracker.hours_tracker.core.exceptions import ValidationError
from src.hours_tracker.hours_tracker.work_entries.submission import Multiple, Single, normalize, parse_submission


def test_flat_payload_is_single():
    sub = parse_submission(
        {"date": "2023-09-14", "school_id": "s1", "hours": "3.5", "start_time": "08:00", "end_time": "11:30"},
        employee_id="e1",
    )

    assert isinstance(sub, Single)
    assert sub.entry.work_date == date(2023, 9, 14)
    assert sub.entry.hours == 3.5
    assert sub.entry.start_time == time(8, 0)
    assert sub.entry.end_time == time(11, 30)


def test_entries_payload_is_multiple():
    sub = parse_submission(
        {"date": "2023-09-14T00:00:00", "entries": [{"school_id": "s1", "hours": 2}, {"school_id": "s2", "hours": 1.5}]},
        employee_id="e1",
    )

    assert isinstance(sub, Multiple)
    entries = normalize(sub)
    assert [e.school_id for e in entries] == ["s1", "s2"]
    assert all(e.work_date == date(2023, 9, 14) for e in entries)
    assert entries[0].start_time is None


@pytest.mark.parametrize("hours", [0, 0.25, 24.5, 1.3, "abc", None])
def test_form_hours_rules(hours):
    with pytest.raises(ValidationError):
        parse_submission({"date": "2023-09-14", "school_id": "s1", "hours": hours}, employee_id="e1")


@pytest.mark.parametrize("hours", [0.5, 8, "24"])
def test_form_hours_accepted(hours):
    sub = parse_submission({"date": "2023-09-14", "school_id": "s1", "hours": hours}, employee_id="e1")
    assert sub.entry.hours == float(hours)


def test_missing_fields_are_rejected():
    with pytest.raises(ValidationError):
        parse_submission({"school_id": "s1", "hours": 2}, employee_id="e1")
    with pytest.raises(ValidationError):
        parse_submission({"date": "2023-09-14", "hours": 2}, employee_id="e1")
    with pytest.raises(ValidationError):
        parse_submission({"date": "2023-09-14", "school_id": "s1", "hours": 2}, employee_id="")
    with pytest.raises(ValidationError):
        parse_submission({"date": "2023-09-14", "entries": []}, employee_id="e1")


def test_bad_clock_time_is_rejected():
    with pytest.raises(ValidationError):
        parse_submission(
            {"date": "2023-09-14", "school_id": "s1", "hours": 2, "start_time": "25:99"},
            employee_id="e1",
        )
