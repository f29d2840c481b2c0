"""Work-entry form payloads.

The hours form posts either one flat entry or a date plus a list of per-school
entries. ``parse_submission`` resolves that once into ``Single`` or ``Multiple``
and applies the form rules (0.5-24 hours in half-hour steps); the service only
ever sees the normalized list.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Union

from ..common.datetime_utils import parse_clock_time, parse_iso_date
from ..common.validators import require_entry_hours, require_non_empty
from ..core.exceptions import ValidationError
from .model import NewWorkEntry


@dataclass(frozen=True)
class Single:
    entry: NewWorkEntry


@dataclass(frozen=True)
class Multiple:
    entries: tuple[NewWorkEntry, ...]


WorkEntrySubmission = Union[Single, Multiple]


def normalize(submission: WorkEntrySubmission) -> list[NewWorkEntry]:
    if isinstance(submission, Single):
        return [submission.entry]
    if isinstance(submission, Multiple):
        return list(submission.entries)
    raise TypeError(f"Unsupported submission: {type(submission)!r}")


def _parse_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value or "").strip()[:10])
    except ValueError:
        raise ValidationError("Seleccione una fecha.")


def _parse_entry(employee_id: str, work_date: date, item: Mapping[str, Any]) -> NewWorkEntry:
    school_id = require_non_empty(str(item.get("school_id") or ""), "Colegio")
    try:
        start_time = parse_clock_time(item.get("start_time"))
        end_time = parse_clock_time(item.get("end_time"))
    except ValueError:
        raise ValidationError("Hora no válida (HH:MM)")
    return NewWorkEntry(
        employee_id=employee_id,
        school_id=school_id,
        work_date=work_date,
        hours=require_entry_hours(item.get("hours")),
        start_time=start_time,
        end_time=end_time,
    )


def parse_submission(payload: Mapping[str, Any], *, employee_id: str) -> WorkEntrySubmission:
    employee_id = require_non_empty(employee_id, "Empleado")
    work_date = _parse_date(payload.get("date"))

    items = payload.get("entries")
    if items is None:
        return Single(_parse_entry(employee_id, work_date, payload))

    if not items:
        raise ValidationError("Debe agregar al menos una entrada de colegio.")
    return Multiple(tuple(_parse_entry(employee_id, work_date, item) for item in items))
