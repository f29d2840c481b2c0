from __future__ import annotations

import io
from typing import Iterable

import pandas as pd

from ..common.datetime_utils import format_date
from ..core.constants import UNKNOWN_PLACEHOLDER
from ..store.record_store import RecordStore
from ..work_entries.model import WorkEntry
from .service import MonthlyReport

MONTHLY_COLUMNS = ["Colegio", "Empleado", "Horas"]
ENTRY_COLUMNS = ["Fecha", "Empleado", "Colegio", "Horas", "Inicio", "Fin", "Editado por"]


def monthly_report_frame(report: MonthlyReport) -> pd.DataFrame:
    data = []
    for school in report.schools:
        for line in school.employees:
            data.append({"Colegio": school.school_name, "Empleado": line.name, "Horas": line.hours})
        data.append({"Colegio": school.school_name, "Empleado": "Total", "Horas": school.total_hours})
    return pd.DataFrame(data, columns=MONTHLY_COLUMNS)


def work_entries_frame(entries: Iterable[WorkEntry], store: RecordStore) -> pd.DataFrame:
    data = []
    for e in entries:
        employee = store.employees.get(e.employee_id)
        school = store.schools.get(e.school_id)
        data.append(
            {
                "Fecha": format_date(e.work_date),
                "Empleado": employee.name if employee else UNKNOWN_PLACEHOLDER,
                "Colegio": school.name if school else UNKNOWN_PLACEHOLDER,
                "Horas": e.hours,
                "Inicio": e.start_time.strftime("%H:%M") if e.start_time else "",
                "Fin": e.end_time.strftime("%H:%M") if e.end_time else "",
                "Editado por": e.last_edited_by or "",
            }
        )
    return pd.DataFrame(data, columns=ENTRY_COLUMNS)


def to_excel_bytes(df: pd.DataFrame, *, sheet_name: str = "Horas") -> bytes:
    # Written in memory, never to disk
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name[:31])
    return output.getvalue()


def to_csv_text(df: pd.DataFrame) -> str:
    return df.to_csv(index=False)
