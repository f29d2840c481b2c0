from __future__ import annotations

from typing import Any, Optional

from ..core.constants import ENTRY_HOURS_STEP, MAX_ENTRY_HOURS, MIN_ENTRY_HOURS
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} no es válido")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} debe tener al menos {min_len} caracteres")
    return value


def optional_text(value: Optional[str]) -> Optional[str]:
    v = (value or "").strip()
    return v or None


def require_non_negative_hours(value: Any) -> float:
    """Core rule: any non-negative number of hours is accepted."""
    try:
        hours = float(value)
    except (TypeError, ValueError):
        raise ValidationError("Las horas deben ser un número")
    if hours < 0:
        raise ValidationError("Las horas no pueden ser negativas")
    return hours


def require_entry_hours(value: Any) -> float:
    """Form rule: between 0.5 and 24 hours, in half-hour steps."""
    hours = require_non_negative_hours(value)
    if hours < MIN_ENTRY_HOURS:
        raise ValidationError(f"Mínimo {MIN_ENTRY_HOURS} horas.")
    if hours > MAX_ENTRY_HOURS:
        raise ValidationError(f"Máximo {MAX_ENTRY_HOURS:g} horas.")
    steps = hours / ENTRY_HOURS_STEP
    if abs(steps - round(steps)) > 1e-9:
        raise ValidationError(f"Las horas deben ir en incrementos de {ENTRY_HOURS_STEP}")
    return hours
