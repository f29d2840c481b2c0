from __future__ import annotations

from enum import Enum


class HistoryAction(str, Enum):
    """Acción registrada en el historial (vocabulario en español)."""

    CREATE = "Añadir"
    UPDATE = "Actualizar"
    DELETE = "Eliminar"
    ERROR = "Error"

    @classmethod
    def canonical(cls) -> tuple["HistoryAction", ...]:
        # "Error" marks a refused operation, not a mutation.
        return (cls.CREATE, cls.UPDATE, cls.DELETE)


class EntityType(str, Enum):
    """Tipo de entidad afectada por una entrada del historial."""

    EMPLOYEE = "employee"
    SCHOOL = "school"
    WORK_ENTRY = "workentry"
    POSITION = "position"
    ROLE = "role"


class WindowKind(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class Permission(str, Enum):
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
