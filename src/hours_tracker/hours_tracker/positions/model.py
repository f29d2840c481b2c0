from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Cargo (catálogo de texto libre para Employee.position)."""

    position_id: str
    name: str
