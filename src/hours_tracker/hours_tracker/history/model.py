from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class HistoryLog:
    """Entrada del historial del sistema (solo se añade, nunca se modifica)."""

    log_id: str
    action: str
    description: str
    timestamp: datetime
    performed_by: str
    entity_type: Optional[str] = None
    entity_name: Optional[str] = None
    details: Optional[str] = None
