from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.constants import SYSTEM_ACTOR
from ..core.enums import EntityType, HistoryAction
from ..core.exceptions import PersistenceError
from ..state import AppState
from ..store.record_store import new_id
from .model import HistoryLog

logger = logging.getLogger(__name__)

ALL = "all"


class HistoryService:
    """Append-only audit ledger: one entry per mutation, plus "Error" entries for refusals."""

    def __init__(self, state: AppState):
        self._state = state

    def record(
        self,
        action: HistoryAction,
        description: str,
        *,
        entity_type: Optional[EntityType] = None,
        entity_name: Optional[str] = None,
        details: Optional[str] = None,
        performed_by: Optional[str] = None,
    ) -> Optional[HistoryLog]:
        log = HistoryLog(
            log_id=new_id(),
            action=action.value,
            description=description,
            timestamp=self._state.now(),
            performed_by=performed_by or self._state.actor_name(),
            entity_type=entity_type.value if entity_type else None,
            entity_name=entity_name,
            details=details,
        )
        try:
            return self._state.store.history_logs.insert(log)
        except PersistenceError:
            # The mutation being logged already happened; losing the log line must not undo it.
            logger.error("History entry not saved: %s - %s", log.action, log.description)
            return None

    def record_error(
        self,
        description: str,
        *,
        entity_type: Optional[EntityType] = None,
        entity_name: Optional[str] = None,
    ) -> Optional[HistoryLog]:
        logger.warning("Refused: %s", description)
        return self.record(
            HistoryAction.ERROR,
            description,
            entity_type=entity_type,
            entity_name=entity_name,
            performed_by=SYSTEM_ACTOR,
        )

    def list_logs(self, *, limit: Optional[int] = None) -> list[HistoryLog]:
        # Newest first; ties keep reverse insertion order.
        logs = list(reversed(self._state.store.history_logs.all()))
        logs.sort(key=lambda log: log.timestamp, reverse=True)
        return logs[:limit] if limit is not None else logs

    def filter_logs(
        self,
        *,
        entity_type: str = ALL,
        action: str = ALL,
        search: str = "",
        include_errors: bool = True,
    ) -> list[HistoryLog]:
        return filter_history_logs(
            self.list_logs(),
            entity_type=entity_type,
            action=action,
            search=search,
            include_errors=include_errors,
        )


def filter_history_logs(
    logs: Sequence[HistoryLog],
    *,
    entity_type: str = ALL,
    action: str = ALL,
    search: str = "",
    include_errors: bool = True,
) -> list[HistoryLog]:
    """Filter for the history screen.

    ``action`` matches case-insensitively ("añadir" == "Añadir"). "Error" marks
    refusals rather than mutations; ``include_errors=False`` hides those entries
    even when ``action`` is "all".
    """

    term = search.strip().lower()
    wanted_action = action.lower()
    canonical = {a.value.lower() for a in HistoryAction.canonical()}

    out: list[HistoryLog] = []
    for log in logs:
        log_action = log.action.lower()
        if not include_errors and log_action not in canonical:
            continue
        if entity_type != ALL and log.entity_type != entity_type:
            continue
        if wanted_action != ALL and log_action != wanted_action:
            continue
        if term and not any(term in (text or "").lower() for text in (log.entity_name, log.details, log.description)):
            continue
        out.append(log)
    return out
