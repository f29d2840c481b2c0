from __future__ import annotations

from typing import Optional

from ..common.validators import require_non_empty
from ..core.enums import EntityType, HistoryAction
from ..core.exceptions import ValidationError
from ..employees.service import EmployeeService
from ..history.service import HistoryService
from ..state import AppState
from ..store.record_store import new_id
from .model import Position


class PositionService:
    def __init__(self, state: AppState, history: HistoryService, employees: EmployeeService):
        self._state = state
        self._history = history
        self._employees = employees

    @property
    def _positions(self):
        return self._state.store.positions

    def get_position(self, position_id: str) -> Optional[Position]:
        return self._positions.get(position_id)

    def list_positions(self) -> list[Position]:
        return self._positions.all()

    def create_position(self, name: str) -> Position:
        position = Position(position_id=new_id(), name=require_non_empty(name, "Nombre del cargo"))
        self._positions.insert(position)
        self._history.record(
            HistoryAction.CREATE,
            f"Se añadió el cargo {position.name}",
            entity_type=EntityType.POSITION,
            entity_name=position.name,
        )
        return position

    def update_position(self, position_id: str, name: str) -> Position:
        current = self._positions.get(position_id)
        if not current:
            raise ValidationError("El cargo no existe")

        position = Position(position_id=position_id, name=require_non_empty(name, "Nombre del cargo"))
        self._positions.update(position)
        if position.name != current.name:
            self._employees.rename_position(current.name, position.name)
        self._history.record(
            HistoryAction.UPDATE,
            f"Se actualizó el cargo {position.name}",
            entity_type=EntityType.POSITION,
            entity_name=position.name,
        )
        return position

    def delete_position(self, position_id: str) -> None:
        position = self._positions.get(position_id)
        if not position:
            raise ValidationError("El cargo no existe")

        self._positions.delete(position_id)
        self._history.record(
            HistoryAction.DELETE,
            f"Se eliminó el cargo {position.name}",
            entity_type=EntityType.POSITION,
            entity_name=position.name,
        )
