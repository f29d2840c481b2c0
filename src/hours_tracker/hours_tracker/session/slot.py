from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Protocol

from ..core.constants import SESSION_SLOT_KEY


class SessionSlot(Protocol):
    """External key-value slot holding the serialized session principal."""

    def read(self) -> Optional[str]:
        raise NotImplementedError

    def write(self, value: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class MemorySessionSlot:
    def __init__(self, value: Optional[str] = None):
        self.value = value

    def read(self) -> Optional[str]:
        return self.value

    def write(self, value: str) -> None:
        self.value = value

    def clear(self) -> None:
        self.value = None


class FileSessionSlot:
    """Keeps the slot in a small JSON document: ``{"currentUser": "<serialized>"}``."""

    def __init__(self, path: str | Path, *, key: str = SESSION_SLOT_KEY):
        self._path = Path(path)
        self._key = key

    def _load(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    def read(self) -> Optional[str]:
        return self._load().get(self._key)

    def write(self, value: str) -> None:
        data = self._load()
        data[self._key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")

    def clear(self) -> None:
        data = self._load()
        if data.pop(self._key, None) is not None:
            self._path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
