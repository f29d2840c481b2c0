from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from .common.datetime_utils import now_local
from .core.constants import SYSTEM_ACTOR
from .session.model import Session
from .store.record_store import RecordStore


@dataclass
class AppState:
    """Application state shared by every service.

    Created once at startup by the container and discarded with it; there are no
    module-level singletons for the session or the collections.
    """

    store: RecordStore
    session: Session = field(default_factory=Session)
    clock: Callable[[], datetime] = now_local

    def now(self) -> datetime:
        return self.clock()

    def actor_name(self) -> str:
        principal = self.session.principal
        return principal.name if principal else SYSTEM_ACTOR
