from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class School:
    school_id: str
    name: str
