from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Resource:
    id: str
    name: str
    slot_duration_minutes: int
    window_start: str  # HH:MM
    window_end: str  # HH:MM
