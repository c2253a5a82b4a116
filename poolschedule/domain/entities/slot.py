from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from poolschedule.domain.entities.reservation import Reservation


class SlotStatus(str, Enum):
    available = "available"
    booked = "booked"
    unavailable = "unavailable"
    travel_restricted = "travel-restricted"


OCCUPIED_STATUSES = frozenset({SlotStatus.booked, SlotStatus.unavailable})


@dataclass(frozen=True)
class Slot:
    resource_id: str
    date: str  # YYYY-MM-DD
    start_time: str  # HH:MM
    end_time: str  # HH:MM
    status: SlotStatus = SlotStatus.available
    reservation: Reservation | None = None  # what caused a non-available status

    @property
    def is_occupied(self) -> bool:
        return self.status in OCCUPIED_STATUSES
