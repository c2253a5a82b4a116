from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ADMIN_OWNER = "admin"


class ReservationStatus(str, Enum):
    booked = "booked"
    unavailable = "unavailable"


@dataclass(frozen=True)
class Reservation:
    id: str
    resource_id: str
    date: str  # YYYY-MM-DD
    start_time: str  # HH:MM
    end_time: str  # HH:MM
    status: ReservationStatus = ReservationStatus.booked
    owner_id: str = ADMIN_OWNER

    @property
    def is_admin_hold(self) -> bool:
        return self.owner_id == ADMIN_OWNER
