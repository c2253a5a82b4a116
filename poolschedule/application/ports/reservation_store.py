from __future__ import annotations

from abc import ABC, abstractmethod

from poolschedule.domain.entities.reservation import Reservation


class ReservationStorePort(ABC):
    @abstractmethod
    def list_reservations(self, date: str) -> list[Reservation]:
        """Return a consistent snapshot of the date's reservations, ordered by start time."""
        raise NotImplementedError

    @abstractmethod
    def get_reservation(self, reservation_id: str) -> Reservation | None:
        raise NotImplementedError

    @abstractmethod
    def add_reservation(self, reservation: Reservation) -> Reservation:
        raise NotImplementedError

    @abstractmethod
    def update_reservation(self, reservation: Reservation) -> Reservation:
        raise NotImplementedError

    @abstractmethod
    def delete_reservation(self, reservation_id: str) -> bool:
        """Delete by id. Returns True if something was removed."""
        raise NotImplementedError
