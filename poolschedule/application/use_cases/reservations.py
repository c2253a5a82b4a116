from __future__ import annotations

import logging
from dataclasses import replace

from poolschedule.application.exceptions import (
    ReservationNotFoundError,
    ReservationValidationError,
    ResourceNotFoundError,
    SlotUnavailableError,
)
from poolschedule.application.ports.reservation_store import ReservationStorePort
from poolschedule.application.ports.resource_store import ResourceStorePort
from poolschedule.application.use_cases.schedule import ScheduleUseCase
from poolschedule.application.utils.time_utils import normalize_date, normalize_time
from poolschedule.domain.entities.reservation import ADMIN_OWNER, Reservation, ReservationStatus
from poolschedule.domain.entities.slot import SlotStatus


class ReservationUseCase:
    """Booking workflow around the store: admin holds, edits and requester bookings."""

    def __init__(
        self,
        resources: ResourceStorePort,
        reservations: ReservationStorePort,
        schedule: ScheduleUseCase,
    ) -> None:
        self._resources = resources
        self._reservations = reservations
        self._schedule = schedule
        self._logger = logging.getLogger(__name__)

    def list_for_date(self, date: str) -> list[Reservation]:
        return self._reservations.list_reservations(_valid_date(date))

    def create(
        self,
        resource_id: str,
        date: str,
        start_time: str,
        end_time: str,
        status: str | ReservationStatus = ReservationStatus.booked,
        owner_id: str = ADMIN_OWNER,
    ) -> Reservation:
        reservation = self._validated(
            Reservation(
                id="",
                resource_id=resource_id,
                date=date,
                start_time=start_time,
                end_time=end_time,
                status=status,
                owner_id=owner_id or ADMIN_OWNER,
            )
        )
        stored = self._reservations.add_reservation(reservation)
        self._logger.info(
            "Reservation created",
            extra={
                "reservation_id": stored.id,
                "resource_id": stored.resource_id,
                "date": stored.date,
                "status": stored.status.value,
                "owner_id": stored.owner_id,
            },
        )
        return stored

    def update(self, reservation_id: str, **changes: object) -> Reservation:
        current = self._reservations.get_reservation(reservation_id)
        if current is None:
            raise ReservationNotFoundError(reservation_id)

        allowed = {"resource_id", "date", "start_time", "end_time", "status", "owner_id"}
        unknown = set(changes) - allowed
        if unknown:
            raise ReservationValidationError(f"Unknown reservation fields: {sorted(unknown)}")

        updated = self._validated(replace(current, **{k: v for k, v in changes.items() if v is not None}))
        self._reservations.update_reservation(updated)
        self._logger.info("Reservation updated", extra={"reservation_id": reservation_id})
        return updated

    def delete(self, reservation_id: str) -> None:
        if not self._reservations.delete_reservation(reservation_id):
            raise ReservationNotFoundError(reservation_id)
        self._logger.info("Reservation deleted", extra={"reservation_id": reservation_id})

    def book_slot(
        self,
        resource_id: str,
        date: str,
        start_time: str,
        end_time: str,
        owner_id: str,
        home_resource_id: str | None = None,
    ) -> Reservation:
        """
        Book one generated slot for a requester. The slot must exist on the
        resource's grid and resolve to `available` for that requester.
        """
        if self._resources.get_resource(resource_id) is None:
            raise ResourceNotFoundError(resource_id)
        try:
            start = normalize_time(start_time)
            end = normalize_time(end_time)
        except ValueError as e:
            raise ReservationValidationError(str(e)) from e

        day = self._schedule.execute(date, home_resource_id)
        entry = day.for_resource(resource_id)
        slot = None
        if entry is not None:
            slot = next((s for s in entry.slots if s.start_time == start and s.end_time == end), None)

        if slot is None:
            raise SlotUnavailableError(f"No {start}-{end} slot at {resource_id} on {day.date}")
        if slot.status != SlotStatus.available:
            self._logger.info(
                "Booking refused",
                extra={
                    "resource_id": resource_id,
                    "owner_id": owner_id,
                    "date": day.date,
                    "status": slot.status.value,
                },
            )
            raise SlotUnavailableError(f"Slot {start}-{end} at {resource_id} is {slot.status.value}")

        return self.create(resource_id, day.date, start, end, ReservationStatus.booked, owner_id)

    def _validated(self, reservation: Reservation) -> Reservation:
        if self._resources.get_resource(reservation.resource_id) is None:
            raise ResourceNotFoundError(reservation.resource_id)
        try:
            day = normalize_date(reservation.date)
            start = normalize_time(reservation.start_time)
            end = normalize_time(reservation.end_time)
            status = ReservationStatus(reservation.status)
        except ValueError as e:
            raise ReservationValidationError(str(e)) from e
        if end <= start:
            raise ReservationValidationError(f"Reservation must end after it starts ({start}-{end})")
        return replace(reservation, date=day, start_time=start, end_time=end, status=status)


def _valid_date(date: str) -> str:
    try:
        return normalize_date(date)
    except ValueError as e:
        raise ReservationValidationError(str(e)) from e
