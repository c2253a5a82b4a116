from __future__ import annotations

import threading
from dataclasses import replace
from collections.abc import Iterable
from uuid import uuid4

from poolschedule.application.ports.reservation_store import ReservationStorePort
from poolschedule.application.ports.resource_store import ResourceStorePort
from poolschedule.domain.entities.reservation import Reservation
from poolschedule.domain.entities.resource import Resource


class MemoryScheduleStore(ResourceStorePort, ReservationStorePort):
    def __init__(
        self,
        resources: Iterable[Resource] = (),
        reservations: Iterable[Reservation] = (),
    ) -> None:
        self._resources: dict[str, Resource] = {r.id: r for r in resources}
        self._reservations: dict[str, Reservation] = {r.id: r for r in reservations}
        self._lock = threading.Lock()

    def list_resources(self) -> list[Resource]:
        with self._lock:
            return list(self._resources.values())

    def get_resource(self, resource_id: str) -> Resource | None:
        with self._lock:
            return self._resources.get(resource_id)

    def save_resource(self, resource: Resource) -> Resource:
        with self._lock:
            self._resources[resource.id] = resource
        return resource

    def list_reservations(self, date: str) -> list[Reservation]:
        with self._lock:
            matching = [r for r in self._reservations.values() if r.date == date]
        return sorted(matching, key=lambda r: r.start_time)

    def get_reservation(self, reservation_id: str) -> Reservation | None:
        with self._lock:
            return self._reservations.get(reservation_id)

    def add_reservation(self, reservation: Reservation) -> Reservation:
        if not reservation.id:
            reservation = replace(reservation, id=uuid4().hex)
        with self._lock:
            self._reservations[reservation.id] = reservation
        return reservation

    def update_reservation(self, reservation: Reservation) -> Reservation:
        with self._lock:
            if reservation.id not in self._reservations:
                raise KeyError(reservation.id)
            self._reservations[reservation.id] = reservation
        return reservation

    def delete_reservation(self, reservation_id: str) -> bool:
        with self._lock:
            return self._reservations.pop(reservation_id, None) is not None
