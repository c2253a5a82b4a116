from __future__ import annotations

import logging
from collections import defaultdict

from poolschedule.application.exceptions import ReservationValidationError
from poolschedule.application.ports.reservation_store import ReservationStorePort
from poolschedule.application.ports.resource_store import ResourceStorePort
from poolschedule.application.use_cases.generate_slots import generate_slots
from poolschedule.application.use_cases.resolve_availability import (
    apply_travel_restriction,
    group_slots_by_resource,
)
from poolschedule.application.utils.time_utils import normalize_date
from poolschedule.domain.entities.day_schedule import DaySchedule, ResourceSchedule
from poolschedule.domain.entities.reservation import Reservation
from poolschedule.domain.entities.resource import Resource
from poolschedule.domain.entities.schedule_config import ScheduleConfig


class ScheduleUseCase:
    def __init__(
        self,
        resources: ResourceStorePort,
        reservations: ReservationStorePort,
        config: ScheduleConfig | None = None,
    ) -> None:
        self._resources = resources
        self._reservations = reservations
        self._config = config or ScheduleConfig()
        self._logger = logging.getLogger(__name__)

    def execute(self, target_date: str, home_resource_id: str | None = None) -> DaySchedule:
        """
        Build the resolved schedule of every resource for one date, as seen by
        a requester whose home pool is `home_resource_id`.
        """
        try:
            day = normalize_date(target_date)
        except ValueError as e:
            raise ReservationValidationError(f"Invalid date {target_date!r}: {e}") from e

        home = home_resource_id or None
        resources = _order_resources(self._resources.list_resources(), home)
        reservations = self._reservations.list_reservations(day)

        by_resource: dict[str, list[Reservation]] = defaultdict(list)
        for reservation in reservations:
            if reservation.date == day:
                by_resource[reservation.resource_id].append(reservation)

        all_slots = []
        for resource in resources:
            all_slots.extend(generate_slots(resource, day, by_resource.get(resource.id, [])))

        resolved = apply_travel_restriction(all_slots, home, self._config.travel_buffer_minutes)
        grouped = group_slots_by_resource(resolved)

        self._logger.info(
            "Schedule resolved",
            extra={"date": day, "reason": f"home={home} reservations={len(reservations)}"},
        )
        return DaySchedule(
            date=day,
            home_resource_id=home,
            resources=[ResourceSchedule(resource=r, slots=grouped.get(r.id, [])) for r in resources],
            reservation_count=len(reservations),
        )


def _order_resources(resources: list[Resource], home_resource_id: str | None) -> list[Resource]:
    """Home pool first, the rest by name."""
    return sorted(resources, key=lambda r: (r.id != home_resource_id, r.name.lower(), r.id))
