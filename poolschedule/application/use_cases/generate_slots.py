from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import timedelta

from poolschedule.application.exceptions import ScheduleContractError
from poolschedule.application.utils.time_utils import combine, format_time
from poolschedule.domain.entities.reservation import Reservation
from poolschedule.domain.entities.resource import Resource
from poolschedule.domain.entities.slot import Slot, SlotStatus

logger = logging.getLogger(__name__)


def generate_slots(
    resource: Resource,
    date: str,
    reservations: Iterable[Reservation] = (),
) -> list[Slot]:
    """
    Partition the resource's operating window on `date` into fixed-duration slots.

    A slot is `booked` when a reservation for the same resource has exactly the
    slot's start and end time; misaligned reservations attach to nothing.
    A trailing slot that would end after the window is dropped. Misconfigured
    resources yield an empty list.
    """
    if resource is None:
        raise ScheduleContractError("generate_slots() requires a resource")

    duration = resource.slot_duration_minutes
    if not isinstance(duration, int) or duration <= 0:
        logger.warning(
            "Skipping resource with non-positive slot duration",
            extra={"resource_id": resource.id, "reason": f"duration={duration!r}"},
        )
        return []

    try:
        window_start = combine(date, resource.window_start)
        window_end = combine(date, resource.window_end)
    except ValueError as e:
        logger.warning(
            "Skipping resource with unparsable window",
            extra={"resource_id": resource.id, "date": date, "reason": str(e)},
        )
        return []

    if window_start >= window_end:
        logger.warning(
            "Skipping resource with inverted window",
            extra={
                "resource_id": resource.id,
                "reason": f"{resource.window_start}-{resource.window_end}",
            },
        )
        return []

    by_interval: dict[tuple[str, str], Reservation] = {}
    for reservation in reservations:
        if reservation.resource_id != resource.id:
            continue
        # First reservation wins if the store returns duplicates.
        by_interval.setdefault((reservation.start_time, reservation.end_time), reservation)

    step = timedelta(minutes=duration)
    slots: list[Slot] = []
    current = window_start
    while current + step <= window_end:
        start_str = format_time(current)
        end_str = format_time(current + step)
        reservation = by_interval.get((start_str, end_str))
        if reservation is not None:
            slots.append(
                Slot(
                    resource_id=resource.id,
                    date=date,
                    start_time=start_str,
                    end_time=end_str,
                    status=SlotStatus.booked,
                    reservation=reservation,
                )
            )
        else:
            slots.append(Slot(resource_id=resource.id, date=date, start_time=start_str, end_time=end_str))
        current += step

    logger.debug(
        "Generated %d slots (%d booked)",
        len(slots),
        sum(1 for s in slots if s.status == SlotStatus.booked),
        extra={"resource_id": resource.id, "date": date},
    )
    return slots
