from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace
from datetime import datetime, timedelta

from poolschedule.application.utils.time_utils import combine
from poolschedule.domain.entities.schedule_config import DEFAULT_TRAVEL_BUFFER_MINUTES
from poolschedule.domain.entities.slot import Slot, SlotStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeInterval:
    start: datetime
    end: datetime


def to_interval(slot: Slot) -> TimeInterval:
    return TimeInterval(combine(slot.date, slot.start_time), combine(slot.date, slot.end_time))


def overlaps_at_home(candidate: TimeInterval, booked: TimeInterval) -> bool:
    """Direct overlap: the requester would have to be in both places at once."""
    return (
        (booked.start <= candidate.start < booked.end)
        or (booked.start < candidate.end <= booked.end)
        or (candidate.start <= booked.start and candidate.end >= booked.end)
    )


def within_travel_buffer(candidate: TimeInterval, booked: TimeInterval, buffer: timedelta) -> bool:
    """Inclusive check against the booking widened by `buffer` on both sides."""
    buffer_start = booked.start - buffer
    buffer_end = booked.end + buffer
    return (
        (buffer_start <= candidate.start <= buffer_end)
        or (buffer_start <= candidate.end <= buffer_end)
        or (candidate.start <= buffer_start and candidate.end >= buffer_end)
    )


def apply_travel_restriction(
    all_slots: Sequence[Slot],
    home_resource_id: str | None,
    buffer_minutes: int = DEFAULT_TRAVEL_BUFFER_MINUTES,
) -> list[Slot]:
    """
    Resolve every non-occupied slot against occupied slots at other resources.

    A booking at the requester's home resource blocks only directly overlapping
    slots elsewhere (`unavailable`). A booking anywhere else blocks every slot
    touching the booking widened by the travel buffer (`travel-restricted`).
    The first conflicting booking decides. Returns a new list in input order.
    """
    buffer = timedelta(minutes=buffer_minutes)

    occupied: list[tuple[Slot, TimeInterval]] = []
    for slot in all_slots:
        if not slot.is_occupied:
            continue
        try:
            occupied.append((slot, to_interval(slot)))
        except ValueError as e:
            logger.warning(
                "Ignoring occupied slot with unparsable times",
                extra={"resource_id": slot.resource_id, "date": slot.date, "reason": str(e)},
            )

    resolved: list[Slot] = []
    for slot in all_slots:
        if slot.is_occupied:
            resolved.append(slot)
            continue
        try:
            candidate = to_interval(slot)
        except ValueError as e:
            logger.warning(
                "Leaving slot with unparsable times unresolved",
                extra={"resource_id": slot.resource_id, "date": slot.date, "reason": str(e)},
            )
            resolved.append(slot)
            continue
        resolved.append(_resolve_slot(slot, candidate, occupied, home_resource_id, buffer))

    logger.debug(
        "Resolved %d slots against %d occupied",
        len(resolved),
        len(occupied),
        extra={"reason": f"home={home_resource_id}"},
    )
    return resolved


def _resolve_slot(
    slot: Slot,
    candidate: TimeInterval,
    occupied: list[tuple[Slot, TimeInterval]],
    home_resource_id: str | None,
    buffer: timedelta,
) -> Slot:
    for booked_slot, booked in occupied:
        # Adjacent slots at the same pool never restrict each other.
        if booked_slot.resource_id == slot.resource_id:
            continue

        if home_resource_id is not None and home_resource_id == booked_slot.resource_id:
            if overlaps_at_home(candidate, booked):
                return replace(slot, status=SlotStatus.unavailable, reservation=booked_slot.reservation)
        elif within_travel_buffer(candidate, booked, buffer):
            return replace(slot, status=SlotStatus.travel_restricted, reservation=booked_slot.reservation)

    if slot.status == SlotStatus.available:
        return slot
    return replace(slot, status=SlotStatus.available, reservation=None)


def group_slots_by_resource(slots: Sequence[Slot]) -> dict[str, list[Slot]]:
    grouped: dict[str, list[Slot]] = {}
    for slot in slots:
        grouped.setdefault(slot.resource_id, []).append(slot)
    return grouped
