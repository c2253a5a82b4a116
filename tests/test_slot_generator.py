"""
Tests for partitioning a pool's operating window into slots.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from poolschedule.application.exceptions import ScheduleContractError
from poolschedule.application.use_cases.generate_slots import generate_slots
from poolschedule.domain.entities.reservation import Reservation, ReservationStatus
from poolschedule.domain.entities.resource import Resource
from poolschedule.domain.entities.slot import SlotStatus

DAY = "2024-06-01"


def _resource(duration: int = 60, start: str = "08:00", end: str = "20:00", resource_id: str = "tamarind") -> Resource:
    return Resource(
        id=resource_id,
        name=resource_id.title(),
        slot_duration_minutes=duration,
        window_start=start,
        window_end=end,
    )


def _minutes(value: str) -> int:
    t = datetime.strptime(value, "%H:%M")
    return t.hour * 60 + t.minute


@pytest.mark.parametrize("duration", [15, 30, 45, 50, 60, 90, 120, 720])
def test_slots_tile_the_window(duration: int):
    """Slots start at the window start, are contiguous, all `duration` long, and never pass the end."""
    slots = generate_slots(_resource(duration), DAY)

    assert len(slots) == (20 - 8) * 60 // duration
    assert slots[0].start_time == "08:00"
    for previous, current in zip(slots, slots[1:]):
        assert previous.end_time == current.start_time
    for slot in slots:
        assert _minutes(slot.end_time) - _minutes(slot.start_time) == duration
        assert _minutes(slot.end_time) <= _minutes("20:00")
        assert slot.status == SlotStatus.available
        assert slot.date == DAY


def test_trailing_partial_slot_is_dropped():
    """A 50-minute grid over 12 hours leaves 20 minutes that never become a slot."""
    slots = generate_slots(_resource(50), DAY)

    assert len(slots) == 14
    assert (slots[-1].start_time, slots[-1].end_time) == ("18:50", "19:40")


def test_exact_match_reservation_marks_slot_booked():
    reservation = Reservation(
        id="r1",
        resource_id="tamarind",
        date=DAY,
        start_time="15:00",
        end_time="16:00",
        status=ReservationStatus.unavailable,
    )

    slots = generate_slots(_resource(), DAY, [reservation])

    booked = [s for s in slots if s.status == SlotStatus.booked]
    assert len(booked) == 1
    assert (booked[0].start_time, booked[0].end_time) == ("15:00", "16:00")
    assert booked[0].reservation == reservation


def test_misaligned_reservation_attaches_to_no_slot():
    reservation = Reservation(id="r1", resource_id="tamarind", date=DAY, start_time="15:15", end_time="16:15")

    slots = generate_slots(_resource(), DAY, [reservation])

    assert all(s.status == SlotStatus.available for s in slots)
    assert all(s.reservation is None for s in slots)


def test_reservation_for_another_resource_is_ignored():
    reservation = Reservation(id="r1", resource_id="quayside", date=DAY, start_time="15:00", end_time="16:00")

    slots = generate_slots(_resource(), DAY, [reservation])

    assert all(s.status == SlotStatus.available for s in slots)


def test_generation_is_deterministic():
    reservations = [Reservation(id="r1", resource_id="tamarind", date=DAY, start_time="09:00", end_time="10:00")]

    assert generate_slots(_resource(), DAY, reservations) == generate_slots(_resource(), DAY, reservations)


@pytest.mark.parametrize(
    "resource",
    [
        _resource(duration=0),
        _resource(duration=-30),
        _resource(start="20:00", end="08:00"),
        _resource(start="10:00", end="10:00"),
        _resource(start="8am", end="20:00"),
        _resource(start="08:00", end="25:00"),
    ],
)
def test_misconfigured_resource_yields_no_slots(resource: Resource):
    assert generate_slots(resource, DAY) == []


def test_unparsable_date_yields_no_slots():
    assert generate_slots(_resource(), "01/06/2024") == []


def test_window_shorter_than_one_slot_yields_no_slots():
    assert generate_slots(_resource(duration=90, start="08:00", end="09:00"), DAY) == []


def test_missing_resource_is_a_caller_bug():
    with pytest.raises(ScheduleContractError):
        generate_slots(None, DAY)
