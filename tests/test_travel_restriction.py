"""
Tests for cross-pool availability resolution (travel buffer and home exemption).
"""

from __future__ import annotations

import pytest

from poolschedule.application.use_cases.generate_slots import generate_slots
from poolschedule.application.use_cases.resolve_availability import (
    apply_travel_restriction,
    group_slots_by_resource,
)
from poolschedule.domain.entities.reservation import Reservation
from poolschedule.domain.entities.resource import Resource
from poolschedule.domain.entities.slot import Slot, SlotStatus

DAY = "2024-06-01"

TAMARIND = Resource(id="tamarind", name="Tamarind", slot_duration_minutes=60, window_start="08:00", window_end="20:00")
QUAYSIDE = Resource(id="quayside", name="Quayside", slot_duration_minutes=60, window_start="08:00", window_end="20:00")
HARBOUR = Resource(id="harbour", name="Harbour", slot_duration_minutes=30, window_start="08:00", window_end="20:00")

BOOKING = Reservation(id="r1", resource_id="tamarind", date=DAY, start_time="15:00", end_time="16:00")


def _all_slots(reservations: list[Reservation], *resources: Resource) -> list[Slot]:
    slots: list[Slot] = []
    for resource in resources or (TAMARIND, QUAYSIDE):
        slots.extend(generate_slots(resource, DAY, [r for r in reservations if r.resource_id == resource.id]))
    return slots


def _statuses(slots: list[Slot], resource_id: str) -> dict[str, SlotStatus]:
    return {s.start_time: s.status for s in slots if s.resource_id == resource_id}


def test_end_to_end_tamarind_booking_seen_from_quayside():
    """A 15:00-16:00 Tamarind booking restricts the three touching hourly Quayside slots."""
    resolved = apply_travel_restriction(_all_slots([BOOKING]), "quayside")

    tamarind = _statuses(resolved, "tamarind")
    quayside = _statuses(resolved, "quayside")

    assert tamarind["15:00"] == SlotStatus.booked
    assert all(status == SlotStatus.available for start, status in tamarind.items() if start != "15:00")

    restricted = {"14:00", "15:00", "16:00"}
    for start, status in quayside.items():
        expected = SlotStatus.travel_restricted if start in restricted else SlotStatus.available
        assert status == expected, start


def test_home_resident_sees_only_the_direct_overlap():
    """For a Tamarind resident the booking blocks only the overlapping Quayside hour, as unavailable."""
    resolved = apply_travel_restriction(_all_slots([BOOKING]), "tamarind")

    quayside = _statuses(resolved, "quayside")
    assert quayside["15:00"] == SlotStatus.unavailable
    assert all(status == SlotStatus.available for start, status in quayside.items() if start != "15:00")

    tamarind = _statuses(resolved, "tamarind")
    assert tamarind["15:00"] == SlotStatus.booked
    assert SlotStatus.travel_restricted not in tamarind.values()


def test_travel_buffer_shape_on_half_hour_grid():
    """Slots touching 14:30-16:30 at a third pool are restricted, slots wholly outside are not."""
    resolved = apply_travel_restriction(_all_slots([BOOKING], TAMARIND, QUAYSIDE, HARBOUR), "quayside")

    harbour = _statuses(resolved, "harbour")
    restricted = {"14:00", "14:30", "15:00", "15:30", "16:00", "16:30"}
    for start, status in harbour.items():
        expected = SlotStatus.travel_restricted if start in restricted else SlotStatus.available
        assert status == expected, start


def test_missing_home_applies_buffer_everywhere():
    resolved = apply_travel_restriction(_all_slots([BOOKING]), None)

    quayside = _statuses(resolved, "quayside")
    assert [s for s, status in quayside.items() if status == SlotStatus.travel_restricted] == [
        "14:00",
        "15:00",
        "16:00",
    ]


def test_slots_at_the_same_pool_never_restrict_each_other():
    resolved = apply_travel_restriction(_all_slots([BOOKING], TAMARIND), "quayside")

    tamarind = _statuses(resolved, "tamarind")
    assert tamarind["14:00"] == SlotStatus.available
    assert tamarind["16:00"] == SlotStatus.available
    assert SlotStatus.travel_restricted not in tamarind.values()


def test_restricted_slot_references_the_causing_reservation():
    resolved = apply_travel_restriction(_all_slots([BOOKING]), "quayside")

    restricted = [s for s in resolved if s.status == SlotStatus.travel_restricted]
    assert restricted
    assert all(s.reservation == BOOKING for s in restricted)
    assert all(s.reservation is None for s in resolved if s.status == SlotStatus.available)


def test_unavailable_reservation_blocks_like_a_booking():
    hold = Reservation(
        id="r2",
        resource_id="tamarind",
        date=DAY,
        start_time="10:00",
        end_time="11:00",
        status="unavailable",
    )
    occupied = Slot(
        resource_id="tamarind",
        date=DAY,
        start_time="10:00",
        end_time="11:00",
        status=SlotStatus.unavailable,
        reservation=hold,
    )
    candidate = Slot(resource_id="quayside", date=DAY, start_time="11:00", end_time="12:00")

    resolved = apply_travel_restriction([occupied, candidate], "quayside")

    assert resolved[0] is occupied
    assert resolved[1].status == SlotStatus.travel_restricted


def test_unattached_reservation_is_invisible_to_conflict_detection():
    misaligned = Reservation(id="r3", resource_id="tamarind", date=DAY, start_time="15:15", end_time="16:15")

    resolved = apply_travel_restriction(_all_slots([misaligned]), "quayside")

    assert all(s.status == SlotStatus.available for s in resolved)


def test_resolution_is_idempotent_and_does_not_mutate_input():
    slots = _all_slots([BOOKING])
    snapshot = list(slots)

    first = apply_travel_restriction(slots, "quayside")
    second = apply_travel_restriction(slots, "quayside")

    assert first == second
    assert slots == snapshot
    assert first is not slots


def test_output_preserves_input_order():
    slots = list(reversed(_all_slots([BOOKING])))

    resolved = apply_travel_restriction(slots, "quayside")

    assert [(s.resource_id, s.start_time) for s in resolved] == [(s.resource_id, s.start_time) for s in slots]


def test_first_listed_booking_decides_between_home_and_buffer_conflicts():
    """A candidate overlapping a home booking and inside another pool's buffer takes the earlier one's status."""
    quayside_booking = Reservation(id="r2", resource_id="quayside", date=DAY, start_time="15:00", end_time="16:00")
    reservations = [BOOKING, quayside_booking]

    home_first = apply_travel_restriction(_all_slots(reservations, TAMARIND, QUAYSIDE, HARBOUR), "tamarind")
    home_second = apply_travel_restriction(_all_slots(reservations, QUAYSIDE, TAMARIND, HARBOUR), "tamarind")

    first = next(s for s in home_first if s.resource_id == "harbour" and s.start_time == "15:00")
    second = next(s for s in home_second if s.resource_id == "harbour" and s.start_time == "15:00")
    assert (first.status, first.reservation) == (SlotStatus.unavailable, BOOKING)
    assert (second.status, second.reservation) == (SlotStatus.travel_restricted, quayside_booking)

def test_previously_restricted_slot_is_recomputed():
    stale = Slot(
        resource_id="quayside",
        date=DAY,
        start_time="09:00",
        end_time="10:00",
        status=SlotStatus.travel_restricted,
        reservation=BOOKING,
    )

    resolved = apply_travel_restriction([stale], "quayside")

    assert resolved[0].status == SlotStatus.available
    assert resolved[0].reservation is None


@pytest.mark.parametrize("bad_time", ["", "3pm", "15:75"])
def test_malformed_occupied_slot_is_skipped(bad_time: str):
    broken = Slot(resource_id="tamarind", date=DAY, start_time=bad_time, end_time="16:00", status=SlotStatus.booked)
    candidate = Slot(resource_id="quayside", date=DAY, start_time="15:00", end_time="16:00")

    resolved = apply_travel_restriction([broken, candidate], "quayside")

    assert resolved == [broken, candidate]


def test_malformed_candidate_is_left_unchanged():
    booked = Slot(resource_id="tamarind", date=DAY, start_time="15:00", end_time="16:00", status=SlotStatus.booked)
    broken = Slot(resource_id="quayside", date="not-a-date", start_time="15:00", end_time="16:00")
    good = Slot(resource_id="quayside", date=DAY, start_time="16:00", end_time="17:00")

    resolved = apply_travel_restriction([booked, broken, good], "quayside")

    assert resolved[1] is broken
    assert resolved[2].status == SlotStatus.travel_restricted


def test_custom_buffer_width():
    resolved = apply_travel_restriction(_all_slots([BOOKING]), "quayside", buffer_minutes=0)

    quayside = _statuses(resolved, "quayside")
    # With no buffer, boundary-touching hours still count under the inclusive rule.
    assert [s for s, status in quayside.items() if status == SlotStatus.travel_restricted] == [
        "14:00",
        "15:00",
        "16:00",
    ]

    wide = _statuses(apply_travel_restriction(_all_slots([BOOKING]), "quayside", buffer_minutes=90), "quayside")
    assert [s for s, status in wide.items() if status == SlotStatus.travel_restricted] == [
        "13:00",
        "14:00",
        "15:00",
        "16:00",
        "17:00",
    ]


def test_group_slots_by_resource_keeps_order():
    slots = _all_slots([BOOKING])

    grouped = group_slots_by_resource(slots)

    assert list(grouped) == ["tamarind", "quayside"]
    assert [s.start_time for s in grouped["quayside"]] == [s.start_time for s in slots if s.resource_id == "quayside"]
