from __future__ import annotations

from poolschedule.domain.entities.resource import Resource

DEFAULT_RESOURCES: tuple[Resource, ...] = (
    Resource(
        id="tamarind",
        name="Tamarind",
        slot_duration_minutes=60,
        window_start="08:00",
        window_end="20:00",
    ),
    Resource(
        id="quayside",
        name="Quayside",
        slot_duration_minutes=60,
        window_start="08:00",
        window_end="20:00",
    ),
)
