from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from poolschedule.domain.entities.resource import Resource
from poolschedule.domain.entities.slot import Slot, SlotStatus


@dataclass(frozen=True)
class ResourceSchedule:
    resource: Resource
    slots: list[Slot] = field(default_factory=list)


@dataclass(frozen=True)
class DaySchedule:
    date: str
    home_resource_id: str | None
    resources: list[ResourceSchedule] = field(default_factory=list)
    reservation_count: int = 0

    def status_counts(self) -> dict[str, int]:
        counts = Counter(slot.status.value for entry in self.resources for slot in entry.slots)
        return {status.value: counts.get(status.value, 0) for status in SlotStatus}

    def for_resource(self, resource_id: str) -> ResourceSchedule | None:
        for entry in self.resources:
            if entry.resource.id == resource_id:
                return entry
        return None
