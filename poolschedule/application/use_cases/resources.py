from __future__ import annotations

import logging
import re
from dataclasses import replace
from uuid import uuid4

from poolschedule.application.exceptions import ResourceNotFoundError, ResourceValidationError
from poolschedule.application.ports.resource_store import ResourceStorePort
from poolschedule.application.utils.time_utils import normalize_time
from poolschedule.domain.entities.resource import Resource


class ResourceUseCase:
    def __init__(self, store: ResourceStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def list_all(self) -> list[Resource]:
        return sorted(self._store.list_resources(), key=lambda r: r.name.lower())

    def create(
        self,
        name: str,
        slot_duration_minutes: int,
        window_start: str,
        window_end: str,
        resource_id: str | None = None,
    ) -> Resource:
        if not name or not name.strip():
            raise ResourceValidationError("Resource name is required")
        resource_id = resource_id or _slug(name) or uuid4().hex
        if self._store.get_resource(resource_id) is not None:
            raise ResourceValidationError(f"Resource {resource_id!r} already exists")

        resource = _validated(
            Resource(
                id=resource_id,
                name=name.strip(),
                slot_duration_minutes=slot_duration_minutes,
                window_start=window_start,
                window_end=window_end,
            )
        )
        self._store.save_resource(resource)
        self._logger.info("Resource created", extra={"resource_id": resource.id})
        return resource

    def update(self, resource_id: str, **changes: object) -> Resource:
        current = self._store.get_resource(resource_id)
        if current is None:
            raise ResourceNotFoundError(resource_id)

        allowed = {"name", "slot_duration_minutes", "window_start", "window_end"}
        unknown = set(changes) - allowed
        if unknown:
            raise ResourceValidationError(f"Unknown resource fields: {sorted(unknown)}")

        resource = _validated(replace(current, **{k: v for k, v in changes.items() if v is not None}))
        self._store.save_resource(resource)
        self._logger.info("Resource updated", extra={"resource_id": resource.id})
        return resource


def _validated(resource: Resource) -> Resource:
    if not isinstance(resource.slot_duration_minutes, int) or resource.slot_duration_minutes <= 0:
        raise ResourceValidationError("Slot duration must be a positive number of minutes")
    try:
        start = normalize_time(resource.window_start)
        end = normalize_time(resource.window_end)
    except ValueError as e:
        raise ResourceValidationError(str(e)) from e
    if start >= end:
        raise ResourceValidationError(f"Operating window must start before it ends ({start}-{end})")
    return replace(resource, window_start=start, window_end=end)


def _slug(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
