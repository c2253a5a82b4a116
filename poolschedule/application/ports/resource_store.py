from __future__ import annotations

from abc import ABC, abstractmethod

from poolschedule.domain.entities.resource import Resource


class ResourceStorePort(ABC):
    @abstractmethod
    def list_resources(self) -> list[Resource]:
        """Return every configured resource."""
        raise NotImplementedError

    @abstractmethod
    def get_resource(self, resource_id: str) -> Resource | None:
        raise NotImplementedError

    @abstractmethod
    def save_resource(self, resource: Resource) -> Resource:
        """Insert or replace a resource by id."""
        raise NotImplementedError
