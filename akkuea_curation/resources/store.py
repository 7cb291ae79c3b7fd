"""Resource persistence.

The curation verdict reaches storage only through ``status``; ``reason`` is
returned to the caller and logged, never stored.
"""

from __future__ import annotations

import abc
import datetime
import itertools

from akkuea_curation.curation.types import CurationStatus
from akkuea_curation.resources.models import Resource, ResourceFilters, ResourceRequest


class ResourceStoreError(Exception):
    """Storage backend failure."""


class ResourceNotFoundError(ResourceStoreError):
    def __init__(self, resource_id: int):
        super().__init__(f"Resource {resource_id} not found")
        self.resource_id = resource_id


class ResourceStore(abc.ABC):
    @abc.abstractmethod
    async def create(self, req: ResourceRequest, status: CurationStatus) -> Resource: ...

    @abc.abstractmethod
    async def update(self, resource_id: int, req: ResourceRequest, status: CurationStatus) -> Resource:
        """Replace the editable fields and the status. Raises ResourceNotFoundError."""

    @abc.abstractmethod
    async def get(self, resource_id: int) -> Resource:
        """Raises ResourceNotFoundError."""

    @abc.abstractmethod
    async def list(self, filters: ResourceFilters) -> tuple[list[Resource], int]:
        """Return one page (newest first) and the total number of matches."""

    @abc.abstractmethod
    async def delete(self, resource_id: int) -> None:
        """Raises ResourceNotFoundError."""


class InMemoryResourceStore(ResourceStore):
    """Process-local store used when Supabase is not configured."""

    def __init__(self) -> None:
        self._rows: dict[int, Resource] = {}
        self._ids = itertools.count(1)

    async def create(self, req: ResourceRequest, status: CurationStatus) -> Resource:
        resource = Resource(id=next(self._ids), status=status, **req.model_dump())
        self._rows[resource.id] = resource
        return resource

    async def update(self, resource_id: int, req: ResourceRequest, status: CurationStatus) -> Resource:
        current = await self.get(resource_id)
        updated = current.model_copy(
            update={
                **req.model_dump(),
                "status": status,
                "updated_at": datetime.datetime.now(datetime.timezone.utc),
            }
        )
        self._rows[resource_id] = updated
        return updated

    async def get(self, resource_id: int) -> Resource:
        try:
            return self._rows[resource_id]
        except KeyError:
            raise ResourceNotFoundError(resource_id) from None

    async def list(self, filters: ResourceFilters) -> tuple[list[Resource], int]:
        matched = [r for r in self._rows.values() if filters.matches(r)]
        matched.sort(key=lambda r: (r.created_at, r.id), reverse=True)
        return matched[filters.offset : filters.offset + filters.limit], len(matched)

    async def delete(self, resource_id: int) -> None:
        if self._rows.pop(resource_id, None) is None:
            raise ResourceNotFoundError(resource_id)
