"""Supabase DB client: resource persistence.

Rows live in the ``resources`` table; ``status`` carries the curation verdict
(Approved / Pending / Rejected) and defaults to Pending at the DB level.
"""

from __future__ import annotations

import datetime
import logging
from typing import Any

from supabase import AsyncClient, acreate_client

from akkuea_curation.config import Settings
from akkuea_curation.curation.types import CurationStatus
from akkuea_curation.resources.models import Resource, ResourceFilters, ResourceRequest
from akkuea_curation.resources.store import ResourceNotFoundError, ResourceStore, ResourceStoreError

logger = logging.getLogger(__name__)

_CASE_INSENSITIVE_FILTERS = ("theme", "level", "language", "format")


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SupabaseResourceStore(ResourceStore):
    """ResourceStore backed by a Supabase (PostgREST) table."""

    def __init__(
        self,
        url: str,
        key: str,
        table: str = "resources",
        client: AsyncClient | None = None,
    ):
        self._url = url
        self._key = key
        self._table = table
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> SupabaseResourceStore:
        return cls(
            settings.supabase_url,
            settings.supabase_service_key,
            table=settings.supabase_resources_table,
        )

    async def _get_client(self) -> AsyncClient:
        """Lazily created async client, shared by all requests."""
        if self._client is None:
            self._client = await acreate_client(self._url, self._key)
        return self._client

    async def _execute(self, action: str, build) -> Any:
        try:
            client = await self._get_client()
            return await build(client.table(self._table)).execute()
        except Exception as e:
            logger.exception("Supabase %s on %s failed", action, self._table)
            raise ResourceStoreError(f"Failed to {action} resource") from e

    async def create(self, req: ResourceRequest, status: CurationStatus) -> Resource:
        row = {**req.model_dump(), "status": status.value}
        result = await self._execute("create", lambda t: t.insert(row))
        if not result.data:
            raise ResourceStoreError("Failed to create resource")
        resource = Resource.model_validate(result.data[0])
        logger.info("Resource %s persisted (status=%s)", resource.id, resource.status.value)
        return resource

    async def update(self, resource_id: int, req: ResourceRequest, status: CurationStatus) -> Resource:
        row: dict[str, Any] = {
            **req.model_dump(),
            "status": status.value,
            "updated_at": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        }
        result = await self._execute("update", lambda t: t.update(row).eq("id", resource_id))
        if not result.data:
            raise ResourceNotFoundError(resource_id)
        logger.info("Resource %s updated (status=%s)", resource_id, status.value)
        return Resource.model_validate(result.data[0])

    async def get(self, resource_id: int) -> Resource:
        result = await self._execute("get", lambda t: t.select("*").eq("id", resource_id).limit(1))
        if not result.data:
            raise ResourceNotFoundError(resource_id)
        return Resource.model_validate(result.data[0])

    async def list(self, filters: ResourceFilters) -> tuple[list[Resource], int]:
        def build(table):
            query = table.select("*", count="exact")
            if filters.status is not None:
                query = query.eq("status", filters.status.value)
            for name in _CASE_INSENSITIVE_FILTERS:
                value = getattr(filters, name)
                if value is not None:
                    query = query.ilike(name, _escape_like(value))
            return query.order("created_at", desc=True).range(
                filters.offset, filters.offset + filters.limit - 1
            )

        result = await self._execute("list", build)
        rows = [Resource.model_validate(r) for r in result.data or []]
        return rows, result.count if result.count is not None else len(rows)

    async def delete(self, resource_id: int) -> None:
        result = await self._execute("delete", lambda t: t.delete().eq("id", resource_id))
        if not result.data:
            raise ResourceNotFoundError(resource_id)
        logger.info("Resource %s deleted", resource_id)
