"""Resource CRUD endpoints.

  GET    /resources        : list (status / theme / level / language / format filters)
  GET    /resources/{id}   : single resource
  POST   /resources        : curate + create
  PUT    /resources/{id}   : curate + update
  DELETE /resources/{id}

Create/update never fail because of curation: a broken provider only means
the resource is stored as Pending.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from pydantic import ValidationError

from akkuea_curation.curation.service import CurationService
from akkuea_curation.curation.types import CurationStatus
from akkuea_curation.resources.models import (
    CuratedResource,
    ResourceFilters,
    ResourcePage,
    ResourceRequest,
)
from akkuea_curation.resources.store import ResourceNotFoundError, ResourceStore, ResourceStoreError

router = APIRouter(tags=["resources"])
logger = logging.getLogger(__name__)

_ALLOWED_QUERY_KEYS = frozenset({"status", "limit", "offset", "theme", "level", "language", "format"})
_NAMED_FILTERS = ("theme", "level", "language", "format")


def api_error(status_code: int, error: str, message: str) -> HTTPException:
    return HTTPException(status_code=status_code, detail={"error": error, "message": message})


def get_store(request: Request) -> ResourceStore:
    return request.app.state.resource_store


def get_curation_service(request: Request) -> CurationService:
    return request.app.state.curation_service


def _parse_filters(request: Request) -> ResourceFilters:
    params = request.query_params
    for key in params.keys():
        if key not in _ALLOWED_QUERY_KEYS:
            raise api_error(400, "invalid_query_parameter", f"Unsupported query parameter: {key}")

    values: dict = {}
    for name in _NAMED_FILTERS:
        raw = params.get(name, "")
        if raw and not raw.strip():
            raise api_error(400, "invalid_filter", f"{name} cannot be empty")
        if raw.strip():
            values[name] = raw.strip()

    raw_status = params.get("status", "").strip()
    if raw_status:
        status = CurationStatus.parse(raw_status)
        if status is None:
            raise api_error(400, "invalid_filter", "status must be one of Approved, Pending, Rejected")
        values["status"] = status

    try:
        if params.get("limit"):
            values["limit"] = int(params["limit"])
        if params.get("offset"):
            values["offset"] = int(params["offset"])
        return ResourceFilters(**values)
    except (ValueError, ValidationError):
        raise api_error(
            400, "invalid_pagination", "limit must be between 1 and 200 and offset 0 or greater"
        )


@router.get("/resources")
async def list_resources(request: Request, store: ResourceStore = Depends(get_store)):
    filters = _parse_filters(request)
    try:
        rows, total = await store.list(filters)
    except ResourceStoreError:
        raise api_error(500, "database_error", "Failed to list resources")

    page = ResourcePage(data=rows, count=total, limit=filters.limit, offset=filters.offset)
    return {"data": page.model_dump(mode="json"), "message": "Resources retrieved successfully"}


@router.get("/resources/{resource_id}")
async def get_resource(resource_id: int, store: ResourceStore = Depends(get_store)):
    try:
        resource = await store.get(resource_id)
    except ResourceNotFoundError:
        raise api_error(404, "not_found", "Resource not found")
    except ResourceStoreError:
        raise api_error(500, "database_error", "Failed to load resource")
    return {"data": resource.model_dump(mode="json"), "message": "Resource retrieved successfully"}


@router.post("/resources", status_code=201)
async def create_resource(
    req: ResourceRequest,
    store: ResourceStore = Depends(get_store),
    curation: CurationService = Depends(get_curation_service),
):
    result = await curation.curate_content(req.title, req.content, req.language, req.format)

    try:
        resource = await store.create(req, result.status)
    except ResourceStoreError:
        raise api_error(500, "database_error", "Failed to create resource")

    logger.info(
        "Resource %s created: status=%s reason=%s",
        resource.id,
        result.status.value,
        result.reason,
    )
    payload = CuratedResource(resource=resource, curation=result)
    return {"data": payload.model_dump(mode="json"), "message": "Resource created"}


@router.put("/resources/{resource_id}")
async def update_resource(
    resource_id: int,
    req: ResourceRequest,
    store: ResourceStore = Depends(get_store),
    curation: CurationService = Depends(get_curation_service),
):
    try:
        await store.get(resource_id)
    except ResourceNotFoundError:
        raise api_error(404, "not_found", "Resource not found")
    except ResourceStoreError:
        raise api_error(500, "database_error", "Failed to load resource")

    result = await curation.curate_content(req.title, req.content, req.language, req.format)

    try:
        resource = await store.update(resource_id, req, result.status)
    except ResourceNotFoundError:
        # Deleted between the lookup and the write
        raise api_error(404, "not_found", "Resource not found")
    except ResourceStoreError:
        raise api_error(500, "database_error", "Failed to update resource")

    logger.info(
        "Resource %s updated: status=%s reason=%s",
        resource.id,
        result.status.value,
        result.reason,
    )
    payload = CuratedResource(resource=resource, curation=result)
    return {"data": payload.model_dump(mode="json"), "message": "Resource updated"}


@router.delete("/resources/{resource_id}", status_code=204)
async def delete_resource(resource_id: int, store: ResourceStore = Depends(get_store)):
    try:
        await store.delete(resource_id)
    except ResourceNotFoundError:
        raise api_error(404, "not_found", "Resource not found")
    except ResourceStoreError:
        raise api_error(500, "database_error", "Failed to delete resource")
    return Response(status_code=204)
