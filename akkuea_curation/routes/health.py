"""Health check endpoint."""

import time

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])

_start_time = time.time()


@router.get("/health")
async def health_check(request: Request):
    config = request.app.state.curation_service.config
    return {
        "status": "ok",
        "curation_provider": config.provider,
        "provider_configured": config.has_api_key,
        "store": type(request.app.state.resource_store).__name__,
        "uptime": round(time.time() - _start_time),
    }
