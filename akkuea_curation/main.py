import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from akkuea_curation.config import settings
from akkuea_curation.curation.service import CurationService
from akkuea_curation.db.supabase_client import SupabaseResourceStore
from akkuea_curation.logging_config import setup_logging
from akkuea_curation.middleware.rate_limit import RateLimitMiddleware
from akkuea_curation.resources.store import InMemoryResourceStore, ResourceStore
from akkuea_curation.routes.curation import router as curation_router
from akkuea_curation.routes.health import router as health_router
from akkuea_curation.routes.resources import router as resources_router

setup_logging(
    log_level=settings.log_level,
    log_dir=settings.log_dir,
    max_bytes=settings.log_max_bytes,
    backup_count=settings.log_backup_count,
)
logger = logging.getLogger("akkuea-curation")


def _default_store() -> ResourceStore:
    if settings.supabase_configured:
        return SupabaseResourceStore.from_settings(settings)
    logger.warning("Supabase not configured, resources are kept in memory")
    return InMemoryResourceStore()


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = app.state.curation_service.config
    logger.info(
        "Akkuea curation service starting on %s:%s (provider=%s, api_key=%s)",
        settings.server_host,
        settings.server_port,
        config.provider,
        "set" if config.has_api_key else "missing",
    )
    yield
    await app.state.curation_service.aclose()


async def _invalid_input(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected payload on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"detail": {"error": "invalid_input", "message": "Invalid resource payload"}},
    )


def create_app(
    curation_service: CurationService | None = None,
    resource_store: ResourceStore | None = None,
) -> FastAPI:
    app = FastAPI(
        title="Akkuea Curation Service",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.curation_service = curation_service or CurationService.from_settings(settings)
    app.state.resource_store = resource_store or _default_store()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RateLimitMiddleware, calls_per_minute=settings.write_rate_limit_per_minute)
    app.add_exception_handler(RequestValidationError, _invalid_input)

    app.include_router(health_router)
    app.include_router(resources_router)
    app.include_router(curation_router)
    return app


app = create_app()
