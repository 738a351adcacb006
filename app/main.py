"""Geo Lookup API: FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI

from app.adapters.memory.address_store import InMemoryAddressStore
from app.adapters.memory.job_registry import InMemoryJobRegistry
from app.config import Settings, settings as default_settings
from app.domain.exceptions import AddressLoadError
from app.infrastructure.api.dependencies import require_bearer_token
from app.infrastructure.api.error_handlers import register_error_handlers
from app.infrastructure.api.middleware_logging import register_request_logging
from app.infrastructure.api.routes_area import router as area_router
from app.infrastructure.api.routes_cities import router as cities_router
from app.infrastructure.api.routes_health import router as health_router

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the address dataset before serving; a failed load is fatal."""
    settings: Settings = app.state.settings
    if not settings.access_token_secret:
        logger.warning("ACCESS_TOKEN_SECRET is not set: every request will be rejected")

    try:
        app.state.addresses = InMemoryAddressStore.from_file(Path(settings.addresses_path))
    except AddressLoadError:
        logger.critical("Could not load address dataset from %s", settings.addresses_path)
        raise
    app.state.jobs = InMemoryJobRegistry()
    logger.info("Geo Lookup API ready")
    yield
    logger.info("Shutting down with %d area-search jobs retained", len(app.state.jobs))


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)

    app = FastAPI(
        title="Geo Lookup API",
        description="Address lookup by tag, distance and area, behind a bearer token",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_request_logging(app)
    register_error_handlers(app)

    # Every endpoint sits behind the bearer-token gate
    auth = [Depends(require_bearer_token)]
    app.include_router(health_router, dependencies=auth)
    app.include_router(cities_router, dependencies=auth)
    app.include_router(area_router, dependencies=auth)

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("app.main:app", host=default_settings.host, port=default_settings.port, reload=False)


if __name__ == "__main__":
    run()
