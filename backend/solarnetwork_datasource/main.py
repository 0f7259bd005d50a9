"""SolarNetwork Datasource API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DatasourceError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Error handlers live in api/error_handlers.py, registered once here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from solarnetwork_datasource.api.error_handlers import register_error_handlers
from solarnetwork_datasource.api.routes import health, resources
from solarnetwork_datasource.config import get_settings
from solarnetwork_datasource.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        "SolarNetwork datasource started",
        extra={"plugin_id": settings.plugin_id},
    )
    yield
    logger.info("SolarNetwork datasource shutting down")


settings = get_settings()
app = FastAPI(
    title="SolarNetwork Datasource",
    version=settings.service_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(resources.router)

register_error_handlers(app)
