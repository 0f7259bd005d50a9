"""Health Routes — service liveness and the datasource CheckHealth handler.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - POST /health/check returns 200 with status OK or ERROR; a misconfigured
      datasource is a result, not a transport failure
"""

import logging

from fastapi import APIRouter, Depends, status

from solarnetwork_datasource.api.dependencies import get_datasource
from solarnetwork_datasource.config import get_settings
from solarnetwork_datasource.schemas.plugin_context import CheckHealthRequest
from solarnetwork_datasource.schemas.resource import HealthCheckResponse
from solarnetwork_datasource.services.datasource import Datasource

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness():
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.plugin_id,
        "version": settings.service_version,
    }


@router.post("/check", response_model=HealthCheckResponse)
async def check_health(
    body: CheckHealthRequest,
    datasource: Datasource = Depends(get_datasource),
):
    """Verify the datasource instance has a token secret configured."""
    return HealthCheckResponse.from_result(datasource.check_health(body))
