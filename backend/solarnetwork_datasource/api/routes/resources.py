"""Resource Routes — CallResource handler serving today's SNWS2 signing key.

Invariants:
    - POST /resources/sk returns exactly {"key", "date"}
    - Unknown resource paths return 404 via ResourceNotFoundError
    - Encoding failures surface as ResponseEncodingError (500), no retry
    - A bad secret type is a SettingsLoadError (400)
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import ValidationError

from solarnetwork_datasource.api.dependencies import get_datasource
from solarnetwork_datasource.core.errors import ErrorContext, ResponseEncodingError
from solarnetwork_datasource.schemas.plugin_context import CallResourceRequest
from solarnetwork_datasource.schemas.resource import SigningKeyResponse
from solarnetwork_datasource.services.datasource import Datasource

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/resources", tags=["resources"])


@router.post("/{path:path}", response_model=SigningKeyResponse)
async def call_resource(
    path: str,
    body: CallResourceRequest,
    datasource: Datasource = Depends(get_datasource),
):
    """Route a host resource call to the datasource."""
    info = datasource.call_resource(body, path=path)
    try:
        return SigningKeyResponse.from_info(info)
    except ValidationError as e:
        raise ResponseEncodingError(
            type(e).__name__, ErrorContext(resource_path=path),
        ) from e
