"""Datasource — the plugin's resource-call and health-check handlers.

Invariants:
    - Only the "sk" resource is served; any other path raises ResourceNotFoundError
    - The secret is unwrapped only for derivation and never logged
    - Each call reads the clock once; no state survives between calls

Design Decisions:
    - Clock injected as a callable: tests pin time without patching datetime
    - One handler class for every host wrapper (legacy RPC, gRPC, SDK)
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from solarnetwork_datasource.core.errors import (
    ErrorContext, PluginContextError, ResourceNotFoundError,
)
from solarnetwork_datasource.core.health import HealthCheckResult
from solarnetwork_datasource.core.signing_key import (
    SIGNING_KEY_RESOURCE, SigningKeyInfo, derive_signing_key,
)
from solarnetwork_datasource.schemas.plugin_context import (
    CallResourceRequest, CheckHealthRequest,
)
from solarnetwork_datasource.services.health_check import check_secret_configured
from solarnetwork_datasource.services.plugin_settings import read_token_secret

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def normalize_resource_path(path: str | None) -> str:
    return (path or "").strip("/")


class Datasource:
    """SolarNetwork datasource instance handlers."""

    def __init__(self, clock: Clock = utc_now):
        self._clock = clock

    def call_resource(
        self, request: CallResourceRequest, path: str | None = None,
    ) -> SigningKeyInfo:
        """Serve a resource call. path overrides request.path when given."""
        resource_path = normalize_resource_path(
            path if path is not None else request.path,
        )
        source = request.plugin_context.data_source_instance_settings
        context = ErrorContext(
            datasource_uid=source.uid if source else None,
            resource_path=resource_path,
        )
        logger.info(
            "CallResource called",
            extra={
                "resource_path": resource_path,
                "datasource_uid": context.datasource_uid,
            },
        )

        if resource_path != SIGNING_KEY_RESOURCE:
            raise ResourceNotFoundError(resource_path, context)
        if source is None:
            raise PluginContextError(context)

        secret = read_token_secret(source).get_secret_value()
        return derive_signing_key(secret, self._clock())

    def check_health(self, request: CheckHealthRequest) -> HealthCheckResult:
        source = request.plugin_context.data_source_instance_settings
        result = check_secret_configured(source)
        logger.info(
            "CheckHealth called",
            extra={
                "datasource_uid": source.uid if source else None,
                "health_status": result.status.value,
            },
        )
        return result
