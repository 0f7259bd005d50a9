"""Health Check — verifies the datasource instance has a token secret configured.

Invariants:
    - Never raises for bad configuration: load failures become ERROR results
    - Missing instance settings count as a load failure
"""

import logging

from solarnetwork_datasource.core.errors import SettingsLoadError
from solarnetwork_datasource.core.health import (
    HealthCheckResult, assess_token_secret, settings_failure,
)
from solarnetwork_datasource.schemas.plugin_context import DataSourceInstanceSettings
from solarnetwork_datasource.services.plugin_settings import load_plugin_settings

logger = logging.getLogger(__name__)


def check_secret_configured(
    source: DataSourceInstanceSettings | None,
) -> HealthCheckResult:
    """Load settings and report whether the token secret is present."""
    if source is None:
        logger.warning("Health check without datasource instance settings")
        return settings_failure()

    try:
        settings = load_plugin_settings(source)
    except SettingsLoadError as e:
        logger.warning(
            f"Health check could not load settings: {e.reason}",
            extra={"error_code": e.code, "datasource_uid": source.uid},
        )
        return settings_failure()

    return assess_token_secret(settings.secrets.token_secret.get_secret_value())
