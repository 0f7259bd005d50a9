"""Plugin Settings Loader — parses host instance settings into PluginSettings.

Invariants:
    - jsonData accepted as object, JSON string/bytes, or absent (empty settings)
    - Any parse/type failure raises SettingsLoadError; reasons never include values
    - token_secret read from decryptedSecureJsonData["secret"], kept as SecretStr;
      a non-string value raises SettingsLoadError
"""

import json
import logging
from typing import Any

from pydantic import SecretStr, ValidationError

from solarnetwork_datasource.core.errors import ErrorContext, SettingsLoadError
from solarnetwork_datasource.schemas.plugin_context import DataSourceInstanceSettings
from solarnetwork_datasource.schemas.plugin_settings import (
    SECRET_FIELD, PluginSettings, SecretPluginSettings,
)

logger = logging.getLogger(__name__)


def load_plugin_settings(source: DataSourceInstanceSettings) -> PluginSettings:
    """Build PluginSettings from instance settings or raise SettingsLoadError."""
    context = ErrorContext(datasource_uid=source.uid)
    raw = _decode_json_data(source.json_data, context)
    try:
        settings = PluginSettings.model_validate(raw)
    except ValidationError as e:
        fields = sorted({".".join(str(loc) for loc in err["loc"]) for err in e.errors()})
        raise SettingsLoadError(
            f"invalid jsonData fields: {', '.join(fields)}", context,
        ) from e
    settings.secrets = SecretPluginSettings(token_secret=read_token_secret(source))
    return settings


def read_token_secret(source: DataSourceInstanceSettings) -> SecretStr:
    """Return the decrypted token secret; absent reads as empty."""
    value = source.decrypted_secure_json_data.get(SECRET_FIELD, SecretStr(""))
    try:
        return SecretPluginSettings(token_secret=value).token_secret
    except ValidationError as e:
        raise SettingsLoadError(
            f"decryptedSecureJsonData.{SECRET_FIELD} must be a string",
            ErrorContext(datasource_uid=source.uid),
        ) from e


def _decode_json_data(raw: Any, context: ErrorContext) -> dict:
    if raw is None:
        return {}
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8", errors="replace")
    if isinstance(raw, str):
        if not raw.strip():
            return {}
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise SettingsLoadError("jsonData is not valid JSON", context) from e
    if not isinstance(raw, dict):
        raise SettingsLoadError("jsonData must be a JSON object", context)
    return raw
