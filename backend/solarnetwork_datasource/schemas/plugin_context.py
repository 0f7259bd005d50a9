"""Plugin Context Schemas — inbound payloads from the Grafana host runtime.

Invariants:
    - Wire names are camelCase (pluginContext, decryptedSecureJsonData, ...);
      snake_case names accepted too for Python callers
    - Decrypted secure values never appear in repr/str/dumps; string values
      are wrapped in SecretStr, other types are left for the settings loader
      to reject
    - jsonData is kept raw (object or JSON string); parsing is the loader's job

Design Decisions:
    - Unknown host fields ignored: Grafana adds context fields across releases
      (ADR: tolerant reader)
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator
from pydantic.alias_generators import to_camel


class HostPayload(BaseModel):
    """Base for host payloads — camelCase aliases, extra fields ignored."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )


class DataSourceInstanceSettings(HostPayload):
    """Per-instance datasource configuration as delivered by the host."""
    id: int | None = None
    uid: str | None = None
    name: str | None = None
    url: str | None = None
    json_data: Any = None
    decrypted_secure_json_data: dict[str, Any] = Field(
        default_factory=dict, repr=False, exclude=True,
    )
    updated: datetime | None = None

    @field_validator("decrypted_secure_json_data")
    @classmethod
    def mask_strings(cls, v: dict[str, Any]) -> dict[str, Any]:
        return {
            name: SecretStr(value) if isinstance(value, str) else value
            for name, value in v.items()
        }


class PluginContext(HostPayload):
    org_id: int | None = None
    plugin_id: str | None = None
    data_source_instance_settings: DataSourceInstanceSettings | None = None


class CallResourceRequest(HostPayload):
    """Resource call — the host asks the plugin to perform a named action."""
    plugin_context: PluginContext = Field(default_factory=PluginContext)
    path: str | None = None
    method: str = "GET"
    url: str | None = None


class CheckHealthRequest(HostPayload):
    """Health check probe for one datasource instance."""
    plugin_context: PluginContext = Field(default_factory=PluginContext)
