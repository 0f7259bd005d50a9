"""Plugin Settings Schemas — the datasource configuration the plugin understands.

Invariants:
    - token_secret comes only from decryptedSecureJsonData["secret"]
    - token_secret defaults to empty (absent is reported by the health check, not here)
"""

from pydantic import BaseModel, ConfigDict, Field, SecretStr

SECRET_FIELD = "secret"


class SecretPluginSettings(BaseModel):
    token_secret: SecretStr = SecretStr("")


class PluginSettings(BaseModel):
    """jsonData fields shared with the frontend config editor."""
    model_config = ConfigDict(extra="ignore")

    token: str | None = None
    host: str | None = None
    proxy: str | None = None
    secrets: SecretPluginSettings = Field(
        default_factory=SecretPluginSettings, exclude=True,
    )
