"""Response Schemas — outbound payloads for resource calls and health checks.

Invariants:
    - SigningKeyResponse has exactly two fields: key, date
    - key is 64 lowercase hex chars; date serializes as RFC3339 UTC ("Z" suffix)
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

from solarnetwork_datasource.core.health import HealthCheckResult, HealthStatus
from solarnetwork_datasource.core.signing_key import SigningKeyInfo


class SigningKeyResponse(BaseModel):
    """Signing key for the current UTC day."""
    key: str = Field(pattern=r"^[0-9a-f]{64}$")
    date: datetime

    @field_validator("date")
    @classmethod
    def force_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @classmethod
    def from_info(cls, info: SigningKeyInfo) -> "SigningKeyResponse":
        return cls(key=info.key, date=info.date)

    def to_info(self) -> SigningKeyInfo:
        return SigningKeyInfo(key=self.key, date=self.date)


class HealthCheckResponse(BaseModel):
    status: HealthStatus
    message: str

    @classmethod
    def from_result(cls, result: HealthCheckResult) -> "HealthCheckResponse":
        return cls(status=result.status, message=result.message)
