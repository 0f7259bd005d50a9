"""Health Assessment — maps a loaded token secret to a health check result.

Invariants:
    - Empty or absent secret → ERROR "API key is missing"
    - Present secret → OK "Data source is working"
    - Settings load failure → ERROR "Unable to load settings" (see settings_failure())

Design Decisions:
    - Status values match Grafana's HealthStatus names so the host can map them 1:1
    - No always-healthy path: every check validates the secret
"""

from dataclasses import dataclass
from enum import Enum

MESSAGE_OK = "Data source is working"
MESSAGE_SECRET_MISSING = "API key is missing"
MESSAGE_SETTINGS_UNLOADABLE = "Unable to load settings"


class HealthStatus(str, Enum):
    """Outcome of a health check, as reported to the host runtime."""
    OK = "OK"
    ERROR = "ERROR"


@dataclass(frozen=True)
class HealthCheckResult:
    status: HealthStatus
    message: str

    @property
    def healthy(self) -> bool:
        return self.status is HealthStatus.OK


def assess_token_secret(token_secret: str | None) -> HealthCheckResult:
    """Branch on secret presence. Caller unwraps SecretStr before calling."""
    if not token_secret:
        return HealthCheckResult(HealthStatus.ERROR, MESSAGE_SECRET_MISSING)
    return HealthCheckResult(HealthStatus.OK, MESSAGE_OK)


def settings_failure() -> HealthCheckResult:
    return HealthCheckResult(HealthStatus.ERROR, MESSAGE_SETTINGS_UNLOADABLE)
