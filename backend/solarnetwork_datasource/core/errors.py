"""Error Hierarchy — typed, categorized exceptions for all datasource failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400-level) are recoverable; internal errors (500-level) are critical
    - to_response() produces the REST envelope
    - No secret or internal detail ever placed in a message

Design Decisions:
    - Single hierarchy with DatasourceError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Observability context attached to an error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    datasource_uid: str | None = None
    resource_path: str | None = None


class DatasourceError(Exception):
    """Base exception for all datasource errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "datasource_uid": self.context.datasource_uid,
                    "resource_path": self.context.resource_path,
                },
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class SettingsLoadError(DatasourceError):
    """Datasource instance settings could not be parsed."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unable to load settings: {reason}",
            "SETTINGS_LOAD_FAILED", ErrorCategory.CONFIGURATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.reason = reason


class PluginContextError(DatasourceError):
    """Plugin context lacks the datasource instance settings."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Request carries no datasource instance settings",
            "PLUGIN_CONTEXT_MISSING", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class ResourceNotFoundError(DatasourceError):
    """Resource path is not served by this datasource."""
    def __init__(self, path: str, context: ErrorContext | None = None):
        super().__init__(
            f"Resource '{path}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.path = path


# ─── Internal Errors (500-level) ────────────────────────────────

class ResponseEncodingError(DatasourceError):
    """Response payload could not be serialized."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Response encoding failed: {message}",
            "RESPONSE_ENCODING_FAILED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
