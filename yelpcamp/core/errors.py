"""Error Hierarchy — typed, categorized exceptions for every YelpCamp failure mode.

Invariants:
    - Every error has a status_code (int), message (str), code, category, severity
    - OperationError defaults to 500 with the generic user-facing message
    - to_response() produces the JSON envelope; to_view() the error page context
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with OperationError base: one terminal handler catches all
      (ADR: uniform error shape for pages and JSON alike)
    - ErrorContext as dataclass: request facts for observability without coupling
      to the logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

DEFAULT_ERROR_MESSAGE = "Oh No, Something Went Wrong!!!"


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    ROUTE_NOT_FOUND = "route_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request facts attached to an error for logging and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    method: str | None = None
    path: str | None = None
    phase: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class OperationError(Exception):
    """Base exception for all request failures — status code plus message."""

    def __init__(
        self,
        message: str | None = None,
        status_code: int = 500,
        code: str = "OPERATION_ERROR",
        category: ErrorCategory = ErrorCategory.INTERNAL,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        message = message or DEFAULT_ERROR_MESSAGE
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to the JSON error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "status_code": self.status_code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "method": self.context.method,
                    "path": self.context.path,
                    "phase": self.context.phase,
                },
            }
        }

    def to_view(self) -> dict:
        """Template context for the failure page."""
        return {"status_code": self.status_code, "message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class PayloadValidationError(OperationError):
    """Request payload failed its shape checks."""
    def __init__(
        self, details: list[str], delimiter: str = ",",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            delimiter.join(details), 400, "VALIDATION_ERROR",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, context,
        )
        self.details = details

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = list(self.details)
        return response


class ResourceNotFoundError(OperationError):
    """Requested entity does not exist."""
    def __init__(
        self, resource_type: str, resource_id: object,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = str(resource_id)
        super().__init__(
            f"{resource_type} '{resource_id}' not found", 404,
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx,
        )
        self.resource_type = resource_type


class PageNotFoundError(OperationError):
    """No route matches the request method and path."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Page Not Found", 404, "PAGE_NOT_FOUND",
            ErrorCategory.ROUTE_NOT_FOUND, ErrorSeverity.INFO, context,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(OperationError):
    """Database operation failed. The driver detail stays in the logs."""
    def __init__(
        self, detail: str, operation: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.debug_info = {"detail": detail, "operation": operation}
        super().__init__(
            None, 500, "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.detail = detail
        self.operation = operation
