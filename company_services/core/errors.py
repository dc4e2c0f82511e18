"""Error Hierarchy — typed, categorized exceptions for every Company Services failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400/404/409) are raised by the business layer and never wrapped
    - StorageError is the only error the storage layer surfaces
    - Messages name the rule or record at fault (e.g. which id was not found)

Design Decisions:
    - Single hierarchy with CompanyServicesError base: one global handler renders all
      (ADR: uniform error shape)
    - http_status lives on the error: the HTTP layer maps without re-deriving context
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    company: str | None = None
    entity: str | None = None
    entity_id: int | None = None
    field: str | None = None
    debug_info: dict[str, Any] | None = None


class CompanyServicesError(Exception):
    """Base exception for all Company Services errors."""

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
                    "company": self.context.company,
                    "entity": self.context.entity,
                    "entity_id": self.context.entity_id,
                    "field": self.context.field,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(CompanyServicesError):
    """Malformed or out-of-policy input (bad date, duplicate code, wrong tenant)."""
    def __init__(
        self, message: str, field: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field = ctx.field or field
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.field = field


class NotFoundError(CompanyServicesError):
    """Referenced record does not exist (department, manager, employee, timecard)."""
    def __init__(
        self, resource_type: str, resource_id: object,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = ctx.entity or resource_type
        if ctx.entity_id is None and isinstance(resource_id, int):
            ctx.entity_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(CompanyServicesError):
    """Write would duplicate an existing record (e.g. same timecard start)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(CompanyServicesError):
    """Backing store failed for reasons outside the domain rules."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
