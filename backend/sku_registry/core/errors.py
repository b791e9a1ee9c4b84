"""Error Hierarchy: typed, categorized exceptions for all registry failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (4xx) are recoverable; infrastructure errors (5xx) are critical
    - to_response() produces the REST envelope used by the global handlers
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with SkuRegistryError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
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
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    sku_id: str | None = None
    code: str | None = None
    issued_by: str | None = None
    debug_info: dict[str, Any] | None = None


class SkuRegistryError(Exception):
    """Base exception for all registry errors."""

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
                    "sku_id": str(self.context.sku_id) if self.context.sku_id else None,
                    "code": self.context.code,
                },
            }
        }


# ─── Domain Errors (4xx) ───────────────────────────────────────

class SkuValidationError(SkuRegistryError):
    """A required composition field is missing or not in the vocabulary."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class DuplicateCodeError(SkuRegistryError):
    """Code collides case-insensitively with an issued SKU."""
    def __init__(self, code: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.code = code
        super().__init__(
            f"SKU '{code}' already exists",
            "DUPLICATE_SKU", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.sku_code = code


class AuthorizationError(SkuRegistryError):
    """Caller identity missing, invalid, or revoked."""
    def __init__(
        self, message: str = "Invalid or missing access token",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "UNAUTHORIZED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 401,
        )


class IdentityExistsError(SkuRegistryError):
    """Email already registered."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        super().__init__(
            f"Identity '{email}' is already registered",
            "IDENTITY_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.email = email


# ─── Infrastructure Errors (5xx) ───────────────────────────────

class DatabaseError(SkuRegistryError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class StoreError(SkuRegistryError):
    """Local SKU store could not be read or written."""
    def __init__(self, message: str, path: str, context: ErrorContext | None = None):
        super().__init__(
            f"SKU store at '{path}' unavailable: {message}",
            "STORE_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.path = path
