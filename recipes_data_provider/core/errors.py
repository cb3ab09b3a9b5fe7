"""Error Hierarchy — typed, categorized exceptions for recipe data access.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (duplicate title, missing recipe) are 4xx; infrastructure errors are 500
    - to_response() produces the REST error envelope
    - No driver messages leaked in user-facing messages

Design Decisions:
    - Single hierarchy with RecipesError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - UnknownDatabaseError keeps the classified StoreErrorKind for logs, never for the client
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone
from uuid import UUID

from recipes_data_provider.core.domain_types import StoreErrorKind


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
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    recipe_uuid: str | None = None
    title: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class RecipesError(Exception):
    """Base exception for all recipe data-access errors."""

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
                    "recipe_uuid": self.context.recipe_uuid,
                    "title": self.context.title,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class RecipeHasToBeUniqueError(RecipesError):
    """A recipe with the same title already exists."""
    def __init__(self, title: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.title = title
        super().__init__(
            f"Recipe titled '{title}' already exists",
            "RECIPE_HAS_TO_BE_UNIQUE", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.title = title


class RecipeDoesNotExistError(RecipesError):
    """No recipe matches the requested identifier."""
    def __init__(self, recipe_uuid: UUID, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.recipe_uuid = str(recipe_uuid)
        super().__init__(
            f"Recipe '{recipe_uuid}' not found",
            "RECIPE_DOES_NOT_EXIST", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.recipe_uuid = recipe_uuid


# ─── Infrastructure Errors (500-level) ──────────────────────────

class UnknownDatabaseError(RecipesError):
    """Store unreachable, schema missing, or an unmapped driver error."""
    def __init__(
        self,
        operation: str,
        kind: StoreErrorKind = StoreErrorKind.UNKNOWN,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed",
            "UNKNOWN_DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
        self.kind = kind


def internal_error_response() -> dict:
    """Envelope for failures that carry no domain meaning."""
    return {
        "error": {
            "code": "INTERNAL_ERROR",
            "message": "An unexpected error occurred",
            "category": ErrorCategory.INTERNAL.value,
            "severity": ErrorSeverity.CRITICAL.value,
        },
    }
