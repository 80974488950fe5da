"""Error Hierarchy: typed exceptions for every failure the API can report.

Invariants:
    - Every error has a code (str), category (ErrorCategory), http_status (int)
    - to_response() returns the exact JSON body the client receives
    - Raw store detail never appears in to_response()

Design Decisions:
    - Single hierarchy with PostsApiError base: one global handler renders them all
    - Response key varies by kind (errorMessage / message / error): the wire contract
      fixes a different key for validation, not-found and server failures
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from posts_api.core.domain_types import (
    FAILURE_MESSAGES, POST_NOT_FOUND, Operation,
)


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request-scoped detail attached to log records, never to responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    post_id: int | str | None = None
    operation: str | None = None


class PostsApiError(Exception):
    """Base exception for all Posts API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        return {"error": self.message}

    def log_extra(self) -> dict:
        """Fields merged into the log record for this error."""
        return {
            "error_code": self.code,
            "post_id": self.context.post_id,
            "operation": self.context.operation,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class MissingFieldsError(PostsApiError):
    """Required body field absent or empty."""
    def __init__(self, message: str, fields: list[str], context: ErrorContext | None = None):
        super().__init__(
            message, "MISSING_FIELDS", ErrorCategory.VALIDATION, context, 400,
        )
        self.fields = fields

    def to_response(self) -> dict:
        return {"errorMessage": self.message}


class PostNotFoundError(PostsApiError):
    """No post with the requested id."""
    def __init__(self, post_id: int | str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.post_id = post_id
        super().__init__(
            POST_NOT_FOUND, "POST_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ctx, 404,
        )

    def to_response(self) -> dict:
        return {"message": self.message}


# ─── Server Errors (500-level) ──────────────────────────────────

class StoreError(PostsApiError):
    """Persistence layer failed. Routes translate it to OperationFailedError."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Store {operation} failed: {message}",
            "STORE_ERROR", ErrorCategory.DATABASE, context, 500,
        )
        self.operation = operation

    def to_response(self) -> dict:
        return {"error": "The server encountered a storage error."}


class OperationFailedError(PostsApiError):
    """A handler operation could not complete because the store failed."""
    def __init__(self, operation: Operation, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation.value
        super().__init__(
            FAILURE_MESSAGES[operation], "OPERATION_FAILED",
            ErrorCategory.DATABASE, ctx, 500,
        )
