"""Error Hierarchy — typed, categorized exceptions for every customer API failure mode.

Invariants:
    - Every error has a code (str), kind (ErrorKind), severity (ErrorSeverity)
    - Only the four ErrorKind values are distinguishable to callers
    - to_response() produces the REST envelope; NOT_FOUND renders an empty body
    - No raw storage/driver messages in user-facing messages (logged instead)

Design Decisions:
    - Single hierarchy with CustomerApiError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - Every kind except NOT_FOUND answers 400; callers branch on code/kind
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


INVALID_CUSTOMER_MESSAGE = "invalid customer"
EMAIL_CONFLICT_MESSAGE = "a customer with this email already exists"
PERSISTENCE_MESSAGE = "the customer operation could not be completed"


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorKind(str, Enum):
    """The only failure kinds callers can tell apart."""
    INVALID_INPUT = "invalid_input"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    PERSISTENCE = "persistence"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    customer_id: str | None = None
    operation: str | None = None
    details: list[dict[str, Any]] | None = None
    debug_info: dict[str, Any] | None = None


class CustomerApiError(Exception):
    """Base exception for all customer API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        kind: ErrorKind,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 400,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict | None:
        """Convert to standardized REST error response."""
        error: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "kind": self.kind.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }
        if self.context.details:
            error["details"] = self.context.details
        return {"error": error}


# ─── Domain Errors ──────────────────────────────────────────────

class InvalidCustomerError(CustomerApiError):
    """Write payload failed structural validation."""
    def __init__(
        self, details: list[dict[str, Any]] | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.details = details
        super().__init__(
            INVALID_CUSTOMER_MESSAGE, "INVALID_CUSTOMER", ErrorKind.INVALID_INPUT,
            ErrorSeverity.WARNING, ctx, 400,
        )


class EmailConflictError(CustomerApiError):
    """Another customer already holds the email."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        super().__init__(
            EMAIL_CONFLICT_MESSAGE, "EMAIL_CONFLICT", ErrorKind.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )
        self.email = email


class CustomerNotFoundError(CustomerApiError):
    """Customer id does not resolve to a row."""
    def __init__(self, customer_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.customer_id = customer_id
        super().__init__(
            f"customer '{customer_id}' not found",
            "CUSTOMER_NOT_FOUND", ErrorKind.NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )
        self.customer_id = customer_id

    def to_response(self) -> dict | None:
        return None


# ─── Infrastructure Errors ──────────────────────────────────────

class PersistenceError(CustomerApiError):
    """Storage operation failed. `cause` is for logs only."""
    def __init__(
        self, operation: str, cause: str = "",
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            PERSISTENCE_MESSAGE, "PERSISTENCE_ERROR", ErrorKind.PERSISTENCE,
            ErrorSeverity.CRITICAL, ctx, 400,
        )
        self.operation = operation
        self.cause = cause


class ConstraintViolationError(PersistenceError):
    """Store rejected a write on a constraint other than the email index."""
    def __init__(
        self, operation: str, cause: str = "",
        context: ErrorContext | None = None,
    ):
        super().__init__(operation, cause, context)
        self.code = "CONSTRAINT_VIOLATION"


def format_validation_details(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Flatten pydantic error dicts into field-level details."""
    return [
        {
            "field": ".".join(str(loc) for loc in e.get("loc", ())),
            "message": e.get("msg", ""),
            "type": e.get("type", ""),
        }
        for e in errors
    ]
