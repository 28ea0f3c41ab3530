"""Error Hierarchy — typed, categorized failure kinds for the usuarios service.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries >= 1 human-readable detalle
    - Errors never know about HTTP: status codes are assigned by api/error_handlers.py only
    - No raw driver/exception text ever ends up in detalles

Design Decisions:
    - Expected kinds (validation, not found, duplicate email) are RETURNED by the service as
      values, not raised — the gateway pattern-matches them into responses
    - Only infrastructure faults (DatabaseError) travel as raised exceptions
    - Anything unexpected is wrapped in UnclassifiedError by the catch-all handler
    - Still subclasses Exception so infrastructure can raise the same hierarchy
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability (drives log level)."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Failure kinds. The gateway maps each category to exactly one HTTP status."""
    VALIDATION = "validation"
    BAD_ARGUMENT = "bad_argument"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context surfaced in logs, never in responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    operation: str | None = None


class UsuariosError(Exception):
    """Base for all failure kinds of the usuarios service."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
        detalles: list[str] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.detalles = detalles or [message]
        self.context = context or ErrorContext()


# ─── Client Errors ──────────────────────────────────────────────

class ValidationFailureError(UsuariosError):
    """One or more input-shape rules violated ("campo: mensaje" per field)."""
    def __init__(self, detalles: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Validation failed for {len(detalles)} field(s)",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, detalles, context,
        )


class BadArgumentError(UsuariosError):
    """Malformed input outside the declared validation rules (e.g. unparsable id)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "BAD_ARGUMENT", ErrorCategory.BAD_ARGUMENT,
            ErrorSeverity.WARNING, None, context,
        )


class UserNotFoundError(UsuariosError):
    """Referenced id has no user at the time of lookup."""
    def __init__(self, user_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_id = user_id
        super().__init__(
            f"No existe un usuario con el ID {user_id}",
            "USER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, None, ctx,
        )
        self.user_id = user_id


class DuplicateEmailError(UsuariosError):
    """Write would violate the email uniqueness constraint."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "El email ya está registrado",
            "DUPLICATE_EMAIL", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, None, context,
        )


class IntegrityConflictError(UsuariosError):
    """Write violated some other integrity constraint."""
    def __init__(self, constraint: str | None = None, context: ErrorContext | None = None):
        super().__init__(
            "Violación de constraint de integridad",
            "INTEGRITY_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, None, context,
        )
        self.constraint = constraint


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(UsuariosError):
    """Database operation failed. Message is for logs only."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, None, ctx,
        )
        self.operation = operation


class UnclassifiedError(UsuariosError):
    """Unexpected fault. The original exception is kept as __cause__ for logs only."""
    def __init__(self, cause: Exception, context: ErrorContext | None = None):
        super().__init__(
            f"Unhandled {type(cause).__name__}: {cause}",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, None, context,
        )
        self.__cause__ = cause
