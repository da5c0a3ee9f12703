"""Error Hierarchy — typed, categorized exceptions for chatroom failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Raising an error never leaves the registry partially mutated
    - to_response() produces the REST envelope used by the global handlers

Design Decisions:
    - Single hierarchy with ChatroomError base: one global handler maps all domain errors
    - Registry raises, adapters translate: core never logs or retries (ADR: thin transport)
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    participant_name: str | None = None


class ChatroomError(Exception):
    """Base exception for all chatroom errors."""

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
                    "participant_name": self.context.participant_name,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class AlreadyRegisteredError(ChatroomError):
    """Display name is held by a currently registered participant."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.participant_name = name
        super().__init__(
            "User already connected",
            "ALREADY_REGISTERED", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.name = name


class NotRegisteredError(ChatroomError):
    """Message posted under a name no participant holds."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.participant_name = name
        super().__init__(
            "User not connected",
            "NOT_REGISTERED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.name = name


class NameValidationError(ChatroomError):
    """Display name is blank after stripping surrounding whitespace."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
