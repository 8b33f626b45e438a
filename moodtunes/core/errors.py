"""Error Hierarchy — typed, categorized exceptions for MoodTunes failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the flat {"error": message} envelope clients rely on;
      5xx errors always answer with GENERIC_MESSAGE
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with MoodTunesError base: FastAPI global handler catches all
    - MoodNotFoundError keeps the exact "Mood not found" wording; the requested
      name travels in ErrorContext for logs only
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


GENERIC_MESSAGE = "An unexpected error occurred"


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
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    mood: str | None = None
    debug_info: dict[str, Any] | None = None


class MoodTunesError(Exception):
    """Base exception for all MoodTunes errors."""

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
        """Convert to the REST error envelope.

        Server-side (5xx) errors answer with GENERIC_MESSAGE; their message
        stays in the logs.
        """
        if self.http_status >= 500:
            return {"error": GENERIC_MESSAGE}
        return {"error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class MoodNotFoundError(MoodTunesError):
    """Requested mood is not a key of the mood category table."""
    def __init__(self, mood: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.mood = mood
        super().__init__(
            "Mood not found", "MOOD_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, ctx, 404,
        )
        self.mood = mood


class InvalidDurationError(MoodTunesError):
    """Duration string is not in M:SS form."""
    def __init__(self, duration: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid duration '{duration}', expected M:SS",
            "INVALID_DURATION", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 500,
        )
        self.duration = duration
