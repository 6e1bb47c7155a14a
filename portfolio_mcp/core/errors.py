"""Error Hierarchy — typed, categorized exceptions for every tool server failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
      and an HTTP-equivalent status number
    - Codes are stable: clients branch on `code`, never on `message`
    - `details` is the public context copied into error envelopes; anything
      diagnostic goes into ErrorContext.debug_info and stays in the logs
    - Client errors (4xx) are caller-correctable; nothing is retried automatically

Design Decisions:
    - Single hierarchy with PortfolioError base: the dispatcher and the FastAPI
      global handler catch one type and get a uniform envelope
    - ErrorContext as dataclass: rich observability without coupling to logging
    - ErrorRecord is the normalized, transport-neutral view of any failure
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


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
    RATE_LIMIT = "rate_limit"
    AUTH = "auth"
    EXPORT = "export"
    TIMEOUT = "timeout"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tool_name: str | None = None
    caller_key: str | None = None
    debug_info: dict[str, Any] | None = None


@dataclass(frozen=True)
class ErrorRecord:
    """Normalized failure, derived from a typed error or a generic exception."""
    message: str
    code: str
    status_code: int
    timestamp: datetime
    context: dict[str, Any] = field(default_factory=dict)
    diagnostics: dict[str, Any] = field(default_factory=dict)


class PortfolioError(Exception):
    """Base exception for all tool server errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = details or {}

    def to_record(self, extra: dict[str, Any] | None = None) -> ErrorRecord:
        """Normalize to an ErrorRecord. `extra` is merged into diagnostics only."""
        diagnostics: dict[str, Any] = {
            "category": self.category.value,
            "severity": self.severity.value,
        }
        if self.context.tool_name:
            diagnostics["tool_name"] = self.context.tool_name
        if self.context.caller_key:
            diagnostics["caller_key"] = self.context.caller_key
        if self.context.debug_info:
            diagnostics.update(self.context.debug_info)
        if extra:
            diagnostics.update(extra)
        return ErrorRecord(
            message=self.message,
            code=self.code,
            status_code=self.http_status,
            timestamp=self.context.timestamp,
            context=dict(self.details),
            diagnostics=diagnostics,
        )


# ─── Client Errors (400-level) ──────────────────────────────────

class ToolValidationError(PortfolioError):
    """Tool arguments violated the operation's parameter schema."""
    def __init__(self, errors: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Invalid input: {', '.join(errors)}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
            {"errors": list(errors)},
        )
        self.errors = list(errors)


class UnauthorizedError(PortfolioError):
    """Reserved: no current operation requires authentication."""
    def __init__(
        self, message: str = "Authentication required",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "UNAUTHORIZED", ErrorCategory.AUTH,
            ErrorSeverity.WARNING, context, 401,
        )


class ForbiddenError(PortfolioError):
    """Reserved: no current operation checks permissions."""
    def __init__(
        self, message: str = "Insufficient permissions",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "FORBIDDEN", ErrorCategory.AUTH,
            ErrorSeverity.WARNING, context, 403,
        )


class ResourceNotFoundError(PortfolioError):
    """Referenced entity does not exist in the dataset."""
    def __init__(
        self, resource_type: str, resource_id: str | None = None,
        context: ErrorContext | None = None,
    ):
        message = (
            f"{resource_type} not found with ID: {resource_id}"
            if resource_id else f"{resource_type} not found"
        )
        super().__init__(
            message, "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
            {"resource": resource_type, "id": resource_id},
        )


class UnknownOperationError(PortfolioError):
    """No operation registered under the requested name."""
    def __init__(self, tool_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown tool: {tool_name}",
            "UNKNOWN_OPERATION", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
            {"tool": tool_name},
        )
        self.tool_name = tool_name


class OperationTimeoutError(PortfolioError):
    """Handler exceeded its execution budget."""
    def __init__(self, timeout_seconds: float, context: ErrorContext | None = None):
        super().__init__(
            f"Operation timed out after {timeout_seconds:g} seconds",
            "TIMEOUT_ERROR", ErrorCategory.TIMEOUT,
            ErrorSeverity.ERROR, context, 408,
            {"timeoutSeconds": timeout_seconds},
        )


class RateLimitExceededError(PortfolioError):
    """Caller is over budget for the current window."""
    def __init__(self, reset_time: int, context: ErrorContext | None = None):
        super().__init__(
            f"Rate limit exceeded. Try again in {reset_time} seconds.",
            "RATE_LIMIT_EXCEEDED", ErrorCategory.RATE_LIMIT,
            ErrorSeverity.WARNING, context, 429,
            {"resetTime": reset_time},
        )
        self.reset_time = reset_time


# ─── Server Errors (500-level) ──────────────────────────────────

class ExportError(PortfolioError):
    """Export formatter failed to render the requested format."""
    def __init__(
        self, export_format: str, reason: str | None = None,
        context: ErrorContext | None = None,
    ):
        message = (
            f"Export failed for {export_format}: {reason}"
            if reason else f"Export failed for {export_format}"
        )
        super().__init__(
            message, "EXPORT_ERROR", ErrorCategory.EXPORT,
            ErrorSeverity.ERROR, context, 500,
            {"format": export_format, "reason": reason},
        )


class InternalError(PortfolioError):
    """Catch-all. The message is always generic."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


class DuplicateOperationError(PortfolioError):
    """A second operation was registered under an existing name."""
    def __init__(self, tool_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Operation '{tool_name}' is already registered",
            "DUPLICATE_OPERATION", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
            {"tool": tool_name},
        )
        self.tool_name = tool_name


class DatasetLoadError(PortfolioError):
    """The configured portfolio dataset is unreadable or malformed."""
    def __init__(self, source: str, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Failed to load portfolio dataset from {source}: {reason}",
            "DATASET_LOAD_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
            {"source": source},
        )


class SchemaDefinitionError(PortfolioError):
    """A declarative parameter schema is malformed (startup-time failure)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "SCHEMA_DEFINITION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
