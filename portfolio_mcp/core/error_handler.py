"""Error Handler — normalizes any failure into an ErrorRecord and logs it once.

Invariants:
    - PortfolioError keeps its code, status and public details
    - pydantic ValidationError maps to VALIDATION_ERROR (400)
    - Every other exception maps to INTERNAL_ERROR (500) with a generic message;
      the raw message and type survive only in ErrorRecord.diagnostics
    - Severity of the log line follows the status: >=500 error (with traceback),
      >=400 warning, otherwise info

Design Decisions:
    - Stateless class with a module-level instance, so tests can build their own
    - with_timeout wraps asyncio.wait_for and re-raises as OperationTimeoutError
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Awaitable, TypeVar

from pydantic import ValidationError

from portfolio_mcp.core.errors import (
    ErrorRecord,
    InternalError,
    OperationTimeoutError,
    PortfolioError,
    ResourceNotFoundError,
)
from portfolio_mcp.schemas.envelope import ResponseEnvelope

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ErrorHandler:
    """Classify, record, and log failures at the dispatch boundary."""

    def handle(
        self, error: BaseException, context: dict[str, Any] | None = None,
    ) -> ErrorRecord:
        """Normalize `error` into an ErrorRecord. Never raises."""
        if isinstance(error, PortfolioError):
            return error.to_record(context)

        if isinstance(error, ValidationError):
            messages = [
                f"{'.'.join(str(loc) for loc in e['loc']) or 'value'}: {e['msg']}"
                for e in error.errors()
            ]
            return ErrorRecord(
                message="Validation failed",
                code="VALIDATION_ERROR",
                status_code=400,
                timestamp=datetime.now(timezone.utc),
                context={"errors": messages},
                diagnostics=dict(context or {}),
            )

        record = InternalError().to_record(context)
        record.diagnostics["exception_type"] = type(error).__name__
        record.diagnostics["exception_message"] = str(error)
        return record

    def to_envelope(
        self, record: ErrorRecord, expose_diagnostics: bool = False,
    ) -> ResponseEnvelope:
        """Error envelope for `record`. Diagnostics only when exposed."""
        return ResponseEnvelope.failure(record, expose_diagnostics)

    def log_error(
        self, error: BaseException, record: ErrorRecord,
    ) -> None:
        """Log a normalized failure at the level its status implies."""
        extra = {
            "error_code": record.code,
            "status_code": record.status_code,
            "tool_name": record.diagnostics.get("tool_name"),
            "caller_key": record.diagnostics.get("caller_key"),
        }
        if record.status_code >= 500:
            logger.error(
                f"Server error: {record.message}",
                extra=extra,
                exc_info=(type(error), error, error.__traceback__),
            )
        elif record.status_code >= 400:
            logger.warning(f"Client error: {record.message}", extra=extra)
        else:
            logger.info(f"Error handled: {record.message}", extra=extra)

    async def with_timeout(
        self, operation: Awaitable[T], timeout_seconds: float | None,
    ) -> T:
        """Await `operation`, raising OperationTimeoutError past the budget."""
        if timeout_seconds is None or timeout_seconds <= 0:
            return await operation
        try:
            return await asyncio.wait_for(operation, timeout=timeout_seconds)
        except asyncio.TimeoutError as exc:
            raise OperationTimeoutError(timeout_seconds) from exc

    def assert_exists(
        self, resource: T | None, resource_name: str, resource_id: str | None = None,
    ) -> T:
        """Return `resource` or raise ResourceNotFoundError."""
        if resource is None:
            raise ResourceNotFoundError(resource_name, resource_id)
        return resource


error_handler = ErrorHandler()
