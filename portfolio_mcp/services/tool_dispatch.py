"""Tool Dispatch — runs one named call end to end and returns an envelope.

Invariants:
    - Gate order: lookup -> rate limit -> schema validation -> handler
    - Unknown tools return UNKNOWN_OPERATION and do not consume rate budget
    - A handler only ever sees validated arguments with defaults applied, so
      side effects (analytics writes) never happen for rejected calls
    - dispatch() never raises for a failed call: every failure becomes an error
      envelope through the ErrorHandler. Cancellation still propagates
    - Every call is logged once with tool name, caller key, outcome and duration

Design Decisions:
    - Gates raise typed PortfolioErrors and one except clause turns them into
      envelopes, same path as handler failures
    - Handler runs under a timeout (TIMEOUT_ERROR) that never changes the
      result of a call that finishes in time
"""

import logging
import time
from typing import Any

from portfolio_mcp.core.error_handler import ErrorHandler, error_handler
from portfolio_mcp.core.errors import (
    ErrorContext,
    RateLimitExceededError,
    ToolValidationError,
    UnknownOperationError,
)
from portfolio_mcp.core.rate_limiter import CallerInfo, RateLimiter, caller_key
from portfolio_mcp.core.schema_validator import validate
from portfolio_mcp.core.tool_result import ToolResult
from portfolio_mcp.schemas.envelope import ResponseEnvelope
from portfolio_mcp.services.tools_registry import ToolRegistry

logger = logging.getLogger(__name__)


class ToolDispatch:
    """Routes a tool call through the gates to its handler."""

    def __init__(
        self,
        registry: ToolRegistry,
        rate_limiter: RateLimiter,
        handler_timeout_seconds: float | None = 30.0,
        expose_error_context: bool = False,
        errors: ErrorHandler = error_handler,
    ):
        self._registry = registry
        self._rate_limiter = rate_limiter
        self._timeout = handler_timeout_seconds
        self._expose = expose_error_context
        self._errors = errors

    def list_tools(self) -> list[dict[str, Any]]:
        return self._registry.list_tools()

    async def dispatch(
        self,
        tool_name: str,
        raw_args: dict[str, Any] | None,
        caller: CallerInfo | None = None,
    ) -> ResponseEnvelope:
        """Execute `tool_name` for `caller`. Always returns an envelope."""
        started = time.perf_counter()
        key = caller_key(caller)
        try:
            envelope = await self._execute(
                tool_name, raw_args, caller,
                ErrorContext(tool_name=tool_name, caller_key=key),
            )
        except Exception as exc:
            record = self._errors.handle(
                exc, {"tool_name": tool_name, "caller_key": key},
            )
            self._errors.log_error(exc, record)
            envelope = self._errors.to_envelope(record, self._expose)

        self._log_call(tool_name, key, envelope, started)
        return envelope

    async def _execute(
        self,
        tool_name: str,
        raw_args: dict[str, Any] | None,
        caller: CallerInfo | None,
        context: ErrorContext,
    ) -> ResponseEnvelope:
        descriptor = self._registry.get(tool_name)
        if descriptor is None:
            raise UnknownOperationError(tool_name, context)

        limit = self._rate_limiter.check_limit(caller)
        if not limit.allowed:
            raise RateLimitExceededError(limit.reset_time_seconds, context)

        checked = validate(
            descriptor.parameter_schema, {} if raw_args is None else raw_args,
        )
        if not checked.valid:
            raise ToolValidationError(checked.errors, context)

        outcome = await self._errors.with_timeout(
            descriptor.handler(checked.coerced), self._timeout,
        )
        if not isinstance(outcome, ToolResult):
            raise TypeError(
                f"Handler for '{tool_name}' returned {type(outcome).__name__}, "
                f"expected ToolResult",
            )
        return ResponseEnvelope.ok(outcome.data, outcome.message)

    def _log_call(
        self, tool_name: str, key: str, envelope: ResponseEnvelope, started: float,
    ) -> None:
        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.info(
            f"Tool call {tool_name}: {envelope.error_code or 'OK'}",
            extra={
                "tool_name": tool_name,
                "caller_key": key,
                "status_code": envelope.status_code,
                "error_code": envelope.error_code,
                "duration_ms": duration_ms,
            },
        )
