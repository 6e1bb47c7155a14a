"""Error Hierarchy & ErrorHandler — tests for codes, normalization, and timeouts.

Tests cover:
    - Every PortfolioError subclass: code, HTTP status, message, public details
    - to_record: details → context, category/severity/debug info → diagnostics
    - ErrorHandler.handle for typed errors, pydantic errors and generic exceptions
    - Generic exceptions never leak their message outside diagnostics
    - with_timeout raising OperationTimeoutError, and no-timeout passthrough
    - assert_exists
    - log_error levels follow the status code
"""

import asyncio
import logging

import pytest
from pydantic import BaseModel, ValidationError

from portfolio_mcp.core.error_handler import ErrorHandler
from portfolio_mcp.core.errors import (
    DatasetLoadError,
    DuplicateOperationError,
    ErrorCategory,
    ErrorContext,
    ExportError,
    ForbiddenError,
    InternalError,
    OperationTimeoutError,
    PortfolioError,
    RateLimitExceededError,
    ResourceNotFoundError,
    ToolValidationError,
    UnauthorizedError,
    UnknownOperationError,
)


@pytest.fixture
def handler():
    return ErrorHandler()


@pytest.mark.parametrize(
    "error, code, status",
    [
        (ToolValidationError(["limit: Required"]), "VALIDATION_ERROR", 400),
        (UnauthorizedError(), "UNAUTHORIZED", 401),
        (ForbiddenError(), "FORBIDDEN", 403),
        (ResourceNotFoundError("Skill", "x"), "NOT_FOUND", 404),
        (UnknownOperationError("nope"), "UNKNOWN_OPERATION", 404),
        (OperationTimeoutError(30), "TIMEOUT_ERROR", 408),
        (RateLimitExceededError(12), "RATE_LIMIT_EXCEEDED", 429),
        (ExportError("csv", "boom"), "EXPORT_ERROR", 500),
        (InternalError(), "INTERNAL_ERROR", 500),
        (DuplicateOperationError("get_skills"), "DUPLICATE_OPERATION", 500),
        (DatasetLoadError("data.json", "bad"), "DATASET_LOAD_ERROR", 500),
    ],
)
def test_error_codes_and_statuses(error, code, status):
    assert isinstance(error, PortfolioError)
    assert error.code == code
    assert error.http_status == status


def test_messages_are_client_readable():
    assert str(ResourceNotFoundError("Project", "p-1")) == (
        "Project not found with ID: p-1"
    )
    assert str(UnknownOperationError("get_nonexistent")) == (
        "Unknown tool: get_nonexistent"
    )
    assert str(RateLimitExceededError(42)) == (
        "Rate limit exceeded. Try again in 42 seconds."
    )
    assert str(OperationTimeoutError(0.5)) == "Operation timed out after 0.5 seconds"


def test_to_record_splits_public_and_diagnostic_context():
    error = ResourceNotFoundError(
        "Skill", "skill-x",
        ErrorContext(tool_name="get_skill_by_id", debug_info={"lookup": "by_id"}),
    )
    record = error.to_record({"caller": "ip:1.2.3.4"})
    assert record.context == {"resource": "Skill", "id": "skill-x"}
    assert record.diagnostics["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert record.diagnostics["tool_name"] == "get_skill_by_id"
    assert record.diagnostics["lookup"] == "by_id"
    assert record.diagnostics["caller"] == "ip:1.2.3.4"
    assert record.status_code == 404


def test_handle_keeps_typed_error(handler):
    record = handler.handle(RateLimitExceededError(7))
    assert record.code == "RATE_LIMIT_EXCEEDED"
    assert record.context == {"resetTime": 7}


def test_handle_maps_pydantic_errors_to_validation(handler):
    class Model(BaseModel):
        count: int

    with pytest.raises(ValidationError) as info:
        Model(count="many")
    record = handler.handle(info.value)
    assert record.code == "VALIDATION_ERROR"
    assert record.status_code == 400
    assert record.context["errors"][0].startswith("count: ")


def test_handle_generic_exception_hides_message(handler):
    record = handler.handle(RuntimeError("db password is hunter2"))
    assert record.code == "INTERNAL_ERROR"
    assert record.status_code == 500
    assert record.message == "An unexpected error occurred"
    assert "hunter2" not in str(record.context)
    assert record.diagnostics["exception_type"] == "RuntimeError"
    assert record.diagnostics["exception_message"] == "db password is hunter2"


def test_to_envelope_exposes_diagnostics_only_on_request(handler):
    record = handler.handle(RuntimeError("secret"))
    hidden = handler.to_envelope(record)
    shown = handler.to_envelope(record, expose_diagnostics=True)
    assert hidden.context is None
    assert shown.context["exception_message"] == "secret"
    assert hidden.status_code == 500


@pytest.mark.asyncio
async def test_with_timeout_raises_timeout_error(handler):
    with pytest.raises(OperationTimeoutError) as info:
        await handler.with_timeout(asyncio.sleep(1), 0.01)
    assert info.value.http_status == 408


@pytest.mark.asyncio
async def test_with_timeout_disabled_for_none_or_zero(handler):
    async def answer():
        return 42

    assert await handler.with_timeout(answer(), None) == 42
    assert await handler.with_timeout(answer(), 0) == 42


def test_assert_exists(handler):
    assert handler.assert_exists("value", "Skill", "s") == "value"
    with pytest.raises(ResourceNotFoundError, match="Skill not found with ID: s"):
        handler.assert_exists(None, "Skill", "s")


def test_log_error_level_follows_status(handler, caplog):
    caplog.set_level(logging.INFO, logger="portfolio_mcp.core.error_handler")
    client = ResourceNotFoundError("Skill", "a")
    server = InternalError()
    handler.log_error(client, client.to_record())
    handler.log_error(server, server.to_record())
    levels = [r.levelno for r in caplog.records]
    assert levels == [logging.WARNING, logging.ERROR]
    assert caplog.records[0].error_code == "NOT_FOUND"
