"""Envelope Schemas — the request body and the uniform response of every tool call.

Invariants:
    - Exactly one of data / error is populated
    - A failed envelope always carries errorCode
    - status_code mirrors the HTTP status and never appears in the JSON body
    - None fields are omitted from the body

Design Decisions:
    - Built through ok() / failure() so the invariants hold at
      construction; the model validator rejects anything else
    - `context` is the public part of an ErrorRecord. Diagnostics are merged in
      only when the server runs with EXPOSE_ERROR_CONTEXT
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import Field, model_validator

from portfolio_mcp.core.errors import ErrorRecord
from portfolio_mcp.schemas.portfolio import CamelModel


class CallRequest(CamelModel):
    """POST /tools/call body."""
    operation: str = Field(min_length=1)
    arguments: dict[str, Any] = Field(default_factory=dict)


class ResponseEnvelope(CamelModel):
    success: bool
    data: Any = None
    message: str | None = None
    error: str | None = None
    error_code: str | None = None
    context: dict[str, Any] | None = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status_code: int = Field(default=200, exclude=True)

    @model_validator(mode="after")
    def _one_of_data_or_error(self) -> "ResponseEnvelope":
        if (self.data is None) == (self.error is None):
            raise ValueError("envelope must carry exactly one of data or error")
        if self.success != (self.error is None):
            raise ValueError("success must be true exactly when there is no error")
        if self.error is not None and not self.error_code:
            raise ValueError("error envelope requires error_code")
        return self

    @classmethod
    def ok(cls, data: Any, message: str | None = None) -> "ResponseEnvelope":
        return cls(success=True, data=data, message=message, status_code=200)

    @classmethod
    def failure(
        cls, record: ErrorRecord, expose_diagnostics: bool = False,
    ) -> "ResponseEnvelope":
        context = dict(record.context)
        if expose_diagnostics:
            context.update(record.diagnostics)
        return cls(
            success=False,
            error=record.message,
            error_code=record.code,
            context=context or None,
            timestamp=record.timestamp,
            status_code=record.status_code,
        )

    def to_body(self) -> dict[str, Any]:
        return self.to_wire()
