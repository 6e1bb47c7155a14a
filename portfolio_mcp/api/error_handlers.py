"""Error Handlers — global exception handlers answering with error envelopes.

Invariants:
    - PortfolioError → envelope with its code and HTTP status
    - RequestValidationError → VALIDATION_ERROR envelope listing field errors
    - Exception (catch-all) → INTERNAL_ERROR envelope, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (PortfolioError), validation (Pydantic), catch-all (Exception)
    - Same envelope shape as tool calls: clients parse one format for every failure
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from portfolio_mcp.core.error_handler import error_handler
from portfolio_mcp.core.errors import InternalError, PortfolioError, ToolValidationError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_portfolio_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _expose(request: Request) -> bool:
    return bool(getattr(request.app.state, "expose_error_context", False))


def _register_portfolio_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(PortfolioError)
    async def portfolio_error_handler(request: Request, exc: PortfolioError):
        """Handle all tool server domain errors raised outside dispatch."""
        record = error_handler.handle(exc, {"path": request.url.path})
        error_handler.log_error(exc, record)
        envelope = error_handler.to_envelope(record, _expose(request))
        return JSONResponse(
            status_code=envelope.status_code, content=envelope.to_body(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register request body validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed request bodies."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "error_code": "VALIDATION_ERROR"},
        )
        record = ToolValidationError(_field_errors(exc)).to_record()
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_handler.to_envelope(record).to_body(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "error_code": "INTERNAL_ERROR"},
        )
        record = InternalError().to_record()
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_handler.to_envelope(record).to_body(),
        )


def _field_errors(exc: RequestValidationError) -> list[str]:
    """One "path: message" line per field error, body prefix dropped."""
    errors = []
    for e in exc.errors():
        loc = [str(part) for part in e["loc"] if part != "body"]
        errors.append(f"{'.'.join(loc) or 'body'}: {e['msg']}")
    return errors
