"""Tool Routes — discovery listing and the single call entry point.

Invariants:
    - POST /tools/call answers with the envelope; HTTP status equals its status_code
    - Caller identity is the client address, else the User-Agent header
    - Routes hold no business logic: everything goes through ToolDispatch
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from portfolio_mcp.core.rate_limiter import CallerInfo
from portfolio_mcp.schemas.envelope import CallRequest
from portfolio_mcp.services.tool_dispatch import ToolDispatch

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/tools", tags=["tools"])


def get_dispatch(request: Request) -> ToolDispatch:
    """Dispatcher built in the app lifespan."""
    return request.app.state.dispatch


def caller_from_request(request: Request) -> CallerInfo:
    return CallerInfo(
        ip=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )


@router.get("")
async def list_tools(dispatch: ToolDispatch = Depends(get_dispatch)):
    """Every registered tool with its input schema, in registration order."""
    return {"tools": dispatch.list_tools()}


@router.post("/call")
async def call_tool(
    body: CallRequest,
    request: Request,
    dispatch: ToolDispatch = Depends(get_dispatch),
):
    """Run one tool call through rate limiting, validation and the handler."""
    envelope = await dispatch.dispatch(
        body.operation, body.arguments, caller_from_request(request),
    )
    return JSONResponse(status_code=envelope.status_code, content=envelope.to_body())
