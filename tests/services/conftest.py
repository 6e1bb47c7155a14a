"""Service test fixtures — registry, dispatcher and FastAPI test client.

Invariants:
    - Every test gets a fresh analytics store and rate limiter
    - The test app runs its real lifespan, so app.state is built exactly as in
      production (dataset, registry, dispatcher, sweeper task)

Design Decisions:
    - ASGITransport does not drive lifespan events; the client fixture enters
      app.router.lifespan_context itself
    - Small rate limit on the test app so the 429 path is reachable over HTTP
"""

import pytest
from httpx import ASGITransport, AsyncClient

from portfolio_mcp.config import Settings
from portfolio_mcp.core.rate_limiter import CallerInfo, RateLimiter
from portfolio_mcp.main import create_app
from portfolio_mcp.services.tool_dispatch import ToolDispatch
from portfolio_mcp.services.tools_registry import build_tool_registry

TEST_RATE_LIMIT = 5


@pytest.fixture
def registry(dataset, analytics):
    return build_tool_registry(dataset, analytics)


@pytest.fixture
def limiter(clock):
    return RateLimiter(window_ms=60_000, max_requests=100, clock=clock)


@pytest.fixture
def dispatch(registry, limiter):
    return ToolDispatch(registry, limiter, handler_timeout_seconds=5.0)


@pytest.fixture
def caller():
    return CallerInfo(ip="203.0.113.7", user_agent="pytest")


@pytest.fixture
def portfolio_app():
    return create_app(Settings(
        rate_limit_max_requests=TEST_RATE_LIMIT,
        portfolio_data_path=None,
        log_format="text",
    ))


@pytest.fixture
async def client(portfolio_app):
    """FastAPI test client with the lifespan running."""
    async with portfolio_app.router.lifespan_context(portfolio_app):
        async with AsyncClient(
            transport=ASGITransport(app=portfolio_app), base_url="http://test",
        ) as c:
            yield c
