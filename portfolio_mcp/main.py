"""Portfolio Tool Server — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PortfolioError → response envelopes
    - CORS configured from settings (not hardcoded)
    - Dataset, analytics store, rate limiter, registry and dispatcher are built
      once in the lifespan and shared through app.state
    - The rate limiter sweeper task lives exactly as long as the lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app(settings) factory so tests build apps with their own limits;
      the module-level `app` uses environment settings
"""

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio_mcp.api.error_handlers import register_error_handlers
from portfolio_mcp.api.routes import health, tools
from portfolio_mcp.config import Settings, get_settings
from portfolio_mcp.core.analytics_store import AnalyticsStore
from portfolio_mcp.core.rate_limiter import RateLimiter
from portfolio_mcp.infrastructure.observability import setup_logging
from portfolio_mcp.infrastructure.portfolio_dataset import load_dataset
from portfolio_mcp.services.tool_dispatch import ToolDispatch
from portfolio_mcp.services.tools_registry import build_tool_registry

logger = logging.getLogger(__name__)


def init_state(app: FastAPI, settings: Settings) -> None:
    """Build every shared component and attach it to app.state."""
    dataset = load_dataset(settings.portfolio_data_path)
    analytics = AnalyticsStore(
        max_events=settings.analytics_max_events,
        ring_capacity=settings.analytics_ring_capacity,
    )
    rate_limiter = RateLimiter(
        window_ms=settings.rate_limit_window_ms,
        max_requests=settings.rate_limit_max_requests,
    )
    registry = build_tool_registry(dataset, analytics)

    app.state.dataset = dataset
    app.state.analytics = analytics
    app.state.rate_limiter = rate_limiter
    app.state.registry = registry
    app.state.expose_error_context = settings.expose_error_context
    app.state.dispatch = ToolDispatch(
        registry,
        rate_limiter,
        handler_timeout_seconds=settings.handler_timeout_seconds,
        expose_error_context=settings.expose_error_context,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    init_state(app, settings)
    sweeper = asyncio.create_task(
        app.state.rate_limiter.run_sweeper(settings.rate_limit_sweep_interval_seconds),
    )
    logger.info(f"Portfolio tool server started with {len(app.state.registry)} tools")
    yield
    sweeper.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await sweeper
    logger.info("Portfolio tool server shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    application = FastAPI(
        title="Portfolio Tool Server", version="1.0.0", lifespan=lifespan,
    )
    application.state.settings = settings

    # CORS — configured from settings, not hardcoded
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes — explicit registration
    application.include_router(health.router)
    application.include_router(tools.router)

    register_error_handlers(application)
    return application


app = create_app()
