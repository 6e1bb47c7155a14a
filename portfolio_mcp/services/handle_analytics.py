"""Analytics Handlers — track_event, get_analytics_stats, get_popular_content.

Invariants:
    - track_event stores the IP only in anonymized form
    - Tracking happens only after the arguments passed validation
"""

import logging

from portfolio_mcp.core.analytics_store import AnalyticsStore
from portfolio_mcp.core.tool_result import ToolResult

logger = logging.getLogger(__name__)


class AnalyticsHandlers:
    """Analytics tool handlers over an injected AnalyticsStore."""

    def __init__(self, store: AnalyticsStore):
        self.store = store

    async def track_event(self, args: dict) -> ToolResult:
        event = self.store.track(
            args["type"],
            args["resource"],
            resource_id=args.get("resourceId"),
            user_agent=args.get("userAgent"),
            ip=args.get("ip"),
            referrer=args.get("referrer"),
            metadata=args.get("metadata"),
        )
        return ToolResult(
            {"eventId": str(event.id), "tracked": True},
            "Event tracked successfully",
        )

    async def get_analytics_stats(self, args: dict) -> ToolResult:
        stats = self.store.stats(
            time_range=args.get("timeRange", "month"),
            event_type=args.get("eventType"),
            include_events=args.get("includeEvents", False),
        )
        return ToolResult(stats, "Analytics stats retrieved successfully")

    async def get_popular_content(self, args: dict) -> ToolResult:
        popular = self.store.popular(
            content_type=args.get("contentType", "projects"),
            limit=int(args.get("limit", 10)),
            time_range=args.get("timeRange", "month"),
        )
        return ToolResult(
            popular,
            f"Retrieved {len(popular['popularItems'])} popular {popular['contentType']}",
        )
