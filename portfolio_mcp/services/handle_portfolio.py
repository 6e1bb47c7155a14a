"""Portfolio Handlers — get_portfolio_overview, get_portfolio_stats, get_contact_info, get_achievements.

Invariants:
    - Read-only: no handler here touches analytics or the dataset
    - Arguments arrive validated with defaults applied
"""

import logging

from portfolio_mcp.core import portfolio_queries as queries
from portfolio_mcp.core.tool_result import ToolResult
from portfolio_mcp.infrastructure.portfolio_dataset import PortfolioDataset

logger = logging.getLogger(__name__)


class PortfolioHandlers:
    """Profile-level tool handlers."""

    def __init__(self, dataset: PortfolioDataset):
        self.dataset = dataset

    async def get_portfolio_overview(self, args: dict) -> ToolResult:
        overview = queries.portfolio_overview(
            self.dataset.portfolio,
            include_contact=args.get("includeContact", True),
            include_skills=args.get("includeSkills", False),
            include_projects=args.get("includeProjects", False),
        )
        return ToolResult(overview, "Portfolio overview retrieved successfully")

    async def get_portfolio_stats(self, args: dict) -> ToolResult:
        stats = queries.portfolio_stats(
            self.dataset.portfolio,
            include_breakdown=args.get("includeBreakdown", True),
        )
        return ToolResult(stats, "Portfolio stats retrieved successfully")

    async def get_contact_info(self, args: dict) -> ToolResult:
        contact = queries.contact_details(
            self.dataset.contact,
            include_private=args.get("includePrivate", False),
            active_only=args.get("activeOnly", True),
        )
        return ToolResult(contact, "Contact info retrieved successfully")

    async def get_achievements(self, args: dict) -> ToolResult:
        achievements = queries.select_achievements(
            self.dataset.achievements,
            public_only=args.get("publicOnly", True),
            category=args.get("category"),
            limit=int(args.get("limit", 10)),
        )
        categories = list(dict.fromkeys(a.category for a in self.dataset.achievements))
        return ToolResult(
            {
                "achievements": [a.to_wire() for a in achievements],
                "total": len(achievements),
                "categories": categories,
            },
            "Achievements retrieved successfully",
        )
