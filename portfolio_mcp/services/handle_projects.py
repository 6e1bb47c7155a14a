"""Project Handlers — get_projects, get_project_by_id, filter_projects, get_featured_projects.

Invariants:
    - Unknown project ids raise ResourceNotFoundError (NOT_FOUND)
    - get_projects stats cover the whole dataset, not just the returned page
    - Reading a project never bumps its views counter
"""

import logging

from portfolio_mcp.core import portfolio_queries as queries
from portfolio_mcp.core.error_handler import error_handler
from portfolio_mcp.core.tool_result import ToolResult
from portfolio_mcp.infrastructure.portfolio_dataset import PortfolioDataset

logger = logging.getLogger(__name__)


class ProjectHandlers:
    """Project tool handlers."""

    def __init__(self, dataset: PortfolioDataset):
        self.dataset = dataset

    async def get_projects(self, args: dict) -> ToolResult:
        page, pagination = queries.list_projects(
            self.dataset.projects,
            sort_by=args.get("sortBy", "date"),
            sort_order=args.get("sortOrder", "desc"),
            offset=int(args.get("offset", 0)),
            limit=int(args.get("limit", 10)),
        )
        data = {
            "projects": [p.to_wire() for p in page],
            "pagination": pagination,
        }
        if args.get("includeStats"):
            data["stats"] = queries.project_stats(self.dataset.projects)
        return ToolResult(
            data, f"Retrieved {len(page)} of {pagination['total']} projects",
        )

    async def get_project_by_id(self, args: dict) -> ToolResult:
        project = error_handler.assert_exists(
            queries.find_project(self.dataset.projects, args["id"]),
            "Project", args["id"],
        )
        data = {"project": project.to_wire()}
        if args.get("includeRelated"):
            data["relatedProjects"] = [
                p.to_wire() for p in queries.related_projects(self.dataset.projects, project)
            ]
        data["categoryPeers"] = [
            p.to_wire()
            for p in queries.project_category_peers(self.dataset.projects, project)
        ]
        return ToolResult(data, "Project retrieved successfully")

    async def filter_projects(self, args: dict) -> ToolResult:
        year = args.get("year")
        min_views = args.get("minViews")
        projects = queries.filter_projects(
            self.dataset.projects,
            category=args.get("category"),
            status=args.get("status"),
            featured=args.get("featured"),
            year=int(year) if year is not None else None,
            technology=args.get("technology"),
            skill=args.get("skill"),
            search=args.get("search"),
            min_views=int(min_views) if min_views is not None else None,
            has_images=args.get("hasImages"),
            has_live_url=args.get("hasLiveUrl"),
        )
        return ToolResult(
            {
                "projects": [p.to_wire() for p in projects],
                "total": len(projects),
                "filters": args,
            },
            f"Found {len(projects)} projects matching criteria",
        )

    async def get_featured_projects(self, args: dict) -> ToolResult:
        projects = queries.featured_projects(
            self.dataset.projects,
            category=args.get("category"),
            limit=int(args.get("limit", 5)),
        )
        return ToolResult(
            {
                "projects": [p.to_wire() for p in projects],
                "total": len(projects),
                "categories": queries.featured_categories(self.dataset.projects),
            },
            f"Retrieved {len(projects)} featured projects",
        )
