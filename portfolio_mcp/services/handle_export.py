"""Export Handlers — export_portfolio, export_skills, export_projects.

Invariants:
    - Exports are pure reads: counters on the exported entities never change
    - The phone number leaves the server only when includePrivate is true
    - Formatter failures surface as EXPORT_ERROR with the requested format

Design Decisions:
    - Private and image stripping use model_copy on the frozen models, so the
      dataset itself is untouched
    - Filenames encode the filters applied (skills-adobe.csv, projects-featured.md)
"""

import logging

from portfolio_mcp.core import export_formats
from portfolio_mcp.core.domain_types import ExportFormat
from portfolio_mcp.core.tool_result import ToolResult
from portfolio_mcp.infrastructure.portfolio_dataset import PortfolioDataset

logger = logging.getLogger(__name__)


class ExportHandlers:
    """Document export tool handlers."""

    def __init__(self, dataset: PortfolioDataset):
        self.dataset = dataset

    async def export_portfolio(self, args: dict) -> ToolResult:
        fmt = ExportFormat(args.get("format", "json"))
        portfolio = self.dataset.portfolio
        if not args.get("includePrivate", False):
            portfolio = portfolio.model_copy(update={
                "contact": portfolio.contact.model_copy(update={"phone": None}),
            })

        content = export_formats.render_portfolio(
            portfolio, fmt, compress=args.get("compress", False),
        )
        payload = export_formats.export_payload(content, fmt, "portfolio")
        logger.debug(f"Portfolio exported as {fmt.value} ({payload['size']} bytes)")
        return ToolResult(
            payload, f"Portfolio exported successfully as {fmt.value.upper()}",
        )

    async def export_skills(self, args: dict) -> ToolResult:
        fmt = ExportFormat(args.get("format", "json"))
        category = args.get("category")
        skills = [
            s for s in self.dataset.skills if not category or s.category == category
        ]

        content = export_formats.render_skills(
            skills, fmt, include_stats=args.get("includeStats", True),
        )
        basename = f"skills-{category}" if category else "skills"
        payload = export_formats.export_payload(content, fmt, basename)
        payload["skillCount"] = len(skills)
        if category:
            payload["category"] = category
        return ToolResult(
            payload, f"{len(skills)} skills exported successfully as {fmt.value.upper()}",
        )

    async def export_projects(self, args: dict) -> ToolResult:
        fmt = ExportFormat(args.get("format", "json"))
        category = args.get("category")
        featured = args.get("featured")
        projects = [
            p for p in self.dataset.projects
            if (not category or p.category == category)
            and (not featured or p.featured)
        ]
        if not args.get("includeImages", True):
            projects = [p.model_copy(update={"images": []}) for p in projects]

        content = export_formats.render_projects(projects, fmt)
        basename = "projects"
        if category:
            basename += f"-{category}"
        if featured:
            basename += "-featured"
        payload = export_formats.export_payload(content, fmt, basename)
        payload["projectCount"] = len(projects)
        if category:
            payload["category"] = category
        if featured is not None:
            payload["featured"] = featured
        return ToolResult(
            payload,
            f"{len(projects)} projects exported successfully as {fmt.value.upper()}",
        )
