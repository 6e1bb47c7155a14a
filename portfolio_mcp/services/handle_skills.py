"""Skill Handlers — get_skills, get_skill_by_id, filter_skills, get_skills_by_category.

Invariants:
    - Unknown skill ids raise ResourceNotFoundError (NOT_FOUND), never an empty result
    - filter_skills echoes the filters it applied
"""

import logging

from portfolio_mcp.core import portfolio_queries as queries
from portfolio_mcp.core.error_handler import error_handler
from portfolio_mcp.core.tool_result import ToolResult
from portfolio_mcp.infrastructure.portfolio_dataset import PortfolioDataset

logger = logging.getLogger(__name__)


class SkillHandlers:
    """Skill tool handlers."""

    def __init__(self, dataset: PortfolioDataset):
        self.dataset = dataset

    async def get_skills(self, args: dict) -> ToolResult:
        skills = queries.list_skills(
            self.dataset.skills,
            active_only=args.get("activeOnly", True),
            sort_by=args.get("sortBy", "proficiency"),
            sort_order=args.get("sortOrder", "desc"),
        )
        data = {"skills": [s.to_wire() for s in skills]}
        if args.get("includeStats"):
            data["stats"] = queries.skill_stats(skills)
        return ToolResult(data, f"Retrieved {len(skills)} skills")

    async def get_skill_by_id(self, args: dict) -> ToolResult:
        skill = error_handler.assert_exists(
            queries.find_skill(self.dataset.skills, args["id"]), "Skill", args["id"],
        )
        data = {"skill": skill.to_wire()}
        if args.get("includeRelated"):
            data["relatedSkills"] = [
                s.to_wire() for s in queries.related_skills(self.dataset.skills, skill)
            ]
        data["categoryPeers"] = [
            s.to_wire() for s in queries.skill_category_peers(self.dataset.skills, skill)
        ]
        return ToolResult(data, "Skill retrieved successfully")

    async def filter_skills(self, args: dict) -> ToolResult:
        skills = queries.filter_skills(
            self.dataset.skills,
            category=args.get("category"),
            level=args.get("level"),
            min_proficiency=args.get("minProficiency"),
            max_proficiency=args.get("maxProficiency"),
            search=args.get("search"),
            has_projects=args.get("hasProjects"),
        )
        return ToolResult(
            {
                "skills": [s.to_wire() for s in skills],
                "total": len(skills),
                "filters": args,
            },
            f"Found {len(skills)} skills matching criteria",
        )

    async def get_skills_by_category(self, args: dict) -> ToolResult:
        grouped = queries.skills_by_category(
            self.dataset.skills,
            include_stats=args.get("includeStats", True),
            sort_within=args.get("sortWithinCategory", "proficiency"),
        )
        return ToolResult(grouped, "Skills organized by category successfully")
