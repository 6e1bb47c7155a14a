"""Tools Registry — named operation descriptors and the explicit tool catalogue.

Invariants:
    - Operation names are unique; a second registration raises DuplicateOperationError
    - Every descriptor's schema is compiled once, at registration time
    - list_tools() is stable: registration order, same output on every call
    - The registry is never mutated after build_tool_registry returns

Design Decisions:
    - Explicit name -> handler dict over getattr: every mapping visible in one place
    - Schemas live in define_*_tools.py, handlers in handle_*.py; this module
      joins them and fails fast at startup if a definition has no handler
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from portfolio_mcp.core.analytics_store import AnalyticsStore
from portfolio_mcp.core.errors import DuplicateOperationError, SchemaDefinitionError
from portfolio_mcp.core.schema_validator import Schema, compile_schema
from portfolio_mcp.core.tool_result import ToolResult
from portfolio_mcp.infrastructure.portfolio_dataset import PortfolioDataset
from portfolio_mcp.services.define_analytics_tools import TOOLS_ANALYTICS
from portfolio_mcp.services.define_export_tools import TOOLS_EXPORT
from portfolio_mcp.services.define_portfolio_tools import TOOLS_PORTFOLIO
from portfolio_mcp.services.define_project_tools import TOOLS_PROJECTS
from portfolio_mcp.services.define_skill_tools import TOOLS_SKILLS
from portfolio_mcp.services.handle_analytics import AnalyticsHandlers
from portfolio_mcp.services.handle_export import ExportHandlers
from portfolio_mcp.services.handle_portfolio import PortfolioHandlers
from portfolio_mcp.services.handle_projects import ProjectHandlers
from portfolio_mcp.services.handle_skills import SkillHandlers

Handler = Callable[[dict], Awaitable[ToolResult]]

ALL_TOOLS: list[dict] = [
    *TOOLS_PORTFOLIO,    # 4 tools
    *TOOLS_SKILLS,       # 4 tools
    *TOOLS_PROJECTS,     # 4 tools
    *TOOLS_ANALYTICS,    # 3 tools
    *TOOLS_EXPORT,       # 3 tools
]
# Total: 18


@dataclass(frozen=True)
class OperationDescriptor:
    name: str
    description: str
    parameter_schema: Schema
    input_schema: dict[str, Any]
    handler: Handler

    @classmethod
    def from_definition(cls, definition: dict, handler: Handler) -> "OperationDescriptor":
        """Compile a define_*_tools entry into a descriptor."""
        return cls(
            name=definition["name"],
            description=definition["description"],
            parameter_schema=compile_schema(
                definition["input_schema"], definition["name"],
            ),
            input_schema=definition["input_schema"],
            handler=handler,
        )


class ToolRegistry:
    """Holds operation descriptors by name, in registration order."""

    def __init__(self):
        self._operations: dict[str, OperationDescriptor] = {}

    def register(self, descriptor: OperationDescriptor) -> None:
        if descriptor.name in self._operations:
            raise DuplicateOperationError(descriptor.name)
        self._operations[descriptor.name] = descriptor

    def get(self, name: str) -> OperationDescriptor | None:
        return self._operations.get(name)

    def names(self) -> list[str]:
        return list(self._operations)

    def list_tools(self) -> list[dict[str, Any]]:
        """Discovery listing: name, description and input schema per tool."""
        return [
            {
                "name": op.name,
                "description": op.description,
                "inputSchema": op.input_schema,
            }
            for op in self._operations.values()
        ]

    def __len__(self) -> int:
        return len(self._operations)

    def __contains__(self, name: object) -> bool:
        return name in self._operations


def build_tool_registry(
    dataset: PortfolioDataset, analytics: AnalyticsStore,
) -> ToolRegistry:
    """Register every tool against its handler."""
    portfolio = PortfolioHandlers(dataset)
    skills = SkillHandlers(dataset)
    projects = ProjectHandlers(dataset)
    tracking = AnalyticsHandlers(analytics)
    export = ExportHandlers(dataset)

    # every mapping explicit: adding a tool requires editing this dict
    handlers: dict[str, Handler] = {
        # Portfolio (4 tools)
        "get_portfolio_overview": portfolio.get_portfolio_overview,
        "get_portfolio_stats": portfolio.get_portfolio_stats,
        "get_contact_info": portfolio.get_contact_info,
        "get_achievements": portfolio.get_achievements,

        # Skills (4 tools)
        "get_skills": skills.get_skills,
        "get_skill_by_id": skills.get_skill_by_id,
        "filter_skills": skills.filter_skills,
        "get_skills_by_category": skills.get_skills_by_category,

        # Projects (4 tools)
        "get_projects": projects.get_projects,
        "get_project_by_id": projects.get_project_by_id,
        "filter_projects": projects.filter_projects,
        "get_featured_projects": projects.get_featured_projects,

        # Analytics (3 tools)
        "track_event": tracking.track_event,
        "get_analytics_stats": tracking.get_analytics_stats,
        "get_popular_content": tracking.get_popular_content,

        # Export (3 tools)
        "export_portfolio": export.export_portfolio,
        "export_skills": export.export_skills,
        "export_projects": export.export_projects,
    }

    registry = ToolRegistry()
    for definition in ALL_TOOLS:
        handler = handlers.get(definition["name"])
        if handler is None:
            raise SchemaDefinitionError(
                f"Tool '{definition['name']}' has no registered handler",
            )
        registry.register(OperationDescriptor.from_definition(definition, handler))
    return registry
