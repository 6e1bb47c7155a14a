"""Tools Registry — tests for the tool catalogue and registration rules.

Tests cover:
    - All 18 tools registered, in definition order
    - Tool names unique across the define_*_tools modules
    - list_tools is stable and exposes name/description/inputSchema
    - Duplicate registration raises DuplicateOperationError
    - Every definition compiles (schema errors would fail at build time)
"""

import pytest

from portfolio_mcp.core.errors import DuplicateOperationError
from portfolio_mcp.core.tool_result import ToolResult
from portfolio_mcp.services.tools_registry import (
    ALL_TOOLS,
    OperationDescriptor,
    ToolRegistry,
)

EXPECTED_TOOLS = [
    "get_portfolio_overview", "get_portfolio_stats", "get_contact_info", "get_achievements",
    "get_skills", "get_skill_by_id", "filter_skills", "get_skills_by_category",
    "get_projects", "get_project_by_id", "filter_projects", "get_featured_projects",
    "track_event", "get_analytics_stats", "get_popular_content",
    "export_portfolio", "export_skills", "export_projects",
]


async def _noop(args: dict) -> ToolResult:
    return ToolResult({})


def test_all_tools_registered_in_order(registry):
    assert len(registry) == 18
    assert registry.names() == EXPECTED_TOOLS
    assert "track_event" in registry
    assert "get_nonexistent" not in registry


def test_definitions_have_unique_names():
    names = [tool["name"] for tool in ALL_TOOLS]
    assert len(names) == len(set(names))


def test_list_tools_shape_and_stability(registry):
    first = registry.list_tools()
    assert first == registry.list_tools()
    assert set(first[0]) == {"name", "description", "inputSchema"}
    assert first[0]["inputSchema"]["type"] == "object"


def test_every_tool_schema_is_an_object(registry):
    for tool in registry.list_tools():
        assert tool["inputSchema"]["type"] == "object", tool["name"]
        assert tool["description"]


def test_duplicate_registration_rejected():
    registry = ToolRegistry()
    definition = {"name": "sample_tool", "description": "x", "input_schema": {"type": "object"}}
    registry.register(OperationDescriptor.from_definition(definition, _noop))
    with pytest.raises(DuplicateOperationError):
        registry.register(OperationDescriptor.from_definition(definition, _noop))
    assert len(registry) == 1


def test_get_returns_descriptor_or_none(registry):
    descriptor = registry.get("get_skill_by_id")
    assert descriptor.name == "get_skill_by_id"
    assert "id" in descriptor.parameter_schema.required
    assert registry.get("missing") is None
