"""Tool Handlers — tests for handler behavior called directly with validated args.

Tests cover:
    - Portfolio: overview summaries, private phone, achievements categories
    - Skills: related skills, filter echo, missing id
    - Projects: pagination stats over the whole dataset, reads never bump views
    - Export: private data stripped by default, image stripping, filenames
    - The dataset is never mutated by exports
"""

import json

import pytest

from portfolio_mcp.core.errors import ResourceNotFoundError
from portfolio_mcp.services.handle_export import ExportHandlers
from portfolio_mcp.services.handle_portfolio import PortfolioHandlers
from portfolio_mcp.services.handle_projects import ProjectHandlers
from portfolio_mcp.services.handle_skills import SkillHandlers


# ─── Portfolio ───────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_contact_info_private_phone(dataset):
    handlers = PortfolioHandlers(dataset)
    public = await handlers.get_contact_info({})
    private = await handlers.get_contact_info({"includePrivate": True})
    assert "phone" not in public.data
    assert private.data["phone"] == "+1 555 0100"


@pytest.mark.asyncio
async def test_achievements_lists_categories(dataset):
    result = await PortfolioHandlers(dataset).get_achievements({"limit": 2})
    assert result.data["total"] == 2
    assert result.data["categories"] == ["Web Development", "Design", "Animation"]


@pytest.mark.asyncio
async def test_achievements_limit_accepts_whole_float(dataset):
    result = await PortfolioHandlers(dataset).get_achievements({"limit": 2.0})
    assert result.data["total"] == 2


@pytest.mark.asyncio
async def test_overview_with_summaries(dataset):
    result = await PortfolioHandlers(dataset).get_portfolio_overview(
        {"includeSkills": True, "includeProjects": True},
    )
    assert result.data["skillsSummary"]["total"] == 11
    assert result.data["projectsSummary"]["total"] == 3


# ─── Skills ──────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_skill_by_id_with_related(dataset):
    result = await SkillHandlers(dataset).get_skill_by_id(
        {"id": "skill-python", "includeRelated": True},
    )
    assert result.data["skill"]["name"] == "Python"
    assert {s["name"] for s in result.data["relatedSkills"]} == {"HTML/CSS", "Java"}
    assert {s["name"] for s in result.data["categoryPeers"]} == {"HTML/CSS", "Java"}


@pytest.mark.asyncio
async def test_skill_by_id_missing(dataset):
    with pytest.raises(ResourceNotFoundError):
        await SkillHandlers(dataset).get_skill_by_id({"id": "skill-missing"})


@pytest.mark.asyncio
async def test_filter_skills_echoes_filters(dataset):
    args = {"category": "creative", "minProficiency": 70}
    result = await SkillHandlers(dataset).filter_skills(args)
    assert result.data["filters"] == args
    assert [s["name"] for s in result.data["skills"]] == ["Photography", "Videography"]
    assert result.message == "Found 2 skills matching criteria"


# ─── Projects ────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_projects_stats_cover_whole_dataset(dataset):
    result = await ProjectHandlers(dataset).get_projects(
        {"limit": 1, "includeStats": True},
    )
    assert len(result.data["projects"]) == 1
    assert result.data["stats"]["total"] == 3
    assert result.message == "Retrieved 1 of 3 projects"


@pytest.mark.asyncio
async def test_reading_a_project_does_not_bump_views(dataset):
    handlers = ProjectHandlers(dataset)
    for _ in range(3):
        result = await handlers.get_project_by_id({"id": "project-brand-identity"})
    assert result.data["project"]["views"] == 89


@pytest.mark.asyncio
async def test_project_by_id_missing(dataset):
    with pytest.raises(ResourceNotFoundError, match="Project not found"):
        await ProjectHandlers(dataset).get_project_by_id({"id": "nope"})


# ─── Export ──────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_export_portfolio_strips_phone_by_default(dataset):
    handlers = ExportHandlers(dataset)
    public = await handlers.export_portfolio({"format": "json"})
    private = await handlers.export_portfolio({"format": "json", "includePrivate": True})
    assert "phone" not in json.loads(public.data["content"])["contact"]
    assert json.loads(private.data["content"])["contact"]["phone"] == "+1 555 0100"
    assert public.data["filename"] == "portfolio.json"
    assert dataset.contact.phone == "+1 555 0100"


@pytest.mark.asyncio
async def test_export_skills_by_category_csv(dataset):
    result = await ExportHandlers(dataset).export_skills(
        {"format": "csv", "category": "adobe"},
    )
    assert result.data["filename"] == "skills-adobe.csv"
    assert result.data["skillCount"] == 5
    assert result.data["mimeType"] == "text/csv"
    assert result.data["size"] == len(result.data["content"].encode("utf-8"))


@pytest.mark.asyncio
async def test_export_projects_without_images(dataset):
    result = await ExportHandlers(dataset).export_projects(
        {"format": "json", "featured": True, "includeImages": False},
    )
    document = json.loads(result.data["content"])
    assert result.data["filename"] == "projects-featured.json"
    assert result.data["projectCount"] == 2
    assert all(p["images"] == [] for p in document["projects"])
    assert all(p.images for p in dataset.projects)


@pytest.mark.asyncio
async def test_export_projects_markdown_filename(dataset):
    result = await ExportHandlers(dataset).export_projects(
        {"format": "markdown", "category": "branding"},
    )
    assert result.data["filename"] == "projects-branding.md"
    assert result.message == "1 projects exported successfully as MARKDOWN"
