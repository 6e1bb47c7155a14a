"""Portfolio Queries — pure read accessors over the frozen dataset.

Invariants:
    - No function mutates its input; sorts always work on a fresh list
    - Sorting is stable: equal keys keep dataset order
    - Averages round half up and are 0 for an empty collection
    - Search is a case-insensitive substring match

Design Decisions:
    - Functions take plain sequences of models, not the dataset object, so
      exporters and handlers can query any filtered slice
    - Aggregate helpers return camelCase dicts ready for the envelope; list
      helpers return models and the caller decides how to serialize them
"""

import math
from collections import Counter
from typing import Any, Callable, Iterable, Sequence

from portfolio_mcp.core.domain_types import SortOrder
from portfolio_mcp.schemas.portfolio import (
    Achievement,
    ContactInfo,
    Portfolio,
    Project,
    Skill,
)

SKILL_SORT_KEYS: dict[str, Callable[[Skill], Any]] = {
    "name": lambda s: s.name.lower(),
    "proficiency": lambda s: s.proficiency,
    "experience": lambda s: s.years_of_experience,
    "category": lambda s: s.category.value,
    "updated": lambda s: s.last_updated,
}

PROJECT_SORT_KEYS: dict[str, Callable[[Project], Any]] = {
    "title": lambda p: p.title.lower(),
    "date": lambda p: p.updated_at,
    "views": lambda p: p.views,
    "likes": lambda p: p.likes,
    "category": lambda p: p.category.value,
    "featured": lambda p: int(p.featured),
}


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def average(values: Sequence[float]) -> int:
    """Mean rounded half up; 0 for no values."""
    if not values:
        return 0
    return round_half_up(sum(values) / len(values))


def count_by(items: Iterable[Any], key: Callable[[Any], Any]) -> dict[str, int]:
    """Occurrences per key, in first-seen order."""
    return {str(k): v for k, v in Counter(key(item) for item in items).items()}


def _contains(haystack: str | None, needle: str) -> bool:
    return bool(haystack) and needle in haystack.lower()


# ─── Skills ──────────────────────────────────────────────────────

def list_skills(
    skills: Sequence[Skill],
    active_only: bool = True,
    sort_by: str = "proficiency",
    sort_order: SortOrder | str = SortOrder.DESC,
) -> list[Skill]:
    selected = [s for s in skills if s.is_active] if active_only else list(skills)
    key = SKILL_SORT_KEYS.get(sort_by, SKILL_SORT_KEYS["proficiency"])
    return sorted(selected, key=key, reverse=SortOrder(sort_order) == SortOrder.DESC)


def find_skill(skills: Sequence[Skill], skill_id: str) -> Skill | None:
    return next((s for s in skills if s.id == skill_id), None)


def related_skills(skills: Sequence[Skill], skill: Skill) -> list[Skill]:
    """Skills named (by name or id) in skill.related_skills."""
    wanted = set(skill.related_skills)
    return [s for s in skills if s.name in wanted or s.id in wanted]


def skill_category_peers(skills: Sequence[Skill], skill: Skill) -> list[Skill]:
    return [s for s in skills if s.category == skill.category and s.id != skill.id]


def filter_skills(
    skills: Sequence[Skill],
    category: str | None = None,
    level: str | None = None,
    min_proficiency: float | None = None,
    max_proficiency: float | None = None,
    search: str | None = None,
    has_projects: bool | None = None,
) -> list[Skill]:
    """Every given criterion must match. Result sorted by proficiency, highest first."""
    selected = list(skills)
    if category:
        selected = [s for s in selected if s.category == category]
    if level:
        selected = [s for s in selected if s.level == level]
    if min_proficiency is not None:
        selected = [s for s in selected if s.proficiency >= min_proficiency]
    if max_proficiency is not None:
        selected = [s for s in selected if s.proficiency <= max_proficiency]
    if search:
        term = search.lower()
        selected = [
            s for s in selected
            if _contains(s.name, term)
            or _contains(s.description, term)
            or any(_contains(tag, term) for tag in s.tags)
            or any(_contains(app, term) for app in s.applications)
        ]
    if has_projects is not None:
        selected = [s for s in selected if (s.project_count > 0) == has_projects]
    return sorted(selected, key=lambda s: s.proficiency, reverse=True)


def skill_stats(skills: Sequence[Skill]) -> dict[str, Any]:
    return {
        "total": len(skills),
        "byCategory": count_by(skills, lambda s: s.category.value),
        "byLevel": count_by(skills, lambda s: s.level.value),
        "averageProficiency": average([s.proficiency for s in skills]),
        "totalExperience": sum(s.years_of_experience for s in skills),
        "totalProjects": sum(s.project_count for s in skills),
    }


def skills_by_category(
    skills: Sequence[Skill],
    include_stats: bool = True,
    sort_within: str = "proficiency",
) -> dict[str, Any]:
    """Group skills per category, each group sorted by `sort_within`."""
    groups: dict[str, list[Skill]] = {}
    for skill in skills:
        groups.setdefault(skill.category.value, []).append(skill)

    match sort_within:
        case "name":
            order = {"key": lambda s: s.name.lower(), "reverse": False}
        case "experience":
            order = {"key": lambda s: s.years_of_experience, "reverse": True}
        case _:
            order = {"key": lambda s: s.proficiency, "reverse": True}

    categories: dict[str, Any] = {}
    for name, members in groups.items():
        ranked = sorted(members, **order)
        entry: dict[str, Any] = {
            "name": name,
            "skills": [s.to_wire() for s in ranked],
        }
        if include_stats:
            entry["stats"] = {
                "count": len(ranked),
                "averageProficiency": average([s.proficiency for s in ranked]),
                "totalExperience": sum(s.years_of_experience for s in ranked),
                "totalProjects": sum(s.project_count for s in ranked),
                "topSkill": ranked[0].name,
                "levels": count_by(ranked, lambda s: s.level.value),
            }
        categories[name] = entry

    return {
        "categories": categories,
        "summary": {
            "totalCategories": len(categories),
            "totalSkills": len(skills),
            "categoryNames": list(categories),
        },
    }


# ─── Projects ────────────────────────────────────────────────────

def list_projects(
    projects: Sequence[Project],
    sort_by: str = "date",
    sort_order: SortOrder | str = SortOrder.DESC,
    offset: int = 0,
    limit: int = 10,
) -> tuple[list[Project], dict[str, Any]]:
    """One sorted page of projects plus its pagination block."""
    key = PROJECT_SORT_KEYS.get(sort_by, PROJECT_SORT_KEYS["date"])
    ordered = sorted(projects, key=key, reverse=SortOrder(sort_order) == SortOrder.DESC)
    total = len(ordered)
    page = ordered[offset:offset + limit]
    return page, {
        "total": total,
        "offset": offset,
        "limit": limit,
        "hasMore": offset + limit < total,
    }


def find_project(projects: Sequence[Project], project_id: str) -> Project | None:
    return next((p for p in projects if p.id == project_id), None)


def related_projects(
    projects: Sequence[Project], project: Project, limit: int = 3,
) -> list[Project]:
    """Projects sharing a category, a technology or a skill."""
    technologies = set(project.technologies)
    skills_used = set(project.skills_used)
    related = [
        p for p in projects
        if p.id != project.id and (
            p.category == project.category
            or technologies.intersection(p.technologies)
            or skills_used.intersection(p.skills_used)
        )
    ]
    return related[:limit]


def project_category_peers(
    projects: Sequence[Project], project: Project, limit: int = 3,
) -> list[Project]:
    return [
        p for p in projects if p.category == project.category and p.id != project.id
    ][:limit]


def filter_projects(
    projects: Sequence[Project],
    category: str | None = None,
    status: str | None = None,
    featured: bool | None = None,
    year: int | None = None,
    technology: str | None = None,
    skill: str | None = None,
    search: str | None = None,
    min_views: int | None = None,
    has_images: bool | None = None,
    has_live_url: bool | None = None,
) -> list[Project]:
    """Every given criterion must match. Sorted by views, then most recently updated."""
    selected = list(projects)
    if category:
        selected = [p for p in selected if p.category == category]
    if status:
        selected = [p for p in selected if p.status == status]
    if featured is not None:
        selected = [p for p in selected if p.featured == featured]
    if year:
        selected = [p for p in selected if p.year == year]
    if technology:
        term = technology.lower()
        selected = [p for p in selected if any(_contains(t, term) for t in p.technologies)]
    if skill:
        term = skill.lower()
        selected = [p for p in selected if any(_contains(s, term) for s in p.skills_used)]
    if search:
        term = search.lower()
        selected = [
            p for p in selected
            if _contains(p.title, term)
            or _contains(p.description, term)
            or _contains(p.short_description, term)
            or any(_contains(tag, term) for tag in p.tags)
        ]
    if min_views is not None:
        selected = [p for p in selected if p.views >= min_views]
    if has_images is not None:
        selected = [p for p in selected if bool(p.images) == has_images]
    if has_live_url is not None:
        selected = [p for p in selected if bool(p.live_url) == has_live_url]
    return sorted(
        selected, key=lambda p: (p.views, p.updated_at), reverse=True,
    )


def featured_projects(
    projects: Sequence[Project], category: str | None = None, limit: int = 5,
) -> list[Project]:
    """Featured projects ranked by views + 2 * likes."""
    selected = [p for p in projects if p.featured]
    if category:
        selected = [p for p in selected if p.category == category]
    ranked = sorted(selected, key=lambda p: p.views + 2 * p.likes, reverse=True)
    return ranked[:limit]


def featured_categories(projects: Sequence[Project]) -> list[str]:
    return list(dict.fromkeys(p.category.value for p in projects if p.featured))


def project_stats(projects: Sequence[Project]) -> dict[str, Any]:
    total_views = sum(p.views for p in projects)
    return {
        "total": len(projects),
        "featured": sum(1 for p in projects if p.featured),
        "published": sum(1 for p in projects if p.status == "published"),
        "byCategory": count_by(projects, lambda p: p.category.value),
        "byYear": count_by(projects, lambda p: p.year),
        "totalViews": total_views,
        "totalLikes": sum(p.likes for p in projects),
        "averageViews": average([p.views for p in projects]),
    }


# ─── Portfolio ───────────────────────────────────────────────────

def portfolio_overview(
    portfolio: Portfolio,
    include_contact: bool = True,
    include_skills: bool = False,
    include_projects: bool = False,
) -> dict[str, Any]:
    """Profile fields plus the summaries that were asked for."""
    result = portfolio.to_wire()
    for heavy in ("skills", "projects", "achievements", "contact", "createdAt", "updatedAt"):
        result.pop(heavy, None)
    result["lastUpdated"] = portfolio.updated_at.isoformat()

    if include_contact:
        result["contact"] = portfolio.contact.to_wire()

    if include_skills:
        top = sorted(portfolio.skills, key=lambda s: s.proficiency, reverse=True)[:5]
        result["skillsSummary"] = {
            "total": len(portfolio.skills),
            "categories": count_by(portfolio.skills, lambda s: s.category.value),
            "topSkills": [
                {"name": s.name, "proficiency": s.proficiency, "category": s.category.value}
                for s in top
            ],
        }

    if include_projects:
        recent = sorted(portfolio.projects, key=lambda p: p.updated_at, reverse=True)[:3]
        result["projectsSummary"] = {
            "total": len(portfolio.projects),
            "featured": sum(1 for p in portfolio.projects if p.featured),
            "categories": count_by(portfolio.projects, lambda p: p.category.value),
            "recentProjects": [
                {
                    "id": p.id,
                    "title": p.title,
                    "category": p.category.value,
                    "featured": p.featured,
                    "updatedAt": p.updated_at.isoformat(),
                }
                for p in recent
            ],
        }
    return result


def portfolio_stats(
    portfolio: Portfolio, include_breakdown: bool = True,
) -> dict[str, Any]:
    result = portfolio.stats.to_wire()
    if not include_breakdown:
        return result

    skills, projects = portfolio.skills, portfolio.projects
    result["skillsBreakdown"] = {
        "byCategory": count_by(skills, lambda s: s.category.value),
        "byLevel": count_by(skills, lambda s: s.level.value),
        "averageProficiency": average([s.proficiency for s in skills]),
    }
    result["projectsBreakdown"] = {
        "byCategory": count_by(projects, lambda p: p.category.value),
        "byStatus": count_by(projects, lambda p: p.status.value),
        "byYear": count_by(projects, lambda p: p.year),
        "totalViews": sum(p.views for p in projects),
        "totalLikes": sum(p.likes for p in projects),
    }
    most_experienced = sorted(
        skills, key=lambda s: s.years_of_experience, reverse=True,
    )[:3]
    result["experienceBreakdown"] = {
        "totalYearsAcrossSkills": sum(s.years_of_experience for s in skills),
        "skillsWithMostExperience": [
            {"name": s.name, "years": s.years_of_experience, "proficiency": s.proficiency}
            for s in most_experienced
        ],
    }
    return result


def contact_details(
    contact: ContactInfo, include_private: bool = False, active_only: bool = True,
) -> dict[str, Any]:
    """Contact block. The phone number is private unless asked for."""
    links = [l for l in contact.social_links if l.is_active or not active_only]
    result = contact.to_wire()
    result["socialLinks"] = [l.to_wire() for l in links]
    if not include_private:
        result.pop("phone", None)
    result["formattedSocialLinks"] = [
        {
            "platform": l.platform,
            "url": l.url,
            "displayName": l.username or l.platform,
            "icon": l.icon,
        }
        for l in links
    ]
    return result


def select_achievements(
    achievements: Sequence[Achievement],
    public_only: bool = True,
    category: str | None = None,
    limit: int | None = 10,
) -> list[Achievement]:
    """Newest first, optionally public-only and category-filtered."""
    selected = [a for a in achievements if a.is_public or not public_only]
    if category:
        term = category.lower()
        selected = [a for a in selected if term in a.category.lower()]
    selected.sort(key=lambda a: a.date, reverse=True)
    return selected[:limit] if limit else selected
