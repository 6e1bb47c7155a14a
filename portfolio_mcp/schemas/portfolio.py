"""Portfolio Schemas — frozen pydantic models for the read-only dataset and analytics events.

Invariants:
    - Every model is frozen: handlers and exporters cannot mutate the dataset
    - Wire names are camelCase (alias_generator), Python attributes snake_case
    - AnalyticsEvent.resource is non-empty
    - Enum-typed fields only accept the values in core/domain_types

Design Decisions:
    - One CamelModel base instead of per-field aliases: a dataset JSON file in
      camelCase wire shape loads without translation
    - Dates are aware datetimes; naive values are rejected by the loader rather
      than silently assumed to be UTC
"""

from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from portfolio_mcp.core.domain_types import (
    EventType,
    ProjectCategory,
    ProjectStatus,
    SkillCategory,
    SkillLevel,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """JSON-safe dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ─── Skills ──────────────────────────────────────────────────────

class Skill(CamelModel):
    id: str
    name: str = Field(min_length=1, max_length=100)
    category: SkillCategory
    level: SkillLevel
    proficiency: float = Field(ge=0, le=100)
    description: str = Field(min_length=1, max_length=500)
    icon: str | None = None
    color: str | None = None
    years_of_experience: float = Field(ge=0, le=50)
    certifications: list[str] = Field(default_factory=list)
    related_skills: list[str] = Field(default_factory=list)
    project_count: int = Field(default=0, ge=0)
    last_updated: AwareDatetime
    is_active: bool = True
    tags: list[str] = Field(default_factory=list)
    applications: list[str] = Field(default_factory=list)
    integrations: list[str] = Field(default_factory=list)


# ─── Projects ────────────────────────────────────────────────────

class ProjectImage(CamelModel):
    id: str
    url: str
    alt: str
    caption: str | None = None
    width: int | None = Field(default=None, gt=0)
    height: int | None = Field(default=None, gt=0)
    is_primary: bool = False


class Project(CamelModel):
    id: str
    title: str = Field(min_length=1, max_length=200)
    slug: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=1000)
    short_description: str = Field(min_length=1, max_length=300)
    category: ProjectCategory
    status: ProjectStatus = ProjectStatus.DRAFT
    featured: bool = False
    technologies: list[str] = Field(default_factory=list)
    skills_used: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    duration: str | None = None
    team_size: int | None = Field(default=None, gt=0)
    role: str | None = None
    images: list[ProjectImage] = Field(default_factory=list)
    video_url: str | None = None
    live_url: str | None = None
    github_url: str | None = None
    client: str | None = None
    year: int = Field(ge=2000, le=2100)
    tags: list[str] = Field(default_factory=list)
    challenges: list[str] = Field(default_factory=list)
    solutions: list[str] = Field(default_factory=list)
    results: list[str] = Field(default_factory=list)
    created_at: AwareDatetime
    updated_at: AwareDatetime
    views: int = Field(default=0, ge=0)
    likes: int = Field(default=0, ge=0)
    shares: int = Field(default=0, ge=0)


# ─── Contact & achievements ──────────────────────────────────────

class SocialLink(CamelModel):
    platform: str
    url: str
    username: str | None = None
    icon: str | None = None
    is_active: bool = True


class ContactInfo(CamelModel):
    email: str
    phone: str | None = None
    location: str | None = None
    website: str | None = None
    social_links: list[SocialLink] = Field(default_factory=list)
    availability: str = "available"
    preferred_contact: str = "email"
    timezone: str | None = None
    languages: list[str] = Field(default_factory=list)


class Achievement(CamelModel):
    id: str
    title: str
    description: str
    date: AwareDatetime
    category: str
    icon: str | None = None
    url: str | None = None
    is_public: bool = True


class PortfolioStats(CamelModel):
    total_projects: int = Field(ge=0)
    total_skills: int = Field(ge=0)
    years_of_experience: float = Field(ge=0)
    clients_satisfied: int = Field(ge=0)
    projects_completed: int = Field(ge=0)
    skill_categories: int = Field(ge=0)
    certifications: int = Field(ge=0)
    awards: int = Field(ge=0)


class Portfolio(CamelModel):
    id: str
    title: str
    subtitle: str
    description: str
    tagline: str | None = None
    bio: str
    name: str
    profession: str
    location: str | None = None
    profile_image: str | None = None
    skills: list[Skill] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    achievements: list[Achievement] = Field(default_factory=list)
    contact: ContactInfo
    stats: PortfolioStats
    theme: str = "default"
    language: str = "en"
    version: str = "1.0.0"
    created_at: AwareDatetime
    updated_at: AwareDatetime


# ─── Analytics ───────────────────────────────────────────────────

class AnalyticsEvent(CamelModel):
    """One recorded interaction. `ip` is already anonymized when stored."""
    id: UUID = Field(default_factory=uuid4)
    type: EventType
    resource: str = Field(min_length=1)
    resource_id: str | None = None
    user_agent: str | None = None
    ip: str | None = None
    referrer: str | None = None
    timestamp: AwareDatetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    metadata: dict[str, Any] = Field(default_factory=dict)
