"""Domain Types — enums and constants shared across the tool server.

Invariants:
    - All valid states encoded as Enums — no raw string matching in handlers
    - TIME_RANGE_DAYS covers every TimeRange except ALL (open-ended)

Design Decisions:
    - str Enums: serialize to JSON without custom encoders, and compare equal
      to the raw strings that arrive in tool arguments
"""

from enum import Enum


class SkillCategory(str, Enum):
    ADOBE = "adobe"
    PROGRAMMING = "programming"
    CREATIVE = "creative"


class SkillLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class ProjectStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"
    FEATURED = "featured"


class ProjectCategory(str, Enum):
    BRANDING = "branding"
    WEB_DESIGN = "web-design"
    PRINT_DESIGN = "print-design"
    MOTION_GRAPHICS = "motion-graphics"
    PHOTOGRAPHY = "photography"
    ILLUSTRATION = "illustration"
    UI_UX = "ui-ux"
    PROGRAMMING = "programming"
    VIDEO_PRODUCTION = "video-production"


class EventType(str, Enum):
    """Analytics interaction kinds accepted by track_event."""
    VIEW = "view"
    CLICK = "click"
    DOWNLOAD = "download"
    CONTACT = "contact"
    SHARE = "share"


class TimeRange(str, Enum):
    """Trailing windows for analytics queries."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"


class ContentType(str, Enum):
    """Plural content kinds for popularity queries."""
    PROJECTS = "projects"
    SKILLS = "skills"
    PAGES = "pages"

    @property
    def resource(self) -> str:
        """Singular resource name stored on analytics events."""
        return self.value[:-1]


class ExportFormat(str, Enum):
    JSON = "json"
    MARKDOWN = "markdown"
    CSV = "csv"
    XML = "xml"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


TIME_RANGE_DAYS: dict[TimeRange, int] = {
    TimeRange.DAY: 1,
    TimeRange.WEEK: 7,
    TimeRange.MONTH: 30,
    TimeRange.YEAR: 365,
}

MIME_TYPES: dict[ExportFormat, str] = {
    ExportFormat.JSON: "application/json",
    ExportFormat.MARKDOWN: "text/markdown",
    ExportFormat.CSV: "text/csv",
    ExportFormat.XML: "application/xml",
}

FILE_EXTENSIONS: dict[ExportFormat, str] = {
    ExportFormat.JSON: "json",
    ExportFormat.MARKDOWN: "md",
    ExportFormat.CSV: "csv",
    ExportFormat.XML: "xml",
}
