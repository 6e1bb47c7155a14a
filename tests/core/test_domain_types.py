"""Domain Types — tests for enum values and lookup tables.

Tests cover:
    - str Enums compare equal to raw argument strings
    - ContentType.resource singularizes for analytics events
    - Every ExportFormat has a MIME type and a file extension
    - TIME_RANGE_DAYS covers every bounded TimeRange
"""

from portfolio_mcp.core.domain_types import (
    FILE_EXTENSIONS,
    MIME_TYPES,
    TIME_RANGE_DAYS,
    ContentType,
    ExportFormat,
    ProjectCategory,
    TimeRange,
)


def test_str_enums_match_raw_strings():
    assert ProjectCategory.WEB_DESIGN == "web-design"
    assert ProjectCategory("ui-ux") is ProjectCategory.UI_UX


def test_content_type_resource():
    assert [c.resource for c in ContentType] == ["project", "skill", "page"]


def test_every_export_format_has_mime_and_extension():
    for fmt in ExportFormat:
        assert fmt in MIME_TYPES
        assert fmt in FILE_EXTENSIONS
    assert FILE_EXTENSIONS[ExportFormat.MARKDOWN] == "md"


def test_time_range_days():
    assert set(TIME_RANGE_DAYS) == set(TimeRange) - {TimeRange.ALL}
    assert TIME_RANGE_DAYS[TimeRange.YEAR] == 365
