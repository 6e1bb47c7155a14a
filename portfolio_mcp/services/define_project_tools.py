"""Project Tool Schemas — paginate, lookup, filter and rank projects.

Invariants:
    - category / status enums match ProjectCategory / ProjectStatus
    - limit and offset are integers; limit is bounded so a page stays small
"""

_PROJECT_CATEGORIES = [
    "branding", "web-design", "print-design", "motion-graphics", "photography",
    "illustration", "ui-ux", "programming", "video-production",
]

TOOLS_PROJECTS = [
    {
        "name": "get_projects",
        "description": "Get all projects with sorting and pagination.",
        "input_schema": {
            "type": "object",
            "properties": {
                "limit": {
                    "type": "integer",
                    "minimum": 1,
                    "maximum": 100,
                    "description": "Maximum number of projects to return",
                    "default": 10,
                },
                "offset": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Number of projects to skip",
                    "default": 0,
                },
                "sortBy": {
                    "type": "string",
                    "enum": ["title", "date", "views", "likes", "category", "featured"],
                    "description": "Field to sort by",
                    "default": "date",
                },
                "sortOrder": {
                    "type": "string",
                    "enum": ["asc", "desc"],
                    "description": "Sort order",
                    "default": "desc",
                },
                "includeStats": {
                    "type": "boolean",
                    "description": "Whether to include project statistics",
                    "default": False,
                },
            },
        },
    },
    {
        "name": "get_project_by_id",
        "description": "Get detailed information about a specific project by ID.",
        "input_schema": {
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "minLength": 1,
                    "description": "Project ID",
                },
                "includeRelated": {
                    "type": "boolean",
                    "description": "Whether to include related projects",
                    "default": False,
                },
            },
            "required": ["id"],
        },
    },
    {
        "name": "filter_projects",
        "description": "Filter projects based on various criteria.",
        "input_schema": {
            "type": "object",
            "properties": {
                "category": {
                    "type": "string",
                    "enum": _PROJECT_CATEGORIES,
                    "description": "Filter by project category",
                },
                "status": {
                    "type": "string",
                    "enum": ["draft", "published", "archived", "featured"],
                    "description": "Filter by project status",
                },
                "featured": {
                    "type": "boolean",
                    "description": "Filter on the featured flag",
                },
                "year": {
                    "type": "integer",
                    "minimum": 2000,
                    "maximum": 2100,
                    "description": "Filter by project year",
                },
                "technology": {
                    "type": "string",
                    "description": "Filter by technology used (substring)",
                },
                "skill": {
                    "type": "string",
                    "description": "Filter by skill used (substring)",
                },
                "search": {
                    "type": "string",
                    "description": "Search in project title, descriptions, or tags",
                },
                "minViews": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Minimum number of views",
                },
                "hasImages": {
                    "type": "boolean",
                    "description": "Filter projects that have images",
                },
                "hasLiveUrl": {
                    "type": "boolean",
                    "description": "Filter projects that have live URLs",
                },
            },
        },
    },
    {
        "name": "get_featured_projects",
        "description": "Get featured projects ranked by views and likes.",
        "input_schema": {
            "type": "object",
            "properties": {
                "category": {
                    "type": "string",
                    "enum": _PROJECT_CATEGORIES,
                    "description": "Filter featured projects by category",
                },
                "limit": {
                    "type": "integer",
                    "minimum": 1,
                    "maximum": 20,
                    "description": "Maximum number of featured projects to return",
                    "default": 5,
                },
            },
        },
    },
]
