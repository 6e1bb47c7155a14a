"""Skill Tool Schemas — list, lookup, filter and group skills.

Invariants:
    - category / level enums match SkillCategory / SkillLevel
    - get_skill_by_id is the only skill tool with a required argument
"""

_SKILL_CATEGORIES = ["adobe", "programming", "creative"]
_SKILL_LEVELS = ["beginner", "intermediate", "advanced", "expert"]

TOOLS_SKILLS = [
    {
        "name": "get_skills",
        "description": "Get all skills with optional filtering and sorting.",
        "input_schema": {
            "type": "object",
            "properties": {
                "activeOnly": {
                    "type": "boolean",
                    "description": "Whether to include only active skills",
                    "default": True,
                },
                "sortBy": {
                    "type": "string",
                    "enum": ["name", "proficiency", "experience", "category", "updated"],
                    "description": "Field to sort by",
                    "default": "proficiency",
                },
                "sortOrder": {
                    "type": "string",
                    "enum": ["asc", "desc"],
                    "description": "Sort order",
                    "default": "desc",
                },
                "includeStats": {
                    "type": "boolean",
                    "description": "Whether to include skill statistics",
                    "default": False,
                },
            },
        },
    },
    {
        "name": "get_skill_by_id",
        "description": "Get detailed information about a specific skill by ID.",
        "input_schema": {
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "minLength": 1,
                    "description": "Skill ID",
                },
                "includeRelated": {
                    "type": "boolean",
                    "description": "Whether to include related skills",
                    "default": False,
                },
            },
            "required": ["id"],
        },
    },
    {
        "name": "filter_skills",
        "description": "Filter skills based on various criteria.",
        "input_schema": {
            "type": "object",
            "properties": {
                "category": {
                    "type": "string",
                    "enum": _SKILL_CATEGORIES,
                    "description": "Filter by skill category",
                },
                "level": {
                    "type": "string",
                    "enum": _SKILL_LEVELS,
                    "description": "Filter by skill level",
                },
                "minProficiency": {
                    "type": "number",
                    "minimum": 0,
                    "maximum": 100,
                    "description": "Minimum proficiency level",
                },
                "maxProficiency": {
                    "type": "number",
                    "minimum": 0,
                    "maximum": 100,
                    "description": "Maximum proficiency level",
                },
                "search": {
                    "type": "string",
                    "description": "Search in skill name, description, tags or applications",
                },
                "hasProjects": {
                    "type": "boolean",
                    "description": "Filter skills that have associated projects",
                },
            },
        },
    },
    {
        "name": "get_skills_by_category",
        "description": "Get skills organized by category with statistics.",
        "input_schema": {
            "type": "object",
            "properties": {
                "includeStats": {
                    "type": "boolean",
                    "description": "Whether to include category statistics",
                    "default": True,
                },
                "sortWithinCategory": {
                    "type": "string",
                    "enum": ["proficiency", "experience", "name"],
                    "description": "How to sort skills within each category",
                    "default": "proficiency",
                },
            },
        },
    },
]
