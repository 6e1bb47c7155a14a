"""Portfolio Tool Schemas — overview, stats, contact and achievements.

Invariants:
    - Argument names are camelCase, as callers send them
    - Every tool here is read-only over the dataset
    - get_contact_info hides the phone number unless includePrivate is true
"""

TOOLS_PORTFOLIO = [
    {
        "name": "get_portfolio_overview",
        "description": (
            "Get complete portfolio overview including basic info, stats, and summary."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "includeProjects": {
                    "type": "boolean",
                    "description": "Whether to include project summaries",
                    "default": False,
                },
                "includeSkills": {
                    "type": "boolean",
                    "description": "Whether to include skill summaries",
                    "default": False,
                },
                "includeContact": {
                    "type": "boolean",
                    "description": "Whether to include contact information",
                    "default": True,
                },
            },
        },
    },
    {
        "name": "get_portfolio_stats",
        "description": "Get detailed portfolio statistics and metrics.",
        "input_schema": {
            "type": "object",
            "properties": {
                "includeBreakdown": {
                    "type": "boolean",
                    "description": "Whether to include detailed breakdowns",
                    "default": True,
                },
            },
        },
    },
    {
        "name": "get_contact_info",
        "description": "Get contact information and social media links.",
        "input_schema": {
            "type": "object",
            "properties": {
                "includePrivate": {
                    "type": "boolean",
                    "description": "Whether to include private contact details",
                    "default": False,
                },
                "activeOnly": {
                    "type": "boolean",
                    "description": "Whether to include only active social links",
                    "default": True,
                },
            },
        },
    },
    {
        "name": "get_achievements",
        "description": "Get portfolio achievements and milestones, newest first.",
        "input_schema": {
            "type": "object",
            "properties": {
                "publicOnly": {
                    "type": "boolean",
                    "description": "Whether to include only public achievements",
                    "default": True,
                },
                "category": {
                    "type": "string",
                    "description": "Filter by achievement category (substring match)",
                },
                "limit": {
                    "type": "integer",
                    "minimum": 1,
                    "description": "Maximum number of achievements to return",
                    "default": 10,
                },
            },
        },
    },
]
