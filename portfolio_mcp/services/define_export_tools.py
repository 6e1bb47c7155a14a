"""Export Tool Schemas — render the portfolio, skills or projects as documents.

Invariants:
    - Every export tool accepts json, markdown, csv and xml
    - Exports never include the phone number unless includePrivate is true
"""

_FORMATS = ["json", "markdown", "csv", "xml"]

TOOLS_EXPORT = [
    {
        "name": "export_portfolio",
        "description": "Export complete portfolio data in various formats.",
        "input_schema": {
            "type": "object",
            "properties": {
                "format": {
                    "type": "string",
                    "enum": _FORMATS,
                    "description": "Export format",
                    "default": "json",
                },
                "includePrivate": {
                    "type": "boolean",
                    "description": "Whether to include private information",
                    "default": False,
                },
                "compress": {
                    "type": "boolean",
                    "description": "Compact JSON output (json format only)",
                    "default": False,
                },
            },
        },
    },
    {
        "name": "export_skills",
        "description": "Export skills data in various formats.",
        "input_schema": {
            "type": "object",
            "properties": {
                "format": {
                    "type": "string",
                    "enum": _FORMATS,
                    "description": "Export format",
                    "default": "json",
                },
                "category": {
                    "type": "string",
                    "enum": ["adobe", "programming", "creative"],
                    "description": "Filter by skill category",
                },
                "includeStats": {
                    "type": "boolean",
                    "description": "Whether to include statistics",
                    "default": True,
                },
            },
        },
    },
    {
        "name": "export_projects",
        "description": "Export projects data in various formats.",
        "input_schema": {
            "type": "object",
            "properties": {
                "format": {
                    "type": "string",
                    "enum": _FORMATS,
                    "description": "Export format",
                    "default": "json",
                },
                "category": {
                    "type": "string",
                    "description": "Filter by project category",
                },
                "featured": {
                    "type": "boolean",
                    "description": "Export only featured projects",
                },
                "includeImages": {
                    "type": "boolean",
                    "description": "Whether to include image data",
                    "default": True,
                },
            },
        },
    },
]
