"""Analytics Tool Schemas — track interactions and query aggregates.

Invariants:
    - track_event is the only tool in the catalogue that writes state
    - type / timeRange / contentType enums match EventType / TimeRange / ContentType
"""

_EVENT_TYPES = ["view", "click", "download", "contact", "share"]
_TIME_RANGES = ["day", "week", "month", "year", "all"]

TOOLS_ANALYTICS = [
    {
        "name": "track_event",
        "description": "Track an analytics event for a portfolio interaction.",
        "input_schema": {
            "type": "object",
            "properties": {
                "type": {
                    "type": "string",
                    "enum": _EVENT_TYPES,
                    "description": "Type of event to track",
                },
                "resource": {
                    "type": "string",
                    "minLength": 1,
                    "description": 'Resource being tracked (e.g. "project", "skill", "page")',
                },
                "resourceId": {
                    "type": "string",
                    "description": "ID of the specific resource",
                },
                "userAgent": {
                    "type": "string",
                    "description": "User agent string",
                },
                "ip": {
                    "type": "string",
                    "description": "IP address (anonymized before storage)",
                },
                "referrer": {
                    "type": "string",
                    "description": "Referrer URL",
                },
                "metadata": {
                    "type": "object",
                    "description": "Additional event metadata",
                    "additionalProperties": True,
                },
            },
            "required": ["type", "resource"],
        },
    },
    {
        "name": "get_analytics_stats",
        "description": "Get analytics statistics and insights for a trailing time range.",
        "input_schema": {
            "type": "object",
            "properties": {
                "timeRange": {
                    "type": "string",
                    "enum": _TIME_RANGES,
                    "description": "Time range for statistics",
                    "default": "month",
                },
                "includeEvents": {
                    "type": "boolean",
                    "description": "Whether to include the 20 most recent events",
                    "default": False,
                },
                "eventType": {
                    "type": "string",
                    "enum": _EVENT_TYPES,
                    "description": "Filter by event type",
                },
            },
        },
    },
    {
        "name": "get_popular_content",
        "description": "Get the most popular projects, skills or pages based on analytics.",
        "input_schema": {
            "type": "object",
            "properties": {
                "contentType": {
                    "type": "string",
                    "enum": ["projects", "skills", "pages"],
                    "description": "Type of content to analyze",
                    "default": "projects",
                },
                "limit": {
                    "type": "integer",
                    "minimum": 1,
                    "maximum": 20,
                    "description": "Number of items to return",
                    "default": 10,
                },
                "timeRange": {
                    "type": "string",
                    "enum": _TIME_RANGES,
                    "description": "Time range for analysis",
                    "default": "month",
                },
            },
        },
    },
]
