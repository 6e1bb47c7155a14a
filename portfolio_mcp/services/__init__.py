"""Services Layer — tool definitions, tool handlers, registry, and dispatch.

Invariants:
    - Handlers split by resource (portfolio, skills, projects, analytics, export)
    - Registry uses an explicit name -> handler mapping (no auto-discovery)
"""
