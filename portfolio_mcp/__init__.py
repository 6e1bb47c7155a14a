"""Portfolio Tool Server — validated, rate-limited tool dispatch over a portfolio dataset.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
