"""Core Layer — pure domain logic, no IO, no FastAPI.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/;
      schemas/ is the only shared dependency
    - Stateful components (rate limiter, analytics store) own their locks

Design Decisions:
    - Functional core separated from imperative shell: routes and dispatch
      are the only places that touch requests and clocks by default
"""
