"""Infrastructure Layer — logging setup and dataset loading.

Invariants:
    - Infrastructure never imports from services/ or api/
"""
