"""Pydantic Schemas — dataset entities and the wire envelope.

Invariants:
    - Schemas validate at system boundary (dataset load, call requests, responses)
    - Domain enums come from core/domain_types
"""
