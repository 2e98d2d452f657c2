"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate structure at the system boundary (types, ranges)
    - Domain rules live in core/, not in schemas

Design Decisions:
    - Separate from persistence: schemas are API contracts, documents are storage
"""
