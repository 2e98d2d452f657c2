"""Infrastructure Layer — MongoDB client, repository and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/routes/
    - All driver calls wrapped with error mapping to DatabaseError

Design Decisions:
    - Thin wrappers over the pymongo async client (no ODM)
"""
