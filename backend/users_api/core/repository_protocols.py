"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All store IO accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no base class
    - Documents cross the boundary as plain dicts keyed by the lowercase
      field names, "_id" included
"""

from typing import Protocol

from bson import ObjectId


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""
    async def list_all(self) -> list[dict]: ...
    async def get(self, user_id: ObjectId) -> dict | None: ...
    async def insert(self, document: dict) -> ObjectId: ...
    async def overwrite_fields(
        self, user_id: ObjectId, fields: dict,
    ) -> dict | None: ...
    async def delete(self, user_id: ObjectId) -> int: ...
