"""User Handlers — list, get, create, update, delete over a UserRepository.

Invariants:
    - Each operation is exactly one repository call (create: validate first)
    - create never touches the store when validate_user_fields reports violations
    - update overwrites UPDATABLE_FIELDS unconditionally, zero values included,
      and runs no field rules
    - get/update/delete on a missing (or unparseable) id raise ResourceNotFoundError
    - DatabaseError from the repository propagates to the global error handler

Design Decisions:
    - Repository injected through the constructor: handlers never see the
      driver, tests substitute an in-memory collection
    - Unparseable ids become the zero ObjectId (core/user_ids.py), so the
      caller gets the same 404 as for an unknown id
"""

import logging

from users_api.core.domain_types import UPDATABLE_FIELDS
from users_api.core.enforce_user_fields import validate_user_fields
from users_api.core.errors import ResourceNotFoundError, UserValidationError
from users_api.core.repository_protocols import UserRepository
from users_api.core.user_ids import format_user_id, parse_user_id
from users_api.schemas.user import (
    DeleteResult, InsertResult, UserPayload, UserResponse,
)

logger = logging.getLogger(__name__)


class UserHandlers:
    """CRUD request handlers for user records."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def list_users(self) -> list[UserResponse]:
        documents = await self.repository.list_all()
        logger.info(f"Listed {len(documents)} user(s)", extra={"operation": "list"})
        return [UserResponse.from_document(doc) for doc in documents]

    async def get_user(self, raw_id: str) -> UserResponse:
        document = await self.repository.get(parse_user_id(raw_id))
        if document is None:
            raise ResourceNotFoundError("User", raw_id)
        return UserResponse.from_document(document)

    async def create_user(self, payload: UserPayload) -> InsertResult:
        """Validate field rules, then insert. Nothing is persisted on violation."""
        fields = payload.model_dump()
        violations = validate_user_fields(fields)
        if violations:
            logger.warning(
                f"Rejected user: {[v.to_dict() for v in violations]}",
                extra={"operation": "create"},
            )
            raise UserValidationError(violations)

        inserted_id = await self.repository.insert(fields)
        user_id = format_user_id(inserted_id)
        logger.info("User created", extra={"user_id": user_id, "operation": "create"})
        return InsertResult(InsertedID=user_id)

    async def update_user(self, raw_id: str, payload: UserPayload) -> UserResponse:
        """Overwrite the updatable fields and return the stored result."""
        update = payload.model_dump(include=set(UPDATABLE_FIELDS))
        logger.debug(f"$set {update}", extra={"user_id": raw_id, "operation": "update"})

        document = await self.repository.overwrite_fields(
            parse_user_id(raw_id), update,
        )
        if document is None:
            raise ResourceNotFoundError("User", raw_id)
        logger.info("User updated", extra={"user_id": raw_id, "operation": "update"})
        return UserResponse.from_document(document)

    async def delete_user(self, raw_id: str) -> DeleteResult:
        deleted = await self.repository.delete(parse_user_id(raw_id))
        if deleted == 0:
            raise ResourceNotFoundError("User", raw_id)
        logger.info("User deleted", extra={"user_id": raw_id, "operation": "delete"})
        return DeleteResult(DeletedCount=deleted)
