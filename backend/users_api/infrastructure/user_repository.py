"""Mongo User Repository — the five store round trips behind the user routes.

Invariants:
    - One driver call per method, no retries, no transactions
    - Every PyMongoError is logged and re-raised as DatabaseError(operation)
    - overwrite_fields returns the document AFTER the $set, or None if no match
    - Returned documents are plain dicts with "_id" as ObjectId

Design Decisions:
    - Repository takes the collection, not the client: tests pass an
      in-memory fake collection with the same async surface
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from users_api.core.errors import DatabaseError

logger = logging.getLogger(__name__)


@contextmanager
def _map_driver_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except PyMongoError as e:
        logger.error(f"MongoDB {operation} error: {e}", extra={"operation": operation})
        raise DatabaseError(str(e), operation)


class MongoUserRepository:
    """UserRepository over a single MongoDB collection."""

    def __init__(self, collection):
        self.collection = collection

    async def list_all(self) -> list[dict]:
        with _map_driver_errors("find"):
            return await self.collection.find({}).to_list()

    async def get(self, user_id: ObjectId) -> dict | None:
        with _map_driver_errors("find_one"):
            return await self.collection.find_one({"_id": user_id})

    async def insert(self, document: dict) -> ObjectId:
        with _map_driver_errors("insert_one"):
            result = await self.collection.insert_one(document)
        return result.inserted_id

    async def overwrite_fields(
        self, user_id: ObjectId, fields: dict,
    ) -> dict | None:
        with _map_driver_errors("find_one_and_update"):
            return await self.collection.find_one_and_update(
                {"_id": user_id},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )

    async def delete(self, user_id: ObjectId) -> int:
        with _map_driver_errors("delete_one"):
            result = await self.collection.delete_one({"_id": user_id})
        return result.deleted_count
