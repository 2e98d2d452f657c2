"""Database Connection Manager — one MongoDB client, one collection handle.

Invariants:
    - Exactly one client per process, created in the FastAPI lifespan
    - connect() pings once; any driver error becomes DatabaseError("connect")
      and aborts startup
    - No retry, no reconnect, no health check after startup
    - All driver exceptions mapped to DatabaseError (core/errors.py)

Design Decisions:
    - Manager stored on app.state, not a module global: routes get it through
      the get_user_repository dependency, tests override that dependency
    - serverSelectionTimeoutMS bounds the startup ping; CRUD calls reuse the
      same client and carry no extra timeout
    - tz_aware client: datetimes come back as UTC-aware, so a stored
      datecreated keeps its instant instead of turning naive
"""

import logging

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from users_api.core.errors import DatabaseError
from users_api.infrastructure.user_repository import MongoUserRepository

logger = logging.getLogger(__name__)


class MongoConnectionManager:
    """Owns the MongoDB client and hands out the user collection."""

    def __init__(
        self,
        url: str,
        database_name: str,
        collection_name: str,
        connect_timeout_seconds: int = 10,
    ):
        timeout_ms = connect_timeout_seconds * 1000
        self.client = AsyncMongoClient(
            url,
            serverSelectionTimeoutMS=timeout_ms,
            connectTimeoutMS=timeout_ms,
            tz_aware=True,
        )
        self.database_name = database_name
        self.collection_name = collection_name

    @property
    def collection(self) -> AsyncCollection:
        return self.client[self.database_name][self.collection_name]

    async def connect(self) -> None:
        """Verify the server is reachable within the timeout."""
        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"MongoDB unreachable: {e}", extra={"operation": "connect"})
            raise DatabaseError(str(e), "connect")
        logger.info(
            f"database is now ready: {self.database_name}.{self.collection_name}",
        )

    async def close(self) -> None:
        await self.client.close()


def init_db(
    url: str,
    database_name: str,
    collection_name: str,
    **kwargs,
) -> MongoConnectionManager:
    return MongoConnectionManager(url, database_name, collection_name, **kwargs)


def get_user_repository(request: Request) -> MongoUserRepository:
    """FastAPI dependency for the user repository."""
    db_manager: MongoConnectionManager | None = getattr(
        request.app.state, "db_manager", None,
    )
    if not db_manager:
        raise RuntimeError("Database not initialized")
    return MongoUserRepository(db_manager.collection)
