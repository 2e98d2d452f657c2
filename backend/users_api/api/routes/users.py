"""User Routes — the five CRUD endpoints over the user collection.

Invariants:
    - Routing table: GET /api/users, GET|PUT|DELETE /api/user/{user_id}, POST /api/user
    - Request bodies validated by Pydantic before reaching the route handler
    - Routes never contain business logic (delegate to UserHandlers)
    - Path ids are passed through as raw strings; parsing happens in the handlers

Design Decisions:
    - UserHandlers built per request from the injected repository: the store
      handle is created once in the lifespan and only read here
"""

from fastapi import APIRouter, Depends, status

from users_api.core.repository_protocols import UserRepository
from users_api.infrastructure.database import get_user_repository
from users_api.schemas.user import (
    DeleteResult, InsertResult, UserPayload, UserResponse,
)
from users_api.services.handle_users import UserHandlers

router = APIRouter(prefix="/api", tags=["users"])


def get_user_handlers(
    repository: UserRepository = Depends(get_user_repository),
) -> UserHandlers:
    return UserHandlers(repository)


@router.get("/users", response_model=list[UserResponse])
async def list_users(handlers: UserHandlers = Depends(get_user_handlers)):
    """List all users (no ordering guarantee)."""
    return await handlers.list_users()


@router.get("/user/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str, handlers: UserHandlers = Depends(get_user_handlers),
):
    return await handlers.get_user(user_id)


@router.post(
    "/user", response_model=InsertResult,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserPayload, handlers: UserHandlers = Depends(get_user_handlers),
):
    """Validate and insert a user. Returns the assigned id."""
    return await handlers.create_user(body)


@router.put("/user/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    body: UserPayload,
    handlers: UserHandlers = Depends(get_user_handlers),
):
    """Overwrite firstname, lastname, age and email. Not a merge."""
    return await handlers.update_user(user_id, body)


@router.delete("/user/{user_id}", response_model=DeleteResult)
async def delete_user(
    user_id: str, handlers: UserHandlers = Depends(get_user_handlers),
):
    return await handlers.delete_user(user_id)
