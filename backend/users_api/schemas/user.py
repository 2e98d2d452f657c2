"""User Schemas — Pydantic models for the user API boundary.

Invariants:
    - UserPayload: every field optional with a zero-value default, so PUT
      overwrites absent fields with ""/0 rather than keeping old values
    - age bounded 0-255; structural errors surface as RequestValidationError (400)
    - Field rules (alpha names, required email) are NOT enforced here;
      core/enforce_user_fields.py owns them so violations report field/rule/value
    - UserResponse.id is the 24-char hex form of the store-assigned _id
    - UserResponse ignores stray document keys (including a stored "id") and
      reads null fields as their defaults, so one odd document cannot fail a list

Design Decisions:
    - Acknowledgment bodies keep the InsertedID / DeletedCount keys clients
      of earlier releases of this service already parse
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from users_api.core.user_ids import format_user_id


class UserPayload(BaseModel):
    """Create/update request body."""
    model_config = ConfigDict(extra="ignore")

    firstname: str = ""
    lastname: str = ""
    username: str = ""
    age: int = Field(0, ge=0, le=255)
    email: str = ""
    status: bool = False
    datecreated: datetime | None = None


class UserResponse(BaseModel):
    """User as returned to clients."""
    id: str
    firstname: str = ""
    lastname: str = ""
    username: str = ""
    age: int = 0
    email: str = ""
    status: bool = False
    datecreated: datetime | None = None

    @classmethod
    def from_document(cls, document: dict) -> "UserResponse":
        """Declared keys only; a null stored value falls back to the default."""
        fields = {
            name: document[name]
            for name in cls.model_fields
            if name != "id" and document.get(name) is not None
        }
        return cls(id=format_user_id(document["_id"]), **fields)


class InsertResult(BaseModel):
    """Acknowledgment of a create."""
    InsertedID: str


class DeleteResult(BaseModel):
    """Acknowledgment of a delete."""
    DeletedCount: int
