"""User Identifiers — hex string ⇄ ObjectId conversion at the API boundary.

Invariants:
    - parse_user_id NEVER raises: unparseable input becomes ZERO_OBJECT_ID
    - ZERO_OBJECT_ID is never assigned by the store, so a lookup with it is not-found
    - format_user_id always yields the 24-char lowercase hex form

Design Decisions:
    - Invalid ids are not rejected up front: the query runs with the zero id and
      the caller sees a 404, same as for a well-formed id that does not exist
"""

from bson import ObjectId

from users_api.core.domain_types import UserId

ZERO_OBJECT_ID = ObjectId(b"\x00" * 12)


def parse_user_id(raw: str) -> ObjectId:
    """Hex string to ObjectId, zero id on failure."""
    if isinstance(raw, str) and ObjectId.is_valid(raw):
        return ObjectId(raw)
    return ZERO_OBJECT_ID


def format_user_id(object_id: ObjectId) -> UserId:
    return UserId(str(object_id))
