"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the 24-char hex form of a store-assigned ObjectId
    - UPDATABLE_FIELDS is the single source of truth for what PUT overwrites
    - All validation rule names encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)


# ─── Enums ───────────────────────────────────────────────────────

class FieldRule(str, Enum):
    """Declared field constraints checked on create."""
    ALPHA = "alpha"
    REQUIRED = "required"
    EMAIL = "email"


# ─── Field Sets ──────────────────────────────────────────────────

ALPHA_FIELDS: tuple[str, ...] = ("firstname", "lastname")
EMAIL_FIELD: str = "email"

# PUT overwrites exactly these, zero values included
UPDATABLE_FIELDS: tuple[str, ...] = ("firstname", "lastname", "age", "email")
