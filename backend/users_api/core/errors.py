"""Error Hierarchy — typed, categorized exceptions for all user API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status (int)
    - to_response() produces the REST envelope {"status": int, "message": str}
    - Validation errors (400) and not-found (404) are client errors;
      store failures (500) are reported, never fatal to the process

Design Decisions:
    - Single hierarchy with UsersApiError base: FastAPI global handler catches all
      (uniform error shape for every route)
    - DatabaseError keeps the driver's error text in its message
"""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from users_api.core.enforce_user_fields import FieldViolation


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"


class UsersApiError(Exception):
    """Base exception for all user API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {"status": self.http_status, "message": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class UserValidationError(UsersApiError):
    """Candidate user failed one or more field rules."""
    def __init__(self, violations: "list[FieldViolation]"):
        fields = ", ".join(v.field for v in violations)
        super().__init__(
            f"User validation failed on: {fields}",
            "USER_VALIDATION_FAILED", ErrorCategory.VALIDATION, 400,
        )
        self.violations = violations

    def to_response(self) -> dict:
        response = super().to_response()
        response["errors"] = [v.to_dict() for v in self.violations]
        return response


class ResourceNotFoundError(UsersApiError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(UsersApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE, 500,
        )
        self.operation = operation
