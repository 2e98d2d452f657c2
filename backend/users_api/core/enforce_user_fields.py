"""User Field Enforcement — declared field rules checked before a user is inserted.

Invariants:
    - validate_user_fields is PURE: returns violations, never raises, never mutates
    - An empty list means the candidate is valid
    - firstname/lastname: ASCII letters only, empty allowed
    - email: required, then syntactically valid (no DNS lookup, no
      reserved-name policy; quoted local parts allowed)
    - A missing email reports only "required", never "email" as well

Design Decisions:
    - Violations as frozen dataclasses: the shell decides how to report them
      (UserValidationError → 400 with per-field list)
    - email-validator for address syntax: same checker pydantic's EmailStr uses
"""

import re
from dataclasses import dataclass
from typing import Any

import email_validator
from email_validator import EmailNotValidError, validate_email

from users_api.core.domain_types import ALPHA_FIELDS, EMAIL_FIELD, FieldRule

_ALPHA_RE = re.compile(r"[A-Za-z]+")

# Syntax only: no reserved-name policy for .test, .local, .onion and the like.
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


@dataclass(frozen=True)
class FieldViolation:
    """One failed rule: which field, which rule, what value."""
    field: str
    rule: FieldRule
    value: Any

    def to_dict(self) -> dict:
        return {"field": self.field, "rule": self.rule.value, "value": self.value}


def check_alpha(field: str, value: str) -> FieldViolation | None:
    """Non-empty value must contain ASCII letters only."""
    if value and not _ALPHA_RE.fullmatch(value):
        return FieldViolation(field, FieldRule.ALPHA, value)
    return None


def check_required(field: str, value: str | None) -> FieldViolation | None:
    if not value:
        return FieldViolation(field, FieldRule.REQUIRED, value)
    return None


def check_email(field: str, value: str) -> FieldViolation | None:
    """Syntax-only address check."""
    try:
        validate_email(
            value,
            check_deliverability=False,
            test_environment=True,
            globally_deliverable=False,
            allow_quoted_local=True,
        )
    except EmailNotValidError:
        return FieldViolation(field, FieldRule.EMAIL, value)
    return None


def validate_user_fields(fields: dict) -> list[FieldViolation]:
    """Apply every declared rule to a candidate user's fields."""
    violations: list[FieldViolation] = []

    for name in ALPHA_FIELDS:
        violation = check_alpha(name, fields.get(name) or "")
        if violation:
            violations.append(violation)

    email = fields.get(EMAIL_FIELD)
    violation = check_required(EMAIL_FIELD, email) or check_email(
        EMAIL_FIELD, email,
    )
    if violation:
        violations.append(violation)

    return violations
