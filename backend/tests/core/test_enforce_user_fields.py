"""User Field Enforcement — tests for the pure create-time validator.

Tests cover:
    - valid users produce no violations
    - alpha rule: letters only, empty allowed, ASCII only
    - required + email rules on email, required short-circuits email
    - email is syntax only: reserved domains and quoted local parts pass
    - violations carry field, rule and offending value
"""

from users_api.core.domain_types import FieldRule
from users_api.core.enforce_user_fields import (
    FieldViolation,
    check_alpha,
    check_email,
    check_required,
    validate_user_fields,
)


def _user(**overrides):
    user = {
        "firstname": "Ana",
        "lastname": "Lee",
        "username": "ana_lee",
        "age": 30,
        "email": "ana@example.com",
        "status": False,
        "datecreated": None,
    }
    user.update(overrides)
    return user


# ─── validate_user_fields ────────────────────────────────────────

def test_valid_user_has_no_violations():
    assert validate_user_fields(_user()) == []


def test_empty_names_are_allowed():
    assert validate_user_fields(_user(firstname="", lastname="")) == []


def test_missing_name_keys_are_allowed():
    assert validate_user_fields({"email": "ana@example.com"}) == []


def test_username_is_unconstrained():
    assert validate_user_fields(_user(username="!! 42 ??")) == []


def test_missing_email_reports_required_only():
    violations = validate_user_fields(_user(email=""))
    assert violations == [FieldViolation("email", FieldRule.REQUIRED, "")]


def test_absent_email_key_reports_required():
    violations = validate_user_fields({"firstname": "Ana"})
    assert [v.rule for v in violations] == [FieldRule.REQUIRED]


def test_malformed_email_reports_email_rule():
    violations = validate_user_fields(_user(email="ana@"))
    assert violations == [FieldViolation("email", FieldRule.EMAIL, "ana@")]


def test_all_violations_reported_in_field_order():
    violations = validate_user_fields(
        _user(firstname="Ana-Maria", lastname="Lee2", email="nope"),
    )
    assert [(v.field, v.rule) for v in violations] == [
        ("firstname", FieldRule.ALPHA),
        ("lastname", FieldRule.ALPHA),
        ("email", FieldRule.EMAIL),
    ]


# ─── single rules ────────────────────────────────────────────────

def test_check_alpha_rejects_digits_spaces_and_punctuation():
    for value in ("Ana1", "Ana Lee", "O'Lee", "Lee."):
        assert check_alpha("lastname", value) is not None


def test_check_alpha_rejects_non_ascii_letters():
    assert check_alpha("firstname", "Zoë") is not None


def test_check_alpha_accepts_mixed_case():
    assert check_alpha("firstname", "McDonald") is None


def test_check_required():
    assert check_required("email", None) is not None
    assert check_required("email", "") is not None
    assert check_required("email", "x") is None


def test_check_email_accepts_plus_and_subdomains():
    assert check_email("email", "ana+tag@mail.example.com") is None


def test_check_email_rejects_unquoted_spaces_and_missing_parts():
    for value in ("ana lee@example.com", "@example.com", "ana@", "ana.example.com"):
        assert check_email("email", value) is not None


def test_violation_to_dict():
    v = FieldViolation("firstname", FieldRule.ALPHA, "Ana1")
    assert v.to_dict() == {"field": "firstname", "rule": "alpha", "value": "Ana1"}


def test_check_email_accepts_reserved_domain_names():
    for value in ("ana@example.test", "ana@box.local", "ana@hidden.onion"):
        assert check_email("email", value) is None


def test_check_email_accepts_quoted_local_part():
    assert check_email("email", '"ana lee"@example.com') is None


def test_reserved_and_quoted_addresses_pass_full_validation():
    for value in ("ana@example.test", "ana@box.local", '"ana lee"@example.com'):
        assert validate_user_fields(_user(email=value)) == []
