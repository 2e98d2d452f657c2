"""User Identifiers — parse/format between hex strings and ObjectIds."""

from bson import ObjectId

from users_api.core.user_ids import ZERO_OBJECT_ID, format_user_id, parse_user_id


def test_parse_valid_hex():
    oid = ObjectId()
    assert parse_user_id(str(oid)) == oid


def test_parse_uppercase_hex():
    oid = ObjectId()
    assert parse_user_id(str(oid).upper()) == oid


def test_parse_invalid_returns_zero_id():
    for raw in ("", "abc", "z" * 24, "0" * 23, "0" * 25):
        assert parse_user_id(raw) == ZERO_OBJECT_ID


def test_zero_id_hex_form():
    assert str(ZERO_OBJECT_ID) == "0" * 24


def test_format_user_id_is_lowercase_hex():
    oid = ObjectId()
    assert format_user_id(oid) == str(oid)
    assert len(format_user_id(oid)) == 24
