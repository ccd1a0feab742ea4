"""
Tests for request-body validation (register / login schemas).
"""

import pytest

from auth.models import AccountType
from utils.schemas import LoginRequest, RegisterRequest
from utils.validators import Invalid, RawBody, Valid, validate_body


def _registration(**overrides) -> dict:
    body = {
        "username": "alice123",
        "email": "a@example.com",
        "accountType": "user",
        "password": "Secr3t!",
    }
    body.update(overrides)
    return body


class TestRegisterSchema:
    def test_valid_payload(self):
        result = validate_body(RegisterRequest, _registration())
        assert isinstance(result, Valid)
        assert result.data.username == "alice123"
        assert result.data.email == "a@example.com"
        assert result.data.account_type is AccountType.USER

    def test_admin_account_type(self):
        result = validate_body(RegisterRequest, _registration(accountType="admin"))
        assert isinstance(result, Valid)
        assert result.data.account_type is AccountType.ADMIN

    def test_email_is_kept_as_submitted(self):
        result = validate_body(RegisterRequest, _registration(email="Bob@EXAMPLE.com"))
        assert isinstance(result, Valid)
        assert result.data.email == "Bob@EXAMPLE.com"

    @pytest.mark.parametrize("username", ["abc", "x" * 24])
    def test_username_length_bounds_accepted(self, username):
        assert isinstance(validate_body(RegisterRequest, _registration(username=username)), Valid)

    @pytest.mark.parametrize("username", ["al", "x" * 25, ""])
    def test_username_length_bounds_rejected(self, username):
        result = validate_body(RegisterRequest, _registration(username=username))
        assert isinstance(result, Invalid)
        assert "username" in result.errors

    @pytest.mark.parametrize("password", ["a!b2c", "Ab1!" * 6, "()%!-", "pass.word"])
    def test_password_accepted(self, password):
        assert isinstance(validate_body(RegisterRequest, _registration(password=password)), Valid)

    @pytest.mark.parametrize(
        "password",
        [
            "Secret1",          # no special character
            "a!b2",             # too short
            "Ab1!" * 6 + "x",   # too long
            "Secr3t! ",         # space is not allowed
            "Secr3t!_",         # underscore is not allowed
            "pässw0rd!",        # non-ASCII letter
            "Secr3t!\n",        # trailing newline
        ],
    )
    def test_password_rejected(self, password):
        result = validate_body(RegisterRequest, _registration(password=password))
        assert isinstance(result, Invalid)
        assert "password" in result.errors

    @pytest.mark.parametrize("account_type", ["superuser", "User", "", 1])
    def test_account_type_rejected(self, account_type):
        result = validate_body(RegisterRequest, _registration(accountType=account_type))
        assert isinstance(result, Invalid)
        assert "accountType" in result.errors

    @pytest.mark.parametrize("email", [
        "not-an-email",
        "a@",
        "@example.com",
        "a@@example.com",
        "Bob Smith <bob@example.com>",
        "<bob@example.com>",
    ])
    def test_malformed_email_rejected(self, email):
        result = validate_body(RegisterRequest, _registration(email=email))
        assert isinstance(result, Invalid)
        assert "email" in result.errors

    @pytest.mark.parametrize("field", ["username", "email", "accountType", "password"])
    def test_missing_field_rejected(self, field):
        body = _registration()
        del body[field]
        result = validate_body(RegisterRequest, body)
        assert isinstance(result, Invalid)
        assert field in result.errors

    def test_unknown_field_rejected(self):
        result = validate_body(RegisterRequest, _registration(role="admin"))
        assert isinstance(result, Invalid)

    def test_snake_case_account_type_key_rejected(self):
        body = _registration()
        body["account_type"] = body.pop("accountType")
        assert isinstance(validate_body(RegisterRequest, body), Invalid)

    def test_numbers_are_not_coerced_to_strings(self):
        result = validate_body(RegisterRequest, _registration(username=12345))
        assert isinstance(result, Invalid)
        assert "username" in result.errors


class TestLoginSchema:
    def test_no_length_constraints(self):
        result = validate_body(LoginRequest, {"username": "a", "password": "p" * 200})
        assert isinstance(result, Valid)
        assert result.data.username == "a"

    @pytest.mark.parametrize("body", [
        {"username": "alice123"},
        {"password": "Secr3t!"},
        {"username": "", "password": "Secr3t!"},
        {"username": "alice123", "password": ""},
        {"username": "alice123", "password": None},
        {"username": "alice123", "password": "Secr3t!", "extra": 1},
    ])
    def test_rejected(self, body):
        assert isinstance(validate_body(LoginRequest, body), Invalid)


class TestRawBody:
    def test_decode_error_is_invalid(self):
        result = validate_body(LoginRequest, RawBody(error="malformed JSON body"))
        assert isinstance(result, Invalid)
        assert result.errors == ["malformed JSON body"]

    @pytest.mark.parametrize("value", [[], "text", 3, None])
    def test_non_object_is_invalid(self, value):
        assert isinstance(validate_body(LoginRequest, RawBody(value=value)), Invalid)

    def test_decoded_object_is_validated(self):
        body = RawBody(value={"username": "bob", "password": "pw"})
        result = validate_body(LoginRequest, body)
        assert isinstance(result, Valid)
        assert result.data.password == "pw"
