"""
Pydantic schemas for the register / login API.
"""

from __future__ import annotations

import re

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator

from auth.models import AccountType


PASSWORD_SPECIAL_CHARS = "$&+,:;=?@#|'<>.^*()%!-"

_PASSWORD_ALLOWED_RE = re.compile(r"[A-Za-z0-9" + re.escape(PASSWORD_SPECIAL_CHARS) + r"]+")
_PASSWORD_SPECIAL_RE = re.compile(r"[" + re.escape(PASSWORD_SPECIAL_CHARS) + r"]")


class _StrictBody(BaseModel):
    # JSON strings only, no unknown keys, no blank values
    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        str_min_length=1,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Requests
# ═══════════════════════════════════════════════════════════════════════════════


class RegisterRequest(_StrictBody):
    username: str = Field(..., min_length=3, max_length=24)
    email: str
    account_type: AccountType = Field(..., alias="accountType")
    password: str = Field(..., min_length=5, max_length=24)

    @field_validator("account_type", mode="before")
    @classmethod
    def _account_type_from_json(cls, value):
        # strict mode would otherwise demand an AccountType instance
        if isinstance(value, str):
            return AccountType(value)
        return value

    @field_validator("email")
    @classmethod
    def _email_syntax(cls, value: str) -> str:
        # bare address only; the submitted string is kept as-is
        try:
            validate_email(value, check_deliverability=False, allow_display_name=False)
        except EmailNotValidError as exc:
            raise ValueError(str(exc)) from exc
        return value

    @field_validator("password")
    @classmethod
    def _password_charset(cls, value: str) -> str:
        if not _PASSWORD_ALLOWED_RE.fullmatch(value):
            raise ValueError("password contains characters outside the allowed set")
        if not _PASSWORD_SPECIAL_RE.search(value):
            raise ValueError(
                f"password must contain at least one of {PASSWORD_SPECIAL_CHARS}"
            )
        return value


class LoginRequest(_StrictBody):
    username: str
    password: str


# ═══════════════════════════════════════════════════════════════════════════════
# Responses
# ═══════════════════════════════════════════════════════════════════════════════


class LoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str
    email: str
    account_type: AccountType = Field(alias="accountType")
