"""Stored user record and account type."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AccountType(str, Enum):
    USER = "user"
    ADMIN = "admin"


class UserRecord(BaseModel):
    """
    One entry of the credential store, keyed by username.

    ``password_hash`` is always ``hash_password(password, salt)``; the
    plaintext password is never kept.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    email: str
    account_type: AccountType = Field(alias="accountType")
    salt: str
    password_hash: str
