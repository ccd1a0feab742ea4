"""
FastAPI dependencies (shared across routes).
"""

from __future__ import annotations

from fastapi import Request

from config.settings import Settings
from core.credential_store import CredentialStore


def get_credential_store(request: Request) -> CredentialStore:
    """The store owned by the running app (created in ``create_app``)."""
    return request.app.state.credential_store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
