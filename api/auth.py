"""
Authentication routes — register and login against the in-memory store.

Every failure is an empty-bodied status code:
  400  body does not match the schema
  409  username already registered
  401  unknown username or wrong password (indistinguishable)
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from api.dependencies import get_credential_store, get_settings
from auth.models import UserRecord
from auth.password import generate_salt, hash_password, verify_password
from config.settings import Settings
from core.credential_store import CredentialStore
from utils.schemas import LoginRequest, LoginResponse, RegisterRequest
from utils.validators import Invalid, read_json_body, validate_body

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/register", status_code=status.HTTP_204_NO_CONTENT)
async def register(
    request: Request,
    store: CredentialStore = Depends(get_credential_store),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Register a new user."""
    result = validate_body(RegisterRequest, await read_json_body(request))
    if isinstance(result, Invalid):
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    req = result.data

    # insert_if_absent below is the authoritative uniqueness check
    if store.find_by_username(req.username) is not None:
        logger.info("Registration conflict for %s", req.username)
        return Response(status_code=status.HTTP_409_CONFLICT)

    salt = generate_salt(settings.bcrypt_rounds)
    password_hash = await run_in_threadpool(hash_password, req.password, salt)
    record = UserRecord(
        email=req.email,
        account_type=req.account_type,
        salt=salt,
        password_hash=password_hash,
    )

    if not store.insert_if_absent(req.username, record):
        logger.info("Registration conflict for %s (concurrent insert)", req.username)
        return Response(status_code=status.HTTP_409_CONFLICT)

    logger.info("Registered user %s (%s)", req.username, req.account_type.value)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: Request,
    store: CredentialStore = Depends(get_credential_store),
) -> Response:
    """Login with username + password."""
    result = validate_body(LoginRequest, await read_json_body(request))
    if isinstance(result, Invalid):
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    req = result.data

    user = store.find_by_username(req.username)
    if user is None or not await run_in_threadpool(
        verify_password, req.password, user.salt, user.password_hash
    ):
        logger.info("Failed login for %s", req.username)
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)

    logger.info("Login: %s", req.username)
    body = LoginResponse(
        username=req.username,
        email=user.email,
        account_type=user.account_type,
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=body.model_dump(mode="json", by_alias=True),
    )


@router.options("/{path:path}", include_in_schema=False)
async def options_any(path: str) -> Response:
    """Answer bare OPTIONS on any path; CORS headers come from the middleware."""
    return Response(status_code=status.HTTP_204_NO_CONTENT)
