"""
Request-body validation.

``validate_body`` never raises for bad input: it returns either ``Valid``
carrying the parsed model or ``Invalid`` carrying the failing field
locations, and the caller branches on the result.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Generic, List, Type, TypeVar, Union

from fastapi import Request
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class Valid(Generic[ModelT]):
    data: ModelT


@dataclass(frozen=True)
class Invalid:
    errors: List[str] = field(default_factory=list)


ValidationResult = Union[Valid[ModelT], Invalid]


@dataclass(frozen=True)
class RawBody:
    """Decoded JSON body, or the reason it could not be decoded."""

    value: Any = None
    error: str | None = None


async def read_json_body(request: Request) -> RawBody:
    """Read and JSON-decode the request body; only ``application/json`` is parsed."""
    media_type = request.headers.get("content-type", "").split(";", 1)[0].strip().lower()
    if media_type != "application/json":
        return RawBody(error=f"unsupported content type: {media_type or 'none'}")

    raw = await request.body()
    try:
        return RawBody(value=json.loads(raw))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        return RawBody(error=f"malformed JSON body: {exc}")


def validate_body(schema: Type[ModelT], body: RawBody | Any) -> ValidationResult[ModelT]:
    """Validate a decoded body (or a ``RawBody``) against ``schema``."""
    if isinstance(body, RawBody):
        if body.error is not None:
            return Invalid(errors=[body.error])
        body = body.value

    if not isinstance(body, dict):
        return Invalid(errors=[f"expected a JSON object, got {type(body).__name__}"])

    try:
        return Valid(data=schema.model_validate(body))
    except ValidationError as exc:
        errors = [
            ".".join(str(part) for part in err["loc"]) or "__root__"
            for err in exc.errors(include_input=False)
        ]
        logger.debug("%s rejected: %s", schema.__name__, errors)
        return Invalid(errors=errors)
