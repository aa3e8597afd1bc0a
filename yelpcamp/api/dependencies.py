"""Route Dependencies — payload decoding, shape validation, store construction.

Invariants:
    - validated(shape) runs before the handler body, so an invalid payload never
      reaches a store mutation
    - Routes declare the payload dependency before the store dependency: the DB
      session is only opened for payloads that passed validation
    - A malformed path id is a 404 even when the body is also invalid
    - Form bodies decode bracketed keys; JSON bodies are taken as-is
"""

from typing import Any, Awaitable, Callable
from uuid import UUID

from fastapi import Depends, Request
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from yelpcamp.core.domain_types import RequestPhase, ShapeName
from yelpcamp.core.errors import (
    ErrorContext, PayloadValidationError, ResourceNotFoundError,
)
from yelpcamp.core.forms import parse_nested_form
from yelpcamp.core.repository_protocols import (
    CampgroundRepository, ReviewRepository,
)
from yelpcamp.core.validation import require_valid
from yelpcamp.infrastructure.database import get_db
from yelpcamp.services.campground_store import CampgroundStore
from yelpcamp.services.review_store import ReviewStore


def request_context(request: Request) -> ErrorContext:
    return ErrorContext(
        method=request.method,
        path=request.url.path,
        phase=getattr(request.state, "phase", RequestPhase.RECEIVED).value,
    )


async def read_payload(request: Request) -> Any:
    """Decode the request body into an untyped nested payload."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            return await request.json()
        except ValueError:
            raise PayloadValidationError(
                ["body: malformed JSON"], context=request_context(request),
            )
    form = await request.form()
    return parse_nested_form(
        (key, value) for key, value in form.multi_items()
        if isinstance(value, str)
    )


def path_id(name: str, resource_type: str) -> Callable[[Request], Awaitable[UUID]]:
    """Dependency factory: parse a UUID path parameter, 404 when it is malformed.

    Routes that also take validated(shape) declare this first, so a bad id is
    reported as not found before the body is looked at.
    """

    async def dependency(request: Request) -> UUID:
        raw = request.path_params[name]
        try:
            return UUID(raw)
        except ValueError:
            raise ResourceNotFoundError(
                resource_type, raw, context=request_context(request),
            )

    return dependency


def validated(shape: ShapeName) -> Callable[[Request], Awaitable[BaseModel]]:
    """Dependency factory: decode the body and check it against a named shape."""

    async def dependency(request: Request) -> BaseModel:
        request.state.phase = RequestPhase.VALIDATING
        payload = await read_payload(request)
        value = require_valid(payload, shape, context=request_context(request))
        request.state.phase = RequestPhase.EXECUTING
        return value

    return dependency


def get_campground_store(
    request: Request, db: AsyncSession = Depends(get_db),
) -> CampgroundRepository:
    settings = request.app.state.settings
    return CampgroundStore(
        db, delete_orphan_reviews=settings.delete_orphan_reviews,
    )


def get_review_store(db: AsyncSession = Depends(get_db)) -> ReviewRepository:
    return ReviewStore(db)
