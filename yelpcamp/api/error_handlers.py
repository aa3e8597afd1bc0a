"""Error Handlers — the single terminal point every request failure resolves through.

Invariants:
    - OperationError → rendered error.html (or JSON envelope) with its status_code
    - Unmatched method/path (router 404 or 405) → PageNotFoundError, 404
    - Malformed path ids → ResourceNotFoundError (404); malformed bodies → 400
    - SQLAlchemy errors escaping a handler → DatabaseError (500, generic message)
    - Any other exception → generic 500; the exception text is logged, never shown

Design Decisions:
    - ErrorWrappingRoute converts unexpected handler exceptions into OperationError
      inside the route, so they reach the same handler as domain errors instead of
      the server-error middleware (ADR: one failure path for sync and async handlers)
    - Exception catch-all kept for failures raised outside any route (middleware)
    - JSON only when the client asks for it; browsers always get the failure page
"""

import logging
from typing import Callable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from yelpcamp.api.dependencies import request_context
from yelpcamp.api.rendering import render
from yelpcamp.core.domain_types import RequestPhase
from yelpcamp.core.errors import (
    DatabaseError, ErrorSeverity, OperationError, PageNotFoundError,
    PayloadValidationError, ResourceNotFoundError,
)
from yelpcamp.core.validation import format_errors

logger = logging.getLogger(__name__)

_PATH_RESOURCES = {"campground_id": "Campground", "review_id": "Review"}

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


class ErrorWrappingRoute(APIRoute):
    """APIRoute whose handler turns unexpected exceptions into OperationError."""

    def get_route_handler(self) -> Callable:
        handler = super().get_route_handler()

        async def wrapped_handler(request: Request) -> Response:
            try:
                return await handler(request)
            except (
                OperationError, StarletteHTTPException, RequestValidationError,
            ):
                raise
            except SQLAlchemyError as exc:
                logger.error(
                    f"Database error on {request.url.path}: {exc}",
                    extra={"method": request.method, "path": request.url.path},
                )
                raise DatabaseError(
                    str(exc), "request", context=request_context(request),
                ) from exc
            except Exception as exc:
                logger.error(
                    f"Unhandled exception on {request.url.path}: {exc}",
                    exc_info=True,
                    extra={"method": request.method, "path": request.url.path},
                )
                raise OperationError(context=request_context(request)) from exc

        return wrapped_handler


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_operation_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def render_error(request: Request, exc: OperationError) -> Response:
    """Terminal handler: log once, then answer with the failure view."""
    request.state.phase = RequestPhase.FAILED
    logger.log(
        _LOG_LEVELS[exc.severity],
        f"{exc.code}: {exc.message}",
        extra={
            "error_code": exc.code,
            "status_code": exc.status_code,
            "method": request.method,
            "path": request.url.path,
            "phase": exc.context.phase,
        },
    )
    if _wants_json(request):
        return JSONResponse(
            status_code=exc.status_code, content=exc.to_response(),
        )
    return render(
        request, "error.html", {"err": exc.to_view()},
        status_code=exc.status_code,
    )


def _wants_json(request: Request) -> bool:
    accept = request.headers.get("accept", "")
    return "application/json" in accept and "text/html" not in accept


def _register_operation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(OperationError)
    async def operation_error_handler(request: Request, exc: OperationError):
        """Handle every domain and infrastructure error."""
        if exc.context.path is None:
            exc.context = request_context(request)
        return render_error(request, exc)


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Router misses (404/405) become PageNotFoundError."""
        context = request_context(request)
        if exc.status_code in (404, 405):
            return render_error(request, PageNotFoundError(context))
        message = exc.detail if exc.status_code < 500 else None
        return render_error(
            request, OperationError(message, exc.status_code, context=context),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Framework-level parse failures: bad ids are 404, bad input is 400."""
        context = request_context(request)
        for error in exc.errors():
            loc = error.get("loc", ())
            if len(loc) == 2 and loc[0] == "path" and loc[1] in _PATH_RESOURCES:
                resource_id = request.path_params.get(loc[1], error.get("input"))
                return render_error(request, ResourceNotFoundError(
                    _PATH_RESOURCES[loc[1]], resource_id, context,
                ))
        return render_error(
            request,
            PayloadValidationError(format_errors(exc.errors()), context=context),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return render_error(request, OperationError(context=request_context(request)))
