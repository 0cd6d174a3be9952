"""
Domain exceptions and the handlers that turn them into JSON responses.

All error bodies share the shape ``{"error": ...}``: a short message for
not-found and server errors, a list of field errors for bad input.
"""

import logging
from typing import List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from movie_service.api.models.movie import FieldError
from movie_service.api.validation import to_field_errors

logger = logging.getLogger(__name__)


class MovieServiceError(Exception):
    """Base exception for the application"""
    pass


class MovieNotFoundError(MovieServiceError):
    """Referenced movie id is not in the collection."""

    def __init__(self, movie_id: str):
        super().__init__(f"Movie not found: {movie_id}")
        self.movie_id = movie_id


class MovieValidationError(MovieServiceError):
    """Request body failed schema validation."""

    def __init__(self, errors: List[FieldError]):
        super().__init__(f"{len(errors)} invalid field(s)")
        self.errors = errors


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


async def movie_not_found_handler(request: Request, exc: MovieNotFoundError):
    logger.info("Movie %s not found [request_id=%s]", exc.movie_id, _request_id(request))
    return JSONResponse(status_code=404, content={"error": "Movie not found"})


async def movie_validation_handler(request: Request, exc: MovieValidationError):
    logger.info(
        "Validation failed on %s [request_id=%s]",
        ", ".join(e.field for e in exc.errors), _request_id(request),
    )
    return JSONResponse(
        status_code=400,
        content={"error": [e.model_dump() for e in exc.errors]},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """
    Malformed JSON and bad path/query values get the same 400 shape as
    schema failures instead of FastAPI's default 422.
    """
    errors = to_field_errors(exc.errors())
    logger.info("Malformed request [request_id=%s]", _request_id(request))
    return JSONResponse(
        status_code=400,
        content={"error": [e.model_dump() for e in errors]},
    )


async def global_exception_handler(request: Request, exc: Exception):
    """
    Catch-all handler. Returns a 500 JSON response without internal details.

    Starlette runs this outside the user middleware stack, so the CORS
    grant is added here rather than by CorsPolicyMiddleware.
    """
    request_id = _request_id(request)
    logger.error(
        "Unhandled exception on %s [request_id=%s]",
        request.url.path, request_id,
        exc_info=exc,
    )
    headers = {}
    policy = getattr(request.app.state, "cors_policy", None)
    if policy is not None:
        headers = policy.allow_origin_headers(request.headers.get("origin"))
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "request_id": request_id},
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to the application."""
    app.add_exception_handler(MovieNotFoundError, movie_not_found_handler)
    app.add_exception_handler(MovieValidationError, movie_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, global_exception_handler)
