"""
Movie API endpoints.
"""

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Query, Request, Response

from movie_service.api.cors import CorsPolicy
from movie_service.api.dependencies import get_cors_policy, get_store
from movie_service.api.exceptions import MovieNotFoundError, MovieValidationError
from movie_service.api.models.movie import MovieResponse
from movie_service.api.validation import validate_movie, validate_partial_movie
from movie_service.database.store import MovieStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=List[MovieResponse])
def list_movies(
    genre: Optional[str] = Query(None),
    store: MovieStore = Depends(get_store),
):
    """List all movies, or those having the given genre (case-insensitive)."""
    return store.list_movies(genre=genre)


@router.get("/{movie_id}", response_model=MovieResponse)
def get_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    """Get movie details by ID."""
    movie = store.get_movie(movie_id)
    if movie is None:
        raise MovieNotFoundError(movie_id)
    return movie


@router.post("", response_model=MovieResponse, status_code=201)
def create_movie(
    payload: Any = Body(None),
    store: MovieStore = Depends(get_store),
):
    """Create a movie from a full movie body; the server assigns the id."""
    result = validate_movie(payload)
    if not result.ok:
        raise MovieValidationError(result.errors)

    movie = store.create_movie(result.data)
    logger.info("Created movie %s (%s)", movie["id"], movie["title"])
    return movie


@router.delete("/{movie_id}", status_code=204, response_class=Response)
def delete_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    """Delete a movie."""
    if not store.delete_movie(movie_id):
        raise MovieNotFoundError(movie_id)

    logger.info("Deleted movie %s", movie_id)
    return Response(status_code=204)


@router.patch("/{movie_id}", response_model=MovieResponse)
def update_movie(
    movie_id: str,
    payload: Any = Body(None),
    store: MovieStore = Depends(get_store),
):
    """
    Partially update a movie.

    Only the supplied fields are validated and merged; the merged movie is
    stored and returned.
    """
    result = validate_partial_movie(payload)
    if not result.ok:
        raise MovieValidationError(result.errors)

    movie = store.update_movie(movie_id, result.data)
    if movie is None:
        raise MovieNotFoundError(movie_id)

    logger.info("Updated movie %s fields: %s", movie_id, ", ".join(sorted(result.data)) or "none")
    return movie


def _preflight(request: Request, policy: CorsPolicy) -> Response:
    headers = policy.preflight_headers(request.headers.get("origin"))
    return Response(status_code=204, headers=headers)


@router.options("")
def preflight_movies(request: Request, policy: CorsPolicy = Depends(get_cors_policy)):
    """CORS preflight for the collection."""
    return _preflight(request, policy)


@router.options("/{movie_id}")
def preflight_movie(movie_id: str, request: Request, policy: CorsPolicy = Depends(get_cors_policy)):
    """CORS preflight for a single movie."""
    return _preflight(request, policy)
