"""
FastAPI dependency injection for the movie store and CORS policy.

Both objects are created by ``create_app`` and owned by the application
(``app.state``), so tests can build isolated apps with their own store.
"""

from fastapi import Request

from movie_service.api.cors import CorsPolicy
from movie_service.database.store import MovieStore


def get_store(request: Request) -> MovieStore:
    """Return the movie store of the running application."""
    return request.app.state.store


def get_cors_policy(request: Request) -> CorsPolicy:
    """Return the CORS policy of the running application."""
    return request.app.state.cors_policy
