"""
FastAPI application entry point for the Movie Catalog API.

Run with ``python -m movie_service.api.main`` or
``uvicorn movie_service.api.main:app``.
"""

from typing import Iterable, Optional

import uvicorn
from fastapi import FastAPI

from movie_service import __version__
from movie_service.api.config import (
    get_api_host,
    get_api_port,
    get_cors_origins,
    get_database_path,
    get_log_file,
    get_log_level,
    get_seed_path,
    get_store_backend,
)
from movie_service.api.cors import CorsPolicy, CorsPolicyMiddleware
from movie_service.api.exceptions import register_exception_handlers
from movie_service.api.middleware import RequestTrackingMiddleware
from movie_service.api.routers import movies, system
from movie_service.database.init_db import init_store
from movie_service.database.store import MovieStore
from movie_service.utils.logging_config import configure_api_logging, get_logger

logger = get_logger(__name__)


def create_app(
    store: Optional[MovieStore] = None,
    cors_origins: Optional[Iterable[str]] = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        store: Movie store to serve; defaults to the configured backend
            seeded from the configured seed file
        cors_origins: Allowed CORS origins; defaults to CORS_ORIGINS

    Returns:
        Configured FastAPI application
    """
    if store is None:
        store = init_store(
            backend=get_store_backend(),
            db_path=get_database_path(),
            seed_path=get_seed_path(),
        )
    policy = CorsPolicy.from_origins(
        cors_origins if cors_origins is not None else get_cors_origins()
    )

    app = FastAPI(
        title="Movie Catalog API",
        description="REST API for browsing and editing a movie catalog",
        version=__version__,
    )
    app.state.store = store
    app.state.cors_policy = policy

    # Added last runs first: request tracking wraps the CORS middleware
    app.add_middleware(CorsPolicyMiddleware, policy=policy)
    app.add_middleware(RequestTrackingMiddleware)

    register_exception_handlers(app)

    app.include_router(movies.router)
    app.include_router(system.router)

    @app.get("/")
    def root():
        """Root endpoint."""
        return {
            "message": "Movie Catalog API",
            "docs": "/docs",
            "movies": "/movies",
            "health": "/health",
        }

    logger.info(
        "Movie Catalog API ready: %d movies, %d allowed origins",
        store.count(), len(policy.allowed_origins),
    )
    return app


app = create_app()


def run():
    """Configure logging and serve the application with uvicorn."""
    configure_api_logging(level=get_log_level(), log_file=get_log_file())
    host, port = get_api_host(), get_api_port()
    logger.info("Server running on port %d", port)
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    run()
