"""
API route handlers.
"""

from movie_service.api.routers import movies, system

__all__ = ["movies", "system"]
