"""
Pydantic schemas for API request/response validation.
"""

from movie_service.api.models.movie import (
    FieldError,
    Genre,
    MovieCreate,
    MovieResponse,
    MovieUpdate,
    ValidationResult,
)

__all__ = [
    "FieldError",
    "Genre",
    "MovieCreate",
    "MovieResponse",
    "MovieUpdate",
    "ValidationResult",
]
