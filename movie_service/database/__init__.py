"""
Database module for the movie catalog.

This module provides the movie store abstraction with its memory and SQLite
backends, ORM models, connection management, CRUD operations and seed loading.
"""

from movie_service.database.models import Base, Movie
from movie_service.database.connection import DatabaseManager
from movie_service.database.store import (
    MovieStore,
    MemoryMovieStore,
    SqlMovieStore,
    create_store,
)
from movie_service.database.init_db import init_store, load_seed_movies
from movie_service.database import crud

__all__ = [
    # Models
    'Base',
    'Movie',
    # Connection
    'DatabaseManager',
    # Stores
    'MovieStore',
    'MemoryMovieStore',
    'SqlMovieStore',
    'create_store',
    # Initialization
    'init_store',
    'load_seed_movies',
    # CRUD module
    'crud',
]
