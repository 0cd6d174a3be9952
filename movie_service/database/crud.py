"""
CRUD operations for the Movie model.

This module provides Create, Read, Update, Delete operations used by the
sqlite store backend.
"""

from typing import Iterable, List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from movie_service.database.models import Movie

UPDATABLE_FIELDS = ("title", "year", "genre", "director", "duration", "poster", "rate")


def has_genre(genres: Iterable[str], genre: str) -> bool:
    """
    Case-insensitive membership test used by genre filtering.

    Args:
        genres: Genre names of a movie
        genre: Requested genre name

    Returns:
        True if any of the movie's genres equals the requested one
    """
    wanted = genre.lower()
    return any(g.lower() == wanted for g in genres)


def create_movie(
    session: Session,
    movie_id: str,
    title: str,
    year: int,
    genre: List[str],
    director: str,
    duration: int,
    poster: str,
    rate: float = 5.0
) -> Movie:
    """
    Create a new movie.

    Args:
        session: Database session
        movie_id: Public movie id (already generated by the caller)
        title: Movie title
        year: Release year
        genre: List of genre names
        director: Director name
        duration: Runtime in minutes
        poster: Poster URL
        rate: Rating from 0 to 10

    Returns:
        Created Movie object
    """
    movie = Movie(
        id=movie_id,
        title=title,
        year=year,
        genre=list(genre),
        director=director,
        duration=duration,
        poster=poster,
        rate=rate
    )
    session.add(movie)
    session.commit()
    session.refresh(movie)
    return movie


def get_movie(session: Session, movie_id: str) -> Optional[Movie]:
    """
    Get a movie by its public id.

    Returns:
        Movie object or None if not found
    """
    return session.query(Movie).filter(Movie.id == movie_id).first()


def get_movies(session: Session, genre: Optional[str] = None) -> List[Movie]:
    """
    Get all movies in insertion order, optionally filtered by genre.

    Genres live in a JSON column, so the case-insensitive match is done
    in Python rather than in SQL.

    Args:
        session: Database session
        genre: Genre name to filter by (case-insensitive)

    Returns:
        List of Movie objects
    """
    movies = session.query(Movie).order_by(Movie.row_id).all()
    if genre:
        movies = [m for m in movies if has_genre(m.genre, genre)]
    return movies


def get_movie_count(session: Session) -> int:
    """Get total count of movies."""
    return session.query(func.count(Movie.row_id)).scalar()


def update_movie(session: Session, movie_id: str, **kwargs) -> Optional[Movie]:
    """
    Update movie fields.

    Args:
        session: Database session
        movie_id: Public movie id
        **kwargs: Fields to update; anything outside UPDATABLE_FIELDS
            (including id) is ignored

    Returns:
        Updated Movie object or None if not found
    """
    movie = get_movie(session, movie_id)
    if movie:
        for key, value in kwargs.items():
            if key in UPDATABLE_FIELDS:
                setattr(movie, key, list(value) if key == "genre" else value)
        session.commit()
        session.refresh(movie)
    return movie


def delete_movie(session: Session, movie_id: str) -> bool:
    """
    Delete a movie.

    Returns:
        True if the movie was deleted, False if not found
    """
    movie = get_movie(session, movie_id)
    if movie:
        session.delete(movie)
        session.commit()
        return True
    return False
