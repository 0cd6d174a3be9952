"""
SQLAlchemy ORM models for the movie catalog database.

Only used by the sqlite store backend; the memory backend keeps plain dicts.
"""

from datetime import datetime
from typing import Any, Dict, List
from sqlalchemy import (
    JSON, Integer, String, Float, Text, CheckConstraint, Index, TIMESTAMP
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Movie(Base):
    """
    Movie table storing catalog entries.

    Attributes:
        row_id: Surrogate key, keeps insertion order
        id: Public movie id (UUID string), unique and immutable
        title: Movie title
        year: Release year (1900-2026)
        genre: JSON array of genre names
        director: Director name
        duration: Runtime in minutes
        poster: Poster image URL
        rate: Rating from 0 to 10
        created_at: Timestamp when record was created
    """
    __tablename__ = 'movies'

    row_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(36), nullable=False, unique=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    genre: Mapped[List[str]] = mapped_column(JSON, nullable=False)
    director: Mapped[str] = mapped_column(Text, nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    poster: Mapped[str] = mapped_column(Text, nullable=False)
    rate: Mapped[float] = mapped_column(Float, nullable=False, default=5.0)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp()
    )

    __table_args__ = (
        CheckConstraint("year >= 1900 AND year <= 2026", name='check_year_range'),
        CheckConstraint("duration > 0", name='check_duration_positive'),
        CheckConstraint("rate >= 0 AND rate <= 10", name='check_rate_range'),
        Index('idx_movies_title', 'title'),
    )

    def to_dict(self) -> Dict[str, Any]:
        """Public representation, matching the memory store's records."""
        return {
            "id": self.id,
            "title": self.title,
            "year": self.year,
            "genre": list(self.genre),
            "director": self.director,
            "duration": self.duration,
            "poster": self.poster,
            "rate": self.rate,
        }

    def __repr__(self) -> str:
        return f"<Movie(id='{self.id}', title='{self.title}', year={self.year})>"
