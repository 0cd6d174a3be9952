"""
Database connection management using SQLAlchemy.

This module handles SQLite engine creation and session management for the
sqlite store backend.
"""

import os
from contextlib import contextmanager
from typing import Generator, Optional
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from movie_service.database.models import Base


def get_database_url(db_path: Optional[str] = None) -> str:
    """
    Get SQLite database URL.

    Args:
        db_path: Path to SQLite database file, or None for an in-memory database

    Returns:
        SQLAlchemy database URL
    """
    if not db_path:
        return "sqlite://"

    # Ensure directory exists
    db_dir = os.path.dirname(db_path)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)

    return f"sqlite:///{os.path.abspath(db_path)}"


class DatabaseManager:
    """
    Database connection manager.

    Handles engine creation, session management, and table creation.
    """

    def __init__(self, db_path: Optional[str] = None, echo: bool = False):
        """
        Initialize database manager.

        Args:
            db_path: Path to SQLite database file (None keeps it in memory)
            echo: If True, log all SQL statements (useful for debugging)
        """
        self.db_path = db_path
        self.database_url = get_database_url(db_path)

        # StaticPool shares one connection, which keeps an in-memory
        # database alive across FastAPI's worker threads
        self.engine = create_engine(
            self.database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool
        )

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine
        )

    def create_tables(self):
        """Create all tables defined in the models if they don't exist."""
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self):
        """
        Drop all tables defined in the models.

        WARNING: This will delete all data in the database!
        """
        Base.metadata.drop_all(bind=self.engine)

    def reset_database(self):
        """Drop and recreate all tables."""
        self.drop_tables()
        self.create_tables()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions.

        Automatically commits on success and rolls back on failure.

        Usage:
            with db_manager.session_scope() as session:
                crud.create_movie(session, ...)

        Yields:
            SQLAlchemy Session object
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self):
        """Close the database engine and all connections."""
        self.engine.dispose()
