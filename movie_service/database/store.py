"""
Movie store abstraction and its two backends.

Handlers only talk to ``MovieStore``. ``MemoryMovieStore`` keeps the
collection in a process-local list and is the default. ``SqlMovieStore``
keeps it in SQLite through the ORM and CRUD modules.

Both backends hand out copies, so a caller mutating a returned dict never
changes stored state.
"""

import copy
import logging
import threading
import uuid
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

from movie_service.database import crud
from movie_service.database.connection import DatabaseManager

logger = logging.getLogger(__name__)

MovieRecord = Dict[str, Any]


def new_movie_id() -> str:
    return str(uuid.uuid4())


class MovieStore(ABC):
    """Collection of movie records keyed by id."""

    @abstractmethod
    def list_movies(self, genre: Optional[str] = None) -> List[MovieRecord]:
        """All movies in insertion order, or those having ``genre`` (case-insensitive)."""

    @abstractmethod
    def get_movie(self, movie_id: str) -> Optional[MovieRecord]:
        """The movie with exactly this id, or None."""

    @abstractmethod
    def create_movie(self, data: MovieRecord) -> MovieRecord:
        """Store validated movie data under a newly generated id and return it."""

    @abstractmethod
    def delete_movie(self, movie_id: str) -> bool:
        """Remove the movie; False if the id is unknown."""

    @abstractmethod
    def update_movie(self, movie_id: str, changes: MovieRecord) -> Optional[MovieRecord]:
        """Merge ``changes`` into the stored movie and return the result, or None."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored movies."""

    @abstractmethod
    def add_existing(self, movie: MovieRecord) -> MovieRecord:
        """Insert a movie that already carries its id (seed data)."""

    def seed(self, movies: Iterable[MovieRecord]) -> int:
        """
        Load initial movies, skipping ids already present.

        Returns:
            Number of movies added
        """
        added = 0
        for movie in movies:
            if self.get_movie(movie["id"]) is not None:
                logger.warning("Skipping duplicate seed movie id %s", movie["id"])
                continue
            self.add_existing(movie)
            added += 1
        logger.info("Seeded %d movies", added)
        return added


class MemoryMovieStore(MovieStore):
    """
    In-process list of movie dicts.

    FastAPI runs sync endpoints on a thread pool, so every access to the
    list goes through one lock.
    """

    def __init__(self, movies: Optional[Iterable[MovieRecord]] = None):
        self._movies: List[MovieRecord] = []
        self._lock = threading.Lock()
        if movies:
            self.seed(movies)

    def _find_index(self, movie_id: str) -> int:
        for index, movie in enumerate(self._movies):
            if movie["id"] == movie_id:
                return index
        return -1

    def list_movies(self, genre: Optional[str] = None) -> List[MovieRecord]:
        with self._lock:
            movies = self._movies
            if genre:
                movies = [m for m in movies if crud.has_genre(m["genre"], genre)]
            return copy.deepcopy(movies)

    def get_movie(self, movie_id: str) -> Optional[MovieRecord]:
        with self._lock:
            index = self._find_index(movie_id)
            if index < 0:
                return None
            return copy.deepcopy(self._movies[index])

    def create_movie(self, data: MovieRecord) -> MovieRecord:
        fields = {k: v for k, v in data.items() if k != "id"}
        movie = {"id": new_movie_id(), **copy.deepcopy(fields)}
        with self._lock:
            self._movies.append(movie)
        return copy.deepcopy(movie)

    def add_existing(self, movie: MovieRecord) -> MovieRecord:
        with self._lock:
            self._movies.append(copy.deepcopy(movie))
        return copy.deepcopy(movie)

    def delete_movie(self, movie_id: str) -> bool:
        with self._lock:
            index = self._find_index(movie_id)
            if index < 0:
                return False
            del self._movies[index]
            return True

    def update_movie(self, movie_id: str, changes: MovieRecord) -> Optional[MovieRecord]:
        fields = {k: v for k, v in changes.items() if k != "id"}
        with self._lock:
            index = self._find_index(movie_id)
            if index < 0:
                return None
            merged = {**self._movies[index], **copy.deepcopy(fields)}
            self._movies[index] = merged
            return copy.deepcopy(merged)

    def count(self) -> int:
        with self._lock:
            return len(self._movies)


class SqlMovieStore(MovieStore):
    """Movie store backed by SQLite through SQLAlchemy."""

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager
        self.db_manager.create_tables()
        # StaticPool shares a single SQLite connection between threads
        self._lock = threading.Lock()

    def list_movies(self, genre: Optional[str] = None) -> List[MovieRecord]:
        with self._lock, self.db_manager.session_scope() as session:
            return [m.to_dict() for m in crud.get_movies(session, genre=genre)]

    def get_movie(self, movie_id: str) -> Optional[MovieRecord]:
        with self._lock, self.db_manager.session_scope() as session:
            movie = crud.get_movie(session, movie_id)
            return movie.to_dict() if movie else None

    def create_movie(self, data: MovieRecord) -> MovieRecord:
        return self.add_existing({**data, "id": new_movie_id()})

    def add_existing(self, movie: MovieRecord) -> MovieRecord:
        fields = {k: v for k, v in movie.items() if k in crud.UPDATABLE_FIELDS}
        with self._lock, self.db_manager.session_scope() as session:
            created = crud.create_movie(session, movie_id=movie["id"], **fields)
            return created.to_dict()

    def delete_movie(self, movie_id: str) -> bool:
        with self._lock, self.db_manager.session_scope() as session:
            return crud.delete_movie(session, movie_id)

    def update_movie(self, movie_id: str, changes: MovieRecord) -> Optional[MovieRecord]:
        with self._lock, self.db_manager.session_scope() as session:
            movie = crud.update_movie(session, movie_id, **changes)
            return movie.to_dict() if movie else None

    def count(self) -> int:
        with self._lock, self.db_manager.session_scope() as session:
            return crud.get_movie_count(session)

    def close(self):
        self.db_manager.close()


def create_store(backend: str = "memory", db_path: Optional[str] = None) -> MovieStore:
    """
    Build a movie store for the configured backend.

    Args:
        backend: 'memory' or 'sqlite'
        db_path: SQLite file for the sqlite backend (None keeps it in memory)

    Returns:
        Empty MovieStore

    Raises:
        ValueError: If the backend name is unknown
    """
    if backend == "memory":
        return MemoryMovieStore()
    if backend == "sqlite":
        logger.info("Using sqlite movie store at %s", db_path or ":memory:")
        return SqlMovieStore(DatabaseManager(db_path=db_path))
    raise ValueError(f"Unknown movie store backend: {backend!r}")
