"""
Database initialization and seed data loading.

This module reads the static movie seed file and populates a movie store
with it at startup.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from movie_service.api.validation import validate_movie
from movie_service.database.store import MovieStore, create_store, new_movie_id

logger = logging.getLogger(__name__)


def load_seed_movies(path: str) -> List[Dict[str, Any]]:
    """
    Read and validate the movie seed file.

    Entries that fail full validation are skipped with a warning; entries
    without an id get a generated one.

    Args:
        path: Path to a JSON file holding a list of movies

    Returns:
        List of normalized movie records, each with an id

    Raises:
        FileNotFoundError: If the seed file does not exist
        ValueError: If the file is not a JSON list
    """
    seed_path = Path(path)
    with seed_path.open(encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, list):
        raise ValueError(f"Seed file {seed_path} must contain a JSON list")

    movies = []
    for position, entry in enumerate(raw):
        result = validate_movie(entry)
        if not result.ok:
            logger.warning(
                "Skipping seed movie #%d: %s",
                position, "; ".join(f"{e.field}: {e.message}" for e in result.errors),
            )
            continue
        movie_id = entry.get("id") or new_movie_id()
        movies.append({"id": str(movie_id), **result.data})

    logger.info("Loaded %d of %d seed movies from %s", len(movies), len(raw), seed_path)
    return movies


def init_store(
    backend: str = "memory",
    db_path: Optional[str] = None,
    seed_path: Optional[str] = None,
) -> MovieStore:
    """
    Create a movie store and populate it from the seed file.

    Args:
        backend: Store backend name ('memory' or 'sqlite')
        db_path: SQLite file for the sqlite backend
        seed_path: Seed JSON file; None leaves the store empty

    Returns:
        Populated MovieStore
    """
    store = create_store(backend, db_path)
    if seed_path:
        store.seed(load_seed_movies(seed_path))
    return store
