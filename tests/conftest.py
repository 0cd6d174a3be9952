"""
Shared fixtures: sample payloads, a seeded memory store and an API client
bound to a fresh application per test.
"""

import pytest
from fastapi.testclient import TestClient

from movie_service.api.main import create_app
from movie_service.database.store import MemoryMovieStore

ALLOWED_ORIGINS = ["http://localhost:8080", "http://localhost:1234", "https://myapp.com"]

SEED_MOVIES = [
    {
        "id": "11111111-1111-4111-8111-111111111111",
        "title": "The Dark Knight",
        "year": 2008,
        "genre": ["Action", "Crime", "Drama"],
        "director": "Christopher Nolan",
        "duration": 152,
        "poster": "https://example.com/dark-knight.jpg",
        "rate": 9.0,
    },
    {
        "id": "22222222-2222-4222-8222-222222222222",
        "title": "Forrest Gump",
        "year": 1994,
        "genre": ["Drama", "Romance"],
        "director": "Robert Zemeckis",
        "duration": 142,
        "poster": "https://example.com/forrest-gump.jpg",
        "rate": 8.8,
    },
    {
        "id": "33333333-3333-4333-8333-333333333333",
        "title": "The Matrix",
        "year": 1999,
        "genre": ["Action", "Sci-Fi"],
        "director": "Lana Wachowski",
        "duration": 136,
        "poster": "https://example.com/matrix.jpg",
        "rate": 8.7,
    },
]


@pytest.fixture
def movie_payload():
    """A valid create body without rate."""
    return {
        "title": "X",
        "year": 2020,
        "genre": ["Action"],
        "director": "D",
        "duration": 100,
        "poster": "http://x/p.jpg",
    }


@pytest.fixture
def store():
    """Memory store seeded with three movies."""
    return MemoryMovieStore(SEED_MOVIES)


@pytest.fixture
def client(store):
    """TestClient against an isolated app serving the seeded store."""
    app = create_app(store=store, cors_origins=ALLOWED_ORIGINS)
    with TestClient(app) as test_client:
        yield test_client
