"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path
from typing import List, Optional

DEFAULT_CORS_ORIGINS = [
    "http://localhost:8080",
    "http://localhost:1234",
    "https://myapp.com",
]


def get_seed_path() -> str:
    """Get the movie seed file path from env or default."""
    return os.getenv("MOVIES_SEED_PATH", "") or str(
        Path(__file__).resolve().parents[1] / "data" / "movies.json"
    )


def get_store_backend() -> str:
    """Get the movie store backend ('memory' or 'sqlite')."""
    return os.getenv("MOVIE_STORE", "memory").strip().lower()


def get_database_path() -> Optional[str]:
    """Get SQLite file path for the sqlite backend; None means in-memory."""
    return os.getenv("DATABASE_PATH", "").strip() or None


def get_cors_origins() -> List[str]:
    """Get CORS allowed origins from env (comma separated) or defaults."""
    cors_env = os.getenv("CORS_ORIGINS", "")
    if not cors_env.strip():
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in cors_env.split(",") if origin.strip()]


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> Optional[str]:
    """Get optional log file name."""
    return os.getenv("LOG_FILE") or None


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("PORT", "1234"))
