#!/usr/bin/env python
"""
Create a SQLite movie catalog and load the seed movies into it.

The API uses this database when started with MOVIE_STORE=sqlite and
DATABASE_PATH pointing at the same file.

Usage:
    # Fresh database from the bundled seed file
    python scripts/init_database.py --reset

    # Add seed movies to an existing database (existing ids are skipped)
    python scripts/init_database.py --db-path data/movies.db

    # Load a different seed file
    python scripts/init_database.py --seed-path my_movies.json
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movie_service.api.config import get_seed_path
from movie_service.database import DatabaseManager, SqlMovieStore, load_seed_movies


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def main():
    """Main entry point for database initialization."""

    parser = argparse.ArgumentParser(
        description="Initialize the movie catalog SQLite database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/init_database.py --reset
  python scripts/init_database.py --db-path data/movies.db --seed-path movies.json
        """
    )
    parser.add_argument(
        '--reset',
        action='store_true',
        help='Drop and recreate database tables (WARNING: deletes all data)'
    )
    parser.add_argument(
        '--db-path',
        type=str,
        default='data/movies.db',
        help='Path to SQLite database file (default: data/movies.db)'
    )
    parser.add_argument(
        '--seed-path',
        type=str,
        default=None,
        help='Seed JSON file (default: bundled movie_service/data/movies.json)'
    )

    args = parser.parse_args()
    seed_path = args.seed_path or get_seed_path()

    print_section("Movie Catalog Database Initialization")
    print(f"\nDatabase: {args.db_path}")
    print(f"Seed file: {seed_path}")

    try:
        db_manager = DatabaseManager(db_path=args.db_path)
        if args.reset:
            print("Resetting database (dropping all tables)...")
            db_manager.reset_database()

        store = SqlMovieStore(db_manager)
        added = store.seed(load_seed_movies(seed_path))

        print(f"\n[SUCCESS] Added {added} movies, {store.count()} in total")
        store.close()
    except Exception as e:
        print(f"\n[ERROR] Initialization failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
