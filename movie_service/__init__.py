"""
Movie Catalog Service Package.

This package contains the HTTP API, request validation, CORS policy and
movie storage backends for the movie catalog.
"""

__version__ = "1.0.0"
