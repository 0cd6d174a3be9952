"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends

from movie_service.api.dependencies import get_store
from movie_service.database.store import MovieStore

router = APIRouter(tags=["system"])


@router.get("/health")
def health_check(store: MovieStore = Depends(get_store)):
    """Health check: store reachable and movie count."""
    return {"status": "healthy", "movies": store.count()}
