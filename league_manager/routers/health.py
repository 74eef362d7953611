"""Health check router."""

from fastapi import APIRouter

from league_manager.core.config import get_league_name

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    """Health check for load balancers and monitoring."""
    return {"status": "healthy", "league": get_league_name()}
