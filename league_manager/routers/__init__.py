from league_manager.routers.health import router as health_router
from league_manager.routers.league import router as league_router
from league_manager.routers.players import router as players_router
from league_manager.routers.teams import router as teams_router

__all__ = ["health_router", "league_router", "players_router", "teams_router"]
