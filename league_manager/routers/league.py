"""Statistiche di lega: conteggi squadre e giocatori, tesserati e svincolati."""

from fastapi import APIRouter, Depends

from league_manager.core.config import get_league_name
from league_manager.core.state import get_registry
from league_manager.schemas.league import LeagueStatsResponse
from league_manager.services.registry import LeagueRegistry

router = APIRouter(prefix="/api/league", tags=["league"])


@router.get("/stats", response_model=LeagueStatsResponse)
def league_stats(registry: LeagueRegistry = Depends(get_registry)):
    return LeagueStatsResponse(
        league_name=get_league_name(),
        total_teams=registry.get_total_teams(),
        total_players=registry.get_total_players(),
        assigned_players=registry.get_assigned_players(),
        unassigned_players=registry.get_unassigned_count(),
    )
