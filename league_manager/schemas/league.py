"""Pydantic schemas per le statistiche di lega."""

from pydantic import BaseModel


class LeagueStatsResponse(BaseModel):
    league_name: str
    total_teams: int
    total_players: int
    assigned_players: int
    unassigned_players: int
