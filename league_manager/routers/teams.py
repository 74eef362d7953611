"""
API Teams: registrazione squadre, elenco, ricerca per id o nome, rosa giocatori.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from league_manager.core.state import get_registry
from league_manager.routers.players import to_player_rows
from league_manager.schemas.players import PlayerRow
from league_manager.schemas.teams import TeamCreate, TeamRow
from league_manager.services.registry import LeagueRegistry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/teams", tags=["teams"])


@router.post("", response_model=TeamRow, status_code=201)
def register_team(body: TeamCreate, registry: LeagueRegistry = Depends(get_registry)):
    """Registra una squadra. 409 se il nome è già in uso (anche con maiuscole diverse)."""
    team = registry.register_team(body.name, body.city)
    if team is None:
        logger.warning("Registrazione squadra rifiutata name=%r", body.name)
        raise HTTPException(status_code=409, detail=f"Nome squadra già registrato: {body.name}")
    return TeamRow.from_team(team)


@router.get("", response_model=list[TeamRow])
def list_teams(registry: LeagueRegistry = Depends(get_registry)):
    return [TeamRow.from_team(t) for t in registry.get_all_teams()]


@router.get("/by-name/{name}", response_model=TeamRow)
def get_team_by_name(name: str, registry: LeagueRegistry = Depends(get_registry)):
    team = registry.find_team_by_name(name)
    if team is None:
        raise HTTPException(status_code=404, detail="Squadra non trovata")
    return TeamRow.from_team(team)


@router.get("/{team_id}", response_model=TeamRow)
def get_team(team_id: int, registry: LeagueRegistry = Depends(get_registry)):
    team = registry.find_team_by_id(team_id)
    if team is None:
        raise HTTPException(status_code=404, detail="Squadra non trovata")
    return TeamRow.from_team(team)


@router.get("/{team_id}/players", response_model=list[PlayerRow])
def team_roster(team_id: int, registry: LeagueRegistry = Depends(get_registry)):
    """Rosa della squadra in ordine di tesseramento. Rosa vuota = lista vuota."""
    team = registry.find_team_by_id(team_id)
    if team is None:
        raise HTTPException(status_code=404, detail="Squadra non trovata")
    return to_player_rows(team.get_roster(), registry)
