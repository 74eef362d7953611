"""
API Players: registrazione giocatori, ricerca per nome, tesseramento
e svincolo dalla squadra.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from league_manager.core.state import get_registry
from league_manager.models import Player
from league_manager.schemas.players import PlayerAssignment, PlayerCreate, PlayerRow
from league_manager.services.registry import LeagueRegistry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/players", tags=["players"])


def to_player_rows(players: list[Player], registry: LeagueRegistry) -> list[PlayerRow]:
    return [PlayerRow.from_player(p, registry.find_team_for_player(p)) for p in players]


@router.post("", response_model=PlayerRow, status_code=201)
def register_player(body: PlayerCreate, registry: LeagueRegistry = Depends(get_registry)):
    player = registry.register_player(body.first_name, body.last_name, body.position)
    return PlayerRow.from_player(player)


@router.get("", response_model=list[PlayerRow])
def list_players(registry: LeagueRegistry = Depends(get_registry)):
    """Tutti i giocatori in ordine di registrazione, con nome squadra se tesserati."""
    return to_player_rows(registry.get_all_players(), registry)


@router.get("/search", response_model=list[PlayerRow])
def search_players(q: str, registry: LeagueRegistry = Depends(get_registry)):
    """
    Ricerca case-insensitive per sottostringa su nome o cognome.
    Nessun risultato = lista vuota, mai errore.
    """
    term = q.strip()
    if not term:
        raise HTTPException(status_code=400, detail="Il termine di ricerca non può essere vuoto")
    return to_player_rows(registry.search_players_by_name(term), registry)


@router.get("/unassigned", response_model=list[PlayerRow])
def unassigned_players(registry: LeagueRegistry = Depends(get_registry)):
    return to_player_rows(registry.get_unassigned_players(), registry)


@router.get("/assigned", response_model=list[PlayerRow])
def assigned_players(registry: LeagueRegistry = Depends(get_registry)):
    return to_player_rows(registry.get_assigned_player_list(), registry)


@router.get("/{player_id}", response_model=PlayerRow)
def get_player(player_id: int, registry: LeagueRegistry = Depends(get_registry)):
    player = registry.find_player_by_id(player_id)
    if player is None:
        raise HTTPException(status_code=404, detail="Giocatore non trovato")
    return PlayerRow.from_player(player, registry.find_team_for_player(player))


@router.put("/{player_id}/team", response_model=PlayerRow)
def assign_player(
    player_id: int,
    body: PlayerAssignment,
    registry: LeagueRegistry = Depends(get_registry),
):
    """
    Tessera il giocatore nella squadra indicata.
    404 se giocatore o squadra non esistono, 409 se la rosa è piena
    o il giocatore è già tesserato.
    """
    player = registry.find_player_by_id(player_id)
    if player is None:
        raise HTTPException(status_code=404, detail="Giocatore non trovato")
    team = registry.find_team_by_id(body.team_id)
    if team is None:
        raise HTTPException(status_code=404, detail="Squadra non trovata")

    if not registry.assign_player_to_team(player_id, body.team_id):
        logger.warning("Tesseramento rifiutato player_id=%s team_id=%s", player_id, body.team_id)
        raise HTTPException(
            status_code=409,
            detail="Tesseramento non possibile: rosa piena o giocatore già tesserato",
        )
    return PlayerRow.from_player(player, team)


@router.delete("/{player_id}/team", response_model=PlayerRow)
def remove_player(player_id: int, registry: LeagueRegistry = Depends(get_registry)):
    """Svincola il giocatore. 404 se non esiste, 409 se non è tesserato."""
    player = registry.find_player_by_id(player_id)
    if player is None:
        raise HTTPException(status_code=404, detail="Giocatore non trovato")

    if not registry.remove_player_from_team(player_id):
        logger.warning("Svincolo rifiutato player_id=%s", player_id)
        raise HTTPException(status_code=409, detail="Il giocatore non è tesserato con nessuna squadra")
    return PlayerRow.from_player(player)
