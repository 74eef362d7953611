"""Pydantic schemas per API Players."""

from pydantic import BaseModel, field_validator

from league_manager.models import Player, Team


class PlayerCreate(BaseModel):
    first_name: str
    last_name: str
    position: str

    @field_validator("first_name", "last_name", "position")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v


class PlayerAssignment(BaseModel):
    team_id: int


class PlayerRow(BaseModel):
    """Giocatore con nome squadra risolto per la visualizzazione (None = svincolato)."""
    player_id: int
    first_name: str
    last_name: str
    position: str
    team_id: int | None = None
    team_name: str | None = None
    is_assigned: bool = False

    @classmethod
    def from_player(cls, player: Player, team: Team | None = None) -> "PlayerRow":
        return cls(
            player_id=player.id,
            first_name=player.first_name,
            last_name=player.last_name,
            position=player.position,
            team_id=player.team_id,
            team_name=team.name if team is not None else None,
            is_assigned=player.is_assigned,
        )
