"""Pydantic schemas per API Teams."""

from pydantic import BaseModel, field_validator

from league_manager.models import Team


class TeamCreate(BaseModel):
    name: str
    city: str

    @field_validator("name", "city")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v


class TeamRow(BaseModel):
    team_id: int
    team_name: str
    city: str
    player_count: int
    capacity: int
    is_full: bool

    @classmethod
    def from_team(cls, team: Team) -> "TeamRow":
        return cls(
            team_id=team.id,
            team_name=team.name,
            city=team.city,
            player_count=team.player_count,
            capacity=team.capacity,
            is_full=team.is_full(),
        )
