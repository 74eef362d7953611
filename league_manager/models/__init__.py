from league_manager.models.player import Player
from league_manager.models.team import MAX_PLAYERS, Team

__all__ = [
    "MAX_PLAYERS",
    "Player",
    "Team",
]
