"""Player model. Dati anagrafici giocatore e squadra corrente."""

from dataclasses import dataclass


@dataclass(eq=False)
class Player:
    id: int
    first_name: str
    last_name: str
    position: str
    # None = svincolato. Modificato solo da Team.add_player / Team.remove_player.
    team_id: int | None = None

    @property
    def is_assigned(self) -> bool:
        return self.team_id is not None
