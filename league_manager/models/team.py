"""Team model. Squadra con rosa limitata a MAX_PLAYERS giocatori."""

from league_manager.models.player import Player

MAX_PLAYERS = 15


class Team:
    def __init__(self, id: int, name: str, city: str):
        self.id = id
        self.name = name
        self.city = city
        self._players: list[Player] = []

    @property
    def capacity(self) -> int:
        return MAX_PLAYERS

    @property
    def player_count(self) -> int:
        return len(self._players)

    def is_full(self) -> bool:
        return len(self._players) >= MAX_PLAYERS

    def add_player(self, player: Player) -> bool:
        """
        Aggiunge il giocatore in coda alla rosa e ne imposta team_id.
        False senza modifiche se la rosa è piena, se il giocatore è già
        tesserato (anche con questa squadra) o se il suo id è già in rosa.
        """
        if self.is_full():
            return False
        if player.is_assigned:
            return False
        if self.find_player(player.id) is not None:
            return False

        self._players.append(player)
        player.team_id = self.id
        return True

    def remove_player(self, player_id: int) -> bool:
        """Rimuove il giocatore dalla rosa e lo rende svincolato. False se non presente."""
        for i, player in enumerate(self._players):
            if player.id == player_id:
                removed = self._players.pop(i)
                removed.team_id = None
                return True
        return False

    def find_player(self, player_id: int) -> Player | None:
        for player in self._players:
            if player.id == player_id:
                return player
        return None

    def get_roster(self) -> list[Player]:
        """Copia della rosa in ordine di tesseramento."""
        return list(self._players)

    def __repr__(self) -> str:
        return (
            f"Team(id={self.id}, name={self.name!r}, city={self.city!r}, "
            f"players={len(self._players)}/{MAX_PLAYERS})"
        )
