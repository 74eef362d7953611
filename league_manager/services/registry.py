"""
Registro in memoria della lega: squadre, giocatori e tesseramenti.
Assegna gli id, garantisce unicità dei nomi squadra e coerenza rosa <-> team_id.
Gli esiti negativi sono None / False / lista vuota, mai eccezioni.
"""

import logging
from threading import RLock

from league_manager.models import Player, Team

logger = logging.getLogger(__name__)


class LeagueRegistry:
    """
    Unico proprietario di squadre e giocatori.
    Ogni operazione gira sotto un solo lock: add/remove toccano Team e Player
    insieme e non devono intercalarsi con altri comandi.
    """

    def __init__(self):
        self._teams: list[Team] = []
        self._players: list[Player] = []
        self._next_team_id = 1
        self._next_player_id = 1
        self._lock = RLock()

    # --- Comandi ---

    def register_team(self, name: str, city: str) -> Team | None:
        """
        Registra una nuova squadra. None se il nome esiste già (case-insensitive):
        in quel caso nessun id viene consumato.
        """
        with self._lock:
            if self.find_team_by_name(name) is not None:
                logger.warning("register_team rifiutata: nome %r già registrato", name)
                return None

            team = Team(self._next_team_id, name, city)
            self._next_team_id += 1
            self._teams.append(team)
            logger.info("Squadra registrata: %r", team)
            return team

    def register_player(self, first_name: str, last_name: str, position: str) -> Player:
        with self._lock:
            player = Player(self._next_player_id, first_name, last_name, position)
            self._next_player_id += 1
            self._players.append(player)
            logger.info("Giocatore registrato: %r", player)
            return player

    def assign_player_to_team(self, player_id: int, team_id: int) -> bool:
        """
        Tessera il giocatore nella squadra.
        False se giocatore o squadra non esistono, se la rosa è piena
        o se il giocatore è già tesserato.
        """
        with self._lock:
            player = self.find_player_by_id(player_id)
            team = self.find_team_by_id(team_id)
            if player is None or team is None:
                logger.warning(
                    "assign rifiutata: player_id=%s trovato=%s team_id=%s trovato=%s",
                    player_id, player is not None, team_id, team is not None,
                )
                return False

            ok = team.add_player(player)
            if ok:
                logger.info("Giocatore %s tesserato con squadra %s", player_id, team_id)
            else:
                logger.warning(
                    "assign rifiutata: player_id=%s team_id=%s (rosa piena=%s, già tesserato=%s)",
                    player_id, team_id, team.is_full(), player.is_assigned,
                )
            return ok

    def remove_player_from_team(self, player_id: int) -> bool:
        """
        Svincola il giocatore dalla squadra corrente, risolta tramite il suo team_id.
        False se il giocatore non esiste o non è tesserato.
        """
        with self._lock:
            player = self.find_player_by_id(player_id)
            if player is None or not player.is_assigned:
                logger.warning("remove rifiutata: player_id=%s inesistente o svincolato", player_id)
                return False

            team = self.find_team_by_id(player.team_id)
            if team is None:
                logger.error(
                    "Incoerenza: player_id=%s punta a team_id=%s inesistente",
                    player_id, player.team_id,
                )
                return False

            ok = team.remove_player(player_id)
            if ok:
                logger.info("Giocatore %s svincolato da squadra %s", player_id, team.id)
            else:
                logger.error(
                    "Incoerenza: player_id=%s non presente nella rosa di team_id=%s",
                    player_id, team.id,
                )
            return ok

    # --- Ricerche ---

    def find_team_by_id(self, team_id: int) -> Team | None:
        with self._lock:
            for team in self._teams:
                if team.id == team_id:
                    return team
            return None

    def find_team_by_name(self, name: str) -> Team | None:
        with self._lock:
            wanted = name.lower()
            for team in self._teams:
                if team.name.lower() == wanted:
                    return team
            return None

    def find_player_by_id(self, player_id: int) -> Player | None:
        with self._lock:
            for player in self._players:
                if player.id == player_id:
                    return player
            return None

    def find_team_for_player(self, player: Player) -> Team | None:
        """Squadra corrente del giocatore, None se svincolato."""
        if not player.is_assigned:
            return None
        return self.find_team_by_id(player.team_id)

    def search_players_by_name(self, term: str) -> list[Player]:
        """Sottostringa case-insensitive su nome OPPURE cognome, in ordine di registrazione."""
        needle = term.lower()
        with self._lock:
            return [
                p for p in self._players
                if needle in p.first_name.lower() or needle in p.last_name.lower()
            ]

    def get_unassigned_players(self) -> list[Player]:
        with self._lock:
            return [p for p in self._players if not p.is_assigned]

    def get_assigned_player_list(self) -> list[Player]:
        with self._lock:
            return [p for p in self._players if p.is_assigned]

    def get_all_teams(self) -> list[Team]:
        with self._lock:
            return list(self._teams)

    def get_all_players(self) -> list[Player]:
        with self._lock:
            return list(self._players)

    # --- Aggregati (ricalcolati a ogni chiamata) ---

    def get_total_teams(self) -> int:
        with self._lock:
            return len(self._teams)

    def get_total_players(self) -> int:
        with self._lock:
            return len(self._players)

    def get_assigned_players(self) -> int:
        with self._lock:
            return sum(1 for p in self._players if p.is_assigned)

    def get_unassigned_count(self) -> int:
        with self._lock:
            return self.get_total_players() - self.get_assigned_players()
