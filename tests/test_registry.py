import logging
from concurrent.futures import ThreadPoolExecutor

from league_manager.models import MAX_PLAYERS
from league_manager.services.registry import LeagueRegistry


def _assert_consistent(registry: LeagueRegistry) -> None:
    teams = registry.get_all_teams()
    for player in registry.get_all_players():
        holders = [t for t in teams if t.find_player(player.id) is player]
        if player.is_assigned:
            assert len(holders) == 1
            assert holders[0].id == player.team_id
        else:
            assert holders == []
    for team in teams:
        assert team.player_count <= MAX_PLAYERS


class TestRegisterTeam:
    def test_ids_start_at_one(self, registry: LeagueRegistry) -> None:
        first = registry.register_team("Hornets", "Charlotte")
        second = registry.register_team("Lakers", "Los Angeles")
        assert first.id == 1
        assert second.id == 2

    def test_duplicate_name_any_case(self, registry: LeagueRegistry) -> None:
        registry.register_team("Hornets", "Charlotte")

        assert registry.register_team("hORNETS", "Elsewhere") is None
        assert registry.get_total_teams() == 1

    def test_failed_registration_does_not_consume_id(self, registry: LeagueRegistry) -> None:
        registry.register_team("Hornets", "Charlotte")
        registry.register_team("Hornets", "Charlotte")

        assert registry.register_team("Lakers", "Los Angeles").id == 2

    def test_duplicate_is_logged(self, registry: LeagueRegistry, caplog) -> None:
        registry.register_team("Hornets", "Charlotte")
        with caplog.at_level(logging.WARNING):
            registry.register_team("HORNETS", "Charlotte")
        assert "register_team rifiutata" in caplog.text


class TestLookups:
    def test_find_team(self, registry: LeagueRegistry) -> None:
        team = registry.register_team("Hornets", "Charlotte")
        assert registry.find_team_by_id(1) is team
        assert registry.find_team_by_id(2) is None
        assert registry.find_team_by_name("hornets") is team
        assert registry.find_team_by_name("Heat") is None

    def test_find_player(self, registry: LeagueRegistry) -> None:
        player = registry.register_player("Kyle", "Lowry", "Guard")
        assert player.id == 1
        assert registry.find_player_by_id(1) is player
        assert registry.find_player_by_id(2) is None

    def test_find_team_for_player(self, registry: LeagueRegistry) -> None:
        team = registry.register_team("Hornets", "Charlotte")
        player = registry.register_player("Kyle", "Lowry", "Guard")
        assert registry.find_team_for_player(player) is None

        registry.assign_player_to_team(player.id, team.id)
        assert registry.find_team_for_player(player) is team

    def test_listings_are_copies(self, registry: LeagueRegistry) -> None:
        registry.register_team("Hornets", "Charlotte")
        registry.register_player("Kyle", "Lowry", "Guard")

        registry.get_all_teams().clear()
        registry.get_all_players().clear()

        assert registry.get_total_teams() == 1
        assert registry.get_total_players() == 1


class TestAssignment:
    def test_assign_missing_entities(self, registry: LeagueRegistry) -> None:
        registry.register_team("Hornets", "Charlotte")
        registry.register_player("Kyle", "Lowry", "Guard")

        assert not registry.assign_player_to_team(1, 999)
        assert not registry.assign_player_to_team(999, 1)
        assert registry.get_assigned_players() == 0

    def test_assign_already_assigned(self, registry: LeagueRegistry) -> None:
        registry.register_team("Hornets", "Charlotte")
        registry.register_team("Lakers", "Los Angeles")
        registry.register_player("Kyle", "Lowry", "Guard")

        assert registry.assign_player_to_team(1, 1)
        assert not registry.assign_player_to_team(1, 1)
        assert not registry.assign_player_to_team(1, 2)
        assert registry.find_team_by_id(1).player_count == 1
        assert registry.find_team_by_id(2).player_count == 0
        _assert_consistent(registry)

    def test_sixteenth_player_rejected(self, registry: LeagueRegistry) -> None:
        team = registry.register_team("Hornets", "Charlotte")
        for i in range(MAX_PLAYERS + 1):
            registry.register_player("Player", str(i), "Guard")

        results = [registry.assign_player_to_team(pid, team.id) for pid in range(1, MAX_PLAYERS + 2)]

        assert results == [True] * MAX_PLAYERS + [False]
        assert team.player_count == MAX_PLAYERS
        assert not registry.find_player_by_id(MAX_PLAYERS + 1).is_assigned

    def test_concurrent_assignment_respects_capacity(self, registry: LeagueRegistry) -> None:
        team = registry.register_team("Hornets", "Charlotte")
        ids = [registry.register_player("Player", str(i), "Guard").id for i in range(40)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda pid: registry.assign_player_to_team(pid, team.id), ids))

        assert results.count(True) == MAX_PLAYERS
        assert team.player_count == MAX_PLAYERS
        assert registry.get_assigned_players() == MAX_PLAYERS
        _assert_consistent(registry)


class TestRemoval:
    def test_remove_unknown_or_unassigned(self, registry: LeagueRegistry) -> None:
        registry.register_player("Kyle", "Lowry", "Guard")
        assert not registry.remove_player_from_team(1)
        assert not registry.remove_player_from_team(999)

    def test_remove_then_reassign(self, registry: LeagueRegistry) -> None:
        registry.register_team("Hornets", "Charlotte")
        registry.register_team("Lakers", "Los Angeles")
        registry.register_player("Kyle", "Lowry", "Guard")
        registry.assign_player_to_team(1, 1)

        assert registry.remove_player_from_team(1)
        assert registry.assign_player_to_team(1, 2)
        assert registry.find_player_by_id(1).team_id == 2
        _assert_consistent(registry)

    def test_dangling_team_id_fails_without_mutation(self, registry: LeagueRegistry, caplog) -> None:
        player = registry.register_player("Kyle", "Lowry", "Guard")
        player.team_id = 42

        with caplog.at_level(logging.ERROR):
            assert not registry.remove_player_from_team(player.id)

        assert player.team_id == 42
        assert "Incoerenza" in caplog.text


class TestSearch:
    def test_matches_first_or_last_name(self, registry: LeagueRegistry) -> None:
        magic = registry.register_player("Magic", "Johnson", "Guard")
        registry.register_player("Kyle", "Lowry", "Guard")
        john = registry.register_player("John", "Smith", "Forward")

        assert registry.search_players_by_name("joh") == [magic, john]
        assert registry.search_players_by_name("JOH") == [magic, john]

    def test_substring_not_prefix(self, registry: LeagueRegistry) -> None:
        player = registry.register_player("DeMar", "DeRozan", "Forward")
        assert registry.search_players_by_name("roz") == [player]

    def test_no_match_is_empty(self, registry: LeagueRegistry) -> None:
        registry.register_player("Kyle", "Lowry", "Guard")
        assert registry.search_players_by_name("zzz") == []


class TestAggregates:
    def test_counts_and_lists(self, registry: LeagueRegistry) -> None:
        registry.register_team("Hornets", "Charlotte")
        a = registry.register_player("Kyle", "Lowry", "Guard")
        b = registry.register_player("DeMar", "DeRozan", "Forward")
        c = registry.register_player("Magic", "Johnson", "Guard")
        registry.assign_player_to_team(b.id, 1)

        assert registry.get_total_teams() == 1
        assert registry.get_total_players() == 3
        assert registry.get_assigned_players() == 1
        assert registry.get_unassigned_count() == 2
        assert registry.get_unassigned_players() == [a, c]
        assert registry.get_assigned_player_list() == [b]


def test_end_to_end_scenario(registry: LeagueRegistry) -> None:
    team = registry.register_team("Hornets", "Charlotte")
    assert team.id == 1
    assert registry.register_team("Hornets", "Charlotte") is None
    assert registry.get_total_teams() == 1

    lowry = registry.register_player("Kyle", "Lowry", "Guard")
    derozan = registry.register_player("DeMar", "DeRozan", "Forward")
    assert (lowry.id, derozan.id) == (1, 2)

    assert registry.assign_player_to_team(1, 1)
    assert team.player_count == 1
    assert registry.get_assigned_players() == 1

    assert not registry.assign_player_to_team(2, 999)
    assert registry.get_assigned_players() == 1

    assert registry.remove_player_from_team(1)
    assert team.player_count == 0
    assert not lowry.is_assigned
    assert registry.get_assigned_players() == 0
    _assert_consistent(registry)
