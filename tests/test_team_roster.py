import pytest

from src.league_engine.domain.services.team_roster import TeamRoster


@pytest.fixture
def roster():
    return TeamRoster()


def test_add_player_to_empty_roster(roster):
    assert roster.can_add_player([], "p1", [], 1).valid


def test_add_player_requires_id(roster):
    result = roster.can_add_player([], None, [], 1)
    assert "Player ID is required" in result.error_message


def test_add_duplicate_player(roster):
    result = roster.can_add_player(["p1"], "p1", [1], 2)
    assert "already on the team" in result.error_message


def test_add_player_to_full_roster(roster):
    players = [f"p{i}" for i in range(10)]
    result = roster.can_add_player(players, "new", list(range(1, 11)), 11)
    assert not result.valid
    assert "roster is full (max 10)" in result.error_message


def test_custom_roster_limit(roster):
    result = roster.can_add_player(["p1", "p2"], "p3", [1, 2], 3, max_roster_size=2)
    assert "max 2" in result.error_message


@pytest.mark.parametrize("position", [0, 4, -1])
def test_position_out_of_range(roster, position):
    result = roster.can_add_player(["p1", "p2"], "p3", [1, 2], position)
    assert "must be between 1 and 3" in result.error_message


def test_position_taken(roster):
    result = roster.can_add_player(["p1", "p2"], "p3", [1, 2], 2)
    assert "Position 2 is already taken" in result.error_message


def test_position_gap_can_be_filled(roster):
    # p2 left position 2; it can be refilled
    assert roster.can_add_player(["p1", "p3"], "p4", [1, 3], 2).valid


def test_validate_unique_positions(roster):
    assert roster.validate_unique_positions([1, 2, 3]).valid
    assert roster.validate_unique_positions([]).valid
    assert roster.validate_unique_positions(None).valid


def test_validate_positions_rejects_duplicates(roster):
    result = roster.validate_unique_positions([1, 2, 2])
    assert "Duplicate position found: 2" in result.error_message


@pytest.mark.parametrize("positions", [[1, 0], [-1], [1, None]])
def test_validate_positions_rejects_non_positive(roster, positions):
    result = roster.validate_unique_positions(positions)
    assert "positive integers" in result.error_message


def test_next_available_position(roster):
    assert roster.next_available_position([]) == 1
    assert roster.next_available_position(None) == 1
    assert roster.next_available_position([1, 2, 3]) == 4
    # Gaps are not refilled
    assert roster.next_available_position([1, 5]) == 6


def test_remove_player(roster):
    assert roster.can_remove_player(["p1", "p2"], "p1").valid
    assert roster.can_remove_player(["p1", "p2"], "p1", 1).valid


def test_remove_player_errors(roster):
    assert "Player ID is required" in roster.can_remove_player(["p1"], None).error_message
    assert "not on the team" in roster.can_remove_player(["p1"], "p9").error_message


def test_remove_player_respects_minimum(roster):
    result = roster.can_remove_player(["p1"], "p1", 1)
    assert not result.valid
    assert "minimum roster size is 1" in result.error_message


def test_is_valid_position(roster):
    assert roster.is_valid_position(1, 0)
    assert roster.is_valid_position(4, 3)
    assert not roster.is_valid_position(5, 3)
    assert not roster.is_valid_position(0, 3)
