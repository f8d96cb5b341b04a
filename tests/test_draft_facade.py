import pytest

from src.league_engine.application.draft_facade import DraftDomainFacade
from src.league_engine.domain.entities.draft_state import DraftState
from src.league_engine.domain.entities.game import Game
from src.league_engine.domain.entities.pick_position import PickPosition
from src.league_engine.domain.exceptions import InvalidArgumentError, InvalidStateTransitionError
from src.league_engine.infrastructure.config_adapter import LeagueConfigurationAdapter


@pytest.fixture
def game():
    return Game(name="League", creator_id="c", max_participants=8, participant_ids=["u2", "u3", "u4"])


def test_create_draft(draft_facade, game):
    draft = draft_facade.create_draft(game)

    assert draft.game_id == game.game_id
    assert draft.participant_count == 4
    assert draft.total_rounds == 3
    assert draft.status == DraftState.PENDING
    assert draft.position == PickPosition(1, 1)
    assert draft.snake


def test_create_draft_uses_configuration(game):
    config = LeagueConfigurationAdapter(environ={"LEAGUE_PLAYERS_PER_TEAM": "5", "LEAGUE_SNAKE_DRAFT": "false"})
    draft = DraftDomainFacade(config).create_draft(game)

    assert draft.total_rounds == 5
    assert not draft.snake


def test_run_state_changes(draft_facade, game, now):
    draft = draft_facade.create_draft(game)

    assert draft_facade.try_start(draft, now).allowed
    assert draft.status == DraftState.ACTIVE
    assert draft.started_at == now

    assert draft_facade.try_pause(draft).allowed
    assert not draft_facade.can_make_pick(draft)
    assert draft_facade.try_resume(draft).allowed
    assert draft.status == DraftState.ACTIVE

    result = draft_facade.try_finish(draft)
    assert "picks remaining" in result.error_message
    assert draft.status == DraftState.ACTIVE

    assert draft_facade.try_cancel(draft).allowed
    assert draft.status == DraftState.CANCELLED
    assert draft_facade.try_cancel(draft).error_message == "Draft is already cancelled"


def test_picks_require_running_draft(draft_facade, game):
    draft = draft_facade.create_draft(game)

    with pytest.raises(InvalidStateTransitionError):
        draft_facade.advance_to_next_pick(draft)
    assert draft.position == PickPosition(1, 1)


def test_snake_draft_order(draft_facade):
    """Four participants, snake order, three rounds"""
    game = Game(name="League", creator_id="A", max_participants=4, participant_ids=["B", "C", "D"])
    draft = draft_facade.create_draft(game)
    draft_facade.try_start(draft)

    pickers = []
    while draft_facade.can_make_pick(draft):
        pickers.append(draft_facade.get_current_picker_id(draft, game.draft_order))
        draft_facade.advance_to_next_pick(draft)

    assert "".join(pickers) == "ABCDDCBAABCD"
    assert draft_facade.is_draft_complete(draft)
    assert draft_facade.get_remaining_picks(draft) == 0

    with pytest.raises(InvalidStateTransitionError, match="no picks remaining"):
        draft_facade.advance_to_next_pick(draft)

    assert draft_facade.try_finish(draft).allowed
    assert draft.status == DraftState.FINISHED
    assert draft.finished_at is not None


def test_straight_picker_override(draft_facade, game):
    draft = draft_facade.create_draft(game)
    draft_facade.try_start(draft)
    for _ in range(4):
        draft_facade.advance_to_next_pick(draft)

    assert draft.position == PickPosition(2, 1)
    assert draft_facade.get_current_picker_index(draft) == 3
    assert draft_facade.get_current_picker_index(draft, snake=False) == 0


def test_picker_id_requires_matching_order(draft_facade, game):
    draft = draft_facade.create_draft(game)
    with pytest.raises(InvalidArgumentError):
        draft_facade.get_current_picker_id(draft, ["only", "two"])


def test_describe(draft_facade, game):
    draft = draft_facade.create_draft(game)
    draft_facade.try_start(draft)
    draft_facade.advance_to_next_pick(draft)
    progress = draft_facade.describe(draft)

    assert progress.status == "active"
    assert progress.round == 1
    assert progress.pick == 2
    assert progress.total_picks == 12
    assert progress.remaining_picks == 11
    assert progress.current_picker_index == 1
    assert not progress.is_complete


def test_no_picker_once_complete(draft_facade, game):
    draft = draft_facade.create_draft(game)
    draft_facade.try_start(draft)
    while draft_facade.can_make_pick(draft):
        draft_facade.advance_to_next_pick(draft)

    with pytest.raises(InvalidStateTransitionError, match="no picks remaining"):
        draft_facade.get_current_picker_index(draft)
    with pytest.raises(InvalidStateTransitionError):
        draft_facade.get_current_picker_id(draft, game.draft_order)
    assert draft_facade.describe(draft).current_picker_index is None
