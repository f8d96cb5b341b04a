import pytest

from src.league_engine.domain.entities.draft_state import DraftState
from src.league_engine.domain.services.draft_status import DraftStatus


@pytest.fixture
def status():
    return DraftStatus()


def test_start_only_from_pending(status):
    result = status.can_start(DraftState.PENDING)
    assert result.allowed
    assert result.new_status == DraftState.ACTIVE

    for state in DraftState:
        if state != DraftState.PENDING:
            rejected = status.can_start(state)
            assert not rejected.allowed
            assert "PENDING" in rejected.error_message


@pytest.mark.parametrize("state", [DraftState.ACTIVE, DraftState.IN_PROGRESS])
def test_pause_running_draft(status, state):
    result = status.can_pause(state)
    assert result.allowed
    assert result.new_status == DraftState.PAUSED


def test_pause_rejected_when_not_running(status):
    result = status.can_pause(DraftState.PENDING)
    assert not result.allowed
    assert "ACTIVE or IN_PROGRESS" in result.error_message


def test_resume_only_from_paused(status):
    assert status.can_resume(DraftState.PAUSED).new_status == DraftState.ACTIVE

    result = status.can_resume(DraftState.ACTIVE)
    assert not result.allowed
    assert "PAUSED" in result.error_message


def test_finish_requires_all_picks(status):
    result = status.can_finish(DraftState.ACTIVE, False)
    assert not result.allowed
    assert "picks remaining" in result.error_message

    assert status.can_finish(DraftState.IN_PROGRESS, True).new_status == DraftState.FINISHED


def test_finish_reports_remaining_picks_first(status):
    """A paused draft with picks left is rejected for the picks, not the status"""
    result = status.can_finish(DraftState.PAUSED, False)
    assert "picks remaining" in result.error_message


def test_finish_rejected_when_not_running(status):
    result = status.can_finish(DraftState.PAUSED, True)
    assert not result.allowed
    assert "ACTIVE or IN_PROGRESS" in result.error_message


@pytest.mark.parametrize(
    "state", [DraftState.PENDING, DraftState.ACTIVE, DraftState.IN_PROGRESS, DraftState.PAUSED]
)
def test_cancel_from_non_terminal(status, state):
    assert status.can_cancel(state).new_status == DraftState.CANCELLED


def test_cancel_from_terminal(status):
    assert "already finished" in status.can_cancel(DraftState.FINISHED).error_message
    assert "already cancelled" in status.can_cancel(DraftState.CANCELLED).error_message


def test_terminal_and_pick_states(status):
    assert status.is_terminal(DraftState.FINISHED)
    assert status.is_terminal(DraftState.CANCELLED)
    assert not status.is_terminal(DraftState.PAUSED)

    assert status.allows_picks(DraftState.ACTIVE)
    assert status.allows_picks(DraftState.IN_PROGRESS)
    assert not status.allows_picks(DraftState.PAUSED)
    assert not status.allows_picks(DraftState.PENDING)


def test_successful_transitions_follow_state_table(status):
    """Every allowed outcome is an edge of the DraftState transition table"""
    for state in DraftState:
        for result in (
            status.can_start(state),
            status.can_pause(state),
            status.can_resume(state),
            status.can_finish(state, True),
            status.can_cancel(state),
        ):
            if result.allowed:
                assert state.can_transition_to(result.new_status)
            else:
                assert result.new_status is None
                assert result.error_message
