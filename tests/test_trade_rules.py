from datetime import datetime, timedelta, timezone

import pytest

from src.league_engine.domain.entities.trade_status import TradeStatus
from src.league_engine.domain.services.trade_rules import TradeRules

SOURCE = {"p1", "p2", "p3"}
TARGET = {"p4", "p5", "p6"}


@pytest.fixture
def rules():
    return TradeRules()


def test_valid_proposal(rules):
    assert rules.validate_trade_proposal("A", "B", {"p1"}, {"p4"}, SOURCE, TARGET).valid


def test_both_teams_required(rules):
    result = rules.validate_trade_proposal(None, "B", {"p1"}, {"p4"}, SOURCE, TARGET)
    assert "Both teams must be specified" in result.error_message


def test_cannot_trade_with_self(rules):
    result = rules.validate_trade_proposal("A", "A", {"p1"}, {"p4"}, SOURCE, TARGET)
    assert "same team" in result.error_message


@pytest.mark.parametrize("offered", [set(), None])
def test_must_offer_players(rules, offered):
    result = rules.validate_trade_proposal("A", "B", offered, {"p4"}, SOURCE, TARGET)
    assert "Must offer at least one player" in result.error_message


def test_must_request_players(rules):
    result = rules.validate_trade_proposal("A", "B", {"p1"}, set(), SOURCE, TARGET)
    assert "Must request at least one player" in result.error_message


def test_offered_player_must_be_on_source(rules):
    result = rules.validate_trade_proposal("A", "B", {"p9"}, {"p4"}, SOURCE, TARGET)
    assert "Offered player p9" in result.error_message


def test_requested_player_must_be_on_target(rules):
    result = rules.validate_trade_proposal("A", "B", {"p1"}, {"p1"}, SOURCE, TARGET)
    assert "Requested player p1" in result.error_message


def test_player_on_both_sides_rejected(rules):
    # Only reachable when the rosters themselves overlap
    result = rules.validate_trade_proposal("A", "B", {"p1"}, {"p1"}, SOURCE, SOURCE | TARGET)
    assert "both sides" in result.error_message


def test_players_per_side_limit(rules):
    result = rules.validate_trade_proposal(
        "A", "B", {"p1", "p2"}, {"p4"}, SOURCE, TARGET, max_players_per_side=1
    )
    assert "at most 1 players per side" in result.error_message
    assert rules.validate_trade_proposal(
        "A", "B", {"p1", "p2"}, {"p4", "p5"}, SOURCE, TARGET, max_players_per_side=2
    ).valid


def test_proposal_rules_checked_in_order(rules):
    result = rules.validate_trade_proposal("A", "A", set(), set(), set(), set())
    assert "same team" in result.error_message


def test_can_trade_when_open(rules):
    assert rules.can_trade(True, None, 0, 5).valid


def test_can_trade_disabled(rules):
    result = rules.can_trade(False, None, 0, 5)
    assert "not enabled" in result.error_message


def test_can_trade_after_deadline(rules):
    deadline = datetime(2026, 1, 1, tzinfo=timezone.utc)
    result = rules.can_trade(True, deadline, 0, 5, now=deadline + timedelta(seconds=1))
    assert "deadline has passed" in result.error_message


def test_can_trade_at_deadline(rules):
    deadline = datetime(2026, 1, 1, tzinfo=timezone.utc)
    assert rules.can_trade(True, deadline, 0, 5, now=deadline).valid


def test_can_trade_uses_clock_when_now_omitted(rules):
    past = datetime.now(timezone.utc) - timedelta(days=1)
    future = datetime.now(timezone.utc) + timedelta(days=1)
    assert not rules.can_trade(True, past, 0, 5).valid
    assert rules.can_trade(True, future, 0, 5).valid


def test_can_trade_limit_reached(rules):
    result = rules.can_trade(True, None, 5, 5)
    assert "trade limit (5)" in result.error_message


@pytest.mark.parametrize(
    "check,target",
    [
        ("can_accept", TradeStatus.ACCEPTED),
        ("can_reject", TradeStatus.REJECTED),
        ("can_cancel", TradeStatus.CANCELLED),
        ("can_counter", TradeStatus.COUNTERED),
    ],
)
def test_transitions_only_from_pending(rules, check, target):
    result = getattr(rules, check)(TradeStatus.PENDING)
    assert result.allowed
    assert result.new_status == target

    for status in TradeStatus:
        if status != TradeStatus.PENDING:
            rejected = getattr(rules, check)(status)
            assert not rejected.allowed
            assert "Only PENDING trades" in rejected.error_message


def test_terminal_statuses(rules):
    assert rules.is_terminal(TradeStatus.ACCEPTED)
    assert rules.is_terminal(TradeStatus.REJECTED)
    assert rules.is_terminal(TradeStatus.CANCELLED)
    assert not rules.is_terminal(TradeStatus.PENDING)
    assert not rules.is_terminal(TradeStatus.COUNTERED)
