"""
Trade Domain Facade

Proposes trades and drives them through the trade status machine, swapping
players between rosters when a trade is accepted.
"""

import logging
from datetime import datetime, timezone
from typing import Collection, Hashable, Optional

from ..domain.entities.results import TransitionResult, ValidationResult
from ..domain.entities.team import RosterSlot, Team
from ..domain.entities.trade import Trade
from ..domain.entities.trade_status import TradeStatus
from ..domain.exceptions import InvalidStateTransitionError, ValidationError
from ..domain.services.trade_rules import TradeRules
from .interfaces import ILeagueConfiguration
from .team_facade import TeamDomainFacade

logger = logging.getLogger(__name__)


class TradeDomainFacade:
    """
    Application facade for trades.

    All methods that change state raise ValidationError (or its
    InvalidStateTransitionError subclass) when the rules reject the action,
    leaving trades and teams untouched.
    """

    def __init__(self, configuration: ILeagueConfiguration, team_facade: TeamDomainFacade):
        self._configuration = configuration
        self._team_facade = team_facade
        self._rules = TradeRules()

    def can_trade(self, team: Team, now: Optional[datetime] = None) -> ValidationResult:
        return self._rules.can_trade(
            self._configuration.is_trading_enabled(),
            self._configuration.get_trade_deadline(),
            team.completed_trades_count,
            self._configuration.get_max_trades_per_team(),
            now=now,
        )

    def validate_proposal(
        self,
        from_team: Team,
        to_team: Team,
        offered: Collection[Hashable],
        requested: Collection[Hashable],
    ) -> ValidationResult:
        return self._rules.validate_trade_proposal(
            from_team.team_id,
            to_team.team_id,
            offered,
            requested,
            from_team.active_player_ids,
            to_team.active_player_ids,
            max_players_per_side=self._configuration.get_max_players_per_trade_side(),
        )

    def propose(
        self,
        from_team: Team,
        to_team: Team,
        offered: Collection[Hashable],
        requested: Collection[Hashable],
        now: Optional[datetime] = None,
    ) -> Trade:
        self._check_trade_window(from_team, to_team, now)
        self._raise_if_invalid(self.validate_proposal(from_team, to_team, offered, requested))

        trade = Trade(
            from_team_id=from_team.team_id,
            to_team_id=to_team.team_id,
            offered_player_ids=frozenset(offered),
            requested_player_ids=frozenset(requested),
            proposed_at=now or datetime.now(timezone.utc),
        )
        logger.info(
            f"Trade {trade.trade_id} proposed: team {from_team.team_id} offers "
            f"{sorted(map(str, trade.offered_player_ids))} for {sorted(map(str, trade.requested_player_ids))}"
        )
        return trade

    def accept(self, trade: Trade, from_team: Team, to_team: Team, now: Optional[datetime] = None) -> Trade:
        """Accept a pending trade and swap the players between both rosters"""
        self._check_teams(trade, from_team, to_team)
        self._raise_if_denied(self._rules.can_accept(trade.status))
        # Rosters may have changed since the proposal was made.
        self._raise_if_invalid(
            self.validate_proposal(from_team, to_team, trade.offered_player_ids, trade.requested_player_ids)
        )
        self._check_roster_sizes(trade, from_team, to_team)
        self._check_trade_window(from_team, to_team, now)

        now = now or datetime.now(timezone.utc)
        self._close_slots(from_team, trade.offered_player_ids, now)
        self._close_slots(to_team, trade.requested_player_ids, now)
        self._open_slots(from_team, trade.requested_player_ids)
        self._open_slots(to_team, trade.offered_player_ids)

        from_team.completed_trades_count += 1
        to_team.completed_trades_count += 1
        trade.status = TradeStatus.ACCEPTED
        trade.accepted_at = now
        logger.info(f"Trade {trade.trade_id} accepted")
        return trade

    def reject(self, trade: Trade, now: Optional[datetime] = None) -> Trade:
        trade.status = self._raise_if_denied(self._rules.can_reject(trade.status))
        trade.rejected_at = now or datetime.now(timezone.utc)
        logger.info(f"Trade {trade.trade_id} rejected")
        return trade

    def cancel(self, trade: Trade, now: Optional[datetime] = None) -> Trade:
        trade.status = self._raise_if_denied(self._rules.can_cancel(trade.status))
        trade.cancelled_at = now or datetime.now(timezone.utc)
        logger.info(f"Trade {trade.trade_id} cancelled")
        return trade

    def counter(
        self,
        trade: Trade,
        from_team: Team,
        to_team: Team,
        offered: Collection[Hashable],
        requested: Collection[Hashable],
        now: Optional[datetime] = None,
    ) -> Trade:
        """Counter a pending trade on behalf of its receiving team.

        ``offered`` comes from ``to_team`` and ``requested`` from ``from_team``.
        The original trade is marked COUNTERED only if the counter-offer is valid.
        """
        self._check_teams(trade, from_team, to_team)
        result = self._rules.can_counter(trade.status)
        self._raise_if_denied(result)

        counter_offer = self.propose(to_team, from_team, offered, requested, now)
        counter_offer.original_trade_id = trade.trade_id
        trade.status = result.new_status
        logger.info(f"Trade {trade.trade_id} countered by {counter_offer.trade_id}")
        return counter_offer

    def is_terminal(self, trade: Trade) -> bool:
        return self._rules.is_terminal(trade.status)

    # ====================
    # Helpers
    # ====================

    def _raise_if_invalid(self, result: ValidationResult) -> None:
        if not result.valid:
            logger.debug(f"Trade rejected: {result.error_message}")
            raise ValidationError(result.error_message)

    def _raise_if_denied(self, result: TransitionResult) -> TradeStatus:
        if not result.allowed:
            raise InvalidStateTransitionError(result.error_message)
        return result.new_status

    def _check_trade_window(self, from_team: Team, to_team: Team, now: Optional[datetime]) -> None:
        # Both sides count the trade, so both must still be under the limit
        self._raise_if_invalid(self.can_trade(from_team, now))
        self._raise_if_invalid(self.can_trade(to_team, now))

    def _check_teams(self, trade: Trade, from_team: Team, to_team: Team) -> None:
        if trade.from_team_id != from_team.team_id or trade.to_team_id != to_team.team_id:
            raise ValidationError(f"Teams do not match trade {trade.trade_id}")

    def _check_roster_sizes(self, trade: Trade, from_team: Team, to_team: Team) -> None:
        delta = len(trade.requested_player_ids) - len(trade.offered_player_ids)
        max_size = self._configuration.get_max_roster_size()
        min_size = self._configuration.get_min_roster_size()
        for team, size in ((from_team, from_team.roster_size + delta), (to_team, to_team.roster_size - delta)):
            if size > max_size:
                raise ValidationError(f"Team {team.team_id} roster is full (max {max_size})")
            if size < min_size:
                raise ValidationError(f"Team {team.team_id} would drop below minimum roster size {min_size}")

    def _close_slots(self, team: Team, player_ids: Collection[Hashable], now: datetime) -> None:
        for player_id in player_ids:
            team.get_active_slot(player_id).until = now

    def _open_slots(self, team: Team, player_ids: Collection[Hashable]) -> None:
        for player_id in sorted(player_ids, key=str):
            team.slots.append(RosterSlot(player_id=player_id, position=self._team_facade.default_position(team)))
