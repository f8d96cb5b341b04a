"""
Trade Rules - Domain Service

Validation of trade proposals, the game-level trading window, and the trade
status machine. Every rejection names the failed condition.
"""

from datetime import datetime
from typing import Collection, Hashable, Optional

from ..entities.results import TransitionResult, ValidationResult
from ..entities.trade_status import TradeStatus


class TradeRules:
    """Domain service for trades between two rosters"""

    _TERMINAL = frozenset({TradeStatus.ACCEPTED, TradeStatus.REJECTED, TradeStatus.CANCELLED})

    def validate_trade_proposal(
        self,
        from_team_id: Optional[Hashable],
        to_team_id: Optional[Hashable],
        offered_ids: Optional[Collection[Hashable]],
        requested_ids: Optional[Collection[Hashable]],
        source_roster_ids: Collection[Hashable],
        target_roster_ids: Collection[Hashable],
        *,
        max_players_per_side: Optional[int] = None,
    ) -> ValidationResult:
        """Validate a proposal against both active rosters.

        Args:
            from_team_id: Proposing team
            to_team_id: Receiving team
            offered_ids: Players leaving the proposing team
            requested_ids: Players leaving the receiving team
            source_roster_ids: Active roster of the proposing team
            target_roster_ids: Active roster of the receiving team
            max_players_per_side: Optional cap on players per side

        Returns:
            ValidationResult: First violated rule, in declaration order
        """
        if from_team_id is None or to_team_id is None:
            return ValidationResult.failure("Both teams must be specified")
        if from_team_id == to_team_id:
            return ValidationResult.failure("Cannot trade with the same team")
        if not offered_ids:
            return ValidationResult.failure("Must offer at least one player")
        if not requested_ids:
            return ValidationResult.failure("Must request at least one player")

        for player_id in offered_ids:
            if player_id not in source_roster_ids:
                return ValidationResult.failure(f"Offered player {player_id} is not on the source team")

        for player_id in requested_ids:
            if player_id not in target_roster_ids:
                return ValidationResult.failure(f"Requested player {player_id} is not on the target team")

        if set(offered_ids) & set(requested_ids):
            return ValidationResult.failure("A player cannot appear on both sides of a trade")

        if max_players_per_side is not None and max(len(offered_ids), len(requested_ids)) > max_players_per_side:
            return ValidationResult.failure(
                f"A trade can include at most {max_players_per_side} players per side"
            )
        return ValidationResult.success()

    def can_trade(
        self,
        trading_enabled: bool,
        deadline: Optional[datetime],
        current_trade_count: int,
        max_trades: int,
        now: Optional[datetime] = None,
    ) -> ValidationResult:
        """Check the game-level trading window for a team.

        ``now`` is compared against ``deadline``; when omitted the current time
        in the deadline's timezone is used.
        """
        if not trading_enabled:
            return ValidationResult.failure("Trading is not enabled for this game")
        if deadline is not None:
            if now is None:
                now = datetime.now(deadline.tzinfo)
            if now > deadline:
                return ValidationResult.failure("Trade deadline has passed")
        if current_trade_count >= max_trades:
            return ValidationResult.failure(f"Team has reached the trade limit ({max_trades})")
        return ValidationResult.success()

    def can_accept(self, status: TradeStatus) -> TransitionResult:
        return self._from_pending(status, TradeStatus.ACCEPTED, "accepted")

    def can_reject(self, status: TradeStatus) -> TransitionResult:
        return self._from_pending(status, TradeStatus.REJECTED, "rejected")

    def can_cancel(self, status: TradeStatus) -> TransitionResult:
        return self._from_pending(status, TradeStatus.CANCELLED, "cancelled")

    def can_counter(self, status: TradeStatus) -> TransitionResult:
        return self._from_pending(status, TradeStatus.COUNTERED, "countered")

    def is_terminal(self, status: TradeStatus) -> bool:
        return status in self._TERMINAL

    def _from_pending(self, status: TradeStatus, target: TradeStatus, verb: str) -> TransitionResult:
        if not status.can_transition_to(target):
            return TransitionResult.failure(
                f"Only PENDING trades can be {verb} (current: {status.name})"
            )
        return TransitionResult.success(target)
