"""
Draft Domain Facade

Bridges Draft snapshots with the progression and run-state rules.
"""

import logging
from datetime import datetime, timezone
from typing import Hashable, Optional, Sequence

from ..domain.entities.draft import Draft
from ..domain.entities.game import Game
from ..domain.entities.pick_position import PickPosition
from ..domain.entities.results import TransitionResult
from ..domain.exceptions import InvalidArgumentError, InvalidStateTransitionError
from ..domain.services.draft_progression import DraftProgression
from ..domain.services.draft_status import DraftStatus
from .dto import DraftProgressDTO
from .interfaces import ILeagueConfiguration

logger = logging.getLogger(__name__)


class DraftDomainFacade:
    """
    Application facade for running a draft.

    Keeps the draft's round/pick cursor in step with DraftProgression and
    gates run-state changes through DraftStatus.
    """

    def __init__(self, configuration: ILeagueConfiguration):
        self._configuration = configuration
        self._progression = DraftProgression()
        self._status = DraftStatus()

    def create_draft(self, game: Game, players_per_team: Optional[int] = None) -> Draft:
        """Create a PENDING draft sized for the game's current participants"""
        participant_count = game.total_participant_count
        if players_per_team is None:
            players_per_team = self._configuration.get_players_per_team()

        total_rounds = self._progression.calculate_total_rounds(participant_count, players_per_team)
        draft = Draft(
            game_id=game.game_id,
            participant_count=participant_count,
            total_rounds=total_rounds,
            snake=self._configuration.use_snake_draft(),
        )
        logger.info(
            f"Created draft {draft.draft_id} for game {game.game_id}: "
            f"{participant_count} participants, {total_rounds} rounds"
        )
        return draft

    # ====================
    # Run State
    # ====================

    def try_start(self, draft: Draft, now: Optional[datetime] = None) -> TransitionResult:
        result = self._apply(draft, self._status.can_start(draft.status), now)
        if result.allowed:
            draft.started_at = draft.updated_at
        return result

    def try_pause(self, draft: Draft, now: Optional[datetime] = None) -> TransitionResult:
        return self._apply(draft, self._status.can_pause(draft.status), now)

    def try_resume(self, draft: Draft, now: Optional[datetime] = None) -> TransitionResult:
        return self._apply(draft, self._status.can_resume(draft.status), now)

    def try_finish(self, draft: Draft, now: Optional[datetime] = None) -> TransitionResult:
        result = self._apply(draft, self._status.can_finish(draft.status, self.is_draft_complete(draft)), now)
        if result.allowed:
            draft.finished_at = draft.updated_at
        return result

    def try_cancel(self, draft: Draft, now: Optional[datetime] = None) -> TransitionResult:
        return self._apply(draft, self._status.can_cancel(draft.status), now)

    def _apply(self, draft: Draft, result: TransitionResult, now: Optional[datetime]) -> TransitionResult:
        if result.allowed:
            logger.info(f"Draft {draft.draft_id}: {draft.status.name} -> {result.new_status.name}")
            draft.status = result.new_status
            draft.updated_at = now or datetime.now(timezone.utc)
        else:
            logger.debug(f"Draft {draft.draft_id} transition rejected: {result.error_message}")
        return result

    # ====================
    # Picks
    # ====================

    def can_make_pick(self, draft: Draft) -> bool:
        return self._status.allows_picks(draft.status) and not self.is_draft_complete(draft)

    def advance_to_next_pick(self, draft: Draft, now: Optional[datetime] = None) -> PickPosition:
        """Move the cursor past the current pick.

        Raises:
            InvalidStateTransitionError: If the draft is not accepting picks
        """
        if not self._status.allows_picks(draft.status):
            raise InvalidStateTransitionError(
                f"Draft does not accept picks in {draft.status.name} status"
            )
        if self.is_draft_complete(draft):
            raise InvalidStateTransitionError("Draft is complete - no picks remaining")

        position = self._progression.next_pick(draft.current_round, draft.current_pick, draft.participant_count)
        draft.move_to(position)
        draft.updated_at = now or datetime.now(timezone.utc)

        if self.is_draft_complete(draft):
            logger.info(f"Draft {draft.draft_id}: final pick made")
        return position

    def is_draft_complete(self, draft: Draft) -> bool:
        return self._progression.is_draft_complete(draft.current_round, draft.total_rounds)

    def get_remaining_picks(self, draft: Draft) -> int:
        return self._progression.remaining_picks(
            draft.current_round, draft.current_pick, draft.total_rounds, draft.participant_count
        )

    def get_current_picker_index(self, draft: Draft, snake: Optional[bool] = None) -> int:
        """0-based draft-order index of whoever is on the clock.

        Raises:
            InvalidStateTransitionError: If the draft has no picks left
        """
        if self.is_draft_complete(draft):
            raise InvalidStateTransitionError("Draft is complete - no picks remaining")
        if snake is None:
            snake = draft.snake
        return self._progression.get_participant_for_pick(
            draft.current_pick, draft.current_round, draft.participant_count, snake
        )

    def get_current_picker_id(self, draft: Draft, draft_order: Sequence[Hashable]) -> Hashable:
        if len(draft_order) != draft.participant_count:
            raise InvalidArgumentError(
                f"Draft order has {len(draft_order)} entries, expected {draft.participant_count}"
            )
        return draft_order[self.get_current_picker_index(draft)]

    def describe(self, draft: Draft) -> DraftProgressDTO:
        is_complete = self.is_draft_complete(draft)
        picker = None if is_complete else self.get_current_picker_index(draft)
        return DraftProgressDTO.from_domain(
            draft,
            remaining_picks=self.get_remaining_picks(draft),
            is_complete=is_complete,
            current_picker_index=picker,
        )
