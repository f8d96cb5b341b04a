"""
Game Lifecycle - Domain Service

Transition rules for a game's high-level phase:
CREATING -> DRAFTING -> ACTIVE -> FINISHED, with CANCELLED reachable from
CREATING and DRAFTING. The caller applies ``new_phase`` to its own entity.
"""

from ..entities.game_phase import GamePhase
from ..entities.results import TransitionResult


class GameLifecycle:
    """Domain service for game phase transitions"""

    MIN_PARTICIPANTS_TO_START = 2

    def can_start_draft(self, phase: GamePhase, total_participants: int) -> TransitionResult:
        """Check whether the draft may start.

        Args:
            phase: Current game phase
            total_participants: Participant count including the creator
        """
        if phase != GamePhase.CREATING:
            return TransitionResult.failure(
                f"Game must be in CREATING phase to start the draft (current: {phase.name})"
            )
        if total_participants < self.MIN_PARTICIPANTS_TO_START:
            return TransitionResult.failure(
                f"Game needs at least {self.MIN_PARTICIPANTS_TO_START} participants to start the draft"
            )
        return TransitionResult.success(GamePhase.DRAFTING)

    def can_complete_draft(self, phase: GamePhase) -> TransitionResult:
        if phase != GamePhase.DRAFTING:
            return TransitionResult.failure(
                f"Can only complete the draft from DRAFTING phase (current: {phase.name})"
            )
        return TransitionResult.success(GamePhase.ACTIVE)

    def can_finish_game(self, phase: GamePhase) -> TransitionResult:
        if phase != GamePhase.ACTIVE:
            return TransitionResult.failure(
                f"Can only finish a game from ACTIVE phase (current: {phase.name})"
            )
        return TransitionResult.success(GamePhase.FINISHED)

    def can_cancel_game(self, phase: GamePhase) -> TransitionResult:
        if phase == GamePhase.FINISHED:
            return TransitionResult.failure("Cannot cancel a game that is already finished")
        if phase == GamePhase.CANCELLED:
            return TransitionResult.failure("Game is already cancelled")
        if not phase.can_transition_to(GamePhase.CANCELLED):
            return TransitionResult.failure(f"Cannot cancel a game in {phase.name} phase")
        return TransitionResult.success(GamePhase.CANCELLED)
